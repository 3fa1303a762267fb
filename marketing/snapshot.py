"""
Write-time snapshot of the acting user's organizational context.

`build` runs once per write; the resulting dict is stored on the record
and read back verbatim.  Reads never join against the live profile.
"""
from dataclasses import asdict, dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class UserContextSnapshot:
    full_name: str = ""
    department: str = ""
    role: str = ""
    company_name: str = ""
    years_at_company: int = 0
    years_in_role: int = 0
    years_in_dept: int = 0

    _WIRE_NAMES = {
        "full_name": "fullName",
        "department": "department",
        "role": "role",
        "company_name": "companyName",
        "years_at_company": "yearsAtCompany",
        "years_in_role": "yearsInRole",
        "years_in_dept": "yearsInDept",
    }

    def as_dict(self) -> dict:
        """camelCase dict, the shape stored in `user_context` and sent on the wire."""
        return {self._WIRE_NAMES[k]: v for k, v in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "UserContextSnapshot":
        data = data or {}
        values = {}
        for f in fields(cls):
            raw = data.get(cls._WIRE_NAMES[f.name])
            if f.type is int:
                values[f.name] = _as_int(raw)
            else:
                values[f.name] = _as_str(raw)
        return cls(**values)


def _as_str(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_int(value) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def build(actor, profile=None) -> UserContextSnapshot:
    """
    Derive the snapshot from the acting user and their profile.

    Missing profile fields become "" or 0, never None.  The name falls back
    from the profile's full name to the auth user's first/last name, then
    to the username.
    """
    full_name = ""
    if profile is not None:
        full_name = _as_str(getattr(profile, "full_name", ""))
    if not full_name:
        full_name = _as_str(actor.get_full_name()) or _as_str(actor.get_username())

    if profile is None:
        return UserContextSnapshot(full_name=full_name)

    return UserContextSnapshot(
        full_name=full_name,
        department=_as_str(profile.department_name),
        role=_as_str(profile.company_role),
        company_name=_as_str(profile.company_name),
        years_at_company=_as_int(profile.years_at_company),
        years_in_role=_as_int(profile.years_in_role),
        years_in_dept=_as_int(profile.years_in_dept),
    )
