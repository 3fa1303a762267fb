"""
Merging of multi-part profile edits.

The profile edit screen is split into parts (core info, organization,
tenure).  Each part submits a partial patch keyed by its own name; the
patches are folded into a pending map by `reduce_part` and applied on top
of the stored profile by `merge_parts`.  Both functions are pure: they
never touch the database and never mutate their inputs.
"""
from typing import Mapping

from rest_framework import serializers

# part name -> {wire field: model field}
PROFILE_PARTS: dict[str, dict[str, str]] = {
    "coreInfo": {
        "fullName": "full_name",
        "jobTitle": "job_title",
        "bio": "bio",
    },
    "organization": {
        "companyName": "company_name",
        "companyRole": "company_role",
        "departmentName": "department_name",
    },
    "tenure": {
        "yearsAtCompany": "years_at_company",
        "yearsInRole": "years_in_role",
        "yearsInDept": "years_in_dept",
    },
}


def reduce_part(pending: Mapping[str, dict], part: str, patch: Mapping) -> dict[str, dict]:
    """
    Fold one part's patch into the pending map.

    Repeated patches for the same part are layered, so the most recent
    value of each field wins.  Unknown parts or fields are rejected.
    """
    fields = PROFILE_PARTS.get(part)
    if fields is None:
        raise serializers.ValidationError({"parts": [f"Unknown profile part '{part}'."]})
    unknown = sorted(set(patch) - set(fields))
    if unknown:
        raise serializers.ValidationError({part: [f"Unknown field(s): {', '.join(unknown)}."]})

    out = {name: dict(values) for name, values in pending.items()}
    out[part] = {**out.get(part, {}), **patch}
    return out


def merge_parts(base: Mapping[str, object], pending: Mapping[str, dict]) -> dict[str, object]:
    """
    Apply the pending part patches to `base` (model field -> value).

    Returns a new dict of model field values; parts not present in
    `pending` keep their values from `base`.
    """
    merged = dict(base)
    for part, patch in pending.items():
        fields = PROFILE_PARTS[part]
        for wire_name, value in patch.items():
            merged[fields[wire_name]] = value
    return merged


def collect_parts(parts: Mapping[str, Mapping]) -> dict[str, dict]:
    """Reduce a `{part: patch}` payload into a pending map."""
    pending: dict[str, dict] = {}
    for part, patch in parts.items():
        if not isinstance(patch, Mapping):
            raise serializers.ValidationError({part: ["Expected an object."]})
        pending = reduce_part(pending, part, patch)
    return pending
