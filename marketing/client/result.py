"""
Tagged results returned by every client call.

    result = api.add_comment(ctx, "budget", "Looks good")
    if result.ok:
        use(result.data)
    else:
        show(result.kind, result.message)
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .errors import ErrorKind


@dataclass(frozen=True)
class Ok:
    data: Any = None
    message: str = ""
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    data: Optional[Any] = None
    ok: bool = field(default=False, init=False)


Result = Union[Ok, Err]
