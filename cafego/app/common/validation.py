from __future__ import annotations

import re

from cafego.app.common.errors import fail

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int_id(raw: str, field: str = "id") -> int:
    """Parse a base-10 integer id taken from a URL.

    Only an optional sign and ASCII digits are accepted, so values such as
    " 1", "1\\n", "1_0" or "" are rejected with a 400. So are digit strings
    too long for int() to convert.
    """
    if not _INT_RE.fullmatch(raw or ""):
        fail(400, "validation_error", f"Invalid {field}", {field: raw})
    try:
        return int(raw)
    except ValueError:
        fail(400, "validation_error", f"Invalid {field}", {field: raw[:32] + "..."})


def last_path_segment(path: str) -> str:
    return path.split("/")[-1]
