# app/domain/parsing.py
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off", ""}


def to_int(x: Any) -> int | None:
    if x is None or x == "":
        return None
    try:
        return int(float(x))
    except (TypeError, ValueError):
        return None


def to_float(x: Any) -> float | None:
    if x is None or x == "":
        return None
    try:
        return float(x)
    except (TypeError, ValueError):
        return None


def to_non_negative_float(x: Any) -> float:
    """
    Amounts (income, rent, averages) clamped at zero.
    None / unparseable / NaN => 0.0, never raises.
    """
    v = to_float(x)
    if v is None or math.isnan(v):
        return 0.0
    return max(v, 0.0)


def enum_str(x: Any) -> str | None:
    """
    Enum members and plain strings both come through the domain
    (SmokingStatus.vaper vs "Vaper"); compare on the string value.
    """
    if x is None:
        return None
    return str(getattr(x, "value", x))


def to_bool(x: Any, default: bool = False) -> bool:
    if x is None:
        return default
    if isinstance(x, bool):
        return x
    if isinstance(x, (int, float)):
        return x != 0
    s = str(x).strip().lower()
    if s in _TRUTHY:
        return True
    if s in _FALSY:
        return False
    return default


def to_datetime(x: Any) -> datetime | None:
    """
    Coerce a date-ish value into a naive UTC datetime.

    Accepts datetime, date, or ISO-8601 strings (a trailing 'Z' is fine).
    Anything unparseable => None.
    """
    if x is None or x == "":
        return None
    if isinstance(x, datetime):
        dt = x
    elif isinstance(x, date):
        return datetime(x.year, x.month, x.day)
    elif isinstance(x, str):
        s = x.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def get_first(payload: dict[str, Any], *keys: str) -> Any:
    """Return first non-empty key from payload."""
    for k in keys:
        v = payload.get(k)
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None


def get_nested(payload: dict[str, Any], path: str) -> Any:
    """Tiny dot-path getter: 'address.city' or 'ratings_summary.total_ratings'."""
    cur: Any = payload
    for part in path.split("."):
        if not isinstance(cur, dict):
            return None
        cur = cur.get(part)
        if cur is None:
            return None
    return cur
