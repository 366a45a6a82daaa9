"""
Display formatting for template values.

Payload values are passed through verbatim, so we only need to make them
read naturally in a Slack message: ``42.0`` shows as ``42``, ``True`` as
``true`` and nested structures collapse to a short label.
"""

import json
from typing import Any

# Keys we look for (in priority order) when extracting a display name from a dict.
DISPLAY_KEYS = ("name", "title", "label", "id")


def format_value(val: Any, max_len: int = 300) -> str:
    if val is None:
        return ""

    if isinstance(val, bool):
        return "true" if val else "false"

    if isinstance(val, float) and val.is_integer():
        return str(int(val))

    if not isinstance(val, (dict, list)):
        return str(val)

    if isinstance(val, list):
        joined = ", ".join(format_value(v, 80) for v in val)
        return f"{joined[:max_len]}..." if len(joined) > max_len else joined

    for key in DISPLAY_KEYS:
        if key in val and val[key] is not None and not isinstance(val[key], (dict, list)):
            return format_value(val[key])

    try:
        dumped = json.dumps(val, default=str)
        return f"{dumped[:max_len]}..." if len(dumped) > max_len else dumped
    except (TypeError, ValueError):
        return "[complex value]"


def value_or(val: Any, default: str) -> str:
    """Format *val*, falling back to *default* when it is missing or falsy."""
    if val is None or (not isinstance(val, (dict, list)) and not val):
        return default
    return format_value(val)


def verbatim_or(val: Any, default: str) -> str:
    """Format *val* as given; only a missing or empty value becomes *default*."""
    if val is None or val == "":
        return default
    return format_value(val)
