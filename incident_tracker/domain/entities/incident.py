"""
Incident Module

Architectural Intent:
- Free-form, ordered field bag forwarded verbatim to the ticketing tool
- No fixed schema: callers may populate any ServiceNow field
- Seeded from per-tracker defaults, then overlaid with event fields

Design Decisions:
- Keys are lower-cased on store; `env` and `debug` are control keys and are
  never forwarded
- `details` is a convenience input; it is turned into short/long
  descriptions and never forwarded itself
"""

from __future__ import annotations
from typing import Any, Mapping, Optional

STRIPPED_KEYS = frozenset({"env", "debug"})

# S1 -> S5 (S4/S5 are non business impacting)
DEFAULT_IMPACT_SEVERITY = "S5"
# 1 = New - Open
DEFAULT_INCIDENT_STATE = "1"
# 3 = Medium
DEFAULT_PRIORITY = "3"


def incident_defaults(assignment_group: str) -> dict[str, Optional[str]]:
    return {
        "assignment_group": assignment_group,
        "impact_severity": DEFAULT_IMPACT_SEVERITY,
        "incident_state": DEFAULT_INCIDENT_STATE,
        "priority": DEFAULT_PRIORITY,
        "short_description": None,
        "u_long_description": None,
    }


def normalize_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Lower-case keys and drop control keys."""
    normalized = {}
    for key, value in fields.items():
        name = key.lower()
        if name in STRIPPED_KEYS:
            continue
        normalized[name] = value
    return normalized


def has_descriptions(fields: Mapping[str, Any]) -> bool:
    return bool(fields.get("short_description")) and bool(
        fields.get("u_long_description")
    )


def build_incident_fields(
    defaults: Mapping[str, Any], event_fields: Mapping[str, Any]
) -> dict[str, Any]:
    """Build the field map for one event.

    When short_description and u_long_description are not both supplied,
    they are derived from `details`: the first line becomes the short
    description and the full text the long description.
    """
    fields = dict(defaults)
    fields.update(normalize_fields(event_fields))

    details = fields.pop("details", None)
    if not has_descriptions(fields):
        if details is None:
            fields["short_description"] = None
        else:
            fields["short_description"] = str(details).split("\n")[0]
        fields["u_long_description"] = details

    return fields
