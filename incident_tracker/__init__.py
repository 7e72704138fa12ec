"""
Incident Tracker

Architectural Intent:
- Library for operational scripts: open, update and close ServiceNow
  incidents, deduplicating repeated alerts per monitored resource
- Public entry points are re-exported here

Example:
    tracker = create_tracker(load_config("incident_tracker.json"))
    result = tracker.track_incident({
        "resource": "host-7",
        "details": "Disk full\\nDisk /var is at 98% on host-7",
    })
    if result.is_found:
        print(f"Success: {result.message}")
"""

from incident_tracker.application.incident_tracker import IncidentTracker
from incident_tracker.composition_root import create_tracker
from incident_tracker.domain.errors import (
    ConfigurationError,
    IncidentTrackerError,
    InvocationError,
    MissingParameterError,
)
from incident_tracker.domain.value_objects.environment import Environment
from incident_tracker.domain.value_objects.track_result import (
    FailureCause,
    TrackResult,
    TrackStatus,
)
from incident_tracker.infrastructure.config import load_config

__all__ = [
    "IncidentTracker",
    "create_tracker",
    "load_config",
    "ConfigurationError",
    "IncidentTrackerError",
    "InvocationError",
    "MissingParameterError",
    "Environment",
    "FailureCause",
    "TrackResult",
    "TrackStatus",
]
