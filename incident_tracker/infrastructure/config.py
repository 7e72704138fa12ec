"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to tracker, tool and remote-host settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Values are not validated here; IncidentTracker validates on construction
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

from incident_tracker.infrastructure.adapters.escalation_cli import (
    DEFAULT_ESCALATION_TOOL,
    DEFAULT_ESCALATION_TYPE,
)
from incident_tracker.infrastructure.adapters.servicenow_cli import (
    DEFAULT_SERVICENOW_TOOL,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "incident_tracker.json"
DEFAULT_ENV_PREFIX = "INCIDENT_TRACKER"


@dataclass(frozen=True)
class TrackerSettings:
    """Tracker construction settings."""
    assignment_group: str = ""
    environment: str = "prod"
    caller_namespace: str = ""  # empty: program name
    debug: bool = False


@dataclass(frozen=True)
class ToolsConfig:
    """Paths to the external command-line tools."""
    ticketing_path: str = DEFAULT_SERVICENOW_TOOL
    escalation_path: str = DEFAULT_ESCALATION_TOOL
    escalation_type: str = DEFAULT_ESCALATION_TYPE


@dataclass(frozen=True)
class RemoteConfig:
    """Remote tool host; tools run locally when host is empty."""
    host: str = ""
    user: str = ""
    port: int = 22
    connect_timeout: int = 30


@dataclass(frozen=True)
class TrackerConfig:
    """Root configuration for the incident tracker."""
    tracker: TrackerSettings = field(default_factory=TrackerSettings)
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    log_level: str = "WARNING"
    log_json: bool = False


_SECTIONS = {"tracker", "tools", "remote"}


def _env_override(data: dict, prefix: str = DEFAULT_ENV_PREFIX) -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern INCIDENT_TRACKER_SECTION_KEY.
    For example: INCIDENT_TRACKER_TRACKER_ENVIRONMENT=qa,
    INCIDENT_TRACKER_REMOTE_HOST=toolhost.example.com. Keys outside a known
    section are top-level: INCIDENT_TRACKER_LOG_LEVEL=DEBUG.
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        parts = name.split("_", 1)
        if len(parts) == 2 and parts[0] in _SECTIONS:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
        else:
            data[name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Invalid config file %s: expected a JSON object", path)
        return {}
    return data


def _convert(type_name: str, value):
    # Annotations are strings under `from __future__ import annotations`
    if not isinstance(value, str):
        return value
    if type_name == "int":
        return int(value)
    if type_name == "bool":
        return value.lower() in ("true", "1", "yes")
    return value


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    filtered = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            filtered[f.name] = _convert(f.type, data[f.name])
    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> TrackerConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (INCIDENT_TRACKER_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to incident_tracker.json
            in CWD.
        env_prefix: Environment variable prefix.
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return TrackerConfig(
        tracker=_build_sub_config(TrackerSettings, data.get("tracker", {})),
        tools=_build_sub_config(ToolsConfig, data.get("tools", {})),
        remote=_build_sub_config(RemoteConfig, data.get("remote", {})),
        log_level=str(data.get("log_level", "WARNING")).upper(),
        log_json=_convert("bool", data.get("log_json", False)),
    )
