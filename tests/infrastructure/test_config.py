"""Tests for configuration module."""

import json
import os
import pytest
from unittest.mock import patch

from incident_tracker.infrastructure.config import (
    RemoteConfig,
    ToolsConfig,
    TrackerConfig,
    TrackerSettings,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_env():
    env = {k: v for k, v in os.environ.items() if not k.startswith("INCIDENT_TRACKER_")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestDefaultConfig:
    def test_defaults(self):
        config = load_config(path="/nonexistent/incident_tracker.json")
        assert config.log_level == "WARNING"
        assert config.log_json is False
        assert config.tracker.assignment_group == ""
        assert config.tracker.environment == "prod"
        assert config.tracker.debug is False
        assert config.tools.ticketing_path == "service-now.pl"
        assert config.tools.escalation_path == "escalation.pl"
        assert config.tools.escalation_type == "SERVICENOW"
        assert config.remote.host == ""
        assert config.remote.port == 22

    def test_all_sections_present(self):
        config = load_config(path="/nonexistent/incident_tracker.json")
        assert isinstance(config, TrackerConfig)
        assert isinstance(config.tracker, TrackerSettings)
        assert isinstance(config.tools, ToolsConfig)
        assert isinstance(config.remote, RemoteConfig)


class TestFileConfig:
    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "incident_tracker.json"
        config_file.write_text(json.dumps({
            "log_level": "debug",
            "tracker": {
                "assignment_group": "OPS_QUEUE",
                "environment": "qa",
                "caller_namespace": "disk_monitor",
                "debug": True,
            },
            "tools": {"ticketing_path": "/opt/bin/service-now.pl"},
            "remote": {"host": "toolhost", "port": 2222},
        }))

        config = load_config(path=str(config_file))
        assert config.log_level == "DEBUG"
        assert config.tracker.assignment_group == "OPS_QUEUE"
        assert config.tracker.environment == "qa"
        assert config.tracker.caller_namespace == "disk_monitor"
        assert config.tracker.debug is True
        assert config.tools.ticketing_path == "/opt/bin/service-now.pl"
        assert config.tools.escalation_path == "escalation.pl"  # default preserved
        assert config.remote.host == "toolhost"
        assert config.remote.port == 2222

    def test_invalid_json_returns_defaults(self, tmp_path):
        config_file = tmp_path / "incident_tracker.json"
        config_file.write_text("not valid json{{{")

        config = load_config(path=str(config_file))
        assert config.tracker.environment == "prod"

    def test_non_object_returns_defaults(self, tmp_path):
        config_file = tmp_path / "incident_tracker.json"
        config_file.write_text("[1, 2]")

        config = load_config(path=str(config_file))
        assert config.tools.ticketing_path == "service-now.pl"

    def test_unknown_keys_ignored(self, tmp_path):
        config_file = tmp_path / "incident_tracker.json"
        config_file.write_text(json.dumps({
            "remote": {"port": 2200, "unknown_key": "ignored"},
        }))

        config = load_config(path=str(config_file))
        assert config.remote.port == 2200

    def test_frozen(self):
        config = load_config(path="/nonexistent/incident_tracker.json")
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"


class TestEnvOverride:
    def test_section_values(self):
        with patch.dict(os.environ, {
            "INCIDENT_TRACKER_TRACKER_ASSIGNMENT_GROUP": "ENV_QUEUE",
            "INCIDENT_TRACKER_TRACKER_DEBUG": "yes",
            "INCIDENT_TRACKER_REMOTE_PORT": "2022",
            "INCIDENT_TRACKER_TOOLS_ESCALATION_PATH": "/opt/bin/escalation.pl",
        }):
            config = load_config(path="/nonexistent/incident_tracker.json")
        assert config.tracker.assignment_group == "ENV_QUEUE"
        assert config.tracker.debug is True
        assert config.remote.port == 2022
        assert config.tools.escalation_path == "/opt/bin/escalation.pl"

    def test_top_level_values(self):
        with patch.dict(os.environ, {
            "INCIDENT_TRACKER_LOG_LEVEL": "info",
            "INCIDENT_TRACKER_LOG_JSON": "true",
        }):
            config = load_config(path="/nonexistent/incident_tracker.json")
        assert config.log_level == "INFO"
        assert config.log_json is True

    def test_env_beats_file(self, tmp_path):
        config_file = tmp_path / "incident_tracker.json"
        config_file.write_text(json.dumps({"tracker": {"environment": "dev"}}))
        with patch.dict(os.environ, {"INCIDENT_TRACKER_TRACKER_ENVIRONMENT": "qa"}):
            config = load_config(path=str(config_file))
        assert config.tracker.environment == "qa"

    def test_custom_prefix(self):
        with patch.dict(os.environ, {"SNOW_TRACKER_ENVIRONMENT": "dev"}):
            config = load_config(
                path="/nonexistent/incident_tracker.json", env_prefix="SNOW"
            )
        assert config.tracker.environment == "dev"
