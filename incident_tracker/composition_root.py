"""
Composition Root

Architectural Intent:
- Single place where configuration, process runner, CLI adapters and the
  tracker are wired together
- Scripts that do not need file/env configuration can construct
  IncidentTracker directly

Design Decisions:
- Tools run locally through SubprocessRunner unless a remote tool host is
  configured, in which case FabricRunner runs them over SSH
"""

import logging
from typing import Optional

from incident_tracker.application.incident_tracker import IncidentTracker
from incident_tracker.domain.ports.process_runner_port import ProcessRunnerPort
from incident_tracker.infrastructure.adapters.escalation_cli import EscalationCLI
from incident_tracker.infrastructure.adapters.fabric_runner import FabricRunner
from incident_tracker.infrastructure.adapters.servicenow_cli import ServiceNowCLI
from incident_tracker.infrastructure.adapters.subprocess_runner import SubprocessRunner
from incident_tracker.infrastructure.config import (
    RemoteConfig,
    TrackerConfig,
    load_config,
)
from incident_tracker.infrastructure.logging import configure_logging


def create_runner(remote: RemoteConfig) -> ProcessRunnerPort:
    if remote.host:
        return FabricRunner(
            host=remote.host,
            user=remote.user,
            port=remote.port,
            connect_timeout=remote.connect_timeout,
        )
    return SubprocessRunner()


def create_tracker(
    config: Optional[TrackerConfig] = None,
    runner: Optional[ProcessRunnerPort] = None,
    logger: Optional[logging.Logger] = None,
) -> IncidentTracker:
    """Create a tracker from configuration.

    Loads incident_tracker.json and INCIDENT_TRACKER_* variables when no
    config is given.
    """
    config = config or load_config()

    level = logging.getLevelName(config.log_level)
    if isinstance(level, int) and level != logging.WARNING:
        configure_logging(level=level, json_format=config.log_json)

    runner = runner or create_runner(config.remote)
    ticketing = ServiceNowCLI(runner, tool_path=config.tools.ticketing_path)
    escalation = EscalationCLI(
        runner,
        tool_path=config.tools.escalation_path,
        escalation_type=config.tools.escalation_type,
    )

    settings = config.tracker
    return IncidentTracker(
        assignment_group=settings.assignment_group,
        environment=settings.environment,
        debug_enabled=settings.debug,
        caller_namespace=settings.caller_namespace or None,
        ticketing=ticketing,
        escalation=escalation,
        logger=logger,
    )
