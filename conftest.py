"""Global test configuration.

Provides a scripted stand-in for the ticketing and escalation tools so that
tracker tests never start real processes.
"""

import logging

import pytest

from incident_tracker.domain.ports.process_runner_port import (
    CommandOutput,
    ProcessRunnerPort,
)
from incident_tracker.application.incident_tracker import IncidentTracker
from incident_tracker.infrastructure.adapters.escalation_cli import EscalationCLI
from incident_tracker.infrastructure.adapters.servicenow_cli import ServiceNowCLI
from incident_tracker.infrastructure.logging import LOGGER_NAME


class FakeRunner(ProcessRunnerPort):
    """Answers by operation token (createIncident, -check, ...).

    A response is a list of output lines, or an exception to raise.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def run(self, command, args):
        self.calls.append((command, list(args)))
        for token in args:
            if token in self.responses:
                response = self.responses[token]
                if isinstance(response, Exception):
                    raise response
                return CommandOutput(exit_code=0, lines=tuple(response))
        return CommandOutput(exit_code=0, lines=())

    def operations(self):
        return [
            next((t for t in args if t in OPERATIONS), None)
            for _, args in self.calls
        ]

    def args_for(self, operation):
        for _, args in self.calls:
            if operation in args:
                return args
        return None


OPERATIONS = (
    "createIncident",
    "updateIncident",
    "closeIncident",
    "-check",
    "-insert",
)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def tracker(fake_runner):
    return IncidentTracker(
        assignment_group="OPS_QUEUE",
        caller_namespace="disk_monitor",
        ticketing=ServiceNowCLI(fake_runner),
        escalation=EscalationCLI(fake_runner),
    )


@pytest.fixture(autouse=True)
def reset_tracker_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield
    logger.setLevel(logging.WARNING)
    logger.handlers.clear()
