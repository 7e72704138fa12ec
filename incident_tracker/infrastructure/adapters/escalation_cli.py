"""
Escalation CLI Adapter

Architectural Intent:
- Builds command lines for the escalation-tracking CLI, which owns the
  database mapping (resource, caller namespace) to an open ticket
- Invocation shapes:
    <tool> -check -node <resource> -autoname <ns> -esctype <type> -env <env>
    <tool> -insert -node <resource> -autoname <ns> -issueid <ticket>
           -esctype <type> -env <env>
"""

import logging

from incident_tracker.domain.ports.escalation_port import EscalationPort
from incident_tracker.domain.ports.process_runner_port import (
    CommandOutput,
    ProcessRunnerPort,
)
from incident_tracker.domain.value_objects.environment import Environment
from incident_tracker.infrastructure.logging import debug

logger = logging.getLogger(__name__)

DEFAULT_ESCALATION_TOOL = "escalation.pl"
DEFAULT_ESCALATION_TYPE = "SERVICENOW"


class EscalationCLI(EscalationPort):
    """Adapter for the escalation database command-line tool."""

    def __init__(
        self,
        runner: ProcessRunnerPort,
        tool_path: str = DEFAULT_ESCALATION_TOOL,
        escalation_type: str = DEFAULT_ESCALATION_TYPE,
    ) -> None:
        self._runner = runner
        self._tool_path = tool_path
        self._escalation_type = escalation_type

    def check(self, env: Environment, resource: str, namespace: str) -> CommandOutput:
        return self._run(
            [
                "-check",
                "-node", resource,
                "-autoname", namespace,
                "-esctype", self._escalation_type,
                "-env", str(env),
            ]
        )

    def insert(
        self, env: Environment, resource: str, namespace: str, ticket_id: str
    ) -> CommandOutput:
        return self._run(
            [
                "-insert",
                "-node", resource,
                "-autoname", namespace,
                "-issueid", ticket_id,
                "-esctype", self._escalation_type,
                "-env", str(env),
            ]
        )

    def _run(self, argv: list[str]) -> CommandOutput:
        debug(logger, f"Running: {self._tool_path} {' '.join(argv)}")
        output = self._runner.run(self._tool_path, argv)
        for line in output.lines:
            debug(logger, line)
        return output
