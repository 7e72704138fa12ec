"""
ServiceNow CLI Adapter

Architectural Intent:
- Builds command lines for the ServiceNow ticketing CLI
- Invocation shapes:
    <tool> <env> createIncident -- k1=v1 k2=v2 ...
    <tool> <env> updateIncident <ticket> -- work_notes=<text>
    <tool> <env> closeIncident <ticket> -- k1=v1 ...
- Output interpretation is left to the caller

Design Decisions:
- Arguments are passed as an argv list, so values need no shell quoting
- Unset values are sent as empty strings
"""

import logging
from typing import Any, Mapping, Optional

from incident_tracker.domain.ports.process_runner_port import (
    CommandOutput,
    ProcessRunnerPort,
)
from incident_tracker.domain.ports.ticketing_port import TicketingPort
from incident_tracker.domain.value_objects.environment import Environment
from incident_tracker.infrastructure.logging import debug

logger = logging.getLogger(__name__)

DEFAULT_SERVICENOW_TOOL = "service-now.pl"


def field_args(fields: Mapping[str, Any]) -> list[str]:
    return [f"{key}={'' if value is None else value}" for key, value in fields.items()]


class ServiceNowCLI(TicketingPort):
    """Adapter for the ServiceNow ticketing command-line tool."""

    def __init__(
        self,
        runner: ProcessRunnerPort,
        tool_path: str = DEFAULT_SERVICENOW_TOOL,
    ) -> None:
        self._runner = runner
        self._tool_path = tool_path

    def create_incident(
        self, env: Environment, fields: Mapping[str, Any]
    ) -> CommandOutput:
        return self._run(env, "createIncident", None, field_args(fields))

    def update_incident(
        self, env: Environment, ticket_id: str, work_notes: Optional[str]
    ) -> CommandOutput:
        return self._run(
            env, "updateIncident", ticket_id, field_args({"work_notes": work_notes})
        )

    def close_incident(
        self, env: Environment, ticket_id: str, resolution_fields: Mapping[str, Any]
    ) -> CommandOutput:
        return self._run(
            env, "closeIncident", ticket_id, field_args(resolution_fields)
        )

    def _run(
        self,
        env: Environment,
        subcommand: str,
        ticket_id: Optional[str],
        args: list[str],
    ) -> CommandOutput:
        argv = [str(env), subcommand]
        if ticket_id is not None:
            argv.append(ticket_id)
        argv.append("--")
        argv.extend(args)

        debug(logger, f"Running: {self._tool_path} {' '.join(argv)}")
        output = self._runner.run(self._tool_path, argv)
        for line in output.lines:
            debug(logger, line)
        return output
