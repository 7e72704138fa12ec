"""
Fabric Runner

Architectural Intent:
- Infrastructure adapter implementing ProcessRunnerPort via Fabric/SSH
- For hosts where the ticketing and escalation tools are only installed on a
  separate tool host

Security:
- Arguments are shell-quoted before being sent to the remote shell
- SSH connections use connect_timeout, allow_agent, look_for_keys
"""

import logging
import shlex
from typing import Sequence

from fabric import Connection

from incident_tracker.domain.errors import InvocationError
from incident_tracker.domain.ports.process_runner_port import (
    CommandOutput,
    ProcessRunnerPort,
)

logger = logging.getLogger(__name__)


class FabricRunner(ProcessRunnerPort):
    """Adapter implementing ProcessRunnerPort on a remote host."""

    def __init__(
        self,
        host: str,
        user: str = "",
        port: int = 22,
        connect_timeout: int = 30,
    ) -> None:
        if not host:
            raise ValueError("FabricRunner host cannot be empty")
        self.host = host
        self.user = user
        self.port = port
        self.connect_timeout = connect_timeout

    def _get_connection(self) -> Connection:
        return Connection(
            host=self.host,
            user=self.user or None,
            port=self.port,
            connect_timeout=self.connect_timeout,
            connect_kwargs={
                "allow_agent": True,
                "look_for_keys": True,
            },
        )

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        remote_cmd = shlex.join([command, *args])
        try:
            with self._get_connection() as conn:
                # pty merges stderr into stdout
                result = conn.run(remote_cmd, hide=True, warn=True, pty=True)
        except Exception as e:
            logger.error("Could not run %s on %s: %s", command, self.host, e)
            raise InvocationError(command, str(e)) from e

        lines = tuple(line.rstrip("\r") for line in result.stdout.splitlines())
        return CommandOutput(exit_code=result.exited, lines=lines)
