"""
Subprocess Runner

Architectural Intent:
- Infrastructure adapter implementing ProcessRunnerPort on the local host
- Runs the tool without a shell and reads the merged stdout/stderr stream
  line by line until the process exits

Design Decisions:
- No timeout: a hung tool blocks the caller, as scripts built on this
  library expect
- Undecodable output bytes are replaced, never raised
"""

import logging
import subprocess
from typing import Sequence

from incident_tracker.domain.errors import InvocationError
from incident_tracker.domain.ports.process_runner_port import (
    CommandOutput,
    ProcessRunnerPort,
)

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunnerPort):
    """Adapter implementing ProcessRunnerPort via subprocess."""

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        try:
            proc = subprocess.Popen(
                [command, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error("Could not start %s: %s", command, e)
            raise InvocationError(command, str(e)) from e

        with proc:
            lines = tuple(line.rstrip("\n") for line in proc.stdout)
            exit_code = proc.wait()

        if exit_code != 0:
            logger.debug("%s exited with status %d", command, exit_code)
        return CommandOutput(exit_code=exit_code, lines=lines)
