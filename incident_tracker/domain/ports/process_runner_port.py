"""
Process Runner Port

Architectural Intent:
- Port interface for running an external executable and reading its output
- Lets tests substitute a scripted fake instead of real processes
- Implemented by SubprocessRunner (local) and FabricRunner (remote host)

Design Decisions:
- Blocking: the call returns once the process has exited
- stdout and stderr are merged into one stream of lines
- Failure to start the process raises InvocationError; a non-zero exit code
  is not an error at this layer
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class CommandOutput:
    exit_code: int
    lines: tuple[str, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class ProcessRunnerPort(ABC):
    """
    Port interface for running external command-line tools.
    """

    @abstractmethod
    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        """
        Runs command with args to completion and returns its merged output.
        Raises InvocationError if the command cannot be started.
        """
        pass
