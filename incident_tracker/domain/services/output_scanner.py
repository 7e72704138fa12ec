"""
Output Scanner Service

Architectural Intent:
- Tool output is the only outcome signal of the ticketing and escalation
  CLIs; this service reproduces the matching rules in one place
- Ticket ids match INC<digits>; "error" and "success" are case-insensitive
  substring matches

Design Decisions:
- The last matching line wins for both the ticket id and the error line
- Close output is scanned separately: it stops at the first success line and
  does not treat "error" lines specially
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from incident_tracker.domain.value_objects.ticket_id import find_ticket_id


def is_error_line(line: str) -> bool:
    return "error" in line.lower()


def is_success_line(line: str) -> bool:
    return "success" in line.lower()


@dataclass(frozen=True)
class OutputScan:
    ticket_id: Optional[str] = None
    error_line: Optional[str] = None
    success: bool = False

    @property
    def has_error(self) -> bool:
        return self.error_line is not None


@dataclass(frozen=True)
class CloseScan:
    success: bool = False
    last_line: str = ""


def scan_output(lines: Iterable[str]) -> OutputScan:
    ticket_id = None
    error_line = None
    success = False

    for line in lines:
        found = find_ticket_id(line)
        if found:
            ticket_id = found
        if is_success_line(line):
            success = True
        if is_error_line(line):
            error_line = line

    return OutputScan(ticket_id=ticket_id, error_line=error_line, success=success)


def scan_close_output(lines: Iterable[str]) -> CloseScan:
    last_line = ""
    for line in lines:
        if is_success_line(line):
            return CloseScan(success=True, last_line=last_line)
        last_line = line
    return CloseScan(success=False, last_line=last_line)
