"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from incident_tracker.domain.ports.process_runner_port import (
    CommandOutput,
    ProcessRunnerPort,
)
from incident_tracker.domain.ports.ticketing_port import TicketingPort
from incident_tracker.domain.ports.escalation_port import EscalationPort

__all__ = [
    "CommandOutput",
    "ProcessRunnerPort",
    "TicketingPort",
    "EscalationPort",
]
