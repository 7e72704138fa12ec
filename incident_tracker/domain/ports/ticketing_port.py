"""
Ticketing Port

Architectural Intent:
- Port interface for the ticketing tool (ServiceNow CLI)
- Returns raw tool output; the tracker interprets it
- Implemented by ServiceNowCLI
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from incident_tracker.domain.ports.process_runner_port import CommandOutput
from incident_tracker.domain.value_objects.environment import Environment


class TicketingPort(ABC):
    """
    Port interface for creating, updating and closing incidents.
    """

    @abstractmethod
    def create_incident(
        self, env: Environment, fields: Mapping[str, Any]
    ) -> CommandOutput:
        pass

    @abstractmethod
    def update_incident(
        self, env: Environment, ticket_id: str, work_notes: Optional[str]
    ) -> CommandOutput:
        pass

    @abstractmethod
    def close_incident(
        self, env: Environment, ticket_id: str, resolution_fields: Mapping[str, Any]
    ) -> CommandOutput:
        pass
