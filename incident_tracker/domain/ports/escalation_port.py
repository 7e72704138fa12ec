"""
Escalation Port

Architectural Intent:
- Port interface for the escalation database, which maps
  (resource, caller namespace) to the open ticket
- Implemented by EscalationCLI
"""

from abc import ABC, abstractmethod

from incident_tracker.domain.ports.process_runner_port import CommandOutput
from incident_tracker.domain.value_objects.environment import Environment


class EscalationPort(ABC):
    """
    Port interface for looking up and recording tracked tickets.
    """

    @abstractmethod
    def check(self, env: Environment, resource: str, namespace: str) -> CommandOutput:
        """
        Looks up the open ticket for resource and namespace.
        """
        pass

    @abstractmethod
    def insert(
        self, env: Environment, resource: str, namespace: str, ticket_id: str
    ) -> CommandOutput:
        """
        Records ticket_id as the open ticket for resource and namespace.
        """
        pass
