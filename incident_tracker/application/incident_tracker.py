"""
Incident Tracker Use Case

Architectural Intent:
- Tracks a monitored resource by creating a ServiceNow incident when none is
  open, or updating the work notes of the open one otherwise
- The escalation database, reached through its CLI, maps
  (resource, caller namespace) to the open ticket and deduplicates alerts
- One tracker is constructed per program and reused across many events;
  each event resets the per-event state but keeps the configuration

Design Decisions:
- Input errors raise; external-process outcomes are returned as TrackResult
  so batch callers can inspect a result and continue
- Operations are synchronous and blocking, one tool invocation at a time
"""

import logging
import os
import sys
from typing import Any, Mapping, Optional

from incident_tracker.domain.entities.incident import (
    build_incident_fields,
    has_descriptions,
    incident_defaults,
    normalize_fields,
)
from incident_tracker.domain.errors import (
    ConfigurationError,
    InvocationError,
    MissingParameterError,
)
from incident_tracker.domain.ports.escalation_port import EscalationPort
from incident_tracker.domain.ports.ticketing_port import TicketingPort
from incident_tracker.domain.services.output_scanner import (
    scan_close_output,
    scan_output,
)
from incident_tracker.domain.value_objects.environment import Environment
from incident_tracker.domain.value_objects.track_result import (
    FailureCause,
    TrackResult,
)
from incident_tracker.infrastructure.logging import LOGGER_NAME, debug, enable_debug

DEFAULT_NAMESPACE = "incident_tracker"


def default_namespace() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return DEFAULT_NAMESPACE


class IncidentTracker:
    """Create or update a ServiceNow incident for a monitored resource."""

    def __init__(
        self,
        assignment_group: Optional[str] = None,
        environment: str = "prod",
        debug_enabled: bool = False,
        caller_namespace: Optional[str] = None,
        *,
        ticketing: TicketingPort,
        escalation: EscalationPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not assignment_group:
            raise ConfigurationError("Missing parameter: assignment_group")

        self._environment = Environment.parse(environment)

        # Shared by every tracker in the process
        if debug_enabled:
            enable_debug()

        self._assignment_group = assignment_group
        self._caller_namespace = caller_namespace or default_namespace()
        self._ticketing = ticketing
        self._escalation = escalation
        self._logger = logger or logging.getLogger(LOGGER_NAME)

        self.incident_fields: dict[str, Any] = {}
        self.resolved_ticket_id: Optional[str] = None

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def assignment_group(self) -> str:
        return self._assignment_group

    @property
    def caller_namespace(self) -> str:
        return self._caller_namespace

    @property
    def incident_defaults(self) -> dict[str, Optional[str]]:
        return incident_defaults(self._assignment_group)

    @property
    def resource(self) -> str:
        resource = self.incident_fields.get("resource")
        return "" if resource is None else str(resource)

    def initialize(self, event_fields: Optional[Mapping[str, Any]] = None) -> None:
        """(Re)initialize the per-event state from event_fields."""
        self.incident_fields = build_incident_fields(
            self.incident_defaults, event_fields or {}
        )
        self.resolved_ticket_id = None
        debug(self._logger, self.incident_fields)

    def track_incident(self, event_fields: Mapping[str, Any]) -> TrackResult:
        """Create a ticket for the resource, or update the open one.

        event_fields must hold `resource` plus either `details` or both
        `short_description` and `u_long_description`. Any other field is
        passed through to the ticketing tool unvalidated.
        """
        fields = normalize_fields(event_fields)
        if not fields.get("resource"):
            raise MissingParameterError("Missing parameter: resource")
        if not fields.get("details") and not has_descriptions(fields):
            raise MissingParameterError(
                "Missing parameter(s): details or "
                "short_description and u_long_description"
            )

        self.initialize(event_fields)

        result = self.get_status()
        if result.is_failure:
            return result
        if result.is_found:
            return self.incident_update()
        return self.incident_create()

    def incident_create(self) -> TrackResult:
        fields = {k: v for k, v in self.incident_fields.items() if k != "resource"}
        try:
            output = self._ticketing.create_incident(self._environment, fields)
        except InvocationError as e:
            debug(self._logger, "ERROR: ticket creation failed", str(e))
            return TrackResult.failure(
                "ticket creation invocation failed", FailureCause.INVOCATION
            )

        scan = scan_output(output.lines)
        if scan.has_error:
            debug(self._logger, "Unexpected error:", scan.error_line)
            return TrackResult.failure(scan.error_line, FailureCause.REMOTE)
        if scan.ticket_id:
            self.resolved_ticket_id = scan.ticket_id
            return self.insert_status()
        return TrackResult.not_found("No ticket")

    def incident_update(self, ticket_id: Optional[str] = None) -> TrackResult:
        ticket_id = self._ticket_or_resolved(ticket_id)
        work_notes = self.incident_fields.get("work_notes") or self.incident_fields.get(
            "u_long_description"
        )
        try:
            output = self._ticketing.update_incident(
                self._environment, ticket_id, work_notes
            )
        except InvocationError as e:
            debug(self._logger, "ERROR: ticket update failed", str(e))
            return TrackResult.failure(
                "ticket update invocation failed", FailureCause.INVOCATION
            )

        scan = scan_output(output.lines)
        if scan.has_error:
            debug(self._logger, "Unexpected error:", scan.error_line)
            return TrackResult.failure(scan.error_line, FailureCause.REMOTE)
        if scan.success:
            return TrackResult.found(f"Updated ticket: {ticket_id}")
        return TrackResult.not_found("No update")

    def incident_close(
        self,
        ticket_id: Optional[str] = None,
        resolution_fields: Optional[Mapping[str, Any]] = None,
    ) -> TrackResult:
        """Close a ticket with the resolution fields its queue requires.

        Resolution fields are passed through unfiltered. Unlike create and
        update, "error" lines are not detected: without a success line the
        last line printed is returned as NOT_FOUND.
        """
        ticket_id = self._ticket_or_resolved(ticket_id)
        try:
            output = self._ticketing.close_incident(
                self._environment, ticket_id, resolution_fields or {}
            )
        except InvocationError as e:
            debug(self._logger, "ERROR: ticket close failed", str(e))
            return TrackResult.failure(
                "ticket close invocation failed", FailureCause.INVOCATION
            )

        scan = scan_close_output(output.lines)
        if scan.success:
            return TrackResult.found("Successfully closed")
        return TrackResult.not_found(scan.last_line)

    def insert_status(self, ticket_id: Optional[str] = None) -> TrackResult:
        """Record the ticket for (resource, caller namespace)."""
        ticket_id = self._ticket_or_resolved(ticket_id)
        try:
            self._escalation.insert(
                self._environment, self.resource, self._caller_namespace, ticket_id
            )
        except InvocationError as e:
            debug(self._logger, "ERROR: escalation insert failed", str(e))
            return TrackResult.failure(
                "escalation insert invocation failed", FailureCause.INVOCATION
            )
        # Insert output is informational only
        return TrackResult.found(ticket_id)

    def get_status(self) -> TrackResult:
        """Look up the open ticket for (resource, caller namespace)."""
        try:
            output = self._escalation.check(
                self._environment, self.resource, self._caller_namespace
            )
        except InvocationError as e:
            debug(self._logger, "ERROR: escalation check failed", str(e))
            return TrackResult.failure(
                "escalation check invocation failed", FailureCause.INVOCATION
            )

        scan = scan_output(output.lines)
        if scan.has_error:
            debug(self._logger, "Unexpected error:", scan.error_line)
            return TrackResult.failure(scan.error_line, FailureCause.REMOTE)
        if scan.ticket_id:
            self.resolved_ticket_id = scan.ticket_id
            return TrackResult.found(scan.ticket_id)
        return TrackResult.not_found("No ticket")

    def _ticket_or_resolved(self, ticket_id: Optional[str]) -> str:
        ticket_id = ticket_id or self.resolved_ticket_id
        if not ticket_id:
            raise MissingParameterError("Missing parameter: ticket_id")
        return ticket_id
