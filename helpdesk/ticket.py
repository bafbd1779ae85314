"""Tickets: the data common to every kind of support request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class TicketStatus(str, Enum):
    """Whether a ticket is still open or has been finished."""

    OPEN = "A"
    FINISHED = "F"


class TicketPayload(Protocol):
    """What a specific kind of ticket provides."""

    def estimated_time(self) -> int: ...

    def kind(self) -> str: ...

    def describe(self) -> str: ...


@dataclass
class Ticket:
    """A request made by a user, carrying a kind-specific payload."""

    requester_cpf: str
    payload: TicketPayload
    status: TicketStatus = TicketStatus.OPEN
    id: Optional[str] = None

    def finish(self):
        """Mark the ticket as finished."""
        self.status = TicketStatus.FINISHED

    def estimated_time(self):
        """Hours estimated to resolve the ticket."""
        return self.payload.estimated_time()

    def kind(self):
        """The single-letter kind of the ticket."""
        return self.payload.kind()

    def render(self):
        """Return the ticket as a report block."""
        status = "Aberto" if self.status is TicketStatus.OPEN else "Finalizado"
        ticket_id = self.id if self.id is not None else "(null)"
        return (
            "---------TICKET-----------\n"
            f"- ID: {ticket_id}\n"
            f"- Usuario solicitante: {self.requester_cpf}\n"
            f"{self.payload.describe()}"
            f"- Status: {status}\n"
            "-------------------------\n\n"
        )