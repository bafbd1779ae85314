"""A first-in, first-out queue of support tickets."""

from __future__ import annotations

from helpdesk.ticket import Ticket, TicketStatus


class TicketQueue:
    """Tickets kept in the order they were opened."""

    def __init__(self):
        self._tickets: list[Ticket] = []

    def push(self, requester_cpf, payload):
        """Open a ticket for the given requester and put it at the end."""
        ticket = Ticket(requester_cpf, payload)
        self._tickets.append(ticket)
        return ticket

    def __len__(self):
        return len(self._tickets)

    def __iter__(self):
        return iter(self._tickets)

    def __getitem__(self, index):
        return self._tickets[index]

    def count_by_status(self, status):
        """Number of tickets whose status equals ``status`` ('A' or 'F')."""
        return sum(1 for ticket in self._tickets if ticket.status == status)

    def render(self):
        """Number the tickets Tick-1, Tick-2, ... and return them as one report."""
        blocks = []
        for number, ticket in enumerate(self._tickets, start=1):
            ticket.id = f"Tick-{number}"
            blocks.append(ticket.render())
        return "".join(blocks)


__all__ = ["TicketQueue", "TicketStatus"]