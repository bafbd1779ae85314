"""The help desk: users, technicians and the queue of tickets between them."""

from __future__ import annotations

from helpdesk.maintenance import read_maintenance
from helpdesk.other import read_other
from helpdesk.software import read_software
from helpdesk.ticket import TicketStatus
from helpdesk.ticket_queue import TicketQueue

_SEPARATOR = "--------------------\n"


def _truncated_mean(values, what):
    """Integer mean rounded toward zero; raises ValueError when empty."""
    values = list(values)
    if not values:
        raise ValueError(f"no {what} registered")
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


class HelpDesk:
    """Registers users and technicians and hands tickets out to technicians."""

    def __init__(self):
        self.users = []
        self.technicians = []
        self.queue = TicketQueue()

    def add_user(self, user):
        """Register a user; a user whose CPF is already known is discarded.

        Returns True when the user was added.
        """
        if any(known.cpf == user.cpf for known in self.users):
            return False
        self.users.append(user)
        return True

    def add_technician(self, technician):
        """Register a technician."""
        self.technicians.append(technician)

    def add_ticket(self, requester_cpf, payload):
        """Put a new ticket for ``payload`` at the end of the queue."""
        return self.queue.push(requester_cpf, payload)

    def _find_user(self, cpf):
        return next((user for user in self.users if user.cpf == cpf), None)

    def register_ticket(self, scanner):
        """Read a requester CPF, a ticket kind and its data from a scanner.

        The ticket is queued only when the requester is a known user; the
        data is read either way. Returns the queued ticket or None.
        """
        cpf = scanner.read_line()
        user = self._find_user(cpf)
        sector = ""
        if user is not None:
            user.register_ticket()
            sector = user.sector

        kind = scanner.read_line()
        scanner.skip_whitespace()

        if kind == "SOFTWARE":
            payload = read_software(scanner)
            if user is None:
                return None
            payload.compute_estimated_time()
        elif kind == "MANUTENCAO":
            payload = read_maintenance(scanner, sector)
        elif kind == "OUTROS":
            payload = read_other(scanner)
        else:
            return None

        if user is None:
            return None
        return self.add_ticket(cpf, payload)

    def distribute(self):
        """Assign open tickets to technicians in round-robin order.

        Software tickets go to "TI" technicians, all others to "GERAL"
        ones, and only to a technician with enough hours available.
        """
        count = len(self.technicians)
        next_index = 0
        for ticket in self.queue:
            if ticket.status is not TicketStatus.OPEN:
                continue
            hours = ticket.estimated_time()
            area = "TI" if ticket.kind() == "S" else "GERAL"
            rotation = self.technicians[next_index:] + self.technicians[:next_index]
            for offset, technician in enumerate(rotation):
                if technician.area == area and technician.availability >= hours:
                    technician.assign(hours)
                    ticket.finish()
                    next_index = (next_index + offset + 1) % count
                    break

    def queue_report(self):
        """Every ticket in the queue, numbered in order."""
        return (
            "----- FILA DE TICKETS -----\n"
            f"{self.queue.render()}"
            "---------------------------\n\n"
        )

    @staticmethod
    def _listing(header, footer, people):
        body = "".join(_SEPARATOR + person.describe() for person in people)
        return f"{header}{body}{footer}"

    def users_report(self):
        """Every registered user, in registration order."""
        return self._listing(
            "----- BANCO DE USUARIOS -----\n",
            "----------------------------\n\n",
            self.users,
        )

    def technicians_report(self):
        """Every registered technician, in current order."""
        return self._listing(
            "----- BANCO DE TECNICOS -----\n",
            "----------------------------\n\n",
            self.technicians,
        )

    def technician_ranking(self):
        """Technicians by hours worked, most first; ties by name, descending.

        The stored order of technicians is changed to the ranking.
        """
        self.technicians.sort(
            key=lambda tech: (tech.worked_hours, tech.name), reverse=True
        )
        return self._listing(
            "----- RANKING DE TECNICOS -----\n",
            "-------------------------------\n\n",
            self.technicians,
        )

    def user_ranking(self):
        """Users by tickets opened, most first; ties by name, ascending.

        The stored order of users is changed to the ranking.
        """
        self.users.sort(key=lambda user: (-user.ticket_count, user.name))
        return self._listing(
            "----- RANKING DE USUARIOS -----\n",
            "-------------------------------\n",
            self.users,
        )

    def general_report(self):
        """Totals and averages over tickets, users and technicians.

        Raises ValueError when there are no users or no technicians.
        """
        # The queue always reports at least one slot.
        total_tickets = max(len(self.queue), 1)
        mean_user_age = _truncated_mean((u.age() for u in self.users), "users")
        mean_tech_age = _truncated_mean(
            (t.age() for t in self.technicians), "technicians"
        )
        mean_work = _truncated_mean(
            (t.worked_hours for t in self.technicians), "technicians"
        )
        return (
            "----- RELATORIO GERAL -----\n"
            f"- Qtd tickets: {total_tickets}\n"
            f"- Qtd tickets (A): {self.queue.count_by_status(TicketStatus.OPEN)}\n"
            f"- Qtd tickets (F): {self.queue.count_by_status(TicketStatus.FINISHED)}\n"
            f"- Qtd usuarios: {len(self.users)}\n"
            f"- Md idade usuarios: {mean_user_age}\n"
            f"- Qtd tecnicos: {len(self.technicians)}\n"
            f"- Md idade tecnicos: {mean_tech_age}\n"
            f"- Md trabalho tecnicos: {mean_work}\n"
            "---------------------------\n\n"
        )