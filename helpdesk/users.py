"""Users who open support tickets."""

from __future__ import annotations

from dataclasses import dataclass

from helpdesk.actors import Person, read_person


@dataclass
class User:
    """A person working in a sector, counting the tickets they opened."""

    person: Person
    sector: str
    ticket_count: int = 0

    @property
    def cpf(self):
        return self.person.cpf

    @property
    def name(self):
        return self.person.name

    def age(self):
        """Age in whole years at the reference date."""
        return self.person.age()

    def register_ticket(self):
        """Count one more ticket opened by this user."""
        self.ticket_count += 1

    def describe(self):
        """Return the user's details as report lines."""
        return (
            f"{self.person.describe()}"
            f"- Setor: {self.sector}\n"
            f"- Tickets solicitados: {self.ticket_count}\n"
        )


def read_user(scanner):
    """Read a person's data followed by their sector."""
    person = read_person(scanner)
    sector = scanner.read_line()
    return User(person, sector)