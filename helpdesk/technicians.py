"""Technicians who resolve support tickets."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from helpdesk.actors import Person, read_person


def _single_precision(value):
    """Round a number to single precision, as the salary is stored."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class Technician:
    """A person with an area of work, hours available and hours worked."""

    person: Person
    area: str
    availability: int
    salary: float
    worked_hours: int = 0

    def __post_init__(self):
        self.salary = _single_precision(self.salary)

    @property
    def cpf(self):
        return self.person.cpf

    @property
    def name(self):
        return self.person.name

    def age(self):
        """Age in whole years at the reference date."""
        return self.person.age()

    def assign(self, hours):
        """Move hours from the technician's availability to their worked time."""
        self.availability -= hours
        self.worked_hours += hours

    def describe(self):
        """Return the technician's details as report lines."""
        return (
            f"{self.person.describe()}"
            f"- Area de Atuacao: {self.area}\n"
            f"- Salario: {self.salary:.2f}\n"
            f"- Disponibilidade: {self.availability}h\n"
            f"- Tempo Trabalhado: {self.worked_hours}h\n"
        )


def read_technician(scanner):
    """Read a person's data, then area, availability and salary."""
    person = read_person(scanner)
    area = scanner.read_line()
    availability = scanner.read_int()
    salary = scanner.read_float()
    return Technician(person, area, availability, salary)