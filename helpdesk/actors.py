"""Personal data shared by users and technicians."""

from __future__ import annotations

from dataclasses import dataclass

from helpdesk.dates import Date, read_date


@dataclass
class Person:
    """Name, CPF, birth date, phone and gender of a person."""

    name: str
    cpf: str
    birth_date: Date
    phone: str
    gender: str

    def age(self):
        """Age in whole years at the reference date."""
        return self.birth_date.years_until_reference()

    def describe(self):
        """Return the person's details as report lines."""
        return (
            f"- Nome: {self.name}\n"
            f"- CPF: {self.cpf}\n"
            f"- Data de Nascimento: {self.birth_date}\n"
            f"- Telefone: {self.phone}\n"
            f"- Genero: {self.gender}\n"
        )


def read_person(scanner):
    """Read name, CPF, birth date, phone and gender, one per line."""
    name = scanner.read_line()
    cpf = scanner.read_line()
    birth_date = read_date(scanner)
    phone = scanner.read_line()
    gender = scanner.read_line()
    return Person(name, cpf, birth_date, phone, gender)