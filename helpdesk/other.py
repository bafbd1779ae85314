"""Tickets that fit no other kind."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OtherRequest:
    """A free-form request whose difficulty is its estimate in hours."""

    description: str
    location: str
    difficulty: int

    def estimated_time(self):
        """Hours estimated to resolve the request: its difficulty."""
        return self.difficulty

    def kind(self):
        """'O' for other."""
        return "O"

    def describe(self):
        """Return the request's details as report lines."""
        return (
            "- Tipo: Outros\n"
            f"- Descricao: {self.description}\n"
            f"- Local: {self.location}\n"
            f"- Nivel de Dificuldade: {self.difficulty}\n"
            f"- Tempo Estimado: {self.difficulty}h\n"
        )


def read_other(scanner):
    """Read description, location and difficulty from a scanner."""
    description = scanner.read_line()
    location = scanner.read_line()
    difficulty = scanner.read_int()
    scanner.skip_whitespace()
    return OtherRequest(description, location, difficulty)