"""Software tickets: bugs, questions and other software problems."""

from __future__ import annotations

from dataclasses import dataclass, field

BUG_HOURS = 3
OTHER_HOURS = 2
QUESTION_HOURS = 1

_BASE_HOURS = {
    "BUG": BUG_HOURS,
    "DUVIDA": QUESTION_HOURS,
    "OUTROS": OTHER_HOURS,
}


@dataclass
class Software:
    """A request about a piece of software."""

    name: str
    category: str
    impact: int
    reason: str
    _estimated_time: int = field(default=0, init=False, repr=False)

    def compute_estimated_time(self):
        """Set the estimate from the category and impact.

        An unknown category leaves the current estimate unchanged.
        """
        base = _BASE_HOURS.get(self.category)
        if base is not None:
            self._estimated_time = base + self.impact
        return self._estimated_time

    def estimated_time(self):
        """Hours estimated to resolve the request, as last computed."""
        return self._estimated_time

    def kind(self):
        """'S' for software."""
        return "S"

    def describe(self):
        """Return the request's details as report lines."""
        self.compute_estimated_time()
        return (
            "- Tipo: Software\n"
            f"- Nome do software: {self.name}\n"
            f"- Categoria: {self.category}\n"
            f"- Nível do impacto: {self.impact}\n"
            f"- Motivo: {self.reason}\n"
            f"- Tempo estimado: {self._estimated_time}h\n"
        )


def read_software(scanner):
    """Read name, category, impact and reason from a scanner."""
    name = scanner.read_rest_of_line()
    category = scanner.read_line()
    impact = scanner.read_int()
    reason = scanner.read_line()
    return Software(name, category, impact, reason)