"""Command loop driving the help desk from text input."""

from __future__ import annotations

import sys

from helpdesk.scanner import Scanner
from helpdesk.system import HelpDesk
from helpdesk.technicians import read_technician
from helpdesk.users import read_user


def _execute(text, write):
    desk = HelpDesk()
    scanner = Scanner(text)
    reports = {
        "DISTRIBUI": None,
        "NOTIFICA": desk.queue_report,
        "USUARIOS": desk.users_report,
        "TECNICOS": desk.technicians_report,
        "RANKING TECNICOS": desk.technician_ranking,
        "RANKING USUARIOS": desk.user_ranking,
        "RELATORIO": desk.general_report,
    }
    while not scanner.at_end():
        command = scanner.read_char()
        if command == "F":
            return
        if command == "A":
            desk.register_ticket(scanner)
        elif command == "U":
            desk.add_user(read_user(scanner))
        elif command == "T":
            desk.add_technician(read_technician(scanner))
        elif command == "E":
            action = scanner.read_line()
            if action == "DISTRIBUI":
                desk.distribute()
            elif action in reports:
                write(reports[action]())


def run(text):
    """Run the commands in ``text`` and return everything they print."""
    output = []
    _execute(text, output.append)
    return "".join(output)


def main(argv=None):
    """Read commands from standard input and print the reports."""
    text = sys.stdin.read()
    try:
        _execute(text, sys.stdout.write)
    except (ValueError, EOFError) as error:
        sys.stdout.flush()
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())