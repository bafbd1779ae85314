# helpdesk

A small help-desk ticket manager. You register users and technicians. Users
open tickets, which can be software, maintenance or other requests. The
tickets wait in a first-in first-out queue, and open tickets are handed to
technicians in round-robin order. Listings, rankings and a general report are
printed along the way.

## Installation

```
pip install .
```

## Running

The `helpdesk` command reads a script from standard input and writes its
reports to standard output:

```
helpdesk < commands.txt
```

Each command starts with a single letter. Every field that follows is on its
own line.

| Command | Fields that follow |
|---------|--------------------|
| `U` | register a user: name, CPF, birth date (`d/m/yyyy`), phone, gender, sector |
| `T` | register a technician: name, CPF, birth date, phone, gender, area (`TI` or `GERAL`), availability in hours, salary |
| `A` | open a ticket: requester CPF, ticket type, then the fields of that type (below) |
| `E` | run an action, given on the same or the next line |
| `F` | stop; anything after it is ignored |

The script also stops when the input runs out.

### Ticket types

- `SOFTWARE`: software name, category (`BUG`, `DUVIDA` or `OUTROS`), impact
  level, reason. The estimated time is the impact level plus a base time: 3 h
  for a bug, 1 h for a question and 2 h for anything else. An unknown
  category gives an estimate of 0 h.
- `MANUTENCAO`: item name, condition (`RUIM`, `REGULAR` or `BOM`), location.
  The estimated time is the condition factor (3, 2 or 1) times the factor of
  the requester's sector: `RH` 2, `FINANCEIRO` 3, and 1 for `VENDAS`,
  `MARKETING` and `P&D`. An unknown condition or sector gives 0 h.
- `OUTROS`: description, location, difficulty. The estimated time equals the
  difficulty.

If the requester CPF is not registered, the ticket's fields are still read,
but the ticket is discarded. If the CPF is registered, the user's count of
requested tickets goes up by one. For an unknown ticket type, no further
fields are read.

If a user's CPF is already registered, the new user is ignored.

### Actions for `E`

- `DISTRIBUI`: works through the queue in order and gives each open ticket to
  the next technician in turn who can take it.
  - Software tickets go to `TI` technicians, all others to `GERAL`
    technicians.
  - A technician takes a ticket only when their remaining availability covers
    its estimated time.
  - The hours move from the technician's availability to their time worked,
    and the ticket is marked finished.
- `NOTIFICA`: prints the ticket queue, numbering the tickets `Tick-1`,
  `Tick-2`, and so on.
- `USUARIOS`, `TECNICOS`: print the registered users or technicians.
- `RANKING TECNICOS`: technicians by hours worked, most first. Ties are ordered
  by name, in reverse alphabetical order.
- `RANKING USUARIOS`: users by tickets requested, most first. Ties are ordered
  by name, in alphabetical order.
- `RELATORIO`: prints the following.
  - The number of tickets. It is never shown as less than 1.
  - The number of open and finished tickets.
  - The number of users and of technicians.
  - The average age of users and of technicians.
  - The average hours worked by technicians.

  Averages are whole numbers, truncated.

Both ranking actions leave the users or technicians stored in the ranked
order, so later listings show that order.

Ages are computed as of 18 February 2025.

If the input cannot be read, or a report is asked for that needs users or
technicians when there are none, `helpdesk` writes an error message to
standard error and exits with status 1.

## Using it from Python

```python
from helpdesk.cli import run

output = run(script_text)
```

`run` executes a script and returns everything it prints as a string.

The building blocks are available as well:

- `helpdesk.system.HelpDesk` holds the users, the technicians and the queue.
  Its methods include `add_user`, `add_technician`, `add_ticket`,
  `register_ticket`, `distribute`, `queue_report`, `users_report`,
  `technicians_report`, `technician_ranking`, `user_ranking` and
  `general_report`. Each of the report methods returns its text.
- `helpdesk.ticket_queue.TicketQueue` is the queue itself. It holds
  `helpdesk.ticket.Ticket` objects with a `TicketStatus` of `OPEN` or
  `FINISHED`.
- `helpdesk.software.Software`, `helpdesk.maintenance.Maintenance` and
  `helpdesk.other.OtherRequest` are the ticket kinds.
- `helpdesk.users.User` and `helpdesk.technicians.Technician` each wrap a
  `helpdesk.actors.Person`.
- `helpdesk.dates.Date` and `parse_date` handle birth dates.
- `helpdesk.scanner.Scanner` reads the script text.

## What it does not do

Nothing is stored between runs. Users, technicians and tickets exist only
while one script is being executed.

## Tests

```
pip install .[test]
pytest
```