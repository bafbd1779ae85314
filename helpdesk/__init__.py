"""Help-desk ticket manager: users, technicians, a ticket queue and reports."""

__version__ = "0.1.0"