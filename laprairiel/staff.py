"""Hotel staff and their sign-in check."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Staff:
    """A staff member who may sign in to the system."""

    name: str
    staff_id: int
    age: int
    position: str
    password: str


def default_staff() -> list[Staff]:
    """The staff members the system starts with."""
    return [
        Staff("Madam Ruzanna", 1234, 18, "BOSS", "password"),
        Staff("Abu", 2345, 35, "Manager", "secret"),
        Staff("Ahmad", 3456, 25, "Receptionist", "token"),
    ]


def verify_staff(staff: Iterable[Staff], staff_id: int, password: str) -> bool:
    """Whether some staff member has this ID and password."""
    return any(
        member.staff_id == staff_id and member.password == password
        for member in staff
    )