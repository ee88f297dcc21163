"""Customers and the registry that keeps them in sign-up order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from laprairiel.rooms import Hotel


@dataclass
class Customer:
    """A hotel customer, identified by IC number."""

    name: str
    ic: str


class NoCustomers(LookupError):
    """Raised when the registry holds no customers."""

    def __init__(self) -> None:
        super().__init__("No customer yet!!")


class CustomerNotFound(LookupError):
    """Raised when no customer has the given IC number."""

    def __init__(self, ic: str) -> None:
        super().__init__("No customer with that IC number!!")
        self.ic = ic


class CustomerRegistry:
    """Customers in the order they signed up."""

    def __init__(self) -> None:
        self._customers: list[Customer] = []

    def add(self, customer: Customer) -> None:
        """Append a customer to the end of the registry."""
        self._customers.append(customer)

    def find(self, ic: str) -> Customer:
        """Return the first customer with IC number ``ic``."""
        if not self._customers:
            raise NoCustomers()
        for customer in self._customers:
            if customer.ic == ic:
                return customer
        raise CustomerNotFound(ic)

    def remove(self, ic: str, hotel: Hotel) -> Customer:
        """Free the rooms held by ``ic`` and remove that customer.

        Rooms are freed even when no customer carries the IC number.
        """
        if not self._customers:
            raise NoCustomers()
        hotel.release_customer(ic)
        for position, customer in enumerate(self._customers):
            if customer.ic == ic:
                del self._customers[position]
                return customer
        raise CustomerNotFound(ic)

    def clear(self) -> None:
        """Remove every customer."""
        self._customers.clear()

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self._customers))

    def __len__(self) -> int:
        return len(self._customers)