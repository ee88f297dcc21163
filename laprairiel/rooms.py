"""Room types, rooms and the hotel that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_ROOMS_PER_TYPE = 10


class RoomType(Enum):
    """The kinds of room on offer, numbered as on the booking menu."""

    DOUBLE = 1
    PRESIDENTIAL = 2
    VILLA = 3

    @property
    def price(self) -> int:
        """Price of one night in RM."""
        return _PRICES[self]

    @property
    def first_number(self) -> int:
        """Room number of the first room of this type."""
        return _FIRST_NUMBERS[self]

    @property
    def label(self) -> str:
        """Name shown to customers."""
        return _LABELS[self]


_PRICES = {
    RoomType.DOUBLE: 10000,
    RoomType.PRESIDENTIAL: 25000,
    RoomType.VILLA: 50000,
}

_FIRST_NUMBERS = {
    RoomType.DOUBLE: 1001,
    RoomType.PRESIDENTIAL: 2001,
    RoomType.VILLA: 3001,
}

_LABELS = {
    RoomType.DOUBLE: "Double Room",
    RoomType.PRESIDENTIAL: "Presidential Room",
    RoomType.VILLA: "Villa",
}


@dataclass
class Room:
    """One room; an empty ``customer`` means the room is free."""

    number: int
    room_type: RoomType
    customer: str = ""
    nights: int = 0
    start_date: str = ""

    @property
    def price(self) -> int:
        return self.room_type.price

    @property
    def is_free(self) -> bool:
        return self.customer == ""

    def assign(self, ic: str, nights: int, start_date: str) -> None:
        """Book the room for the customer with IC number ``ic``."""
        self.customer = ic
        self.nights = nights
        self.start_date = start_date

    def reset(self) -> None:
        """Make the room free again."""
        self.customer = ""
        self.nights = 0
        self.start_date = ""


class Hotel:
    """All rooms of the hotel, grouped by type."""

    def __init__(self, rooms_per_type: int = DEFAULT_ROOMS_PER_TYPE) -> None:
        if rooms_per_type < 0:
            raise ValueError("rooms_per_type must not be negative")
        self._rooms = {
            room_type: [
                Room(room_type.first_number + offset, room_type)
                for offset in range(rooms_per_type)
            ]
            for room_type in RoomType
        }

    def rooms(self, room_type: RoomType) -> list[Room]:
        """The rooms of one type, in room-number order."""
        return self._rooms[room_type]

    def available(self, room_type: RoomType) -> int:
        """Number of free rooms of a type."""
        return sum(1 for room in self._rooms[room_type] if room.is_free)

    def booked_by(self, ic: str, room_type: RoomType) -> int:
        """Number of rooms of a type held by the customer ``ic``."""
        return sum(1 for room in self._rooms[room_type] if room.customer == ic)

    def nights_for(self, ic: str, room_type: RoomType) -> int:
        """Nights booked by ``ic`` in rooms of a type; the last such room counts."""
        nights = 0
        for room in self._rooms[room_type]:
            if room.customer == ic:
                nights = room.nights
        return nights

    def release_customer(self, ic: str) -> None:
        """Free every room held by the customer ``ic``."""
        for rooms in self._rooms.values():
            for room in rooms:
                if room.customer == ic:
                    room.reset()

    def total_sales(self) -> int:
        """Sum of price times nights over every room."""
        return sum(
            room.price * room.nights
            for rooms in self._rooms.values()
            for room in rooms
        )