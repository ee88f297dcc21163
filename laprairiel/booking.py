"""Booking rooms for a customer and editing an existing booking."""

from __future__ import annotations

from laprairiel.customer import Customer
from laprairiel.rooms import Hotel, Room, RoomType


class BookingError(Exception):
    """Raised when a booking cannot be made."""


class NoRoomAvailable(BookingError):
    """Raised when every room of the requested type is taken."""

    def __init__(self, room_type: RoomType) -> None:
        super().__init__("No room available!!")
        self.room_type = room_type


class NotEnoughRooms(BookingError):
    """Raised when fewer rooms are free than were asked for."""

    def __init__(self, room_type: RoomType, wanted: int, available: int) -> None:
        super().__init__("Not enough room available!!")
        self.room_type = room_type
        self.wanted = wanted
        self.available = available


def _free_rooms(hotel: Hotel, room_type: RoomType, wanted: int) -> list[Room]:
    """The first ``wanted`` free rooms of a type, checking that there are enough."""
    available = hotel.available(room_type)
    if available == 0:
        raise NoRoomAvailable(room_type)
    if available < wanted:
        raise NotEnoughRooms(room_type, wanted, available)
    if wanted <= 0:
        return []
    return [room for room in hotel.rooms(room_type) if room.is_free][:wanted]


def book_rooms(
    hotel: Hotel,
    customer: Customer,
    room_type: RoomType,
    count: int,
    nights: int,
    start_date: str,
) -> list[Room]:
    """Book ``count`` free rooms of a type for the customer.

    Rooms are taken in room-number order. Returns the rooms booked.
    """
    rooms = _free_rooms(hotel, room_type, count)
    for room in rooms:
        room.assign(customer.ic, nights, start_date)
    return rooms


def change_room_count(
    hotel: Hotel,
    customer: Customer,
    room_type: RoomType,
    count: int,
    nights: int,
) -> None:
    """Make the customer hold ``count`` rooms of a type.

    Extra rooms are booked for ``nights`` nights; rooms the customer gives up
    are freed in room-number order. Rooms already held keep their nights.
    """
    current = hotel.booked_by(customer.ic, room_type)
    if current < count:
        for room in _free_rooms(hotel, room_type, count - current):
            room.customer = customer.ic
            room.nights = nights
    elif current > count:
        held = [room for room in hotel.rooms(room_type) if room.customer == customer.ic]
        for room in held[: current - count]:
            room.reset()


def change_nights(
    hotel: Hotel, customer: Customer, room_type: RoomType, nights: int
) -> None:
    """Set the nights of every room of a type held by the customer."""
    for room in hotel.rooms(room_type):
        if room.customer == customer.ic:
            room.nights = nights


def change_ic(hotel: Hotel, customer: Customer, new_ic: str) -> None:
    """Give the customer a new IC number, moving their rooms with it."""
    for room_type in RoomType:
        for room in hotel.rooms(room_type):
            if room.customer == customer.ic:
                room.customer = new_ic
    customer.ic = new_ic


def change_name(customer: Customer, new_name: str) -> None:
    """Give the customer a new name."""
    customer.name = new_name