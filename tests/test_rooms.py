import pytest

from laprairiel.rooms import Hotel, Room, RoomType


def test_room_type_prices_and_labels():
    assert RoomType.DOUBLE.price == 10000
    assert RoomType.PRESIDENTIAL.price == 25000
    assert RoomType.VILLA.price == 50000
    assert RoomType(2) is RoomType.PRESIDENTIAL
    assert RoomType.VILLA.label == "Villa"


def test_room_numbers():
    hotel = Hotel()
    assert [r.number for r in hotel.rooms(RoomType.DOUBLE)][:2] == [1001, 1002]
    assert hotel.rooms(RoomType.PRESIDENTIAL)[0].number == 2001
    assert hotel.rooms(RoomType.VILLA)[-1].number == 3010


def test_default_all_available():
    hotel = Hotel()
    for room_type in RoomType:
        assert hotel.available(room_type) == 10


def test_room_assign_and_reset():
    room = Room(1001, RoomType.DOUBLE)
    assert room.is_free
    room.assign("900101", 3, "01-01-24")
    assert room.customer == "900101"
    assert room.nights == 3
    assert room.start_date == "01-01-24"
    assert not room.is_free
    room.reset()
    assert room == Room(1001, RoomType.DOUBLE)


def test_available_and_booked_by():
    hotel = Hotel(4)
    rooms = hotel.rooms(RoomType.VILLA)
    rooms[0].assign("A1", 2, "d")
    rooms[2].assign("A1", 2, "d")
    rooms[3].assign("B2", 1, "d")
    assert hotel.available(RoomType.VILLA) == 1
    assert hotel.booked_by("A1", RoomType.VILLA) == 2
    assert hotel.booked_by("B2", RoomType.VILLA) == 1
    assert hotel.booked_by("A1", RoomType.DOUBLE) == 0


def test_nights_for_uses_last_room():
    hotel = Hotel()
    rooms = hotel.rooms(RoomType.DOUBLE)
    rooms[0].assign("A1", 2, "d")
    rooms[5].assign("A1", 7, "d")
    assert hotel.nights_for("A1", RoomType.DOUBLE) == 7
    assert hotel.nights_for("nobody", RoomType.DOUBLE) == 0


def test_release_customer():
    hotel = Hotel()
    hotel.rooms(RoomType.DOUBLE)[1].assign("A1", 2, "d")
    hotel.rooms(RoomType.VILLA)[0].assign("A1", 2, "d")
    hotel.rooms(RoomType.VILLA)[1].assign("B2", 2, "d")
    hotel.release_customer("A1")
    for room_type in RoomType:
        assert hotel.booked_by("A1", room_type) == 0
    assert hotel.booked_by("B2", RoomType.VILLA) == 1
    assert hotel.available(RoomType.DOUBLE) == 10


def test_total_sales():
    hotel = Hotel()
    assert hotel.total_sales() == 0
    hotel.rooms(RoomType.DOUBLE)[0].assign("A1", 1, "d")
    assert hotel.total_sales() == RoomType.DOUBLE.price
    hotel.rooms(RoomType.VILLA)[0].assign("B2", 1, "d")
    assert hotel.total_sales() == RoomType.DOUBLE.price + RoomType.VILLA.price


def test_negative_room_count_rejected():
    with pytest.raises(ValueError):
        Hotel(-1)