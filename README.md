# laprairiel

The building blocks of a terminal front desk for the Le Prairiel hotel:
rooms and their bookings, customers, staff sign-in, and the text screens the
desk shows. Every screen function returns its text as a string. Nothing is
printed.

## Installing

    pip install .

## The hotel

A `Hotel` has rooms of three types. By default there are ten rooms of each
type, priced per night:

| Room type         | Rooms     | Price (RM) |
|-------------------|-----------|-----------:|
| Double Room       | 1001–1010 |     10 000 |
| Presidential Room | 2001–2010 |     25 000 |
| Villa             | 3001–3010 |     50 000 |

## Modules

- `laprairiel.rooms` holds the room types and the hotel.
  - `RoomType` has the members `DOUBLE`, `PRESIDENTIAL` and `VILLA`, with the
    properties `price`, `first_number` and `label`.
  - `Room` has `assign(ic, nights, start_date)` and `reset()`. A room with an
    empty `customer` is free.
  - `Hotel(rooms_per_type=10)` has these methods:
    - `rooms(room_type)` returns the rooms of that type.
    - `available(room_type)` returns the number of free rooms of that type.
    - `booked_by(ic, room_type)` returns the number of rooms of that type held
      by the customer.
    - `nights_for(ic, room_type)` returns the nights booked by the customer in
      rooms of that type.
    - `release_customer(ic)` frees every room the customer holds.
    - `total_sales()` returns price × nights summed over every room.
- `laprairiel.customer` holds the customers.
  - `Customer` has a `name` and an `ic` number.
  - `CustomerRegistry` keeps customers in sign-up order. It has `add`,
    `find(ic)`, `remove(ic, hotel)` and `clear`, and supports iteration and
    `len`.
  - `find(ic)` and `remove(ic, hotel)` raise `NoCustomers` when the registry is
    empty. They raise `CustomerNotFound` when no customer has that IC number.
  - `remove` frees the customer's rooms first.
- `laprairiel.staff` handles staff sign-in.
  - `Staff` describes one staff member.
  - `default_staff()` returns the three staff members the desk starts with.
  - `verify_staff(staff, staff_id, password)` returns whether some staff
    member has that ID and password.
- `laprairiel.booking` makes and edits bookings.
  - `book_rooms` books rooms and takes free rooms in room-number order.
  - `change_room_count` books extra rooms or frees rooms until the customer
    holds the given number.
  - `change_nights` sets the nights on the customer's rooms of one type.
  - `change_ic` moves the customer's rooms to a new IC number.
  - `change_name` gives the customer a new name.
  - When rooms run short, these functions raise `NoRoomAvailable` or
    `NotEnoughRooms`. Both are subclasses of `BookingError`.
- `laprairiel.ui` returns the front-desk screens as text:
  - `main_page()`
  - `welcome_menu()`
  - `alert(message)`
  - `end_banner()`
  - `thank_you()`
  - `sales_report(date, total)`
- `laprairiel.menus` returns the screens of the booking flow as text:
  - `booking_menu(hotel)`
  - `rooms_booked(hotel, ic)`
  - `thanks_banner()`
  - `continue_menu()`
  - `edit_menu()`
  - `edit_room_type_menu()`

## Example

```python
from laprairiel.booking import book_rooms
from laprairiel.customer import Customer, CustomerRegistry
from laprairiel.rooms import Hotel, RoomType

hotel = Hotel()
registry = CustomerRegistry()
guest = Customer("Aisha", "900101-01-0000")
registry.add(guest)

book_rooms(hotel, guest, RoomType.VILLA, 2, 3, "01-06-25")
print(hotel.available(RoomType.VILLA))   # 8
print(hotel.total_sales())               # 300000
```

## What the package does not do

- The package has no command to run and no interactive loop. The menus and
  screens are only returned as text, and reading the user's choices is left
  to the caller.
- It does not produce invoices or receipts, and it has no per-customer
  payment totals.
- It does not save anything. Rooms and customers live in memory only.

## Running the tests

    pip install .[test]
    pytest