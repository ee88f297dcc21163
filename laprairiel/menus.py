"""Screens of the booking flow: room choice, booked rooms and edit menus."""

from __future__ import annotations

from laprairiel.rooms import Hotel, RoomType

_MENU_LEFT = "         ||||"
_MENU_RIGHT = "      ||||         |"

_BOOKING_HEAD = (
    "                                                                                ______________________________________________________________________________________________   ",
    "                                                                               /\\                                                                                             \\",
    "                                                                               \\_|                                       + DESCRIPTION +                                       |",
    "                                                                                 |  =========================================================================================  | ",
    "                                                                                 |                                                                                             | ",
    "                                                                                 |                                       < Double room >                                       | ",
    "                                                                                 |                                                                                             | ",
    "                                                                                 |                             A standard hotel room for a couple.                             | ",
    "                                                                                 |                          This package includes one king-size bed.                           | ",
    "                                                                                 |                                                                                             | ",
    "             __________________________   __________________________             |  -----------------------------------------------------------------------------------------  | ",
    "         .-/|                          \\ /                          |\\-.         |                                                                                             | ",
    "         ||||                                                       ||||         |                                    < Presidential Room >                                    | ",
    "         ||||               < Room booking Systems >                ||||         |                                                                                             | ",
    "         ||||                                                       ||||         |              A luxurious and exclusive accommodation reserved for VIP guests.               | ",
    "         ||||        Please choose your preferably room type:       ||||         |          It features two king-size beds, and breakfast is included in this package.         | ",
    "         ||||                                                       ||||         |                                                                                             | ",
    "         ||||                                                       ||||         |  -----------------------------------------------------------------------------------------  | ",
)

# Right-hand panel text following each room line of the menu.
_ROOM_LINE_TAILS = {
    RoomType.DOUBLE: "                                                                                             | ",
    RoomType.PRESIDENTIAL: "                                                                                             | ",
    RoomType.VILLA: "                    Furnished balcony with a sea view, two king-size beds.                   | ",
}

_ROOM_LINE_LABELS = {
    RoomType.DOUBLE: "     1. Double room ",
    RoomType.PRESIDENTIAL: "     2. Presidential Room ",
    RoomType.VILLA: "     3. Villa ",
}

# Lines that follow each room line of the menu.
_BOOKING_AFTER = {
    RoomType.DOUBLE: (
        "         ||||                                                       ||||         |                                          < Villa >                                          | ",
    ),
    RoomType.PRESIDENTIAL: (
        "         ||||                                                       ||||         |                                  A necessity, not a luxury.                                 | ",
    ),
    RoomType.VILLA: (
        "         ||||                                                       ||||         |                Gordon Ramsay will be your personal chef to serve your meals.                | ",
        "         ||||__________________________   __________________________||||         |                                                                                             | ",
        "         ||/===========================\\|/===========================\\||         |   __________________________________________________________________________________________|_",
        "          `---------------------------~___~---------------------------''          \\_/___________________________________________________________________________________________/",
    ),
}

_BOOKED_MARGIN = " " * 54

_BOOKED_HEAD = (
    "                                                                              ,---.          ,---.",
    "                                                                             / /\"`\\.--\"\"\"--./,'\"\\ \\",
    "                                                                             \\ \\    _       _   / /",
    "                                                                              `./  / __   __ \\  \\,'",
    "                                                                               /    /_O)_(_O\\    \\",
    "                                                                               |  .-'  ___  `-.  |",
    "                                                                            .--|       \\_/       |--.",
    "                                                                          ,'    \\   \\   |   /   /    `.",
    "                                                                         /       `. `--^--'  ,'       \\",
    "                                                                      .-\"\"\"\"\"\"-.    `--.___.--'    .-\"\"\"\"\"\"-.",
    "                                                      .--------------/         \\------------------/         \\--------------.",
    "                                                      | .------------\\         /------------------\\         /------------. |",
    "                                                      | |             `-`--`--'                    `--'--'-'             | |",
    "                                                      | |                    + ===================== +                   | |",
    "                                                      | |                    | Rooms that you booked |                   | |",
    "                                                      | |                    + ===================== +                   | |",
    "                                                      | |                                                                | |",
)

_BOOKED_LABELS = {
    RoomType.DOUBLE: "                        Double Room : ",
    RoomType.PRESIDENTIAL: "                  Presidential Room : ",
    RoomType.VILLA: "                              Villa : ",
}

_BOOKED_BLANK = "                                                      | |                                                                | |"

_BOOKED_TAIL = (
    "                                                      | |________________________________________________________________| |",
    "                                                      |____________________________________________________________________|",
    "                                                                            )__________|__|__________(",
    "                                                                           |            ||            |",
    "                                                                           |____________||____________|",
    "                                                                             ),-----.(      ),-----.(  ",
    "                                                                           ,'   ==.   \\    /  .==    `.",
    "                                                                          /            )  (            \\",
    "                                                                          `==========='    `==========='",
)

_THANKS = (
    "                                            __^__                                                                                   __^__",
    "                                           ( ___ )---------------------------------------------------------------------------------( ___ )",
    "                                            | / |                                                                                   | \\ |",
    "                                            | / |                       Thanks for providing your preferences.                      | \\ |",
    "                                            | / |                                                                                   | \\ |",
    "                                            | / |     Do you wish to continue or wish to stay to add more preferably room type?     | \\ |",
    "                                            |___|                                                                                   |___|",
    "                                           (_____)---------------------------------------------------------------------------------(_____)",
)

_CONTINUE = (
    "                                                                       ___________________________________",
    "                                                                      /                                   \\",
    "                                                                     |   1. Stop booking                   |",
    "                                                                     |   2. Add more preferably room type  |",
    "                                                                      \\___________________________________/",
)

_EDIT = (
    "                                                                   ===========================================",
    "                                                                   |                                         |",
    "                                                                   |     < What would you like to edit? >    |",
    "                                                                   |                                         |",
    "                                                                   |       1.  Edit numbers of room(s)       |",
    "                                                                   |                                         |",
    "                                                                   |       2.  Edit numbers of night(s)      |",
    "                                                                   |                                         |",
    "                                                                   |       3.  Edit customer details         |",
    "                                                                   |                                         |",
    "                                                                   |       4.  Exit                          |",
    "                                                                   |                                         |",
    "                                                                   ===========================================",
)

_EDIT_ROOM_TYPE = (
    "                                                                   > > > > > > > > > > > > > > > > > > > > > >",
    "                                                                   ^                                         ^",
    "                                                                   ^     < What would you like to edit? >    ^",
    "                                                                   ^                                         ^",
    "                                                                   ^       1.  Edit for Double Room          ^",
    "                                                                   ^                                         ^",
    "                                                                   ^       2.  Edit for Presidential Room    ^",
    "                                                                   ^                                         ^",
    "                                                                   ^       3.  Edit for Villa                ^",
    "                                                                   ^                                         ^",
    "                                                                   > > > > > > > > > > > > > > > > > > > > > >",
)


def _join(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def _room_line(hotel: Hotel, room_type: RoomType) -> str:
    return (
        _MENU_LEFT
        + f"{_ROOM_LINE_LABELS[room_type]:<28}"
        + f"{hotel.available(room_type):<3}"
        + " room(s) available"
        + _MENU_RIGHT
        + _ROOM_LINE_TAILS[room_type]
    )


def booking_menu(hotel: Hotel) -> str:
    """The room-type menu with the number of free rooms of each type."""
    lines = [""]
    lines.extend(_BOOKING_HEAD)
    for room_type in RoomType:
        lines.append(_room_line(hotel, room_type))
        lines.extend(_BOOKING_AFTER[room_type])
    return _join(lines)


def rooms_booked(hotel: Hotel, ic: str) -> str:
    """The picture listing how many rooms of each type ``ic`` holds."""
    lines = ["", ""]
    lines.extend(_BOOKED_HEAD)
    for position, room_type in enumerate(RoomType):
        if position:
            lines.append(_BOOKED_BLANK)
        lines.append(
            f"{_BOOKED_MARGIN}| |{_BOOKED_LABELS[room_type]}"
            f"{hotel.booked_by(ic, room_type)}                         | |"
        )
    lines.extend(_BOOKED_TAIL)
    lines.extend(["", ""])
    return _join(lines)


def thanks_banner() -> str:
    """The note shown after the customer gives a room preference."""
    return _join(["", "", *_THANKS, ""])


def continue_menu() -> str:
    """The choice between stopping and booking another room type."""
    return _join([*_CONTINUE, ""])


def edit_menu() -> str:
    """The menu of what part of a booking to edit."""
    return _join(["", "", *_EDIT])


def edit_room_type_menu() -> str:
    """The menu of which room type to edit."""
    return _join(["", *_EDIT_ROOM_TYPE])