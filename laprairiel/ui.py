"""Screens of the front desk: title page, main menu, alerts and reports."""

from __future__ import annotations

import datetime

_ALERT_WIDTH = 39
_ALERT_MARGIN = " " * 68

_MAIN_PAGE = (
    "                                                                                  .-.__",
    "                                                                                 (     `-.",
    "                                                                                  [`--.__ )",
    "                                                                                  | ][  ]/",
    "                                                                                 .--.][_|",
    "                                                                                /        `----.______",
    "                                                            _.-----------------'                     `---------------.",
    "                                                          .'                                                          \\",
    "                                                          |                                                            |",
    "                                                          |       _               ___             _      _      _      |",
    "                                                          |      | |             | '_ \\          (_)    (_)    | |     |",
    "                                                          |      | |     ___     | |_) |_ __ __ _ _ _ __ _  ___| |     |",
    "                                                          |      | |    / _ \\    | ._ /| '__/ _` | | '__| |/ _ \\ |     |",
    "                                                          |      | |___|  __/    | |   | | | (_| | | |  | |  __/ |     |",
    "                                                          |      |_____|\\___|    |_|   |_|  \\__,_|_|_|  |_|\\___|_|     |",
    "                                                          |                                                            |",
    "                                                          |                                                            |",
    "                                                           \\                                                           |",
    "                                                            `-._______________                  _.-------._            |",
    "                                                             | |              `-.   .----------'           `.          |",
    "                                                             | |   _________     \\ / __________       _______\\         |",
    "                                                             | |  |   |||   |     Y |/////\\\\\\|     |   |||  `.        /",
    "                                                             | |  |   |||   |     | |/////\\\\\\|     |   |||   |`-.____/",
    "                                                             | |  |____|____|       |/////\\\\\\|     |____|____|   | |",
    "                                                             | |  | ,,,| \\  |       |////  \\\\\\\\|     |  / | \\  |   | |",
    "                                                             | |  |(o o|  \\ |       |///\\  /\\\\\\|     | /  |  \\ |   | |",
    "                                                             | |  |____|____|       |////\\/\\\\\\|     |____|____|   | |",
    "                                       `-------._______      | |  |/   |,,, |       |o==//\\\\\\\\\\|     | \\  |  / |   | |____.---------",
    "                                                       `----.| |__|.---|o o)|       |@////\\\\\\\\\\|     |  \\_|__.------'",
    "                                                      _.------'          `--+------.|/////\\\\\\\\\\|_.---+--'",
    "                                       ----.___.-----'                                                                _________.----",
)

_WELCOME = (
    "",
    "-" * 188,
    "",
    "",
    "                                                                 .--------------------------------------------.",
    "                                                                 | .-----------------------------------------. |",
    "                                                                 | |                                         | |",
    "                                                                 | |       < Welcome to Le Prairiel >        | |",
    "                                                                 | |                                         | |",
    "                                                                 | |       How may I assist you today?       | |",
    "                                                                 | |                                         | |",
    "                                                                 | |           1. Sign Up                    | |",
    "                                                                 | |           2. Delete Account             | |",
    "                                                                 | |           3. Booking History            | |",
    "                                                                 | |           4. Total Sales                | |",
    "                                                                 | |           5. Exit                       | |",
    "                                                                 | |________________________________________ | |",
    "                                                                 |__________________________________________oo_|",
    "                                                                                ______)___(______,",
    "                                                                               |_________________| 8",
    "",
)

_END_MARGIN = " " * 57
_END_INNER = 52


def _end_row(left: str, text: str, right: str) -> str:
    return f"{_END_MARGIN}{left} | |{text.center(_END_INNER)}| | {right}"


_END_TOP = (
    "._____. ._____. .________________________________________. ._____. ._____.",
    "| ._. | | ._. | | .____________________________________. | | ._. | | ._. |",
    "| !_| |_|_|_! | | !____________________________________! | | !_| |_|_|_! |",
    "!___| |_______! !________________________________________! !___| |_______!",
    ".___|_|_| |____________________________________________________|_|_| |___.  ",
    "| ._____| |________________________________________________________| |_. |",
)

_END_BOTTOM = (
    "| !_| |_|_|____________________________________________________| |_|_|_! |",
    "!___| |________________________________________________________| |_______!",
    ".___|_|_| |___. .________________________________________. .___|_|_| |___. ",
    "| ._____| |_. | | .____________________________________. | | ._____| |_. |",
    "| !_! | | !_! | | !____________________________________! | | !_! | | !_! |",
    "!_____! !_____! !________________________________________! !_____! !_____!",
)

_END_BODY = (
    ("| !_! |", "", "! !_! |"),
    ("!_____!", "* * * * * * * * PROGRAM ENDED! * * * * * * * *", "!_____!"),
    ("._____.", "-" * 49, "._____. "),
    ("| ._. |", "", "| ._. |"),
    ("| | | |", "THANK YOU FOR USING THIS HOTEL BOOKING SYSTEM!", "| | | |"),
    ("| | | |", "", "| | | |"),
    ("| !_! |", "", "! !_! |"),
    ("!_____!", "", "!_____!"),
    ("._____.", "", "._____. "),
    ("| ._. |", "", "| ._. |"),
)

_THANK_YOU = (
    "",
    "                                                                    + ------------------------------------- + ",
    "                                                                    |                                       |",
    "                                                                    |    Thank you for booking with us      |",
    "                                                                    |                                       |",
    "                                                                    + ------------------------------------- +",
)


def _join(lines: tuple[str, ...] | list[str]) -> str:
    return "\n".join(lines) + "\n"


def main_page() -> str:
    """The title picture shown before the main menu."""
    return _join(_MAIN_PAGE)


def welcome_menu() -> str:
    """The main menu with its five choices."""
    return _join(_WELCOME)


def alert(message: str) -> str:
    """A framed warning box holding ``message``.

    The box is 39 columns wide inside and grows to leave three spaces on
    each side of a longer message.
    """
    width = max(_ALERT_WIDTH, len(message) + 6)
    return _join(
        [
            f"{_ALERT_MARGIN} {'_' * width} ",
            f"{_ALERT_MARGIN}!{' ' * width}!",
            f"{_ALERT_MARGIN}!{message.center(width)}!",
            f"{_ALERT_MARGIN}!{'_' * width}!",
        ]
    )


def end_banner() -> str:
    """The banner shown when the program ends."""
    lines = [""]
    lines.extend(_END_MARGIN + line for line in _END_TOP)
    lines.extend(_end_row(left, text, right) for left, text, right in _END_BODY)
    lines.extend(_END_MARGIN + line for line in _END_BOTTOM)
    return _join(lines)


def thank_you() -> str:
    """The note shown after a booking is left unedited."""
    return _join(_THANK_YOU)


def sales_report(date: datetime.date, total: int | float) -> str:
    """The box reporting the total sales on ``date``."""
    margin = " " * 72
    date_text = f"{date.day}/{date.month}/{date.year}"
    total_text = f"{total:.0f}"
    return _join(
        [
            f"{margin}__________________________________",
            f"{' ' * 70}/\\                                  \\",
            f"{' ' * 70}\\_|          < TODAY SALES >        |",
            f"{margin}| =============================== |",
            f"{margin}|                                 |",
            f"{margin}|        Date  : {date_text}        |",
            f"{margin}|                                 |",
            f"{margin}|  Total Sales : RM {total_text:<8}      |",
            f"{margin}|  _______________________________|_",
            f"{margin}\\_/_______________________________/ ",
        ]
    )