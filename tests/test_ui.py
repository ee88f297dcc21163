import datetime

import pytest

from laprairiel import ui


def _lines(text):
    return text.rstrip("\n").split("\n")


def test_alert_pins_source_box():
    lines = _lines(ui.alert("No customer yet!!"))
    assert lines[2].strip() == "!           No customer yet!!           !"
    assert lines[0].strip() == "_" * 39


def test_alert_centres_odd_padding_like_source():
    lines = _lines(ui.alert("Invalid Choice!!"))
    assert lines[2].strip() == "!            Invalid Choice!!           !"


@pytest.mark.parametrize(
    "message",
    ["No room available!!", "You are not a staff!!", "Not enough room available!!"],
)
def test_alert_rows_share_width(message):
    lines = _lines(ui.alert(message))
    assert len(lines) == 4
    assert len({len(line.rstrip()) for line in lines[1:]}) == 1
    assert message in lines[2]


def test_alert_grows_for_long_message():
    message = "Invalid input. Please re-enter again."
    lines = _lines(ui.alert(message))
    inner = lines[2].strip()[1:-1]
    assert inner == "   " + message + "   "
    assert lines[3].strip() == "!" + "_" * len(inner) + "!"


def test_welcome_menu_lists_choices_in_order():
    text = ui.welcome_menu()
    choices = ["1. Sign Up", "2. Delete Account", "3. Booking History",
               "4. Total Sales", "5. Exit"]
    positions = [text.index(choice) for choice in choices]
    assert positions == sorted(positions)
    assert "< Welcome to Le Prairiel >" in text


def test_main_page_holds_logo():
    text = ui.main_page()
    assert "|_____|\\___|    |_|   |_|  \\__,_|_|_|  |_|\\___|_|" in text
    assert text.endswith("\n")


def test_end_banner_rows_align():
    text = ui.end_banner()
    assert "PROGRAM ENDED!" in text
    assert "THANK YOU FOR USING THIS HOTEL BOOKING SYSTEM!" in text
    widths = {len(line.rstrip()) for line in _lines(text)[1:]}
    assert len(widths) == 1


def test_thank_you_message():
    text = ui.thank_you()
    assert "Thank you for booking with us" in text
    assert len(_lines(text)) == 6


def test_sales_report_shows_date_and_total():
    date = datetime.date(2024, 3, 5)
    text = ui.sales_report(date, 350000)
    assert f"Date  : {date.day}/{date.month}/{date.year}" in text
    assert "Total Sales : RM 350000        |" in text
    assert "< TODAY SALES >" in text


def test_sales_report_rounds_float_total():
    text = ui.sales_report(datetime.date(2024, 1, 1), 20000.0)
    assert "Total Sales : RM 20000   " in text
    assert "20000.0" not in text