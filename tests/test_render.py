# tests/test_render.py

import pytest

import wallcal
from wallcal.core.types import CalendarEvent, CalendarOptions
from wallcal.render import (
    CURRENT_MONTH_OPACITY,
    OVERFLOW_OPACITY,
    cell_view,
    format_month,
    holiday_image_cells,
    month_view,
)


@pytest.fixture(scope="module")
def events_2024():
    return wallcal.compute_events(2024)


def test_month_view_february_2024(events_2024):
    view = month_view(2024, 1, events_2024)
    assert len(view) == 5

    first = view[0][0]
    assert first.date_text == "28"
    assert first.day_letter == "S"
    assert first.opacity == OVERFLOW_OPACITY
    assert first.description.startswith("Sunrise ")

    assert [c.day_letter for c in view[0]] == ["S", "M", "T", "W", "T", "F", "S"]
    assert all(c.day_letter is None for row in view[1:] for c in row)

    snow = view[3][6]
    assert snow.date_text == "24"
    assert snow.opacity == CURRENT_MONTH_OPACITY
    assert snow.moon_dot is True
    assert snow.description == "Snow Moon"


def test_cell_view_joins_labels():
    evts = (CalendarEvent("Wolf Moon", is_moon=True), CalendarEvent("Ann's Birthday"))
    c = cell_view(25, True, evts, 2, 4)
    assert c.description == "Wolf Moon\nAnn's Birthday"
    assert c.moon_dot is True
    assert c.day_letter is None


def test_empty_cell():
    c = cell_view(2, False, (), 0, 1)
    assert c.description is None
    assert c.moon_dot is False
    assert c.day_letter == "M"
    assert c.opacity == OVERFLOW_OPACITY


@pytest.mark.parametrize(
    "month,expected",
    [
        (9, [("pumpkin", 4, 4)]),
        (10, [("turkey", 4, 4)]),
        (11, [("santa", 3, 3)]),
        (0, []),
    ],
)
def test_holiday_images_2024(month, expected):
    assert holiday_image_cells(2024, month) == expected


def test_format_month_text():
    events = wallcal.compute_events(2024, options=CalendarOptions(sunrise_sunset=False))
    text = format_month(2024, 1, events, w=12)
    lines = text.splitlines()
    assert lines[0] == "February 2024"
    assert lines[1].split() == ["S", "M", "T", "W", "T", "F", "S"]
    assert "(28)" in lines[3]
    assert "24*" in text
    assert "Valentine's" in text
