# tests/test_dates.py

from __future__ import annotations

from family_site.dates import format_year, parse_display_date


def test_full_date():
    d = parse_display_date("August 6, 1977")
    assert (d.year, d.month, d.day) == (1977, 8, 6)
    assert not d.approximate
    assert d.raw == "August 6, 1977"


def test_qualifier_before_year():
    d = parse_display_date("December 8, circa 1950")
    assert (d.year, d.month, d.day) == (1950, 12, 8)
    assert d.qualifier == "ABT"
    assert d.approximate


def test_circa_year_only():
    d = parse_display_date("circa 1984")
    assert d.year == 1984
    assert d.month is None
    assert d.approximate


def test_month_day_without_year():
    d = parse_display_date("December 13")
    assert d.year is None
    assert (d.month, d.day) == (12, 13)
    assert not d.known


def test_gedcom_style_date():
    d = parse_display_date("6 AUG 1977")
    assert (d.year, d.month, d.day) == (1977, 8, 6)


def test_two_word_qualifier():
    d = parse_display_date("prior to 1900")
    assert d.qualifier == "BEF"
    assert d.year == 1900


def test_empty_and_none():
    assert parse_display_date(None).raw == ""
    assert parse_display_date("   ").year is None


def test_unknown_date_string():
    d = parse_display_date("Unknown")
    # Nothing recognized; the text is kept for display
    assert d.raw == "Unknown"
    assert not d.known


def test_sort_key_orders_unknown_last():
    keys = sorted(
        [parse_display_date(s) for s in ["Unknown", "1950", "August 6, 1977", "June 1950"]],
        key=lambda d: d.sort_key(),
    )
    assert [d.raw for d in keys] == ["1950", "June 1950", "August 6, 1977", "Unknown"]


def test_format_year():
    assert format_year(parse_display_date("January 25, 1927")) == "1927"
    assert format_year(parse_display_date("circa 1984")) == "c. 1984"
    assert format_year(parse_display_date("after 1750")) == "aft. 1750"
    assert format_year(parse_display_date("December 13")) == ""
