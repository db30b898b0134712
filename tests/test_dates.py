from datetime import date

import pytest

from underwriting.utils.dates import MalformedDate, add_years, full_years_between, resolve_date


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1995-05-20T00:00:00+03:00", date(1995, 5, 20)),
        ("1995-05-20T23:59:59-05:00", date(1995, 5, 20)),
        ("1995-05-20T10:15Z", date(1995, 5, 20)),
        ("2000-02-29T12:00:00.123+00:00", date(2000, 2, 29)),
    ],
)
def test_resolve_offset_date_time(text, expected):
    assert resolve_date(text) == expected


def test_local_date_is_not_shifted_to_utc():
    # 01:00 at +03:00 is still the previous day in UTC
    assert resolve_date("1995-05-20T01:00:00+03:00") == date(1995, 5, 20)


@pytest.mark.parametrize(
    "text",
    [
        "1995-05-20",
        "1995-05-20T00:00:00",
        "20.05.1995",
        "19950520T000000+0300",
        "1995-05-20T24:00:00+03:00",
        "1995-05-20T24:00+03:00",
        "1995-05-20T00:00:00+03:00:00",
        "1995-13-01T00:00:00+03:00",
        "1995-02-30T00:00:00+03:00",
        "",
        None,
        19950520,
    ],
)
def test_resolve_rejects_other_shapes(text):
    with pytest.raises(MalformedDate) as exc_info:
        resolve_date(text)
    assert exc_info.value.value == text


def test_full_years_between_counts_only_passed_birthdays():
    assert full_years_between(date(2000, 10, 20), date(2026, 10, 19)) == 25
    assert full_years_between(date(2000, 10, 19), date(2026, 10, 19)) == 26


def test_add_years_clamps_leap_day():
    assert add_years(date(2000, 2, 29), 1) == date(2001, 2, 28)
    assert add_years(date(2000, 2, 29), 4) == date(2004, 2, 29)


def test_midnight_as_hour_twenty_four_is_not_rolled_over():
    # would otherwise move a passport issued the day before a milestone onto it
    with pytest.raises(MalformedDate):
        resolve_date("2016-05-19T24:00:00+03:00")
    assert resolve_date("2016-05-19T23:59:59+03:00") == date(2016, 5, 19)
