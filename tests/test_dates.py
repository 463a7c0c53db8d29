from datetime import date, datetime
import logging

import pytest

from huiswerk.parsers.dates import DeadlineResolver, format_date, parse_deadline, resolve_reference_date


@pytest.mark.parametrize(
    "text, expected",
    [
        ("vandaag", date(2024, 3, 14)),
        ("inleveren morgen", date(2024, 3, 15)),
        ("Overmorgen af", date(2024, 3, 16)),
        ("overmorgenochtend", date(2024, 3, 16)),
        ("morgenochtend inleveren", date(2024, 3, 15)),
        ("VANDAAG!", date(2024, 3, 14)),
    ],
)
def test_relative_days(reference: date, text: str, expected: date) -> None:
    assert parse_deadline(text, reference) == expected


def test_weekday_resolves_to_next_occurrence(reference: date) -> None:
    assert parse_deadline("werkblad af voor vrijdag", reference) == date(2024, 3, 15)
    assert parse_deadline("maandag", reference) == date(2024, 3, 18)
    assert parse_deadline("zondag", reference) == date(2024, 3, 17)


def test_weekday_equal_to_today_means_next_week(reference: date) -> None:
    assert parse_deadline("donderdag", reference) == date(2024, 3, 21)


def test_volgende_week_adds_seven_days(reference: date) -> None:
    assert parse_deadline("vrijdag volgende week", reference) == date(2024, 3, 22)
    assert parse_deadline("volgende week maandag", reference) == date(2024, 3, 25)


def test_weekday_abbreviation_is_matched_as_word(reference: date) -> None:
    assert parse_deadline("inleveren op di", reference) == date(2024, 3, 19)
    assert parse_deadline("opgaven maken", reference) is None


def test_month_name_in_the_past_rolls_over(reference: date) -> None:
    assert parse_deadline("toets op 3 januari", reference) == date(2025, 1, 3)
    assert parse_deadline("12 Mrt", reference) == date(2025, 3, 12)


def test_month_name_today_or_later_stays_in_year(reference: date) -> None:
    assert parse_deadline("14 maart", reference) == date(2024, 3, 14)
    assert parse_deadline("20 maart", reference) == date(2024, 3, 20)
    assert parse_deadline("5 oct", reference) == date(2024, 10, 5)


def test_numeric_dates(reference: date) -> None:
    assert parse_deadline("15-03", reference) == date(2024, 3, 15)
    assert parse_deadline("1/2", reference) == date(2025, 2, 1)
    assert parse_deadline("15-03-2023", reference) == date(2023, 3, 15)


def test_iso_date_keeps_explicit_year(reference: date) -> None:
    assert parse_deadline("engels: werkblad - 2024-03-15", reference) == date(2024, 3, 15)
    assert parse_deadline("2023-12-01", reference) == date(2023, 12, 1)


def test_impossible_date_is_skipped(reference: date) -> None:
    assert parse_deadline("31 februari of 5 april", reference) == date(2024, 4, 5)
    assert parse_deadline("31-02", reference) is None


def test_strategy_order(reference: date) -> None:
    assert parse_deadline("vrijdag of overmorgen", reference) == date(2024, 3, 16)
    assert parse_deadline("zaterdag 20 april", reference) == date(2024, 3, 16)


def test_no_date_phrase(reference: date) -> None:
    assert parse_deadline("Biologie", reference) is None
    assert parse_deadline("", reference) is None


def test_datetime_reference_is_reduced_to_date() -> None:
    late = datetime(2024, 3, 14, 23, 59, 59)
    assert resolve_reference_date(late) == date(2024, 3, 14)
    assert parse_deadline("morgen", late) == date(2024, 3, 15)


def test_absolute_patterns_are_ordered() -> None:
    resolver = DeadlineResolver()
    names = [pattern.name for pattern in resolver.absolute_patterns]
    assert names == ["iso", "dag-maandnaam", "dag-maand"]


def test_format_date() -> None:
    assert format_date(date(2024, 1, 3)) == "2024-01-03"


def test_leap_day_rolling_into_common_year_is_logged(reference: date, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="huiswerk.parsers.dates")
    assert parse_deadline("29 februari", reference) is None
    assert "Ongeldige datum overgeslagen" in caplog.text


def test_leap_day_later_in_year_stays() -> None:
    assert parse_deadline("29 feb", date(2024, 1, 10)) == date(2024, 2, 29)
