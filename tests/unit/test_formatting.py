from __future__ import annotations

from collections import OrderedDict
from decimal import Decimal

import pytest

from src.transforms.formatting import format_languages, format_number


def test_format_languages_basic() -> None:
    assert format_languages({"a": "X", "b": "Y"}) == "X, Y"
    assert format_languages({"eng": "English"}) == "English"


def test_format_languages_preserves_order() -> None:
    langs = OrderedDict([("zul", "Zulu"), ("afr", "Afrikaans"), ("eng", "English")])
    assert format_languages(langs) == "Zulu, Afrikaans, English"


@pytest.mark.parametrize("value", [None, {}, [], ["English"], "English", 0, 1.5])
def test_format_languages_not_available(value) -> None:
    assert format_languages(value) == "N/A"


def test_format_languages_none_value_joins_as_empty() -> None:
    assert format_languages({"a": "X", "b": None}) == "X, "


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (0.0, "0"),
        (7, "7"),
        (999, "999"),
        (1000, "1,000"),
        (1234567, "1,234,567"),
        (67391582, "67,391,582"),
        (-1234567, "-1,234,567"),
        (-999, "-999"),
    ],
)
def test_format_number_integers(value, expected) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.5, "0.5"),
        (1234.5, "1,234.5"),
        (1234.5678, "1,234.568"),
        (2.0, "2"),
        (0.0004, "0"),
        (1.0005, "1.001"),
        (-1234.5678, "-1,234.568"),
        (14000000.25, "14,000,000.25"),
        (Decimal("1234567.10"), "1,234,567.1"),
    ],
)
def test_format_number_fractions(value, expected) -> None:
    assert format_number(value) == expected


def test_format_number_large_float() -> None:
    assert format_number(1e21) == "1,000,000,000,000,000,000,000"


@pytest.mark.parametrize("value", [None, "", False, float("nan"), Decimal("NaN"), [], {}, object()])
def test_format_number_not_available(value) -> None:
    assert format_number(value) == "N/A"


def test_format_number_infinity() -> None:
    assert format_number(float("inf")) == "∞"
    assert format_number(float("-inf")) == "-∞"


def test_format_number_passes_strings_through() -> None:
    assert format_number("N/A") == "N/A"
    assert format_number("about 5") == "about 5"


def test_format_number_true_is_not_a_number() -> None:
    assert format_number(True) == "N/A"


def test_format_number_huge_int() -> None:
    text = format_number(10**5000)
    assert text.startswith("100,000,")
    assert text.endswith(",000")
    assert text.count(",") == 5000 // 3
    assert text.replace(",", "") == "1" + "0" * 5000
