from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.transforms.formatting import NOT_AVAILABLE, format_languages
from src.utils.nested import dig

FLAT_FIELDS = ("name", "region", "capital", "languages", "population", "area", "flagUrl")


def empty_country() -> dict[str, Any]:
    return {
        "name": NOT_AVAILABLE,
        "region": NOT_AVAILABLE,
        "capital": NOT_AVAILABLE,
        "languages": NOT_AVAILABLE,
        "population": NOT_AVAILABLE,
        "area": NOT_AVAILABLE,
        "flagUrl": "",
    }


def _measure(country: Mapping[str, Any], key: str) -> Any:
    # Numbers are kept as-is (0 included) so the table can sort/sum them.
    value = country.get(key)
    return NOT_AVAILABLE if value is None else value


def flatten_country(country: Any) -> dict[str, Any]:
    """
    REST Countries record -> flat table row.

    Expected record schema (subset):
      - name.common
      - region
      - capital[0]
      - languages.{code: name}
      - population, area
      - flags.png

    Never raises: anything that is not a mapping yields the all-"N/A" row,
    and every missing field falls back on its own. flagUrl falls back to ""
    rather than "N/A".
    """
    if not isinstance(country, Mapping):
        return empty_country()

    capitals = country.get("capital")
    capital = dig(capitals, 0) if isinstance(capitals, (list, tuple)) else None

    return {
        "name": dig(country, "name", "common") or NOT_AVAILABLE,
        "region": country.get("region") or NOT_AVAILABLE,
        "capital": capital or NOT_AVAILABLE,
        "languages": format_languages(country.get("languages")),
        "population": _measure(country, "population"),
        "area": _measure(country, "area"),
        "flagUrl": dig(country, "flags", "png") or "",
    }


def flatten_countries(countries: Any) -> list[dict[str, Any]]:
    """
    Batch variant of flatten_country: one row per input item, same order.
    Input that is not a list/tuple gives [].
    """
    if not isinstance(countries, (list, tuple)):
        return []

    return [flatten_country(c) for c in countries]
