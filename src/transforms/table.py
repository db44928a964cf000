from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from src.transforms.countries import FLAT_FIELDS
from src.transforms.formatting import format_number


class CountryStats(BaseModel):
    total_countries: int = 0
    countries_with_population: int = 0
    total_population: int | float = 0
    total_area: int | float = 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def summarize_countries(rows: Iterable[dict[str, Any]]) -> CountryStats:
    """
    Aggregate figures shown under the country table.
    Only numeric population/area values are summed; "N/A" rows still count
    toward total_countries.
    """
    stats = CountryStats()
    for row in rows:
        stats.total_countries += 1
        population = row.get("population")
        if _is_number(population):
            stats.countries_with_population += 1
            stats.total_population += population
        area = row.get("area")
        if _is_number(area):
            stats.total_area += area
    return stats


def sort_countries(
    rows: Iterable[dict[str, Any]],
    column: str,
    *,
    descending: bool = False,
) -> list[dict[str, Any]]:
    """
    Sort flat rows by one column.

    Numbers sort numerically, strings case-insensitively. Values that cannot
    be compared with the rest ("N/A", "") always go last, in either direction.
    """
    if column not in FLAT_FIELDS:
        raise ValueError(f"Unknown column: {column!r} (expected one of {', '.join(FLAT_FIELDS)})")

    rows = list(rows)
    numeric = column in ("population", "area")

    def _present(row: dict[str, Any]) -> bool:
        value = row.get(column)
        if numeric:
            return _is_number(value)
        return isinstance(value, str) and value not in ("", "N/A")

    present = [r for r in rows if _present(r)]
    missing = [r for r in rows if not _present(r)]

    if numeric:
        present.sort(key=lambda r: r[column], reverse=descending)
    else:
        present.sort(key=lambda r: r[column].casefold(), reverse=descending)

    return present + missing


def render_table(rows: Iterable[dict[str, Any]]) -> str:
    headers = ("Name", "Region", "Capital", "Languages", "Population", "Area (km²)")
    lines = [
        (
            str(r.get("name", "")),
            str(r.get("region", "")),
            str(r.get("capital", "")),
            str(r.get("languages", "")),
            format_number(r.get("population")),
            format_number(r.get("area")),
        )
        for r in rows
    ]

    widths = [len(h) for h in headers]
    for line in lines:
        widths = [max(w, len(cell)) for w, cell in zip(widths, line)]

    def _fmt(cells: tuple[str, ...]) -> str:
        # text columns left-aligned, the two numeric columns right-aligned
        parts = [c.ljust(w) for c, w in zip(cells[:4], widths[:4])]
        parts += [c.rjust(w) for c, w in zip(cells[4:], widths[4:])]
        return "  ".join(parts).rstrip()

    out = [_fmt(headers), "-" * (sum(widths) + 2 * (len(widths) - 1))]
    out.extend(_fmt(line) for line in lines)
    return "\n".join(out)
