"""Geo column resolution against a CSV header, case-insensitive."""

from __future__ import annotations

from collections.abc import Iterable

MAX_GEO_COLUMNS = 2


def normalize(column: str) -> str:
    return column.strip().lower()


def build_lookup(header: list[str]) -> dict[str, str]:
    """Map normalized column names to the header's original names.

    When two columns normalize to the same key the later one wins.
    """
    return {normalize(column): column for column in header}


def resolve_explicit_columns(names: Iterable[str], lookup: dict[str, str]) -> list[str]:
    """Resolve user-supplied geo columns, keeping their order. Unknown names are dropped."""
    resolved: list[str] = []
    for name in names:
        column = lookup.get(normalize(name))
        if column is not None:
            resolved.append(column)
    return resolved


def detect_default_columns(defaults: Iterable[str], lookup: dict[str, str]) -> list[str]:
    """Pick at most two geo columns by scanning ``defaults`` in order."""
    resolved: list[str] = []
    for name in defaults:
        if len(resolved) >= MAX_GEO_COLUMNS:
            break
        column = lookup.get(normalize(name))
        if column is not None:
            resolved.append(column)
    return resolved


def resolve_geo_columns(
    header: list[str],
    geo_columns: Iterable[str] | None,
    defaults: Iterable[str],
) -> list[str]:
    """Return the geo columns for ``header``: the explicit list if given, else auto-detected."""
    lookup = build_lookup(header)
    explicit = list(geo_columns or [])
    if explicit:
        return resolve_explicit_columns(explicit, lookup)
    return detect_default_columns(defaults, lookup)
