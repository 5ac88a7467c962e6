"""CSV to GeoJSON conversion.

Each CSV data row becomes a Point feature. Coordinates come from either one
combined column (``"lon,lat"``) or a pair of columns (longitude first); every
other column is carried over as a string property.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from .columns import resolve_geo_columns
from .models import DEFAULT_GEO_COLUMNS, ConversionOptions, Feature, FeatureCollection, Point
from .reader import read_csv, read_text

logger = logging.getLogger(__name__)

# Leading decimal number, optionally signed, with optional exponent
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def to_float(value: str | None) -> float:
    """Coerce a cell to float, permissively.

    Uses the longest numeric prefix after leading whitespace, so ``"6.77 N"``
    gives 6.77. Empty, missing, non-numeric and overflowing values give 0.0.
    Never raises.
    """
    if not value:
        return 0.0
    match = _NUMBER_PREFIX.match(value)
    if match is None:
        return 0.0
    number = float(match.group(1))
    return number if math.isfinite(number) else 0.0


def get_coordinates(record: dict[str, str], geo_columns: list[str], lat_lon_order: bool = False) -> list[float]:
    """Extract the coordinate list of a record."""
    if len(geo_columns) == 1:
        coordinates = [to_float(part) for part in record[geo_columns[0]].split(",")]
        if lat_lon_order:
            coordinates.reverse()
        return coordinates
    if len(geo_columns) == 2:
        return [to_float(record[column]) for column in geo_columns]
    return []


def get_properties(record: dict[str, str], header: list[str], geo_columns: list[str]) -> dict[str, str]:
    return {column: record[column] for column in header if column not in geo_columns}


def build_feature(
    record: dict[str, str],
    header: list[str],
    geo_columns: list[str],
    lat_lon_order: bool = False,
) -> Feature:
    return Feature(
        geometry=Point(coordinates=get_coordinates(record, geo_columns, lat_lon_order)),
        properties=get_properties(record, header, geo_columns),
    )


def build_feature_collection(
    csv_text: str,
    name: str | None = None,
    geo_columns: Iterable[str] | None = None,
    delimiter: str | None = None,
    header_offset: int = 0,
    lat_lon_order: bool = False,
    default_geo_columns: Iterable[str] = DEFAULT_GEO_COLUMNS,
) -> FeatureCollection:
    """Convert CSV text to a ``FeatureCollection``.

    Args:
        csv_text: Raw CSV content.
        name: Optional collection name.
        geo_columns: Coordinate column names (any case), longitude first, or a
            single combined column. When empty, ``default_geo_columns`` are
            searched and the first two matches are used.
        delimiter: CSV field separator, ``,`` by default.
        header_offset: Index of the header row; earlier rows are skipped.
        lat_lon_order: For a single combined column, the input is latitude
            first and gets swapped to GeoJSON order.
        default_geo_columns: Candidate names for auto-detection.

    If no geo column is found the conversion still succeeds and every feature
    has empty coordinates.

    Raises:
        CsvParseError: If the CSV is malformed.
        pydantic.ValidationError: If the options are invalid.
    """
    options = ConversionOptions(
        name=name or None,
        geo_columns=list(geo_columns or []),
        delimiter=delimiter,
        header_offset=header_offset,
        lat_lon_order=lat_lon_order,
        default_geo_columns=tuple(default_geo_columns),
    )
    return _convert(csv_text, options)


def _convert(csv_text: str, options: ConversionOptions) -> FeatureCollection:
    header, records = read_csv(csv_text, options.delimiter, options.header_offset)
    geo_columns = resolve_geo_columns(header, options.geo_columns, options.default_geo_columns)

    if geo_columns:
        logger.debug("Using geo columns %s", geo_columns)
    else:
        logger.warning("No geo columns found in header %s; coordinates will be empty", header)

    features = [build_feature(record, header, geo_columns, options.lat_lon_order) for record in records]
    return FeatureCollection(name=options.name, features=features)


def convert(
    csv_text: str,
    name: str | None = None,
    geo_columns: Iterable[str] | None = None,
    delimiter: str | None = None,
    header_offset: int = 0,
    lat_lon_order: bool = False,
    default_geo_columns: Iterable[str] = DEFAULT_GEO_COLUMNS,
) -> str:
    """Convert CSV text to GeoJSON text. See ``build_feature_collection``."""
    collection = build_feature_collection(
        csv_text,
        name=name,
        geo_columns=geo_columns,
        delimiter=delimiter,
        header_offset=header_offset,
        lat_lon_order=lat_lon_order,
        default_geo_columns=default_geo_columns,
    )
    return collection.to_geojson()


def convert_file(file: str | Path | bytes | BinaryIO, **options) -> str:
    """Convert a CSV file (path, bytes, or binary file object) to GeoJSON text."""
    return convert(read_text(file), **options)
