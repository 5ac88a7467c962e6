"""Exceptions raised by the CSV to GeoJSON converter."""

from __future__ import annotations


class Csv2GeoJsonError(Exception):
    """Base class for converter errors."""


class CsvParseError(Csv2GeoJsonError, ValueError):
    """The CSV input is malformed (unterminated quotes, ragged rows, bad header)."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
