"""CSV reading: header extraction at an offset and record mapping.

Tokenizing is left to the stdlib ``csv`` module in strict mode; this module adds
header offset handling and turns structural problems into ``CsvParseError``.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import BinaryIO

from .errors import CsvParseError

DEFAULT_DELIMITER = ","


def read_csv(
    csv_text: str,
    delimiter: str | None = None,
    header_offset: int = 0,
) -> tuple[list[str], list[dict[str, str]]]:
    """Split CSV text into a header and a list of records.

    Args:
        csv_text: Raw CSV content.
        delimiter: Field separator, ``,`` when not given.
        header_offset: Zero-based index of the header row. Rows before it are
            discarded; data records start right after it.

    Returns:
        ``(header, records)`` where each record maps header names to raw cell strings.

    Raises:
        CsvParseError: On unterminated quotes, a missing or blank header row,
            duplicate header names, or a row whose field count differs from the header's.
    """
    if header_offset < 0:
        raise ValueError("header_offset must be >= 0")

    reader = csv.reader(
        io.StringIO(csv_text.removeprefix("\ufeff"), newline=""),
        delimiter=delimiter or DEFAULT_DELIMITER,
        strict=True,
    )

    header: list[str] | None = None
    records: list[dict[str, str]] = []
    try:
        for row_idx, row in enumerate(reader):
            if row_idx < header_offset:
                continue
            if header is None:
                header = _check_header(row, reader.line_num)
                continue
            if not row:
                # blank line
                continue
            if len(row) != len(header):
                raise CsvParseError(
                    f"expected {len(header)} fields, found {len(row)}", line=reader.line_num
                )
            records.append(dict(zip(header, row)))
    except csv.Error as e:
        raise CsvParseError(str(e), line=reader.line_num) from e

    if header is None:
        raise CsvParseError(f"no header row at offset {header_offset}")

    return header, records


def _check_header(row: list[str], line: int) -> list[str]:
    if not row:
        raise CsvParseError("header row is empty", line=line)
    seen: set[str] = set()
    for column in row:
        if column in seen:
            raise CsvParseError(f"duplicate header column {column!r}", line=line)
        seen.add(column)
    return row


def read_text(file: str | Path | bytes | BinaryIO) -> str:
    """Load CSV text from a path, raw bytes, or a binary file object (UTF-8, BOM tolerated)."""
    if isinstance(file, (str, Path)):
        data = Path(file).read_bytes()
    elif isinstance(file, bytes):
        data = file
    else:
        data = file.read()
    return data.decode("utf-8-sig", errors="replace")
