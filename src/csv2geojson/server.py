"""FastAPI server for CSV to GeoJSON conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query, UploadFile
from fastapi.responses import Response
from pydantic import ValidationError

from .converter import build_feature_collection
from .errors import CsvParseError
from .models import DEFAULT_GEO_COLUMNS
from .reader import read_text

logger = logging.getLogger(__name__)

app = FastAPI(title="CSV to GeoJSON", version="0.1.0")

GEOJSON_MEDIA_TYPE = "application/geo+json"


@app.post("/convert")
async def convert_csv(
    file: UploadFile,
    name: str | None = Query(None),
    geo_columns: list[str] = Query([]),
    delimiter: str | None = Query(None),
    header_offset: int = Query(0, ge=0),
    lat_lon_order: bool = Query(False),
    default_geo_columns: list[str] = Query([]),
):
    """Convert an uploaded CSV file to a GeoJSON FeatureCollection.

    ``geo_columns`` and ``default_geo_columns`` may be repeated. An empty
    ``default_geo_columns`` keeps the built-in candidate list.
    """
    content = await file.read()
    if not content.strip():
        raise HTTPException(status_code=400, detail="Uploaded CSV file is empty")

    try:
        collection = build_feature_collection(
            read_text(content),
            name=name,
            geo_columns=geo_columns,
            delimiter=delimiter,
            header_offset=header_offset,
            lat_lon_order=lat_lon_order,
            default_geo_columns=default_geo_columns or DEFAULT_GEO_COLUMNS,
        )
    except CsvParseError as e:
        raise HTTPException(status_code=400, detail=f"Malformed CSV: {e}") from e
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=[err["msg"] for err in e.errors()]) from e

    logger.info("Converted %s: %d features", file.filename, len(collection.features))

    stem = Path(file.filename or "features").stem
    return Response(
        content=collection.to_geojson(),
        media_type=GEOJSON_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{stem}.geojson"'},
    )


@app.get("/defaults")
async def default_columns() -> list[str]:
    """List the column names searched when no geo columns are given."""
    return list(DEFAULT_GEO_COLUMNS)
