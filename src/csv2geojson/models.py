"""Pydantic data models for GeoJSON output and conversion options."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_GEO_COLUMNS: tuple[str, ...] = (
    # longitude names first so detected pairs come out as [lon, lat]
    "lon",
    "lng",
    "longitude",
    "längengrad",
    "lat",
    "latitude",
    "breitengrad",
    "latlon",
    "coordinates",
    "geopoint",
    "geopunkt",
    "koordinaten",
)


class Point(BaseModel):
    """A GeoJSON Point geometry. Coordinates are empty when no geo column was found."""

    type: Literal["Point"] = "Point"
    coordinates: list[float]


class Feature(BaseModel):
    """A single CSV record as a GeoJSON Feature."""

    type: Literal["Feature"] = "Feature"
    geometry: Point
    properties: dict[str, str]


class FeatureCollection(BaseModel):
    """The converted CSV document."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    name: str | None = None
    features: list[Feature] = Field(default_factory=list)

    def to_geojson(self) -> str:
        # name is the only optional field; drop it when unset
        return self.model_dump_json(exclude_none=True)


class ConversionOptions(BaseModel):
    """Call-time options for a single conversion."""

    name: str | None = None
    geo_columns: list[str] = Field(default_factory=list)
    delimiter: str | None = None
    header_offset: int = Field(default=0, ge=0)
    lat_lon_order: bool = False
    default_geo_columns: tuple[str, ...] = DEFAULT_GEO_COLUMNS

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, v: str | None) -> str | None:
        if v is not None and len(v) != 1:
            raise ValueError("delimiter must be a single character")
        return v
