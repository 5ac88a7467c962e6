"""CSV to GeoJSON FeatureCollection converter."""

from .converter import build_feature_collection, convert, convert_file, to_float
from .errors import Csv2GeoJsonError, CsvParseError
from .models import DEFAULT_GEO_COLUMNS, ConversionOptions, Feature, FeatureCollection, Point

__all__ = [
    "ConversionOptions",
    "Csv2GeoJsonError",
    "CsvParseError",
    "DEFAULT_GEO_COLUMNS",
    "Feature",
    "FeatureCollection",
    "Point",
    "build_feature_collection",
    "convert",
    "convert_file",
    "to_float",
]
