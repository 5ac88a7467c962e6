from pathlib import Path

import pytest

SAMPLEDATA = Path(__file__).parent.parent / "sampledata"


@pytest.fixture
def stations_path():
    """Comma separated, separate LAT/Lon columns, quoted fields."""
    return SAMPLEDATA / "stations.csv"


@pytest.fixture
def parking_path():
    """Semicolon separated, two title rows, combined lat,lon column."""
    return SAMPLEDATA / "parking.csv"
