"""Launch the CSV to GeoJSON FastAPI server."""

import logging

import uvicorn


def main():
    logging.basicConfig(level=logging.INFO)
    uvicorn.run("csv2geojson.server:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    main()
