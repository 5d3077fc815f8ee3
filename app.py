import os

from bikeflow.viz.app.single import (
    DEFAULT_STATIONS_FILE,
    DEFAULT_TRIPS_FILE,
    serve_traffic_map,
)

STATIONS = os.environ.get("STATIONS_JSON", str(DEFAULT_STATIONS_FILE))
TRIPS = os.environ.get("TRIPS_CSV", str(DEFAULT_TRIPS_FILE))
ID_FIELD = os.environ.get("STATION_ID_FIELD", "short_name")
TITLE = os.environ.get("TITLE", "Bike Traffic by Time of Day")

# comma-separated local GeoJSON files, e.g. Boston + Cambridge bike networks
BIKE_LANES = [p.strip() for p in os.environ.get("BIKE_LANES_GEOJSON", "").split(",") if p.strip()]


def main():
  port = int(os.environ.get("PORT", "8080"))

  serve_traffic_map(
      stations_file=STATIONS,
      trips_csv=TRIPS,
      host=os.environ.get("HOST", "0.0.0.0"),
      port=port,
      title=TITLE,
      id_field=ID_FIELD,
      bike_lanes_files=BIKE_LANES,
  )


if __name__ == "__main__":
  main()
