"""Constants for the TfNSW trip planner adapter.

API documentation: https://opendata.transport.nsw.gov.au/ (Trip Planner APIs)
Authentication: ``Authorization: apikey <key>`` header.
"""

TRIP_PATH = "/trip"
STOP_FINDER_PATH = "/stop_finder"

API_VERSION = "10.2.1.42"

# Shared by every request
BASE_PARAMS = {
    "outputFormat": "rapidJSON",
    "coordOutputFormat": "EPSG:4326",
    "version": API_VERSION,
}

# Means of transport excluded from trip planning; the board only shows rail
EXCLUDED_MEANS = {
    "exclMOT_4": "1",  # light rail
    "exclMOT_5": "1",  # bus
    "exclMOT_7": "1",  # coach
    "exclMOT_9": "1",  # ferry
    "exclMOT_11": "1",  # school bus
}

STOP_LOCATION_TYPE = "stop"
