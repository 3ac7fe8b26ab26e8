"""Constants for the WSDOT Ferries API adapter.

API documentation: https://wsdot.wa.gov/traffic/api/
All endpoints require an ``apiaccesscode`` query parameter.
"""

VESSEL_LOCATIONS_PATH = "/vessels/rest/vessellocations"
TERMINAL_SAILING_SPACE_PATH = "/terminals/rest/terminalsailingspace"
SCHEDULE_TODAY_PATH = "/schedule/rest/scheduletoday/{origin_id}/{destination_id}/false"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Terminal name -> WSDOT terminal id
TERMINAL_IDS = {
    "anacortes": 1,
    "bainbridge island": 3,
    "bremerton": 4,
    "clinton": 5,
    "seattle": 7,
    "edmonds": 8,
    "fauntleroy": 9,
    "friday harbor": 10,
    "kingston": 12,
    "lopez island": 13,
    "mukilteo": 14,
    "orcas island": 15,
}
