"""Constants for the ResRobot v2 journey planner adapter.

API Documentation: https://www.trafiklab.se/api/trafiklab-apis/resrobot-v21/route-planner/
"""

# Fixed query parameters: JSON response, no intermediate stop list.
RESPONSE_FORMAT = "json"
PASSLIST_DISABLED = "0"

# Only sent when the computed mask lies strictly between these bounds.
PRODUCTS_MIN_EXCLUSIVE = 1

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

RATE_LIMITER_NAME = "resrobot_api"
