"""
Default configuration for the application layer (public links, plans, logging, CORS).
One place so API, use cases and tests read the same values.
"""

import os

APP_URL = os.environ.get("TEAMMOVE_APP_URL", "http://localhost:3000").rstrip("/")

DEFAULT_PLAN = "decouverte"

# Public link: "<slug>-<suffix>"
PUBLIC_LINK_MAX_SLUG = 50
PUBLIC_LINK_SUFFIX_LEN = 6

MIN_EVENT_NAME_LEN = 3
MIN_EVENT_LOCATION_LEN = 5

LOG_LEVEL = os.environ.get("TEAMMOVE_LOG_LEVEL", "INFO")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("TEAMMOVE_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]


def public_url(public_link: str) -> str:
    return f"{APP_URL}/join/{public_link}"
