# ==========================================
# IN-MEMORY STORE
# ------------------------------------------
# Holds companies, events, participants,
# rides, bookings and invitations keyed by id.
# Volatile: resets when the service restarts.
# A real database replaces this module in
# production; use cases only go through it.
# ==========================================

import uuid
from datetime import datetime, timezone

IN_MEMORY_COMPANIES = {}
IN_MEMORY_EVENTS = {}
IN_MEMORY_PARTICIPANTS = {}
IN_MEMORY_RIDES = {}
IN_MEMORY_BOOKINGS = {}
IN_MEMORY_INVITATIONS = []  # list[EventInvitation]

_ALL_TABLES = (
    IN_MEMORY_COMPANIES,
    IN_MEMORY_EVENTS,
    IN_MEMORY_PARTICIPANTS,
    IN_MEMORY_RIDES,
    IN_MEMORY_BOOKINGS,
)


def generate_id() -> str:
    """16 hex chars, same shape as the ids issued by the persistent store."""
    return uuid.uuid4().hex[:16]


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def reset_store() -> None:
    """Empty every table in place (tests, demo resets)."""
    for table in _ALL_TABLES:
        table.clear()
    IN_MEMORY_INVITATIONS.clear()
