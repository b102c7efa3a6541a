"""
Domain models. Dataclasses only. No FastAPI, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass, field
from typing import List, Optional


# Proximity tiers, in ranking order.
SAME_CITY = "same_city"
SAME_ZONE = "same_zone"
OTHER = "other"
PROXIMITY_TIERS = (SAME_CITY, SAME_ZONE, OTHER)

COMPANY_TYPES = {"club", "pme", "grande_entreprise"}
EVENT_TYPES = {"ponctuel", "recurrent"}
EVENT_STATUSES = {"active", "cancelled", "completed"}
PARTICIPANT_ROLES = {"driver", "passenger"}
RIDE_STATUSES = {"active", "completed", "cancelled"}
BOOKING_STATUSES = {"pending", "confirmed", "rejected", "cancelled"}
INVITATION_STATUSES = {"pending", "accepted", "declined"}


@dataclass
class Company:
    id: str
    name: str
    email: str
    company_type: str = "club"
    plan: str = "decouverte"
    subscription_status: str = "active"
    events_created: int = 0
    is_active: bool = True
    created_at: str = ""


@dataclass
class Event:
    id: str
    company_id: str
    name: str
    type: str
    date: str  # "YYYY-MM-DD"
    time: str  # "HH:MM"
    location: str
    public_link: str
    event_type_category: Optional[str] = None
    duration: Optional[int] = None  # minutes
    status: str = "active"
    created_at: str = ""
    updated_at: str = ""


@dataclass
class EventInvitation:
    event_id: str
    email: str
    status: str = "pending"
    invited_at: str = ""


@dataclass
class Participant:
    id: str
    event_id: str
    first_name: str
    last_name: str
    email: str
    role: str  # "driver" | "passenger"
    departure_address: Optional[str] = None
    # Locality tokens cached at join time (see core.matching_engine.locality)
    city: Optional[str] = None
    zone: Optional[str] = None
    status: str = "confirmed"
    created_at: str = ""


@dataclass
class Ride:
    id: str
    participant_id: str
    event_id: str
    departure_address: str
    destination_address: str
    departure_date: str
    departure_time: str
    available_seats: int
    total_seats: int
    wants_compensation: bool = False
    price_per_km: float = 0.0
    city: Optional[str] = None
    zone: Optional[str] = None
    status: str = "active"
    created_at: str = ""
    updated_at: str = ""


@dataclass
class Booking:
    id: str
    ride_id: str
    passenger_id: str
    status: str = "pending"
    created_at: str = ""
    updated_at: str = ""


# --- Ride matching ---


@dataclass(frozen=True)
class CandidateRide:
    """Snapshot of an active ride as read by the matcher. Never mutated."""
    id: str
    participant_id: str
    first_name: str
    last_name: str
    departure_address: str
    available_seats: int
    total_seats: Optional[int] = None


@dataclass(frozen=True)
class MatchRecord:
    ride_id: str
    driver_id: str
    driver_name: str
    distance: str  # one of PROXIMITY_TIERS
    available_seats: int


@dataclass
class EventStats:
    participants: dict = field(default_factory=dict)  # total, drivers, passengers
    rides: dict = field(default_factory=dict)  # total_rides, total_seats, available_seats
    bookings: dict = field(default_factory=dict)  # total, confirmed, pending
