"""
API request/response schemas. Pydantic only in api layer.
"""

from typing import Literal

from pydantic import BaseModel, Field


class CompanyCreateRequest(BaseModel):
    name: str
    email: str
    company_type: Literal["club", "pme", "grande_entreprise"] = "club"
    plan: Literal["decouverte", "essentiel", "pro", "premium"] = "decouverte"


class CompanySchema(BaseModel):
    id: str
    name: str
    email: str
    company_type: str
    plan: str
    subscription_status: str
    events_created: int
    is_active: bool


class EventCreateRequest(BaseModel):
    name: str = Field(min_length=3)
    type: Literal["ponctuel", "recurrent"]
    event_type_category: str | None = None
    date: str  # "YYYY-MM-DD"
    time: str  # "HH:MM"
    duration: int | None = None
    location: str = Field(min_length=5)
    invited_emails: list[str] | None = None


class EventUpdateRequest(BaseModel):
    """Only the fields sent are applied."""
    name: str | None = Field(default=None, min_length=3)
    type: Literal["ponctuel", "recurrent"] | None = None
    event_type_category: str | None = None
    date: str | None = None
    time: str | None = None
    duration: int | None = None
    location: str | None = Field(default=None, min_length=5)


class EventStatsSchema(BaseModel):
    participants: dict
    rides: dict
    bookings: dict


class JoinEventRequest(BaseModel):
    first_name: str
    last_name: str
    email: str
    role: Literal["driver", "passenger"]
    departure_address: str | None = None
    seats: int | None = Field(default=None, ge=1)  # drivers only


class RideCreateRequest(BaseModel):
    participant_id: str
    departure_address: str
    seats: int = Field(ge=1)
    destination_address: str | None = None
    departure_date: str | None = None
    departure_time: str | None = None
    wants_compensation: bool = False
    price_per_km: float = 0.0


class RideSchema(BaseModel):
    id: str
    participant_id: str
    event_id: str
    departure_address: str
    destination_address: str
    departure_date: str
    departure_time: str
    available_seats: int
    total_seats: int
    wants_compensation: bool
    price_per_km: float
    city: str | None = None
    zone: str | None = None
    status: str


class MatchRequest(BaseModel):
    passenger_id: str | None = None
    address: str | None = None  # when sent, overrides the passenger address


class MatchSchema(BaseModel):
    ride_id: str
    driver_id: str
    driver_name: str
    distance: Literal["same_city", "same_zone", "other"]
    available_seats: int


class BookingCreateRequest(BaseModel):
    passenger_id: str


class BookingRespondRequest(BaseModel):
    response: Literal["confirmed", "rejected"]


class BookingSchema(BaseModel):
    id: str
    ride_id: str
    passenger_id: str
    status: str
