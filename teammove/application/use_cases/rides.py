"""
Rides, driver matching and bookings. No FastAPI.

Booking lifecycle: pending -> confirmed | rejected; pending/confirmed -> cancelled.
Confirming takes one seat, cancelling a confirmed booking gives it back.
"""

import logging
from typing import Optional

from teammove.application.use_cases.events import get_company_event
from teammove.core.matching_engine.locality import extract_city, extract_zone
from teammove.core.matching_engine.ride_matcher import match_passenger_with_drivers
from teammove.domain.errors import ConflictError, NotFoundError, ValidationError
from teammove.domain.models import Booking, Company, MatchRecord, Participant, Ride
from teammove.infrastructure.ride_loader import active_rides_for_event
from teammove.infrastructure.store import (
    IN_MEMORY_BOOKINGS,
    IN_MEMORY_EVENTS,
    IN_MEMORY_PARTICIPANTS,
    IN_MEMORY_RIDES,
    generate_id,
    now_iso,
)

logger = logging.getLogger(__name__)

ALLOWED_BOOKING_RESPONSES = {"confirmed", "rejected"}


def _get_participant(event_id: str, participant_id: str) -> Participant:
    participant = IN_MEMORY_PARTICIPANTS.get(participant_id)
    if participant is None or participant.event_id != event_id:
        raise NotFoundError("Participant not found for this event")
    return participant


def _get_ride(ride_id: str) -> Ride:
    ride = IN_MEMORY_RIDES.get(ride_id)
    if ride is None:
        raise NotFoundError("Ride not found")
    return ride


def _get_booking(booking_id: str) -> Booking:
    booking = IN_MEMORY_BOOKINGS.get(booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


def get_company_ride(company: Company, ride_id: str) -> Ride:
    """Ride of an event owned by the company; any other ride is reported as missing."""
    ride = _get_ride(ride_id)
    get_company_event(company, ride.event_id)
    return ride


def get_company_booking(company: Company, booking_id: str) -> Booking:
    booking = _get_booking(booking_id)
    get_company_ride(company, booking.ride_id)
    return booking


def offer_ride(
    event_id: str,
    participant_id: str,
    departure_address: str,
    seats: int,
    destination_address: Optional[str] = None,
    departure_date: Optional[str] = None,
    departure_time: Optional[str] = None,
    wants_compensation: bool = False,
    price_per_km: float = 0.0,
) -> Ride:
    """
    A driver offers seats. Destination, date and time default to the event ones.
    """
    event = IN_MEMORY_EVENTS.get(event_id)
    if event is None:
        raise NotFoundError("Event not found")
    if event.status != "active":
        raise ConflictError(f"Event is {event.status}, rides are closed")
    driver = _get_participant(event_id, participant_id)
    if driver.role != "driver":
        raise ValidationError("Only drivers can offer rides")
    if seats < 1:
        raise ValidationError("seats must be at least 1")
    if not departure_address.strip():
        raise ValidationError("departure_address is required")

    now = now_iso()
    ride = Ride(
        id=generate_id(),
        participant_id=driver.id,
        event_id=event.id,
        departure_address=departure_address,
        destination_address=destination_address or event.location,
        departure_date=departure_date or event.date,
        departure_time=departure_time or event.time,
        available_seats=seats,
        total_seats=seats,
        wants_compensation=wants_compensation,
        price_per_km=price_per_km,
        city=extract_city(departure_address),
        zone=extract_zone(departure_address),
        created_at=now,
        updated_at=now,
    )
    IN_MEMORY_RIDES[ride.id] = ride
    logger.info("ride offered id=%s event=%s seats=%d", ride.id, event.id, seats)
    return ride


def list_rides(event_id: str) -> list[Ride]:
    if event_id not in IN_MEMORY_EVENTS:
        raise NotFoundError("Event not found")
    return [r for r in IN_MEMORY_RIDES.values() if r.event_id == event_id]


def find_matches(
    event_id: str,
    passenger_id: Optional[str] = None,
    address: Optional[str] = None,
) -> list[MatchRecord]:
    """
    Ranked drivers for a passenger of the event. The passenger's own departure
    address is used unless an explicit address is given.
    """
    if event_id not in IN_MEMORY_EVENTS:
        raise NotFoundError("Event not found")
    if address is None:
        if passenger_id is None:
            raise ValidationError("passenger_id or address is required")
        address = _get_participant(event_id, passenger_id).departure_address or ""

    snapshot = active_rides_for_event(event_id)
    return match_passenger_with_drivers(address, snapshot)


def request_booking(ride_id: str, passenger_id: str) -> Booking:
    ride = _get_ride(ride_id)
    passenger = _get_participant(ride.event_id, passenger_id)
    if passenger.role != "passenger":
        raise ValidationError("Only passengers can book a seat")
    if ride.status != "active":
        raise ConflictError("Ride is not active")
    if ride.available_seats <= 0:
        raise ConflictError("No seats available on this ride")
    for b in IN_MEMORY_BOOKINGS.values():
        if b.ride_id == ride.id and b.passenger_id == passenger.id and b.status != "cancelled":
            raise ConflictError("Passenger already has a booking on this ride")

    now = now_iso()
    booking = Booking(
        id=generate_id(),
        ride_id=ride.id,
        passenger_id=passenger.id,
        created_at=now,
        updated_at=now,
    )
    IN_MEMORY_BOOKINGS[booking.id] = booking
    logger.info("booking requested id=%s ride=%s", booking.id, ride.id)
    return booking


def respond_booking(booking_id: str, response: str) -> Booking:
    """Driver accepts or rejects a pending booking."""
    if response not in ALLOWED_BOOKING_RESPONSES:
        raise ValidationError(
            f"response must be one of {sorted(ALLOWED_BOOKING_RESPONSES)}, got {response!r}"
        )
    booking = _get_booking(booking_id)
    if booking.status != "pending":
        raise ConflictError(f"Booking is {booking.status}, not pending")

    ride = _get_ride(booking.ride_id)
    if response == "confirmed":
        if ride.available_seats <= 0:
            raise ConflictError("No seats available on this ride")
        ride.available_seats -= 1
        ride.updated_at = now_iso()

    booking.status = response
    booking.updated_at = now_iso()
    logger.info("booking %s id=%s ride=%s", response, booking.id, ride.id)
    return booking


def cancel_booking(booking_id: str) -> Booking:
    booking = _get_booking(booking_id)
    if booking.status not in ("pending", "confirmed"):
        raise ConflictError(f"Booking is already {booking.status}")

    if booking.status == "confirmed":
        ride = _get_ride(booking.ride_id)
        ride.available_seats += 1
        ride.updated_at = now_iso()

    booking.status = "cancelled"
    booking.updated_at = now_iso()
    logger.info("booking cancelled id=%s", booking.id)
    return booking
