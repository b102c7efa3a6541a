"""
API router. Calls application use cases only. No business logic.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Header, HTTPException

from teammove.api.schemas import (
    BookingCreateRequest,
    BookingRespondRequest,
    BookingSchema,
    CompanyCreateRequest,
    CompanySchema,
    EventCreateRequest,
    EventStatsSchema,
    EventUpdateRequest,
    JoinEventRequest,
    MatchRequest,
    MatchSchema,
    RideCreateRequest,
    RideSchema,
)
from teammove.application.use_cases import companies, events, join, rides
from teammove.domain.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    PlanLimitError,
    TeamMoveError,
)
from teammove.domain.models import Company

logger = logging.getLogger(__name__)

router = APIRouter()

_STATUS_BY_ERROR = (
    (AuthError, 401),
    (PlanLimitError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValueError, 400),
)


def _http_error(e: Exception) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(e, error_type):
            return HTTPException(status_code=status_code, detail=str(e))
    logger.exception("unexpected error")
    return HTTPException(status_code=500, detail=str(e))


def current_company(x_company_id: str | None = Header(default=None)) -> Company:
    """Identity of the calling company (token verification happens upstream)."""
    try:
        return companies.get_active_company(x_company_id)
    except TeamMoveError as e:
        raise _http_error(e)


# --- Companies ---


@router.post("/companies", response_model=CompanySchema, status_code=201)
def post_company(request: CompanyCreateRequest) -> CompanySchema:
    try:
        company = companies.register_company(**request.model_dump())
        return CompanySchema(**asdict(company))
    except Exception as e:
        raise _http_error(e)


# --- Events ---


@router.get("/events")
def get_events(company: Company = Depends(current_company)) -> dict:
    """GET /events — company events, newest first, with participant stats."""
    try:
        return {"events": events.list_events(company)}
    except Exception as e:
        raise _http_error(e)


@router.post("/events", status_code=201)
def post_event(request: EventCreateRequest, company: Company = Depends(current_company)) -> dict:
    """
    POST /events

    Plan limit reached -> 403. Invitations are recorded as pending.
    Returns the event with public_url and invitations_sent.
    """
    try:
        return {"event": events.create_event(company, **request.model_dump())}
    except Exception as e:
        raise _http_error(e)


@router.get("/events/{event_id}")
def get_event(event_id: str, company: Company = Depends(current_company)) -> dict:
    try:
        return {"event": events.get_event(company, event_id)}
    except Exception as e:
        raise _http_error(e)


@router.put("/events/{event_id}")
def put_event(
    event_id: str,
    request: EventUpdateRequest,
    company: Company = Depends(current_company),
) -> dict:
    try:
        event = events.update_event(company, event_id, request.model_dump(exclude_unset=True))
        return {"event": asdict(event)}
    except Exception as e:
        raise _http_error(e)


@router.delete("/events/{event_id}")
def delete_event(event_id: str, company: Company = Depends(current_company)) -> dict:
    try:
        events.delete_event(company, event_id)
        return {"status": "deleted", "event_id": event_id}
    except Exception as e:
        raise _http_error(e)


@router.get("/events/{event_id}/stats", response_model=EventStatsSchema)
def get_event_stats(event_id: str, company: Company = Depends(current_company)) -> EventStatsSchema:
    try:
        return EventStatsSchema(**asdict(events.event_stats(company, event_id)))
    except Exception as e:
        raise _http_error(e)


# --- Public join flow ---


@router.get("/join/{public_link}")
def get_public_event(public_link: str) -> dict:
    try:
        event = join.get_public_event(public_link)
        return {
            "event": {
                "id": event.id,
                "name": event.name,
                "date": event.date,
                "time": event.time,
                "location": event.location,
            }
        }
    except Exception as e:
        raise _http_error(e)


@router.post("/join/{public_link}", status_code=201)
def post_join(public_link: str, request: JoinEventRequest) -> dict:
    """Registers a participant; a driver sending seats also gets a ride."""
    try:
        participant, ride = join.join_event(public_link, **request.model_dump())
        return {
            "participant": asdict(participant),
            "ride": asdict(ride) if ride is not None else None,
        }
    except Exception as e:
        raise _http_error(e)


# --- Rides & matching (scoped to the calling company's events) ---


@router.post("/events/{event_id}/rides", response_model=RideSchema, status_code=201)
def post_ride(
    event_id: str,
    request: RideCreateRequest,
    company: Company = Depends(current_company),
) -> RideSchema:
    try:
        events.get_company_event(company, event_id)
        ride = rides.offer_ride(event_id, **request.model_dump())
        return RideSchema(**asdict(ride))
    except Exception as e:
        raise _http_error(e)


@router.get("/events/{event_id}/rides", response_model=list[RideSchema])
def get_rides(event_id: str, company: Company = Depends(current_company)) -> list[RideSchema]:
    try:
        events.get_company_event(company, event_id)
        return [RideSchema(**asdict(r)) for r in rides.list_rides(event_id)]
    except Exception as e:
        raise _http_error(e)


@router.post("/events/{event_id}/matches", response_model=list[MatchSchema])
def post_matches(
    event_id: str,
    request: MatchRequest,
    company: Company = Depends(current_company),
) -> list[MatchSchema]:
    """
    POST /events/{event_id}/matches

    Drivers with free seats, ranked same_city, same_zone, other.
    """
    try:
        events.get_company_event(company, event_id)
        matches = rides.find_matches(
            event_id, passenger_id=request.passenger_id, address=request.address
        )
        return [MatchSchema(**asdict(m)) for m in matches]
    except Exception as e:
        raise _http_error(e)


# --- Bookings ---


@router.post("/rides/{ride_id}/bookings", response_model=BookingSchema, status_code=201)
def post_booking(
    ride_id: str,
    request: BookingCreateRequest,
    company: Company = Depends(current_company),
) -> BookingSchema:
    try:
        rides.get_company_ride(company, ride_id)
        booking = rides.request_booking(ride_id, request.passenger_id)
        return BookingSchema(**asdict(booking))
    except Exception as e:
        raise _http_error(e)


@router.post("/bookings/{booking_id}/respond", response_model=BookingSchema)
def post_booking_respond(
    booking_id: str,
    request: BookingRespondRequest,
    company: Company = Depends(current_company),
) -> BookingSchema:
    try:
        rides.get_company_booking(company, booking_id)
        booking = rides.respond_booking(booking_id, request.response)
        return BookingSchema(**asdict(booking))
    except Exception as e:
        raise _http_error(e)


@router.post("/bookings/{booking_id}/cancel", response_model=BookingSchema)
def post_booking_cancel(booking_id: str, company: Company = Depends(current_company)) -> BookingSchema:
    try:
        rides.get_company_booking(company, booking_id)
        booking = rides.cancel_booking(booking_id)
        return BookingSchema(**asdict(booking))
    except Exception as e:
        raise _http_error(e)
