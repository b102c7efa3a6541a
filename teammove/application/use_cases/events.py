"""
Event use cases for a company: create (plan-gated, invitations), list, get,
update, delete (cascade), stats. No FastAPI.
"""

import logging
from dataclasses import asdict
from typing import Any, Optional

from teammove.application.config import (
    MIN_EVENT_LOCATION_LEN,
    MIN_EVENT_NAME_LEN,
    public_url,
)
from teammove.application.public_link import generate_public_link
from teammove.domain.errors import NotFoundError, ValidationError
from teammove.domain.models import EVENT_TYPES, Company, Event, EventInvitation, EventStats
from teammove.domain.plans import check_can_create_event
from teammove.infrastructure.store import (
    IN_MEMORY_BOOKINGS,
    IN_MEMORY_EVENTS,
    IN_MEMORY_INVITATIONS,
    IN_MEMORY_PARTICIPANTS,
    IN_MEMORY_RIDES,
    generate_id,
    now_iso,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "type", "event_type_category", "date", "time", "duration", "location")


def _validate_event_fields(fields: dict) -> None:
    name = fields.get("name")
    if name is not None and len(name.strip()) < MIN_EVENT_NAME_LEN:
        raise ValidationError(f"name must be at least {MIN_EVENT_NAME_LEN} characters")
    location = fields.get("location")
    if location is not None and len(location.strip()) < MIN_EVENT_LOCATION_LEN:
        raise ValidationError("location must be a complete address")
    event_type = fields.get("type")
    if event_type is not None and event_type not in EVENT_TYPES:
        raise ValidationError(f"type must be one of {sorted(EVENT_TYPES)}")


def get_company_event(company: Company, event_id: str) -> Event:
    event = IN_MEMORY_EVENTS.get(event_id)
    if event is None or event.company_id != company.id:
        raise NotFoundError("Event not found")
    return event


def participant_stats(event_id: str) -> dict:
    confirmed = [
        p for p in IN_MEMORY_PARTICIPANTS.values()
        if p.event_id == event_id and p.status == "confirmed"
    ]
    return {
        "total": len(confirmed),
        "drivers": sum(1 for p in confirmed if p.role == "driver"),
        "passengers": sum(1 for p in confirmed if p.role == "passenger"),
    }


def create_event(
    company: Company,
    name: str,
    type: str,
    date: str,
    time: str,
    location: str,
    event_type_category: Optional[str] = None,
    duration: Optional[int] = None,
    invited_emails: Optional[list[str]] = None,
) -> dict:
    """
    Creates the event if the plan allows it, bumps events_created and records
    one "pending" invitation per email. Sending the emails happens elsewhere.

    Returns:
        Event dict plus public_url and invitations_sent.
    """
    _validate_event_fields({"name": name, "type": type, "location": location})
    check_can_create_event(company)

    now = now_iso()
    event = Event(
        id=generate_id(),
        company_id=company.id,
        name=name,
        type=type,
        date=date,
        time=time,
        location=location,
        public_link=generate_public_link(name),
        event_type_category=event_type_category,
        duration=duration,
        created_at=now,
        updated_at=now,
    )
    IN_MEMORY_EVENTS[event.id] = event
    company.events_created += 1

    emails = invited_emails or []
    for email in emails:
        IN_MEMORY_INVITATIONS.append(
            EventInvitation(event_id=event.id, email=email.strip().lower(), invited_at=now)
        )
    logger.info(
        "event created id=%s company=%s invitations=%d", event.id, company.id, len(emails)
    )

    result = asdict(event)
    result["public_url"] = public_url(event.public_link)
    result["invitations_sent"] = len(emails)
    return result


def list_events(company: Company) -> list[dict]:
    """Company events, most recent date/time first, each with participant stats."""
    events = [e for e in IN_MEMORY_EVENTS.values() if e.company_id == company.id]
    events.sort(key=lambda e: (e.date, e.time), reverse=True)
    out = []
    for event in events:
        item = asdict(event)
        item["stats"] = participant_stats(event.id)
        out.append(item)
    return out


def get_event(company: Company, event_id: str) -> dict:
    event = get_company_event(company, event_id)
    participants = []
    for p in IN_MEMORY_PARTICIPANTS.values():
        if p.event_id != event_id or p.status != "confirmed":
            continue
        item = asdict(p)
        item["rides_count"] = (
            sum(1 for r in IN_MEMORY_RIDES.values() if r.participant_id == p.id)
            if p.role == "driver"
            else 0
        )
        participants.append(item)

    result = asdict(event)
    result["public_url"] = public_url(event.public_link)
    result["participants"] = participants
    return result


def update_event(company: Company, event_id: str, changes: dict[str, Any]) -> Event:
    """Partial update; keys outside UPDATABLE_FIELDS and None values are ignored."""
    event = get_company_event(company, event_id)
    fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
    _validate_event_fields(fields)
    for key, value in fields.items():
        setattr(event, key, value)
    event.updated_at = now_iso()
    return event


def delete_event(company: Company, event_id: str) -> None:
    """Removes the event and everything hanging from it; frees one plan slot."""
    event = get_company_event(company, event_id)

    ride_ids = {rid for rid, r in IN_MEMORY_RIDES.items() if r.event_id == event.id}
    for bid in [bid for bid, b in IN_MEMORY_BOOKINGS.items() if b.ride_id in ride_ids]:
        del IN_MEMORY_BOOKINGS[bid]
    for rid in ride_ids:
        del IN_MEMORY_RIDES[rid]
    for pid in [pid for pid, p in IN_MEMORY_PARTICIPANTS.items() if p.event_id == event.id]:
        del IN_MEMORY_PARTICIPANTS[pid]
    IN_MEMORY_INVITATIONS[:] = [i for i in IN_MEMORY_INVITATIONS if i.event_id != event.id]
    del IN_MEMORY_EVENTS[event.id]

    company.events_created = max(0, company.events_created - 1)
    logger.info("event deleted id=%s company=%s", event.id, company.id)


def event_stats(company: Company, event_id: str) -> EventStats:
    event = get_company_event(company, event_id)

    rides = [r for r in IN_MEMORY_RIDES.values() if r.event_id == event.id and r.status == "active"]
    event_ride_ids = {r.id for r in IN_MEMORY_RIDES.values() if r.event_id == event.id}
    bookings = [b for b in IN_MEMORY_BOOKINGS.values() if b.ride_id in event_ride_ids]

    return EventStats(
        participants=participant_stats(event.id),
        rides={
            "total_rides": len(rides),
            "total_seats": sum(r.total_seats for r in rides),
            "available_seats": sum(r.available_seats for r in rides),
        },
        bookings={
            "total": len(bookings),
            "confirmed": sum(1 for b in bookings if b.status == "confirmed"),
            "pending": sum(1 for b in bookings if b.status == "pending"),
        },
    )
