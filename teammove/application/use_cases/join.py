"""
Public join flow: anyone holding the event link (or QR code) can register as
driver or passenger. No company identity required.
"""

import logging
from typing import Optional

from teammove.application.use_cases.events import participant_stats
from teammove.application.use_cases.rides import offer_ride
from teammove.core.matching_engine.locality import extract_city, extract_zone
from teammove.domain.errors import NotFoundError, ValidationError
from teammove.domain.models import PARTICIPANT_ROLES, Event, Participant, Ride
from teammove.domain.plans import check_can_add_participant
from teammove.infrastructure.store import (
    IN_MEMORY_COMPANIES,
    IN_MEMORY_EVENTS,
    IN_MEMORY_INVITATIONS,
    IN_MEMORY_PARTICIPANTS,
    generate_id,
    now_iso,
)

logger = logging.getLogger(__name__)


def get_public_event(public_link: str) -> Event:
    event = next((e for e in IN_MEMORY_EVENTS.values() if e.public_link == public_link), None)
    if event is None or event.status != "active":
        raise NotFoundError("Event not found")
    return event


def _accept_invitation(event_id: str, email: str) -> None:
    for invitation in IN_MEMORY_INVITATIONS:
        if (
            invitation.event_id == event_id
            and invitation.email == email
            and invitation.status == "pending"
        ):
            invitation.status = "accepted"


def join_event(
    public_link: str,
    first_name: str,
    last_name: str,
    email: str,
    role: str,
    departure_address: Optional[str] = None,
    seats: Optional[int] = None,
) -> tuple[Participant, Optional[Ride]]:
    """
    1. Resolve the event from its public link.
    2. Check the company plan participant limit and the ride inputs.
    3. Create a confirmed participant with cached city/zone.
    4. Accept a pending invitation for the same email, if any.
    5. Drivers giving seats get an active ride in the same call.
    """
    if role not in PARTICIPANT_ROLES:
        raise ValidationError(f"role must be one of {sorted(PARTICIPANT_ROLES)}")
    event = get_public_event(public_link)

    company = IN_MEMORY_COMPANIES.get(event.company_id)
    if company is None:
        raise NotFoundError("Event not found")
    check_can_add_participant(company, participant_stats(event.id)["total"])

    offers_ride = role == "driver" and bool(seats)
    if offers_ride:
        if seats < 1:
            raise ValidationError("seats must be at least 1")
        if not (departure_address or "").strip():
            raise ValidationError("departure_address is required to offer seats")

    email = email.strip().lower()
    participant = Participant(
        id=generate_id(),
        event_id=event.id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        role=role,
        departure_address=departure_address,
        city=extract_city(departure_address),
        zone=extract_zone(departure_address),
        created_at=now_iso(),
    )
    IN_MEMORY_PARTICIPANTS[participant.id] = participant
    _accept_invitation(event.id, email)
    logger.info("participant joined id=%s event=%s role=%s", participant.id, event.id, role)

    ride = None
    if offers_ride:
        ride = offer_ride(
            event.id,
            participant.id,
            departure_address=departure_address or "",
            seats=seats,
        )
    return participant, ride
