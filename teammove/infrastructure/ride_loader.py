"""
Ride loader. Store rows / raw dicts -> CandidateRide snapshots for the matcher.
"""

from typing import Iterable, Optional

from teammove.domain.models import CandidateRide, Participant, Ride
from teammove.infrastructure.store import IN_MEMORY_PARTICIPANTS, IN_MEMORY_RIDES


def _to_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def load_candidate_rides(raw_rides: list[dict]) -> list[CandidateRide]:
    """
    Transform raw ride dicts (ride joined with its driver) into CandidateRide.
    Expected keys: id, participant_id, first_name, last_name, departure_address,
    available_seats and optionally total_seats.
    """
    result: list[CandidateRide] = []
    for raw in raw_rides:
        total = raw.get("total_seats")
        result.append(
            CandidateRide(
                id=str(raw.get("id", "")),
                participant_id=str(raw.get("participant_id", "")),
                first_name=str(raw.get("first_name") or ""),
                last_name=str(raw.get("last_name") or ""),
                departure_address=str(raw.get("departure_address") or ""),
                available_seats=_to_int(raw.get("available_seats")),
                total_seats=_to_int(total) if total is not None else None,
            )
        )
    return result


def _candidate_from(ride: Ride, driver: Optional[Participant]) -> CandidateRide:
    return CandidateRide(
        id=ride.id,
        participant_id=ride.participant_id,
        first_name=driver.first_name if driver else "",
        last_name=driver.last_name if driver else "",
        departure_address=ride.departure_address,
        available_seats=ride.available_seats,
        total_seats=ride.total_seats,
    )


def active_rides_for_event(event_id: str) -> list[CandidateRide]:
    """Active rides of an event, in creation order, as an immutable snapshot."""
    rides: Iterable[Ride] = (
        r for r in IN_MEMORY_RIDES.values() if r.event_id == event_id and r.status == "active"
    )
    return [_candidate_from(r, IN_MEMORY_PARTICIPANTS.get(r.participant_id)) for r in rides]
