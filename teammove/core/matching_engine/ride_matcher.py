"""
Ride matcher. Passenger address + candidate rides -> MatchRecords ranked
same_city, then same_zone, then other. Stable within a tier, no I/O.
"""

import logging
from typing import Iterable, List

from teammove.core.matching_engine.locality import extract_city, extract_zone
from teammove.core.matching_engine.proximity import classify_proximity
from teammove.domain.models import PROXIMITY_TIERS, CandidateRide, MatchRecord

logger = logging.getLogger(__name__)

_TIER_RANK = {tier: i for i, tier in enumerate(PROXIMITY_TIERS)}


def match_passenger_with_drivers(
    passenger_address: str,
    rides: Iterable[CandidateRide],
) -> List[MatchRecord]:
    """
    1. Extract passenger city/zone once.
    2. Skip rides without available seats.
    3. Classify each remaining ride (same_city > same_zone > other).
    4. Stable sort by tier; input order is kept inside a tier.
    """
    passenger_city = extract_city(passenger_address)
    passenger_zone = extract_zone(passenger_address)

    matches: List[MatchRecord] = []
    for ride in rides:
        if ride.available_seats <= 0:
            continue
        tier = classify_proximity(
            passenger_city,
            passenger_zone,
            extract_city(ride.departure_address),
            extract_zone(ride.departure_address),
        )
        matches.append(
            MatchRecord(
                ride_id=ride.id,
                driver_id=ride.participant_id,
                driver_name=f"{ride.first_name} {ride.last_name}",
                distance=tier,
                available_seats=ride.available_seats,
            )
        )

    # sorted() is stable
    ranked = sorted(matches, key=lambda m: _TIER_RANK[m.distance])
    logger.debug(
        "matched %d rides for passenger city=%r zone=%r", len(ranked), passenger_city, passenger_zone
    )
    return ranked
