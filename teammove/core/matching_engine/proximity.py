"""
Proximity between two addresses: same city, same zone, or other.
"""

from typing import Optional

from teammove.core.matching_engine.locality import ZONE_LENGTH, extract_city, extract_zone
from teammove.domain.models import OTHER, SAME_CITY, SAME_ZONE

# Coarse placeholder distances (km) by postal code tier
SAME_CODE_KM = 0
SAME_ZONE_KM = 30
OTHER_ZONE_KM = 100


def _same_token(a: Optional[str], b: Optional[str]) -> bool:
    return bool(a) and bool(b) and a == b


def is_same_city(address_a: str, address_b: str) -> bool:
    return _same_token(extract_city(address_a), extract_city(address_b))


def is_same_zone(address_a: str, address_b: str) -> bool:
    return _same_token(extract_zone(address_a), extract_zone(address_b))


def classify_proximity(
    city_a: Optional[str],
    zone_a: Optional[str],
    city_b: Optional[str],
    zone_b: Optional[str],
) -> str:
    """Tier from already-extracted tokens. City wins over zone."""
    if _same_token(city_a, city_b):
        return SAME_CITY
    if _same_token(zone_a, zone_b):
        return SAME_ZONE
    return OTHER


def estimate_distance(postal_code_a: str, postal_code_b: str) -> int:
    """
    Rough km estimate between two postal codes: 0 / 30 / 100.
    Not a real distance; only the three tiers.
    """
    if postal_code_a == postal_code_b:
        return SAME_CODE_KM
    if postal_code_a[:ZONE_LENGTH] == postal_code_b[:ZONE_LENGTH]:
        return SAME_ZONE_KM
    return OTHER_ZONE_KM
