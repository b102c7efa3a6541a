"""
Locality extraction from free-text addresses. Text heuristics only, no geocoding.

Zone = 2 first digits of a 5-digit postal code (department-like prefix, not validated).
City = text after the postal code ("75001 Paris"), or the last comma segment when
there is no postal code.
"""

import re
from typing import Optional

# 5 digits not touching other digits
POSTAL_CODE_RE = re.compile(r"(?<!\d)(\d{5})(?!\d)")
ZONE_LENGTH = 2


def find_postal_code(address: Optional[str]) -> Optional[re.Match]:
    if not address:
        return None
    return POSTAL_CODE_RE.search(address)


def extract_zone(address: Optional[str]) -> Optional[str]:
    """'12345 Paris' -> '12'. None if there is no postal code."""
    match = find_postal_code(address)
    if match is None:
        return None
    return match.group(1)[:ZONE_LENGTH]


def _city_after_postal_code(address: str, match: re.Match) -> Optional[str]:
    tail = address[match.end():]
    cut = len(tail)
    for sep in (",", "-"):
        pos = tail.find(sep)
        if pos != -1 and pos < cut:
            cut = pos
    city = tail[:cut].strip().lower()
    return city or None


def _city_from_last_segment(address: str) -> Optional[str]:
    last = address.split(",")[-1].strip().lower()
    # Rare: a 5-digit run glued to something the main pattern rejected
    city = POSTAL_CODE_RE.sub("", last).strip()
    return city or None


def extract_city(address: Optional[str]) -> Optional[str]:
    """
    Returns the lower-cased city name or None.

    With a postal code the result is always taken after it, even if empty
    ("Paris 75001" -> None). The comma fallback only runs without a postal code.
    """
    if not address:
        return None
    match = find_postal_code(address)
    if match is not None:
        return _city_after_postal_code(address, match)
    return _city_from_last_segment(address)
