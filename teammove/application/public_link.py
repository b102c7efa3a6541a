"""
Public join link for an event: accent-free slug + random suffix.
"""

import re
import secrets
import string
import unicodedata

from teammove.application.config import PUBLIC_LINK_MAX_SLUG, PUBLIC_LINK_SUFFIX_LEN

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def slugify(name: str) -> str:
    """'Séminaire Été 2025!' -> 'seminaire-ete-2025'."""
    text = unicodedata.normalize("NFD", name.lower())
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = re.sub(r"[^a-z0-9\s-]", "", text).strip()
    text = re.sub(r"\s+", "-", text)
    return text[:PUBLIC_LINK_MAX_SLUG]


def generate_public_link(event_name: str) -> str:
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(PUBLIC_LINK_SUFFIX_LEN))
    return f"{slugify(event_name)}-{suffix}"
