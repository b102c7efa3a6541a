import re

from teammove.application.public_link import generate_public_link, slugify


def test_slugify_strips_accents_and_symbols():
    assert slugify("Séminaire Été 2025!") == "seminaire-ete-2025"
    assert slugify("  Match   de   foot  ") == "match-de-foot"


def test_slugify_max_length():
    assert len(slugify("a" * 80)) == 50


def test_generate_public_link_shape():
    link = generate_public_link("Fête du club")
    assert re.fullmatch(r"fete-du-club-[a-z0-9]{6}", link)
