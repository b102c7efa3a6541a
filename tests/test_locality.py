from teammove.core.matching_engine.locality import extract_city, extract_zone


# ── extract_zone ─────────────────────────────────────────────────────────


def test_zone_from_postal_code():
    assert extract_zone("12345 Paris") == "12"


def test_zone_without_postal_code():
    assert extract_zone("no postal code here") is None


def test_zone_empty_or_none():
    assert extract_zone("") is None
    assert extract_zone(None) is None


def test_zone_ignores_longer_digit_runs():
    assert extract_zone("Ref 123456, Lyon") is None
    assert extract_zone("Ref 123456, 69003 Lyon") == "69"


def test_zone_takes_first_postal_code():
    assert extract_zone("13001 Marseille via 69001 Lyon") == "13"


# ── extract_city ─────────────────────────────────────────────────────────


def test_city_after_postal_code():
    assert extract_city("75001 Paris, France") == "paris"
    assert extract_city("123 Rue X, 75001 Paris") == "paris"


def test_city_cut_at_hyphen():
    assert extract_city("93200 Saint-Denis") == "saint"


def test_city_empty_or_none():
    assert extract_city("") is None
    assert extract_city(None) is None


def test_city_postal_code_last_token_gives_no_city():
    # branch is committed once a postal code is found
    assert extract_city("10 Rue de Lyon, Paris 75001") is None


def test_city_fallback_last_segment():
    assert extract_city("12 Rue Victor Hugo, Bordeaux") == "bordeaux"
    assert extract_city("  Grenoble  ") == "grenoble"


def test_city_fallback_empty_segment():
    assert extract_city("12 Rue Victor Hugo,") is None


def test_city_accents_and_case_kept_lowercase():
    assert extract_city("06000 NICE Côte d'Azur") == "nice côte d'azur"


def test_syntactic_only_postal_code():
    assert extract_zone("99999 Nowhere") == "99"
    assert extract_city("99999 Nowhere") == "nowhere"


def test_idempotent():
    address = "10 Rue de Paris, 75001 Paris"
    assert extract_city(address) == extract_city(address)
    assert extract_zone(address) == extract_zone(address)
