import pytest

from teammove.application.use_cases.companies import register_company
from teammove.application.use_cases.events import create_event
from teammove.application.use_cases.join import get_public_event, join_event
from teammove.application.use_cases.rides import (
    cancel_booking,
    find_matches,
    get_company_booking,
    get_company_ride,
    list_rides,
    offer_ride,
    request_booking,
    respond_booking,
)
from teammove.domain.errors import ConflictError, NotFoundError, PlanLimitError, ValidationError
from teammove.infrastructure.store import IN_MEMORY_COMPANIES, IN_MEMORY_EVENTS, IN_MEMORY_PARTICIPANTS


@pytest.fixture
def event():
    company = register_company("Asso Vélo", "velo@mail.fr")
    return create_event(
        company, name="Sortie annuelle", type="ponctuel", date="2025-05-10",
        time="08:00", location="Parc, 75012 Paris",
    )


def _driver(event, address, seats, email):
    participant, ride = join_event(event["public_link"], "Jean", email.split("@")[0], email, "driver", address, seats=seats)
    return participant, ride


def _passenger(event, address="10 Rue de Paris, 75001 Paris", email="pax@mail.fr"):
    participant, _ = join_event(event["public_link"], "Ana", "Roux", email, "passenger", address)
    return participant


def test_join_caches_locality_and_creates_ride(event):
    driver, ride = _driver(event, "20 Avenue, 75001 Paris", 2, "d1@mail.fr")
    assert (driver.city, driver.zone) == ("paris", "75")
    assert ride.available_seats == ride.total_seats == 2
    assert ride.destination_address == event["location"]
    assert ride.departure_date == event["date"]


def test_join_unknown_link(event):
    with pytest.raises(NotFoundError):
        get_public_event("missing-abc123")


def test_join_invalid_role(event):
    with pytest.raises(ValidationError):
        join_event(event["public_link"], "A", "B", "a@b.fr", "pilot")


def test_join_participant_limit(event):
    for i in range(20):
        _passenger(event, email=f"p{i}@mail.fr")
    with pytest.raises(PlanLimitError):
        _passenger(event, email="late@mail.fr")


def test_offer_ride_only_for_drivers(event):
    pax = _passenger(event)
    with pytest.raises(ValidationError):
        offer_ride(event["id"], pax.id, "75001 Paris", 2)
    driver, _ = _driver(event, "75001 Paris", None, "d@mail.fr")
    with pytest.raises(ValidationError):
        offer_ride(event["id"], driver.id, "75001 Paris", 0)
    ride = offer_ride(event["id"], driver.id, "75001 Paris", 1, departure_time="07:15")
    assert ride.departure_time == "07:15"
    assert list_rides(event["id"]) == [ride]


def test_find_matches_scenario(event):
    _, ride_a = _driver(event, "20 Avenue, 75001 Paris", 2, "a@mail.fr")
    _, ride_b = _driver(event, "5 Rue, 69000 Lyon", 3, "b@mail.fr")
    _, ride_c = _driver(event, "1 Rue, 75002 Paris", 1, "c@mail.fr")
    ride_c.available_seats = 0
    pax = _passenger(event)

    matches = find_matches(event["id"], passenger_id=pax.id)
    assert [(m.ride_id, m.distance) for m in matches] == [
        (ride_a.id, "same_city"),
        (ride_b.id, "other"),
    ]


def test_find_matches_explicit_address_and_inactive_rides(event):
    _, ride_a = _driver(event, "3 Rue, 75012 Vincennes", 2, "a@mail.fr")
    _, ride_b = _driver(event, "4 Rue, 75012 Paris", 2, "b@mail.fr")
    ride_b.status = "cancelled"
    matches = find_matches(event["id"], address="75011 Paris")
    assert [(m.ride_id, m.distance) for m in matches] == [(ride_a.id, "same_zone")]
    with pytest.raises(ValidationError):
        find_matches(event["id"])


def test_booking_lifecycle(event):
    _, ride = _driver(event, "75001 Paris", 1, "d@mail.fr")
    pax = _passenger(event)
    other = _passenger(event, email="other@mail.fr")

    booking = request_booking(ride.id, pax.id)
    assert booking.status == "pending"
    with pytest.raises(ConflictError):
        request_booking(ride.id, pax.id)

    respond_booking(booking.id, "confirmed")
    assert ride.available_seats == 0
    with pytest.raises(ConflictError):
        request_booking(ride.id, other.id)
    with pytest.raises(ConflictError):
        respond_booking(booking.id, "rejected")

    cancel_booking(booking.id)
    assert booking.status == "cancelled"
    assert ride.available_seats == 1
    with pytest.raises(ConflictError):
        cancel_booking(booking.id)


def test_confirm_refused_when_full(event):
    _, ride = _driver(event, "75001 Paris", 1, "d@mail.fr")
    b1 = request_booking(ride.id, _passenger(event).id)
    b2 = request_booking(ride.id, _passenger(event, email="p2@mail.fr").id)
    respond_booking(b1.id, "confirmed")
    with pytest.raises(ConflictError):
        respond_booking(b2.id, "confirmed")
    assert respond_booking(b2.id, "rejected").status == "rejected"


def test_booking_validation(event):
    driver, ride = _driver(event, "75001 Paris", 2, "d@mail.fr")
    with pytest.raises(ValidationError):
        request_booking(ride.id, driver.id)
    with pytest.raises(NotFoundError):
        request_booking("nope", driver.id)
    pax = _passenger(event)
    booking = request_booking(ride.id, pax.id)
    with pytest.raises(ValidationError):
        respond_booking(booking.id, "maybe")


def test_join_driver_seats_without_address_writes_nothing(event):
    with pytest.raises(ValidationError):
        join_event(event["public_link"], "Jean", "Dupont", "jean@mail.fr", "driver", None, seats=2)
    with pytest.raises(ValidationError):
        join_event(event["public_link"], "Jean", "Dupont", "jean@mail.fr", "driver", "   ", seats=2)
    assert not IN_MEMORY_PARTICIPANTS


@pytest.mark.parametrize("status", ["cancelled", "completed"])
def test_offer_ride_refused_on_closed_event(event, status):
    driver, _ = _driver(event, "75001 Paris", None, "d@mail.fr")
    IN_MEMORY_EVENTS[event["id"]].status = status
    with pytest.raises(ConflictError):
        offer_ride(event["id"], driver.id, "75001 Paris", 2)
    assert list_rides(event["id"]) == []


def test_company_scoped_ride_and_booking(event):
    owner = IN_MEMORY_COMPANIES[event["company_id"]]
    other = register_company("Autre asso", "autre@mail.fr")
    _, ride = _driver(event, "75001 Paris", 2, "d@mail.fr")
    booking = request_booking(ride.id, _passenger(event).id)

    assert get_company_ride(owner, ride.id) is ride
    assert get_company_booking(owner, booking.id) is booking
    with pytest.raises(NotFoundError):
        get_company_ride(other, ride.id)
    with pytest.raises(NotFoundError):
        get_company_booking(other, booking.id)
