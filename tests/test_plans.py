import math

import pytest

from teammove.domain.errors import PlanLimitError, ValidationError
from teammove.domain.models import Company
from teammove.domain.plans import (
    PLAN_LIMITS,
    check_can_add_participant,
    check_can_create_event,
    get_plan_limits,
)


def _company(plan, events_created=0):
    return Company(id="c1", name="Club", email="club@example.fr", plan=plan, events_created=events_created)


def test_plan_limits_table():
    assert PLAN_LIMITS["decouverte"].events_per_year == 2
    assert PLAN_LIMITS["essentiel"].max_participants == 500
    assert PLAN_LIMITS["essentiel"].has_broadcast
    assert not PLAN_LIMITS["essentiel"].has_vehicles
    assert PLAN_LIMITS["pro"].events_per_year == math.inf
    assert PLAN_LIMITS["premium"].max_participants == 10000


def test_unknown_plan():
    with pytest.raises(ValidationError):
        get_plan_limits("gold")


def test_event_quota():
    check_can_create_event(_company("decouverte", events_created=1))
    with pytest.raises(PlanLimitError):
        check_can_create_event(_company("decouverte", events_created=2))
    check_can_create_event(_company("pro", events_created=10_000))


def test_participant_quota():
    check_can_add_participant(_company("decouverte"), 19)
    with pytest.raises(PlanLimitError):
        check_can_add_participant(_company("decouverte"), 20)
