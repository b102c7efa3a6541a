"""
Subscription plans: limits and feature gating. Dataclasses only.
"""

import math
from dataclasses import dataclass

from teammove.domain.errors import PlanLimitError, ValidationError
from teammove.domain.models import Company


@dataclass(frozen=True)
class PlanLimits:
    events_per_year: float  # math.inf = unlimited
    max_participants: int
    has_vehicles: bool = False
    has_logo: bool = False
    has_broadcast: bool = False
    has_crm: bool = False
    has_advanced_stats: bool = False


PLAN_LIMITS: dict[str, PlanLimits] = {
    "decouverte": PlanLimits(events_per_year=2, max_participants=20),
    "essentiel": PlanLimits(events_per_year=10, max_participants=500, has_broadcast=True),
    "pro": PlanLimits(
        events_per_year=math.inf,
        max_participants=5000,
        has_vehicles=True,
        has_logo=True,
        has_broadcast=True,
        has_crm=True,
        has_advanced_stats=True,
    ),
    "premium": PlanLimits(
        events_per_year=math.inf,
        max_participants=10000,
        has_vehicles=True,
        has_logo=True,
        has_broadcast=True,
        has_crm=True,
        has_advanced_stats=True,
    ),
}


def get_plan_limits(plan: str) -> PlanLimits:
    if plan not in PLAN_LIMITS:
        raise ValidationError(f"Unknown plan {plan!r}; allowed: {sorted(PLAN_LIMITS)}")
    return PLAN_LIMITS[plan]


def check_can_create_event(company: Company) -> None:
    """Raises PlanLimitError once the company used its yearly event quota."""
    limits = get_plan_limits(company.plan)
    if company.events_created >= limits.events_per_year:
        raise PlanLimitError(
            f"Event limit reached for plan {company.plan!r} "
            f"({int(limits.events_per_year)}/year)"
        )


def check_can_add_participant(company: Company, confirmed_count: int) -> None:
    limits = get_plan_limits(company.plan)
    if confirmed_count >= limits.max_participants:
        raise PlanLimitError(
            f"Participant limit reached for plan {company.plan!r} "
            f"({limits.max_participants} per event)"
        )
