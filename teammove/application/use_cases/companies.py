"""
Company registration and lookup. Password/JWT handling lives outside this service.
"""

import logging

from teammove.application.config import DEFAULT_PLAN
from teammove.domain.errors import AuthError, ConflictError, ValidationError
from teammove.domain.models import COMPANY_TYPES, Company
from teammove.domain.plans import get_plan_limits
from teammove.infrastructure.store import IN_MEMORY_COMPANIES, generate_id, now_iso

logger = logging.getLogger(__name__)


def register_company(
    name: str,
    email: str,
    company_type: str = "club",
    plan: str = DEFAULT_PLAN,
) -> Company:
    if company_type not in COMPANY_TYPES:
        raise ValidationError(
            f"Invalid company_type {company_type!r}; allowed: {sorted(COMPANY_TYPES)}"
        )
    get_plan_limits(plan)
    email = email.strip().lower()
    if any(c.email == email for c in IN_MEMORY_COMPANIES.values()):
        raise ConflictError("A company with this email already exists")

    company = Company(
        id=generate_id(),
        name=name,
        email=email,
        company_type=company_type,
        plan=plan,
        created_at=now_iso(),
    )
    IN_MEMORY_COMPANIES[company.id] = company
    logger.info("company registered id=%s plan=%s", company.id, plan)
    return company


def get_active_company(company_id: str | None) -> Company:
    """Caller identity check. Unknown or inactive company -> AuthError."""
    if not company_id:
        raise AuthError("Missing company identity")
    company = IN_MEMORY_COMPANIES.get(company_id)
    if company is None or not company.is_active:
        raise AuthError("Unknown or inactive company")
    return company
