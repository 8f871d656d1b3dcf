import logging
from typing import Optional

from sqlalchemy import select, insert, update
from sqlalchemy.exc import IntegrityError

from insurance_playground.database import Database
from insurance_playground.models import Customer, Policy, Claim, ClaimDocument
from insurance_playground.schemas.claims import ClaimCreate, ClaimStatusUpdate, ClaimFilters
from insurance_playground.services.errors import ValidationError, NotFoundError, ConflictError, is_unique_violation
from insurance_playground.services.filters import FilterSet, is_blank, parse_int, parse_float, parse_date
from insurance_playground.services.numbers import record_numbers

logger = logging.getLogger(__name__)

claims = Claim.__table__

CLAIM_STATUSES = ['submitted', 'under_review', 'approved', 'denied', 'paid', 'closed']

CUSTOMER_FULL_NAME = Customer.first_name + " " + Customer.last_name


def _with_customer_and_policy(*extra):
    return select(
        claims,
        Customer.first_name,
        Customer.last_name,
        Customer.customer_number,
        Policy.policy_number,
        Policy.product_name,
        *extra,
    ).select_from(
        claims
        .join(Customer.__table__, Claim.customer_id == Customer.id)
        .join(Policy.__table__, Claim.policy_id == Policy.id)
    )


def build_claim_filters(filters: ClaimFilters) -> FilterSet:
    f = FilterSet()
    f.equals(Claim.customer_id, parse_int("customer_id", filters.customer_id))
    f.equals(Claim.policy_id, parse_int("policy_id", filters.policy_id))
    f.equals(Claim.status, filters.status)
    f.equals(Claim.priority, filters.priority)
    f.equals(Claim.claim_type, filters.claim_type)
    f.contains(Claim.claim_number, filters.claim_number)
    f.contains_any([Customer.first_name, Customer.last_name, CUSTOMER_FULL_NAME], filters.customer_name)
    f.at_least(Claim.incident_date, parse_date("date_from", filters.date_from))
    f.at_most(Claim.incident_date, parse_date("date_to", filters.date_to))
    f.at_least(Claim.claim_amount, parse_float("amount_min", filters.amount_min))
    f.at_most(Claim.claim_amount, parse_float("amount_max", filters.amount_max))
    return f


def list_claims(db: Database, filters: ClaimFilters) -> list[dict]:
    stmt = build_claim_filters(filters).apply(_with_customer_and_policy())
    return db.fetch_all(stmt.order_by(Claim.created_at.desc(), Claim.id.desc()))


def search_claims(db: Database, q: Optional[str]) -> list[dict]:
    if is_blank(q):
        raise ValidationError("Search query is required")

    f = FilterSet().contains_any(
        [Claim.claim_number, Claim.claim_type, Claim.description, Customer.first_name, Customer.last_name], q
    )
    return db.fetch_all(f.apply(_with_customer_and_policy()).order_by(Claim.claim_number))


def get_claim(db: Database, claim_id: int) -> dict:
    claim = db.fetch_one(
        _with_customer_and_policy(Customer.email, Policy.coverage_amount).where(Claim.id == claim_id)
    )
    if not claim:
        raise NotFoundError("Claim not found")

    claim["documents"] = db.fetch_all(
        select(ClaimDocument.__table__).where(ClaimDocument.claim_id == claim_id).order_by(ClaimDocument.id)
    )
    return claim


def create_claim(db: Database, data: ClaimCreate) -> dict:
    """File a claim against a policy owned by the submitting customer."""
    required = (data.policy_id, data.customer_id, data.claim_type,
                data.incident_date, data.claim_amount, data.description)
    if any(value is None or value == "" for value in required):
        raise ValidationError(
            'Policy ID, customer ID, claim type, incident date, claim amount, and description are required'
        )
    if data.claim_amount <= 0:
        raise ValidationError("Claim amount must be greater than zero")

    values = data.model_dump(exclude={"priority"})
    if data.priority:
        values["priority"] = data.priority
    values["claim_number"] = record_numbers.claim_number()

    try:
        with db.transaction() as conn:
            owned = db.fetch_one(
                select(Policy.id).where(Policy.id == data.policy_id, Policy.customer_id == data.customer_id),
                conn=conn,
            )
            if not owned:
                raise ValidationError('Policy not found or does not belong to customer')

            result = db.execute(insert(claims).values(**values), conn=conn)
            claim = db.fetch_one(_with_customer_and_policy().where(Claim.id == result.inserted_id), conn=conn)
    except IntegrityError as e:
        if is_unique_violation(e):
            raise ConflictError("Claim number already exists")
        raise

    logger.info("Claim %s submitted against policy %s", claim["claim_number"], data.policy_id)
    return claim


def update_claim_status(db: Database, claim_id: int, data: ClaimStatusUpdate) -> dict:
    """Move a claim to a new status; approved_amount and notes only when sent."""
    if data.status not in CLAIM_STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(CLAIM_STATUSES)}")

    values = {"status": data.status}
    for field in ("approved_amount", "notes"):
        if field in data.model_fields_set:
            values[field] = getattr(data, field)

    with db.transaction() as conn:
        result = db.execute(update(claims).where(Claim.id == claim_id).values(**values), conn=conn)
        if result.rows_affected == 0:
            raise NotFoundError("Claim not found")
        return db.fetch_one(select(claims).where(Claim.id == claim_id), conn=conn)
