"""Policy lifecycle: creation, edits, status and underwriting transitions.

``status`` and ``underwriting_status`` are tracked independently. The only
coupling is the underwriting decision: approving a policy activates it and
rejecting it marks it rejected, in the same UPDATE statement that records the
decision.
"""

import logging
from typing import Optional

from sqlalchemy import select, insert, update, delete, func, exists, case, literal
from sqlalchemy.exc import IntegrityError

from insurance_playground.database import Database
from insurance_playground.models import Broker, Customer, Policy, CoverageDetail, Claim
from insurance_playground.schemas.policies import (
    PolicyCreate, PolicyUpdate, PolicyStatusUpdate, UnderwritingUpdate, PolicyFilters
)
from insurance_playground.services.errors import (
    ValidationError, NotFoundError, ConflictError, ReferentialBlockError, is_unique_violation
)
from insurance_playground.services.filters import FilterSet, is_blank, parse_int, parse_float, parse_date
from insurance_playground.services.numbers import record_numbers

logger = logging.getLogger(__name__)

policies = Policy.__table__

POLICY_STATUSES = ['submission', 'quoted', 'booked', 'declined', 'cancelled', 'expired']
UNDERWRITING_STATUSES = ['pending', 'approved', 'rejected', 'requires_review']

# underwriting_status -> resulting policy status
UNDERWRITING_STATUS_EFFECTS = {
    'approved': 'active',
    'rejected': 'rejected',
}

CUSTOMER_FULL_NAME = Customer.first_name + " " + Customer.last_name

CREATE_REQUIRED_MESSAGE = (
    'Customer ID, Broker ID, policy type, product name, coverage amount, premium amount, '
    'start date, and end date are required'
)


def _with_customer():
    return select(
        policies,
        Customer.first_name,
        Customer.last_name,
        Customer.customer_number,
    ).select_from(policies.join(Customer.__table__, Policy.customer_id == Customer.id))


def _with_customer_and_broker():
    return select(
        policies,
        Customer.first_name,
        Customer.last_name,
        Customer.customer_number,
        Broker.first_name.label("broker_first_name"),
        Broker.last_name.label("broker_last_name"),
        Broker.company_name.label("broker_company"),
    ).select_from(
        policies
        .join(Customer.__table__, Policy.customer_id == Customer.id)
        .outerjoin(Broker.__table__, Policy.broker_id == Broker.id)
    )


def build_policy_filters(filters: PolicyFilters) -> FilterSet:
    f = FilterSet()
    f.equals(Policy.customer_id, parse_int("customer_id", filters.customer_id))
    f.equals(Policy.broker_id, parse_int("broker_id", filters.broker_id))
    f.equals(Policy.policy_type, filters.policy_type)
    f.equals(Policy.status, filters.status)
    f.equals(Policy.underwriting_status, filters.underwriting_status)
    f.contains(Policy.policy_number, filters.policy_number)
    f.contains_any([Customer.first_name, Customer.last_name, CUSTOMER_FULL_NAME], filters.customer_name)
    f.contains(Policy.product_name, filters.product_name)
    f.at_least(Policy.start_date, parse_date("date_from", filters.date_from))
    f.at_most(Policy.start_date, parse_date("date_to", filters.date_to))
    f.at_least(Policy.coverage_amount, parse_float("coverage_min", filters.coverage_min))
    f.at_most(Policy.coverage_amount, parse_float("coverage_max", filters.coverage_max))
    return f


def list_policies(db: Database, filters: PolicyFilters) -> list[dict]:
    stmt = build_policy_filters(filters).apply(_with_customer_and_broker())
    return db.fetch_all(stmt.order_by(Policy.created_at.desc(), Policy.id.desc()))


def search_policies(db: Database, q: Optional[str]) -> list[dict]:
    if is_blank(q):
        raise ValidationError("Search query is required")

    f = FilterSet().contains_any(
        [Policy.policy_number, Policy.product_name, Customer.first_name, Customer.last_name], q
    )
    return db.fetch_all(f.apply(_with_customer()).order_by(Policy.policy_number))


def get_policy(db: Database, policy_id: int) -> dict:
    policy = db.fetch_one(_with_customer().add_columns(Customer.email).where(Policy.id == policy_id))
    if not policy:
        raise NotFoundError("Policy not found")

    policy["coverage_details"] = db.fetch_all(
        select(CoverageDetail.__table__)
        .where(CoverageDetail.policy_id == policy_id)
        .order_by(CoverageDetail.id)
    )
    return policy


def _validate_terms(data: PolicyUpdate, message: str):
    required = (data.policy_type, data.product_name, data.coverage_amount,
                data.premium_amount, data.start_date, data.end_date)
    if any(value is None or value == "" for value in required):
        raise ValidationError(message)
    if data.coverage_amount <= 0 or data.premium_amount <= 0:
        raise ValidationError("Coverage amount and premium amount must be greater than zero")
    if data.end_date < data.start_date:
        raise ValidationError("End date cannot be before start date")


def _terms(data: PolicyUpdate) -> dict:
    return data.model_dump(include={
        "policy_type", "product_name", "coverage_amount", "premium_amount",
        "deductible", "policy_term", "start_date", "end_date", "notes",
    })


def create_policy(db: Database, data: PolicyCreate) -> dict:
    """Create a policy and its coverage details atomically."""
    if not data.customer_id or not data.broker_id:
        raise ValidationError(CREATE_REQUIRED_MESSAGE)
    _validate_terms(data, CREATE_REQUIRED_MESSAGE)

    coverage_details = data.coverage_details or []
    for coverage in coverage_details:
        if not coverage.coverage_type or coverage.coverage_limit is None:
            raise ValidationError("Each coverage detail needs a coverage type and coverage limit")

    values = _terms(data)
    values.update(
        policy_number=record_numbers.policy_number(),
        customer_id=data.customer_id,
        broker_id=data.broker_id,
    )

    try:
        with db.transaction() as conn:
            if not db.fetch_one(select(Customer.id).where(Customer.id == data.customer_id), conn=conn):
                raise ValidationError("Customer not found")
            if not db.fetch_one(select(Broker.id).where(Broker.id == data.broker_id), conn=conn):
                raise ValidationError("Broker not found")

            result = db.execute(insert(policies).values(**values), conn=conn)
            for coverage in coverage_details:
                db.execute(
                    insert(CoverageDetail.__table__).values(policy_id=result.inserted_id, **coverage.model_dump()),
                    conn=conn,
                )
            policy = db.fetch_one(select(policies).where(Policy.id == result.inserted_id), conn=conn)
    except IntegrityError as e:
        if is_unique_violation(e):
            raise ConflictError("Policy number already exists")
        raise

    logger.info("Created policy %s for customer %s", policy["policy_number"], data.customer_id)
    return policy


def update_policy(db: Database, policy_id: int, data: PolicyUpdate) -> dict:
    _validate_terms(
        data,
        'Policy type, product name, coverage amount, premium amount, start date, and end date are required',
    )

    with db.transaction() as conn:
        result = db.execute(update(policies).where(Policy.id == policy_id).values(**_terms(data)), conn=conn)
        if result.rows_affected == 0:
            raise NotFoundError("Policy not found")
        return db.fetch_one(_with_customer().where(Policy.id == policy_id), conn=conn)


def update_policy_status(db: Database, policy_id: int, data: PolicyStatusUpdate) -> dict:
    if data.status not in POLICY_STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(POLICY_STATUSES)}")

    values = {"status": data.status}
    if "notes" in data.model_fields_set:
        values["notes"] = data.notes

    with db.transaction() as conn:
        result = db.execute(update(policies).where(Policy.id == policy_id).values(**values), conn=conn)
        if result.rows_affected == 0:
            raise NotFoundError("Policy not found")
        return db.fetch_one(_with_customer().where(Policy.id == policy_id), conn=conn)


def update_underwriting(db: Database, policy_id: int, data: UnderwritingUpdate) -> dict:
    """Record an underwriting decision and apply its status side effect."""
    if data.underwriting_status not in UNDERWRITING_STATUSES:
        raise ValidationError(f"Underwriting status must be one of: {', '.join(UNDERWRITING_STATUSES)}")

    decision = literal(data.underwriting_status)
    values = {
        "underwriting_status": data.underwriting_status,
        "status": case(
            *[(decision == uw, status) for uw, status in UNDERWRITING_STATUS_EFFECTS.items()],
            else_=Policy.status,
        ),
    }
    for field in ("risk_score", "notes"):
        if field in data.model_fields_set:
            values[field] = getattr(data, field)

    with db.transaction() as conn:
        result = db.execute(update(policies).where(Policy.id == policy_id).values(**values), conn=conn)
        if result.rows_affected == 0:
            raise NotFoundError("Policy not found")
        return db.fetch_one(select(policies).where(Policy.id == policy_id), conn=conn)


def delete_policy(db: Database, policy_id: int):
    """Delete a policy and its coverage details unless a claim references it."""
    no_claims = ~exists().where(Claim.policy_id == policy_id)

    with db.transaction() as conn:
        db.execute(
            delete(CoverageDetail.__table__).where(CoverageDetail.policy_id == policy_id, no_claims),
            conn=conn,
        )
        result = db.execute(delete(policies).where(Policy.id == policy_id, no_claims), conn=conn)
        if result.rows_affected:
            logger.info("Deleted policy %s", policy_id)
            return

        if not db.fetch_one(select(Policy.id).where(Policy.id == policy_id), conn=conn):
            raise NotFoundError("Policy not found")

        claim_count = db.fetch_one(
            select(func.count(Claim.id).label("count")).where(Claim.policy_id == policy_id), conn=conn
        )["count"]
    raise ReferentialBlockError(
        'Cannot delete policy with existing claims. Please handle claims first.',
        claim_count=claim_count,
    )
