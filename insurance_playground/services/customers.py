import logging
from datetime import datetime, time
from typing import Optional

from sqlalchemy import select, insert, update, delete, func, exists
from sqlalchemy.exc import IntegrityError

from insurance_playground.database import Database
from insurance_playground.models import Agent, Customer, Policy, Claim
from insurance_playground.schemas.customers import CustomerInput, CustomerUpdate, CustomerFilters
from insurance_playground.services.auth import hash_password, normalize_email
from insurance_playground.services.errors import (
    ValidationError, NotFoundError, ConflictError, ReferentialBlockError, is_unique_violation
)
from insurance_playground.services.filters import FilterSet, is_blank, parse_int, parse_float, parse_date
from insurance_playground.services.numbers import record_numbers

logger = logging.getLogger(__name__)

customers = Customer.__table__

# Password hashes never leave the service layer
PUBLIC_COLUMNS = [column for column in customers.c if column.name != "password"]

# Age in years, derived from date_of_birth at query time
AGE_YEARS = (func.julianday("now") - func.julianday(Customer.date_of_birth)) / 365.25
FULL_NAME = Customer.first_name + " " + Customer.last_name

REQUIRED_FIELDS = ("email", "password", "first_name", "last_name")


def _with_agent():
    return select(
        *PUBLIC_COLUMNS,
        Agent.first_name.label("agent_first_name"),
        Agent.last_name.label("agent_last_name"),
    ).select_from(customers.outerjoin(Agent.__table__, Customer.agent_id == Agent.id))


def _public(db: Database, customer_id: int, conn=None) -> Optional[dict]:
    return db.fetch_one(select(*PUBLIC_COLUMNS).where(Customer.id == customer_id), conn=conn)


def build_customer_filters(filters: CustomerFilters) -> FilterSet:
    registration_from = parse_date("registration_from", filters.registration_from)

    f = FilterSet()
    f.contains(Customer.customer_number, filters.customer_number)
    f.contains(Customer.first_name, filters.first_name)
    f.contains(Customer.last_name, filters.last_name)
    f.contains(Customer.email, filters.email)
    f.contains(Customer.phone, filters.phone)
    f.equals(Customer.agent_id, parse_int("agent_id", filters.agent_id))
    f.at_least(Customer.annual_income, parse_float("income_min", filters.income_min))
    f.at_most(Customer.annual_income, parse_float("income_max", filters.income_max))
    f.at_least(AGE_YEARS, parse_int("age_min", filters.age_min))
    f.at_most(AGE_YEARS, parse_int("age_max", filters.age_max))
    f.at_least(Customer.credit_score, parse_int("credit_min", filters.credit_min))
    if registration_from is not None:
        f.at_least(Customer.created_at, datetime.combine(registration_from, time.min))
    f.equals(Customer.kyc_status, filters.customer_status)
    f.equals(Customer.customer_type, filters.customer_type)
    return f


def list_customers(db: Database, filters: CustomerFilters) -> list[dict]:
    stmt = build_customer_filters(filters).apply(_with_agent())
    return db.fetch_all(stmt.order_by(Customer.created_at.desc(), Customer.id.desc()))


def search_customers(db: Database, q: Optional[str]) -> list[dict]:
    if is_blank(q):
        raise ValidationError("Search query is required")

    f = FilterSet().contains_any(
        [Customer.customer_number, Customer.first_name, Customer.last_name,
         Customer.email, Customer.phone, FULL_NAME],
        q,
    )
    return db.fetch_all(f.apply(_with_agent()).order_by(Customer.customer_number))


def get_customer(db: Database, customer_id: int) -> dict:
    """Customer with agent name plus their policies and claims."""
    customer = db.fetch_one(_with_agent().where(Customer.id == customer_id))
    if not customer:
        raise NotFoundError("Customer not found")

    customer["policies"] = db.fetch_all(
        select(Policy.__table__).where(Policy.customer_id == customer_id).order_by(Policy.id)
    )
    customer["claims"] = db.fetch_all(
        select(Claim.__table__).where(Claim.customer_id == customer_id).order_by(Claim.id)
    )
    return customer


def create_customer(db: Database, data: CustomerInput,
                    conflict_message: str = "Email already exists") -> dict:
    """Register a customer. Used by both the public and the admin endpoint."""
    if any(not getattr(data, field) for field in REQUIRED_FIELDS):
        raise ValidationError("Email, password, first name, and last name are required")
    if '@' not in data.email:
        raise ValidationError("Invalid email format")

    values = data.model_dump()
    values["email"] = normalize_email(data.email)
    values["password"] = hash_password(data.password)
    values["customer_type"] = data.customer_type or "individual"
    if "kyc_status" in values:
        values["kyc_status"] = values["kyc_status"] or "pending"
    values["customer_number"] = record_numbers.customer_number()

    try:
        with db.transaction() as conn:
            result = db.execute(insert(customers).values(**values), conn=conn)
            customer = _public(db, result.inserted_id, conn=conn)
    except IntegrityError as e:
        if is_unique_violation(e, "customers.email"):
            raise ConflictError(conflict_message)
        if is_unique_violation(e):
            raise ConflictError("Customer number already exists")
        raise

    logger.info("Registered customer %s", customer["customer_number"])
    return customer


def list_customers_with_counts(db: Database) -> list[dict]:
    policy_count = (
        select(func.count(Policy.id)).where(Policy.customer_id == Customer.id)
        .correlate(customers).scalar_subquery()
    )
    claim_count = (
        select(func.count(Claim.id)).where(Claim.customer_id == Customer.id)
        .correlate(customers).scalar_subquery()
    )
    stmt = _with_agent().add_columns(
        policy_count.label("policy_count"),
        claim_count.label("claim_count"),
    )
    return db.fetch_all(stmt.order_by(Customer.created_at.desc(), Customer.id.desc()))


def update_customer(db: Database, customer_id: int, data: CustomerUpdate) -> dict:
    """Write only the fields present in the request."""
    values = data.model_dump(exclude_unset=True)
    if not values:
        raise ValidationError("No fields to update")

    for field in REQUIRED_FIELDS:
        if field in values and not values[field]:
            raise ValidationError(f"{field} cannot be empty")
    if "email" in values:
        if '@' not in values["email"]:
            raise ValidationError("Invalid email format")
        values["email"] = normalize_email(values["email"])
    if "password" in values:
        values["password"] = hash_password(values["password"])

    try:
        with db.transaction() as conn:
            result = db.execute(update(customers).where(Customer.id == customer_id).values(**values), conn=conn)
            if result.rows_affected == 0:
                raise NotFoundError("Customer not found")
            return _public(db, customer_id, conn=conn)
    except IntegrityError as e:
        if is_unique_violation(e):
            raise ConflictError("Customer with this email already exists")
        raise


def delete_customer(db: Database, customer_id: int):
    """Delete a customer that no policy or claim references."""
    has_policies = exists().where(Policy.customer_id == customer_id)
    has_claims = exists().where(Claim.customer_id == customer_id)

    with db.transaction() as conn:
        result = db.execute(
            delete(customers).where(Customer.id == customer_id, ~has_policies, ~has_claims),
            conn=conn,
        )
        if result.rows_affected:
            logger.info("Deleted customer %s", customer_id)
            return

        if not db.fetch_one(select(Customer.id).where(Customer.id == customer_id), conn=conn):
            raise NotFoundError("Customer not found")

        counts = db.fetch_one(
            select(
                select(func.count(Policy.id)).where(Policy.customer_id == customer_id)
                .scalar_subquery().label("policies"),
                select(func.count(Claim.id)).where(Claim.customer_id == customer_id)
                .scalar_subquery().label("claims"),
            ),
            conn=conn,
        )
    raise ReferentialBlockError(
        f"Cannot delete customer. They have {counts['policies']} associated policies "
        f"and {counts['claims']} associated claims.",
        policy_count=counts["policies"],
        claim_count=counts["claims"],
    )
