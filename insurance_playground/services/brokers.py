import re
import logging
from typing import Optional

from sqlalchemy import select, insert, update, delete, func, exists
from sqlalchemy.exc import IntegrityError

from insurance_playground.database import Database
from insurance_playground.models import Agent, Broker, Policy
from insurance_playground.schemas.brokers import BrokerInput, BrokerFilters
from insurance_playground.services.errors import (
    ValidationError, NotFoundError, ConflictError, ReferentialBlockError, is_unique_violation
)
from insurance_playground.services.filters import FilterSet, is_blank
from insurance_playground.services.numbers import record_numbers
from insurance_playground.services.auth import normalize_email

logger = logging.getLogger(__name__)

brokers = Broker.__table__

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
DEFAULT_COMMISSION_RATE = 0.05


def _validate(data: BrokerInput):
    if not data.first_name or not data.last_name or not data.email or not data.company_name:
        raise ValidationError('First name, last name, email, and company name are required')
    if not EMAIL_RE.match(data.email):
        raise ValidationError('Invalid email format')


def _values(data: BrokerInput) -> dict:
    values = data.model_dump(exclude={"status"})
    values["email"] = normalize_email(data.email)
    if not values["commission_rate"]:
        values["commission_rate"] = DEFAULT_COMMISSION_RATE
    return values


def _raise_duplicate(e: IntegrityError):
    if is_unique_violation(e, "brokers.email"):
        raise ValidationError('Email already exists')
    if is_unique_violation(e):
        raise ConflictError("Broker already exists")


def _ordered(stmt):
    return stmt.order_by(Broker.last_name, Broker.first_name, Broker.id)


def list_brokers(db: Database, filters: BrokerFilters) -> list[dict]:
    f = FilterSet()
    f.contains(Broker.broker_code, filters.broker_code)
    f.contains(Broker.first_name, filters.first_name)
    f.contains(Broker.last_name, filters.last_name)
    f.contains(Broker.email, filters.email)
    f.contains(Broker.phone, filters.phone)
    f.contains(Broker.company_name, filters.company_name)
    f.contains(Broker.territory, filters.territory)
    f.contains(Broker.specialization, filters.specialization)
    f.equals(Broker.status, filters.status)
    return db.fetch_all(_ordered(f.apply(select(brokers))))


def search_brokers(db: Database, q: Optional[str]) -> list[dict]:
    if is_blank(q):
        raise ValidationError("Search query is required")

    f = FilterSet().contains_any(
        [Broker.broker_code, Broker.first_name, Broker.last_name,
         Broker.email, Broker.company_name, Broker.territory],
        q,
    )
    return db.fetch_all(_ordered(f.apply(select(brokers))))


def get_broker(db: Database, broker_id: int) -> dict:
    broker = db.fetch_one(select(brokers).where(Broker.id == broker_id))
    if not broker:
        raise NotFoundError("Broker not found")
    return broker


def create_broker(db: Database, data: BrokerInput) -> dict:
    _validate(data)
    values = _values(data)
    values["broker_code"] = record_numbers.broker_code()
    values["status"] = data.status or "active"

    try:
        with db.transaction() as conn:
            result = db.execute(insert(brokers).values(**values), conn=conn)
            broker = db.fetch_one(select(brokers).where(Broker.id == result.inserted_id), conn=conn)
    except IntegrityError as e:
        _raise_duplicate(e)
        raise

    logger.info("Created broker %s", broker["broker_code"])
    return broker


def update_broker(db: Database, broker_id: int, data: BrokerInput) -> dict:
    _validate(data)
    values = _values(data)
    values["status"] = data.status or "active"

    try:
        with db.transaction() as conn:
            result = db.execute(update(brokers).where(Broker.id == broker_id).values(**values), conn=conn)
            if result.rows_affected == 0:
                raise NotFoundError("Broker not found")
            return db.fetch_one(select(brokers).where(Broker.id == broker_id), conn=conn)
    except IntegrityError as e:
        _raise_duplicate(e)
        raise


def delete_broker(db: Database, broker_id: int):
    """Delete a broker unless some policy still references them."""
    with db.transaction() as conn:
        result = db.execute(
            delete(brokers).where(Broker.id == broker_id, ~exists().where(Policy.broker_id == broker_id)),
            conn=conn,
        )
        if result.rows_affected:
            logger.info("Deleted broker %s", broker_id)
            return

        if not db.fetch_one(select(Broker.id).where(Broker.id == broker_id), conn=conn):
            raise NotFoundError("Broker not found")

        policy_count = db.fetch_one(
            select(func.count(Policy.id).label("count")).where(Policy.broker_id == broker_id), conn=conn
        )["count"]
    raise ReferentialBlockError(
        f"Cannot delete broker. They have {policy_count} associated policies. Please reassign policies first.",
        policy_count=policy_count,
    )


def list_active_agents(db: Database) -> list[dict]:
    return db.fetch_all(
        select(Agent.__table__)
        .where(Agent.status == "active")
        .order_by(Agent.last_name, Agent.first_name)
    )
