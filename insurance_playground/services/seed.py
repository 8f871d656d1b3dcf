"""Sample data loading and the admin database reset.

Seeding is idempotent: a fixture row is inserted only when its natural key
(username, agent_code, broker_code, customer_number, policy_number,
claim_number) is not in the table yet. The reset empties every table and
reseeds inside a single transaction, serialized by a process-wide lock.
"""

import logging
import threading
from datetime import datetime, timezone

from sqlalchemy import select, insert, delete, text
from sqlalchemy.engine import Connection

from insurance_playground.data import seed_data
from insurance_playground.database import Database
from insurance_playground.models import (
    Admin, Agent, Broker, Customer, Policy, CoverageDetail, Claim, ClaimDocument
)
from insurance_playground.services.auth import hash_password

logger = logging.getLogger(__name__)

# Children first
RESET_ORDER = [ClaimDocument, CoverageDetail, Claim, Policy, Customer, Agent, Broker, Admin]

maintenance_lock = threading.Lock()


def _ids_by(conn: Connection, model, key: str) -> dict:
    """Map natural key -> id for one table."""
    table = model.__table__
    return {row[0]: row[1] for row in conn.execute(select(table.c[key], table.c.id))}


def _insert_missing(conn: Connection, model, key: str, rows: list[dict]) -> int:
    existing = _ids_by(conn, model, key)
    missing = [row for row in rows if row[key] not in existing]
    for row in missing:
        conn.execute(insert(model.__table__).values(**row))
    return len(missing)


def _seed(conn: Connection) -> dict:
    counts = {}

    counts["admins"] = _insert_missing(conn, Admin, "username", [
        {**admin, "password": hash_password(admin["password"])}
        for admin in seed_data.ADMINS
    ])
    counts["agents"] = _insert_missing(conn, Agent, "agent_code", seed_data.AGENTS)
    counts["brokers"] = _insert_missing(conn, Broker, "broker_code", seed_data.BROKERS)

    agent_ids = _ids_by(conn, Agent, "agent_code")
    existing_customers = _ids_by(conn, Customer, "customer_number")
    customers = []
    for fixture in seed_data.CUSTOMERS:
        if fixture["customer_number"] in existing_customers:
            continue
        row = {key: value for key, value in fixture.items() if key != "agent"}
        row["password"] = hash_password(fixture["password"])
        row["agent_id"] = agent_ids.get(fixture["agent"])
        customers.append(row)
    counts["customers"] = _insert_missing(conn, Customer, "customer_number", customers)

    customer_ids = _ids_by(conn, Customer, "customer_number")
    broker_ids = _ids_by(conn, Broker, "broker_code")
    counts["policies"] = _insert_missing(conn, Policy, "policy_number", [
        {
            **{key: value for key, value in fixture.items() if key not in ("customer", "broker")},
            "customer_id": customer_ids[fixture["customer"]],
            "broker_id": broker_ids[fixture["broker"]],
        }
        for fixture in seed_data.POLICIES
    ])

    # Coverage rows have no natural key: seed a policy's coverage only if it has none
    policy_ids = _ids_by(conn, Policy, "policy_number")
    covered = set(conn.execute(select(CoverageDetail.policy_id).distinct()).scalars())
    coverage_rows = [
        {
            **{key: value for key, value in fixture.items() if key != "policy"},
            "policy_id": policy_ids[fixture["policy"]],
        }
        for fixture in seed_data.COVERAGE_DETAILS
        if policy_ids[fixture["policy"]] not in covered
    ]
    for row in coverage_rows:
        conn.execute(insert(CoverageDetail.__table__).values(**row))
    counts["coverage_details"] = len(coverage_rows)

    counts["claims"] = _insert_missing(conn, Claim, "claim_number", [
        {
            **{key: value for key, value in fixture.items() if key not in ("policy", "customer")},
            "policy_id": policy_ids[fixture["policy"]],
            "customer_id": customer_ids[fixture["customer"]],
        }
        for fixture in seed_data.CLAIMS
    ])
    return counts


def seed_database(db: Database, conn: Connection = None) -> dict:
    """Insert any fixture rows that are missing. Returns inserted counts per table."""
    if conn is None:
        with db.transaction() as own:
            return seed_database(db, own)

    counts = _seed(conn)
    logger.info("Seeded sample data: %s", counts)
    return counts


def reset_database(db: Database) -> dict:
    """Empty every table and reload the sample data atomically."""
    with maintenance_lock:
        logger.warning("Resetting database to sample data")
        with db.transaction() as conn:
            for model in RESET_ORDER:
                conn.execute(delete(model.__table__))
            if db.is_sqlite:
                conn.execute(text("DELETE FROM sqlite_sequence"))
            seed_database(db, conn)

    return {
        "success": True,
        "message": "Database has been reset and reseeded with fresh test data",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
