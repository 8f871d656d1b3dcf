import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base

from insurance_playground import config

logger = logging.getLogger(__name__)

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how SQLite stores DATETIME columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class ExecResult:
    inserted_id: Optional[int]
    rows_affected: int


# Execution option read by the SQLite "begin" hook
SQLITE_BEGIN = "sqlite_begin"


def _sqlite_connect(dbapi_connection, connection_record):
    # Stop pysqlite from managing transactions so the "begin" hook decides
    dbapi_connection.isolation_level = None


def _sqlite_begin(conn: Connection):
    mode = conn.get_execution_options().get(SQLITE_BEGIN, "DEFERRED")
    conn.exec_driver_sql(f"BEGIN {mode}")


def _statement(sql):
    if isinstance(sql, str):
        return text(sql)
    return sql


class Database:
    """Shared handle to the storage engine.

    Wraps a SQLAlchemy engine and exposes the three query primitives used by
    the services. Every primitive accepts an optional ``conn`` so several
    statements can run inside one ``transaction()``.
    """

    def __init__(self, database_url: str = None, echo: bool = None):
        url = make_url(database_url or config.DATABASE_URL)
        connect_args = {}
        if url.get_backend_name() == "sqlite":
            connect_args = {"check_same_thread": False, "timeout": config.DB_BUSY_TIMEOUT}
        self.url = url
        self.engine = create_engine(
            url,
            echo=config.SQL_ECHO if echo is None else echo,
            connect_args=connect_args,
        )
        if self.is_sqlite:
            event.listen(self.engine, "connect", _sqlite_connect)
            event.listen(self.engine, "begin", _sqlite_begin)

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    def create_all(self):
        """Create every table that does not exist yet."""
        # Register the models on Base.metadata
        import insurance_playground.models  # noqa: F401

        if self.is_sqlite and self.url.database and self.url.database != ":memory:":
            Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables ready at %s", self.url.render_as_string(hide_password=True))

    def dispose(self):
        self.engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Run the enclosed statements atomically; roll back on any error.

        On SQLite the transaction takes the write lock up front (BEGIN
        IMMEDIATE), so rows read inside it cannot be changed by another
        writer before it commits.
        """
        with self.engine.connect() as conn:
            conn.execution_options(**{SQLITE_BEGIN: "IMMEDIATE"})
            with conn.begin():
                yield conn

    def execute(self, sql, params: dict = None, conn: Connection = None) -> ExecResult:
        """Run a statement that returns no rows."""
        if conn is None:
            with self.transaction() as own:
                return self.execute(sql, params, own)

        result = conn.execute(_statement(sql), params or {})
        if result.is_insert and result.inserted_primary_key:
            inserted_id = result.inserted_primary_key[0]
        else:
            inserted_id = result.lastrowid
        return ExecResult(inserted_id=inserted_id, rows_affected=result.rowcount)

    def fetch_one(self, sql, params: dict = None, conn: Connection = None) -> Optional[dict[str, Any]]:
        """Return the first row as a dict, or None when nothing matches."""
        if conn is None:
            with self.engine.connect() as own:
                return self.fetch_one(sql, params, own)

        row = conn.execute(_statement(sql), params or {}).first()
        return dict(row._mapping) if row is not None else None

    def fetch_all(self, sql, params: dict = None, conn: Connection = None) -> list[dict[str, Any]]:
        """Return every row, in statement order, as a list of dicts."""
        if conn is None:
            with self.engine.connect() as own:
                return self.fetch_all(sql, params, own)

        return [dict(row._mapping) for row in conn.execute(_statement(sql), params or {})]


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's database."""
    return request.app.state.db
