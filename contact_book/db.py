"""Relational storage for the contacts API."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings
from .contacts.models import Contact

logger = logging.getLogger(__name__)

metadata = sa.MetaData()

contacts_table = sa.Table(
    "contacts",
    metadata,
    # Surrogate key; listing orders by it to keep insertion order.
    sa.Column("seq", sa.Integer, primary_key=True, autoincrement=True),
    sa.Column("id", sa.String(64), nullable=False, unique=True),
    sa.Column("name", sa.String(255), nullable=False),
    sa.Column("email", sa.String(255), nullable=False),
    sa.Column("phone", sa.String(64), nullable=False),
)


def database_url(settings: Settings) -> URL:
    """Build the SQLAlchemy URL, preferring an explicit CONTACTS_DATABASE_URL."""
    if settings.database_url:
        return make_url(settings.database_url)
    return URL.create(
        drivername="mysql+pymysql",
        username=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def create_db_engine(settings: Settings) -> Engine:
    url = database_url(settings)
    kwargs: Dict[str, Any] = {"pool_pre_ping": True}
    if url.get_backend_name() == "sqlite":
        # Requests are served from a thread pool.
        kwargs = {"connect_args": {"check_same_thread": False}}
    logger.info(f"[DB] Using {url.render_as_string(hide_password=True)}")
    return sa.create_engine(url, **kwargs)


def create_tables(engine: Engine) -> None:
    metadata.create_all(engine)


def check_connection(engine: Engine) -> bool:
    """Probe the database once and log the outcome."""
    try:
        with engine.connect() as conn:
            conn.execute(sa.text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"[DB] Error connecting to database: {exc}")
        return False
    logger.info("[DB] Successfully connected to database.")
    return True


class ContactRepository:
    """Single-statement CRUD over the contacts table.

    Every method may raise ``SQLAlchemyError``; callers decide how to report it.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def list_all(self) -> List[Dict[str, str]]:
        query = sa.select(
            contacts_table.c.id,
            contacts_table.c.name,
            contacts_table.c.email,
            contacts_table.c.phone,
        ).order_by(contacts_table.c.seq)
        with self.engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [dict(row) for row in rows]

    def insert(self, contact: Contact) -> None:
        with self.engine.begin() as conn:
            conn.execute(sa.insert(contacts_table).values(**contact.to_dict()))

    def update(self, contact_id: str, name: str, email: str, phone: str) -> bool:
        """Replace the editable fields; False when no row has ``contact_id``."""
        statement = (
            sa.update(contacts_table)
            .where(contacts_table.c.id == contact_id)
            .values(name=name, email=email, phone=phone)
        )
        with self.engine.begin() as conn:
            result = conn.execute(statement)
        return result.rowcount > 0

    def delete(self, contact_id: str) -> bool:
        statement = sa.delete(contacts_table).where(contacts_table.c.id == contact_id)
        with self.engine.begin() as conn:
            result = conn.execute(statement)
        return result.rowcount > 0
