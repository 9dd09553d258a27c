"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the service:
- Resolves the connection URL for the deployment environment (`APP_ENV`).
- Creates the Engine (connection pool + SQL execution entry point) once at startup.
- Defines shared MetaData and the Declarative Base for ORM models.
- Reports the outcome into the readiness registry.

Notes
-----
- Production credentials come from AWS Secrets Manager; the URL is assembled
  with `URL.create(...)` so credentials are never string-formatted into a DSN.
- A failed connection never raises out of `db_connect`: the failure is written
  to the registry and the service stays "Not Ready". There is no automatic retry.
- Tables are created with `metadata.create_all`; there is no migration tooling.
"""

import asyncio
from typing import Optional, Union

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import MetaData

from risk_categories.api.aws_secrets import funcs as aws_secrets
from risk_categories.api.status import READY_CODE, ServerStatus
from risk_categories.database.config.config import settings
from risk_categories.errors import InfrastructureError

# --------------------------------------------------------------------
# Metadata object: stores schema-level information about tables,
# constraints, indexes, etc. Shared across all models.
# --------------------------------------------------------------------
metadata = MetaData()
"""
Metadata object: Stores schema-level information about tables, constraints, indexes, etc. Shared across all models.
"""

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models."""

connection_engine: Optional[Engine] = None
"""Engine bound at startup by `db_connect` (or by tests); None until then."""


def bind_engine(engine: Optional[Engine]) -> None:
    """Install (or clear, with None) the engine used by the service layer."""
    global connection_engine
    connection_engine = engine


def get_engine() -> Engine:
    """
    Return the bound engine.

    Raises
    ------
    InfrastructureError
        If no connection has been established.
    """
    if connection_engine is None:
        raise InfrastructureError("No database connection.")
    return connection_engine


def build_connect_url(secret: Optional[dict]) -> URL:
    """
    Build the production URL from the database secret.

    Parameters
    ----------
    secret : dict | None
        Must hold `username`, `password` and `DB_CONNECTION` (``host[:port]/database``).

    Raises
    ------
    InfrastructureError
        If the secret is missing or incomplete.
    """
    if not secret or not secret.get("username") or not secret.get("password") or not secret.get("DB_CONNECTION"):
        raise InfrastructureError("Failed to construct the database connection URL.")

    host_port, _, database = secret["DB_CONNECTION"].partition("/")
    host, _, port = host_port.partition(":")
    return URL.create(
        drivername=settings.DB_DRIVER_NAME,
        username=secret["username"],
        password=secret["password"],
        host=host,
        port=int(port) if port else None,
        database=database or None,
    )


async def get_connect_url(status: ServerStatus) -> Optional[Union[str, URL]]:
    """
    Resolve the database URL for the current `APP_ENV`.

    Returns
    -------
    str | URL | None
        None under ``test`` (tests bind their own engine).

    Raises
    ------
    InfrastructureError
        In production, if `AWS_REGION` is unset or the secret is unusable.
    """
    if settings.APP_ENV == "test":
        return None

    if settings.APP_ENV == "production":
        region = settings.AWS_REGION
        if not region:
            raise InfrastructureError("AWS_REGION environment variable is not defined.")
        status.set_status("AWS Region", region)
        secret = await asyncio.to_thread(aws_secrets.get_secret, region)
        return build_connect_url(secret)

    return settings.DEV_DATABASE_URL


def open_engine(connect_url: Union[str, URL]) -> Engine:
    """Create the engine and the tables; the DDL round trip doubles as the connectivity check."""
    # the entity must be registered on `metadata` before create_all
    from risk_categories.database.entities import risk_category  # noqa: F401

    connect_args = {}
    if str(connect_url).startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(connect_url, connect_args=connect_args)
    try:
        metadata.create_all(engine)
    except Exception:
        engine.dispose()
        raise
    return engine


async def db_connect(status: ServerStatus) -> None:
    """
    Connect once at startup and report the outcome into `status`.

    Success sets ``Database`` and the aggregate code to 200; any failure is
    recorded as ``Database connection failure: <reason>`` and swallowed so the
    process keeps serving the status endpoint.
    """
    try:
        connect_url = await get_connect_url(status)
        if not connect_url:
            return
        engine = await asyncio.to_thread(open_engine, connect_url)
        bind_engine(engine)
        status.set_status("Database", "Successfully connected to the database.", READY_CODE)
    except Exception as e:
        status.set_status("Database", f"Database connection failure: {e}")
