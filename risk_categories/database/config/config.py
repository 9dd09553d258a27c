"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed service configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Every field has a default, so importing the module never fails.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Deployment environments (`APP_ENV`)
-----------------------------------
- ``test``: no database connection is made at startup; tests bind their own engine.
- ``production``: database credentials come from AWS Secrets Manager in `AWS_REGION`.
- ``development`` (default, and anything else): `DEV_DATABASE_URL`.

Usage
-----
from risk_categories.database.config.config import settings

port = settings.PORT

Security
--------
- Never commit secrets or the `.env` file to source control.
- Production credentials are never read from the environment; only the secret id is.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service configuration settings loaded from environment variables
    or a `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_ENV: str = Field("development", description="Deployment environment: `development`, `production` or `test`.")
    AWS_REGION: Optional[str] = Field(None, description="AWS region holding the database secret (required in production).")
    DB_SECRET_NAME: str = Field(
        "service/db/risk_categories_readwriteany",
        description="AWS Secrets Manager secret id with `username`, `password` and `DB_CONNECTION`.",
    )
    DB_DRIVER_NAME: str = Field("postgresql+psycopg2", description="SQLAlchemy driver used in production.")
    DEV_DATABASE_URL: str = Field("sqlite:///risk_categories.db", description="Database URL outside production.")
    PORT: int = Field(3000, description="Port the HTTP server listens on.")
    LOG_LEVEL: str = Field("info", description="uvicorn log level.")


# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Settings object built from the environment and the .env file"""
