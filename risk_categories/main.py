"""
FastAPI application bootstrap with: \n
- Lifespan-managed database connection, reported into the readiness registry \n
- Risk Categories router \n
- uvicorn entry point (``python -m risk_categories.main``) \n

Environment contract (from `settings`): \n
- APP_ENV: under 'test' no database connection is made at startup. \n
- PORT: listening port, reported in the ``API`` status field. \n
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from risk_categories import DESCRIPTION, __version__
from risk_categories.api.fast_api import router
from risk_categories.api.status import ServerStatus
from risk_categories.database.config.config import settings
from risk_categories.database.config.connection_engine import db_connect

logger = logging.getLogger("uvicorn")
"""Logger instance shared with the Uvicorn server logs."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    App lifespan manager.

    Notes
    ------------
    - On startup (before yielding), unless APP_ENV == 'test':
        * Attempt the database connection once; the outcome lands in the
          ``Database`` status field (200 on success).
        * Record that the API is serving in the ``API`` status field.
    - On shutdown: nothing to release; the engine's pool closes with the process.
    """
    status: ServerStatus = app.state.server_status
    if settings.APP_ENV != "test":
        await db_connect(status)
        status.set_status("API", f"Server started on port {settings.PORT}.")
    else:
        logger.info(f"Skipping database connection (APP_ENV={settings.APP_ENV}).")
    yield


def create_app(server_status: Optional[ServerStatus] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    server_status : ServerStatus | None
        Readiness registry to expose; a fresh default one when omitted.
    """
    app = FastAPI(title=DESCRIPTION, version=__version__, lifespan=lifespan)
    app.state.server_status = server_status or ServerStatus()
    app.include_router(router)
    return app


app = create_app()
"""Application served by uvicorn (``risk_categories.main:app``)."""


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL)
