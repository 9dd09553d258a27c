"""
Readiness Status Registry
=========================

Process-level record of subsystem health, rendered by
``GET /risk-categories/status`` for orchestration health checks.

The app factory owns one ``ServerStatus`` and stores it on
``app.state.server_status``; startup code (API listening, database connection)
writes to it and the status route reads it.

Readiness
---------
The numeric ``Status`` field gates readiness: only a successful database
connection sets it to 200. Until then the endpoint answers 500 / "Not Ready".

Concurrency
-----------
Every write is a single dict item assignment, so concurrent readers observe
either the old or the new value of a field (last writer wins, no multi-field
transactions).
"""

import logging
from typing import Dict, Optional, Tuple, Union

from risk_categories import DESCRIPTION, NAME, __version__

logger = logging.getLogger("uvicorn")

StatusValue = Union[str, int]

READY_CODE = 200
NOT_READY_CODE = 500


def default_status() -> Dict[str, StatusValue]:
    """Initial record: not ready, no region, server not started, no database connection."""
    return {
        "Status": NOT_READY_CODE,
        "Name": NAME,
        "Version": __version__,
        "Description": DESCRIPTION,
        "AWS Region": "",
        "API": "Failed to start the server.",
        "Database": "No connection.",
    }


class ServerStatus:
    """
    Mutable map of named status fields plus the aggregate ``Status`` code.

    Attributes
    ----------
    fields : dict[str, str | int]
        Current record, ``Status`` included.
    """

    def __init__(self, fields: Optional[Dict[str, StatusValue]] = None):
        self.fields = default_status() if fields is None else dict(fields)

    def set_status(self, name: str, message: str, new_code: Optional[int] = None) -> None:
        """
        Overwrite one status field and optionally the aggregate code.

        Parameters
        ----------
        name : str
            Field to write (e.g. ``"Database"``, ``"API"``, ``"AWS Region"``).
        message : str
            New value of the field.
        new_code : int | None
            When given, replaces the numeric ``Status`` code.
        """
        if new_code is not None:
            self.fields["Status"] = new_code
        self.fields[name] = message
        logger.info(message)

    @property
    def code(self) -> int:
        return int(self.fields["Status"])

    def snapshot(self) -> Tuple[int, Dict[str, StatusValue]]:
        """
        Render the record for the status endpoint.

        Returns
        -------
        tuple[int, dict]
            The stored numeric code (used as the HTTP status) and a copy of all
            fields where ``Status`` reads ``"Ready"`` for 200 and ``"Not Ready"``
            otherwise.
        """
        code = self.code
        body = dict(self.fields)
        body["Status"] = "Ready" if code == READY_CODE else "Not Ready"
        return code, body
