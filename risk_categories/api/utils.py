"""
Identifier utilities for document keys.

Functions
---------
is_valid_id(value) -> bool
    Decide whether a value is a structurally valid document identifier.
generate_id() -> str
    Create a new identifier in the same format.

Format
------
An identifier is exactly 24 hexadecimal characters (the 12-byte object-id
layout): 8 characters of epoch seconds followed by 16 random characters.
Identifiers therefore sort roughly by creation time.
"""

import re
import secrets
import time
from typing import Any

ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")
"""Accepted identifier shape (case-insensitive hex, 24 characters)."""


def is_valid_id(value: Any) -> bool:
    """
    Check the structure of a document identifier.

    Parameters
    ----------
    value : Any
        Candidate identifier, usually taken from a path parameter or a request body.

    Returns
    -------
    bool
        True if `value` is a 24-character hexadecimal string, otherwise False.

    Notes
    -----
    - Pure check: no database lookup. Called before every identifier-bearing
      operation so that a doomed lookup becomes a 400 instead of a store fault.
    """
    if not isinstance(value, str):
        return False
    return ID_PATTERN.fullmatch(value) is not None


def generate_id() -> str:
    """
    Generate a new document identifier.

    Returns
    -------
    str
        24 lowercase hex characters: 4 bytes of the current epoch second and
        8 random bytes.
    """
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"
