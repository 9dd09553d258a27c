"""
Error taxonomy for Risk Category operations.

Every error carries the HTTP status code the router answers with and a
plain-text message used verbatim as the response body.

- ClientPreconditionError (400): malformed identifier, deleted-at-create,
  identifier in an update body, duplicate ``{language_code, name}``.
- NotFoundError (404): well-formed identifier with no matching row; empty body.
- EntityValidationError (500): entity rules rejected the payload.
- InfrastructureError (500): database or credential failures.
"""

from typing import Any, Optional


class RiskCategoryError(Exception):
    """Base class. Unclassified failures answer with 500."""

    status_code: int = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ClientPreconditionError(RiskCategoryError):
    """The caller can fix the request; never retried by the server."""

    status_code = 400


class NotFoundError(RiskCategoryError):
    """No document matches a well-formed identifier."""

    status_code = 404


class EntityValidationError(RiskCategoryError):
    """
    The entity rules rejected a payload. Answers with 500, unlike the 400
    client precondition failures.
    """

    status_code = 500

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class EnumValidationError(EntityValidationError):
    """A field value is outside its fixed set of allowed values."""


class FormatValidationError(EntityValidationError):
    """A field value does not have the required format."""


class InfrastructureError(RiskCategoryError):
    """Database unreachable, credentials unavailable or misconfigured deployment."""

    status_code = 500
