"""
Pydantic models used for request validation and API data contracts.

- ``RiskCategoryRules`` is the entity allow-list: decoding a payload through it
  drops unknown fields and enforces the Risk Category field invariants.
- ``RiskCategoryDetails`` is the stored document as returned to clients.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from risk_categories.api.utils import is_valid_id
from risk_categories.errors import EntityValidationError, EnumValidationError, FormatValidationError

RISK_LEVELS = (-1, 1, 2, 3, 4)
"""Allowed `risk_level` values: -1 marks an exclusion (whitelist) entry, 1-4 increasing severity."""

UPDATABLE_FIELDS = ("keywords", "language_code", "name", "risk_level", "updated_by_user_id")
"""Fields a partial update may set. `id`, `deleted` and timestamps are not client-writable."""

ENTITY_NAME = "RiskCategory"


class RiskCategoryRules(BaseModel):
    """
    Storable Risk Category fields, in alphabetical order.

    Unknown fields are ignored, so ``model_dump()`` never carries anything
    outside this schema.
    """

    model_config = ConfigDict(extra="ignore")

    deleted: bool = False
    """Soft-delete marker."""
    keywords: List[str] = Field(default_factory=list)
    """Matching keywords; order is kept for display."""
    language_code: str
    """Language of the keywords (e.g. ``"en"``)."""
    name: str
    """Category name, unique per language."""
    risk_level: int
    """One of ``RISK_LEVELS``."""
    updated_by_user_id: str
    """Identifier of the acting user, stored lowercase."""

    @field_validator("language_code", "name")
    @classmethod
    def check_required_text(cls, value: str, info: ValidationInfo) -> str:
        if value == "":
            raise PydanticCustomError("required", "Path `{field}` is required.", {"field": info.field_name})
        return value

    @field_validator("risk_level")
    @classmethod
    def check_risk_level(cls, value: int) -> int:
        if value not in RISK_LEVELS:
            raise PydanticCustomError(
                "enum", "`{value}` is not a valid enum value for path `risk_level`.", {"value": value}
            )
        return value

    @field_validator("updated_by_user_id", mode="before")
    @classmethod
    def check_updated_by_user_id(cls, value: Any) -> Any:
        if not is_valid_id(value):
            raise PydanticCustomError("format", '"{value}" is not a valid identifier.', {"value": value})
        return value.lower()


_VIOLATIONS = {
    "enum": EnumValidationError,
    "format": FormatValidationError,
}


def validate_risk_category(data: Dict[str, Any]) -> RiskCategoryRules:
    """
    Apply the entity rules to a payload.

    Parameters
    ----------
    data : dict
        Candidate document fields. Unknown keys are dropped.

    Returns
    -------
    RiskCategoryRules
        The validated, allow-listed fields.

    Raises
    ------
    EntityValidationError
        With every violation joined into one message, e.g.
        ``RiskCategory validation failed: risk_level: `5` is not a valid enum value for path `risk_level`.``
        The subclass (``EnumValidationError``, ``FormatValidationError``) follows the first violation.
    """
    try:
        return RiskCategoryRules.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        parts = []
        for err in errors:
            field = ".".join(str(part) for part in err["loc"])
            if err["type"] == "missing":
                message = f"Path `{field}` is required."
            else:
                message = err["msg"]
            parts.append(f"{field}: {message}")

        first = errors[0]
        error_class = _VIOLATIONS.get(first["type"], EntityValidationError)
        raise error_class(
            f"{ENTITY_NAME} validation failed: {', '.join(parts)}",
            field=str(first["loc"][0]) if first["loc"] else None,
            value=None if first["type"] == "missing" else first.get("input"),
        ) from None


class RiskCategoryDetails(BaseModel):
    """
    A stored Risk Category as returned by every operation.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    deleted: bool
    keywords: List[str]
    language_code: str
    name: str
    risk_level: int
    updated_by_user_id: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo; they are stored as UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
