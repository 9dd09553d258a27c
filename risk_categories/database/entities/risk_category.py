"""
RiskCategory ORM Model
======================

The ``RiskCategory`` ORM model stores one language-scoped risk classification
in the ``risk_category`` table. Each row is a self-contained document: the
keyword list lives in a JSON column alongside the scalar fields.

Key features
~~~~~~~~~~~~
- 24-hex-character document identifier (``id``), assigned at creation
- ``language_code`` + ``name`` pair, unique at creation time (checked by the service)
- ``risk_level`` severity (-1 exclusion marker, 1-4 increasing severity)
- Soft-delete flag (``deleted``); rows are never removed by the service
- Timezone-aware ``created_at`` / ``updated_at`` timestamps (UTC)
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, TEXT, Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from risk_categories.api.utils import generate_id
from risk_categories.database.config.connection_engine import declarativeBase


class RiskCategory(declarativeBase):
    """
    ORM model for the `risk_category` table.

    Attributes
    ----------
    id : str
        Primary key. 24 hex characters.
    deleted : bool
        Soft-delete marker.
    keywords : list[str]
        Matching keywords, insertion order preserved.
    language_code : str
        Language of the keywords.
    name : str
        Category name.
    risk_level : int
        One of -1, 1, 2, 3, 4.
    updated_by_user_id : str
        Identifier of the user who last wrote the row.
    created_at : datetime
        Creation time (UTC).
    updated_at : datetime
        Time of the last write (UTC).
    """

    __tablename__ = "risk_category"

    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    language_code: Mapped[str] = mapped_column(TEXT, nullable=False)
    name: Mapped[str] = mapped_column(TEXT, nullable=False)
    risk_level: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_by_user_id: Mapped[str] = mapped_column(String(24), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __init__(
        self,
        language_code: str,
        name: str,
        risk_level: int,
        updated_by_user_id: str,
        created_on: datetime,
        keywords: Optional[List[str]] = None,
    ):
        """
        Initialize a new, active RiskCategory.

        Parameters
        ----------
        language_code, name, risk_level, updated_by_user_id
            Validated field values.
        created_on : datetime
            Creation timestamp; also used as the first `updated_at`.
        keywords : list[str], optional
            Defaults to an empty list.
        """
        self.id = generate_id()
        self.deleted = False
        self.keywords = list(keywords or [])
        self.language_code = language_code
        self.name = name
        self.risk_level = risk_level
        self.updated_by_user_id = updated_by_user_id
        self.created_at = created_on
        self.updated_at = created_on

    def __str__(self) -> str:
        return f"RiskCategory: id:{self.id}, {self.language_code}:{self.name}, risk_level:{self.risk_level}"
