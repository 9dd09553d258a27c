"""
RiskCategory DAO

Purpose
-------
Thin data-access layer for the `RiskCategory` ORM entity, shaped like a
document store:
- Count by an exact-match filter
- Insert
- Find by id
- Find by an exact-match filter over the known fields
- Update by id with `$set` semantics

Design
------
- The DAO expects an active SQLAlchemy `Session` supplied by the caller; the
  service layer (`@transactional`) owns commit and rollback.
- No business rules here: validation, uniqueness and soft-delete policy live in
  `risk_categories.database.core.funcs`.

Search semantics
----------------
- Only `SEARCHABLE_FIELDS` can be filtered on. A filter naming any other key
  matches nothing and returns an empty list.
- Values are cast to the field type first (`"false"` -> False, `"2"` -> 2,
  ISO-8601 strings -> datetimes). A value that cannot be cast, such as an
  object for a text field, matches nothing and returns an empty list.
- `keywords`: a list value matches the whole array exactly; a scalar matches
  arrays containing it.
- Results are ordered by `created_at`, then `id` (insertion order).

Error Handling
--------------
- Each method catches generic `Exception`, logs the failing method, and re-raises.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from risk_categories.database.entities.risk_category import RiskCategory

logger = logging.getLogger("uvicorn")

SEARCHABLE_FIELDS = (
    "id",
    "deleted",
    "keywords",
    "language_code",
    "name",
    "risk_level",
    "updated_by_user_id",
    "created_at",
    "updated_at",
)
_FILTER_TYPES = {
    "id": TypeAdapter(Optional[str]),
    "deleted": TypeAdapter(Optional[bool]),
    "keywords": TypeAdapter(Union[List[str], str]),
    "language_code": TypeAdapter(Optional[str]),
    "name": TypeAdapter(Optional[str]),
    "risk_level": TypeAdapter(Optional[int]),
    "updated_by_user_id": TypeAdapter(Optional[str]),
    "created_at": TypeAdapter(Optional[datetime]),
    "updated_at": TypeAdapter(Optional[datetime]),
}
"""Type each searchable field's filter value is cast to before querying."""

_LOWERCASE_FIELDS = ("id", "updated_by_user_id")


def _cast_filters(filters: Dict[str, Any]) -> Dict[str, Any]:
    """
    Cast every filter value to its field type.

    Raises
    ------
    pydantic.ValidationError
        A value cannot be cast (e.g. an object for a text field).
    """
    cast = {}
    for key, value in filters.items():
        value = _FILTER_TYPES[key].validate_python(value)
        if key in _LOWERCASE_FIELDS and isinstance(value, str):
            value = value.lower()
        cast[key] = value
    return cast


def _keywords_match(keywords: List[str], wanted: Any) -> bool:
    if isinstance(wanted, list):
        return keywords == wanted
    return wanted in keywords


class RiskCategoryDao:
    """
    Data Access Object (DAO) for RiskCategory documents.
    """

    def countDocuments(self, session: Session, filters: Dict[str, Any]) -> int:
        """
        Count rows whose columns equal the given values.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        filters : dict
            Column name -> value, e.g. ``{"language_code": "en", "name": "Protests"}``.

        Returns
        -------
        int
            Number of matching rows, deleted ones included.
        """
        try:
            return session.query(RiskCategory).filter_by(**filters).count()
        except Exception as e:
            logger.error(f"Error in RiskCategoryDao.countDocuments. Error Message: {e}")
            raise e

    def createDocument(self, session: Session, document: RiskCategory) -> RiskCategory:
        """
        Stage and flush a new RiskCategory so database defaults and errors surface now.
        """
        try:
            session.add(document)
            session.flush()
            return document
        except Exception as e:
            logger.error(f"Error in RiskCategoryDao.createDocument. Error Message: {e}")
            raise e

    def fetchById(self, session: Session, id: str) -> Optional[RiskCategory]:
        """
        Fetch a RiskCategory by primary key.

        Returns
        -------
        RiskCategory | None
            None when no row has that id.
        """
        try:
            return session.get(RiskCategory, id)
        except Exception as e:
            logger.error(f"Error in RiskCategoryDao.fetchById. Error Message: {e}")
            raise e

    def fetchDocuments(self, session: Session, filters: Dict[str, Any]) -> List[RiskCategory]:
        """
        Fetch every RiskCategory matching an exact-match filter.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        filters : dict
            Field -> value over `SEARCHABLE_FIELDS`; empty matches all rows.

        Returns
        -------
        list[RiskCategory]
            Matching rows in insertion order; empty if a key is not searchable
            or a value cannot be cast to its field type.
        """
        try:
            if any(key not in SEARCHABLE_FIELDS for key in filters):
                return []
            try:
                filters = _cast_filters(filters)
            except ValidationError as e:
                logger.info(f"RiskCategoryDao.fetchDocuments: {e.error_count()} uncastable filter value(s)")
                return []

            query = session.query(RiskCategory)
            for key, value in filters.items():
                if key == "keywords":
                    continue
                query = query.filter(getattr(RiskCategory, key) == value)
            documents = query.order_by(RiskCategory.created_at, RiskCategory.id).all()

            if "keywords" in filters:
                documents = [doc for doc in documents if _keywords_match(doc.keywords, filters["keywords"])]
            return documents
        except Exception as e:
            logger.error(f"Error in RiskCategoryDao.fetchDocuments. Error Message: {e}")
            raise e

    def updateById(
        self, session: Session, id: str, changes: Dict[str, Any], timestamp: datetime
    ) -> Optional[RiskCategory]:
        """
        Set the given fields on one row and stamp `updated_at`.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        id : str
            Primary key of the row.
        changes : dict
            Field -> new value; fields not named are left untouched.
        timestamp : datetime
            New `updated_at`.

        Returns
        -------
        RiskCategory | None
            The updated row, or None when no row has that id.
        """
        try:
            document = session.get(RiskCategory, id)
            if document is None:
                return None
            for key, value in changes.items():
                setattr(document, key, value)
            document.updated_at = timestamp
            session.flush()
            return document
        except Exception as e:
            logger.error(f"Error in RiskCategoryDao.updateById. Error Message: {e}")
            raise e
