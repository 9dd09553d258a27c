"""
Service-layer operations for Risk Categories.

Five operations, each shaped validate -> act -> return:

- create_risk_category(payload)
- get_risk_category_by_id(id)
- find_risk_categories(query)
- patch_risk_category(id, changes)
- soft_delete_risk_category(id)

Client preconditions (identifier format, deleted-at-create, id in an update
body) are checked before any session is opened, so a bad request never touches
the database. The database work itself runs in private helpers wrapped with
`@transactional`, which injects the `session` keyword argument and commits or
rolls back.

Every operation returns `RiskCategoryDetails` (or a list of them) built while
the session is still open, and raises a `RiskCategoryError` subclass on failure.

Uniqueness
----------
`{language_code, name}` uniqueness at creation is a count-then-insert sequence.
Two concurrent creates with the same pair can both pass the count; no unique
index backs it.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from risk_categories.api.models import (
    UPDATABLE_FIELDS,
    RiskCategoryDetails,
    validate_risk_category,
)
from risk_categories.api.utils import is_valid_id
from risk_categories.database.daos.risk_category_dao import RiskCategoryDao
from risk_categories.database.entities.risk_category import RiskCategory
from risk_categories.database.helpers.transactionManagement import transactional
from risk_categories.errors import ClientPreconditionError, NotFoundError


def _now() -> datetime:
    return datetime.now(timezone.utc)


def check_id(id: Any) -> str:
    """
    Raise `ClientPreconditionError` unless `id` is a well-formed identifier.

    Returns the identifier in the lowercase form it is stored under, so hex
    digits match whatever case the caller used.
    """
    if not is_valid_id(id):
        raise ClientPreconditionError(f"'{id}' is not a valid identifier.")
    return id.lower()


def create_risk_category(payload: Dict[str, Any]) -> RiskCategoryDetails:
    """
    Create a new, active Risk Category.

    Parameters
    ----------
    payload : dict
        Request body. Unknown fields are dropped; `deleted` must not be truthy.

    Returns
    -------
    RiskCategoryDetails
        The stored document, with `created_at == updated_at`.

    Raises
    ------
    ClientPreconditionError
        `deleted` is set, or `{language_code, name}` is already taken
        (deleted rows included).
    EntityValidationError
        The entity rules reject the payload.
    """
    if payload.get("deleted"):
        raise ClientPreconditionError("Cannot create deleted Risk Category.")
    return _insert_risk_category(payload=payload)


@transactional
def _insert_risk_category(session: Session, payload: Dict[str, Any]) -> RiskCategoryDetails:
    dao = RiskCategoryDao()
    language_code = payload.get("language_code")
    name = payload.get("name")
    # Anything but two strings cannot collide; the entity rules report it below.
    if isinstance(language_code, str) and isinstance(name, str):
        if dao.countDocuments(session, {"language_code": language_code, "name": name}):
            raise ClientPreconditionError(f"{language_code}:{name} already exists")

    rules = validate_risk_category(payload)
    document = RiskCategory(
        language_code=rules.language_code,
        name=rules.name,
        risk_level=rules.risk_level,
        updated_by_user_id=rules.updated_by_user_id,
        keywords=rules.keywords,
        created_on=_now(),
    )
    dao.createDocument(session, document)
    return RiskCategoryDetails.model_validate(document)


def get_risk_category_by_id(id: str) -> RiskCategoryDetails:
    """
    Fetch one Risk Category, deleted or not.

    Raises
    ------
    ClientPreconditionError
        Malformed identifier.
    NotFoundError
        No document has this identifier.
    """
    return _fetch_risk_category(id=check_id(id))


@transactional
def _fetch_risk_category(session: Session, id: str) -> RiskCategoryDetails:
    document = RiskCategoryDao().fetchById(session, id)
    if document is None:
        raise NotFoundError()
    return RiskCategoryDetails.model_validate(document)


def find_risk_categories(query: Optional[Dict[str, Any]] = None) -> List[RiskCategoryDetails]:
    """
    Exact-match search.

    Parameters
    ----------
    query : dict | None
        - None or {} returns every document.
        - Only `id` behaves like a lookup by id. A falsy `id` is not checked
          and matches nothing.
        - A subset of fields returns the documents matching all of them.
        - A field outside the schema, or a value that cannot be cast to the
          field's type, returns an empty list.

    Raises
    ------
    ClientPreconditionError
        `query` has a malformed `id`.
    """
    query = dict(query or {})
    if query.get("id"):
        query["id"] = check_id(query["id"])
    return _search_risk_categories(query=query)


@transactional
def _search_risk_categories(session: Session, query: Dict[str, Any]) -> List[RiskCategoryDetails]:
    documents = RiskCategoryDao().fetchDocuments(session, query)
    return [RiskCategoryDetails.model_validate(document) for document in documents]


def patch_risk_category(id: str, changes: Dict[str, Any]) -> RiskCategoryDetails:
    """
    Partially update a Risk Category.

    Parameters
    ----------
    id : str
        Target identifier.
    changes : dict
        Fields to set. Only `UPDATABLE_FIELDS` are applied; `deleted`,
        timestamps and unknown keys are dropped.

    Returns
    -------
    RiskCategoryDetails
        The updated document with a fresh `updated_at`.

    Raises
    ------
    ClientPreconditionError
        Malformed identifier, or `changes` carries an `id`.
    NotFoundError
        No document has this identifier.
    EntityValidationError
        The merged document breaks the entity rules.
    """
    id = check_id(id)
    if "id" in changes:
        raise ClientPreconditionError("Request body cannot have id.")
    return _update_risk_category(id=id, changes=changes)


@transactional
def _update_risk_category(session: Session, id: str, changes: Dict[str, Any]) -> RiskCategoryDetails:
    dao = RiskCategoryDao()
    document = dao.fetchById(session, id)
    if document is None:
        raise NotFoundError()

    updates = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
    current = RiskCategoryDetails.model_validate(document).model_dump()
    validated = validate_risk_category({**current, **updates}).model_dump()

    document = dao.updateById(session, id, {key: validated[key] for key in updates}, _now())
    return RiskCategoryDetails.model_validate(document)


def soft_delete_risk_category(id: str) -> RiskCategoryDetails:
    """
    Mark a Risk Category as deleted.

    Only `deleted` (set to True) and `updated_at` change. Repeating the call
    succeeds again and only moves `updated_at`.

    Raises
    ------
    ClientPreconditionError
        Malformed identifier.
    NotFoundError
        No document has this identifier.
    """
    return _mark_deleted(id=check_id(id))


@transactional
def _mark_deleted(session: Session, id: str) -> RiskCategoryDetails:
    document = RiskCategoryDao().updateById(session, id, {"deleted": True}, _now())
    if document is None:
        raise NotFoundError()
    return RiskCategoryDetails.model_validate(document)
