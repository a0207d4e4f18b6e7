"""
CRUD Router Factory

Every resource exposes the same five endpoints:

    GET    /{path}            list every row                  200
    GET    /{path}/{item_id}  one row                         200, 404
    POST   /{path}            insert, returns the new row     201
    PUT    /{path}/{item_id}  full replace, returns the row   200, 404
    DELETE /{path}/{item_id}  delete, returns a text message  200, 404

Each handler runs exactly one statement from services/store.py inside
store_failure_boundary(). A database error there is rolled back, logged,
and re-raised as StoreError with the operation's message (500). Missing
rows, and ids too wide for a BIGINT, raise ResourceNotFoundError (404).
Both are turned into plain-text responses by the handlers registered in
main.py.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import List

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from biblioteca.dependencies import DbSession
from biblioteca.exceptions import ResourceNotFoundError, StoreError
from biblioteca.resources import Resource
from biblioteca.services import store

logger = logging.getLogger(__name__)

# Primary keys are BIGINT at most; anything wider cannot name a row
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def ensure_id_in_range(item_id: int, resource: Resource) -> None:
    """Raise ResourceNotFoundError for ids the database driver cannot bind."""
    if not MIN_ID <= item_id <= MAX_ID:
        raise ResourceNotFoundError(resource.not_found_message)


@contextmanager
def store_failure_boundary(db: Session, message: str) -> Iterator[None]:
    """
    Convert any SQLAlchemy error raised inside the block into StoreError.

    The session is rolled back first so its connection goes back to the
    pool clean. The original exception is logged with its traceback and
    chained, but its text never reaches the client.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"{message}: {exc.__class__.__name__}: {exc}", exc_info=True)
        raise StoreError(message) from exc


def build_crud_router(resource: Resource) -> APIRouter:
    """
    Build the five CRUD endpoints for a resource.

    Args:
        resource: The entity to expose

    Returns:
        APIRouter mounted at /{resource.path}
    """
    table = resource.table
    create_schema = resource.create_schema
    update_schema = resource.update_schema
    response_schema = resource.response_schema

    router = APIRouter(
        prefix=f"/{resource.path}",
        tags=[resource.plural.capitalize()],
        responses={
            404: {"description": resource.not_found_message},
            500: {"description": "Database error"},
        },
    )

    @router.get(
        "",
        response_model=List[response_schema],
        summary=f"List all {resource.plural}",
    )
    def list_items(db: DbSession):
        with store_failure_boundary(db, resource.list_error_message):
            rows = store.list_rows(db, table)
        return [response_schema.model_validate(dict(row)) for row in rows]

    @router.get(
        "/{item_id}",
        response_model=response_schema,
        summary=f"Get a {resource.singular} by id",
    )
    def get_item(item_id: int, db: DbSession):
        ensure_id_in_range(item_id, resource)
        with store_failure_boundary(db, resource.get_error_message):
            row = store.get_row(db, table, item_id)
        if row is None:
            raise ResourceNotFoundError(resource.not_found_message)
        return response_schema.model_validate(dict(row))

    @router.post(
        "",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {resource.singular}",
    )
    def create_item(payload: create_schema, db: DbSession):
        """
        Insert a row.

        Only the fields present in the body are sent to the database, so
        omitted columns take their server default.
        """
        values = payload.model_dump(exclude_unset=True)
        with store_failure_boundary(db, resource.create_error_message):
            row = store.insert_row(db, table, values)
        return response_schema.model_validate(dict(row))

    @router.put(
        "/{item_id}",
        response_model=response_schema,
        summary=f"Replace a {resource.singular}",
    )
    def update_item(item_id: int, payload: update_schema, db: DbSession):
        """Overwrite every field. Fields missing from the body are set to null."""
        ensure_id_in_range(item_id, resource)
        values = payload.model_dump()
        with store_failure_boundary(db, resource.update_error_message):
            row = store.update_row(db, table, item_id, values)
        if row is None:
            raise ResourceNotFoundError(resource.not_found_message)
        return response_schema.model_validate(dict(row))

    @router.delete(
        "/{item_id}",
        response_class=PlainTextResponse,
        summary=f"Delete a {resource.singular}",
    )
    def delete_item(item_id: int, db: DbSession):
        ensure_id_in_range(item_id, resource)
        with store_failure_boundary(db, resource.delete_error_message):
            row = store.delete_row(db, table, item_id)
        if row is None:
            raise ResourceNotFoundError(resource.not_found_message)
        logger.info(f"Deleted {resource.singular} {item_id}")
        return PlainTextResponse(resource.deleted_message)

    return router
