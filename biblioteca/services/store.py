"""
Store Service

The single SQL statement behind each CRUD operation, written once for any
table. Statements are SQLAlchemy Core constructs, so values always travel
as bound parameters and are never formatted into SQL text.

Rows come back as dict-like mappings of column name to value.

Write helpers commit on success. Errors are not handled here; the caller
decides how a failed statement is reported.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.orm import Session


def list_rows(db: Session, table: Table) -> Sequence[RowMapping]:
    """SELECT * FROM table, in primary key order."""
    stmt = select(table).order_by(*table.primary_key.columns)
    return db.execute(stmt).mappings().all()


def get_row(db: Session, table: Table, row_id: int) -> Optional[RowMapping]:
    """Fetch one row by id, or None."""
    stmt = select(table).where(table.c.id == row_id)
    return db.execute(stmt).mappings().one_or_none()


def insert_row(db: Session, table: Table, values: Mapping[str, Any]) -> RowMapping:
    """
    INSERT ... RETURNING *.

    Columns missing from `values` are left out of the statement, so the
    database fills in their server default (or NULL). An empty mapping
    becomes INSERT ... DEFAULT VALUES.
    """
    stmt = insert(table).returning(*table.columns)
    if values:
        stmt = stmt.values(dict(values))
    row = db.execute(stmt).mappings().one()
    db.commit()
    return row


def update_row(
    db: Session,
    table: Table,
    row_id: int,
    values: Mapping[str, Any],
) -> Optional[RowMapping]:
    """
    UPDATE ... WHERE id = :id RETURNING *.

    Returns None when no row has that id.
    """
    stmt = (
        update(table)
        .where(table.c.id == row_id)
        .values(dict(values))
        .returning(*table.columns)
    )
    row = db.execute(stmt).mappings().one_or_none()
    db.commit()
    return row


def delete_row(db: Session, table: Table, row_id: int) -> Optional[RowMapping]:
    """
    DELETE ... WHERE id = :id RETURNING *.

    Returns the deleted row, or None when no row has that id.
    """
    stmt = delete(table).where(table.c.id == row_id).returning(*table.columns)
    row = db.execute(stmt).mappings().one_or_none()
    db.commit()
    return row
