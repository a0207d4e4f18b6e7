"""Database helpers shared by test modules."""

from typing import Any

from biblioteca.database import Base, Database


def persist(database: Database, obj: Base) -> dict[str, Any]:
    """Insert one ORM object and return its row as a dict."""
    with database.session() as db:
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return {column.name: getattr(obj, column.name) for column in obj.__table__.columns}


def count_rows(database: Database, model: type[Base]) -> int:
    """Number of rows currently in the model's table."""
    with database.session() as db:
        return db.query(model).count()
