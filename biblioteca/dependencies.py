"""
FastAPI Dependencies Module

Reusable dependencies injected into route handlers.

Instead of writing:
    def list_items(db: Session = Depends(get_db)):

routes write:
    def list_items(db: DbSession):
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from biblioteca.database import Database, get_database, get_db

DbSession = Annotated[Session, Depends(get_db)]

DatabaseHandle = Annotated[Database, Depends(get_database)]
