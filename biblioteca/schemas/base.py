"""
Shared schema configuration.

Request bodies reject unknown keys (extra="forbid") so a misspelled field
comes back as a 422 instead of being silently stored as NULL. Fields
themselves are optional: NOT NULL and foreign key rules are left to the
database.
"""

from pydantic import BaseModel, ConfigDict


class EntityBase(BaseModel):
    """Base for every entity's field list."""

    model_config = ConfigDict(extra="forbid")


class EntityResponseMixin(BaseModel):
    """Adds the database-generated id and allows building from rows."""

    id: int

    model_config = ConfigDict(extra="forbid", from_attributes=True)
