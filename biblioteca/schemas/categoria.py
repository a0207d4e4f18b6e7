"""
Categoria Pydantic Schemas
"""

from typing import Optional

from pydantic import ConfigDict, Field

from biblioteca.schemas.base import EntityBase, EntityResponseMixin


class CategoriaBase(EntityBase):
    """Fields of a category."""

    nome: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Category name",
        examples=["Ficção", "Romance"],
    )


class CategoriaCreate(CategoriaBase):
    """Body of POST /categorias."""
    pass


class CategoriaUpdate(CategoriaBase):
    """Body of PUT /categorias/{id}. Omitted fields are written as null."""
    pass


class CategoriaResponse(CategoriaBase, EntityResponseMixin):
    """A category row."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 1, "nome": "Ficção"}},
    )
