"""
Autor Pydantic Schemas
"""

from typing import Optional

from pydantic import ConfigDict, Field

from biblioteca.schemas.base import EntityBase, EntityResponseMixin


class AutorBase(EntityBase):
    """Fields of an author."""

    nome: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Author's full name",
        examples=["Machado de Assis"],
    )

    nacionalidade: Optional[str] = Field(
        default=None,
        max_length=100,
        examples=["Brasileira"],
    )


class AutorCreate(AutorBase):
    """Body of POST /autores."""
    pass


class AutorUpdate(AutorBase):
    """Body of PUT /autores/{id}. Omitted fields are written as null."""
    pass


class AutorResponse(AutorBase, EntityResponseMixin):
    """An author row."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "nome": "Machado de Assis",
                "nacionalidade": "Brasileira",
            }
        },
    )
