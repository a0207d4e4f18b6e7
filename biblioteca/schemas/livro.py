"""
Livro Pydantic Schemas

fk_autor_id and fk_categoria_id are plain integers here; whether they
point at existing rows is checked by the database.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from biblioteca.schemas.base import EntityBase, EntityResponseMixin


class LivroBase(EntityBase):
    """Fields of a book."""

    titulo: Optional[str] = Field(
        default=None,
        max_length=500,
        description="Book title",
        examples=["Dom Casmurro"],
    )

    ano_publicacao: Optional[int] = Field(
        default=None,
        description="Year of publication",
        examples=[1899],
    )

    fk_autor_id: Optional[int] = Field(
        default=None,
        description="Id of the book's author",
    )

    fk_categoria_id: Optional[int] = Field(
        default=None,
        description="Id of the book's category",
    )

    disponivel: Optional[bool] = Field(
        default=None,
        description="Whether the book can be lent (true when omitted on creation)",
    )


class LivroCreate(LivroBase):
    """
    Body of POST /livros.

    Leaving out `disponivel` lets the database default apply (true).
    """
    pass


class LivroUpdate(LivroBase):
    """Body of PUT /livros/{id}. Omitted fields, `disponivel` included, become null."""
    pass


class LivroResponse(LivroBase, EntityResponseMixin):
    """A book row."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "titulo": "Dom Casmurro",
                "ano_publicacao": 1899,
                "fk_autor_id": 1,
                "fk_categoria_id": 2,
                "disponivel": True,
            }
        },
    )
