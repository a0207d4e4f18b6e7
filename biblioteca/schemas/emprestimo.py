"""
Emprestimo Pydantic Schemas

Dates are ISO 8601 strings on the wire ("2024-03-01").
"""

from datetime import date
from typing import Optional

from pydantic import ConfigDict, Field

from biblioteca.schemas.base import EntityBase, EntityResponseMixin


class EmprestimoBase(EntityBase):
    """Fields of a loan."""

    fk_livro_id: Optional[int] = Field(default=None, description="Id of the lent book")
    fk_aluno_id: Optional[int] = Field(default=None, description="Id of the borrowing student")

    data_emprestimo: Optional[date] = Field(
        default=None,
        description="Date the book was lent",
        examples=["2024-03-01"],
    )

    data_devolucao: Optional[date] = Field(
        default=None,
        description="Date the book was returned (null while still on loan)",
        examples=["2024-03-15"],
    )


class EmprestimoCreate(EmprestimoBase):
    """Body of POST /emprestimos."""
    pass


class EmprestimoUpdate(EmprestimoBase):
    """Body of PUT /emprestimos/{id}. Omitted fields are written as null."""
    pass


class EmprestimoResponse(EmprestimoBase, EntityResponseMixin):
    """A loan row."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "fk_livro_id": 1,
                "fk_aluno_id": 1,
                "data_emprestimo": "2024-03-01",
                "data_devolucao": None,
            }
        },
    )
