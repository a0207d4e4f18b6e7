"""
Aluno Pydantic Schemas
"""

from typing import Optional

from pydantic import ConfigDict, Field

from biblioteca.schemas.base import EntityBase, EntityResponseMixin


class AlunoBase(EntityBase):
    """Fields of a student."""

    nome: Optional[str] = Field(default=None, max_length=255, examples=["Ana Souza"])
    turma: Optional[str] = Field(default=None, max_length=50, examples=["3A"])
    idade: Optional[int] = Field(default=None, examples=[16])


class AlunoCreate(AlunoBase):
    """Body of POST /alunos."""
    pass


class AlunoUpdate(AlunoBase):
    """Body of PUT /alunos/{id}. Omitted fields are written as null."""
    pass


class AlunoResponse(AlunoBase, EntityResponseMixin):
    """A student row."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id": 1, "nome": "Ana Souza", "turma": "3A", "idade": 16}
        },
    )
