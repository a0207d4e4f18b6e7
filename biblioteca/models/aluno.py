"""
Aluno Model

A student who borrows books. Referenced by Emprestimo.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from biblioteca.database import Base


class Aluno(Base):
    """
    Student model.

    Table: aluno
    """

    __tablename__ = "aluno"

    id: Mapped[int] = mapped_column(primary_key=True)

    nome: Mapped[str] = mapped_column(String(255), nullable=False)

    # School class, e.g. "3A"
    turma: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    idade: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"Aluno(id={self.id}, nome='{self.nome}')"
