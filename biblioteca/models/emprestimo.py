"""
Emprestimo Model

A loan of one book to one student.

Foreign keys:
- fk_livro_id -> livro.id
- fk_aluno_id -> aluno.id

Lending does not touch livro.disponivel; clients update the book
themselves if they track availability.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from biblioteca.database import Base


class Emprestimo(Base):
    """
    Loan model.

    Table: emprestimo

    data_devolucao is NULL while the book has not been returned.
    """

    __tablename__ = "emprestimo"

    id: Mapped[int] = mapped_column(primary_key=True)

    fk_livro_id: Mapped[int] = mapped_column(
        ForeignKey("livro.id"),
        nullable=False,
        index=True,
    )

    fk_aluno_id: Mapped[int] = mapped_column(
        ForeignKey("aluno.id"),
        nullable=False,
        index=True,
    )

    data_emprestimo: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    data_devolucao: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return (
            f"Emprestimo(id={self.id}, fk_livro_id={self.fk_livro_id}, "
            f"fk_aluno_id={self.fk_aluno_id})"
        )
