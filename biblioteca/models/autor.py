"""
Autor Model

Represents a book author. Referenced by Livro through fk_autor_id.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from biblioteca.database import Base


class Autor(Base):
    """
    Author model.

    Table: autor

    Example:
        autor = Autor(nome="Machado de Assis", nacionalidade="Brasileira")
    """

    __tablename__ = "autor"

    id: Mapped[int] = mapped_column(primary_key=True)

    nome: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author's full name"
    )

    nacionalidade: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"Autor(id={self.id}, nome='{self.nome}')"
