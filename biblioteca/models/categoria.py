"""
Categoria Model

A book category ("Ficção", "Romance", ...). Referenced by Livro.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from biblioteca.database import Base


class Categoria(Base):
    """
    Category of books.

    Table: categoria
    """

    __tablename__ = "categoria"

    id: Mapped[int] = mapped_column(primary_key=True)

    nome: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Category name"
    )

    def __repr__(self) -> str:
        return f"Categoria(id={self.id}, nome='{self.nome}')"
