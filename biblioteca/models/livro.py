"""
Livro Model

A book in the library catalogue.

Foreign keys:
- fk_autor_id -> autor.id
- fk_categoria_id -> categoria.id

The store rejects rows pointing at missing authors or categories; the API
layer does not check them itself.
"""

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from biblioteca.database import Base


class Livro(Base):
    """
    Book model.

    Table: livro

    `disponivel` has a server-side default of TRUE, so an INSERT that
    leaves the column out creates an available book. It stays nullable
    because a full replace (PUT) without the field writes NULL.
    """

    __tablename__ = "livro"

    id: Mapped[int] = mapped_column(primary_key=True)

    titulo: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Book title"
    )

    ano_publicacao: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Year of publication"
    )

    fk_autor_id: Mapped[int] = mapped_column(
        ForeignKey("autor.id"),
        nullable=False,
        index=True,
    )

    fk_categoria_id: Mapped[int] = mapped_column(
        ForeignKey("categoria.id"),
        nullable=False,
        index=True,
    )

    disponivel: Mapped[Optional[bool]] = mapped_column(
        Boolean,
        server_default=true(),
        nullable=True,
        comment="Whether the book can be lent"
    )

    def __repr__(self) -> str:
        return f"Livro(id={self.id}, titulo='{self.titulo}')"
