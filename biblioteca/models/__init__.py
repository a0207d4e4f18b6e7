"""
SQLAlchemy Models Package

One model per table:

- Categoria  (categoria)
- Autor      (autor)
- Livro      (livro)       -> autor, categoria
- Aluno      (aluno)
- Emprestimo (emprestimo)  -> livro, aluno

Importing this package registers every table on Base.metadata.
"""

from biblioteca.models.categoria import Categoria
from biblioteca.models.autor import Autor
from biblioteca.models.livro import Livro
from biblioteca.models.aluno import Aluno
from biblioteca.models.emprestimo import Emprestimo

__all__ = [
    "Categoria",
    "Autor",
    "Livro",
    "Aluno",
    "Emprestimo",
]
