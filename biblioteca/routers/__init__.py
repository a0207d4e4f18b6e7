"""
API Routers Package

One router per resource, all produced by build_crud_router():

- /categorias
- /autores
- /livros
- /alunos
- /emprestimos

Each router is registered in main.py.
"""

from biblioteca.resources import ALUNOS, AUTORES, CATEGORIAS, EMPRESTIMOS, LIVROS
from biblioteca.routers.crud import build_crud_router

categorias_router = build_crud_router(CATEGORIAS)
autores_router = build_crud_router(AUTORES)
livros_router = build_crud_router(LIVROS)
alunos_router = build_crud_router(ALUNOS)
emprestimos_router = build_crud_router(EMPRESTIMOS)

__all__ = [
    "build_crud_router",
    "categorias_router",
    "autores_router",
    "livros_router",
    "alunos_router",
    "emprestimos_router",
]
