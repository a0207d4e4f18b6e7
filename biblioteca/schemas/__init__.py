"""
Pydantic Schemas Package

Schema Naming Convention:
- XxxBase: The entity's field list
- XxxCreate: Body accepted by POST
- XxxUpdate: Body accepted by PUT (full replace)
- XxxResponse: Row returned to the client, including its id
"""

from biblioteca.schemas.aluno import (
    AlunoBase,
    AlunoCreate,
    AlunoResponse,
    AlunoUpdate,
)
from biblioteca.schemas.autor import (
    AutorBase,
    AutorCreate,
    AutorResponse,
    AutorUpdate,
)
from biblioteca.schemas.categoria import (
    CategoriaBase,
    CategoriaCreate,
    CategoriaResponse,
    CategoriaUpdate,
)
from biblioteca.schemas.emprestimo import (
    EmprestimoBase,
    EmprestimoCreate,
    EmprestimoResponse,
    EmprestimoUpdate,
)
from biblioteca.schemas.livro import (
    LivroBase,
    LivroCreate,
    LivroResponse,
    LivroUpdate,
)

__all__ = [
    "CategoriaBase",
    "CategoriaCreate",
    "CategoriaUpdate",
    "CategoriaResponse",
    "AutorBase",
    "AutorCreate",
    "AutorUpdate",
    "AutorResponse",
    "LivroBase",
    "LivroCreate",
    "LivroUpdate",
    "LivroResponse",
    "AlunoBase",
    "AlunoCreate",
    "AlunoUpdate",
    "AlunoResponse",
    "EmprestimoBase",
    "EmprestimoCreate",
    "EmprestimoUpdate",
    "EmprestimoResponse",
]
