"""
Resource Definitions

The five entities served by the API. Each Resource ties together the
URL path, the table, the request/response schemas and the Portuguese
wording used in plain-text responses.

Adding an entity means adding a model, its schemas and one entry here;
routers/crud.py builds the endpoints.
"""

from dataclasses import dataclass
from typing import Type

from pydantic import BaseModel
from sqlalchemy import Table

from biblioteca.database import Base
from biblioteca.models import Aluno, Autor, Categoria, Emprestimo, Livro
from biblioteca.schemas import (
    AlunoCreate,
    AlunoResponse,
    AlunoUpdate,
    AutorCreate,
    AutorResponse,
    AutorUpdate,
    CategoriaCreate,
    CategoriaResponse,
    CategoriaUpdate,
    EmprestimoCreate,
    EmprestimoResponse,
    EmprestimoUpdate,
    LivroCreate,
    LivroResponse,
    LivroUpdate,
)


@dataclass(frozen=True)
class Resource:
    """
    One CRUD-able entity.

    Attributes:
        path: URL segment, e.g. "categorias" for /categorias
        model: SQLAlchemy model whose table is queried
        create_schema: Body accepted by POST
        update_schema: Body accepted by PUT
        response_schema: Shape of returned rows
        singular: Entity name used in messages ("categoria")
        plural: Collection name used in messages ("categorias")
        feminine: Grammatical gender, picks "encontrada"/"encontrado"
    """

    path: str
    model: Type[Base]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    singular: str
    plural: str
    feminine: bool = False

    @property
    def table(self) -> Table:
        return self.model.__table__

    @property
    def _ending(self) -> str:
        return "a" if self.feminine else "o"

    # -------------------------------------------------------------------------
    # Response messages
    # -------------------------------------------------------------------------
    @property
    def not_found_message(self) -> str:
        return f"{self.singular.capitalize()} não encontrad{self._ending}"

    @property
    def deleted_message(self) -> str:
        return f"{self.singular.capitalize()} deletad{self._ending} com sucesso"

    @property
    def list_error_message(self) -> str:
        return f"Erro ao buscar {self.plural}"

    @property
    def get_error_message(self) -> str:
        return f"Erro ao buscar {self.singular}"

    @property
    def create_error_message(self) -> str:
        return f"Erro ao criar {self.singular}"

    @property
    def update_error_message(self) -> str:
        return f"Erro ao atualizar {self.singular}"

    @property
    def delete_error_message(self) -> str:
        return f"Erro ao deletar {self.singular}"


CATEGORIAS = Resource(
    path="categorias",
    model=Categoria,
    create_schema=CategoriaCreate,
    update_schema=CategoriaUpdate,
    response_schema=CategoriaResponse,
    singular="categoria",
    plural="categorias",
    feminine=True,
)

AUTORES = Resource(
    path="autores",
    model=Autor,
    create_schema=AutorCreate,
    update_schema=AutorUpdate,
    response_schema=AutorResponse,
    singular="autor",
    plural="autores",
)

LIVROS = Resource(
    path="livros",
    model=Livro,
    create_schema=LivroCreate,
    update_schema=LivroUpdate,
    response_schema=LivroResponse,
    singular="livro",
    plural="livros",
)

ALUNOS = Resource(
    path="alunos",
    model=Aluno,
    create_schema=AlunoCreate,
    update_schema=AlunoUpdate,
    response_schema=AlunoResponse,
    singular="aluno",
    plural="alunos",
)

EMPRESTIMOS = Resource(
    path="emprestimos",
    model=Emprestimo,
    create_schema=EmprestimoCreate,
    update_schema=EmprestimoUpdate,
    response_schema=EmprestimoResponse,
    singular="empréstimo",
    plural="empréstimos",
)

RESOURCES = (CATEGORIAS, AUTORES, LIVROS, ALUNOS, EMPRESTIMOS)
