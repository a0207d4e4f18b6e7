"""
pytest Fixtures for Biblioteca API Tests

Every test gets its own in-memory SQLite database (StaticPool keeps the
single connection alive) with all tables created and foreign keys
enforced. The application is built with create_app() around that
database, so no test touches PostgreSQL.

Sample data fixtures insert rows through the ORM and return them as
plain dicts of column values, so no session stays open while the client
makes requests.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set before importing biblioteca.main, which builds a default app at import
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import Generator
from datetime import date
from typing import Any

import pytest
from fastapi.testclient import TestClient

from biblioteca.config import Settings
from biblioteca.database import Database
from biblioteca.main import create_app
from biblioteca.models import Aluno, Autor, Categoria, Emprestimo, Livro
from tests.helpers import persist


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================
@pytest.fixture
def settings() -> Settings:
    """Settings pointing at an in-memory SQLite database, ignoring any .env file."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        rate_limit_enabled=False,
    )


@pytest.fixture
def database(settings: Settings) -> Generator[Database, None, None]:
    """Fresh database with every table created."""
    database = Database.from_settings(settings)
    database.create_tables()

    yield database

    database.drop_tables()
    database.dispose()


@pytest.fixture
def client(settings: Settings, database: Database) -> Generator[TestClient, None, None]:
    """Test client for an app wired to the test database."""
    app = create_app(settings, database)

    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_categoria(database: Database) -> dict[str, Any]:
    return persist(database, Categoria(nome="Romance"))


@pytest.fixture
def sample_autor(database: Database) -> dict[str, Any]:
    return persist(database, Autor(nome="Machado de Assis", nacionalidade="Brasileira"))


@pytest.fixture
def sample_livro(
    database: Database,
    sample_autor: dict[str, Any],
    sample_categoria: dict[str, Any],
) -> dict[str, Any]:
    """A book by sample_autor in sample_categoria."""
    return persist(
        database,
        Livro(
            titulo="Dom Casmurro",
            ano_publicacao=1899,
            fk_autor_id=sample_autor["id"],
            fk_categoria_id=sample_categoria["id"],
        ),
    )


@pytest.fixture
def sample_aluno(database: Database) -> dict[str, Any]:
    return persist(database, Aluno(nome="Ana Souza", turma="1A", idade=15))


@pytest.fixture
def sample_emprestimo(
    database: Database,
    sample_livro: dict[str, Any],
    sample_aluno: dict[str, Any],
) -> dict[str, Any]:
    """An open loan of sample_livro to sample_aluno."""
    return persist(
        database,
        Emprestimo(
            fk_livro_id=sample_livro["id"],
            fk_aluno_id=sample_aluno["id"],
            data_emprestimo=date(2024, 3, 1),
        ),
    )
