"""
Sample Data

Fills the database with a few categories, authors, books, students and
loans so the API has something to show in development.

Used by scripts/seed_data.py.
"""

import logging
from datetime import date

from sqlalchemy import delete
from sqlalchemy.orm import Session

from biblioteca.database import Database
from biblioteca.models import Aluno, Autor, Categoria, Emprestimo, Livro

logger = logging.getLogger(__name__)


def clear_data(db: Session) -> None:
    """Delete every row, children before parents."""
    for model in (Emprestimo, Livro, Aluno, Autor, Categoria):
        db.execute(delete(model))
    db.commit()
    logger.info("Existing data cleared")


def create_categorias(db: Session) -> dict[str, Categoria]:
    categorias = {nome: Categoria(nome=nome) for nome in ("Romance", "Ficção", "Poesia")}
    db.add_all(categorias.values())
    db.commit()
    return categorias


def create_autores(db: Session) -> dict[str, Autor]:
    autores_data = [
        {"nome": "Machado de Assis", "nacionalidade": "Brasileira"},
        {"nome": "Clarice Lispector", "nacionalidade": "Brasileira"},
        {"nome": "José Saramago", "nacionalidade": "Portuguesa"},
        {"nome": "Fernando Pessoa", "nacionalidade": "Portuguesa"},
    ]
    autores = {data["nome"]: Autor(**data) for data in autores_data}
    db.add_all(autores.values())
    db.commit()
    return autores


def create_livros(
    db: Session,
    autores: dict[str, Autor],
    categorias: dict[str, Categoria],
) -> list[Livro]:
    livros_data = [
        ("Dom Casmurro", 1899, "Machado de Assis", "Romance"),
        ("Memórias Póstumas de Brás Cubas", 1881, "Machado de Assis", "Romance"),
        ("A Hora da Estrela", 1977, "Clarice Lispector", "Romance"),
        ("Ensaio sobre a Cegueira", 1995, "José Saramago", "Ficção"),
        ("Mensagem", 1934, "Fernando Pessoa", "Poesia"),
    ]
    livros = [
        Livro(
            titulo=titulo,
            ano_publicacao=ano,
            fk_autor_id=autores[autor].id,
            fk_categoria_id=categorias[categoria].id,
        )
        for titulo, ano, autor, categoria in livros_data
    ]
    db.add_all(livros)
    db.commit()
    return livros


def create_alunos(db: Session) -> list[Aluno]:
    alunos = [
        Aluno(nome="Ana Souza", turma="1A", idade=15),
        Aluno(nome="Bruno Lima", turma="2B", idade=16),
        Aluno(nome="Carla Mendes", turma="3A", idade=17),
    ]
    db.add_all(alunos)
    db.commit()
    return alunos


def create_emprestimos(
    db: Session,
    livros: list[Livro],
    alunos: list[Aluno],
) -> list[Emprestimo]:
    emprestimos = [
        Emprestimo(
            fk_livro_id=livros[0].id,
            fk_aluno_id=alunos[0].id,
            data_emprestimo=date(2024, 3, 1),
            data_devolucao=date(2024, 3, 15),
        ),
        Emprestimo(
            fk_livro_id=livros[3].id,
            fk_aluno_id=alunos[1].id,
            data_emprestimo=date(2024, 4, 2),
        ),
    ]
    # Still on loan
    livros[3].disponivel = False
    db.add_all(emprestimos)
    db.commit()
    return emprestimos


def seed_database(database: Database, clear_existing: bool = False) -> dict[str, int]:
    """
    Create missing tables and insert the sample rows.

    Args:
        database: Target database
        clear_existing: Delete all rows first

    Returns:
        Number of rows created per table
    """
    database.create_tables()

    db = database.session()
    try:
        if clear_existing:
            clear_data(db)

        categorias = create_categorias(db)
        autores = create_autores(db)
        livros = create_livros(db, autores, categorias)
        alunos = create_alunos(db)
        emprestimos = create_emprestimos(db, livros, alunos)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    summary = {
        "categoria": len(categorias),
        "autor": len(autores),
        "livro": len(livros),
        "aluno": len(alunos),
        "emprestimo": len(emprestimos),
    }
    logger.info(f"Database seeded: {summary}")
    return summary
