"""
Test Suite for Biblioteca API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample rows)
- helpers.py: Small database helpers used by assertions
- test_categorias.py, test_autores.py, test_livros.py, test_alunos.py,
  test_emprestimos.py: CRUD endpoints per resource
- test_app.py: Root, health, failures, rate limiting, settings, seed data

Running Tests:
    pytest
    pytest tests/test_livros.py -v
"""
