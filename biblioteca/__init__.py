"""
Biblioteca API

REST API for a school library: categories, authors, books, students and
loans, stored in PostgreSQL.

Package Structure:
- config.py: Settings loaded from the environment
- database.py: Engine, sessions and the Base model class
- main.py: FastAPI application factory
- resources.py: The five exposed entities
- models/: SQLAlchemy models
- schemas/: Pydantic request/response schemas
- routers/: CRUD endpoints
- services/: SQL statements and rate limiting
"""

__version__ = "1.0.0"
