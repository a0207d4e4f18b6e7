"""
FastAPI Application Entry Point

create_app() builds a fully wired application from a Settings object:

1. Database handle
   - One engine + session factory per app, stored on app.state.database
   - Tests pass their own (SQLite) handle in

2. Lifespan
   - startup: optionally create missing tables
   - shutdown: dispose of pooled connections

3. Middleware (outermost first)
   - CORS
   - unhandled errors -> 500 text, logged with traceback
   - slowapi rate limiting

4. Exception handlers
   - ResourceNotFoundError -> 404 text
   - StoreError -> 500 text

Run with:
    uvicorn biblioteca.main:app
or:
    biblioteca
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from biblioteca import __version__
from biblioteca.config import Settings, get_settings
from biblioteca.database import Database
from biblioteca.dependencies import DatabaseHandle
from biblioteca.exceptions import BibliotecaError
from biblioteca.routers import (
    alunos_router,
    autores_router,
    categorias_router,
    emprestimos_router,
    livros_router,
)
from biblioteca.services.rate_limiter import create_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

ROOT_MESSAGE = "API de Biblioteca com PostgreSQL e FastAPI!"


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name} ({settings.environment})...")
    if settings.create_tables_on_startup:
        logger.info("Creating missing tables")
        database.create_tables()

    yield

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    database.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted
        database: Database handle; built from settings when omitted

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()
    if database is None:
        database = Database.from_settings(settings)

    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
## Biblioteca API

CRUD endpoints for a school library.

- **Categorias**, **Autores**, **Livros**, **Alunos**, **Empréstimos**

Every resource supports list, get, create, full replace (PUT) and delete.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    app.state.limiter = create_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # -------------------------------------------------------------------------
    # Unhandled Errors
    # -------------------------------------------------------------------------
    # Registered before CORS so CORSMiddleware wraps the 500 it returns
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        """Catch-all: log the failure, hide its details."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}: {exc}",
                exc_info=True,
            )
            return PlainTextResponse(
                "Erro interno do servidor",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BibliotecaError)
    async def biblioteca_exception_handler(
        request: Request,
        exc: BibliotecaError,
    ) -> PlainTextResponse:
        """Send the error's message as plain text with its status code."""
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(categorias_router)
    app.include_router(autores_router)
    app.include_router(livros_router)
    app.include_router(alunos_router)
    app.include_router(emprestimos_router)

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        response_class=PlainTextResponse,
    )
    async def root() -> str:
        """Welcome message."""
        return ROOT_MESSAGE

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check that the API is running and the database answers.",
    )
    def health_check(database: DatabaseHandle) -> JSONResponse:
        """
        Health check endpoint.

        Runs SELECT 1 against the database. 503 when it fails so load
        balancers take the instance out of rotation.
        """
        body = {
            "app": settings.app_name,
            "version": __version__,
        }
        try:
            database.ping()
        except SQLAlchemyError as exc:
            logger.error(f"Health check failed: {exc}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "unreachable", **body},
            )
        return JSONResponse(content={"status": "healthy", "database": "ok", **body})

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn biblioteca.main:app
app = create_app()


def run() -> None:
    """Start the development server on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "biblioteca.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
