"""
main.py
-------
Entry point for the API Produto HTTP service.

Responsibilities:
    - Load settings and configure logging.
    - Build the database handle, repository and service, and inject them
      into the FastAPI application.
    - Open the connection pool on startup and close it on shutdown.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from config import Settings, load_settings
from db.connection import Database
from handlers import products_router, register_exception_handlers, schema_router
from repositories.product_repo import ProductRepository
from services.product_service import ProductService
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(
    settings: Settings,
    database: Optional[Database] = None,
    service: Optional[ProductService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings.
        database: Database handle; built from ``settings`` when omitted.
        service: Product service; built on top of ``database`` when omitted.
    """
    database = database or Database(settings)
    service = service or ProductService(ProductRepository(database))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.init_pool()
        try:
            yield
        finally:
            database.close_pool()

    app = FastAPI(
        title="API Produto",
        description="CRUD de produtos com PostgreSQL + endpoint de inicialização do banco",
        version="1.0.0",
        docs_url="/swagger",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.product_service = service

    register_exception_handlers(app)
    app.include_router(schema_router)
    app.include_router(products_router)
    return app


def main() -> None:
    """Load settings and serve the API."""
    settings = load_settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info(f"Servidor rodando na porta {settings.listen_port}")
    logger.info(f"Swagger em http://localhost:{settings.listen_port}/swagger")
    uvicorn.run(app, host="0.0.0.0", port=settings.listen_port, log_config=None)


if __name__ == "__main__":
    main()
