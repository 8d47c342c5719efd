"""
handlers/schema.py
------------------
Health check and database initialization endpoints.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from db.init_db import initialize_schema
from handlers.products import ErrorResponse
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["sistema"])


@router.get("/", response_class=PlainTextResponse, summary="Verifica se a API está no ar")
def health_check() -> str:
    return "API Produto rodando"


@router.post(
    "/init-db",
    response_class=PlainTextResponse,
    summary="Cria o banco de dados e a tabela produto",
    responses={
        200: {"description": "Banco de dados e tabela criados com sucesso"},
        500: {"model": ErrorResponse},
    },
)
def init_db(request: Request) -> str:
    """Idempotent: running it again leaves existing data untouched."""
    initialize_schema(request.app.state.database)
    logger.info("Schema initialization requested via /init-db completed.")
    return "Banco de dados e tabela criados com sucesso."
