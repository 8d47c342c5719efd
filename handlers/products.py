"""
handlers/products.py
--------------------
CRUD endpoints for /produtos.
"""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, ConfigDict, Field

from models.product import Product
from services.product_service import ProductService
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/produtos", tags=["produtos"])


class ErrorResponse(BaseModel):
    error: str


class ProductPayload(BaseModel):
    """Request body for create and update. Presence is checked by the service."""

    nome: Optional[str] = Field(None, alias="Nome")
    descricao: Optional[str] = Field(None, alias="Descricao")
    preco: Optional[Decimal] = Field(None, alias="Preco")


class ProductOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="Id")
    nome: str = Field(alias="Nome")
    descricao: str = Field(alias="Descricao")
    preco: Decimal = Field(alias="Preco")

    @classmethod
    def from_product(cls, product: Product) -> "ProductOut":
        return cls(id=product.id, nome=product.nome, descricao=product.descricao, preco=product.preco)


class CreatedResponse(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


@router.get(
    "",
    response_model=list[ProductOut],
    summary="Lista todos os produtos",
    responses={500: {"model": ErrorResponse}},
)
def list_products(service: ProductService = Depends(get_product_service)):
    return [ProductOut.from_product(p) for p in service.list_products()]


@router.get(
    "/{product_id}",
    response_model=ProductOut,
    summary="Busca um produto pelo ID",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return ProductOut.from_product(service.get_product(product_id))


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Cria um novo produto",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_product(payload: ProductPayload, service: ProductService = Depends(get_product_service)):
    product_id = service.create_product(payload.model_dump(by_alias=True))
    return CreatedResponse(id=product_id)


@router.put(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Atualiza um produto",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def update_product(
    product_id: int,
    payload: ProductPayload,
    service: ProductService = Depends(get_product_service),
):
    service.update_product(product_id, payload.model_dump(by_alias=True))
    return MessageResponse(message="Produto atualizado com sucesso")


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Deleta um produto",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    service.delete_product(product_id)
    return MessageResponse(message="Produto deletado com sucesso")
