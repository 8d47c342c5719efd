"""
services/product_service.py
----------------------------
Business logic for products: validates incoming payloads before any query
is issued and turns repository results into domain outcomes.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from models.product import Product
from repositories.product_repo import ProductRepository
from services.exceptions import InvalidInputError, ProductNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("Nome", "Descricao", "Preco")


def validate_payload(payload: Mapping[str, Any]) -> tuple[str, str, Decimal]:
    """
    Check that Nome, Descricao and Preco are all present.

    Text fields must be non-blank strings; Preco must be a finite number.

    Returns:
        The ``(nome, descricao, preco)`` triple.

    Raises:
        InvalidInputError: Listing every missing field, or naming a non-numeric Preco.
    """
    missing = []
    for field in ("Nome", "Descricao"):
        value = payload.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    if payload.get("Preco") is None:
        missing.append("Preco")

    if missing:
        raise InvalidInputError(f"Campos obrigatórios ausentes: {', '.join(missing)}")

    try:
        preco = Decimal(str(payload["Preco"]))
    except InvalidOperation:
        preco = None
    if preco is None or not preco.is_finite():
        raise InvalidInputError(f"Preco inválido: {payload['Preco']!r}")

    return payload["Nome"], payload["Descricao"], preco


class ProductService:
    """Product CRUD on top of a ProductRepository."""

    def __init__(self, repository: ProductRepository):
        self.repo = repository

    def list_products(self) -> list[Product]:
        return self.repo.list_all()

    def get_product(self, product_id: int) -> Product:
        product = self.repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def create_product(self, payload: Mapping[str, Any]) -> int:
        """Validate and insert a product; returns the new id."""
        nome, descricao, preco = validate_payload(payload)
        return self.repo.add(nome, descricao, preco)

    def update_product(self, product_id: int, payload: Mapping[str, Any]) -> None:
        """Validate and overwrite every field of an existing product."""
        nome, descricao, preco = validate_payload(payload)
        if not self.repo.update(product_id, nome, descricao, preco):
            raise ProductNotFoundError(product_id)

    def delete_product(self, product_id: int) -> None:
        if not self.repo.delete(product_id):
            raise ProductNotFoundError(product_id)
