"""Shared fixtures: settings, an in-memory product repository, and an API client."""

from decimal import Decimal
from typing import Optional
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from config import Settings
from db.connection import Database
from main import create_app
from models.product import Product
from services.product_service import ProductService


class InMemoryProductRepository:
    """Stand-in for ProductRepository that mimics the produto table."""

    def __init__(self):
        self.rows: dict[int, Product] = {}
        self._next_id = 1
        self.calls: list[str] = []

    @staticmethod
    def _numeric(preco) -> Decimal:
        return Decimal(preco).quantize(Decimal("0.01"))

    def add(self, nome: str, descricao: str, preco: Decimal) -> int:
        self.calls.append("add")
        product_id = self._next_id
        self._next_id += 1
        self.rows[product_id] = Product(nome=nome, descricao=descricao, preco=self._numeric(preco), id=product_id)
        return product_id

    def list_all(self) -> list[Product]:
        self.calls.append("list_all")
        return list(self.rows.values())

    def get_by_id(self, product_id: int) -> Optional[Product]:
        self.calls.append("get_by_id")
        return self.rows.get(product_id)

    def update(self, product_id: int, nome: str, descricao: str, preco: Decimal) -> bool:
        self.calls.append("update")
        if product_id not in self.rows:
            return False
        self.rows[product_id] = Product(nome=nome, descricao=descricao, preco=self._numeric(preco), id=product_id)
        return True

    def delete(self, product_id: int) -> bool:
        self.calls.append("delete")
        return self.rows.pop(product_id, None) is not None


@pytest.fixture
def settings():
    return Settings(database="loja_teste", pool_max=2, pool_timeout=0.05)


@pytest.fixture
def repository():
    return InMemoryProductRepository()


@pytest.fixture
def service(repository):
    return ProductService(repository)


@pytest.fixture
def database(settings):
    db = MagicMock(spec=Database)
    db.settings = settings
    return db


@pytest.fixture
def client(settings, database, service):
    app = create_app(settings, database=database, service=service)
    with TestClient(app) as test_client:
        yield test_client
