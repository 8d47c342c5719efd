"""
models/product.py
-----------------
Domain model for a product record.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """
    Represents one row of the ``produto`` table.

    Attributes:
        nome: Product name.
        descricao: Product description.
        preco: Price, stored as NUMERIC(10,2).
        id: Database primary key (None for new records).
    """
    nome: str
    descricao: str
    preco: Decimal
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: tuple) -> "Product":
        """Build a Product from an ``(Id, Nome, Descricao, Preco)`` row."""
        return cls(id=row[0], nome=row[1], descricao=row[2], preco=row[3])

    def __str__(self) -> str:
        return f"#{self.id} {self.nome} | {self.preco}"
