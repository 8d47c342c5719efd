"""
repositories/product_repo.py
-----------------------------
Data access layer for products.
All SQL queries related to the `produto` table live here.
"""

from decimal import Decimal
from typing import Optional

from db.connection import Database
from models.product import Product
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = '"Id", "Nome", "Descricao", "Preco"'


class ProductRepository:
    """Repository for CRUD operations on the produto table."""

    def __init__(self, database: Database):
        self.db = database

    # ── CREATE ────────────────────────────────────────────

    def add(self, nome: str, descricao: str, preco: Decimal) -> int:
        """
        Insert a new product.

        Returns:
            The generated product id.
        """
        sql = """
            INSERT INTO produto ("Nome", "Descricao", "Preco")
            VALUES (%s, %s, %s)
            RETURNING "Id";
        """
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (nome, descricao, preco))
                product_id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added product #{product_id}")
            return product_id
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add product: {e}")
            raise
        finally:
            self.db.release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[Product]:
        """Return every product in natural storage order."""
        sql = f"SELECT {_COLUMNS} FROM produto;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [Product.from_row(r) for r in cur.fetchall()]
        finally:
            self.db.release_connection(conn)

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get a single product by id, or None."""
        sql = f'SELECT {_COLUMNS} FROM produto WHERE "Id" = %s;'
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (product_id,))
                row = cur.fetchone()
                return Product.from_row(row) if row else None
        finally:
            self.db.release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, product_id: int, nome: str, descricao: str, preco: Decimal) -> bool:
        """
        Overwrite all fields of a product.

        Returns:
            True if a row matched, False otherwise.
        """
        sql = """
            UPDATE produto SET "Nome" = %s, "Descricao" = %s, "Preco" = %s
            WHERE "Id" = %s;
        """
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (nome, descricao, preco, product_id))
                updated = cur.rowcount > 0
            conn.commit()
            if updated:
                logger.info(f"Updated product #{product_id}")
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update product #{product_id}: {e}")
            raise
        finally:
            self.db.release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, product_id: int) -> bool:
        """Delete a product. Returns True if a row was removed."""
        sql = 'DELETE FROM produto WHERE "Id" = %s;'
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (product_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted product #{product_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete product #{product_id}: {e}")
            raise
        finally:
            self.db.release_connection(conn)
