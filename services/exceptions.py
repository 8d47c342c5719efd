"""
services/exceptions.py
-----------------------
Domain exceptions raised by the service and database layers.
The HTTP layer translates each one into a status code and an
``{"error": ...}`` body; database driver errors (psycopg2.Error) are
left untouched and reported as 500.
"""

from db.connection import DatabaseUnavailableError

__all__ = [
    "DatabaseUnavailableError",
    "InvalidInputError",
    "ProductError",
    "ProductNotFoundError",
]


class ProductError(Exception):
    """Base class for product API errors."""
    status_code = 500


class InvalidInputError(ProductError):
    """A required field is missing, null, or blank, or the request is malformed."""
    status_code = 400


class ProductNotFoundError(ProductError):
    """No product row matches the requested id."""
    status_code = 404

    def __init__(self, product_id: int):
        super().__init__("Produto não encontrado")
        self.product_id = product_id
