"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler validates the request shape, delegates to the
ProductService (or the schema initializer) held on ``app.state``, and turns the
result into a JSON response. No business logic lives here.
"""

from handlers.errors import register_exception_handlers
from handlers.products import router as products_router
from handlers.schema import router as schema_router

__all__ = [
    "products_router",
    "register_exception_handlers",
    "schema_router",
]
