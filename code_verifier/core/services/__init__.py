from .database.db_session import DbSessionService
from .product_service import Found, LookupResult, NotFound, ProductService

__all__ = [
    "DbSessionService",
    "Found",
    "LookupResult",
    "NotFound",
    "ProductService",
]
