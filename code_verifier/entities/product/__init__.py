"""Entity package: Product."""

from .entity import CODE_MAX_LENGTH, MAX_ID, NAME_MAX_LENGTH, Product, normalize_code
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "CODE_MAX_LENGTH",
    "MAX_ID",
    "NAME_MAX_LENGTH",
    "Product",
    "ProductRepository",
    "ProductTable",
    "normalize_code",
]
