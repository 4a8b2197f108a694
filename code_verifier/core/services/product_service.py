"""Business rules for product codes.

The service normalizes codes (trim + uppercase) before any comparison or
storage, validates fields before writing and reports lookups as an explicit
``Found | NotFound`` result rather than a nullable value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from loguru import logger

from code_verifier.core.exceptions import ProductValidationError
from code_verifier.entities.product import (
    CODE_MAX_LENGTH,
    NAME_MAX_LENGTH,
    Product,
    ProductRepository,
    normalize_code,
)

_CODE_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class Found:
    """A product matched the requested code or id."""

    product: Product


@dataclass(frozen=True)
class NotFound:
    """Nothing matched. ``code`` is the normalized code, if one was given."""

    code: str | None = None


LookupResult = Found | NotFound


class ProductService:
    """Validation and lookup logic layered over a ``ProductRepository``."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def verify_code(self, raw_code: str | None) -> LookupResult:
        """Check whether a product exists for a raw, user-supplied code.

        Blank input never reaches storage.
        """
        if raw_code is None or not raw_code.strip():
            logger.warning("Attempt to verify an empty product code")
            return NotFound()

        code = normalize_code(raw_code)
        product = self._repository.find_by_code(code)
        if product is None:
            logger.info("Code verified - not found: {}", code)
            return NotFound(code=code)

        logger.info("Code verified - found: {}", code)
        return Found(product=product)

    def find_by_code(self, raw_code: str | None) -> LookupResult:
        return self.verify_code(raw_code)

    def find_by_id(self, product_id: int | None) -> LookupResult:
        if product_id is None or product_id <= 0:
            logger.warning("Invalid product id: {}", product_id)
            return NotFound()

        product = self._repository.get(product_id)
        if product is None:
            return NotFound()
        return Found(product=product)

    def list_all(self) -> list[Product]:
        return self._repository.list_all()

    def count(self) -> int:
        return self._repository.count()

    def save(self, product: Product) -> Product:
        """Validate and insert a new product; returns it with its assigned id."""
        candidate = self._validated(product)

        if self._repository.exists_by_code(candidate.code):
            message = f"A product with code {candidate.code} already exists"
            logger.error(message)
            raise ProductValidationError(message)

        return self._repository.create(candidate)

    def update(self, product: Product) -> Product:
        """Validate and overwrite an existing product identified by ``product.id``."""
        candidate = self._validated(product)

        if candidate.id is None or self._repository.get(candidate.id) is None:
            message = "Cannot update a product that does not exist"
            logger.error(message)
            raise ProductValidationError(message)

        owner = self._repository.find_by_code(candidate.code)
        if owner is not None and owner.id != candidate.id:
            message = f"A product with code {candidate.code} already exists"
            logger.error(message)
            raise ProductValidationError(message)

        return self._repository.update(candidate)

    def delete(self, product_id: int | None) -> None:
        """Delete by id. Unknown ids are ignored."""
        if product_id is None or product_id <= 0:
            raise ProductValidationError("Invalid product id")

        self._repository.delete(product_id)

    @staticmethod
    def _validated(product: Product | None) -> Product:
        if product is None:
            raise ProductValidationError("Product must not be empty")

        if product.code is None or not product.code.strip():
            raise ProductValidationError("Product code is required")
        if product.name is None or not product.name.strip():
            raise ProductValidationError("Product name is required")

        code = normalize_code(product.code)
        name = product.name.strip()

        if len(code) > CODE_MAX_LENGTH:
            raise ProductValidationError(
                f"Product code cannot be longer than {CODE_MAX_LENGTH} characters"
            )
        if len(name) > NAME_MAX_LENGTH:
            raise ProductValidationError(
                f"Product name cannot be longer than {NAME_MAX_LENGTH} characters"
            )
        if not _CODE_PATTERN.fullmatch(code):
            raise ProductValidationError("Product code may only contain letters and digits")

        return product.model_copy(update={"code": code, "name": name})
