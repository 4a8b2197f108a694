"""Data-access layer for products."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from code_verifier.core.exceptions import ProductValidationError, StorageError

from .entity import MAX_ID, Product
from .table import ProductTable


class ProductRepository:
    """Parametrized queries against the ``products`` table.

    Every SQLAlchemy failure is rolled back and re-raised as ``StorageError``,
    except a unique-code violation, which is a ``ProductValidationError``.
    Ids beyond the INTEGER range match no row.
    Write operations commit their own transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _storage_errors(self, message: str, *args) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.opt(exception=exc).error(message, *args)
            raise StorageError() from exc

    def _commit_unique(self, code: str) -> None:
        """Commit, reporting a unique-code violation as a rejected duplicate."""
        try:
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            logger.warning("Duplicate product code {} rejected by the database", code)
            raise ProductValidationError(
                f"A product with code {code} already exists"
            ) from exc

    @staticmethod
    def _to_entity(row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)

    def find_by_code(self, code: str) -> Product | None:
        logger.debug("Looking up product by code {}", code)
        with self._storage_errors("Failed to look up product by code {}", code):
            statement = select(ProductTable).where(ProductTable.code == code)
            row = self._session.exec(statement).first()

        if row is None:
            logger.debug("No product with code {}", code)
            return None
        return self._to_entity(row)

    def get(self, product_id: int) -> Product | None:
        if product_id > MAX_ID:
            return None
        with self._storage_errors("Failed to load product {}", product_id):
            row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def exists_by_code(self, code: str) -> bool:
        with self._storage_errors("Failed to check existence of code {}", code):
            statement = select(func.count()).select_from(ProductTable).where(
                ProductTable.code == code
            )
            total = self._session.exec(statement).one()
        return total > 0

    def list_all(self) -> list[Product]:
        with self._storage_errors("Failed to list products"):
            statement = select(ProductTable).order_by(ProductTable.name)
            rows = self._session.exec(statement).all()
        logger.debug("Found {} products", len(rows))
        return [self._to_entity(row) for row in rows]

    def count(self) -> int:
        with self._storage_errors("Failed to count products"):
            statement = select(func.count()).select_from(ProductTable)
            return self._session.exec(statement).one()

    def create(self, product: Product) -> Product:
        """Insert a new row, stamping ``created_at`` when it is not set."""
        created_at = product.created_at or datetime.now(UTC)
        row = ProductTable(code=product.code, name=product.name, created_at=created_at)

        with self._storage_errors("Failed to save product {}", product.code):
            self._session.add(row)
            self._commit_unique(row.code)
            self._session.refresh(row)

        logger.info("Saved product {} with id {}", row.code, row.id)
        return self._to_entity(row)

    def update(self, product: Product) -> Product:
        """Overwrite code and name of an existing row; ``created_at`` is left as stored."""
        if product.id is None or product.id > MAX_ID:
            raise ProductValidationError(f"Product {product.id} not found")

        with self._storage_errors("Failed to update product {}", product.id):
            row = self._session.get(ProductTable, product.id)
            if row is None:
                raise ProductValidationError(f"Product {product.id} not found")

            row.code = product.code
            row.name = product.name
            self._session.add(row)
            self._commit_unique(row.code)
            self._session.refresh(row)

        logger.info("Updated product {}", row.id)
        return self._to_entity(row)

    def delete(self, product_id: int) -> bool:
        """Remove a row by id. Returns False when there was nothing to remove."""
        if product_id > MAX_ID:
            return False

        with self._storage_errors("Failed to delete product {}", product_id):
            row = self._session.get(ProductTable, product_id)
            if row is None:
                logger.warning("No product with id {} to delete", product_id)
                return False

            self._session.delete(row)
            self._session.commit()

        logger.info("Deleted product {}", product_id)
        return True
