"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from code_verifier.api.http.app_data import ApplicationDependencies
from code_verifier.core.services import DbSessionService, ProductService
from code_verifier.entities.product import ProductRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session borrowed from the pool for the duration of the request."""
    with database_service.session_scope() as session:
        yield session


def get_product_repository(db: Session = Depends(get_db_session)) -> ProductRepository:
    return ProductRepository(db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)
