"""Product API router with verification and CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from code_verifier.api.http.deps import get_product_service
from code_verifier.api.http.schemas import (
    CountResponse,
    ProductCreate,
    ProductUpdate,
    VerificationView,
    VerifyRequest,
)
from code_verifier.api.http.verification import build_verification_view
from code_verifier.core.exceptions import ProductValidationError, StorageError
from code_verifier.core.services import Found, ProductService
from code_verifier.entities.product import Product

router = APIRouter()


def _storage_unavailable(exc: StorageError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
    )


@router.post("/verify", response_model=VerificationView)
def verify_product_code(
    payload: VerifyRequest,
    service: ProductService = Depends(get_product_service),
) -> VerificationView:
    """JSON counterpart of the verification form."""
    return build_verification_view(service, payload.code)


@router.get("/", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products ordered by name."""
    try:
        return service.list_all()
    except StorageError as e:
        raise _storage_unavailable(e) from e


@router.get("/count", response_model=CountResponse)
def count_products(
    service: ProductService = Depends(get_product_service),
) -> CountResponse:
    try:
        return CountResponse(count=service.count())
    except StorageError as e:
        raise _storage_unavailable(e) from e


@router.get("/by-code/{code}", response_model=Product)
def get_product_by_code(
    code: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by its code, in any casing."""
    try:
        result = service.find_by_code(code)
    except StorageError as e:
        raise _storage_unavailable(e) from e
    if not isinstance(result, Found):
        raise HTTPException(status_code=404, detail="Product not found")
    return result.product


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    try:
        result = service.find_by_id(product_id)
    except StorageError as e:
        raise _storage_unavailable(e) from e
    if not isinstance(result, Found):
        raise HTTPException(status_code=404, detail="Product not found")
    return result.product


@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    try:
        return service.save(Product(code=payload.code, name=payload.name))
    except ProductValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except StorageError as e:
        raise _storage_unavailable(e) from e


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Update a product."""
    try:
        return service.update(
            Product(id=product_id, code=payload.code, name=payload.name)
        )
    except ProductValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except StorageError as e:
        raise _storage_unavailable(e) from e


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product. Unknown ids are not an error."""
    try:
        service.delete(product_id)
    except ProductValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except StorageError as e:
        raise _storage_unavailable(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
