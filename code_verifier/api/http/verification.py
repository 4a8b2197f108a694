"""Mapping of a verification request onto the values the result page shows."""

from loguru import logger

from code_verifier.api.http.schemas import VerificationView
from code_verifier.core.exceptions import StorageError
from code_verifier.core.services import Found, ProductService
from code_verifier.entities.product import normalize_code

EMPTY_CODE_MESSAGE = "Please provide a product code."
STORAGE_FAILURE_MESSAGE = "Could not query the database. Please try again later."


def build_verification_view(service: ProductService, raw_code: str | None) -> VerificationView:
    """Run a lookup and translate it into found flag, code, name and error."""
    try:
        result = service.verify_code(raw_code)
    except StorageError:
        # The service only queries storage for non-blank input
        code = normalize_code(raw_code)
        logger.error("Verification of code {} failed", code)
        return VerificationView(code=code, error=STORAGE_FAILURE_MESSAGE)

    if isinstance(result, Found):
        return VerificationView(
            code_exists=True,
            code=result.product.code,
            product_name=result.product.name,
        )
    if result.code is None:
        return VerificationView(error=EMPTY_CODE_MESSAGE)
    return VerificationView(code_exists=False, code=result.code)
