"""HTML form endpoints for checking a product code."""

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from code_verifier.api.http.deps import get_product_service
from code_verifier.api.http.schemas import VerificationView
from code_verifier.api.http.verification import build_verification_view
from code_verifier.core.services import ProductService
from code_verifier.web import templates

router = APIRouter(tags=["verification"])


def _status_for(view: VerificationView) -> int:
    if view.error is None:
        return status.HTTP_200_OK
    if view.code is None:
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_503_SERVICE_UNAVAILABLE


@router.get("/", response_class=HTMLResponse)
def landing_page(request: Request) -> HTMLResponse:
    """Render the form asking for a product code."""
    return templates.TemplateResponse(request, "index.html", {})


@router.get("/verify-code")
def verify_code_redirect() -> RedirectResponse:
    """The form only posts here; plain visits go back to the landing page."""
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/verify-code", response_class=HTMLResponse)
def verify_code(
    request: Request,
    code: str | None = Form(default=None),
    service: ProductService = Depends(get_product_service),
) -> HTMLResponse:
    """Check the submitted code and render the result page."""
    view = build_verification_view(service, code)
    return templates.TemplateResponse(
        request,
        "result.html",
        {"view": view},
        status_code=_status_for(view),
    )
