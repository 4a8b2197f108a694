"""Request and response bodies of the HTTP API."""

from pydantic import BaseModel, Field


class VerificationView(BaseModel):
    """Outcome of a code verification, as handed to the result page."""

    code_exists: bool = False
    code: str | None = None
    product_name: str | None = None
    error: str | None = None


class VerifyRequest(BaseModel):
    code: str | None = Field(default=None, description="Raw product code")


class ProductCreate(BaseModel):
    code: str = Field(description="Product code, letters and digits only")
    name: str = Field(description="Product display name")


class ProductUpdate(BaseModel):
    code: str
    name: str


class CountResponse(BaseModel):
    count: int
