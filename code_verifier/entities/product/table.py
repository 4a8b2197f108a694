"""Product database table model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from .entity import CODE_MAX_LENGTH, NAME_MAX_LENGTH


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    code: str = Field(
        max_length=CODE_MAX_LENGTH, unique=True, index=True, nullable=False
    )
    name: str = Field(max_length=NAME_MAX_LENGTH, nullable=False)
    created_at: datetime | None = Field(default=None)
