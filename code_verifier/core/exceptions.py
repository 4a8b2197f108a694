"""Error types shared by the service and data-access layers."""


class ProductValidationError(ValueError):
    """A business rule rejected the request before any storage write."""


class StorageError(RuntimeError):
    """The persistence layer failed; the operation was not completed."""

    def __init__(self, message: str = "Database operation failed") -> None:
        super().__init__(message)
