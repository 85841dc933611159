class CatalogError(Exception):
    """Base error for catalog operations, carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    status_code = 400


class DuplicateError(CatalogError):
    status_code = 409


class NotFoundError(CatalogError):
    status_code = 404


class StorageError(CatalogError):
    """Wraps a failure raised by the underlying document store."""

    status_code = 500
