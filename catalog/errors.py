# catalog/errors.py

class CatalogError(Exception):
    """Base for errors that map onto an HTTP status with a client-safe message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    status_code = 400


class NotFoundError(CatalogError):
    status_code = 404


class StorageError(CatalogError):
    """The backing file could not be read, parsed or written."""

    status_code = 500


class CatalogIOError(StorageError):
    pass


class CatalogParseError(StorageError):
    pass
