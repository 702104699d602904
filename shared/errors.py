class CatalogError(Exception):
    """Base class for failures surfaced by the catalog read services."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """A structurally required query parameter is missing."""

    status_code = 400


class StorageError(CatalogError):
    """Query execution against a dataset failed or the dataset is not available."""

    status_code = 500
