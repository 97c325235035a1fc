class CatalogError(Exception):
    """Base exception for the project."""

class DataLoadError(CatalogError):
    """Raised when the catalog document cannot be loaded or is incomplete."""

class InvalidFilterValueError(CatalogError):
    """Raised when a user-entered filter value cannot be parsed."""
