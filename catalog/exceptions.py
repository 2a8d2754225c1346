"""Catalog domain exceptions.

Raised by the store and the service layer. The API layer catches these and
translates them into HTTP responses.
"""
from typing import Dict, List


class CatalogError(Exception):
    """Base class for catalog errors."""


class ValidationError(CatalogError):
    """A candidate product breaks one or more field rules."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(
            "Invalid product: " + "; ".join(f"{field} {msg}" for field, msg in self.errors.items())
        )

    @property
    def fields(self) -> List[str]:
        return list(self.errors)


class StorageUnavailable(CatalogError):
    """The persistence medium could not be reached or the write failed."""


class NotFound(CatalogError):
    """No product exists with the requested id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")
