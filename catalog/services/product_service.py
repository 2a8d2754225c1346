import logging
import math
from typing import Dict, List

from catalog.exceptions import ValidationError
from catalog.repositories.product_repository import ProductStore
from catalog.schemas.product import Product

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for catalog operations.

    This is the only place business rules for products live. The store is
    only called once a candidate passes validation, so a rejected product
    never leaves a trace in storage. Errors from the store propagate
    unchanged; nothing is retried here.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def list_products(self) -> List[Product]:
        """Return every product in the catalog, in creation order."""
        return self.store.list_all()

    def create_product(self, candidate: Product) -> Product:
        """
        Validate and persist a new product.

        Args:
            candidate: Product to create; any id it carries is ignored

        Returns:
            The stored product, including the id assigned by the store.
            Callers should use this instead of the candidate.

        Raises:
            ValidationError: If any field breaks a rule (store untouched)
            StorageUnavailable: If the store could not persist the product
        """
        errors = self.validate(candidate)
        if errors:
            logger.warning(f"Rejected product candidate, invalid fields: {', '.join(errors)}")
            raise ValidationError(errors)

        product = self.store.create(candidate)
        logger.info(f"Product #{product.id} '{product.name}' created")
        return product

    @staticmethod
    def validate(candidate: Product) -> Dict[str, str]:
        """Return a mapping of offending field -> reason (empty if valid)."""
        errors = {}

        if candidate.name is None or not candidate.name.strip():
            errors["name"] = "must not be empty"

        if candidate.description is None:
            errors["description"] = "is required"

        if candidate.price is None:
            errors["price"] = "is required"
        elif not math.isfinite(candidate.price) or candidate.price < 0:
            errors["price"] = "must be a finite non-negative number"

        if candidate.quantity is None:
            errors["quantity"] = "is required"
        elif candidate.quantity < 0:
            errors["quantity"] = "must be non-negative"

        return errors
