import itertools
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.exceptions import NotFound, StorageUnavailable, ValidationError
from catalog.models.product import ProductModel
from catalog.schemas.product import Product

logger = logging.getLogger(__name__)

BUSINESS_FIELDS = ("name", "description", "price", "quantity")

# CHECK constraint name -> offending field
CHECK_CONSTRAINT_FIELDS = {
    "check_price_non_negative": "price",
    "check_quantity_non_negative": "quantity",
}


def constraint_errors(message: str) -> Dict[str, str]:
    """
    Translate a database integrity error message into field errors.

    Matches the constraint and column names as SQLite and PostgreSQL report
    them. The driver text itself is never returned.
    """
    errors = {}
    for constraint, field in CHECK_CONSTRAINT_FIELDS.items():
        if constraint in message:
            errors[field] = "must be non-negative"
    if "not null" in message.lower() or "not-null" in message.lower():
        for field in BUSINESS_FIELDS:
            if f"products.{field}" in message or f'column "{field}"' in message:
                errors[field] = "is required"
    return errors or {"product": "violates a database constraint"}


class ProductStore(ABC):
    """
    Persistence port for products.

    The store owns identity: ``create`` always assigns a fresh id and ignores
    whatever id the caller put on the entity. Entities handed out are copies,
    mutating them never changes stored state.

    ``create`` and ``list_all`` back the public API. The remaining methods are
    maintenance capabilities used by tests and admin routines.
    """

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned id."""

    @abstractmethod
    def list_all(self) -> List[Product]:
        """Return every stored product in insertion order."""

    @abstractmethod
    def get(self, product_id: int) -> Product:
        """Return one product or raise NotFound."""

    @abstractmethod
    def update(self, product_id: int, product: Product) -> Product:
        """Replace the business fields of a stored product."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product or raise NotFound."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored products."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every product. Ids are not reused afterwards."""

    def exists(self, product_id: int) -> bool:
        try:
            self.get(product_id)
        except NotFound:
            return False
        return True


class SqlProductStore(ProductStore):
    """
    Product store backed by a SQLAlchemy session.

    Ids come from the table's auto-increment column, so uniqueness under
    concurrent inserts is guaranteed by the database. Every write commits
    before returning; on failure the session is rolled back and the error
    surfaces as StorageUnavailable (or ValidationError for constraint
    violations).
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, product: Product) -> Product:
        row = ProductModel(**product.model_dump(include=set(BUSINESS_FIELDS)))
        self.db.add(row)
        self._commit("create product", row)
        logger.info(f"Product #{row.id} stored")
        return Product.model_validate(row)

    def list_all(self) -> List[Product]:
        try:
            rows = self.db.query(ProductModel).order_by(ProductModel.id.asc()).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error listing products: {e}")
            raise StorageUnavailable("Could not read products") from e
        return [Product.model_validate(row) for row in rows]

    def get(self, product_id: int) -> Product:
        return Product.model_validate(self._get_row(product_id))

    def update(self, product_id: int, product: Product) -> Product:
        row = self._get_row(product_id)
        for field in BUSINESS_FIELDS:
            setattr(row, field, getattr(product, field))
        self._commit(f"update product #{product_id}", row)
        return Product.model_validate(row)

    def delete(self, product_id: int) -> None:
        row = self._get_row(product_id)
        self.db.delete(row)
        self._commit(f"delete product #{product_id}")

    def count(self) -> int:
        try:
            return self.db.query(ProductModel).count()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageUnavailable("Could not count products") from e

    def clear(self) -> None:
        try:
            self.db.query(ProductModel).delete()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageUnavailable("Could not clear products") from e
        self._commit("clear products")

    def _get_row(self, product_id: int) -> ProductModel:
        try:
            row = self.db.query(ProductModel).filter(ProductModel.id == product_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageUnavailable(f"Could not read product #{product_id}") from e
        if row is None:
            raise NotFound(product_id)
        return row

    def _commit(self, action: str, row: Optional[ProductModel] = None) -> None:
        """Commit, then reload ``row`` from the database when given."""
        try:
            self.db.commit()
            if row is not None:
                self.db.refresh(row)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity error during {action}: {e.orig}")
            raise ValidationError(constraint_errors(str(e.orig))) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Storage error during {action}: {e}")
            raise StorageUnavailable(f"Could not {action}") from e


class InMemoryProductStore(ProductStore):
    """
    Process-local product store.

    A lock serialises every access; ids come from a counter that is never
    reset, so they stay unique even across ``clear``.
    """

    def __init__(self):
        self._products: Dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, product: Product) -> Product:
        with self._lock:
            product_id = next(self._ids)
            stored = Product(id=product_id, **product.model_dump(include=set(BUSINESS_FIELDS)))
            self._products[product_id] = stored
        return stored.model_copy()

    def list_all(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products.values()]

    def get(self, product_id: int) -> Product:
        with self._lock:
            if product_id not in self._products:
                raise NotFound(product_id)
            return self._products[product_id].model_copy()

    def update(self, product_id: int, product: Product) -> Product:
        with self._lock:
            if product_id not in self._products:
                raise NotFound(product_id)
            stored = Product(id=product_id, **product.model_dump(include=set(BUSINESS_FIELDS)))
            self._products[product_id] = stored
        return stored.model_copy()

    def delete(self, product_id: int) -> None:
        with self._lock:
            if self._products.pop(product_id, None) is None:
                raise NotFound(product_id)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def clear(self) -> None:
        with self._lock:
            self._products.clear()
