from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from catalog.config import get_settings
from catalog.database import get_db
from catalog.exceptions import StorageUnavailable, ValidationError
from catalog.repositories.product_repository import (
    InMemoryProductStore,
    ProductStore,
    SqlProductStore,
)
from catalog.services.product_service import ProductService
from catalog.schemas.product import ProductCreate, ProductResponse

router = APIRouter(prefix="/api/products", tags=["Products"])

settings = get_settings()

# Shared by every request when STORE_BACKEND=memory
memory_store = InMemoryProductStore()


def get_product_store(db: Session = Depends(get_db)) -> ProductStore:
    """Dependency returning the configured product store."""
    if settings.STORE_BACKEND == "memory":
        return memory_store
    return SqlProductStore(db)


def get_product_service(store: ProductStore = Depends(get_product_store)) -> ProductService:
    return ProductService(store)


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List all products",
    description="Get every product in the catalog, in creation order."
)
def list_products(service: ProductService = Depends(get_product_service)):
    """List all products. An empty catalog returns an empty array."""
    try:
        return service.list_products()
    except StorageUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a new product",
    description="Create a product. The server assigns the id; any id in the body is ignored."
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name, must not be empty (required)
    - **description**: Product description, may be empty (required)
    - **price**: Unit price, must be non-negative (required)
    - **quantity**: Units available, must be non-negative (required)
    """
    try:
        return service.create_product(product_data.to_entity())
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "fields": e.fields}
        )
    except StorageUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )
