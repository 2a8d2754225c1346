from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class Product(BaseModel):
    """
    Catalog product entity.

    Every field defaults to None so a product can be built empty and filled
    in field by field; ``id`` stays None until the store persists it.
    """
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)


class ProductCreate(BaseModel):
    """Schema for creating a new product. A client supplied id is ignored."""
    id: Optional[int] = Field(None, description="Ignored, the server assigns the id")
    name: str = Field(..., max_length=255, description="Product name")
    description: str = Field(..., description="Product description (may be empty)")
    # Non-finite values are rejected by ProductService so the 422 body stays JSON-safe
    price: float = Field(..., description="Unit price")
    quantity: int = Field(..., description="Units available")

    def to_entity(self) -> Product:
        return Product(**self.model_dump(exclude={"id"}))


class ProductResponse(BaseModel):
    """Schema for product response including the assigned id."""
    id: int
    name: str
    description: str
    price: float
    quantity: int

    model_config = ConfigDict(from_attributes=True)
