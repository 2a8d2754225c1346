from sqlalchemy import Column, Integer, String, Float, Text, CheckConstraint

from catalog.database import Base


class ProductModel(Base):
    """
    Database row for a catalog product.

    Attributes:
        id: Identity assigned by the database on insert
        name: Product name
        description: Free text description (may be empty)
        price: Unit price (must be non-negative)
        quantity: Units available (must be non-negative)
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
        CheckConstraint('quantity >= 0', name='check_quantity_non_negative'),
        # Never hand out an id that belonged to a deleted row
        {"sqlite_autoincrement": True},
    )

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name='{self.name}', quantity={self.quantity})>"
