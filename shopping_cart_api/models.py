from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Index
from sqlalchemy.orm import relationship

from .database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)  # fixed-point, two places

    # ids are never handed out twice, even after a delete
    __table_args__ = {"sqlite_autoincrement": True}


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    product = relationship("Product")

    __table_args__ = (
        Index("ix_cart_items_product", "product_id", unique=True),  # one row per product
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<CartItem id={self.id} product_id={self.product_id} quantity={self.quantity}>"
