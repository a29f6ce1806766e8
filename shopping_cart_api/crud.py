"""Repository layer: reads and writes for products and cart items.

Every function takes the request's ``AsyncSession``. Mutations commit their
own unit of work. Lookups that miss return ``None`` (or ``False`` for
removals); only :func:`upsert_cart_item` raises, when the product it refers
to does not exist.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from .models import CartItem, Product

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


class ProductNotFound(LookupError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


# Products

async def list_products(session: AsyncSession) -> List[Product]:
    result = await session.execute(select(Product).order_by(Product.id))
    return list(result.scalars().all())


async def get_product(session: AsyncSession, product_id: int) -> Optional[Product]:
    return await session.get(Product, product_id)


async def add_product(session: AsyncSession, name: str, price: Decimal) -> Product:
    product = Product(name=name, price=Decimal(price).quantize(CENTS, rounding=ROUND_HALF_UP))
    session.add(product)
    await session.commit()
    logger.info("Created product %s (%r)", product.id, product.name)
    return product


async def remove_product(session: AsyncSession, product_id: int) -> bool:
    product = await session.get(Product, product_id)
    if product is None:
        logger.debug("Product %s not found for removal", product_id)
        return False

    # cart rows go with their product
    await session.execute(delete(CartItem).where(CartItem.product_id == product_id))
    await session.delete(product)
    await session.commit()
    logger.info("Removed product %s", product_id)
    return True


# Cart items

def _cart_items_with_product():
    return select(CartItem).options(selectinload(CartItem.product))


async def list_cart_items(session: AsyncSession) -> List[CartItem]:
    result = await session.execute(_cart_items_with_product().order_by(CartItem.id))
    return list(result.scalars().all())


async def get_cart_item(session: AsyncSession, item_id: int) -> Optional[CartItem]:
    result = await session.execute(_cart_items_with_product().where(CartItem.id == item_id))
    return result.scalar_one_or_none()


async def find_cart_item_by_product_id(session: AsyncSession, product_id: int) -> Optional[CartItem]:
    result = await session.execute(
        _cart_items_with_product().where(CartItem.product_id == product_id)
    )
    return result.scalar_one_or_none()


async def upsert_cart_item(session: AsyncSession, product_id: int, quantity: int) -> CartItem:
    """Add ``quantity`` of a product to the cart.

    An existing row for the product has its quantity increased; otherwise a
    new row is created with the product attached.
    """
    product = await session.get(Product, product_id)
    if product is None:
        raise ProductNotFound(product_id)

    existing = await find_cart_item_by_product_id(session, product_id)
    if existing is not None:
        existing.quantity += quantity
        await session.commit()
        logger.info("Merged %d of product %s into cart item %s", quantity, product_id, existing.id)
        return existing

    item = CartItem(product_id=product_id, product=product, quantity=quantity)
    session.add(item)
    await session.commit()
    logger.info("Created cart item %s for product %s", item.id, product_id)
    return item


async def remove_cart_item(session: AsyncSession, item_id: int) -> bool:
    item = await session.get(CartItem, item_id)
    if item is None:
        logger.debug("Cart item %s not found for removal", item_id)
        return False

    await session.delete(item)
    await session.commit()
    logger.info("Removed cart item %s", item_id)
    return True
