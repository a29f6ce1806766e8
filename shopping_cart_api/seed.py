"""Fixed sample catalogue loaded into the in-memory store at startup."""
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product

SAMPLE_PRODUCTS = [
    {"id": 1, "name": "Widget", "price": Decimal("9.99")},
    {"id": 2, "name": "Gadget", "price": Decimal("24.50")},
    {"id": 3, "name": "Gizmo", "price": Decimal("3.75")},
    {"id": 4, "name": "Doohickey", "price": Decimal("12.00")},
]


async def seed_products(session: AsyncSession) -> int:
    session.add_all([Product(**item) for item in SAMPLE_PRODUCTS])
    await session.commit()
    return len(SAMPLE_PRODUCTS)
