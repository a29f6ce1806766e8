from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from . import crud
from .database import get_session
from .schemas import ProductOut, ProductCreate

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductOut])
async def list_products(session: AsyncSession = Depends(get_session)):
    return await crud.list_products(session)


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(product_id: int, session: AsyncSession = Depends(get_session)):
    product = await crud.get_product(session, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    response: Response,
    session: AsyncSession = Depends(get_session),
):
    product = await crud.add_product(session, payload.name, payload.price)
    response.headers["Location"] = f"/products/{product.id}"
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, session: AsyncSession = Depends(get_session)):
    if not await crud.remove_product(session, product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return
