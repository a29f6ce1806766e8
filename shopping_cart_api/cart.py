from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from . import crud
from .database import get_session
from .schemas import CartItemOut, CartItemCreate

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=List[CartItemOut])
async def get_cart(session: AsyncSession = Depends(get_session)):
    return await crud.list_cart_items(session)


@router.get("/{item_id}", response_model=CartItemOut)
async def get_cart_item(item_id: int, session: AsyncSession = Depends(get_session)):
    item = await crud.get_cart_item(session, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return item


@router.post("", response_model=CartItemOut, status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    payload: CartItemCreate,
    response: Response,
    session: AsyncSession = Depends(get_session),
):
    # an existing row for the same product absorbs the quantity
    try:
        item = await crud.upsert_cart_item(session, payload.product_id, payload.quantity)
    except crud.ProductNotFound:
        return JSONResponse(status_code=404, content="Product not found")

    response.headers["Location"] = f"/cart/{item.id}"
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_cart_item(item_id: int, session: AsyncSession = Depends(get_session)):
    if not await crud.remove_cart_item(session, item_id):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return
