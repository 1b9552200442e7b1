# shop_api/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from shop_api.data.database import get_db
from shop_api.domain.errors import NotFoundError
from shop_api.domain.schemas import CartItemIn, CartItemOut, CartOut, MessageOut
from shop_api.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut, response_model_exclude_none=True)
def get_cart(
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.get_cart(user_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("", response_model=CartItemOut, status_code=201)
def add_item(payload: CartItemIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.add_item(
            user_id=payload.user_id,
            product_id=payload.product_id,
            quantity=payload.quantity,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{item_id}", response_model=MessageOut)
def remove_item(item_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.remove_item(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Item removed from cart"}
