# orderdesk/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from orderdesk.api.auth import require_admin
from orderdesk.data.database import get_db
from orderdesk.domain.errors import (
    EmptyCartError,
    InvalidStatusError,
    OrderIdExhaustedError,
    OrderNotFoundError,
)
from orderdesk.domain.schemas import MessageOut, OrderCreate, OrderOut, StatsOut, StatusUpdate
from orderdesk.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("/stats", response_model=StatsOut, dependencies=[Depends(require_admin)])
def get_stats(db: Session = Depends(get_db)):
    """
    Statystyki dashboardu: przychod wg kategorii, platnosci online, unikalni klienci.
    """
    svc = get_service(db)
    return svc.get_stats()


@router.get("/", response_model=List[OrderOut], dependencies=[Depends(require_admin)])
def list_orders(db: Session = Depends(get_db)):
    svc = get_service(db)
    return svc.list_orders()


@router.get("/{order_ref}", response_model=OrderOut)
def get_order(order_ref: str, db: Session = Depends(get_db)):
    """
    Publiczne sledzenie zamowienia: 5-7 cyfr to order_id, inaczej id wewnetrzne.
    """
    svc = get_service(db)
    try:
        return svc.get_order(order_ref)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    """
    Tworzy zamówienie z koszyka klienta.
    Wysyła powiadomienie asynchronicznie.
    """
    svc = get_service(db)
    try:
        return svc.place_order(payload)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OrderIdExhaustedError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{internal_id}/status", response_model=OrderOut, dependencies=[Depends(require_admin)])
def update_status(internal_id: str, payload: StatusUpdate, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.update_status(internal_id, payload.status)
    except InvalidStatusError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{internal_id}", response_model=MessageOut, dependencies=[Depends(require_admin)])
def delete_order(internal_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_order(internal_id)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Order removed"}
