# backoffice/routes/order.py

from fastapi import APIRouter, Request, status
from typing import List
from backoffice.models.order import Order
from backoffice.schemas.order import OrderCreate, OrderStatusUpdate
from backoffice.services.order import (
    create_order_service,
    read_orders_service,
    read_order_service,
    update_order_status_service,
)

router = APIRouter()

# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    summary="Создать заказ",
    response_description="Возвращает созданный заказ",
    responses={
        201: {"description": "Заказ успешно создан"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def create_order(request: Request, order: OrderCreate):
    try:
        return await create_order_service(order, request)
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при создании заказа: {str(e)}")
        raise


# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Order],
    summary="Получить список заказов",
    response_description="Возвращает список всех заказов",
)
async def read_orders(request: Request):
    try:
        return await read_orders_service(request)
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при получении списка заказов: {str(e)}")
        raise


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Order,
    summary="Получить заказ по ID",
    responses={404: {"description": "Заказ не найден"}},
)
async def read_order(id: int, request: Request):
    return await read_order_service(id, request)


# ────────────── STATUS ──────────────
@router.patch(
    "/{id}/status",
    response_model=Order,
    summary="Сменить статус заказа",
    responses={
        200: {"description": "Статус изменён"},
        404: {"description": "Заказ не найден"},
        422: {"description": "Статус не из списка pending / processing / completed / cancelled"},
    },
)
async def update_order_status(id: int, status_update: OrderStatusUpdate, request: Request):
    return await update_order_status_service(id, status_update, request)
