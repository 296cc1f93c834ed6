# backoffice/services/order.py

from fastapi import HTTPException, Request

from backoffice.models.order import Order
from backoffice.schemas.order import OrderCreate, OrderStatusUpdate
from backoffice.services.storage import NotFoundError, Store


async def read_orders_service(request: Request) -> list[Order]:
    """
    Получение списка заказов
    """
    store: Store = request.state.store
    log = request.app.state.log

    orders = store.get_orders()
    await log.log_info("order", f"{len(orders)} заказов загружено")
    return orders


async def read_order_service(id: int, request: Request) -> Order:
    """
    Чтение заказа по ID.
    """
    store: Store = request.state.store
    log = request.app.state.log

    order = store.get_order(id)
    if order is None:
        await log.log_error("order", "Заказ не найден", {"id": id})
        raise HTTPException(status_code=404, detail="Заказ не найден")
    return order


async def create_order_service(order: OrderCreate, request: Request) -> Order:
    """
    Создание нового заказа. Существование продавца не проверяется.
    """
    store: Store = request.state.store
    log = request.app.state.log

    created = store.create_order(order)
    await log.log_info("order", "Заказ создан", {"id": created.id, "vendor_id": created.vendor_id})
    return created


async def update_order_status_service(id: int, status_update: OrderStatusUpdate, request: Request) -> Order:
    """
    Смена статуса заказа. Другие поля заказа не редактируются.
    """
    store: Store = request.state.store
    log = request.app.state.log

    try:
        updated = store.update_order_status(id, status_update.status)
    except NotFoundError:
        await log.log_error("order", "Заказ не найден для смены статуса", {"id": id})
        raise HTTPException(status_code=404, detail="Заказ не найден")

    await log.log_info("order", "Статус заказа изменён", {"id": id, "status": updated.status})
    return updated
