# backoffice/services/customer.py

from fastapi import HTTPException, Request

from backoffice.models.customer import Customer
from backoffice.schemas.customer import CustomerCreate, CustomerUpdate
from backoffice.services.storage import NotFoundError, Store


async def read_customers_service(request: Request) -> list[Customer]:
    """
    Получение списка клиентов.
    """
    store: Store = request.state.store
    log = request.app.state.log

    customers = store.get_customers()
    await log.log_info("customer", f"{len(customers)} клиентов загружено")
    return customers


async def read_customer_service(id: int, request: Request) -> Customer:
    store: Store = request.state.store
    log = request.app.state.log

    customer = store.get_customer(id)
    if customer is None:
        await log.log_error("customer", "Клиент не найден", {"id": id})
        raise HTTPException(status_code=404, detail="Клиент не найден")
    return customer


async def create_customer_service(customer: CustomerCreate, request: Request) -> Customer:
    store: Store = request.state.store
    log = request.app.state.log

    created = store.create_customer(customer)
    await log.log_info("customer", "Клиент создан", {"id": created.id})
    return created


async def update_customer_service(id: int, customer_update: CustomerUpdate, request: Request) -> Customer:
    store: Store = request.state.store
    log = request.app.state.log

    try:
        updated = store.update_customer(id, customer_update.model_dump(exclude_unset=True))
    except NotFoundError:
        await log.log_error("customer", "Клиент не найден для обновления", {"id": id})
        raise HTTPException(status_code=404, detail="Клиент не найден")

    await log.log_info("customer", "Клиент обновлён", {"id": id})
    return updated


async def delete_customer_service(id: int, request: Request) -> None:
    """
    Удаление клиента. Назначения продавцам не трогаются.
    """
    store: Store = request.state.store
    log = request.app.state.log

    store.delete_customer(id)
    await log.log_info("customer", "Клиент удалён", {"id": id})
