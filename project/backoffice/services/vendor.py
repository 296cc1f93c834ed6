# backoffice/services/vendor.py

from typing import Optional
from fastapi import HTTPException, Request

from backoffice.models.vendor import Vendor, VendorCustomer
from backoffice.schemas.vendor import VendorCreate, VendorUpdate
from backoffice.services.storage import NotFoundError, Store


async def read_vendors_service(request: Request, user_id: Optional[int] = None) -> list[Vendor]:
    """
    Получение списка продавцов, опционально только продавцов пользователя user_id.
    """
    store: Store = request.state.store
    log = request.app.state.log

    vendors = store.get_vendors(user_id=user_id)
    await log.log_info("vendor", f"{len(vendors)} продавцов загружено", {"user_id": user_id})
    return vendors


async def read_vendor_service(id: int, request: Request) -> Vendor:
    store: Store = request.state.store
    log = request.app.state.log

    vendor = store.get_vendor(id)
    if vendor is None:
        await log.log_error("vendor", "Продавец не найден", {"id": id})
        raise HTTPException(status_code=404, detail="Продавец не найден")
    return vendor


async def create_vendor_service(vendor: VendorCreate, request: Request) -> Vendor:
    """
    Создание продавца. user_id не проверяется на существование.
    """
    store: Store = request.state.store
    log = request.app.state.log

    created = store.create_vendor(vendor)
    await log.log_info("vendor", "Продавец создан", {"id": created.id, "user_id": created.user_id})
    return created


async def update_vendor_service(id: int, vendor_update: VendorUpdate, request: Request) -> Vendor:
    store: Store = request.state.store
    log = request.app.state.log

    try:
        updated = store.update_vendor(id, vendor_update.model_dump(exclude_unset=True))
    except NotFoundError:
        await log.log_error("vendor", "Продавец не найден для обновления", {"id": id})
        raise HTTPException(status_code=404, detail="Продавец не найден")

    await log.log_info("vendor", "Продавец обновлён", {"id": id})
    return updated


async def delete_vendor_service(id: int, request: Request) -> None:
    """
    Удаление продавца. Его заказы и назначения остаются висеть.
    """
    store: Store = request.state.store
    log = request.app.state.log

    store.delete_vendor(id)
    await log.log_info("vendor", "Продавец удалён", {"id": id})


# ==========================================================
# НАЗНАЧЕНИЯ КЛИЕНТОВ
# ==========================================================
async def read_vendor_customers_service(vendor_id: int, request: Request) -> list[VendorCustomer]:
    store: Store = request.state.store
    log = request.app.state.log

    assignments = store.get_vendor_customers(vendor_id)
    await log.log_info("vendor_customer", f"{len(assignments)} назначений загружено", {"vendor_id": vendor_id})
    return assignments


async def read_all_vendor_customers_service(request: Request) -> list[VendorCustomer]:
    """
    Все назначения: по одному запросу к хранилищу на каждого продавца.
    Назначения на удалённых продавцов сюда не попадают.
    """
    store: Store = request.state.store
    log = request.app.state.log

    assignments: list[VendorCustomer] = []
    for vendor in store.get_vendors():
        assignments.extend(store.get_vendor_customers(vendor.id))

    await log.log_info("vendor_customer", f"{len(assignments)} назначений загружено по всем продавцам")
    return assignments


async def assign_customer_service(vendor_id: int, customer_id: int, request: Request) -> VendorCustomer:
    """
    Назначение клиента продавцу. Повторное назначение создаёт дубликат.
    """
    store: Store = request.state.store
    log = request.app.state.log

    assignment = store.assign_customer_to_vendor(vendor_id, customer_id)
    await log.log_info("vendor_customer", "Клиент назначен продавцу", {
        "id": assignment.id, "vendor_id": vendor_id, "customer_id": customer_id,
    })
    return assignment


async def unassign_customer_service(vendor_id: int, customer_id: int, request: Request) -> None:
    store: Store = request.state.store
    log = request.app.state.log

    store.unassign_customer_from_vendor(vendor_id, customer_id)
    await log.log_info("vendor_customer", "Клиент снят с продавца", {
        "vendor_id": vendor_id, "customer_id": customer_id,
    })
