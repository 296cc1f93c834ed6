# backoffice/routes/vendor.py

from fastapi import APIRouter, Depends, Query, Request, Response, status
from typing import List, Optional
from backoffice.models.user import User
from backoffice.models.vendor import Vendor, VendorCustomer
from backoffice.routes.auth import admin_required
from backoffice.schemas.vendor import VendorCreate, VendorCustomerCreate, VendorUpdate
from backoffice.services.vendor import (
    assign_customer_service,
    create_vendor_service,
    delete_vendor_service,
    read_all_vendor_customers_service,
    read_vendor_customers_service,
    read_vendor_service,
    read_vendors_service,
    unassign_customer_service,
    update_vendor_service,
)

router = APIRouter()

# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Vendor],
    summary="Получить список продавцов",
    response_description="Все продавцы или только продавцы пользователя userId",
)
async def read_vendors(request: Request, user_id: Optional[int] = Query(None, alias="userId")):
    try:
        return await read_vendors_service(request, user_id=user_id)
    except Exception as e:
        await request.app.state.log.log_error("vendor", f"Ошибка при получении списка продавцов: {str(e)}")
        raise


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Vendor,
    summary="Получить продавца по ID",
    responses={404: {"description": "Продавец не найден"}},
)
async def read_vendor(id: int, request: Request):
    return await read_vendor_service(id, request)


# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Vendor,
    status_code=status.HTTP_201_CREATED,
    summary="Создать продавца",
    responses={
        201: {"description": "Продавец создан, комиссия сохранена строкой"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def create_vendor(request: Request, vendor: VendorCreate):
    try:
        return await create_vendor_service(vendor, request)
    except Exception as e:
        await request.app.state.log.log_error("vendor", f"Ошибка при создании продавца: {str(e)}")
        raise


# ────────────── UPDATE ──────────────
@router.patch(
    "/{id}",
    response_model=Vendor,
    summary="Частично обновить продавца",
    responses={
        404: {"description": "Продавец не найден"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def update_vendor(id: int, vendor_update: VendorUpdate, request: Request):
    return await update_vendor_service(id, vendor_update, request)


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Удалить продавца",
    response_description="Заказы и назначения продавца не удаляются",
)
async def delete_vendor(id: int, request: Request):
    await delete_vendor_service(id, request)


# ==========================================================
# Клиенты продавца
# ==========================================================
@router.get(
    "/{id}/customers",
    response_model=List[VendorCustomer],
    summary="Назначения клиентов продавцу",
)
async def read_vendor_customers(id: int, request: Request):
    return await read_vendor_customers_service(id, request)


@router.post(
    "/{id}/customers",
    response_model=VendorCustomer,
    status_code=status.HTTP_201_CREATED,
    summary="Назначить клиента продавцу (только админ)",
    responses={
        201: {"description": "Назначение создано (повтор создаёт дубликат)"},
        401: {"description": "Не авторизован"},
        403: {"description": "Требуется администратор"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def assign_customer(
    id: int,
    assignment: VendorCustomerCreate,
    request: Request,
    _: User = Depends(admin_required),
):
    try:
        return await assign_customer_service(id, assignment.customer_id, request)
    except Exception as e:
        await request.app.state.log.log_error("vendor_customer", f"Ошибка при назначении клиента: {str(e)}", {"vendor_id": id})
        raise


@router.delete(
    "/{id}/customers/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Снять клиента с продавца (только админ)",
    responses={
        204: {"description": "Первое совпадающее назначение удалено (или его не было)"},
        401: {"description": "Не авторизован"},
        403: {"description": "Требуется администратор"},
    },
)
async def unassign_customer(
    id: int,
    customer_id: int,
    request: Request,
    _: User = Depends(admin_required),
):
    await unassign_customer_service(id, customer_id, request)


# ==========================================================
# Все назначения (/vendor-customers)
# ==========================================================
assignments_router = APIRouter()


@assignments_router.get(
    "",
    response_model=List[VendorCustomer],
    summary="Все назначения клиентов по всем продавцам",
)
async def read_all_vendor_customers(request: Request):
    return await read_all_vendor_customers_service(request)
