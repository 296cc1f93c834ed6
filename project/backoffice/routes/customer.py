# backoffice/routes/customer.py

from fastapi import APIRouter, Request, Response, status
from typing import List
from backoffice.models.customer import Customer
from backoffice.schemas.customer import CustomerCreate, CustomerUpdate
from backoffice.services.customer import (
    create_customer_service,
    read_customers_service,
    read_customer_service,
    update_customer_service,
    delete_customer_service,
)

router = APIRouter()

# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Customer],
    summary="Получить список клиентов",
)
async def read_customers(request: Request):
    try:
        return await read_customers_service(request)
    except Exception as e:
        await request.app.state.log.log_error("customer", f"Ошибка при получении списка клиентов: {str(e)}")
        raise


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Customer,
    summary="Получить клиента по ID",
    responses={404: {"description": "Клиент не найден"}},
)
async def read_customer(id: int, request: Request):
    return await read_customer_service(id, request)


# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Customer,
    status_code=status.HTTP_201_CREATED,
    summary="Создать клиента",
    responses={422: {"description": "Неверные данные запроса"}},
)
async def create_customer(request: Request, customer: CustomerCreate):
    try:
        return await create_customer_service(customer, request)
    except Exception as e:
        await request.app.state.log.log_error("customer", f"Ошибка при создании клиента: {str(e)}")
        raise


# ────────────── UPDATE ──────────────
@router.patch(
    "/{id}",
    response_model=Customer,
    summary="Частично обновить клиента",
    responses={
        404: {"description": "Клиент не найден"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def update_customer(id: int, customer_update: CustomerUpdate, request: Request):
    return await update_customer_service(id, customer_update, request)


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Удалить клиента",
)
async def delete_customer(id: int, request: Request):
    await delete_customer_service(id, request)
