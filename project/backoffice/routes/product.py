# backoffice/routes/product.py

from fastapi import APIRouter, Request, Response, status
from typing import List
from backoffice.models.product import Product
from backoffice.schemas.product import ProductCreate, ProductUpdate
from backoffice.services.product import (
    create_product_service,
    read_products_service,
    read_product_service,
    update_product_service,
    delete_product_service,
)

router = APIRouter()

# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Product],
    summary="Получить список товаров",
    responses={200: {"description": "Список товаров успешно получен"}},
)
async def read_products(request: Request):
    try:
        return await read_products_service(request)
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при получении списка товаров: {str(e)}")
        raise


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Product,
    summary="Получить товар по ID",
    responses={404: {"description": "Товар не найден"}},
)
async def read_product(id: int, request: Request):
    return await read_product_service(id, request)


# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Создать товар",
    responses={
        201: {"description": "Товар успешно создан"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def create_product(request: Request, product: ProductCreate):
    try:
        return await create_product_service(product, request)
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при создании товара: {str(e)}")
        raise


# ────────────── UPDATE ──────────────
@router.patch(
    "/{id}",
    response_model=Product,
    summary="Частично обновить товар",
    responses={
        200: {"description": "Товар успешно обновлён"},
        404: {"description": "Товар не найден"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def update_product(id: int, product_update: ProductUpdate, request: Request):
    return await update_product_service(id, product_update, request)


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Удалить товар",
    response_description="Тело ответа отсутствует, 204 даже если товара не было",
)
async def delete_product(id: int, request: Request):
    await delete_product_service(id, request)
