# backoffice/services/product.py

from fastapi import HTTPException, Request

from backoffice.models.product import Product
from backoffice.schemas.product import ProductCreate, ProductUpdate
from backoffice.services.storage import NotFoundError, Store


async def read_products_service(request: Request) -> list[Product]:
    """
    Получение списка товаров.
    """
    store: Store = request.state.store
    log = request.app.state.log

    products = store.get_products()
    await log.log_info("product", f"{len(products)} товаров загружено")
    return products


async def read_product_service(id: int, request: Request) -> Product:
    """
    Чтение товара по ID.
    """
    store: Store = request.state.store
    log = request.app.state.log

    product = store.get_product(id)
    if product is None:
        await log.log_error("product", "Товар не найден", {"id": id})
        raise HTTPException(status_code=404, detail="Товар не найден")
    return product


async def create_product_service(product: ProductCreate, request: Request) -> Product:
    """
    Создание нового товара.
    """
    store: Store = request.state.store
    log = request.app.state.log

    created = store.create_product(product)
    await log.log_info("product", "Товар создан", {"id": created.id})
    return created


async def update_product_service(id: int, product_update: ProductUpdate, request: Request) -> Product:
    """
    Частичное обновление товара: меняются только переданные поля.
    """
    store: Store = request.state.store
    log = request.app.state.log

    try:
        updated = store.update_product(id, product_update.model_dump(exclude_unset=True))
    except NotFoundError:
        await log.log_error("product", "Товар не найден для обновления", {"id": id})
        raise HTTPException(status_code=404, detail="Товар не найден")

    await log.log_info("product", "Товар обновлён", {"id": id})
    return updated


async def delete_product_service(id: int, request: Request) -> None:
    """
    Удаление товара. Отсутствующий id не ошибка.
    """
    store: Store = request.state.store
    log = request.app.state.log

    store.delete_product(id)
    await log.log_info("product", "Товар удалён", {"id": id})
