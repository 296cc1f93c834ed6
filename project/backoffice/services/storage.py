# backoffice/services/storage.py

import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TypeVar

from backoffice.models.base import Row
from backoffice.models.customer import Customer
from backoffice.models.order import Order, OrderStatus
from backoffice.models.product import Product
from backoffice.models.user import Role, User
from backoffice.models.vendor import Vendor, VendorCustomer
from backoffice.schemas.customer import CustomerCreate
from backoffice.schemas.order import OrderCreate
from backoffice.schemas.product import ProductCreate
from backoffice.schemas.user import UserCreate
from backoffice.schemas.vendor import VendorCreate

R = TypeVar("R", bound=Row)


class NotFoundError(Exception):
    """Строка с указанным id отсутствует в хранилище."""

    def __init__(self, entity: str, id: int):
        super().__init__(f"{entity} {id} not found")
        self.entity = entity
        self.id = id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Store:
    """
    Хранилище данных в памяти процесса.

    Держит шесть коллекций (users, products, vendors, customers,
    vendor_customers, orders) и один общий счётчик id на все сущности:
    id уникален во всём хранилище, строго растёт и не переиспользуется.

    Ссылки между сущностями (vendor.user_id, order.vendor_id, ...) не проверяются,
    удаление не каскадное. При обновлении отсутствующей строки NotFoundError,
    при недопустимом значении поля pydantic.ValidationError (строка не меняется).

    Все операции синхронные и не уступают управление, поэтому в рамках одного
    event loop выполняются атомарно. Общий RLock нужен на случай вызова
    из пула потоков.
    """

    def __init__(self):
        self.users: Dict[int, User] = {}
        self.products: Dict[int, Product] = {}
        self.vendors: Dict[int, Vendor] = {}
        self.customers: Dict[int, Customer] = {}
        self.vendor_customers: Dict[int, VendorCustomer] = {}
        self.orders: Dict[int, Order] = {}

        self._current_id = 1
        self._lock = threading.RLock()

    # ==========================================================
    # ОБЩИЕ ХЕЛПЕРЫ
    # ==========================================================
    def _next_id(self) -> int:
        with self._lock:
            id = self._current_id
            self._current_id += 1
            return id

    def _insert(self, table: Dict[int, R], model: type[R], fields: Dict[str, Any]) -> R:
        with self._lock:
            row = model(id=self._next_id(), **fields)
            table[row.id] = row
            return row

    def _update(self, table: Dict[int, R], entity: str, id: int, fields: Dict[str, Any]) -> R:
        with self._lock:
            existing = table.get(id)
            if existing is None:
                raise NotFoundError(entity, id)

            # id не меняется, неизвестные поля отбрасываются
            changes = {
                k: v for k, v in fields.items()
                if k != "id" and k in type(existing).model_fields
            }
            # новая строка проходит валидацию целиком; при ошибке в таблице остаётся старая
            updated = type(existing).model_validate({**existing.model_dump(), **changes})
            table[id] = updated
            return updated

    def _delete(self, table: Dict[int, Row], id: int) -> None:
        with self._lock:
            table.pop(id, None)

    # ==========================================================
    # ПОЛЬЗОВАТЕЛИ
    # ==========================================================
    def get_users(self) -> List[User]:
        return list(self.users.values())

    def get_user(self, id: int) -> Optional[User]:
        return self.users.get(id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(self, user: UserCreate) -> User:
        """Пароль сохраняется как передан, хэширует вызывающий."""
        return self._insert(self.users, User, user.model_dump())

    def has_admin(self) -> bool:
        return any(u.role is Role.ADMIN for u in self.users.values())

    # ==========================================================
    # ТОВАРЫ
    # ==========================================================
    def get_products(self) -> List[Product]:
        return list(self.products.values())

    def get_product(self, id: int) -> Optional[Product]:
        return self.products.get(id)

    def create_product(self, product: ProductCreate) -> Product:
        return self._insert(self.products, Product, product.model_dump())

    def update_product(self, id: int, fields: Dict[str, Any]) -> Product:
        return self._update(self.products, "Product", id, fields)

    def delete_product(self, id: int) -> None:
        self._delete(self.products, id)

    # ==========================================================
    # ПРОДАВЦЫ
    # ==========================================================
    def get_vendors(self, user_id: Optional[int] = None) -> List[Vendor]:
        vendors = list(self.vendors.values())
        if user_id is not None:
            vendors = [v for v in vendors if v.user_id == user_id]
        return vendors

    def get_vendor(self, id: int) -> Optional[Vendor]:
        return self.vendors.get(id)

    def create_vendor(self, vendor: VendorCreate) -> Vendor:
        return self._insert(self.vendors, Vendor, vendor.model_dump())

    def update_vendor(self, id: int, fields: Dict[str, Any]) -> Vendor:
        return self._update(self.vendors, "Vendor", id, fields)

    def delete_vendor(self, id: int) -> None:
        self._delete(self.vendors, id)

    # ==========================================================
    # КЛИЕНТЫ
    # ==========================================================
    def get_customers(self) -> List[Customer]:
        return list(self.customers.values())

    def get_customer(self, id: int) -> Optional[Customer]:
        return self.customers.get(id)

    def create_customer(self, customer: CustomerCreate) -> Customer:
        return self._insert(self.customers, Customer, customer.model_dump())

    def update_customer(self, id: int, fields: Dict[str, Any]) -> Customer:
        return self._update(self.customers, "Customer", id, fields)

    def delete_customer(self, id: int) -> None:
        self._delete(self.customers, id)

    # ==========================================================
    # НАЗНАЧЕНИЯ КЛИЕНТОВ ПРОДАВЦАМ
    # ==========================================================
    def get_vendor_customers(self, vendor_id: int) -> List[VendorCustomer]:
        return [vc for vc in self.vendor_customers.values() if vc.vendor_id == vendor_id]

    def assign_customer_to_vendor(self, vendor_id: int, customer_id: int) -> VendorCustomer:
        """Всегда добавляет новую строку, даже если такая пара уже есть."""
        return self._insert(self.vendor_customers, VendorCustomer, {
            "vendor_id": vendor_id,
            "customer_id": customer_id,
            "assigned_at": utcnow(),
        })

    def unassign_customer_from_vendor(self, vendor_id: int, customer_id: int) -> None:
        """Удаляет первую найденную строку пары; при дубликатах остальные остаются."""
        with self._lock:
            match = next(
                (vc for vc in self.vendor_customers.values()
                 if vc.vendor_id == vendor_id and vc.customer_id == customer_id),
                None,
            )
            if match is not None:
                del self.vendor_customers[match.id]

    # ==========================================================
    # ЗАКАЗЫ
    # ==========================================================
    def get_orders(self) -> List[Order]:
        return list(self.orders.values())

    def get_order(self, id: int) -> Optional[Order]:
        return self.orders.get(id)

    def create_order(self, order: OrderCreate) -> Order:
        fields = order.model_dump()
        if fields["created_at"] is None:
            fields["created_at"] = utcnow()
        return self._insert(self.orders, Order, fields)

    def update_order_status(self, id: int, status: OrderStatus) -> Order:
        return self._update(self.orders, "Order", id, {"status": status})
