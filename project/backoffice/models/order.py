# backoffice/models/order.py

from datetime import datetime
from enum import Enum
from backoffice.models.base import Row
from backoffice.schemas.common import DecimalString


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Order(Row):
    vendor_id: int                          # ссылка на Vendor, не проверяется
    status: OrderStatus = OrderStatus.PENDING
    total: DecimalString
    created_at: datetime
