# backoffice/schemas/order.py

from datetime import datetime
from typing import Optional
from backoffice.models.order import OrderStatus
from backoffice.schemas.common import CamelModel, DecimalString

# ────────────── Схема для CREATE ──────────────
class OrderCreate(CamelModel):
    vendor_id: int
    status: OrderStatus = OrderStatus.PENDING
    total: DecimalString
    created_at: Optional[datetime] = None   # по умолчанию момент создания

# ────────────── Смена статуса ──────────────
class OrderStatusUpdate(CamelModel):
    status: OrderStatus
