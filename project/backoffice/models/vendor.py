# backoffice/models/vendor.py

from datetime import datetime
from typing import Optional
from backoffice.models.base import Row
from backoffice.schemas.common import DecimalString


class Vendor(Row):
    user_id: int                        # ссылка на User, не проверяется
    name: str
    zone: Optional[str] = None
    commission: DecimalString = "0.1"  # доля от выручки


class VendorCustomer(Row):
    """Назначение клиента продавцу. Дубликаты пары допустимы."""

    vendor_id: int
    customer_id: int
    assigned_at: datetime
