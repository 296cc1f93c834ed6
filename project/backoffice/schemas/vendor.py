# backoffice/schemas/vendor.py

from typing import ClassVar, FrozenSet, Optional
from backoffice.schemas.common import CamelModel, DecimalString, PartialUpdate

# ────────────── Схема для CREATE ──────────────
class VendorCreate(CamelModel):
    user_id: int
    name: str
    zone: Optional[str] = None
    commission: DecimalString = "0.1"

# ────────────── Схема для PATCH ──────────────
class VendorUpdate(PartialUpdate):
    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"zone"})

    user_id: Optional[int] = None
    name: Optional[str] = None
    zone: Optional[str] = None          # null сбрасывает зону
    commission: Optional[DecimalString] = None

# ────────────── Назначение клиента ──────────────
class VendorCustomerCreate(CamelModel):
    customer_id: int
