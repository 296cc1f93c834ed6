# backoffice/schemas/customer.py

from typing import Optional
from backoffice.schemas.common import CamelModel, PartialUpdate

# ────────────── Схема для CREATE ──────────────
class CustomerCreate(CamelModel):
    name: str
    email: str
    phone: str
    address: str

# ────────────── Схема для PATCH ──────────────
class CustomerUpdate(PartialUpdate):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
