# backoffice/schemas/product.py

from typing import Optional
from pydantic import Field
from backoffice.schemas.common import CamelModel, DecimalString, PartialUpdate

# ────────────── Схема для CREATE ──────────────
class ProductCreate(CamelModel):
    name: str
    description: str
    price: DecimalString
    stock: int = Field(0, ge=0)

# ────────────── Схема для PATCH ──────────────
class ProductUpdate(PartialUpdate):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[DecimalString] = None
    stock: Optional[int] = Field(None, ge=0)
