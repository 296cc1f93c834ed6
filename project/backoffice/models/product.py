# backoffice/models/product.py

from pydantic import Field
from backoffice.models.base import Row
from backoffice.schemas.common import DecimalString


class Product(Row):
    name: str
    description: str
    price: DecimalString
    stock: int = Field(0, ge=0)
