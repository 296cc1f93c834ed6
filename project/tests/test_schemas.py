# tests/test_schemas.py

from decimal import Decimal

import pytest
from pydantic import ValidationError

from backoffice.schemas.common import to_decimal_string
from backoffice.schemas.order import OrderCreate, OrderStatusUpdate
from backoffice.schemas.product import ProductCreate, ProductUpdate
from backoffice.schemas.vendor import VendorCreate, VendorUpdate


@pytest.mark.parametrize("value, expected", [
    (0.15, "0.15"),
    (0.1, "0.1"),
    (10, "10"),
    ("9.99", "9.99"),
    (" 9.99 ", "9.99"),
    (Decimal("1.50"), "1.50"),
    ("1e3", "1000"),
    (1e-7, "0.0000001"),
    (Decimal("2E+2"), "200"),
])
def test_decimal_string_canonical_form(value, expected):
    assert to_decimal_string(value) == expected


@pytest.mark.parametrize("value", ["abc", "", True, None, [1], "NaN", "Infinity"])
def test_decimal_string_rejects_garbage(value):
    with pytest.raises(ValueError):
        to_decimal_string(value)


def test_product_defaults_and_camel_case():
    product = ProductCreate.model_validate({"name": "W", "description": "d", "price": 2})
    assert product.stock == 0
    assert product.price == "2"


def test_product_negative_stock_rejected():
    with pytest.raises(ValidationError):
        ProductCreate(name="W", description="d", price="1", stock=-1)


def test_product_update_only_sent_fields():
    update = ProductUpdate.model_validate({"price": 3.5})
    assert update.model_dump(exclude_unset=True) == {"price": "3.5"}


def test_vendor_accepts_camel_case_and_coerces_commission():
    vendor = VendorCreate.model_validate({"userId": 1, "name": "Ana", "zone": None, "commission": 0.15})
    assert vendor.user_id == 1
    assert vendor.commission == "0.15"


def test_vendor_commission_default():
    assert VendorCreate(user_id=1, name="Ana").commission == "0.1"


def test_order_status_must_be_known():
    with pytest.raises(ValidationError):
        OrderStatusUpdate.model_validate({"status": "shipped"})
    assert OrderStatusUpdate.model_validate({"status": "completed"}).status.value == "completed"


def test_order_total_required():
    with pytest.raises(ValidationError):
        OrderCreate.model_validate({"vendorId": 1})


@pytest.mark.parametrize("payload", [{"name": None}, {"stock": None}, {"price": None}])
def test_product_update_rejects_null(payload):
    with pytest.raises(ValidationError):
        ProductUpdate.model_validate(payload)


def test_vendor_update_null_allowed_only_for_zone():
    assert VendorUpdate.model_validate({"zone": None}).model_dump(exclude_unset=True) == {"zone": None}
    with pytest.raises(ValidationError):
        VendorUpdate.model_validate({"commission": None})
