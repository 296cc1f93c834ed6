# backoffice/schemas/common.py

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, ClassVar, FrozenSet

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


def to_decimal_string(value: Any) -> str:
    """
    Приводит число или строку к каноническому строковому виду десятичного числа.

    0.15 -> "0.15", 10 -> "10", " 9.99 " -> "9.99", "1e3" -> "1000".
    Всегда десятичная запись без экспоненты, значащие нули сохраняются ("1.50").
    Float сначала переводится в str, чтобы не тащить двоичный хвост (0.1 -> "0.1").
    """
    if isinstance(value, bool):
        raise ValueError("ожидается число или строка с числом")
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = Decimal(str(value))
    elif isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"'{value}' не является десятичным числом")
    else:
        raise ValueError("ожидается число или строка с числом")

    if not parsed.is_finite():
        raise ValueError("ожидается конечное число")
    return format(parsed, "f")


# Денежные и процентные поля храним строкой, чтобы не терять точность
DecimalString = Annotated[str, BeforeValidator(to_decimal_string)]


class CamelModel(BaseModel):
    """Базовая схема: на проводе camelCase, в коде snake_case (принимаются оба варианта)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PartialUpdate(CamelModel):
    """
    Базовая схема для PATCH.

    Любое поле можно не передавать. Явный null принимается только для полей
    из NULLABLE_FIELDS, для остальных это 422, а не None в хранилище.
    """

    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.NULLABLE_FIELDS:
            raise ValueError("поле не может быть null")
        return value
