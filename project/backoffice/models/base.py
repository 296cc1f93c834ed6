# backoffice/models/base.py

from pydantic import ConfigDict
from backoffice.schemas.common import CamelModel


class Row(CamelModel):
    """Строка хранилища. Неизменяемая: обновление создаёт новую копию."""

    model_config = ConfigDict(frozen=True)

    id: int
