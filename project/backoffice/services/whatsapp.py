# backoffice/services/whatsapp.py

import itertools
import threading
from datetime import datetime, timezone
from typing import Dict, List

from backoffice.config import settings
from backoffice.schemas.whatsapp import Message


class WhatsAppClient:
    """
    Заглушка провайдера WhatsApp.

    Реальной интеграции нет: QR-код берётся из настроек, соединение
    всегда "не подключено", отправленные сообщения складываются в память
    и отдаются обратно при чтении переписки.

    Журнал сообщений не ограничен по размеру и живёт до перезапуска процесса.
    """

    def __init__(self, qr_code: str | None = None):
        self.qr_code = qr_code or settings.WHATSAPP_QR_CODE
        self.messages: List[Message] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get_qr_code(self) -> str:
        return self.qr_code

    def get_connection_status(self) -> bool:
        return False

    def send_message(self, sender: str, to: str, body: str, type: str = "text") -> Dict[str, object]:
        """
        "Отправляет" сообщение: сохраняет его и возвращает подтверждение {id, status}.
        """
        with self._lock:
            message = Message(
                id=next(self._ids),
                sender=sender,
                to=to,
                body=body,
                type=type,
                timestamp=datetime.now(timezone.utc),
            )
            self.messages.append(message)
        return {"id": message.id, "status": "queued"}

    def list_messages(self, participant_a: str, participant_b: str) -> List[Message]:
        """Переписка двух участников в обе стороны, в порядке отправки."""
        pair = {participant_a, participant_b}
        with self._lock:
            return [m for m in self.messages if {m.sender, m.to} == pair]
