# backoffice/schemas/whatsapp.py

from datetime import datetime
from typing import List
from pydantic import Field
from backoffice.schemas.common import CamelModel

class QrCodeResponse(CamelModel):
    qr_code: str

class ConnectionStatusResponse(CamelModel):
    connected: bool

class MessageSend(CamelModel):
    # "from" зарезервировано в Python, поэтому sender с явным алиасом
    sender: str = Field(..., alias="from")
    to: str
    body: str = Field(..., min_length=1)
    type: str = "text"

class Message(CamelModel):
    id: int
    sender: str = Field(..., alias="from")
    to: str
    body: str
    type: str = "text"
    timestamp: datetime

class MessageAck(CamelModel):
    id: int
    status: str

class ChatResponse(CamelModel):
    messages: List[Message]
