# backoffice/routes/whatsapp.py

from fastapi import APIRouter, Request, status
from backoffice.schemas.whatsapp import (
    ChatResponse,
    ConnectionStatusResponse,
    MessageAck,
    MessageSend,
    QrCodeResponse,
)
from backoffice.services.whatsapp import WhatsAppClient

router = APIRouter()


def get_client(request: Request) -> WhatsAppClient:
    return request.app.state.whatsapp


@router.get("/whatsapp/qr", response_model=QrCodeResponse, summary="QR-код для привязки WhatsApp")
async def read_qr_code(request: Request):
    return {"qr_code": get_client(request).get_qr_code()}


@router.get("/whatsapp/status", response_model=ConnectionStatusResponse, summary="Статус подключения WhatsApp")
async def read_connection_status(request: Request):
    return {"connected": get_client(request).get_connection_status()}


@router.post(
    "/send",
    response_model=MessageAck,
    status_code=status.HTTP_201_CREATED,
    summary="Отправить сообщение",
    responses={422: {"description": "Пустое сообщение или нет from / to"}},
)
async def send_message(request: Request, message: MessageSend):
    ack = get_client(request).send_message(message.sender, message.to, message.body, message.type)
    await request.app.state.log.log_info("whatsapp", "Сообщение поставлено в очередь", {
        "id": ack["id"], "from": message.sender, "to": message.to,
    })
    return ack


@router.get(
    "/chats/{participant_a}/{participant_b}",
    response_model=ChatResponse,
    summary="Переписка двух участников",
)
async def read_chat(participant_a: str, participant_b: str, request: Request):
    messages = get_client(request).list_messages(participant_a, participant_b)
    return {"messages": messages}
