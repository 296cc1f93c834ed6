# tests/test_whatsapp.py

from concurrent.futures import ThreadPoolExecutor

from backoffice.services.whatsapp import WhatsAppClient


def test_qr_and_status_stub(client):
    assert client.get("/api/whatsapp/qr").json() == {"qrCode": "dummy-qr-code"}
    assert client.get("/api/whatsapp/status").json() == {"connected": False}


def test_send_and_read_chat(client):
    sent = client.post("/api/send", json={"from": "111", "to": "222", "body": "Hola", "type": "text"})
    assert sent.status_code == 201
    assert sent.json()["status"] == "queued"

    client.post("/api/send", json={"from": "222", "to": "111", "body": "Hi"})
    client.post("/api/send", json={"from": "111", "to": "333", "body": "Other chat"})

    messages = client.get("/api/chats/111/222").json()["messages"]
    assert [m["body"] for m in messages] == ["Hola", "Hi"]
    assert messages[0]["from"] == "111"
    assert messages[0]["to"] == "222"


def test_empty_message_rejected(client):
    assert client.post("/api/send", json={"from": "1", "to": "2", "body": ""}).status_code == 422


def test_client_ids_independent_of_store():
    whatsapp = WhatsAppClient(qr_code="abc")
    assert whatsapp.get_qr_code() == "abc"
    assert whatsapp.send_message("a", "b", "x")["id"] == 1
    assert whatsapp.send_message("b", "a", "y")["id"] == 2
    assert [m.body for m in whatsapp.list_messages("b", "a")] == ["x", "y"]
    assert whatsapp.list_messages("a", "c") == []


def test_list_messages_while_sending_from_threads():
    whatsapp = WhatsAppClient()

    def send(i):
        whatsapp.send_message("a", "b", str(i))
        return len(whatsapp.list_messages("a", "b"))

    with ThreadPoolExecutor(max_workers=8) as pool:
        seen = list(pool.map(send, range(200)))

    assert all(1 <= n <= 200 for n in seen)
    messages = whatsapp.list_messages("b", "a")
    assert len(messages) == 200
    assert [m.id for m in messages] == list(range(1, 201))
