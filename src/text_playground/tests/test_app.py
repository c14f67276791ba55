import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from text_playground.app import create_app
from text_playground.config import Settings
from text_playground.messages import (
    Envelope,
    ErrorMessage,
    PingMessage,
    TransformRequestMessage,
    TransformResultMessage,
)
from text_playground.models import Operation


@pytest.fixture
def client():
    with patch.dict("os.environ", {"MAX_INPUT_LENGTH": "50"}, clear=True):
        settings = Settings()
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def test_index_serves_page(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    for element_id in ("textInput", "uppercaseBtn", "titleCaseBtn", "resultContent"):
        assert f'id="{element_id}"' in response.text


def test_health_lists_operations(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": "Text Playground",
        "operations": ["uppercase", "lowercase", "titlecase", "count"],
    }


@pytest.mark.parametrize(
    "operation, title, content",
    [
        ("uppercase", "Uppercase Result:", "HELLO WORLD"),
        ("lowercase", "Lowercase Result:", "hello world"),
        ("titlecase", "Title Case Result:", "Hello World"),
    ],
)
def test_transform(client: TestClient, operation, title, content):
    response = client.post(f"/transform/{operation}", json={"text": "hello World"})

    assert response.status_code == 200
    assert response.json() == {
        "operation": operation,
        "title": title,
        "content": content,
        "is_error": False,
    }


def test_transform_count(client: TestClient):
    response = client.post("/transform/count", json={"text": "Hi there"})

    body = response.json()
    assert body["title"] == "Letter Count:"
    assert "Total letters: 7" in body["content"]
    assert '"Hi" → 2 letters' in body["content"]
    assert '"there" → 5 letters' in body["content"]


def test_transform_blank_input_returns_error_display(client: TestClient):
    response = client.post("/transform/uppercase", json={"text": "   "})

    assert response.status_code == 200
    assert response.json()["title"] == "Error"
    assert response.json()["content"] == "Please enter some text first!"
    assert response.json()["is_error"] is True


def test_transform_unknown_operation(client: TestClient):
    response = client.post("/transform/reverse", json={"text": "hello"})
    assert response.status_code == 422


def test_transform_missing_text(client: TestClient):
    response = client.post("/transform/uppercase", json={})
    assert response.status_code == 422


def test_transform_too_long(client: TestClient):
    response = client.post("/transform/uppercase", json={"text": "x" * 51})
    assert response.status_code == 413


def test_letters(client: TestClient):
    response = client.post("/letters", json={"text": "Hello    World"})

    assert response.status_code == 200
    assert response.json() == {
        "total": 10,
        "words": [{"word": "Hello", "count": 5}, {"word": "World", "count": 5}],
    }


def test_letters_blank_input(client: TestClient):
    response = client.post("/letters", json={"text": "   "})
    assert response.json() == {"total": 0, "words": []}


def test_websocket_transform(client: TestClient):
    with client.websocket_connect("/ws") as ws:
        request = TransformRequestMessage(
            operation=Operation.TITLECASE, text="the lord of the rings"
        )
        ws.send_text(Envelope(message=request).model_dump_json())

        reply = Envelope.model_validate_json(ws.receive_text()).message

    assert isinstance(reply, TransformResultMessage)
    assert reply.operation == Operation.TITLECASE
    assert reply.title == "Title Case Result:"
    assert reply.content == "The Lord of the Rings"


def test_websocket_blank_input(client: TestClient):
    with client.websocket_connect("/ws") as ws:
        request = TransformRequestMessage(operation=Operation.COUNT, text="")
        ws.send_text(Envelope(message=request).model_dump_json())

        reply = Envelope.model_validate_json(ws.receive_text()).message

    assert isinstance(reply, TransformResultMessage)
    assert reply.is_error
    assert reply.content == "Please enter some text first!"


def test_websocket_ping(client: TestClient):
    with client.websocket_connect("/ws") as ws:
        ws.send_text(Envelope(message=PingMessage(type="ping")).model_dump_json())
        reply = Envelope.model_validate_json(ws.receive_text()).message

    assert isinstance(reply, PingMessage)
    assert reply.type == "pong"


def test_websocket_invalid_message_keeps_session_open(client: TestClient):
    with client.websocket_connect("/ws") as ws:
        ws.send_text("not json")
        error = Envelope.model_validate_json(ws.receive_text()).message

        request = TransformRequestMessage(operation=Operation.UPPERCASE, text="ok")
        ws.send_text(Envelope(message=request).model_dump_json())
        reply = Envelope.model_validate_json(ws.receive_text()).message

    assert isinstance(error, ErrorMessage)
    assert error.error_code == "invalid_message"
    assert isinstance(reply, TransformResultMessage)
    assert reply.content == "OK"


def test_websocket_too_long(client: TestClient):
    with client.websocket_connect("/ws") as ws:
        request = TransformRequestMessage(operation=Operation.UPPERCASE, text="x" * 51)
        ws.send_text(Envelope(message=request).model_dump_json())
        reply = Envelope.model_validate_json(ws.receive_text()).message

    assert isinstance(reply, ErrorMessage)
    assert reply.error_code == "input_too_long"
    assert reply.operation == Operation.UPPERCASE
