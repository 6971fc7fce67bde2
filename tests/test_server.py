import logging

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from conftest import tool_call
from menu_data import format_menu
from server import app, get_agent


@pytest.fixture
def client_for(make_agent):
    """Return a function that wires a stubbed agent into the app."""

    def _client(reply=None, error=None):
        agent, model = make_agent(reply=reply, error=error)
        app.dependency_overrides[get_agent] = lambda: agent
        return TestClient(app, raise_server_exceptions=False), model

    yield _client
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "body",
    [{}, {"message": ""}, {"message": None}, {"message": "   "}, {"message": 5}],
)
def test_missing_message_returns_400(client_for, body):
    client, model = client_for()
    response = client.post("/chat", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}
    assert model.calls == []


def test_invalid_json_returns_400(client_for):
    client, _ = client_for()
    response = client.post("/chat", content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}


def test_tool_answer(client_for):
    client, _ = client_for(
        reply=AIMessage(content="", tool_calls=[tool_call("get_menu", {"category": "lunch"})])
    )
    response = client.post("/chat", json={"message": "what's on the lunch menu"})
    assert response.status_code == 200
    assert response.json() == {"source": "tool", "answer": format_menu("lunch")}


def test_model_answer(client_for):
    client, _ = client_for(reply=AIMessage(content="Happy to help!"))
    response = client.post("/chat", json={"message": "hello"})
    assert response.status_code == 200
    assert response.json() == {"source": "gemini", "answer": "Happy to help!"}
    assert "X-Request-ID" in response.headers


def test_upstream_failure_returns_500(client_for):
    client, _ = client_for(error=RuntimeError("quota exceeded"))
    response = client.post("/chat", json={"message": "hello"})
    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


def test_unknown_tool_returns_500(client_for):
    client, _ = client_for(reply=AIMessage(content="", tool_calls=[tool_call("delete_menu")]))
    response = client.post("/chat", json={"message": "hello"})
    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


def test_bad_tool_arguments_return_500(client_for):
    client, _ = client_for(reply=AIMessage(content="", tool_calls=[tool_call("get_menu", {})]))
    response = client.post("/chat", json={"message": "menu please"})
    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


def test_chat_widget_served_at_root(client_for):
    client, _ = client_for()
    response = client.get("/")
    assert response.status_code == 200
    assert 'id="chat-history"' in response.text

    script = client.get("/script.js")
    assert script.status_code == 200
    assert "Oops! Server error, please try again later." in script.text


def test_upstream_failure_is_logged_with_request_id(client_for, caplog):
    client, _ = client_for(error=RuntimeError("quota exceeded"))
    with caplog.at_level(logging.INFO, logger="middleware"):
        response = client.post("/chat", json={"message": "hello"})

    assert response.status_code == 500
    lines = [r.getMessage() for r in caplog.records if r.name == "middleware"]
    started = next(line for line in lines if line.startswith("Request started POST /chat"))
    request_id = started.rsplit("[", 1)[1].rstrip("]")
    failed = [line for line in lines if line.startswith("Request failed POST /chat")]
    assert len(failed) == 1
    assert f"[{request_id}]" in failed[0]
    assert "quota exceeded" in failed[0]
