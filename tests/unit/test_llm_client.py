import pytest
import requests

from listing_compliance.services import models
from listing_compliance.services.models import LLMClient, ensure_ollama_endpoint


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}")

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def test_ensure_ollama_endpoint_adds_path():
    assert ensure_ollama_endpoint("http://localhost:11434", "api/chat") == "http://localhost:11434/api/chat"
    assert ensure_ollama_endpoint("http://localhost:11434/api", "api/chat") == "http://localhost:11434/api/chat"
    assert ensure_ollama_endpoint("http://proxy/custom", "api/chat") == "http://proxy/custom"


def test_openai_chat_sends_system_and_user_messages(monkeypatch):
    captured = {}

    def fake_post(url, json=None, headers=None, timeout=None):
        captured.update(url=url, json=json, headers=headers, timeout=timeout)
        return FakeResponse({"choices": [{"message": {"content": '{"compliance_score": 90}'}}]})

    monkeypatch.setattr(models.requests, "post", fake_post)
    client = LLMClient(endpoint="https://api.example.test/v1/chat/completions", auth_token="secret")
    response = client.chat("gpt-4o-mini", "system text", "user text", max_tokens=800, timeout=5)

    assert response.text == '{"compliance_score": 90}'
    assert captured["headers"]["Authorization"] == "Bearer secret"
    assert captured["json"]["messages"][0] == {"role": "system", "content": "system text"}
    assert captured["json"]["max_tokens"] == 800
    assert captured["timeout"] == 5


def test_ollama_chat_reads_message_content(monkeypatch):
    captured = {}

    def fake_post(url, json=None, headers=None, timeout=None):
        captured.update(url=url, json=json)
        return FakeResponse({"message": {"content": "ok"}})

    monkeypatch.setattr(models.requests, "post", fake_post)
    client = LLMClient(endpoint="http://localhost:11434", api_mode="ollama_chat")
    response = client.chat("llama3", "sys", "prompt", max_tokens=100)

    assert response.text == "ok"
    assert captured["url"] == "http://localhost:11434/api/chat"
    assert captured["json"]["options"]["num_predict"] == 100
    assert captured["json"]["stream"] is False


def test_transport_errors_become_runtime_errors(monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(models.requests, "post", fake_post)
    client = LLMClient(endpoint="https://api.example.test/v1/chat/completions")
    with pytest.raises(RuntimeError):
        client.chat("gpt-4o-mini", "sys", "prompt")


def test_http_errors_become_runtime_errors(monkeypatch):
    monkeypatch.setattr(models.requests, "post", lambda *a, **k: FakeResponse(status_code=503, text="busy"))
    client = LLMClient(endpoint="https://api.example.test/v1/chat/completions")
    with pytest.raises(RuntimeError, match="HTTP 503"):
        client.chat("gpt-4o-mini", "sys", "prompt")


def test_unsupported_mode_rejected():
    with pytest.raises(ValueError):
        LLMClient(endpoint="http://localhost", api_mode="grpc")
