import json
import logging
import sys
import time
from pathlib import Path
from unittest import mock

import jwt
import pytest
import requests


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

import awclient  # noqa: E402


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text=None, content_type="application/json", reason="OK"):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.headers = {"content-type": content_type} if content_type else {}
        self.reason = reason


class DummySession:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def _client(*responses):
    session = DummySession(responses)
    client = awclient.Client("https://example.test/v1", session=session).set_project("proj1").set_key("k")
    return client, session


def test_default_headers_and_setters_lowercase_names():
    client = awclient.Client()
    assert client.endpoint == awclient.DEFAULT_ENDPOINT
    assert client.headers["x-sdk-name"] == "Command Line"
    assert client.headers["x-sdk-platform"] == "console"
    assert client.headers["x-sdk-language"] == "cli"
    assert client.headers["x-appwrite-response-format"] == "1.8.1"

    client.set_project("p").set_key("secret").set_locale("fr-FR").set_mode("default")
    assert client.headers["x-appwrite-project"] == "p"
    assert client.headers["x-appwrite-key"] == "secret"
    assert client.headers["x-appwrite-locale"] == "fr-FR"
    assert client.headers["x-appwrite-mode"] == "default"


def test_get_sends_query_with_list_brackets_and_bool_strings():
    client, session = _client(DummyResponse(payload={"total": 1, "messages": [{"$id": "m1"}]}))

    resp = client.call("GET", "/messaging/messages", {}, {"queries": ["limit(1)", "offset(2)"], "total": False})

    assert resp == {"total": 1, "messages": [{"$id": "m1"}]}
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://example.test/v1/messaging/messages"
    assert call["params"] == [("queries[]", "limit(1)"), ("queries[]", "offset(2)"), ("total", "false")]
    assert "data" not in call
    assert call["verify"] is True
    assert call["headers"]["x-appwrite-project"] == "proj1"


def test_post_sends_json_body():
    client, session = _client(DummyResponse(status_code=201, payload={"$id": "t1"}))

    resp = client.call(
        "POST",
        "/messaging/topics",
        {"content-type": "application/json"},
        {"topicId": "t1", "name": "News", "subscribe": []},
    )

    assert resp == {"$id": "t1"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert json.loads(call["data"]) == {"topicId": "t1", "name": "News", "subscribe": []}
    assert call["headers"]["content-type"] == "application/json"
    assert "params" not in call


def test_empty_body_returns_empty_dict_and_text_body_is_returned_raw():
    client, _ = _client(
        DummyResponse(status_code=204, text="", content_type=""),
        DummyResponse(text="plain body", content_type="text/plain"),
    )
    assert client.call("DELETE", "/messaging/topics/t1", {"content-type": "application/json"}, {}) == {}
    assert client.call("GET", "/health") == "plain body"


def test_http_error_raises_appwrite_exception_with_server_message():
    client, _ = _client(
        DummyResponse(
            status_code=404,
            payload={"message": "Topic with the requested ID could not be found.", "code": 404, "type": "topic_not_found"},
            reason="Not Found",
        )
    )

    with pytest.raises(awclient.AppwriteException) as exc:
        client.call("GET", "/messaging/topics/missing")

    assert exc.value.code == 404
    assert exc.value.type == "topic_not_found"
    assert str(exc.value) == "Topic with the requested ID could not be found."
    assert "topic_not_found" in exc.value.response


def test_http_error_without_json_uses_body_text():
    client, _ = _client(DummyResponse(status_code=502, text="Bad gateway", content_type="text/html", reason="Bad Gateway"))
    with pytest.raises(awclient.AppwriteException) as exc:
        client.call("GET", "/tablesdb")
    assert exc.value.code == 502
    assert exc.value.message == "Bad gateway"


def test_transport_error_is_wrapped_and_redacted():
    client, session = _client(requests.ConnectionError("failed to reach https://example.test/v1?key=abc123"))
    with pytest.raises(awclient.AppwriteException) as exc:
        client.call("GET", "/tablesdb")
    assert exc.value.code is None
    assert "abc123" not in str(exc.value)
    assert "[REDACTED]" in str(exc.value)
    # One attempt only.
    assert len(session.calls) == 1


def test_self_signed_disables_tls_verification():
    client, session = _client(DummyResponse(payload={}))
    client.set_self_signed(True)
    client.call("GET", "/tablesdb")
    assert session.calls[0]["verify"] is False


def test_call_falls_back_to_requests_module_without_session(monkeypatch):
    captured = {}

    def fake_request(**kwargs):
        captured.update(kwargs)
        return DummyResponse(payload={"databases": []})

    monkeypatch.setattr(awclient.requests, "request", fake_request)
    client = awclient.Client("https://example.test/v1").set_project("p").set_key("k")
    assert client.call("GET", "/tablesdb") == {"databases": []}
    assert captured["url"] == "https://example.test/v1/tablesdb"


def test_redact_sensitive_text():
    token = jwt.encode({"sub": "u"}, "x" * 32, algorithm="HS256")
    text = (
        f"Authorization: Bearer abc.def X-Appwrite-JWT: {token} "
        "x-appwrite-key=standard_0123456789abcdef0123 "
        'cookie: "a_session=xyz" url=https://h/v1?key=zzz&limit=5'
    )
    cooked = awclient.redact_sensitive_text(text)
    assert token not in cooked
    assert "standard_0123456789abcdef0123" not in cooked
    assert "abc.def" not in cooked
    assert "zzz" not in cooked
    assert "limit=5" in cooked
    assert awclient.redact_sensitive_text(None) == ""


def test_jwt_expiry_check():
    token = jwt.encode({"exp": 100}, "x" * 32, algorithm="HS256")
    assert awclient._jwt_expired(token, now=50) is False
    assert awclient._jwt_expired(token, now=150) is True
    assert awclient._jwt_expired(jwt.encode({"sub": "u"}, "x" * 32, algorithm="HS256")) is False
    assert awclient._jwt_expired("not-a-jwt") is None


def test_set_jwt_warns_when_expired(caplog):
    token = jwt.encode({"exp": 100}, "x" * 32, algorithm="HS256")
    with mock.patch.object(time, "time", return_value=200):
        with caplog.at_level(logging.WARNING, logger="awclient"):
            client = awclient.Client().set_jwt(token)
    assert client.headers["x-appwrite-jwt"] == token
    assert "expired" in caplog.text


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        awclient.configure_logging("LOUD")


def test_client_for_project_requires_project(clean_env):
    with pytest.raises(awclient.ConfigError, match="Project is not set"):
        awclient.client_for_project(key="k")


def test_client_for_project_requires_credentials(clean_env):
    with pytest.raises(awclient.ConfigError, match="Session not found"):
        awclient.client_for_project(project="p")


def test_client_for_project_reads_env_and_prefers_cookie(clean_env, monkeypatch):
    monkeypatch.setenv("APPWRITE_ENDPOINT", "https://self.hosted/v1")
    monkeypatch.setenv("APPWRITE_PROJECT_ID", "proj")
    monkeypatch.setenv("APPWRITE_API_KEY", "k")
    monkeypatch.setenv("APPWRITE_COOKIE", "a_session=1")
    monkeypatch.setenv("APPWRITE_SELF_SIGNED", "true")

    client = awclient.client_for_project()
    assert client.endpoint == "https://self.hosted/v1"
    assert client.self_signed is True
    assert client.headers["x-appwrite-project"] == "proj"
    assert client.headers["cookie"] == "a_session=1"
    assert client.headers["x-appwrite-mode"] == "admin"
    assert "x-appwrite-key" not in client.headers
    assert client.headers["x-appwrite-locale"] == awclient.DEFAULT_LOCALE


def test_client_for_project_key_mode_and_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("APPWRITE_PROJECT_ID", "from-env")
    client = awclient.client_for_project(project="explicit", key="k", locale="de-DE")
    assert client.headers["x-appwrite-project"] == "explicit"
    assert client.headers["x-appwrite-key"] == "k"
    assert client.headers["x-appwrite-mode"] == "default"
    assert client.headers["x-appwrite-locale"] == "de-DE"


def test_client_for_project_loads_dotenv_without_overriding(clean_env, monkeypatch):
    (clean_env / ".env").write_text(
        "APPWRITE_PROJECT_ID=dotenv-proj\nAPPWRITE_API_KEY=dotenv-key\nAPPWRITE_LOCALE=it-IT\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("APPWRITE_LOCALE", "es-ES")

    client = awclient.client_for_project()
    assert client.headers["x-appwrite-project"] == "dotenv-proj"
    assert client.headers["x-appwrite-key"] == "dotenv-key"
    assert client.headers["x-appwrite-locale"] == "es-ES"
