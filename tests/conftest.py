import json
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

import awclient  # noqa: E402

APPWRITE_ENV = [
    "APPWRITE_ENDPOINT",
    "APPWRITE_PROJECT_ID",
    "APPWRITE_API_KEY",
    "APPWRITE_JWT",
    "APPWRITE_COOKIE",
    "APPWRITE_SELF_SIGNED",
    "APPWRITE_LOCALE",
]


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, content_type="application/json", reason="OK"):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.headers = {"content-type": content_type} if content_type else {}
        self.reason = reason


class FakeApi:
    """Stands in for `requests.request`; records calls and replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def reply(self, payload=None, status_code=200, **kwargs):
        self.responses.append(FakeResponse(status_code=status_code, payload=payload, **kwargs))
        return self

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse(payload={})

    @property
    def last(self):
        return self.calls[-1]

    def body(self, index=-1):
        return json.loads(self.calls[index]["data"])


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no APPWRITE_* variables set."""
    monkeypatch.chdir(tmp_path)
    for k in APPWRITE_ENV:
        # setenv first so monkeypatch restores "unset" even if load_dotenv() writes the var.
        monkeypatch.setenv(k, "")
        monkeypatch.delenv(k)
    return tmp_path


@pytest.fixture
def api(clean_env, monkeypatch):
    monkeypatch.setenv("APPWRITE_PROJECT_ID", "proj1")
    monkeypatch.setenv("APPWRITE_API_KEY", "key1")
    fake = FakeApi()
    monkeypatch.setattr(awclient.requests, "request", fake.request)
    return fake
