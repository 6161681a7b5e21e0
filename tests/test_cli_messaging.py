import json
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

import awcli  # noqa: E402


def test_cli_messaging_create_email_json(api, capsys):
    api.reply({"$id": "m1", "status": "draft"}, status_code=201)

    rc = awcli.main(
        [
            "messaging",
            "create-email",
            "--message-id",
            "m1",
            "--subject",
            "Hi",
            "--content",
            "Body",
            "--topics",
            "--users",
            "u1",
            "u2",
            "--draft",
            "--json",
        ]
    )
    assert rc == 0

    call = api.last
    assert call["method"] == "POST"
    assert call["url"] == "https://cloud.appwrite.io/v1/messaging/messages/email"
    assert call["headers"]["content-type"] == "application/json"
    assert call["headers"]["x-appwrite-project"] == "proj1"
    assert call["headers"]["x-appwrite-key"] == "key1"
    # Bare list flag sends an empty list; bare optional boolean means true.
    assert api.body() == {
        "messageId": "m1",
        "subject": "Hi",
        "content": "Body",
        "topics": [],
        "users": ["u1", "u2"],
        "draft": True,
    }
    assert json.loads(capsys.readouterr().out) == {"$id": "m1", "status": "draft"}


def test_cli_messaging_list_messages_formatted(api, capsys):
    api.reply({"total": 1, "messages": [{"$id": "m1", "providerType": "email"}]})

    rc = awcli.main(["messaging", "list-messages", "--queries", "limit(5)", "--total", "false"])
    assert rc == 0

    call = api.last
    assert call["method"] == "GET"
    assert call["params"] == [("queries[]", "limit(5)"), ("total", "false")]
    assert "content-type" not in call["headers"]

    out = capsys.readouterr().out
    assert "total : 1" in out
    assert "providerType" in out
    assert "✓ Success:" in out


def test_cli_messaging_provider_from_flag(api, capsys):
    rc = awcli.main(
        [
            "messaging",
            "update-telesign-provider",
            "--provider-id",
            "p1",
            "--from",
            "+16175551212",
            "--enabled",
            "false",
            "--json",
        ]
    )
    assert rc == 0
    assert api.last["method"] == "PATCH"
    assert api.last["url"].endswith("/messaging/providers/telesign/p1")
    assert api.body() == {"from": "+16175551212", "enabled": False}


def test_cli_messaging_missing_required_flag_exits_2(api, capsys):
    with pytest.raises(SystemExit) as exc:
        awcli.main(["messaging", "create-topic", "--name", "News"])
    assert exc.value.code == 2
    assert "--topic-id" in capsys.readouterr().err
    assert api.calls == []


def test_cli_messaging_rejects_non_boolean(api, capsys):
    with pytest.raises(SystemExit) as exc:
        awcli.main(["messaging", "list-topics", "--total", "maybe"])
    assert exc.value.code == 2
    assert "Not a boolean." in capsys.readouterr().err


def test_cli_messaging_api_error_returns_1(api, capsys):
    api.reply(
        {"message": "Topic with the requested ID could not be found.", "code": 404, "type": "topic_not_found"},
        status_code=404,
    )

    rc = awcli.main(["messaging", "get-topic", "--topic-id", "missing"])
    assert rc == 1

    captured = capsys.readouterr()
    assert "✗ Error: Topic with the requested ID could not be found." in captured.err
    assert "--verbose" in captured.out
    assert "✓ Success" not in captured.out


def test_cli_messaging_requires_project(api, monkeypatch, capsys):
    monkeypatch.delenv("APPWRITE_PROJECT_ID")

    rc = awcli.main(["messaging", "list-topics"])
    assert rc == 2
    assert "Project is not set" in capsys.readouterr().err
    assert api.calls == []


def test_cli_messaging_root_connection_flags(api, capsys):
    rc = awcli.main(
        [
            "--endpoint",
            "https://self.hosted/v1",
            "--project",
            "other",
            "--locale",
            "fr-FR",
            "--self-signed",
            "messaging",
            "delete-subscriber",
            "--topic-id",
            "t1",
            "--subscriber-id",
            "s1",
            "--json",
        ]
    )
    assert rc == 0
    call = api.last
    assert call["method"] == "DELETE"
    assert call["url"] == "https://self.hosted/v1/messaging/topics/t1/subscribers/s1"
    assert call["headers"]["x-appwrite-project"] == "other"
    assert call["headers"]["x-appwrite-locale"] == "fr-FR"
    assert call["verify"] is False
    assert api.body() == {}
    assert json.loads(capsys.readouterr().out) == {}
