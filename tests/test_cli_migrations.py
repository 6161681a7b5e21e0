import json
import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

import awcli  # noqa: E402


def test_cli_migrations_appwrite_source_flags_do_not_clash_with_connection_flags(api, capsys):
    api.reply({"$id": "mig1", "status": "pending"}, status_code=202)

    rc = awcli.main(
        [
            "--endpoint",
            "https://dest.example/v1",
            "migrations",
            "create-appwrite-migration",
            "--resources",
            "user",
            "team",
            "--endpoint",
            "https://source.example/v1",
            "--project-id",
            "src-project",
            "--api-key",
            "src-key",
            "--json",
        ]
    )
    assert rc == 0

    call = api.last
    assert call["url"] == "https://dest.example/v1/migrations/appwrite"
    assert call["headers"]["x-appwrite-project"] == "proj1"
    assert call["headers"]["x-appwrite-key"] == "key1"
    assert api.body() == {
        "resources": ["user", "team"],
        "endpoint": "https://source.example/v1",
        "projectId": "src-project",
        "apiKey": "src-key",
    }
    assert json.loads(capsys.readouterr().out)["status"] == "pending"


def test_cli_migrations_report_is_a_get_with_query(api, capsys):
    api.reply({"user": 3, "team": 1})

    rc = awcli.main(
        [
            "migrations",
            "get-appwrite-report",
            "--resources",
            "user",
            "--endpoint",
            "https://source.example/v1",
            "--project-id",
            "src",
            "--key",
            "src-key",
        ]
    )
    assert rc == 0

    call = api.last
    assert call["method"] == "GET"
    assert call["url"].endswith("/migrations/appwrite/report")
    assert call["params"] == [
        ("resources[]", "user"),
        ("endpoint", "https://source.example/v1"),
        ("projectID", "src"),
        ("key", "src-key"),
    ]
    # The source key is a request parameter, the client still authenticates with its own key.
    assert call["headers"]["x-appwrite-key"] == "key1"
    assert "user : 3" in capsys.readouterr().out


def test_cli_migrations_retry_and_out_file(api, tmp_path):
    api.reply({"$id": "mig1", "status": "processing"})
    out_path = tmp_path / "reports" / "retry.json"

    rc = awcli.main(["migrations", "retry", "--migration-id", "mig1", "--out", str(out_path)])
    assert rc == 0

    assert api.last["method"] == "PATCH"
    assert api.last["url"].endswith("/migrations/mig1")
    assert json.loads(out_path.read_text(encoding="utf-8")) == {"$id": "mig1", "status": "processing"}
    # No temp files left behind by the atomic write.
    assert [p.name for p in out_path.parent.iterdir()] == ["retry.json"]


def test_cli_migrations_csv_import(api):
    rc = awcli.main(
        [
            "migrations",
            "create-csv-import",
            "--bucket-id",
            "b1",
            "--file-id",
            "f1",
            "--resource-id",
            "db1:tbl1",
            "--internal-file",
            "--json",
        ]
    )
    assert rc == 0
    assert api.last["url"].endswith("/migrations/csv/imports")
    assert api.body() == {"bucketId": "b1", "fileId": "f1", "resourceId": "db1:tbl1", "internalFile": True}


def test_cli_migrations_transport_failure_returns_1(api, monkeypatch, capsys):
    import awclient

    def boom(**kwargs):
        raise awclient.requests.ConnectionError("connection refused")

    monkeypatch.setattr(awclient.requests, "request", boom)

    rc = awcli.main(["migrations", "list"])
    assert rc == 1
    assert "connection refused" in capsys.readouterr().err
