import json
import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

import awcli  # noqa: E402


def test_cli_doctor_missing_required_env(clean_env, capsys):
    rc = awcli.main(["doctor", "--format", "json"])
    assert rc == 1

    out = json.loads(capsys.readouterr().out)
    assert out["ok"] is False
    assert out["endpoint"] == "https://cloud.appwrite.io/v1"
    assert out["checks"]["env"]["missing_required"] == [
        "APPWRITE_PROJECT_ID",
        "APPWRITE_API_KEY|APPWRITE_JWT|APPWRITE_COOKIE",
    ]
    # Never echo credentials in diagnostics.
    assert out["checks"]["env"]["values"]["APPWRITE_API_KEY"] == {"set": False}
    assert "probe" not in out["checks"]


def test_cli_doctor_reads_dotenv_and_hides_secrets(clean_env, capsys):
    (clean_env / ".env").write_text(
        "APPWRITE_PROJECT_ID=proj-from-dotenv\nAPPWRITE_API_KEY=supersecret\n", encoding="utf-8"
    )

    rc = awcli.main(["doctor"])
    assert rc == 0

    raw = capsys.readouterr().out
    assert "supersecret" not in raw
    out = json.loads(raw)
    assert out["ok"] is True
    assert Path(out["dotenv"]).resolve() == (clean_env / ".env").resolve()
    assert out["checks"]["env"]["values"]["APPWRITE_PROJECT_ID"] == {"set": True, "value": "proj-from-dotenv"}
    assert out["checks"]["env"]["values"]["APPWRITE_API_KEY"] == {"set": True}


def test_cli_doctor_flags_count_as_configuration(clean_env, capsys):
    rc = awcli.main(["--project", "p", "--key", "k", "doctor"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["checks"]["env"]["missing_required"] == []


def test_cli_doctor_probe_lists_databases(api, capsys):
    api.reply({"total": 0, "databases": [{"$id": "db1"}, {"$id": "db2"}]})

    rc = awcli.main(["doctor", "--probe"])
    assert rc == 0

    call = api.last
    assert call["method"] == "GET"
    assert call["url"] == "https://cloud.appwrite.io/v1/tablesdb"
    assert call["params"] == [("total", "false")]

    probe = json.loads(capsys.readouterr().out)["checks"]["probe"]
    assert probe["ok"] is True
    assert probe["databases"] == 2
    assert probe["elapsedMs"] >= 0


def test_cli_doctor_probe_failure_text_format(api, capsys):
    api.reply({"message": "The current user is not authorized to perform the requested action.", "code": 401}, status_code=401)

    rc = awcli.main(["doctor", "--probe", "--format", "text"])
    assert rc == 1

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "ok: false"
    assert lines[1] == "endpoint: https://cloud.appwrite.io/v1"
    assert lines[-1].startswith("probe: failed (The current user is not authorized")


def test_cli_doctor_probe_skipped_when_env_missing(clean_env, tmp_path, capsys):
    out_path = tmp_path / "doctor.txt"

    rc = awcli.main(["doctor", "--probe", "--format", "text", "--out", str(out_path)])
    assert rc == 1
    assert capsys.readouterr().out == ""
    lines = out_path.read_text(encoding="utf-8").splitlines()
    assert "missing required env vars: APPWRITE_PROJECT_ID, APPWRITE_API_KEY|APPWRITE_JWT|APPWRITE_COOKIE" in lines
    assert lines[-1] == "probe: skipped"
