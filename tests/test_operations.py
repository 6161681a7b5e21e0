import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

import awclient  # noqa: E402
import awservices  # noqa: E402
from awservices import base, messaging, migrations, tables, tables_db  # noqa: E402


class RecordingClient:
    def __init__(self, response=None):
        self.calls = []
        self.response = {} if response is None else response

    def call(self, method, path, headers, params):
        self.calls.append((method, path, headers, params))
        return self.response


def test_python_name_folds_acronyms_and_keywords():
    assert base.python_name("messageId") == "message_id"
    assert base.python_name("serviceAccountJSON") == "service_account_json"
    assert base.python_name("autoTLS") == "auto_tls"
    assert base.python_name("projectID") == "project_id"
    assert base.python_name("from") == "from_"
    assert base.python_name("default") == "default"


def test_param_flags_are_kebab_case_without_keyword_suffix():
    assert base.Param("from").flag == "--from"
    assert base.Param("default").flag == "--default"
    assert base.Param("serviceAccountJSON").flag == "--service-account-json"
    assert base.Param("scheduledAt").flag == "--scheduled-at"


def test_param_rejects_unknown_kind():
    with pytest.raises(ValueError):
        base.Param("x", kind="bytes")


def test_service_endpoint_counts():
    assert len(messaging.service) == 48
    assert len(migrations.service) == 14
    assert len(tables.service) == 47
    assert len(tables_db.service) == 66
    assert [s.name for s in awservices.SERVICES] == ["messaging", "migrations", "tables", "tables-db"]


def test_every_path_placeholder_is_a_required_param():
    for svc in awservices.SERVICES:
        for op in svc:
            for p in op.path_params:
                assert p.required, op.name
                assert "{" + p.key + "}" in op.path


def test_get_service_and_operation_lookup():
    assert awservices.get_operation("tables-db", "list") is tables_db.list_databases
    with pytest.raises(KeyError):
        awservices.get_service("storage")
    with pytest.raises(KeyError):
        awservices.get_operation("messaging", "no-such-command")


def test_service_rejects_duplicate_command_and_unmapped_placeholder():
    svc = base.Service("demo")
    svc.operation("get", "GET", "/demo/{demoId}", "Get.", base.Param("demoId", required=True))
    with pytest.raises(ValueError):
        svc.operation("get", "GET", "/demo", "Again.")
    with pytest.raises(ValueError):
        svc.operation("other", "GET", "/demo/{missingId}", "Unmapped.")


def test_build_request_get_sends_no_headers_and_empty_payload():
    method, path, headers, payload = messaging.list_messages.build_request()
    assert (method, path, headers, payload) == ("GET", "/messaging/messages", {}, {})


def test_build_request_omits_undefined_keys():
    method, path, headers, payload = messaging.create_email.build_request(
        message_id="m1", subject="Hi", content="Body", draft=None
    )
    assert method == "POST"
    assert path == "/messaging/messages/email"
    assert headers == {"content-type": "application/json"}
    assert payload == {"messageId": "m1", "subject": "Hi", "content": "Body"}


def test_build_request_keeps_false_and_zero():
    _, _, _, payload = messaging.create_email.build_request(
        message_id="m1", subject="s", content="c", draft=False, html=False
    )
    assert payload["draft"] is False
    assert payload["html"] is False

    _, _, _, payload = tables_db.decrement_row_column.build_request(
        database_id="db", table_id="t", row_id="r", column="count", value=0
    )
    assert payload == {"value": 0}


def test_array_true_sentinel_becomes_empty_list():
    _, _, _, payload = messaging.create_email.build_request(
        message_id="m1", subject="s", content="c", topics=True, users=("u1", "u2")
    )
    assert payload["topics"] == []
    assert payload["users"] == ["u1", "u2"]


def test_path_placeholders_are_substituted_and_not_sent_in_payload():
    method, path, headers, payload = tables_db.decrement_row_column.build_request(
        database_id="db1", table_id="tbl", row_id="row1", column="stock", value=2, min=0
    )
    assert method == "PATCH"
    assert path == "/tablesdb/db1/tables/tbl/rows/row1/stock/decrement"
    assert payload == {"value": 2, "min": 0}


def test_missing_required_param_names_the_flag():
    with pytest.raises(TypeError, match="--subject"):
        messaging.create_email.build_request(message_id="m1", content="c")


def test_unknown_param_is_rejected():
    with pytest.raises(TypeError, match="bogus"):
        messaging.list_messages.build_request(bogus=1)


def test_object_param_decodes_json_strings():
    _, path, _, payload = tables_db.create_row.build_request(
        database_id="db", table_id="t", row_id="r", data='{"title": "x", "n": 1}'
    )
    assert path == "/tablesdb/db/tables/t/rows"
    assert payload["data"] == {"title": "x", "n": 1}

    _, _, _, payload = tables_db.create_row.build_request(
        database_id="db", table_id="t", row_id="r", data={"already": "decoded"}
    )
    assert payload["data"] == {"already": "decoded"}

    with pytest.raises(ValueError):
        tables_db.create_row.build_request(database_id="db", table_id="t", row_id="r", data="{nope")


def test_object_array_param_decodes_string_items():
    _, _, _, payload = tables.create_rows.build_request(
        database_id="db", table_id="t", rows=['{"a": 1}', {"b": 2}]
    )
    assert payload == {"rows": [{"a": 1}, {"b": 2}]}


def test_keyword_named_param_maps_back_to_wire_key():
    _, _, _, payload = messaging.create_telesign_provider.build_request(
        provider_id="p1", name="Telesign", from_="+16175551212"
    )
    assert payload == {"providerId": "p1", "name": "Telesign", "from": "+16175551212"}


def test_float_column_bounds_are_sent_as_given():
    _, path, _, payload = tables.create_float_column.build_request(
        database_id="db", table_id="t", key="price", required=False, min=0.5, max=9.75, default=1.25
    )
    assert path == "/databases/db/tables/t/columns/float"
    assert payload == {"key": "price", "required": False, "min": 0.5, "max": 9.75, "default": 1.25}


def test_call_forwards_to_client_and_prints(capsys):
    client = RecordingClient({"total": 0, "messages": []})
    resp = messaging.list_messages(client, queries=['limit(1)'])
    assert resp == {"total": 0, "messages": []}
    assert client.calls == [("GET", "/messaging/messages", {}, {"queries": ["limit(1)"]})]
    out = capsys.readouterr().out
    assert "total : 0" in out
    assert "messages" in out


def test_call_noprint_is_silent(capsys):
    client = RecordingClient({"$id": "mig1", "status": "pending"})
    resp = migrations.retry_migration(client, noprint=True, migration_id="mig1")
    assert resp["status"] == "pending"
    assert client.calls[0][:2] == ("PATCH", "/migrations/mig1")
    assert capsys.readouterr().out == ""


def test_call_without_client_resolves_from_environment(monkeypatch):
    client = RecordingClient({"ok": True})
    monkeypatch.setattr(awclient, "client_for_project", lambda: client)
    assert tables_db.get_database(noprint=True, database_id="db") == {"ok": True}
    assert client.calls[0][:2] == ("GET", "/tablesdb/db")


def test_call_propagates_client_errors_unmodified():
    err = awclient.AppwriteException("Row not found", 404, "row_not_found")

    class FailingClient:
        def call(self, *args):
            raise err

    with pytest.raises(awclient.AppwriteException) as exc:
        tables.get_row(FailingClient(), noprint=True, database_id="d", table_id="t", row_id="r")
    assert exc.value is err


def test_call_validates_before_sending():
    client = RecordingClient()
    with pytest.raises(TypeError):
        messaging.create_topic(client, noprint=True, name="no-id")
    assert client.calls == []


def test_operation_params_have_unique_flags():
    for svc in awservices.SERVICES:
        for op in svc:
            flags = [p.flag for p in op.params]
            assert len(flags) == len(set(flags)), op.name


def test_object_param_json_string_is_decoded_once():
    _, _, _, payload = tables_db.create_row.build_request(
        database_id="db", table_id="t", row_id="r", data='"{\\"a\\": 1}"'
    )
    assert payload["data"] == '{"a": 1}'


def test_object_array_splices_json_lists():
    _, _, _, payload = tables_db.create_operations.build_request(
        transaction_id="tx1", operations=['[{"action": "create"}, {"action": "delete"}]', '{"action": "update"}']
    )
    assert payload == {"operations": [{"action": "create"}, {"action": "delete"}, {"action": "update"}]}


def test_integer_array_items_are_ints():
    _, _, _, payload = tables.create_index.build_request(
        database_id="db", table_id="t", key="k", type="key", columns=["a", "b"], lengths=["10", 20]
    )
    assert payload["lengths"] == [10, 20]
