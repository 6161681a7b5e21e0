import json
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

import awcli  # noqa: E402


def test_cli_tables_create_row_inline_json(api, capsys):
    api.reply({"$id": "r1", "title": "Hello"}, status_code=201)

    rc = awcli.main(
        [
            "tables",
            "create-row",
            "--database-id",
            "db1",
            "--table-id",
            "posts",
            "--row-id",
            "r1",
            "--data",
            '{"title": "Hello"}',
            "--permissions",
            'read("any")',
            "--json",
        ]
    )
    assert rc == 0
    assert api.last["url"].endswith("/databases/db1/tables/posts/rows")
    assert api.body() == {"rowId": "r1", "data": {"title": "Hello"}, "permissions": ['read("any")']}


def test_cli_tables_create_row_data_from_file(api, tmp_path):
    data_file = tmp_path / "row.json"
    data_file.write_text(json.dumps({"title": "From file", "views": 3}), encoding="utf-8")

    rc = awcli.main(
        [
            "tables",
            "create-row",
            "--database-id",
            "db1",
            "--table-id",
            "posts",
            "--row-id",
            "r2",
            "--data",
            f"@{data_file}",
            "--json",
        ]
    )
    assert rc == 0
    assert api.body()["data"] == {"title": "From file", "views": 3}


def test_cli_tables_create_rows_object_array(api, tmp_path):
    rows_file = tmp_path / "rows.json"
    rows_file.write_text(json.dumps([{"$id": "b"}, {"$id": "c"}]), encoding="utf-8")

    rc = awcli.main(
        [
            "tables",
            "create-rows",
            "--database-id",
            "db1",
            "--table-id",
            "posts",
            "--rows",
            '{"$id": "a"}',
            f"@{rows_file}",
            "--json",
        ]
    )
    assert rc == 0
    assert api.body() == {"rows": [{"$id": "a"}, {"$id": "b"}, {"$id": "c"}]}


def test_cli_tables_invalid_json_returns_2(api, capsys):
    rc = awcli.main(
        [
            "tables",
            "create-row",
            "--database-id",
            "db1",
            "--table-id",
            "posts",
            "--row-id",
            "r1",
            "--data",
            "{not json",
        ]
    )
    assert rc == 2
    assert "invalid arguments for tables create-row" in capsys.readouterr().err
    assert api.calls == []


def test_cli_tables_float_column(api):
    rc = awcli.main(
        [
            "tables",
            "create-float-column",
            "--database-id",
            "db1",
            "--table-id",
            "products",
            "--key",
            "price",
            "--required",
            "false",
            "--min",
            "0.5",
            "--default",
            "1.25",
            "--json",
        ]
    )
    assert rc == 0
    assert api.last["url"].endswith("/databases/db1/tables/products/columns/float")
    assert api.body() == {"key": "price", "required": False, "min": 0.5, "default": 1.25}


def test_cli_tables_integer_column_rejects_non_number(api, capsys):
    with pytest.raises(SystemExit) as exc:
        awcli.main(
            [
                "tables",
                "create-integer-column",
                "--database-id",
                "db1",
                "--table-id",
                "products",
                "--key",
                "stock",
                "--required",
                "true",
                "--min",
                "ten",
            ]
        )
    assert exc.value.code == 2
    assert "Not a number." in capsys.readouterr().err


def test_cli_tables_list_rows_table_output(api, capsys):
    api.reply(
        {
            "total": 2,
            "rows": [
                {"$id": "r1", "title": "First"},
                {"$id": "r2", "title": "Second", "tags": ["a"]},
            ],
        }
    )

    rc = awcli.main(["tables", "list-rows", "--database-id", "db1", "--table-id", "posts"])
    assert rc == 0

    assert api.last["method"] == "GET"
    assert api.last["params"] == []
    out = capsys.readouterr().out
    for token in ["total : 2", "title", "First", "Second", "tags", '["a"]']:
        assert token in out
