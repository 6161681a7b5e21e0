import json
import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "API"))

from awservices import output  # noqa: E402


def test_parse_scalars_lists_and_objects(capsys):
    output.parse(
        {
            "total": 2,
            "enabled": True,
            "deleted": None,
            "rows": [{"$id": "r1", "name": "a"}, {"$id": "r2", "tags": ["x"]}],
            "queries": ["limit(1)"],
            "data": {"title": "t"},
        }
    )
    out = capsys.readouterr().out

    assert "total : 2" in out
    assert "enabled : true" in out
    assert "deleted : null" in out
    # Table columns are the union of the row keys; missing cells render as "-".
    for token in ["$id", "name", "tags", "r1", "r2", '["x"]', "-"]:
        assert token in out
    assert '"limit(1)"' in out
    assert "title" in out


def test_parse_non_dict_prints_json(capsys):
    output.parse([1, 2])
    assert json.loads(capsys.readouterr().out) == [1, 2]


def test_draw_table_empty(capsys):
    output.draw_table([])
    assert capsys.readouterr().out.strip() == "[]"


def test_draw_json_is_indented(capsys):
    output.draw_json({"a": {"b": 1}})
    out = capsys.readouterr().out
    assert json.loads(out) == {"a": {"b": 1}}
    assert '\n  "a"' in out


def test_status_lines(capsys):
    output.success()
    output.log("hello")
    output.error("boom")
    captured = capsys.readouterr()
    assert "✓ Success:" in captured.out
    assert "ℹ Info: hello" in captured.out
    assert "✗ Error: boom" in captured.err
    assert "boom" not in captured.out
