"""Rich formatting for API responses and CLI status lines."""

import json

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _scalar(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _cell(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return _scalar(value)


def parse(data) -> None:
    """
    Pretty-print a decoded response.

    Lists of objects become tables, nested objects a one-row table, and scalars a
    `key : value` line. Anything that is not an object is printed as JSON.
    """
    if not isinstance(data, dict):
        draw_json(data)
        return

    for key, value in data.items():
        if isinstance(value, list):
            console.print(Text(str(key), style="bold underline yellow"))
            if value and isinstance(value[0], dict):
                draw_table(value)
            else:
                draw_json(value)
        elif isinstance(value, dict):
            console.print(Text(str(key), style="bold underline yellow"))
            draw_table([value])
        else:
            console.print(Text.assemble((str(key), "bold yellow"), f" : {_scalar(value)}"), soft_wrap=True)


def draw_table(rows: list[dict]) -> None:
    if not rows:
        console.print(Text("[]"))
        return

    columns: list[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)

    table = Table(box=box.SIMPLE_HEAD, header_style="bold italic cyan", border_style="cyan")
    for col in columns:
        table.add_column(str(col), overflow="fold")
    for row in rows:
        table.add_row(*[Text(_cell(row.get(col))) for col in columns])
    console.print(table)


def draw_json(data) -> None:
    console.print(Text(json.dumps(data, indent=2, default=str)), soft_wrap=True)


def success(message: str = "") -> None:
    console.print(Text.assemble(("✓ Success:", "bold green"), " ", (message or "", "green")), soft_wrap=True)


def log(message: str = "") -> None:
    console.print(Text.assemble(("ℹ Info:", "bold cyan"), " ", (message or "", "cyan")), soft_wrap=True)


def error(message: str = "") -> None:
    err_console.print(Text.assemble(("✗ Error:", "bold red"), " ", (message or "", "red")), soft_wrap=True)
