#!/usr/bin/python3
import argparse
import json
import logging
import os
import sys
import tempfile
import time
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

import awclient
import awservices
from awservices import output
from awservices.base import ARRAY, BOOLEAN, FLOAT, INTEGER, INTEGER_ARRAY, OBJECT, OBJECT_ARRAY

log = logging.getLogger("awcli")

_CREDENTIAL_ENV = ("APPWRITE_API_KEY", "APPWRITE_JWT", "APPWRITE_COOKIE")
_OPTIONAL_ENV = ("APPWRITE_ENDPOINT", "APPWRITE_SELF_SIGNED", "APPWRITE_LOCALE")


def _cli_version() -> str:
    # Prefer the installed distribution version, fall back to the client's `_VERSION`
    # when running directly from a checkout.
    try:
        return pkg_version("awcli")
    except PackageNotFoundError:
        return str(getattr(awclient, "_VERSION", "unknown"))


def _parse_bool(value: str) -> bool:
    raw = (value or "").strip().lower()
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise argparse.ArgumentTypeError("Not a boolean.")


def _parse_integer(value: str) -> int:
    try:
        return int(value, 10)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError("Not a number.") from None


def _parse_float(value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError("Not a number.") from None


def _read_json_arg(value: str) -> str:
    """
    Return the JSON text of an argument given inline or as `@path` (or `@-` for stdin).

    Decoding is left to `Param.coerce`, so the text is parsed exactly once.
    """
    raw = (value or "").strip()
    if not raw:
        raise ValueError("empty JSON value")

    if raw.startswith("@"):
        src = raw[1:].strip()
        if not src:
            raise ValueError("empty @file source")
        if src == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(src).expanduser().read_text(encoding="utf-8")
    return raw


def _help_text(text: str) -> str:
    # argparse %-formats help strings.
    return (text or "").replace("%", "%%")


def _atomic_write_text(path: Path, data: str, *, encoding: str = "utf-8") -> None:
    """
    Write to a temp file in the destination directory, then replace the final path, so
    an interrupted write never leaves a partial file behind.
    """
    tmp_fh = tempfile.NamedTemporaryFile(
        mode="w",
        encoding=encoding,
        newline="\n",
        delete=False,
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    tmp_path = Path(tmp_fh.name)
    try:
        with tmp_fh:
            tmp_fh.write(data)
            tmp_fh.flush()
            try:
                os.fsync(tmp_fh.fileno())
            except OSError:
                # fsync is unsupported on some filesystems.
                pass
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def _write_json(path: Path | None, payload, *, pretty: bool) -> None:
    if pretty:
        data = json.dumps(payload, indent=2, default=str)
    else:
        data = json.dumps(payload, default=str, separators=(",", ":"))
    if path is None:
        sys.stdout.write(data + "\n")
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        _atomic_write_text(path, data + "\n", encoding="utf-8")


def _write_lines(path: Path | None, lines: list[str]) -> None:
    if path is None:
        for line in lines:
            sys.stdout.write(str(line) + "\n")
        return
    _atomic_write_text(path, "".join(f"{line}\n" for line in lines), encoding="utf-8")


def _out_path(args) -> Path | None:
    out = getattr(args, "out", "")
    return None if (not out or out == "-") else Path(out)


def _log_level(args) -> str | None:
    if getattr(args, "log_level", ""):
        return args.log_level
    if getattr(args, "verbose", 0) >= 2:
        return "DEBUG"
    if getattr(args, "verbose", 0) == 1:
        return "INFO"
    return None


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="Print the raw JSON response instead of formatted output",
    )
    p.add_argument("--out", default="", help="Write the JSON response to a file (default: stdout)")
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable; maps to INFO/DEBUG)",
    )
    p.add_argument(
        "--log-level",
        default="",
        help="Set log level (DEBUG/INFO/WARNING/ERROR/CRITICAL). Overrides -v/--verbose.",
    )


def _add_param_argument(p: argparse.ArgumentParser, param) -> None:
    kwargs = {"dest": param.name, "default": None, "help": _help_text(param.help)}
    if param.required:
        kwargs["required"] = True

    if param.kind == BOOLEAN:
        kwargs["type"] = _parse_bool
        kwargs["metavar"] = "true|false"
        if not param.required:
            # A bare optional boolean flag means `true`.
            kwargs["nargs"] = "?"
            kwargs["const"] = True
    elif param.kind == INTEGER:
        kwargs["type"] = _parse_integer
    elif param.kind == FLOAT:
        kwargs["type"] = _parse_float
    elif param.kind == INTEGER_ARRAY:
        kwargs["type"] = _parse_integer
        kwargs["nargs"] = "*"
    elif param.kind in (ARRAY, OBJECT_ARRAY):
        # A bare list flag sends an empty list.
        kwargs["nargs"] = "*"
    elif param.kind == OBJECT:
        kwargs["metavar"] = "JSON|@FILE"

    p.add_argument(param.flag, **kwargs)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="awcli",
        description="Command-line client for the Appwrite messaging, migrations and tables APIs.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_cli_version()}")
    p.add_argument(
        "--endpoint",
        dest="client_endpoint",
        default=None,
        help=f"API endpoint (default: env APPWRITE_ENDPOINT or {awclient.DEFAULT_ENDPOINT})",
    )
    p.add_argument(
        "--project",
        dest="client_project",
        default=None,
        help="Project ID (default: env APPWRITE_PROJECT_ID)",
    )
    p.add_argument("--key", dest="client_key", default=None, help="API key (default: env APPWRITE_API_KEY)")
    p.add_argument("--jwt", dest="client_jwt", default=None, help="JWT (default: env APPWRITE_JWT)")
    p.add_argument(
        "--self-signed",
        dest="client_self_signed",
        action="store_true",
        default=None,
        help="Accept self-signed TLS certificates (default: env APPWRITE_SELF_SIGNED)",
    )
    p.add_argument(
        "--locale",
        dest="client_locale",
        default=None,
        help=f"X-Appwrite-Locale header (default: env APPWRITE_LOCALE or {awclient.DEFAULT_LOCALE})",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    doctor = sub.add_parser("doctor", help="Environment/auth sanity checks (non-destructive)")
    doctor.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )
    doctor.add_argument("--out", default="", help="Output path (default: stdout)")
    doctor.add_argument(
        "--probe",
        action="store_true",
        help="Attempt a tiny read-only request (list databases). Requires credentials.",
    )
    doctor.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable; maps to INFO/DEBUG)",
    )
    doctor.add_argument(
        "--log-level",
        default="",
        help="Set log level (DEBUG/INFO/WARNING/ERROR/CRITICAL). Overrides -v/--verbose.",
    )

    for svc in awservices.SERVICES:
        svc_parser = sub.add_parser(svc.name, help=_help_text(svc.description), description=_help_text(svc.description))
        svc_sub = svc_parser.add_subparsers(dest="command", required=True, metavar="<command>")
        for op in svc:
            cmd = svc_sub.add_parser(
                op.command,
                help=_help_text(op.description),
                description=_help_text(op.description),
            )
            for param in op.params:
                _add_param_argument(cmd, param)
            _add_output_args(cmd)
            cmd.set_defaults(operation=op)

    return p


def _operation_kwargs(op, args) -> dict:
    kwargs = {}
    for param in op.params:
        value = getattr(args, param.name, None)
        if value is None:
            continue
        if param.kind == OBJECT:
            value = _read_json_arg(value)
        elif param.kind == OBJECT_ARRAY:
            value = [_read_json_arg(raw) for raw in value]
        kwargs[param.name] = value
    return kwargs


def _client_from_args(args) -> awclient.Client:
    return awclient.client_for_project(
        endpoint=args.client_endpoint,
        project=args.client_project,
        key=args.client_key,
        jwt_token=args.client_jwt,
        self_signed=args.client_self_signed,
        locale=args.client_locale,
    )


def _run_doctor(args) -> int:
    dotenv_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path, override=False)

    env_state = {}
    for k in ("APPWRITE_PROJECT_ID",) + _CREDENTIAL_ENV + _OPTIONAL_ENV:
        v = os.getenv(k)
        if k in _CREDENTIAL_ENV:
            # Never echo credentials in diagnostics.
            env_state[k] = {"set": bool(v)}
        else:
            env_state[k] = {"set": bool(v), "value": (v if v else "")}

    has_project = bool(args.client_project or env_state["APPWRITE_PROJECT_ID"]["set"])
    has_credentials = bool(args.client_key or args.client_jwt) or any(
        env_state[k]["set"] for k in _CREDENTIAL_ENV
    )
    missing: list[str] = []
    if not has_project:
        missing.append("APPWRITE_PROJECT_ID")
    if not has_credentials:
        missing.append("APPWRITE_API_KEY|APPWRITE_JWT|APPWRITE_COOKIE")

    payload = {
        "ok": not missing,
        "cwd": str(Path.cwd()),
        "dotenv": dotenv_path,
        "endpoint": args.client_endpoint or os.getenv("APPWRITE_ENDPOINT") or awclient.DEFAULT_ENDPOINT,
        "checks": {"env": {"missing_required": missing, "values": env_state}},
    }

    if args.probe and not missing:
        started = time.monotonic()
        try:
            client = _client_from_args(args)
            resp = awservices.tables_db.list_databases(client, noprint=True, total=False)
            databases = resp.get("databases") if isinstance(resp, dict) else None
            payload["checks"]["probe"] = {
                "ok": True,
                "databases": len(databases) if isinstance(databases, list) else 0,
                "elapsedMs": int((time.monotonic() - started) * 1000),
            }
        except (awclient.AppwriteException, awclient.ConfigError) as e:
            payload["ok"] = False
            payload["checks"]["probe"] = {
                "ok": False,
                "error": awclient.redact_sensitive_text(str(e)),
                "code": getattr(e, "code", None),
                "elapsedMs": int((time.monotonic() - started) * 1000),
            }

    out_path = _out_path(args)
    if args.format == "json":
        _write_json(out_path, payload, pretty=True)
    else:
        lines = ["ok: true" if payload["ok"] else "ok: false", f"endpoint: {payload['endpoint']}"]
        if payload["dotenv"]:
            lines.append(f"dotenv: {payload['dotenv']}")
        if missing:
            lines.append("missing required env vars: " + ", ".join(missing))
        if args.probe:
            probe = payload["checks"].get("probe") or {}
            if probe.get("ok"):
                lines.append(f"probe: ok (databases={probe.get('databases')})")
            elif probe:
                lines.append(f"probe: failed ({probe.get('error', '')})")
            else:
                lines.append("probe: skipped")
        _write_lines(out_path, lines)

    return 0 if payload["ok"] else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = _log_level(args)
    if level:
        try:
            awclient.configure_logging(level)
        except ValueError as e:
            sys.stderr.write(f"invalid --log-level: {e}\n")
            return 2

    if args.cmd == "doctor":
        return _run_doctor(args)

    op = args.operation
    try:
        kwargs = _operation_kwargs(op, args)
    except (ValueError, OSError) as e:
        sys.stderr.write(f"invalid arguments for {op.name}: {e}\n")
        return 2

    try:
        client = _client_from_args(args)
    except awclient.ConfigError as e:
        output.error(str(e))
        return 2

    try:
        response = op(client, noprint=True, **kwargs)
    except awclient.AppwriteException as e:
        if level:
            log.error("%s failed", op.name, exc_info=True)
        else:
            output.log("For detailed error pass the --verbose flag")
        output.error(str(e))
        return 1
    except ValueError as e:
        # Malformed JSON for object flags surfaces while the request is built.
        sys.stderr.write(f"invalid arguments for {op.name}: {e}\n")
        return 2

    out_path = _out_path(args)
    if args.output_json or out_path is not None:
        _write_json(out_path, response, pretty=True)
    else:
        output.parse(response)
        output.success()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
