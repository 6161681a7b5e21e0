#!/usr/bin/python3
"""
HTTP client for the Appwrite REST API.

`Client.call(method, path, headers, params)` is the single transport used by every
operation in `awservices`. It sends JSON, decodes JSON, and raises `AppwriteException`
for non-2xx responses and transport failures. There is no retry layer:
errors surface to the caller as-is.
"""
import json
import logging
import os
import platform
import re
import sys
import time

import jwt
import requests
from dotenv import find_dotenv, load_dotenv

_VERSION = "0.1.0"

DEFAULT_ENDPOINT = "https://cloud.appwrite.io/v1"
DEFAULT_LOCALE = "en-US"
RESPONSE_FORMAT = "1.8.1"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_TRUTHY = {"1", "true", "yes", "on"}

_REDACTION_PATTERNS = (
    (re.compile(r"(?i)\bbearer\s+[A-Za-z0-9._~+/=-]+"), "Bearer [REDACTED]"),
    (re.compile(r"\beyJ[A-Za-z0-9_-]*\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*"), "[REDACTED]"),
    (re.compile(r"\bstandard_[0-9a-f]{16,}\b"), "[REDACTED]"),
    (
        re.compile(
            r"(?i)(\"?(?:x-appwrite-key|x-appwrite-jwt|api[_-]?key|apikey|secret|client_secret|"
            r"password|token|access_token|refresh_token|auth[_-]?token|cookie|jwt)\"?\s*[:=]\s*\"?)"
            r"([^\"\s,&;}]+)"
        ),
        r"\1[REDACTED]",
    ),
    (re.compile(r"(?i)([?&](?:sig|token|secret|key|jwt)=)[^&\s]+"), r"\1[REDACTED]"),
)

log = logging.getLogger(__name__)


class AppwriteException(Exception):
    """Raised for failed API calls; `code` is the HTTP status (None for transport errors)."""

    def __init__(self, message: str, code: int | None = None, type: str | None = None, response=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.type = type
        self.response = response

    def __str__(self):
        return self.message


class ConfigError(RuntimeError):
    """Missing or invalid client configuration (endpoint, project, credentials)."""


def configure_logging(level, force: bool = False) -> None:
    """Configure root logging on stderr. `level` is a name (`"DEBUG"`) or a number."""
    if isinstance(level, str):
        name = level.strip().upper()
        numeric = logging.getLevelName(name)
        if not isinstance(numeric, int):
            raise ValueError(f"invalid log level: {level!r}")
    else:
        numeric = int(level)
    logging.basicConfig(level=numeric, format=_LOG_FORMAT, stream=sys.stderr, force=force)
    logging.getLogger().setLevel(numeric)


def redact_sensitive_text(text) -> str:
    """Mask API keys, JWTs, bearer tokens, cookies and secret-like fields."""
    cooked = str(text or "")
    for pattern, repl in _REDACTION_PATTERNS:
        cooked = pattern.sub(repl, cooked)
    return cooked


def _jwt_expired(token: str, now: float | None = None) -> bool | None:
    """
    True/False for an expired/valid JWT, None when `token` is not a JWT at all.

    The signature is not verified; this is only a local sanity check before the server
    rejects the token.
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return None
    exp = claims.get("exp")
    if exp is None:
        return False
    try:
        return float(exp) <= (time.time() if now is None else now)
    except (TypeError, ValueError):
        return None


def _query_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return value


def _query_params(params: dict) -> list[tuple[str, object]]:
    """Flatten GET params; lists become repeated `key[]` entries."""
    out: list[tuple[str, object]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            out.extend((f"{key}[]", _query_value(v)) for v in value)
        else:
            out.append((key, _query_value(value)))
    return out


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in _TRUTHY


class Client:
    def __init__(self, endpoint: str = DEFAULT_ENDPOINT, *, session=None, timeout=(10.0, 60.0)):
        self.endpoint = endpoint
        self.self_signed = False
        self.timeout = timeout
        self._session = session
        self.headers = {
            "x-sdk-name": "Command Line",
            "x-sdk-platform": "console",
            "x-sdk-language": "cli",
            "x-sdk-version": _VERSION,
            "user-agent": f"awcli/{_VERSION} ({platform.system()} {platform.release()}; {platform.machine()})",
            "x-appwrite-response-format": RESPONSE_FORMAT,
        }

    def add_header(self, key: str, value: str) -> "Client":
        self.headers[key.lower()] = value
        return self

    def set_endpoint(self, endpoint: str) -> "Client":
        self.endpoint = endpoint
        return self

    def set_project(self, project: str) -> "Client":
        return self.add_header("X-Appwrite-Project", project)

    def set_key(self, key: str) -> "Client":
        return self.add_header("X-Appwrite-Key", key)

    def set_jwt(self, token: str) -> "Client":
        expired = _jwt_expired(token)
        if expired is None:
            log.warning("JWT does not look like a JSON Web Token; the server will likely reject it")
        elif expired:
            log.warning("JWT is expired; create a new one before retrying")
        return self.add_header("X-Appwrite-JWT", token)

    def set_locale(self, locale: str) -> "Client":
        return self.add_header("X-Appwrite-Locale", locale)

    def set_mode(self, mode: str) -> "Client":
        return self.add_header("X-Appwrite-Mode", mode)

    def set_cookie(self, cookie: str) -> "Client":
        return self.add_header("cookie", cookie)

    def set_self_signed(self, status: bool = True) -> "Client":
        self.self_signed = bool(status)
        return self

    def call(self, method: str, path: str = "", headers: dict | None = None, params: dict | None = None):
        method = (method or "GET").upper()
        merged = dict(self.headers)
        for k, v in (headers or {}).items():
            merged[k.lower()] = v
        params = params or {}
        url = self.endpoint + path

        kwargs = {
            "method": method,
            "url": url,
            "headers": merged,
            "timeout": self.timeout,
            "verify": not self.self_signed,
        }
        if method == "GET":
            kwargs["params"] = _query_params(params)
        else:
            merged.setdefault("content-type", "application/json")
            kwargs["data"] = json.dumps(params, default=str)

        request_fn = getattr(self._session, "request", None) if self._session is not None else None
        if not callable(request_fn):
            request_fn = requests.request

        log.debug("%s %s", method, redact_sensitive_text(url))
        try:
            resp = request_fn(**kwargs)
        except requests.RequestException as e:
            msg = redact_sensitive_text(str(e))
            log.warning("%s %s failed: %s", method, path, msg)
            raise AppwriteException(msg) from e

        text = resp.text or ""
        content_type = str((resp.headers or {}).get("content-type", "")).lower()
        data = text
        if text and "application/json" in content_type:
            try:
                data = json.loads(text)
            except ValueError:
                data = text

        status = int(resp.status_code)
        if status >= 400:
            err_type = None
            if isinstance(data, dict):
                message = str(data.get("message") or getattr(resp, "reason", "") or f"HTTP {status}")
                err_type = data.get("type")
            else:
                message = text or str(getattr(resp, "reason", "") or f"HTTP {status}")
            message = redact_sensitive_text(message)
            log.warning("%s %s -> %s: %s", method, path, status, message)
            raise AppwriteException(message, status, err_type, text)

        return data if text else {}


def client_for_project(
    *,
    endpoint: str | None = None,
    project: str | None = None,
    key: str | None = None,
    jwt_token: str | None = None,
    cookie: str | None = None,
    self_signed: bool | None = None,
    locale: str | None = None,
    load_env: bool = True,
    session=None,
) -> Client:
    """
    Build a project-scoped client from explicit arguments, falling back to the
    environment (and a `.env` file found from the CWD upwards).

    Credentials are tried in order: cookie (admin mode), API key, JWT.
    """
    if load_env:
        # Exported variables win over .env values.
        load_dotenv(find_dotenv(usecwd=True), override=False)

    endpoint = endpoint or os.getenv("APPWRITE_ENDPOINT") or DEFAULT_ENDPOINT
    project = project or os.getenv("APPWRITE_PROJECT_ID")
    key = key or os.getenv("APPWRITE_API_KEY")
    jwt_token = jwt_token or os.getenv("APPWRITE_JWT")
    cookie = cookie or os.getenv("APPWRITE_COOKIE")
    if self_signed is None:
        self_signed = _env_flag("APPWRITE_SELF_SIGNED")
    locale = locale or os.getenv("APPWRITE_LOCALE") or DEFAULT_LOCALE

    if not project:
        raise ConfigError("Project is not set. Set APPWRITE_PROJECT_ID or pass --project.")

    client = (
        Client(endpoint, session=session)
        .set_project(project)
        .set_self_signed(self_signed)
        .set_locale(locale)
    )
    if cookie:
        return client.set_cookie(cookie).set_mode("admin")
    if key:
        return client.set_key(key).set_mode("default")
    if jwt_token:
        return client.set_jwt(jwt_token)
    raise ConfigError(
        "Session not found. Set APPWRITE_API_KEY (or APPWRITE_JWT / APPWRITE_COOKIE) or pass --key."
    )
