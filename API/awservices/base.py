import json
import keyword
import re

from . import output

STRING = "string"
INTEGER = "integer"
FLOAT = "float"
BOOLEAN = "boolean"
ARRAY = "array"
OBJECT = "object"
OBJECT_ARRAY = "object[]"
INTEGER_ARRAY = "integer[]"

_KINDS = (STRING, INTEGER, FLOAT, BOOLEAN, ARRAY, OBJECT, OBJECT_ARRAY, INTEGER_ARRAY)
_LIST_KINDS = (ARRAY, OBJECT_ARRAY, INTEGER_ARRAY)
_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")
# Split camelCase keys, folding acronyms: serviceAccountJSON -> service_Account_JSON.
_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_JSON_HEADERS = {"content-type": "application/json"}


def python_name(key: str) -> str:
    name = _WORD_BOUNDARY_RE.sub("_", key).lower()
    if keyword.iskeyword(name):
        name += "_"
    return name


def _decode_objects(items: list) -> list:
    """Decode JSON-string items once; an item holding a JSON list is spliced in."""
    out = []
    for item in items:
        if isinstance(item, (str, bytes)):
            item = json.loads(item)
            if isinstance(item, list):
                out.extend(item)
                continue
        out.append(item)
    return out


class Param:
    """One request parameter: a path placeholder or a payload key."""

    __slots__ = ("key", "kind", "required", "help", "name", "flag")

    def __init__(self, key: str, kind: str = STRING, required: bool = False, help: str = ""):
        if kind not in _KINDS:
            raise ValueError(f"unknown param kind: {kind!r}")
        self.key = key
        self.kind = kind
        self.required = bool(required)
        self.help = help
        self.name = python_name(key)
        self.flag = "--" + self.name.rstrip("_").replace("_", "-")

    def coerce(self, value):
        if self.kind in _LIST_KINDS:
            # A bare `True` stands for "send an empty list".
            if value is True:
                return []
            if isinstance(value, (tuple, set, frozenset)):
                value = list(value)
            if self.kind == OBJECT_ARRAY and isinstance(value, list):
                return _decode_objects(value)
            if self.kind == INTEGER_ARRAY and isinstance(value, list):
                return [int(v) if isinstance(v, str) else v for v in value]
            return value
        if self.kind == OBJECT and isinstance(value, (str, bytes)):
            return json.loads(value)
        return value

    def __repr__(self):
        return f"Param({self.key!r}, {self.kind!r}, required={self.required})"


class Operation:
    """
    A single REST endpoint: verb + path template + parameters.

    Calling the operation builds the request, sends it through an `awclient.Client`
    (one is created from the environment when none is passed) and pretty-prints the
    decoded response unless `noprint=True`. The response is always returned.
    """

    def __init__(self, service: str, command: str, method: str, path: str, description: str, params):
        self.service = service
        self.command = command
        self.method = method.upper()
        self.path = path
        self.description = description
        self.params = tuple(params)

        placeholders = set(_PLACEHOLDER_RE.findall(path))
        self.path_params = tuple(p for p in self.params if p.key in placeholders)
        self.payload_params = tuple(p for p in self.params if p.key not in placeholders)
        self._by_name = {p.name: p for p in self.params}
        if len(self._by_name) != len(self.params):
            raise ValueError(f"duplicate parameter names in {service} {command}")
        missing = placeholders - {p.key for p in self.path_params}
        if missing:
            raise ValueError(f"{service} {command}: no param for placeholder(s) {sorted(missing)}")

    @property
    def name(self) -> str:
        return f"{self.service} {self.command}"

    def build_request(self, **kwargs) -> tuple[str, str, dict, dict]:
        unknown = sorted(set(kwargs) - set(self._by_name))
        if unknown:
            raise TypeError(f"{self.name}: unexpected parameter(s): {', '.join(unknown)}")

        for p in self.params:
            if p.required and kwargs.get(p.name) is None:
                raise TypeError(f"{self.name}: missing required parameter {p.name!r} ({p.flag})")

        path = self.path
        for p in self.path_params:
            path = path.replace("{" + p.key + "}", str(kwargs[p.name]))

        payload = {}
        for p in self.payload_params:
            value = kwargs.get(p.name)
            if value is None:
                continue
            payload[p.key] = p.coerce(value)

        headers = {} if self.method == "GET" else dict(_JSON_HEADERS)
        return self.method, path, headers, payload

    def __call__(self, client=None, *, noprint: bool = False, **kwargs):
        method, path, headers, payload = self.build_request(**kwargs)
        if client is None:
            import awclient

            client = awclient.client_for_project()

        response = client.call(method, path, headers, payload)

        if not noprint:
            output.parse(response)
        return response

    def __repr__(self):
        return f"<Operation {self.name}: {self.method} {self.path}>"


class Service:
    """Ordered registry of the operations that make up one CLI command group."""

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self.operations: dict[str, Operation] = {}

    def operation(self, command: str, method: str, path: str, description: str, *params) -> Operation:
        if command in self.operations:
            raise ValueError(f"duplicate command {self.name} {command}")
        op = Operation(self.name, command, method, path, description, params)
        self.operations[command] = op
        return op

    def __iter__(self):
        return iter(self.operations.values())

    def __len__(self):
        return len(self.operations)

    def __getitem__(self, command: str) -> Operation:
        return self.operations[command]
