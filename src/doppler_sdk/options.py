"""
Option records and their encoding into query parameters and a JSON body.

Option records are dataclasses whose fields are declared with `param()`. Each field
names its query key and its body key; "-" keeps it off that surface:

    @dataclass(kw_only=True)
    class ExampleOptions:
        project: str = param(query="project")            # ?project=...
        name: Optional[str] = param(body="name")         # {"name": ...}

Nothing stops a field from appearing on both surfaces, so an options type must be
explicit about where each field goes.
"""

import dataclasses
import enum
import json
import types
import typing
from datetime import date, datetime
from functools import lru_cache
from typing import Any, Protocol, Union, runtime_checkable

from doppler_sdk.errors import EncodingError

SKIP = "-"

_QUERY = "query"
_BODY = "body"
_OMITEMPTY = "omitempty"
_INLINE = "inline"


@runtime_checkable
class JSONBody(Protocol):
    """Payloads implementing this replace their JSON body wholesale."""

    def as_json_body(self) -> Any: ...


def param(
    *,
    query: str = SKIP,
    body: str = SKIP,
    omitempty: bool = False,
    inline: bool = False,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare an option field and route it to the query string and/or JSON body.

    omitempty drops zero values ("", 0, False, empty collections) from both surfaces.
    On an Optional field it drops only None: an explicit False or 0 is still sent.
    inline flattens a nested option record's query fields into the parent's.
    None is never written to the query string.
    """
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_QUERY: query, _BODY: body, _OMITEMPTY: omitempty, _INLINE: inline},
    )


@dataclasses.dataclass(kw_only=True)
class ListOptions:
    """Pagination parameters shared by list endpoints."""
    page: int = param(query="page", omitempty=True, default=0)
    per_page: int = param(query="per_page", omitempty=True, default=0)


def is_option_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return format_scalar(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _meta(f: dataclasses.Field, key: str, default: Any = SKIP) -> Any:
    return f.metadata.get(key, default)


@lru_cache(maxsize=None)
def _nullable_fields(record_type: type) -> frozenset[str]:
    hints = typing.get_type_hints(record_type)
    nullable = set()
    for name, hint in hints.items():
        origin = typing.get_origin(hint)
        if origin is Union or origin is types.UnionType:
            if type(None) in typing.get_args(hint):
                nullable.add(name)
    return frozenset(nullable)


def _omitted(record: Any, f: dataclasses.Field, value: Any) -> bool:
    if not _meta(f, _OMITEMPTY, False):
        return False
    if f.name in _nullable_fields(type(record)):
        return value is None
    return is_zero(value)


def query_params(payload: Any) -> dict[str, list[str]]:
    """Collect the query-string surface of a payload. Never raises."""
    params: dict[str, list[str]] = {}
    if payload is None or not is_option_record(payload):
        return params
    _collect_query(payload, params)
    return params


def _collect_query(record: Any, params: dict[str, list[str]]) -> None:
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if _meta(f, _INLINE, False):
            if is_option_record(value):
                _collect_query(value, params)
            continue

        name = _meta(f, _QUERY)
        if name == SKIP or value is None:
            continue
        if _omitted(record, f, value):
            continue

        if isinstance(value, (list, tuple, set, frozenset)):
            params.setdefault(name, []).extend(format_scalar(v) for v in value if v is not None)
        else:
            params.setdefault(name, []).append(format_scalar(value))


def body_value(payload: Any) -> Any:
    """The JSON-ready body of a payload (before serialisation)."""
    if isinstance(payload, JSONBody):
        return _jsonable(payload.as_json_body())
    return _jsonable(payload)


def _record_body(record: Any) -> dict[str, Any]:
    body: dict[str, Any] = {}
    for f in dataclasses.fields(record):
        name = _meta(f, _BODY)
        if name == SKIP:
            continue
        value = getattr(record, f.name)
        if _omitted(record, f, value):
            continue
        body[name] = _jsonable(value)
    return body


def _jsonable(value: Any) -> Any:
    if is_option_record(value):
        if isinstance(value, JSONBody):
            return _jsonable(value.as_json_body())
        return _record_body(value)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def encode_body(payload: Any) -> bytes:
    """Serialise the body surface of a payload. None encodes to an empty body."""
    if payload is None:
        return b""
    try:
        return json.dumps(body_value(payload), separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"encode request body: {e}") from e
