"""
Generic request/response primitives.

Responses are frozen dataclasses deriving from ``BaseModel``; ``from_dict``
walks their type hints to decode nested objects, lists, maps, unions and
enums, raising ``DeserializationError`` on any shape mismatch. Requests derive
from ``Request``, validate themselves once at construction and are never
mutated afterwards (``replace`` returns a new, re-validated value).
"""

from __future__ import annotations

import dataclasses
import json
import mimetypes
import os
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Tuple, Type, TypeVar, Union

from .errors import DeserializationError, FileReadError, InvalidArgumentError

T = TypeVar("T")

_HINTS_CACHE: Dict[type, Dict[str, Any]] = {}


def _type_hints(cls: type) -> Dict[str, Any]:
    hints = _HINTS_CACHE.get(cls)
    if hints is None:
        hints = typing.get_type_hints(cls)
        _HINTS_CACHE[cls] = hints
    return hints


def _describe(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp).replace("typing.", "")


def _decode(tp: Any, value: Any, path: str) -> Any:
    if tp is Any:
        return value

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is Union:
        if value is None:
            if type(None) in args:
                return None
            raise DeserializationError(f"{path}: expected a value, got null", payload=value)
        for arg in args:
            if arg is type(None):
                continue
            try:
                return _decode(arg, value, path)
            except DeserializationError:
                continue
        raise DeserializationError(
            f"{path}: {value!r} does not match {_describe(tp)}", payload=value
        )

    if origin is Literal:
        if value in args:
            return value
        raise DeserializationError(f"{path}: expected one of {list(args)}, got {value!r}", payload=value)

    if origin in (list, List):
        if not isinstance(value, list):
            raise DeserializationError(f"{path}: expected a list, got {type(value).__name__}", payload=value)
        item_type = args[0] if args else Any
        return [_decode(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]

    if origin in (dict, Dict):
        if not isinstance(value, dict):
            raise DeserializationError(f"{path}: expected an object, got {type(value).__name__}", payload=value)
        value_type = args[1] if len(args) == 2 else Any
        return {k: _decode(value_type, v, f"{path}.{k}") for k, v in value.items()}

    if value is None:
        raise DeserializationError(f"{path}: expected {_describe(tp)}, got null", payload=value)

    if isinstance(tp, type):
        if issubclass(tp, BaseModel):
            return tp.from_dict(value, _path=path)
        if issubclass(tp, Enum):
            try:
                return tp(value)
            except ValueError:
                raise DeserializationError(f"{path}: {value!r} is not a valid {tp.__name__}", payload=value)
        if tp is bool:
            if isinstance(value, bool):
                return value
        elif tp is int:
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        elif tp is float:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return float(value)
        elif isinstance(value, tp):
            return value

    raise DeserializationError(
        f"{path}: expected {_describe(tp)}, got {type(value).__name__}", payload=value
    )


def _serialize(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


@dataclass(frozen=True)
class BaseModel:
    """Immutable model with dict-like access and serialization."""

    @classmethod
    def from_dict(cls: Type[T], data: Any, _path: str = None) -> T:
        """Decode a JSON object into this model. Unknown keys are ignored."""
        path = _path or cls.__name__
        if not isinstance(data, dict):
            raise DeserializationError(
                f"{path}: expected an object, got {type(data).__name__}", payload=data
            )
        hints = _type_hints(cls)
        kwargs = {}
        for f in dataclasses.fields(cls):
            if not f.init:
                continue
            if f.name not in data:
                if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                    raise DeserializationError(
                        f"{path}: missing required field '{f.name}'", payload=data
                    )
                continue
            kwargs[f.name] = _decode(hints[f.name], data[f.name], f"{path}.{f.name}")
        return cls(**kwargs)

    def __getitem__(self, key):
        return getattr(self, key)

    def get(self, key, default=None):
        return getattr(self, key, default)

    def to_dict(self) -> dict:
        result = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is None or isinstance(value, FileUpload):
                continue
            result[f.name] = _serialize(value)
        return result

    def model_dump(self, exclude_none: bool = True) -> dict:
        if exclude_none:
            return self.to_dict()
        return {f.name: _serialize(getattr(self, f.name)) for f in dataclasses.fields(self)}

    def model_dump_json(self, indent: int = None) -> str:
        return json.dumps(self.model_dump(), indent=indent, default=str)


@dataclass(frozen=True)
class FileUpload:
    """In-memory file content plus the filename sent in multipart bodies."""

    buffer: bytes
    filename: str
    content_type: str = "application/octet-stream"

    def __post_init__(self):
        if not self.filename:
            raise InvalidArgumentError("`filename` is required for file uploads")
        if not isinstance(self.buffer, (bytes, bytearray)):
            raise InvalidArgumentError("`buffer` must be bytes")

    @classmethod
    def from_path(cls, path: str, content_type: str = None) -> "FileUpload":
        try:
            with open(path, "rb") as f:
                buffer = f.read()
        except OSError as e:
            raise FileReadError(f"failed to read file {path}: {e}") from e
        filename = os.path.basename(path)
        guessed = content_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        return cls(buffer=buffer, filename=filename, content_type=guessed)

    def as_tuple(self) -> Tuple[str, bytes, str]:
        return (self.filename, bytes(self.buffer), self.content_type)


def form_field(name: str, default: Any = None) -> Any:
    """Dataclass field that is sent under a different multipart field name."""
    return field(default=default, metadata={"form_name": name})


def _form_value(value: Any) -> Union[str, List[str]]:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_form_value(item) for item in value]
    if isinstance(value, dict):
        return json.dumps(_serialize(value))
    return str(value)


@dataclass(frozen=True)
class Request(BaseModel):
    """Base for request values. Subclasses override ``validate``."""

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        pass

    def replace(self, **changes) -> "Request":
        """Return a copy with ``changes`` applied, validated again."""
        return dataclasses.replace(self, **changes)

    def to_query(self) -> Dict[str, Any]:
        query = {}
        for key, value in self.to_dict().items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            query[key] = value
        return query

    def to_form(self) -> Tuple[Dict[str, Any], Dict[str, Tuple[str, bytes, str]]]:
        """Split the request into multipart text fields and file parts."""
        data: Dict[str, Any] = {}
        files: Dict[str, Tuple[str, bytes, str]] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            name = f.metadata.get("form_name", f.name)
            if isinstance(value, FileUpload):
                files[name] = value.as_tuple()
            else:
                data[name] = _form_value(value)
        return data, files


def require(value: Any, name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"`{name}` is required")


def check_range(value: Optional[float], name: str, low: float, high: float) -> None:
    if value is not None and not (low <= value <= high):
        raise InvalidArgumentError(f"`{name}` must be between {low} and {high}, got {value}")


def parse_json(cast: Any, text: Union[str, bytes]) -> Any:
    """Parse a JSON document and decode it into ``cast``."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise DeserializationError(f"failed to deserialize api response: {e}", payload=text) from e
    if cast is None or cast is dict or cast is Any:
        return data
    try:
        return _decode(cast, data, _describe(cast))
    except RecursionError as e:
        raise DeserializationError(f"failed to deserialize api response: {e}", payload=text) from e


def enum_value(enum_cls: Type[Enum], value: Any, name: str) -> Enum:
    """Coerce ``value`` to ``enum_cls``, raising InvalidArgumentError if it is not a member."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise InvalidArgumentError(f"`{name}` must be one of: {allowed}; got {value!r}")
