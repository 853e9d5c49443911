"""Base class for API objects and the shared reference types."""

from __future__ import annotations

import dataclasses
import functools
import inspect
import types
import typing
from collections.abc import Callable, Mapping
from typing import Any, TypeVar, Union

M = TypeVar("M", bound="Model")

_BUILTIN_NAMES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "dict": dict,
    "Dict": dict,
    "object": object,
    "Any": Any,
}


def wire(
    name: str | None = None,
    *,
    keep: bool = False,
    default: Any = None,
    factory: Callable[[], Any] | None = None,
) -> Any:
    """Declare a field with a different wire name or that is always sent.

    By default a field is sent under its own name and left out when empty.
    ``keep=True`` sends the field even when it is empty or None.
    """
    metadata: dict[str, Any] = {"keep": keep}
    if name is not None:
        metadata["json"] = name
    if factory is not None:
        return dataclasses.field(default_factory=factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def _split_top(text: str, sep: str) -> list[str]:
    """Split on a separator that is not nested inside brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    for pos, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == sep and depth == 0:
            parts.append(text[start:pos])
            start = pos + 1
    parts.append(text[start:])
    return [part.strip() for part in parts]


def _resolve_name(name: str, namespace: Mapping[str, Any]) -> Any:
    name = name.strip().strip("'\"").rpartition(".")[2]
    if name in namespace:
        return namespace[name]
    return _BUILTIN_NAMES.get(name, Any)


def _resolve(text: str, namespace: Mapping[str, Any]) -> Any:
    """Turn an annotation string into the hint that decoding needs."""
    text = text.strip().strip("'\"")
    options = [part for part in _split_top(text, "|") if part != "None"]
    if len(options) != 1:
        return Any
    part = options[0]
    if part.endswith("]") and "[" in part:
        head, _, inner = part[:-1].partition("[")
        head = head.strip().rpartition(".")[2]
        if head == "Optional":
            return _resolve(inner, namespace)
        if head == "Union":
            return _resolve(" | ".join(_split_top(inner, ",")), namespace)
        if head in ("list", "List", "Sequence"):
            return list[_resolve(inner, namespace)]
        return _resolve_name(head, namespace)
    return _resolve_name(part, namespace)


def _owner_namespace(cls: type, field_name: str) -> Mapping[str, Any]:
    for klass in cls.__mro__:
        if field_name in klass.__dict__.get("__annotations__", {}):
            module = inspect.getmodule(klass)
            return vars(module) if module is not None else {}
    return {}


@functools.lru_cache(maxsize=None)
def _hints(cls: type) -> dict[str, Any]:
    hints: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if isinstance(f.type, str):
            hints[f.name] = _resolve(f.type, _owner_namespace(cls, f.name))
        else:
            hints[f.name] = f.type
    return hints


def _strip_optional(hint: Any) -> Any:
    origin = typing.get_origin(hint)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _decode(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    hint = _strip_optional(hint)
    if typing.get_origin(hint) is list:
        args = typing.get_args(hint)
        item_hint = args[0] if args else Any
        return [_decode(item_hint, item) for item in value]
    if isinstance(hint, type) and issubclass(hint, Model):
        return hint.from_dict(value)
    if hint is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _encode(item) for key, item in value.items()}
    return value


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Model):
        return False
    if isinstance(value, (bool, int, float, str, list, tuple, dict)):
        return not value
    return False


@dataclasses.dataclass
class Model:
    """An API object that converts to and from its JSON form."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields that are not kept."""
        result: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not f.metadata.get("keep", False) and _is_empty(value):
                continue
            result[f.metadata.get("json", f.name)] = _encode(value)
        return result

    @classmethod
    def from_dict(cls: type[M], data: Mapping[str, Any] | None) -> M | None:
        """Build an instance from decoded JSON; unknown keys and nulls are ignored."""
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects an object, got {type(data).__name__}")
        hints = _hints(cls)
        values: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if not f.init:
                continue
            raw = data.get(f.metadata.get("json", f.name))
            if raw is not None:
                values[f.name] = _decode(hints[f.name], raw)
        return cls(**values)


@dataclasses.dataclass
class Reference(Model):
    """A reference to another API object."""

    id: str = ""
    type: str = ""
    summary: str = ""
    self_url: str = wire("self", default="")
    html_url: str = ""


@dataclasses.dataclass
class UserReference(Reference):
    """A reference to a user."""


@dataclasses.dataclass
class UserReferenceWrapper(Model):
    """A user reference wrapped in an object, as schedule layers hold them."""

    user: UserReference | None = None


@dataclasses.dataclass
class TeamReference(Reference):
    """A reference to a team."""


@dataclasses.dataclass
class EscalationPolicyReference(Reference):
    """A reference to an escalation policy."""


@dataclasses.dataclass
class ServiceReference(Reference):
    """A reference to a service."""


@dataclasses.dataclass
class VendorReference(Reference):
    """A reference to a vendor."""


@dataclasses.dataclass
class AddonReference(Reference):
    """A reference to an add-on."""


@dataclasses.dataclass
class IntegrationReference(Reference):
    """A reference to an integration."""


@dataclasses.dataclass
class ResponsePlayReference(Reference):
    """A reference to a response play."""


@dataclasses.dataclass
class ContactMethodReference(Reference):
    """A reference to a contact method."""


@dataclasses.dataclass
class LicenseReference(Reference):
    """A reference to a license."""