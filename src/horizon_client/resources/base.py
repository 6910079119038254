"""
Declarative JSON mapping for resources.

A resource is a frozen dataclass whose fields carry their JSON mapping in the
field metadata (see `json_field`). `Resource.from_json` walks the fields,
pulls each key out of the payload and converts it with the declared parser.

Rules:
- required keys must be present and non-null;
- optional keys may be absent or null and then take their default;
- unknown keys are ignored;
- any parser failure becomes a DeserializationError naming the field.
"""

from __future__ import annotations

from dataclasses import field, fields
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Tuple, Type, TypeVar

from ..core import Amount, DeserializationError, HorizonError

R = TypeVar("R", bound="Resource")

_MISSING = object()


def json_field(
    key: Optional[str] = None,
    *,
    parse: Callable[[Any], Any],
    optional: bool = False,
    flatten: bool = False,
    default: Any = None,
    default_factory: Optional[Callable[[], Any]] = None,
    hash: Optional[bool] = None,
):
    """Declare a dataclass field read from a JSON object.

    key: JSON key (defaults to the field name).
    parse: converter applied to the raw JSON value.
    optional: absent/null values become `default` instead of failing.
    flatten: `parse` receives the whole object instead of one value; used for
    assets the server inlines as ``asset_type``/``asset_code``/... keys.
    hash: passed to `dataclasses.field`; False keeps mapping values out of
    the generated ``__hash__``.
    """
    metadata = {"json_key": key, "parse": parse, "optional": optional, "flatten": flatten}
    if optional and default_factory is not None:
        return field(default_factory=default_factory, hash=hash, metadata=metadata)
    if optional:
        return field(default=default, hash=hash, metadata=metadata)
    return field(hash=hash, metadata=metadata)


class Resource:
    """Base for immutable snapshots of server state built from JSON."""

    @classmethod
    def from_json(cls: Type[R], obj: Any) -> R:
        name = cls.__name__
        if not isinstance(obj, Mapping):
            raise DeserializationError(name, f"expected a JSON object, got {type(obj).__name__}")
        kwargs = {}
        for f in fields(cls):  # type: ignore[arg-type]
            meta = f.metadata
            if "parse" not in meta:
                continue
            key = meta["json_key"] or f.name
            parse = meta["parse"]
            if meta["flatten"]:
                raw = obj
            else:
                raw = obj.get(key, _MISSING)
                if raw is _MISSING or raw is None:
                    if meta["optional"]:
                        continue
                    what = "missing" if raw is _MISSING else "null"
                    raise DeserializationError(name, f"required field is {what}", field=key)
            try:
                kwargs[f.name] = parse(raw)
            except (TypeError, ValueError, HorizonError) as exc:
                raise DeserializationError(name, str(exc), field=key) from exc
        try:
            return cls(**kwargs)
        except (ValueError, HorizonError) as exc:
            raise DeserializationError(name, str(exc)) from exc


# ---------------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------------

def as_str(v: Any) -> str:
    if not isinstance(v, str):
        raise TypeError(f"expected string, got {type(v).__name__}")
    return v


def as_int(v: Any) -> int:
    # bool is an int subclass; JSON true/false is never a number here.
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"expected integer, got {type(v).__name__}")
    return v


def as_int_str(v: Any) -> int:
    """64-bit integers the server sends as strings (sequences, ids)."""
    if isinstance(v, bool):
        raise TypeError("expected integer string, got bool")
    if isinstance(v, int):
        return v
    if not isinstance(v, str) or not v.lstrip("-").isdigit():
        raise ValueError(f"expected integer string, got {v!r}")
    return int(v)


def as_bool(v: Any) -> bool:
    if not isinstance(v, bool):
        raise TypeError(f"expected boolean, got {type(v).__name__}")
    return v


def as_amount(v: Any) -> Amount:
    return Amount.from_str(as_str(v))


def as_datetime(v: Any) -> datetime:
    text = as_str(v)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def as_str_tuple(v: Any) -> Tuple[str, ...]:
    if not isinstance(v, list):
        raise TypeError(f"expected array, got {type(v).__name__}")
    return tuple(as_str(x) for x in v)


def tuple_of(resource: Type[R]) -> Callable[[Any], Tuple[R, ...]]:
    def parse(v: Any) -> Tuple[R, ...]:
        if not isinstance(v, list):
            raise TypeError(f"expected array, got {type(v).__name__}")
        return tuple(resource.from_json(x) for x in v)
    return parse


__all__ = [
    "Resource",
    "json_field",
    "as_str",
    "as_int",
    "as_int_str",
    "as_bool",
    "as_amount",
    "as_datetime",
    "as_str_tuple",
    "tuple_of",
]
