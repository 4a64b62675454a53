"""JSON helpers that rebind decoded data onto a target type.

Encoding is the compact form of the standard library encoder, so
``get_json([1, 2, 3])`` gives ``'[1,2,3]'``. Decoding with
:func:`from_json` parses the text and hands the resulting mapping to the
target type: dataclasses are constructed from it directly, any other
class gets a bare instance whose attributes are the decoded fields.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objkit.codec.errors import DecodeError, EncodeError

__all__ = ["get_json", "from_json"]

log = logging.getLogger(__name__)

T = TypeVar("T")

_COMPACT = (",", ":")


def _default(value: object) -> Any:
    """Encode hook for values the json module does not know about."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(obj: object, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON representation of *obj*.

    Key order follows the input unless *sort_keys* is set. With no
    *indent* the output carries no insignificant whitespace.
    """
    separators = _COMPACT if indent is None else None
    try:
        return json.dumps(
            obj,
            default=_default,
            indent=indent,
            sort_keys=sort_keys,
            separators=separators,
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(str(exc)) from exc


def _rebind(cls: type[T], data: dict[str, Any]) -> T:
    """Return a bare *cls* instance carrying *data* as its attributes.

    Slotted classes get one ``setattr`` per field; types that cannot hold
    the fields raise DecodeError.
    """
    try:
        instance = cls.__new__(cls)
    except TypeError as exc:
        raise DecodeError(f"Cannot create {cls.__name__}: {exc}", target=cls) from exc

    try:
        namespace = instance.__dict__
    except AttributeError:
        namespace = None

    try:
        if namespace is not None:
            namespace.update(data)
        else:
            for name, value in data.items():
                setattr(instance, name, value)
    except AttributeError as exc:
        raise DecodeError(
            f"Cannot set fields on {cls.__name__}: {exc}", target=cls
        ) from exc
    return instance


def from_json(cls: type[T], text: str) -> T:
    """Decode *text* and return it as an instance of *cls*.

    The decoded fields are not validated or copied: dataclasses receive
    them as constructor arguments, other classes as instance attributes.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON: {exc}", target=cls) from exc

    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}",
            target=cls,
        )

    if dataclasses.is_dataclass(cls):
        try:
            instance = cls(**data)
        except TypeError as exc:
            raise DecodeError(f"Cannot build {cls.__name__}: {exc}", target=cls) from exc
    else:
        instance = _rebind(cls, data)

    log.debug("Decoded %s with fields %s", cls.__name__, list(data))
    return instance
