"""Central JSON utilities using orjson."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import orjson

# orjson.JSONDecodeError subclasses json.JSONDecodeError (and ValueError)
JSONDecodeError = orjson.JSONDecodeError

_UTF8_BOM = b"\xef\xbb\xbf"


def _default_encoder(user_default: Callable[[Any], Any] | None = None) -> Callable[[Any], Any]:
    """Create a JSON encoder that handles Decimal values."""

    def _encoder(obj: Any) -> Any:
        if user_default is not None:
            try:
                return user_default(obj)
            except TypeError:
                pass
        if isinstance(obj, Decimal):
            return float(obj)
        raise TypeError(f"Object of type {obj.__class__.__name__} is not JSON serializable")

    return _encoder


def dumps(obj: Any, *, default: Callable[[Any], Any] | None = None, pretty: bool = False) -> str:
    """Dump object to JSON string."""
    option = orjson.OPT_INDENT_2 if pretty else None
    return dumps_bytes(obj, default=default, option=option).decode("utf-8")


def dumps_bytes(obj: Any, *, default: Callable[[Any], Any] | None = None, option: int | None = None) -> bytes:
    kwargs: dict[str, Any] = {"default": _default_encoder(default)}
    if option is not None:
        kwargs["option"] = option
    return orjson.dumps(obj, **kwargs)


def loads(obj: str | bytes) -> Any:
    """Load object from JSON string or bytes.

    A leading UTF-8 byte order mark is tolerated.
    """
    if isinstance(obj, str):
        if obj.startswith("\ufeff"):
            obj = obj[1:]
    elif obj.startswith(_UTF8_BOM):
        obj = obj[len(_UTF8_BOM):]
    return orjson.loads(obj)


__all__ = ["JSONDecodeError", "dumps", "dumps_bytes", "loads"]
