"""JSON helpers: compact encoding and shallow typed decoding."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

__all__ = ["from_json", "to_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_object(value: Any) -> Any:
    """``default`` hook for :func:`json.dumps`."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Serialise *value* to JSON text.

    Output is compact (no spaces after separators) unless *indent* is given,
    and object keys keep their insertion order.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(value, default=_encode_object, separators=separators, indent=indent)


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *cls*.

    The instance is created without calling ``__init__``; each key of the
    parsed JSON object becomes an attribute.  Values are not validated
    against the fields of *cls*.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    logger.debug("from_json: %s with fields %s", cls.__name__, list(data))
    return instance
