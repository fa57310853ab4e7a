"""Structured Value - the payload type shared by both storage engines.

A Structured Value is a closed union of three variants:

    - STRING: a UTF-8 ``str``
    - INTEGER: a 64-bit signed ``int`` (``bool`` is rejected)
    - OBJECT: a ``Mapping[str, StructuredValue]``

Both engines store the same payloads so that comparisons stay fair.

The relational engine indexes values by their canonical encoding
(``serialize_value``). The encoding is discriminated by construction:
strings are JSON-quoted, integers are bare decimals, and objects are JSON
objects with sorted keys. ``5`` and ``"5"`` therefore never share an index
key, while two equal mappings always do regardless of insertion order.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Union

StructuredValue = Union[str, int, Mapping[str, "StructuredValue"]]

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class ValueKind(Enum):
    """Variants of a Structured Value."""

    STRING = "string"
    INTEGER = "integer"
    OBJECT = "object"


def kind_of(value: object) -> ValueKind:
    """Classify a value into its Structured Value variant.

    Only the top level is inspected; use ``validate_value`` for a deep check.

    Raises:
        TypeError: If the value is not a str, int or mapping.
        ValueError: If an integer does not fit in 64 signed bits.
    """
    match value:
        case bool():
            raise TypeError("bool is not a Structured Value")
        case str():
            return ValueKind.STRING
        case int():
            if not INT64_MIN <= value <= INT64_MAX:
                raise ValueError(f"integer {value} does not fit in 64 signed bits")
            return ValueKind.INTEGER
        case Mapping():
            return ValueKind.OBJECT
        case _:
            raise TypeError(f"{type(value).__name__} is not a Structured Value")


def validate_value(value: object) -> None:
    """Recursively check that ``value`` is a well-formed Structured Value."""
    if kind_of(value) is ValueKind.OBJECT:
        for key, item in value.items():  # type: ignore[union-attr]
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, got {type(key).__name__}")
            validate_value(item)


def _to_plain(value: StructuredValue) -> str | int | dict:
    match kind_of(value):
        case ValueKind.OBJECT:
            return {key: _to_plain(item) for key, item in value.items()}  # type: ignore[union-attr]
        case _:
            return value  # type: ignore[return-value]


def serialize_value(value: StructuredValue) -> str:
    """Encode a Structured Value canonically for use as an index key.

    Example:
        >>> serialize_value("tag_5")
        '"tag_5"'
        >>> serialize_value(5)
        '5'
        >>> serialize_value({"b": 1, "a": "x"})
        '{"a":"x","b":1}'
    """
    return json.dumps(
        _to_plain(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
