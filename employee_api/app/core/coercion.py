"""
Loose text-to-number coercion.

Clients send numbers as JSON numbers, numeric strings, or in query
strings.  ``to_number`` accepts all of those and returns ``None`` when
the value is not a number.  ``None`` is the only "no value" marker; the
callers decide what a missing number means (default, retain, or no
filter).

Accepted input:

* ``int``/``float`` as is (``nan`` and infinities are rejected)
* ``bool``: ``True`` is 1, ``False`` is 0
* ``None`` (JSON ``null``) is 0
* strings, after stripping whitespace: empty is 0, decimal or exponent
  notation (``"55000"``, ``"-5"``, ``".5"``, ``"1e3"``), and unsigned
  ``0x``/``0o``/``0b`` prefixed integers
"""

import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


def _normalize(value: float) -> Optional[Number]:
    # Infinity is not accepted, unlike JavaScript's Number().
    if math.isnan(value) or math.isinf(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def to_number(value: Any) -> Optional[Number]:
    """Coerce ``value`` to an ``int`` or ``float``; ``None`` if it is not a number."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _normalize(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return 0
    if _PREFIXED_RE.fullmatch(text):
        return int(text, 0)
    if _DECIMAL_RE.fullmatch(text):
        return _normalize(float(text))
    return None


def to_positive_int(value: Any) -> Optional[int]:
    """Return ``value`` as a positive integer, or ``None`` if it is not one."""
    number = to_number(value)
    if isinstance(number, int) and number > 0:
        return number
    return None
