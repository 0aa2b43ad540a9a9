"""
Lenient id and number coercion.

Clients send ids as path segments, query strings and JSON values of
varying types.  Two conversions are used:

* :func:`parse_int_prefix` reads a leading integer from text
  (``"12abc"`` gives ``12``) and returns ``None`` when there is none.
  Used for path ids and the ``userId`` list filter.
* :func:`to_number` converts a JSON value with numeric semantics and
  returns ``None`` for anything that is not a number.  Used for the
  ``userId`` payload field.
"""

import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)


def parse_int_prefix(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Beyond the int string conversion limit; no stored id is that large.
        return None


def to_number(value: Any) -> Optional[Number]:
    """Convert ``value`` to an int or float, or ``None`` if it is not numeric.

    Booleans count as 0/1 and a blank string as 0.  Integral floats are
    normalised to ``int`` so that stored ids compare and serialise as
    integers.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text.isascii():
            return None
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number
