"""
Lenient integer parsing for imported statblock values.

Source formats write numbers as ints, floats or strings, and some fields
are composites such as an initiative of "7-3". The leading integer wins.
"""
import logging
import math
import re
from typing import Any, Optional

from ..exceptions import NumericParseError

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: Any) -> int:
    """
    Parse the leading integer component of a value.

    "7-3" -> 7, "12 (+2)" -> 12, 4.0 -> 4.

    :raises: NumericParseError if there is no leading integer
    """
    if isinstance(value, bool):
        raise NumericParseError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise NumericParseError(value)
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    raise NumericParseError(value)


def coerce_int(value: Any, default: int = 0, field: Optional[str] = None) -> int:
    """Parse a value with parse_leading_int, falling back to default."""
    if value is None or value == "":
        return default
    try:
        return parse_leading_int(value)
    except NumericParseError as e:
        logger.warning(f"{e} (field={field or '?'}), using {default}")
        return default
