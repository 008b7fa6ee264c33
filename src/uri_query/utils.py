"""Utility functions shared by the query parser and serializer."""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from .const import (
    ANOMALOUS_LITERALS,
    ANOMALY_WARNING_TEMPLATE,
    LIST_SEPARATOR,
    OBJECT_PLACEHOLDER,
)
from .models import UNDEFINED

_LOGGER = logging.getLogger(__name__)

_EXPONENT = re.compile(r"e([+-])0*(\d)")


def is_anomalous_literal(value: Any) -> bool:
    """Return True for the scalar strings 'NaN', 'undefined' and 'null'."""
    return isinstance(value, str) and value in ANOMALOUS_LITERALS


def is_anomalous_value(value: Any) -> bool:
    """Return True for None, UNDEFINED and float NaN."""
    if value is None or value is UNDEFINED:
        return True
    return isinstance(value, float) and math.isnan(value)


def warn_anomalous(key: str, value: str) -> None:
    """Log the anomaly warning for a parameter. Never raises."""
    _LOGGER.warning(ANOMALY_WARNING_TEMPLATE, key, value)


def stringify_value(value: Any) -> str:
    """Render a parameter value as query text.

    Strings pass through unchanged. Booleans become 'true'/'false', None
    becomes 'null' and UNDEFINED becomes 'undefined'. Numbers use their
    shortest decimal form ('NaN' and 'Infinity' for the special floats).
    Lists and tuples are joined with commas, with None and UNDEFINED
    elements left empty. Mappings, and objects without their own __str__,
    render as '[object Object]'.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(
            "" if item is None or item is UNDEFINED else stringify_value(item)
            for item in value
        )
    if isinstance(value, Mapping):
        return OBJECT_PLACEHOLDER
    if type(value).__str__ is not object.__str__:
        return str(value)
    return OBJECT_PLACEHOLDER


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return _EXPONENT.sub(r"e\1\2", float.__repr__(value))
