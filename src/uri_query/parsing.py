"""Parsing of URL query strings into parameter mappings."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import parse_qsl

from .const import LIST_SEPARATOR
from .models import ParsedQuery, QueryValue
from .utils import is_anomalous_literal, warn_anomalous
from .validation import split_url

_LOGGER = logging.getLogger(__name__)


def get_query_params(url: str) -> ParsedQuery:
    """Parse the query string of a URL into a parameter mapping.

    Each key resolves to a single string or a list:

    - A key repeated in the query gives the list of its decoded values,
      whatever they contain.
    - A single value wrapped in ``[...]`` that decodes as a JSON array gives
      that array, with its JSON element types.
    - A single value containing a comma gives the comma-split, stripped list.
    - Anything else gives the decoded string.

    Scalar results equal to 'NaN', 'undefined' or 'null' are logged as
    anomalies but still returned.

    Args:
        url: Absolute URL, with or without a query string.

    Returns:
        Mapping of parameter name to value, in first-seen key order.

    Raises:
        InvalidURL: If the URL cannot be parsed.
    """
    parts = split_url(url)
    grouped = _group_pairs(parse_qsl(parts.query, keep_blank_values=True))

    query_params: ParsedQuery = {}
    for key, values in grouped.items():
        value = _resolve_value(values)
        query_params[key] = value

        if is_anomalous_literal(value):
            warn_anomalous(key, value)

    _LOGGER.debug("Parsed %s query parameters", len(query_params))
    return query_params


def _group_pairs(pairs: list[tuple[str, str]]) -> dict[str, list[str]]:
    """Collect values per key, keeping first-seen key order."""
    grouped: dict[str, list[str]] = {}
    for key, value in pairs:
        grouped.setdefault(key, []).append(value)
    return grouped


def _resolve_value(values: list[str]) -> QueryValue:
    if len(values) > 1:
        return values

    single = values[0]
    if single.startswith("[") and single.endswith("]"):
        parsed = _load_json_array(single)
        if parsed is not None:
            return parsed

    if LIST_SEPARATOR in single:
        return [item.strip() for item in single.split(LIST_SEPARATOR)]

    return single


def _load_json_array(text: str) -> list[Any] | None:
    """Decode strict JSON, returning the result only if it is an array."""
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        # Not valid JSON, caller treats it as plain text
        return None
    return parsed if isinstance(parsed, list) else None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")
