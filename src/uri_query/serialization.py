"""Building URLs from parameter mappings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable
from urllib.parse import parse_qsl, quote_plus, urlencode

from .const import FORM_SAFE_CHARS, LIST_SEPARATOR
from .utils import is_anomalous_value, stringify_value, warn_anomalous
from .validation import join_url, split_url

_LOGGER = logging.getLogger(__name__)


def set_query_params(base_url: str, params: Mapping[str, Any]) -> str:
    """Append parameters to the query string of a URL.

    Existing parameters of ``base_url`` are kept and the new ones follow in
    the iteration order of ``params``. Keys are appended, never replaced, so
    a key present twice ends up repeated in the result.

    Lists and tuples are rendered as one comma-joined value. None, UNDEFINED
    and NaN are rendered as 'null', 'undefined' and 'NaN' and logged as
    anomalies. Other values go through :func:`stringify_value`.

    Raises:
        InvalidURL: If ``base_url`` cannot be parsed.
    """
    parts = split_url(base_url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)

    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            final_value = LIST_SEPARATOR.join(stringify_value(item) for item in value)
        elif is_anomalous_value(value):
            final_value = stringify_value(value)
            warn_anomalous(key, final_value)
        else:
            final_value = stringify_value(value)

        pairs.append((key, final_value))

    _LOGGER.debug("Appended %s query parameters", len(params))
    return join_url(parts, encode_query(pairs))


def encode_query(pairs: Iterable[tuple[str, str]]) -> str:
    """Encode key/value pairs as application/x-www-form-urlencoded text.

    Space becomes '+'; everything except alphanumerics and '*-._' is
    percent-encoded as UTF-8.
    """
    return urlencode(list(pairs), quote_via=_form_quote)


def _form_quote(text: str, safe: str = "", encoding: str = None, errors: str = None) -> str:
    # quote_plus always keeps '~', the form encoding does not
    return quote_plus(text, safe=FORM_SAFE_CHARS, encoding=encoding, errors=errors).replace("~", "%7E")
