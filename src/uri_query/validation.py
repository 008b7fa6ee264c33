"""URL validation for the query helpers.

Both conversion directions start from an absolute URL. This module turns a
raw string into its components and rejects anything that is not a usable
absolute URL with :class:`InvalidURL`.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit, urlunsplit

from .const import SCHEMES_REQUIRING_HOST
from .exceptions import InvalidURL

_WHITESPACE = re.compile(r"[\s\x00-\x1f\x7f]")


def split_url(url: str) -> SplitResult:
    """Split an absolute URL into scheme, authority, path, query and fragment.

    Args:
        url: The URL string to parse.

    Returns:
        The ``SplitResult`` of the URL.

    Raises:
        InvalidURL: If the input is not a string, is relative, has no host
            where its scheme needs one, or has a malformed authority.
    """
    if not isinstance(url, str):
        raise InvalidURL(url, f"expected str, got {type(url).__name__}")

    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
    except ValueError as err:
        raise InvalidURL(url, str(err)) from err

    if not parts.scheme:
        raise InvalidURL(url, "missing scheme")

    if _WHITESPACE.search(parts.netloc):
        raise InvalidURL(url, "whitespace in authority")

    if parts.scheme in SCHEMES_REQUIRING_HOST and not parts.hostname:
        raise InvalidURL(url, "missing host")

    try:
        parts.port
    except ValueError as err:
        raise InvalidURL(url, str(err)) from err

    return parts


def join_url(parts: SplitResult, query: str) -> str:
    """Reassemble a URL from its components with a new query string.

    A URL with an authority but no path gets the root path.
    """
    path = parts.path
    if parts.netloc and not path:
        path = "/"
    return urlunsplit((parts.scheme, parts.netloc, path, query, parts.fragment))
