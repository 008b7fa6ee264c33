"""Conversion between URL query strings and parameter mappings."""

from .exceptions import InvalidURL, UriQueryError
from .models import UNDEFINED, ParsedQuery, QueryValue
from .parsing import get_query_params
from .serialization import encode_query, set_query_params
from .utils import stringify_value

__all__ = [
    "InvalidURL",
    "ParsedQuery",
    "QueryValue",
    "UNDEFINED",
    "UriQueryError",
    "encode_query",
    "get_query_params",
    "set_query_params",
    "stringify_value",
]
