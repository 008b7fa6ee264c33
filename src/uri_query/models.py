"""Value types for parsed and serialized query parameters."""

from typing import Any, Dict, List, Union


class _Undefined:
    """Marker for a value that was never set (rendered as ``undefined``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

# Repeated keys and comma lists give List[str]; JSON lists keep JSON types.
QueryValue = Union[str, List[Any]]
ParsedQuery = Dict[str, QueryValue]
