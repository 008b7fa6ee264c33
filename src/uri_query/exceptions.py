"""Exceptions for the URI query helpers."""


class UriQueryError(Exception):
    """Base class for all uri_query errors."""
    def __init__(self, message: str, error_id: str = None):
        super().__init__(message)
        self.error_id = error_id


class InvalidURL(UriQueryError, ValueError):
    """The given string cannot be parsed as an absolute URL."""
    def __init__(self, url, reason: str = None):
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, error_id="invalid_url")
        self.url = url
        self.reason = reason
