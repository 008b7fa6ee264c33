"""Constants for the URI query helpers."""

# Scalar values that usually mean a caller rendered a missing value.
ANOMALOUS_LITERALS = ("NaN", "undefined", "null")

ANOMALY_WARNING_TEMPLATE = "Warning: parameter %s has anomalous value (%s)"

LIST_SEPARATOR = ","

# application/x-www-form-urlencoded leaves these unescaped besides alphanumerics
FORM_SAFE_CHARS = "*-._"

# Schemes whose URLs are meaningless without a host
SCHEMES_REQUIRING_HOST = frozenset({"http", "https", "ws", "wss", "ftp"})

OBJECT_PLACEHOLDER = "[object Object]"
