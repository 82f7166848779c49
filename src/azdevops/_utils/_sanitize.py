"""Sanitization utilities for values that end up in log lines."""

from typing import Mapping

from .constants import HEADER_AUTHORIZATION

_MASK = "***"
_SENSITIVE_HEADERS = {HEADER_AUTHORIZATION.lower(), "cookie", "x-tfs-fedauthredirect"}


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Mask credential-bearing header values.

    The auth scheme is kept so that the log line still tells whether a
    credential was sent at all.

    Args:
        headers: The headers that are about to be sent.

    Returns:
        A copy of the headers that is safe to log.

    Examples:
        >>> sanitize_headers({"Authorization": "Basic OnNlY3JldA==", "Accept": "text/plain"})
        {'Authorization': 'Basic ***', 'Accept': 'text/plain'}
    """
    sanitized: dict[str, str] = {}
    for name, value in headers.items():
        if name.lower() in _SENSITIVE_HEADERS and value:
            scheme, _, credential = value.partition(" ")
            sanitized[name] = f"{scheme} {_MASK}" if credential else _MASK
        else:
            sanitized[name] = value
    return sanitized
