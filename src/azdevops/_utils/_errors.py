from contextlib import contextmanager
from logging import Logger
from typing import Generator

import httpx

from ..models.exceptions import TransportFailure


@contextmanager
def wrap_transport_errors(url: str, logger: Logger) -> Generator[None, None, None]:
    """Context manager converting transport-level errors into TransportFailure.

    Only failures that happen before any response is received are converted:
    connection, DNS, TLS and timeout errors, plus malformed URLs. Everything
    else propagates unchanged.

    Yields:
        None: The context manager yields control to the wrapped send.

    Raises:
        TransportFailure: When the HTTP exchange could not complete.
    """
    try:
        yield
    except (httpx.RequestError, httpx.InvalidURL) as e:
        logger.error(f"Request to {url} failed with error {type(e).__name__}: {e}")
        raise TransportFailure(url, str(e)) from e
