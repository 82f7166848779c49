from typing import Optional

from httpx import Response


class RequestFailure(Exception):
    """Raised when a completed HTTP exchange returned a non-success status.

    The message embeds the method, URL, status code and response body so
    that the failure can be diagnosed without further context.

    Attributes:
        response: The raw response that ended the exchange.
        status_code: Its HTTP status code.
        body: The response body as text, or None when it could not be read.
    """

    def __init__(
        self, message: str, response: Response, body: Optional[str] = None
    ) -> None:
        self.message = message
        self.response = response
        self.status_code = response.status_code
        self.body = body
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def __str__(self) -> str:
        return self.message


class TransportFailure(Exception):
    """Raised when the HTTP exchange itself could not complete.

    Covers network, DNS and TLS errors and malformed URLs. The underlying
    httpx exception is chained as ``__cause__``.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        self.message = f"Request to {url} failed: {reason}"
        super().__init__(self.message)
