import base64
import json
from logging import Logger, getLogger
from typing import Any, Callable, Dict, Optional

from httpx import (
    AsyncClient,
    Client,
    Headers,
    HTTPError,
    Response,
    StreamError,
)
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from .._config import Config
from .._utils import (
    Endpoint,
    RequestSpec,
    get_httpx_client_kwargs,
    sanitize_headers,
    user_agent_value,
    wrap_transport_errors,
)
from .._utils.constants import (
    API_VERSION,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_TEXT,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    RETRY_DELAY_SECONDS,
)
from ..models.exceptions import RequestFailure


def is_retryable_failure(exception: BaseException) -> bool:
    """Client errors (4xx) reproduce on resubmission, every other status may not."""
    return isinstance(exception, RequestFailure) and not exception.is_client_error


def basic_auth_value(credential: str) -> str:
    token = base64.b64encode(f":{credential}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class BaseService:
    """Base class for all Azure DevOps API services.

    Owns the request primitive shared by every service: a single
    authenticated call with structured error handling and a bounded,
    fixed-delay retry on server-side failures. Both a blocking and an
    ``async`` flavour are provided and behave identically.
    """

    def __init__(self, config: Config, *, logger: Optional[Logger] = None) -> None:
        self._logger = logger or getLogger(LOGGER_NAME)
        self._config = config

        client_kwargs = get_httpx_client_kwargs(timeout=self._config.timeout)

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

        super().__init__()

    def close(self) -> None:
        """Release the connections held by the blocking client."""
        self._client.close()

    async def aclose(self) -> None:
        """Release the connections held by both clients."""
        self._client.close()
        await self._client_async.aclose()

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "BaseService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def request(self, spec: RequestSpec) -> Any:
        """Perform the call described by `spec`, retrying when allowed.

        At most ``spec.retry_count + 1`` attempts are made. Only failures
        outside the 4xx range are retried, after a fixed delay.

        Args:
            spec: The request to perform.

        Returns:
            Any: The decoded JSON payload or response text, or the raw
            `Response` when ``spec.parse`` is False.

        Raises:
            RequestFailure: The last non-success response once the retry
                budget is spent, or immediately for a 4xx status.
            TransportFailure: If no response could be received. Not retried.
        """
        retrying = Retrying(**self._retry_policy(spec))
        return retrying(self._send, spec)

    async def request_async(self, spec: RequestSpec) -> Any:
        """Asynchronous version of `request`."""
        retrying = AsyncRetrying(**self._retry_policy(spec))
        return await retrying(self._send_async, spec)

    def _send(self, spec: RequestSpec) -> Any:
        headers = self._prepare_headers(spec)
        content = self._prepare_body(spec)
        self._log_request(spec, headers)

        with wrap_transport_errors(spec.url, self._logger):
            response = self._client.request(
                spec.method,
                spec.url,
                params=spec.params or None,
                headers=headers,
                content=content,
            )

        return self._handle_response(spec, response)

    async def _send_async(self, spec: RequestSpec) -> Any:
        headers = self._prepare_headers(spec)
        content = self._prepare_body(spec)
        self._log_request(spec, headers)

        with wrap_transport_errors(spec.url, self._logger):
            response = await self._client_async.request(
                spec.method,
                spec.url,
                params=spec.params or None,
                headers=headers,
                content=content,
            )

        return self._handle_response(spec, response)

    def _handle_response(self, spec: RequestSpec, response: Response) -> Any:
        if not response.is_success:
            body = self._read_error_body(response)
            self._logger.error(
                f"Request failed with status code {response.status_code} and body {body}"
            )
            raise RequestFailure(
                f"{spec.method} {spec.url} failed. "
                f"Received status code {response.status_code}. Body: {body}",
                response,
                body,
            )

        if not spec.parse:
            return response

        return response.json() if spec.json else response.text

    def _read_error_body(self, response: Response) -> Optional[str]:
        try:
            return response.text
        except (HTTPError, StreamError, UnicodeDecodeError):
            return None

    def _prepare_headers(self, spec: RequestSpec) -> Headers:
        headers = Headers({HEADER_USER_AGENT: user_agent_value(type(self).__name__)})
        headers.update(spec.headers)

        if spec.credential:
            headers[HEADER_AUTHORIZATION] = basic_auth_value(spec.credential)

        content_type = CONTENT_TYPE_JSON if spec.json else CONTENT_TYPE_TEXT
        headers[HEADER_ACCEPT] = content_type
        headers[HEADER_CONTENT_TYPE] = content_type
        return headers

    def _prepare_body(self, spec: RequestSpec) -> Optional[bytes]:
        if spec.body is None:
            return None
        return json.dumps(spec.body).encode("utf-8")

    def _log_request(self, spec: RequestSpec, headers: Headers) -> None:
        body = json.dumps(spec.body) if spec.body is not None else ""
        self._logger.info(f"Fetching ({spec.method}): {spec.url} {body}".rstrip())
        self._logger.debug(f"HEADERS: {sanitize_headers(headers)}")

    def _retry_policy(self, spec: RequestSpec) -> Dict[str, Any]:
        return {
            "retry": retry_if_exception(is_retryable_failure),
            "stop": stop_after_attempt(spec.retry_count + 1),
            "wait": wait_fixed(RETRY_DELAY_SECONDS),
            "before_sleep": self._log_retry(spec),
            "reraise": True,
        }

    def _log_retry(self, spec: RequestSpec) -> Callable[[RetryCallState], None]:
        def log(retry_state: RetryCallState) -> None:
            remaining = spec.retry_count - retry_state.attempt_number
            self._logger.warning(
                f"Retrying {spec.url} "
                f"(attempt {retry_state.attempt_number + 1}/{spec.retry_count + 1}, "
                f"{remaining} retries left)"
            )

        return log

    def _build_spec(
        self,
        method: str,
        endpoint: Endpoint,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        json: bool = True,
        parse: bool = True,
    ) -> RequestSpec:
        return RequestSpec(
            url=endpoint.absolute(self._config.base_url),
            method=method,
            credential=self._config.secret,
            headers=headers or {},
            params={"api-version": API_VERSION, **(params or {})},
            body=body,
            json=json,
            parse=parse,
            retry_count=self._config.retry_count,
        )
