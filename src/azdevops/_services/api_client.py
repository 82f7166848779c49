from typing import Any, Dict, Optional

from .._utils import Endpoint, RequestSpec
from ._base_service import BaseService


class ApiClient(BaseService):
    """Low-level client for calling Azure DevOps endpoints directly.

    Use it when the higher-level services don't cover an endpoint. Requests
    still get authentication, content negotiation and the configured retry
    budget.
    """

    def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        json: bool = True,
        parse: bool = True,
    ) -> Any:
        """Call an endpoint and return its decoded payload.

        Args:
            url: An absolute URL, or a path relative to the project's `_apis`
                root (e.g. ``"/git/repositories"``).
            method: The HTTP verb.
            params: Extra query parameters. `api-version` is added for
                relative paths unless given here.
            headers: Extra headers.
            body: JSON-serializable payload.
            json: Negotiate and decode JSON instead of plain text.
            parse: Return the raw `Response` instead of decoding it.

        Returns:
            Any: The decoded payload, or the raw `Response` when `parse` is False.

        Example:
            ```python
            repos = client.api_client.fetch("/git/repositories")
            for repo in repos["value"]:
                print(repo["name"])
            ```
        """
        spec = self._fetch_spec(url, method, params, headers, body, json, parse)
        return self.request(spec)

    async def fetch_async(
        self,
        url: str,
        *,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        json: bool = True,
        parse: bool = True,
    ) -> Any:
        spec = self._fetch_spec(url, method, params, headers, body, json, parse)
        return await self.request_async(spec)

    def _fetch_spec(
        self,
        url: str,
        method: str,
        params: Optional[Dict[str, Any]],
        headers: Optional[Dict[str, str]],
        body: Any,
        json: bool,
        parse: bool,
    ) -> RequestSpec:
        if url.startswith(("http://", "https://")):
            return RequestSpec(
                url=url,
                method=method,
                credential=self._config.secret,
                headers=headers or {},
                params=params or {},
                body=body,
                json=json,
                parse=parse,
                retry_count=self._config.retry_count,
            )
        return self._build_spec(
            method,
            Endpoint(url),
            params=params,
            headers=headers,
            body=body,
            json=json,
            parse=parse,
        )
