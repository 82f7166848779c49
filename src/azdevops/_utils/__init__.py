from ._endpoint import Endpoint, path_segment
from ._errors import wrap_transport_errors
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._sanitize import sanitize_headers
from ._ssl_context import get_httpx_client_kwargs
from ._user_agent import user_agent_value

__all__ = [
    "Endpoint",
    "RequestSpec",
    "get_httpx_client_kwargs",
    "path_segment",
    "sanitize_headers",
    "setup_logging",
    "user_agent_value",
    "wrap_transport_errors",
]
