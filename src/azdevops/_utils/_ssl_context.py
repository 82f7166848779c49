import os
import ssl
from typing import Any, Dict, Optional, Tuple

from .constants import ENV_REQUESTS_CA_BUNDLE, ENV_SSL_CERT_DIR, ENV_SSL_CERT_FILE


def expand_path(path: Optional[str]) -> Optional[str]:
    """Expand environment variables and ``~`` in a configured path."""
    if not path:
        return None
    return os.path.expanduser(os.path.expandvars(path))


def ca_locations() -> Tuple[Optional[str], Optional[str]]:
    """Return the CA bundle file and directory configured in the environment.

    ``SSL_CERT_FILE`` wins over ``REQUESTS_CA_BUNDLE``. Without either, the
    certifi bundle is used.
    """
    cafile = expand_path(os.environ.get(ENV_SSL_CERT_FILE)) or expand_path(
        os.environ.get(ENV_REQUESTS_CA_BUNDLE)
    )
    if cafile is None:
        import certifi

        cafile = certifi.where()
    return cafile, expand_path(os.environ.get(ENV_SSL_CERT_DIR))


def create_ssl_context() -> ssl.SSLContext:
    """Build the TLS context used for every Azure DevOps connection.

    The system trust store is preferred through truststore. When it is not
    installed, a context is built from `ca_locations`.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        cafile, capath = ca_locations()
        return ssl.create_default_context(cafile=cafile, capath=capath)


def get_httpx_client_kwargs(timeout: Optional[float] = None) -> Dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients."""
    kwargs: Dict[str, Any] = {
        "verify": create_ssl_context(),
        "follow_redirects": True,
    }
    if timeout is not None:
        kwargs["timeout"] = timeout
    return kwargs
