from typing import Union
from urllib.parse import quote


def path_segment(value: Union[int, str]) -> str:
    """Percent-encode `value` so it stays a single path segment.

    Repository and label names may contain ``/``, ``#`` or ``?``, which
    would otherwise split the path or start a query or fragment.

    Examples:
        >>> path_segment("needs#review")
        'needs%23review'
    """
    return quote(str(value), safe="")


class Endpoint(str):
    """A path relative to the project's `_apis` root.

    Leading and trailing slashes are normalized so that endpoints can be
    appended to a base URL without doubling separators.

    Examples:
        >>> Endpoint("git/repositories/")
        '/git/repositories'
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        return super().__new__(cls, "/" + endpoint.strip("/"))

    def absolute(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}{self}"
