from functools import cached_property
from logging import Logger
from os import environ as env
from typing import Any, List, Optional

from dotenv import load_dotenv

from ._config import Config
from ._services import ApiClient, PullRequestsService, RepositoriesService
from ._services._base_service import BaseService
from ._utils import setup_logging
from ._utils.constants import (
    AZURE_DEVOPS_URL,
    ENV_AZURE_DEVOPS_PAT,
    ENV_COLLECTION_URI,
    ENV_ORGANIZATION,
    ENV_PROJECT,
    ENV_RETRY_COUNT,
    ENV_SYSTEM_ACCESS_TOKEN,
)
from .models.errors import BaseUrlMissingError, ProjectMissingError

load_dotenv()


def build_base_url(
    project: str,
    *,
    organization: Optional[str] = None,
    collection_uri: Optional[str] = None,
) -> str:
    """Build the project's `_apis` root.

    A collection URI (as exposed to pipelines in ``SYSTEM_COLLECTIONURI``)
    takes precedence over an organization name. The latter is resolved
    against the Azure DevOps Services host.
    """
    if collection_uri:
        if not collection_uri.endswith("/"):
            collection_uri += "/"
        return f"{collection_uri}{project}/_apis"
    if organization:
        return f"{AZURE_DEVOPS_URL}/{organization}/{project}/_apis"
    raise BaseUrlMissingError()


class AzureDevOps:
    """Entry point to the Azure DevOps REST API for a single project."""

    def __init__(
        self,
        *,
        pat: Optional[str] = None,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        collection_uri: Optional[str] = None,
        retry_count: Optional[int] = None,
        timeout: Optional[float] = None,
        logger: Optional[Logger] = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            pat: Personal access token. Falls back to ``AZURE_DEVOPS_EXT_PAT``,
                then ``SYSTEM_ACCESSTOKEN``. Without one, requests are sent
                unauthenticated.
            organization: Organization name on dev.azure.com. Falls back to
                ``AZURE_DEVOPS_ORG``.
            project: Project name or ID. Falls back to ``SYSTEM_TEAMPROJECT``.
            collection_uri: Collection URI, e.g. ``https://dev.azure.com/org/``.
                Falls back to ``SYSTEM_COLLECTIONURI`` and wins over
                `organization`.
            retry_count: Extra attempts for requests failing with a non-4xx
                status. Falls back to ``AZURE_DEVOPS_RETRY_COUNT``, then 0.
            timeout: Per-request timeout in seconds. httpx's default applies
                when omitted.
            logger: Logger receiving request and failure lines. Defaults to
                the ``azdevops`` logger.
            debug: Enable debug logging on the ``azdevops`` logger.

        Raises:
            BaseUrlMissingError: If neither an organization nor a collection
                URI is available.
            ProjectMissingError: If no project is available.
        """
        project_value = project or env.get(ENV_PROJECT)
        if not project_value:
            raise ProjectMissingError()

        base_url = build_base_url(
            project_value,
            organization=organization or env.get(ENV_ORGANIZATION),
            collection_uri=collection_uri or env.get(ENV_COLLECTION_URI),
        )
        secret_value = pat or env.get(ENV_AZURE_DEVOPS_PAT) or env.get(
            ENV_SYSTEM_ACCESS_TOKEN
        )
        retry_value: Any = (
            retry_count if retry_count is not None else env.get(ENV_RETRY_COUNT, 0)
        )

        self._config = Config(
            base_url=base_url,
            secret=secret_value,
            retry_count=retry_value,
            timeout=timeout,
        )
        self._logger = logger

        setup_logging(debug)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @cached_property
    def api_client(self) -> ApiClient:
        """Low-level client for endpoints without a dedicated service."""
        return ApiClient(self._config, logger=self._logger)

    @cached_property
    def repositories(self) -> RepositoriesService:
        """Git repositories and their file contents."""
        return RepositoriesService(self._config, logger=self._logger)

    @cached_property
    def pull_requests(self) -> PullRequestsService:
        """Pull requests, their labels, comment threads and draft state."""
        return PullRequestsService(self._config, logger=self._logger)

    def close(self) -> None:
        """Close the HTTP clients of every service created so far."""
        for service in self._open_services():
            service.close()

    async def aclose(self) -> None:
        for service in self._open_services():
            await service.aclose()

    def __enter__(self) -> "AzureDevOps":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "AzureDevOps":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _open_services(self) -> List[BaseService]:
        # cached_property stores instantiated services in the instance dict
        return [
            self.__dict__[name]
            for name in ("api_client", "repositories", "pull_requests")
            if name in self.__dict__
        ]

    def get_file(
        self,
        repository: str,
        commit_or_branch: str,
        path: str,
        json: bool = False,
    ) -> Any:
        """Shortcut for `repositories.get_file`."""
        return self.repositories.get_file(repository, commit_or_branch, path, json)
