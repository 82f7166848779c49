from typing import Any, Union

from .._utils import Endpoint, RequestSpec, path_segment
from ..models.repositories import Repository
from ._base_service import BaseService


class RepositoriesService(BaseService):
    """Service for Git repositories and their file contents."""

    def get(self, repository: str) -> Repository:
        """Retrieve a repository.

        Related API: [Repositories - Get Repository](https://learn.microsoft.com/en-us/rest/api/azure/devops/git/repositories/get-repository?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.

        Returns:
            Repository: The repository metadata.

        Examples:
            >>> repo = client.repositories.get("my-repo")
            >>> repo.default_branch
            'refs/heads/main'
        """
        spec = self._get_spec(repository)
        return Repository.model_validate(self.request(spec))

    async def get_async(self, repository: str) -> Repository:
        """Asynchronous version of `get`."""
        spec = self._get_spec(repository)
        return Repository.model_validate(await self.request_async(spec))

    def get_file(
        self,
        repository: str,
        commit_or_branch: str,
        path: str,
        json: bool = False,
    ) -> Union[str, Any]:
        """Retrieve the contents of a file at a given commit or branch.

        Related API: [Source Providers - Get File Contents](https://learn.microsoft.com/en-us/rest/api/azure/devops/build/source-providers/get-file-contents?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.
            commit_or_branch: The commit SHA or branch name to read from.
            path: Path to the file relative to the repository root.
            json: Decode the file as JSON instead of returning its text.

        Returns:
            The file's text, or the decoded structure when `json` is True.
        """
        spec = self._get_file_spec(repository, commit_or_branch, path, json)
        return self.request(spec)

    async def get_file_async(
        self,
        repository: str,
        commit_or_branch: str,
        path: str,
        json: bool = False,
    ) -> Union[str, Any]:
        """Asynchronous version of `get_file`."""
        spec = self._get_file_spec(repository, commit_or_branch, path, json)
        return await self.request_async(spec)

    def _get_spec(self, repository: str) -> RequestSpec:
        return self._build_spec(
            "GET", Endpoint(f"/git/repositories/{path_segment(repository)}")
        )

    def _get_file_spec(
        self, repository: str, commit_or_branch: str, path: str, json: bool
    ) -> RequestSpec:
        return self._build_spec(
            "GET",
            Endpoint("/sourceProviders/tfsgit/filecontents"),
            params={
                "repository": repository,
                "commitOrBranch": commit_or_branch,
                "path": path,
            },
            json=json,
        )
