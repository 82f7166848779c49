from typing import List, Union

from httpx import Response

from .._utils import Endpoint, RequestSpec, path_segment
from ..models.pull_requests import (
    CommentThread,
    CommentThreadStatus,
    PullRequest,
    PullRequestLabel,
)
from ._base_service import BaseService


class PullRequestsService(BaseService):
    """Service for Git pull requests, their labels and comment threads.

    Every operation takes the repository (name or ID) and the pull request
    ID. The labels endpoint accepts either a label's ID or its name.
    """

    def get(self, repository: str, pr_id: Union[int, str]) -> PullRequest:
        """Retrieve a pull request.

        Related API: [Pull Requests - Get Pull Request](https://learn.microsoft.com/en-us/rest/api/azure/devops/git/pull-requests/get-pull-request?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.
            pr_id: The pull request ID.

        Returns:
            PullRequest: The pull request, including its last merge commits.
        """
        spec = self._get_spec(repository, pr_id)
        return PullRequest.model_validate(self.request(spec))

    async def get_async(self, repository: str, pr_id: Union[int, str]) -> PullRequest:
        spec = self._get_spec(repository, pr_id)
        return PullRequest.model_validate(await self.request_async(spec))

    def get_labels(
        self, repository: str, pr_id: Union[int, str]
    ) -> List[PullRequestLabel]:
        """List the labels assigned to a pull request.

        Related API: [Pull Request Labels - List](https://learn.microsoft.com/en-us/rest/api/azure/devops/git/pull-request-labels/list?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.
            pr_id: The pull request ID.

        Returns:
            List[PullRequestLabel]: The labels, active or not.
        """
        spec = self._get_labels_spec(repository, pr_id)
        return self._labels_from_response(self.request(spec))

    async def get_labels_async(
        self, repository: str, pr_id: Union[int, str]
    ) -> List[PullRequestLabel]:
        spec = self._get_labels_spec(repository, pr_id)
        return self._labels_from_response(await self.request_async(spec))

    def add_label(
        self, repository: str, pr_id: Union[int, str], name: str
    ) -> PullRequestLabel:
        """Add a label to a pull request.

        Related API: [Pull Request Labels - Create](https://learn.microsoft.com/en-us/rest/api/azure/devops/git/pull-request-labels/create?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.
            pr_id: The pull request ID.
            name: The label to add. It is created in the project if needed.

        Returns:
            PullRequestLabel: The label as stored by the service.

        Examples:
            >>> client.pull_requests.add_label("my-repo", 42, "bug")
            PullRequestLabel(id='...', name='bug', active=True)
        """
        spec = self._add_label_spec(repository, pr_id, name)
        return PullRequestLabel.model_validate(self.request(spec))

    async def add_label_async(
        self, repository: str, pr_id: Union[int, str], name: str
    ) -> PullRequestLabel:
        spec = self._add_label_spec(repository, pr_id, name)
        return PullRequestLabel.model_validate(await self.request_async(spec))

    def delete_label(
        self, repository: str, pr_id: Union[int, str], label_id_or_name: str
    ) -> Response:
        """Remove a label from a pull request.

        The service answers with an empty body, so the raw response is
        returned undecoded.

        Related API: [Pull Request Labels - Delete](https://learn.microsoft.com/en-us/rest/api/azure/devops/git/pull-request-labels/delete?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.
            pr_id: The pull request ID.
            label_id_or_name: The label's ID or name.

        Returns:
            Response: The raw HTTP response.
        """
        spec = self._delete_label_spec(repository, pr_id, label_id_or_name)
        return self.request(spec)

    async def delete_label_async(
        self, repository: str, pr_id: Union[int, str], label_id_or_name: str
    ) -> Response:
        spec = self._delete_label_spec(repository, pr_id, label_id_or_name)
        return await self.request_async(spec)

    def post_comment(
        self,
        repository: str,
        pr_id: Union[int, str],
        content: str,
        status: CommentThreadStatus = CommentThreadStatus.ACTIVE,
    ) -> CommentThread:
        """Start a new comment thread on a pull request.

        Related API: [Pull Request Threads - Create](https://learn.microsoft.com/en-us/rest/api/azure/devops/git/pull-request-threads/create?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.
            pr_id: The pull request ID.
            content: The comment text (markdown).
            status: The status of the new thread. Use `CommentThreadStatus.FIXED`
                for a comment that needs no follow-up.

        Returns:
            CommentThread: The created thread with its single comment.
        """
        spec = self._post_comment_spec(repository, pr_id, content, status)
        return CommentThread.model_validate(self.request(spec))

    async def post_comment_async(
        self,
        repository: str,
        pr_id: Union[int, str],
        content: str,
        status: CommentThreadStatus = CommentThreadStatus.ACTIVE,
    ) -> CommentThread:
        spec = self._post_comment_spec(repository, pr_id, content, status)
        return CommentThread.model_validate(await self.request_async(spec))

    def update_draft_state(
        self, repository: str, pr_id: Union[int, str], is_draft: bool
    ) -> PullRequest:
        """Mark a pull request as draft or as ready for review.

        Related API: [Pull Requests - Update](https://learn.microsoft.com/en-us/rest/api/azure/devops/git/pull-requests/update?view=azure-devops-rest-7.0)

        Args:
            repository: The repository name or ID.
            pr_id: The pull request ID.
            is_draft: Whether the pull request should be a draft.

        Returns:
            PullRequest: The updated pull request.
        """
        spec = self._update_draft_state_spec(repository, pr_id, is_draft)
        return PullRequest.model_validate(self.request(spec))

    async def update_draft_state_async(
        self, repository: str, pr_id: Union[int, str], is_draft: bool
    ) -> PullRequest:
        spec = self._update_draft_state_spec(repository, pr_id, is_draft)
        return PullRequest.model_validate(await self.request_async(spec))

    def _labels_from_response(self, payload: dict) -> List[PullRequestLabel]:
        return [PullRequestLabel.model_validate(item) for item in payload.get("value", [])]

    def _pull_request_endpoint(
        self, repository: str, pr_id: Union[int, str], suffix: str = ""
    ) -> Endpoint:
        return Endpoint(
            f"/git/repositories/{path_segment(repository)}"
            f"/pullrequests/{path_segment(pr_id)}{suffix}"
        )

    def _get_spec(self, repository: str, pr_id: Union[int, str]) -> RequestSpec:
        return self._build_spec("GET", self._pull_request_endpoint(repository, pr_id))

    def _get_labels_spec(self, repository: str, pr_id: Union[int, str]) -> RequestSpec:
        return self._build_spec(
            "GET", self._pull_request_endpoint(repository, pr_id, "/labels")
        )

    def _add_label_spec(
        self, repository: str, pr_id: Union[int, str], name: str
    ) -> RequestSpec:
        return self._build_spec(
            "POST",
            self._pull_request_endpoint(repository, pr_id, "/labels"),
            body={"name": name},
        )

    def _delete_label_spec(
        self, repository: str, pr_id: Union[int, str], label_id_or_name: str
    ) -> RequestSpec:
        return self._build_spec(
            "DELETE",
            self._pull_request_endpoint(
                repository, pr_id, f"/labels/{path_segment(label_id_or_name)}"
            ),
            parse=False,
        )

    def _post_comment_spec(
        self,
        repository: str,
        pr_id: Union[int, str],
        content: str,
        status: CommentThreadStatus,
    ) -> RequestSpec:
        return self._build_spec(
            "POST",
            self._pull_request_endpoint(repository, pr_id, "/threads"),
            body={
                "comments": [{"commentType": "text", "content": content}],
                "status": CommentThreadStatus(status).value,
            },
        )

    def _update_draft_state_spec(
        self, repository: str, pr_id: Union[int, str], is_draft: bool
    ) -> RequestSpec:
        return self._build_spec(
            "PATCH",
            self._pull_request_endpoint(repository, pr_id),
            body={"isDraft": is_draft},
        )
