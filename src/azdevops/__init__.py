"""Python client for the Azure DevOps Git REST API.

Example:
    ```python
    from azdevops import AzureDevOps

    client = AzureDevOps(organization="contoso", project="web", pat="...")
    pr = client.pull_requests.get("web-app", 42)
    client.pull_requests.add_label("web-app", 42, "needs-review")
    ```
"""

from ._azure_devops import AzureDevOps
from ._config import Config
from ._utils import RequestSpec
from .models import (
    BaseUrlMissingError,
    CommentThread,
    CommentThreadStatus,
    ProjectMissingError,
    PullRequest,
    PullRequestLabel,
    Repository,
    RequestFailure,
    TransportFailure,
)

__all__ = [
    "AzureDevOps",
    "BaseUrlMissingError",
    "CommentThread",
    "CommentThreadStatus",
    "Config",
    "ProjectMissingError",
    "PullRequest",
    "PullRequestLabel",
    "Repository",
    "RequestFailure",
    "RequestSpec",
    "TransportFailure",
]
