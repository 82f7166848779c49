from .api_client import ApiClient
from .pull_requests_service import PullRequestsService
from .repositories_service import RepositoriesService

__all__ = [
    "ApiClient",
    "PullRequestsService",
    "RepositoriesService",
]
