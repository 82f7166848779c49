from .errors import BaseUrlMissingError, ProjectMissingError
from .exceptions import RequestFailure, TransportFailure
from .pull_requests import (
    Comment,
    CommentThread,
    CommentThreadStatus,
    GitCommitRef,
    PullRequest,
    PullRequestLabel,
)
from .repositories import Repository, TeamProjectReference

__all__ = [
    "BaseUrlMissingError",
    "Comment",
    "CommentThread",
    "CommentThreadStatus",
    "GitCommitRef",
    "ProjectMissingError",
    "PullRequest",
    "PullRequestLabel",
    "Repository",
    "RequestFailure",
    "TeamProjectReference",
    "TransportFailure",
]
