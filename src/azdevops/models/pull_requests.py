from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GitCommitRef(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    commit_id: str = Field(alias="commitId")
    url: Optional[str] = Field(default=None, alias="url")


class PullRequest(BaseModel):
    """A Git pull request.

    Only the fields this client relies on are declared; anything else the
    service returns is kept as extra attributes.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    pull_request_id: Optional[int] = Field(default=None, alias="pullRequestId")
    title: Optional[str] = Field(default=None, alias="title")
    description: Optional[str] = Field(default=None, alias="description")
    status: Optional[str] = Field(default=None, alias="status")
    is_draft: Optional[bool] = Field(default=None, alias="isDraft")
    source_ref_name: Optional[str] = Field(default=None, alias="sourceRefName")
    target_ref_name: Optional[str] = Field(default=None, alias="targetRefName")
    merge_status: Optional[str] = Field(default=None, alias="mergeStatus")
    last_merge_commit: Optional[GitCommitRef] = Field(
        default=None, alias="lastMergeCommit"
    )
    last_merge_target_commit: Optional[GitCommitRef] = Field(
        default=None, alias="lastMergeTargetCommit"
    )
    last_merge_source_commit: Optional[GitCommitRef] = Field(
        default=None, alias="lastMergeSourceCommit"
    )


class PullRequestLabel(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="id")
    name: str = Field(alias="name")
    active: bool = Field(default=True, alias="active")


class CommentThreadStatus(str, Enum):
    ACTIVE = "active"
    FIXED = "fixed"
    WONT_FIX = "wontFix"
    CLOSED = "closed"
    BY_DESIGN = "byDesign"
    PENDING = "pending"


class Comment(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[int] = Field(default=None, alias="id")
    content: Optional[str] = Field(default=None, alias="content")
    comment_type: Optional[str] = Field(default=None, alias="commentType")
    parent_comment_id: Optional[int] = Field(default=None, alias="parentCommentId")


class CommentThread(BaseModel):
    """A discussion thread on a pull request.

    Each comment posted through this client starts a new thread.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        extra="allow",
    )
    id: Optional[int] = Field(default=None, alias="id")
    status: Optional[CommentThreadStatus] = Field(default=None, alias="status")
    comments: List[Comment] = Field(default_factory=list, alias="comments")
    is_deleted: Optional[bool] = Field(default=None, alias="isDeleted")
