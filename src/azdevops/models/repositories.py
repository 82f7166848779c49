from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TeamProjectReference(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="id")
    name: Optional[str] = Field(default=None, alias="name")
    state: Optional[str] = Field(default=None, alias="state")


class Repository(BaseModel):
    """A Git repository hosted in an Azure DevOps project."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="id")
    name: str = Field(alias="name")
    default_branch: Optional[str] = Field(default=None, alias="defaultBranch")
    is_fork: bool = Field(default=False, alias="isFork")
    is_disabled: Optional[bool] = Field(default=None, alias="isDisabled")
    url: Optional[str] = Field(default=None, alias="url")
    remote_url: Optional[str] = Field(default=None, alias="remoteUrl")
    project: Optional[TeamProjectReference] = Field(default=None, alias="project")
