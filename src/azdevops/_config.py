from typing import Optional

from pydantic import BaseModel, Field


class Config(BaseModel):
    base_url: str
    secret: Optional[str] = None
    retry_count: int = Field(default=0, ge=0)
    timeout: Optional[float] = Field(default=None, gt=0)
