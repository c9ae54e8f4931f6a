from typing import Optional

from pydantic import BaseModel, Field


class TagResponse(BaseModel):
    id: int
    name: str
    type: Optional[str] = None

    model_config = {"from_attributes": True}


class GroupedTagsResponse(BaseModel):
    STAGE: list[TagResponse] = Field(default_factory=list)
    INDUSTRY: list[TagResponse] = Field(default_factory=list)
    REQUIREMENT: list[TagResponse] = Field(default_factory=list)
    LOCATION: list[TagResponse] = Field(default_factory=list)
    SOCIAL_IMPACT: list[TagResponse] = Field(default_factory=list)
    SPECIAL_CATEGORY: list[TagResponse] = Field(default_factory=list)
