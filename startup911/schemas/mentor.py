from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .tag import TagResponse


class MentorResponse(BaseModel):
    id: str
    name: str
    photo_url: Optional[str] = None
    superpower: Optional[str] = None
    about: Optional[str] = None
    languages: list[str] = Field(default_factory=list)
    rate_tier: Optional[str] = None
    linkedin_url: Optional[str] = None
    calendly_url: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("languages", mode="before")
    @classmethod
    def _languages_default(cls, value):
        return value or []


class ScoredMentorResponse(BaseModel):
    candidate: MentorResponse
    match_score: int
    matching_tags: list[TagResponse] = Field(default_factory=list)
    tier: int
    tier_label: str
    match_reasons: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class MentorMatchResponse(BaseModel):
    kind: str = "mentor"
    total: int
    criteria: dict[str, Optional[list[str] | str]]
    items: list[ScoredMentorResponse]

    model_config = {"from_attributes": True}


class MentorQuestionnaireResponse(BaseModel):
    INDUSTRY: list[TagResponse] = Field(default_factory=list)
    LANGUAGE: list[str] = Field(default_factory=list)
    BUDGET: list[str] = Field(default_factory=list)
