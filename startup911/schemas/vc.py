from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .tag import TagResponse


class VCResponse(BaseModel):
    id: int
    name: str
    website: Optional[str] = None
    linkedin: Optional[str] = None
    country_based_of: Optional[str] = None
    about: Optional[str] = None
    key_person: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ScoredVCResponse(BaseModel):
    candidate: VCResponse
    match_score: int
    matching_tags: list[TagResponse] = Field(default_factory=list)
    tier: int
    tier_label: str
    match_reasons: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class VCMatchResponse(BaseModel):
    kind: str = "vc"
    total: int
    # location holds region identifiers, the rest tag ids
    criteria: dict[str, list[int | str]]
    items: list[ScoredVCResponse]

    model_config = {"from_attributes": True}


class RegionOption(BaseModel):
    id: str
    name: str
    vc_count: int
    label: str
    countries: list[str] = Field(default_factory=list)


class VCQuestionnaireResponse(BaseModel):
    STAGE: list[TagResponse] = Field(default_factory=list)
    INDUSTRY: list[TagResponse] = Field(default_factory=list)
    INVESTMENT_TYPE: list[TagResponse] = Field(default_factory=list)
    LOCATION: list[RegionOption] = Field(default_factory=list)
