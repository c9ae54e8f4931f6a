from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from .tag import TagResponse


class GrantResponse(BaseModel):
    id: int
    name: str
    organization: Optional[str] = None
    details: Optional[str] = None
    status: Optional[str] = None
    amount_max: Optional[str] = None
    dpiit_required: Optional[bool] = None
    tech_focus_required: Optional[bool] = None
    patent_required: Optional[bool] = None
    prototype_required: Optional[bool] = None
    technical_cofounder_required: Optional[bool] = None
    full_time_commitment: Optional[bool] = None
    women_led_focus: Optional[bool] = None
    student_focus: Optional[bool] = None
    mentorship_included: Optional[bool] = None
    workspace_provided: Optional[bool] = None
    network_access: Optional[bool] = None
    application_deadline: Optional[date] = None
    application_link: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ScoredGrantResponse(BaseModel):
    candidate: GrantResponse
    match_score: int
    matching_tags: list[TagResponse] = Field(default_factory=list)
    tier: int
    tier_label: str
    match_reasons: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class GrantMatchResponse(BaseModel):
    kind: str = "grant"
    total: int
    criteria: dict[str, list[int]]
    items: list[ScoredGrantResponse]

    model_config = {"from_attributes": True}
