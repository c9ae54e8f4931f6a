from .tag import TagResponse, GroupedTagsResponse
from .grant import GrantResponse, GrantMatchResponse, ScoredGrantResponse
from .vc import VCResponse, VCMatchResponse, ScoredVCResponse, RegionOption, VCQuestionnaireResponse
from .mentor import MentorResponse, MentorMatchResponse, ScoredMentorResponse, MentorQuestionnaireResponse

__all__ = [
    "TagResponse",
    "GroupedTagsResponse",
    "GrantResponse",
    "GrantMatchResponse",
    "ScoredGrantResponse",
    "VCResponse",
    "VCMatchResponse",
    "ScoredVCResponse",
    "RegionOption",
    "VCQuestionnaireResponse",
    "MentorResponse",
    "MentorMatchResponse",
    "ScoredMentorResponse",
    "MentorQuestionnaireResponse",
]
