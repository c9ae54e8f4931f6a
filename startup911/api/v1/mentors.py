from fastapi import APIRouter, Depends

from ...components.matching.repository import SqlAlchemyDirectoryRepository
from ...components.matching.schemas import MatchResults
from ...components.matching.service import match_mentors, mentor_questionnaire_options
from ...deps import get_directory_repository, get_raw_selection
from ...platform.config import settings
from ...schemas.mentor import MentorMatchResponse, MentorQuestionnaireResponse, ScoredMentorResponse

router = APIRouter(prefix="/mentors", tags=["Mentors"])


def _to_response(results: MatchResults) -> MentorMatchResponse:
    return MentorMatchResponse(
        kind=results.kind.value,
        total=results.total,
        criteria=results.criteria,
        items=[ScoredMentorResponse.model_validate(item, from_attributes=True) for item in results.items],
    )


@router.get("/questionnaire", response_model=MentorQuestionnaireResponse)
def mentor_questionnaire(repo: SqlAlchemyDirectoryRepository = Depends(get_directory_repository)):
    return MentorQuestionnaireResponse.model_validate(mentor_questionnaire_options(repo), from_attributes=True)


@router.get("/results", response_model=MentorMatchResponse)
def mentor_results(
    raw: dict = Depends(get_raw_selection),
    repo: SqlAlchemyDirectoryRepository = Depends(get_directory_repository),
):
    return _to_response(match_mentors(repo, raw, flags=settings.matching_flags))
