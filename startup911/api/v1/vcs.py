from fastapi import APIRouter, Depends

from ...components.matching.repository import SqlAlchemyDirectoryRepository
from ...components.matching.schemas import MatchResults
from ...components.matching.service import match_vcs, vc_questionnaire_options
from ...deps import get_directory_repository, get_raw_selection
from ...schemas.vc import ScoredVCResponse, VCMatchResponse, VCQuestionnaireResponse

router = APIRouter(prefix="/vcs", tags=["VCs"])


def _to_response(results: MatchResults) -> VCMatchResponse:
    return VCMatchResponse(
        kind=results.kind.value,
        total=results.total,
        criteria=results.criteria,
        items=[ScoredVCResponse.model_validate(item, from_attributes=True) for item in results.items],
    )


@router.get("/questionnaire", response_model=VCQuestionnaireResponse)
def vc_questionnaire(repo: SqlAlchemyDirectoryRepository = Depends(get_directory_repository)):
    return VCQuestionnaireResponse.model_validate(vc_questionnaire_options(repo), from_attributes=True)


@router.get("/results", response_model=VCMatchResponse)
def vc_results(
    raw: dict = Depends(get_raw_selection),
    repo: SqlAlchemyDirectoryRepository = Depends(get_directory_repository),
):
    """VCs ranked by stage, industry and investment type overlap.

    ``location`` takes region identifiers such as ``south_asia``; it only adds
    a "Based in" reason and never changes the score.
    """
    return _to_response(match_vcs(repo, raw))
