from fastapi import APIRouter, Depends

from ...components.matching.repository import SqlAlchemyDirectoryRepository
from ...components.matching.schemas import MatchResults
from ...components.matching.service import match_grants
from ...deps import get_directory_repository, get_raw_selection
from ...schemas.grant import GrantMatchResponse, ScoredGrantResponse

router = APIRouter(prefix="/grants", tags=["Grants"])


def _to_response(results: MatchResults) -> GrantMatchResponse:
    return GrantMatchResponse(
        kind=results.kind.value,
        total=results.total,
        criteria=results.criteria,
        items=[ScoredGrantResponse.model_validate(item, from_attributes=True) for item in results.items],
    )


@router.get("/results", response_model=GrantMatchResponse)
def grant_results(
    raw: dict = Depends(get_raw_selection),
    repo: SqlAlchemyDirectoryRepository = Depends(get_directory_repository),
):
    """Eligible grants ranked against the questionnaire answers.

    Query keys: ``stage``, ``industry``, ``location``, ``social_impact`` and
    ``requirement``, each a comma-separated list of tag ids.
    """
    return _to_response(match_grants(repo, raw))
