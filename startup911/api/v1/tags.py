from fastapi import APIRouter, Depends

from ...components.matching.repository import SqlAlchemyDirectoryRepository
from ...components.matching.service import grouped_tags
from ...deps import get_directory_repository
from ...schemas.tag import GroupedTagsResponse

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=GroupedTagsResponse)
def list_grouped_tags(repo: SqlAlchemyDirectoryRepository = Depends(get_directory_repository)):
    """All typed tags, grouped by category and sorted by name."""
    return GroupedTagsResponse.model_validate(grouped_tags(repo), from_attributes=True)
