"""
Shared request dependencies for the matching routers.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .components.matching.repository import SqlAlchemyDirectoryRepository
from .platform.database import get_db


def get_directory_repository(db: Session = Depends(get_db)) -> SqlAlchemyDirectoryRepository:
    return SqlAlchemyDirectoryRepository(db)


def get_raw_selection(request: Request) -> dict[str, list[str]]:
    """Query string as ``{key: [values...]}``; repeated keys are kept."""
    raw: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        raw.setdefault(key, []).append(value)
    return raw


__all__ = ["get_directory_repository", "get_raw_selection"]
