"""Read access to the directory tables used by matching.

The service layer depends only on ``DirectoryRepository``; the SQLAlchemy
implementation below is what the API wires in. Any database failure surfaces
as ``RepositoryFetchError`` with the driver error chained.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models.grant import Grant, grant_tags
from ...models.mentor import Mentor, mentor_tags
from ...models.tag import Tag
from ...models.vc import VC, vc_tags
from .rules import CandidateKind

logger = logging.getLogger("startup911.repository")


class RepositoryFetchError(RuntimeError):
    """A read from the tag store or candidate tables failed."""

    def __init__(self, message: str, kind: CandidateKind | None = None):
        super().__init__(message)
        self.kind = kind


class DirectoryRepository(Protocol):
    def fetch_all_tags(self) -> List[Tag]: ...

    def fetch_all_candidates(self, kind: CandidateKind) -> list: ...

    def fetch_tags_for_candidate(self, kind: CandidateKind, candidate_id) -> List[Tag]: ...

    def fetch_tags_for_candidates(self, kind: CandidateKind, candidate_ids: Sequence) -> Dict[object, List[Tag]]: ...


_CANDIDATE_TABLES = {
    CandidateKind.GRANT: (Grant, grant_tags, "grant_id"),
    CandidateKind.VC: (VC, vc_tags, "vc_id"),
    CandidateKind.MENTOR: (Mentor, mentor_tags, "mentor_id"),
}


class SqlAlchemyDirectoryRepository:
    """``DirectoryRepository`` backed by a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def fetch_all_tags(self) -> List[Tag]:
        try:
            return list(self.db.scalars(select(Tag).order_by(Tag.id)))
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch tags: %s", exc)
            raise RepositoryFetchError("Failed to fetch tags") from exc

    def fetch_all_candidates(self, kind: CandidateKind) -> list:
        kind = CandidateKind(kind)
        model = _CANDIDATE_TABLES[kind][0]
        stmt = select(model)
        if kind == CandidateKind.MENTOR:
            stmt = stmt.where(Mentor.is_active.is_(True)).order_by(Mentor.created_at, Mentor.id)
        else:
            stmt = stmt.order_by(model.id)
        try:
            return list(self.db.scalars(stmt))
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch %s candidates: %s", kind.value, exc)
            raise RepositoryFetchError(f"Failed to fetch {kind.value} candidates", kind=kind) from exc

    def fetch_tags_for_candidate(self, kind: CandidateKind, candidate_id) -> List[Tag]:
        return self.fetch_tags_for_candidates(kind, [candidate_id]).get(candidate_id, [])

    def fetch_tags_for_candidates(self, kind: CandidateKind, candidate_ids: Sequence) -> Dict[object, List[Tag]]:
        """One join for all candidates: ``{candidate_id: [Tag, ...]}`` in tag id order."""
        kind = CandidateKind(kind)
        ids = list(candidate_ids)
        tags_by_candidate: Dict[object, List[Tag]] = {cid: [] for cid in ids}
        if not ids:
            return tags_by_candidate

        _, link_table, fk_column = _CANDIDATE_TABLES[kind]
        owner = link_table.c[fk_column]
        stmt = (
            select(owner, Tag)
            .select_from(link_table)
            .join(Tag, Tag.id == link_table.c.tag_id)
            .where(owner.in_(ids))
            .order_by(owner, Tag.id)
        )
        try:
            rows = self.db.execute(stmt).all()
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch %s tag links: %s", kind.value, exc)
            raise RepositoryFetchError(f"Failed to fetch {kind.value} tags", kind=kind) from exc

        for candidate_id, tag in rows:
            tags_by_candidate.setdefault(candidate_id, []).append(tag)
        return tags_by_candidate


def tags_of_type(tags: Iterable[Tag], tag_type: str) -> List[Tag]:
    return [t for t in tags if t.type == tag_type]
