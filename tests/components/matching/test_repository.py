"""Tests for the SQLAlchemy directory repository against SQLite."""

import pytest
from sqlalchemy.exc import OperationalError

from startup911.components.matching.repository import (
    RepositoryFetchError,
    SqlAlchemyDirectoryRepository,
    tags_of_type,
)
from startup911.components.matching.rules import CandidateKind
from tests.conftest import create_grant, create_mentor, create_tag, create_vc


class TestSqlAlchemyDirectoryRepository:
    def test_fetch_all_tags_in_id_order(self, db):
        b = create_tag(db, "Seed", "STAGE")
        a = create_tag(db, "Fintech", "INDUSTRY")
        repo = SqlAlchemyDirectoryRepository(db)
        assert [t.id for t in repo.fetch_all_tags()] == [b.id, a.id]

    def test_fetch_all_candidates_for_grants_and_vcs(self, db):
        g1 = create_grant(db, "One")
        g2 = create_grant(db, "Two")
        vc = create_vc(db, "Fund")
        repo = SqlAlchemyDirectoryRepository(db)
        assert [g.id for g in repo.fetch_all_candidates(CandidateKind.GRANT)] == [g1.id, g2.id]
        assert [v.id for v in repo.fetch_all_candidates("vc")] == [vc.id]

    def test_inactive_mentors_are_not_candidates(self, db):
        active = create_mentor(db, "Active")
        create_mentor(db, "Retired", is_active=False)
        repo = SqlAlchemyDirectoryRepository(db)
        assert [m.id for m in repo.fetch_all_candidates(CandidateKind.MENTOR)] == [active.id]

    def test_fetch_tags_for_candidates_batches(self, db):
        seed = create_tag(db, "Seed", "STAGE")
        fintech = create_tag(db, "Fintech", "INDUSTRY")
        tagged = create_grant(db, "Tagged", tags=[fintech, seed])
        bare = create_grant(db, "Bare")
        repo = SqlAlchemyDirectoryRepository(db)
        tags = repo.fetch_tags_for_candidates(CandidateKind.GRANT, [tagged.id, bare.id])
        assert [t.name for t in tags[tagged.id]] == ["Seed", "Fintech"]
        assert tags[bare.id] == []

    def test_fetch_tags_for_mentor(self, db):
        saas = create_tag(db, "SaaS", "INDUSTRY")
        mentor = create_mentor(db, "A", tags=[saas])
        repo = SqlAlchemyDirectoryRepository(db)
        assert [t.name for t in repo.fetch_tags_for_candidate(CandidateKind.MENTOR, mentor.id)] == ["SaaS"]

    def test_no_ids_skips_query(self, db):
        assert SqlAlchemyDirectoryRepository(db).fetch_tags_for_candidates(CandidateKind.VC, []) == {}

    def test_database_error_is_wrapped(self, db, monkeypatch):
        def _boom(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        monkeypatch.setattr(db, "scalars", _boom)
        with pytest.raises(RepositoryFetchError) as excinfo:
            SqlAlchemyDirectoryRepository(db).fetch_all_candidates(CandidateKind.GRANT)
        assert excinfo.value.kind == CandidateKind.GRANT
        assert isinstance(excinfo.value.__cause__, OperationalError)


def test_tags_of_type(db):
    create_tag(db, "DPIIT Registration", "REQUIREMENT")
    create_tag(db, "Seed", "STAGE")
    tags = SqlAlchemyDirectoryRepository(db).fetch_all_tags()
    assert [t.name for t in tags_of_type(tags, "REQUIREMENT")] == ["DPIIT Registration"]
