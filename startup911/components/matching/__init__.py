from .repository import DirectoryRepository, RepositoryFetchError, SqlAlchemyDirectoryRepository
from .rules import CandidateKind
from .schemas import MatchResults, ScoredCandidate
from .service import (
    grouped_tags,
    match_grants,
    match_mentors,
    match_vcs,
    mentor_questionnaire_options,
    run_match,
    vc_questionnaire_options,
)

__all__ = [
    "CandidateKind",
    "DirectoryRepository",
    "MatchResults",
    "RepositoryFetchError",
    "ScoredCandidate",
    "SqlAlchemyDirectoryRepository",
    "grouped_tags",
    "match_grants",
    "match_mentors",
    "match_vcs",
    "mentor_questionnaire_options",
    "run_match",
    "vc_questionnaire_options",
]
