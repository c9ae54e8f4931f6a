"""Matching orchestration facade.

Pipeline per request: parse the selection, load candidates and their tags
through the repository, apply hard filters, score, tier, rank. Scoring rules
live in ``scoring_core.py``; this module only wires the steps together.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Callable, Dict, List, Optional, Sequence

from ...platform.config import MatchingFlags, settings
from .eligibility import filter_eligible_grants, filter_mentors_by_budget
from .ranking import rank
from .repository import DirectoryRepository, tags_of_type
from .rules import (
    GEOGRAPHICAL_REGIONS,
    GROUPED_TAG_TYPES,
    LANGUAGE_OPTIONS,
    MENTOR_INDUSTRIES,
    MENTOR_INDUSTRY_TAG_TYPES,
    RATE_TIER_OPTIONS,
    VC_FUNDING_STAGES,
    VC_INDUSTRIES,
    VC_INVESTMENT_TYPES,
    CandidateKind,
)
from .schemas import MatchResults, ScoredCandidate
from .scoring_core import MatchOutcome, score_grant, score_mentor, score_vc
from .selection import GrantSelection, MentorSelection, RawParams, VCSelection
from .tiers import classify_tier

logger = logging.getLogger("startup911.matching")


def _score_all(
    kind: CandidateKind,
    candidates: Sequence[Any],
    repo: DirectoryRepository,
    scorer: Callable[[Any, list], MatchOutcome],
) -> List[ScoredCandidate]:
    tags_by_candidate = repo.fetch_tags_for_candidates(kind, [c.id for c in candidates])
    scored: List[ScoredCandidate] = []
    for candidate in candidates:
        outcome = scorer(candidate, tags_by_candidate.get(candidate.id, []))
        tier, label = classify_tier(kind, outcome.matched_primary, outcome.matched_secondary)
        scored.append(
            ScoredCandidate(
                candidate=candidate,
                match_score=outcome.score,
                matching_tags=outcome.matching_tags,
                tier=tier,
                tier_label=label,
                match_reasons=outcome.reasons,
            )
        )
    return scored


def _log_summary(results: MatchResults) -> None:
    tiers = Counter(item.tier for item in results.items)
    logger.info(
        "kind=%s considered=%d returned=%d tiers=%s",
        results.kind.value,
        results.considered,
        results.total,
        {t: tiers[t] for t in sorted(tiers)},
    )


def match_grants(repo: DirectoryRepository, raw_params: RawParams | None) -> MatchResults:
    selection = GrantSelection.from_query(raw_params)
    grants = repo.fetch_all_candidates(CandidateKind.GRANT)
    requirement_tags = tags_of_type(repo.fetch_all_tags(), "REQUIREMENT")

    eligible = filter_eligible_grants(grants, selection.requirement, requirement_tags)
    scored = _score_all(
        CandidateKind.GRANT,
        eligible,
        repo,
        lambda grant, tags: score_grant(grant, tags, selection),
    )
    results = MatchResults(
        kind=CandidateKind.GRANT,
        criteria=selection.criteria(),
        items=rank(CandidateKind.GRANT, scored),
        considered=len(grants),
    )
    _log_summary(results)
    return results


def match_vcs(repo: DirectoryRepository, raw_params: RawParams | None) -> MatchResults:
    selection = VCSelection.from_query(raw_params)
    vcs = repo.fetch_all_candidates(CandidateKind.VC)
    scored = _score_all(
        CandidateKind.VC,
        vcs,
        repo,
        lambda vc, tags: score_vc(vc, tags, selection),
    )
    results = MatchResults(
        kind=CandidateKind.VC,
        criteria=selection.criteria(),
        items=rank(CandidateKind.VC, scored),
        considered=len(vcs),
    )
    _log_summary(results)
    return results


def match_mentors(
    repo: DirectoryRepository,
    raw_params: RawParams | None,
    flags: Optional[MatchingFlags] = None,
) -> MatchResults:
    flags = flags or settings.matching_flags
    selection = MentorSelection.from_query(raw_params)
    mentors = repo.fetch_all_candidates(CandidateKind.MENTOR)

    candidates = mentors
    if flags.mentor_budget_hard_filter:
        candidates = filter_mentors_by_budget(mentors, selection.budget)

    scored = _score_all(
        CandidateKind.MENTOR,
        candidates,
        repo,
        lambda mentor, tags: score_mentor(mentor, tags, selection),
    )
    results = MatchResults(
        kind=CandidateKind.MENTOR,
        criteria=selection.criteria(),
        items=rank(CandidateKind.MENTOR, scored),
        considered=len(mentors),
    )
    _log_summary(results)
    return results


def run_match(
    kind: CandidateKind,
    repo: DirectoryRepository,
    raw_params: RawParams | None,
    flags: Optional[MatchingFlags] = None,
) -> MatchResults:
    kind = CandidateKind(kind)
    if kind == CandidateKind.GRANT:
        return match_grants(repo, raw_params)
    if kind == CandidateKind.VC:
        return match_vcs(repo, raw_params)
    return match_mentors(repo, raw_params, flags=flags)


# ---------------------------------------------------------------------------
# Questionnaire options
# ---------------------------------------------------------------------------

def grouped_tags(repo: DirectoryRepository) -> Dict[str, list]:
    """Typed tags grouped by category, each group sorted by name."""
    groups: Dict[str, list] = {tag_type: [] for tag_type in GROUPED_TAG_TYPES}
    for tag in repo.fetch_all_tags():
        if tag.type in groups:
            groups[tag.type].append(tag)
    for tag_type in groups:
        groups[tag_type].sort(key=lambda t: t.name)
    return groups


def _vc_bucket(tag) -> Optional[str]:
    # Known names win over the stored type; VC tags are often loaded untyped
    if tag.name in VC_FUNDING_STAGES:
        return "STAGE"
    if tag.name in VC_INVESTMENT_TYPES:
        return "INVESTMENT_TYPE"
    if tag.name in VC_INDUSTRIES:
        return "INDUSTRY"
    if tag.type in ("STAGE", "INDUSTRY", "INVESTMENT_TYPE"):
        return tag.type
    return None


def vc_questionnaire_options(repo: DirectoryRepository) -> Dict[str, list]:
    """Tags in use by VCs bucketed by name, plus regions that have VCs."""
    vcs = repo.fetch_all_candidates(CandidateKind.VC)
    tags_by_vc = repo.fetch_tags_for_candidates(CandidateKind.VC, [vc.id for vc in vcs])

    seen = {}
    for tags in tags_by_vc.values():
        for tag in tags:
            seen.setdefault(tag.id, tag)

    options: Dict[str, list] = {"STAGE": [], "INDUSTRY": [], "INVESTMENT_TYPE": [], "LOCATION": []}
    for tag in sorted(seen.values(), key=lambda t: t.name):
        bucket = _vc_bucket(tag)
        if bucket:
            options[bucket].append(tag)

    country_counts = Counter((vc.country_based_of or "").strip() for vc in vcs if vc.country_based_of)
    for region_id, (name, countries) in GEOGRAPHICAL_REGIONS.items():
        present = [c for c in countries if c in country_counts]
        if not present:
            continue
        count = sum(country_counts[c] for c in present)
        options["LOCATION"].append(
            {
                "id": region_id,
                "name": name,
                "vc_count": count,
                "label": f"{name} ({count} VCs)",
                "countries": present,
            }
        )
    return options


def mentor_questionnaire_options(repo: DirectoryRepository) -> Dict[str, list]:
    industries = [
        tag for tag in repo.fetch_all_tags()
        if tag.type in MENTOR_INDUSTRY_TAG_TYPES or tag.name in MENTOR_INDUSTRIES
    ]
    industries.sort(key=lambda t: t.name)
    return {
        "INDUSTRY": industries,
        "LANGUAGE": list(LANGUAGE_OPTIONS),
        "BUDGET": list(RATE_TIER_OPTIONS),
    }
