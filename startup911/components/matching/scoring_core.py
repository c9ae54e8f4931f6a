"""Per-candidate match scoring for grants, VCs and mentors.

Every function here is pure: a candidate, its tags and the user's selection
go in, a ``MatchOutcome`` comes out. Each category awards its weight at most
once no matter how many tags overlap, and no category ever subtracts, so a
larger overlap can only keep or raise the score.

The two flags on the outcome drive the tier:

- grants: stage -> primary, industry -> secondary
- VCs: stage -> primary, industry (or sector agnostic) -> secondary
- mentors: industry expertise -> primary, language -> secondary
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set

from ...models.grant import Grant
from ...models.mentor import Mentor
from ...models.tag import Tag
from ...models.vc import VC
from .rules import (
    GEOGRAPHICAL_REGIONS,
    GRANT_WEIGHTS,
    MENTOR_INDUSTRY_TAG_TYPES,
    MENTOR_WEIGHTS,
    SECTOR_AGNOSTIC_MARKER,
    VC_WEIGHTS,
)
from .selection import GrantSelection, MentorSelection, VCSelection


@dataclass
class MatchOutcome:
    score: int = 0
    matching_tags: List[Tag] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)
    matched_primary: bool = False
    matched_secondary: bool = False

    def award(self, points: int, reason: str, tags: Sequence[Tag] = ()) -> None:
        self.score += points
        self.matching_tags.extend(tags)
        self.reasons.append(reason)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _join_names(values: Iterable[str]) -> str:
    return ", ".join(values)


def _tags_with_ids(tags: Sequence[Tag], ids: Iterable[int]) -> List[Tag]:
    wanted = set(ids)
    if not wanted:
        return []
    return [tag for tag in tags if tag.id in wanted]


def _casefolded(values: Iterable[str]) -> Set[str]:
    return {v.strip().casefold() for v in values if v and v.strip()}


def is_sector_agnostic(tag: Tag) -> bool:
    return SECTOR_AGNOSTIC_MARKER in (tag.name or "").casefold()


def countries_for_regions(region_ids: Iterable[str]) -> Set[str]:
    """Countries covered by the given region identifiers. Unknown ids are ignored."""
    countries: Set[str] = set()
    for region_id in region_ids:
        region = GEOGRAPHICAL_REGIONS.get(region_id.strip().lower())
        if region:
            countries.update(region[1])
    return countries


# ---------------------------------------------------------------------------
# Grants
# ---------------------------------------------------------------------------

def score_grant(grant: Grant, tags: Sequence[Tag], selection: GrantSelection) -> MatchOutcome:
    outcome = MatchOutcome()

    stage_tags = _tags_with_ids(tags, selection.stage)
    if stage_tags:
        outcome.award(
            GRANT_WEIGHTS["stage"],
            f"Suitable for {_join_names(t.name for t in stage_tags)} stage",
            stage_tags,
        )
        outcome.matched_primary = True

    industry_tags = _tags_with_ids(tags, selection.industry)
    if industry_tags:
        outcome.award(
            GRANT_WEIGHTS["industry"],
            f"Targets {_join_names(t.name for t in industry_tags)} industry",
            industry_tags,
        )
        outcome.matched_secondary = True

    location_tags = _tags_with_ids(tags, selection.location)
    if location_tags:
        outcome.award(
            GRANT_WEIGHTS["location"],
            f"Available in {_join_names(t.name for t in location_tags)}",
            location_tags,
        )

    impact_tags = _tags_with_ids(tags, selection.social_impact)
    if impact_tags:
        outcome.award(
            GRANT_WEIGHTS["social_impact"],
            f"Supports {_join_names(t.name for t in impact_tags)} impact",
            impact_tags,
        )

    return outcome


# ---------------------------------------------------------------------------
# VCs
# ---------------------------------------------------------------------------

def score_vc(vc: VC, tags: Sequence[Tag], selection: VCSelection) -> MatchOutcome:
    outcome = MatchOutcome()

    stage_tags = _tags_with_ids(tags, selection.stage)
    if stage_tags:
        outcome.award(
            VC_WEIGHTS["stage"],
            f"Invests in {_join_names(t.name for t in stage_tags)} stage",
            stage_tags,
        )
        outcome.matched_primary = True

    if selection.industry:
        agnostic_tags = [t for t in tags if is_sector_agnostic(t)]
        if agnostic_tags:
            # Wildcard industry: full weight once, specific overlap not scored again
            outcome.award(
                VC_WEIGHTS["industry"],
                f"Invests across all sectors ({_join_names(t.name for t in agnostic_tags)})",
                agnostic_tags,
            )
            outcome.matched_secondary = True
        else:
            industry_tags = _tags_with_ids(tags, selection.industry)
            if industry_tags:
                outcome.award(
                    VC_WEIGHTS["industry"],
                    f"Focuses on {_join_names(t.name for t in industry_tags)} industry",
                    industry_tags,
                )
                outcome.matched_secondary = True

    investment_tags = _tags_with_ids(tags, selection.investment_type)
    if investment_tags:
        outcome.award(
            VC_WEIGHTS["investment_type"],
            f"Offers {_join_names(t.name for t in investment_tags)} investment",
            investment_tags,
        )

    # Region preference is informational only: no points, no tier flag.
    country = (vc.country_based_of or "").strip()
    if country and selection.location and country in countries_for_regions(selection.location):
        outcome.reasons.append(f"Based in {country}")

    return outcome


# ---------------------------------------------------------------------------
# Mentors
# ---------------------------------------------------------------------------

def _mentor_industry_tags(tags: Sequence[Tag], wanted: Set[str]) -> List[Tag]:
    return [
        tag for tag in tags
        if (tag.type is None or tag.type in MENTOR_INDUSTRY_TAG_TYPES)
        and (tag.name or "").strip().casefold() in wanted
    ]


def score_mentor(mentor: Mentor, tags: Sequence[Tag], selection: MentorSelection) -> MatchOutcome:
    outcome = MatchOutcome()

    wanted_industries = _casefolded(selection.industries)
    industry_tags = _mentor_industry_tags(tags, wanted_industries) if wanted_industries else []
    if industry_tags:
        outcome.award(
            MENTOR_WEIGHTS["industries"],
            f"Expert in {_join_names(t.name for t in industry_tags)}",
            industry_tags,
        )
        outcome.matched_primary = True

    wanted_languages = _casefolded(selection.languages)
    spoken = [
        lang for lang in (mentor.languages or [])
        if isinstance(lang, str) and lang.strip().casefold() in wanted_languages
    ]
    if spoken:
        outcome.award(MENTOR_WEIGHTS["languages"], f"Speaks {_join_names(spoken)}")
        outcome.matched_secondary = True

    if selection.budget and rate_tier_of(mentor) == selection.budget:
        outcome.award(MENTOR_WEIGHTS["budget"], f"Matches your budget ({selection.budget})")

    return outcome


def rate_tier_of(mentor: Mentor) -> Optional[str]:
    tier = (mentor.rate_tier or "").strip()
    return tier or None
