"""Hard filters applied before scoring. Excluded candidates never reach the scorer."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ...models.grant import Grant
from ...models.mentor import Mentor
from ...models.tag import Tag, TagType
from .rules import GRANT_REQUIREMENT_TAGS

logger = logging.getLogger("startup911.matching")


def requirement_tag_ids(tags: Iterable[Tag]) -> Dict[str, int]:
    """Map REQUIREMENT tag name -> id."""
    ids: Dict[str, int] = {}
    for tag in tags:
        if tag.type == TagType.REQUIREMENT.value and tag.name not in ids:
            ids[tag.name] = tag.id
    return ids


def unmet_requirements(
    grant: Grant,
    selected_requirement_ids: Iterable[int],
    requirement_ids: Dict[str, int],
) -> List[str]:
    """Names of the grant's mandatory requirements the user has not selected.

    A requirement whose tag is missing from the tag store can never be
    satisfied, so it is always reported as unmet.
    """
    selected = set(selected_requirement_ids)
    unmet: List[str] = []
    for field_name, tag_name in GRANT_REQUIREMENT_TAGS.items():
        if getattr(grant, field_name, None) is not True:
            continue
        tag_id = requirement_ids.get(tag_name)
        if tag_id is None or tag_id not in selected:
            unmet.append(tag_name)
    return unmet


def filter_eligible_grants(
    grants: Sequence[Grant],
    selected_requirement_ids: Iterable[int],
    requirement_tags: Iterable[Tag],
) -> List[Grant]:
    """Drop grants whose flagged prerequisites the user does not meet. Order is kept."""
    selected = list(selected_requirement_ids)
    requirement_ids = requirement_tag_ids(requirement_tags)

    eligible: List[Grant] = []
    missing: List[str] = []
    for grant in grants:
        unmet = unmet_requirements(grant, selected, requirement_ids)
        if not unmet:
            eligible.append(grant)
            continue
        logger.debug("Grant %s excluded, unmet requirements: %s", grant.id, unmet)
        missing.extend(n for n in unmet if n not in requirement_ids and n not in missing)

    for name in missing:
        logger.warning("Requirement tag %r missing from tag store; grants requiring it were excluded", name)
    return eligible


def filter_mentors_by_budget(mentors: Sequence[Mentor], budget: Optional[str]) -> List[Mentor]:
    """Keep only mentors on the selected rate tier. No budget keeps everyone."""
    if not budget:
        return list(mentors)
    return [m for m in mentors if (m.rate_tier or "").strip() == budget]
