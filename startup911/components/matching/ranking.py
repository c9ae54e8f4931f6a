"""Result ordering: tier ascending, score descending, then a kind-specific tie-break.

``sorted`` is stable, so candidates that tie on every key keep the order the
repository returned them in.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .rules import RATE_TIER_ORDER, UNSET_RATE_TIER_RANK, CandidateKind
from .schemas import ScoredCandidate


def budget_rank(rate_tier: str | None) -> int:
    """Cheapest tiers first; unset or unknown tiers last."""
    return RATE_TIER_ORDER.get((rate_tier or "").strip(), UNSET_RATE_TIER_RANK)


def _sort_key(kind: CandidateKind, item: ScoredCandidate) -> Tuple[int, int, int]:
    tie_break = 0
    if kind == CandidateKind.MENTOR:
        tie_break = budget_rank(getattr(item.candidate, "rate_tier", None))
    return item.tier, -item.match_score, tie_break


def rank(kind: CandidateKind, scored: Iterable[ScoredCandidate]) -> List[ScoredCandidate]:
    kind = CandidateKind(kind)
    return sorted(scored, key=lambda item: _sort_key(kind, item))
