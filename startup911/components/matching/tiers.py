"""Match tier classification. Tier depends only on which category groups matched."""

from __future__ import annotations

from typing import Tuple

from .rules import TIER_LABELS, CandidateKind


def tier_for(matched_primary: bool, matched_secondary: bool) -> int:
    if matched_primary and matched_secondary:
        return 1
    if matched_primary:
        return 2
    if matched_secondary:
        return 3
    return 4


def classify_tier(kind: CandidateKind, matched_primary: bool, matched_secondary: bool) -> Tuple[int, str]:
    """Return ``(tier, label)`` for a candidate of the given kind."""
    tier = tier_for(matched_primary, matched_secondary)
    return tier, TIER_LABELS[CandidateKind(kind)][tier]
