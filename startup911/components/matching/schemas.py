"""In-memory match result types. Built per request, never persisted."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ...models.tag import Tag
from .rules import CandidateKind


@dataclass
class ScoredCandidate:
    candidate: Any
    match_score: int
    matching_tags: List[Tag] = field(default_factory=list)
    tier: int = 4
    tier_label: str = ""
    match_reasons: List[str] = field(default_factory=list)


@dataclass
class MatchResults:
    kind: CandidateKind
    criteria: Dict[str, Any]
    items: List[ScoredCandidate]
    considered: int = 0

    @property
    def total(self) -> int:
        return len(self.items)
