"""Query-string selections -> typed per-kind selection structs.

Parsing is lenient by policy: tokens that cannot be read are dropped one by
one, absent keys become empty lists, and nothing here raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .rules import ANY_BUDGET

RawParams = Mapping[str, Any]

# ASCII decimal ids only; "1_0", "+5" and non-ASCII digits are not ids
_ID_TOKEN_RE = re.compile(r"-?[0-9]+", re.ASCII)


def _raw_tokens(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        values: Iterable[Any] = [value]
    elif isinstance(value, (list, tuple)):
        values = value
    else:
        values = [str(value)]
    tokens: List[str] = []
    for item in values:
        if item is None:
            continue
        for token in str(item).split(","):
            token = token.strip()
            if token:
                tokens.append(token)
    return tokens


def parse_id_list(value: Any) -> List[int]:
    ids: List[int] = []
    for token in _raw_tokens(value):
        if _ID_TOKEN_RE.fullmatch(token):
            ids.append(int(token))
    return ids


def parse_string_list(value: Any) -> List[str]:
    return _raw_tokens(value)


def _lowered(raw: RawParams | None) -> Dict[str, Any]:
    lowered: Dict[str, Any] = {}
    for key, value in (raw or {}).items():
        lowered[str(key).strip().lower()] = value
    return lowered


def _extras(raw: Dict[str, Any], known: Iterable[str]) -> Dict[str, Any]:
    known = set(known)
    return {k: v for k, v in raw.items() if k not in known}


@dataclass(frozen=True)
class GrantSelection:
    stage: List[int] = field(default_factory=list)
    industry: List[int] = field(default_factory=list)
    location: List[int] = field(default_factory=list)
    social_impact: List[int] = field(default_factory=list)
    requirement: List[int] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)

    CATEGORIES = ("stage", "industry", "location", "social_impact", "requirement")

    @classmethod
    def from_query(cls, raw: RawParams | None) -> "GrantSelection":
        lowered = _lowered(raw)
        return cls(
            **{name: parse_id_list(lowered.get(name)) for name in cls.CATEGORIES},
            extras=_extras(lowered, cls.CATEGORIES),
        )

    def criteria(self) -> Dict[str, list]:
        return {name: list(getattr(self, name)) for name in self.CATEGORIES}


@dataclass(frozen=True)
class VCSelection:
    stage: List[int] = field(default_factory=list)
    industry: List[int] = field(default_factory=list)
    investment_type: List[int] = field(default_factory=list)
    # Region identifiers (e.g. "south_asia"), not tag ids
    location: List[str] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)

    ID_CATEGORIES = ("stage", "industry", "investment_type")
    CATEGORIES = ID_CATEGORIES + ("location",)

    @classmethod
    def from_query(cls, raw: RawParams | None) -> "VCSelection":
        lowered = _lowered(raw)
        return cls(
            **{name: parse_id_list(lowered.get(name)) for name in cls.ID_CATEGORIES},
            location=parse_string_list(lowered.get("location")),
            extras=_extras(lowered, cls.CATEGORIES),
        )

    def criteria(self) -> Dict[str, list]:
        return {name: list(getattr(self, name)) for name in self.CATEGORIES}


@dataclass(frozen=True)
class MentorSelection:
    industries: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    budget: Optional[str] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    CATEGORIES = ("industries", "languages", "budget")

    @classmethod
    def from_query(cls, raw: RawParams | None) -> "MentorSelection":
        lowered = _lowered(raw)
        return cls(
            industries=parse_string_list(lowered.get("industries")),
            languages=parse_string_list(lowered.get("languages")),
            budget=parse_budget(lowered.get("budget")),
            extras=_extras(lowered, cls.CATEGORIES),
        )

    def criteria(self) -> Dict[str, Any]:
        return {
            "industries": list(self.industries),
            "languages": list(self.languages),
            "budget": self.budget,
        }


def parse_budget(value: Any) -> Optional[str]:
    """Single rate tier; absent, blank or "Any" means no constraint."""
    if isinstance(value, (list, tuple)):
        value = next((v for v in value if v is not None and str(v).strip()), None)
    if value is None:
        return None
    budget = str(value).strip()
    if not budget or budget.lower() == ANY_BUDGET:
        return None
    return budget
