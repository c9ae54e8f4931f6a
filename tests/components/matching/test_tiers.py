"""Tests for tier classification."""

import pytest

from startup911.components.matching.rules import CandidateKind
from startup911.components.matching.tiers import classify_tier, tier_for


@pytest.mark.parametrize(
    "primary,secondary,tier",
    [(True, True, 1), (True, False, 2), (False, True, 3), (False, False, 4)],
)
def test_tier_depends_only_on_matched_groups(primary, secondary, tier):
    assert tier_for(primary, secondary) == tier


class TestTierLabels:
    def test_grant_labels(self):
        assert classify_tier(CandidateKind.GRANT, True, True) == (1, "Perfect Match")
        assert classify_tier(CandidateKind.GRANT, True, False) == (2, "Stage Match")
        assert classify_tier(CandidateKind.GRANT, False, True) == (3, "Industry Match")
        assert classify_tier(CandidateKind.GRANT, False, False) == (4, "Basic Match")

    def test_vc_labels(self):
        assert classify_tier(CandidateKind.VC, True, False) == (2, "Strong Match")
        assert classify_tier(CandidateKind.VC, False, True) == (3, "Speculative Match")
        assert classify_tier(CandidateKind.VC, False, False) == (4, "Other Match")

    def test_mentor_labels(self):
        assert classify_tier(CandidateKind.MENTOR, True, True) == (1, "Perfect Match")
        assert classify_tier(CandidateKind.MENTOR, True, False) == (2, "Expertise Match")
        assert classify_tier(CandidateKind.MENTOR, False, True) == (3, "Language Match")

    def test_kind_given_as_string(self):
        assert classify_tier("vc", True, True) == (1, "Perfect Match")
