"""Tests for grant prerequisite and mentor budget hard filters."""

import logging

from startup911.components.matching.eligibility import (
    filter_eligible_grants,
    filter_mentors_by_budget,
    requirement_tag_ids,
    unmet_requirements,
)
from startup911.models import Grant, Mentor, Tag


def _requirement_tags():
    return [
        Tag(id=10, name="DPIIT Registration", type="REQUIREMENT"),
        Tag(id=11, name="Patent/IP", type="REQUIREMENT"),
        Tag(id=12, name="Working Prototype", type="REQUIREMENT"),
        Tag(id=13, name="Technical Co-founder", type="REQUIREMENT"),
        Tag(id=14, name="Full-time Commitment", type="REQUIREMENT"),
    ]


def test_requirement_tag_ids_ignores_other_types():
    tags = _requirement_tags() + [Tag(id=99, name="DPIIT Registration", type="STAGE")]
    ids = requirement_tag_ids(tags)
    assert ids["DPIIT Registration"] == 10
    assert len(ids) == 5


class TestUnmetRequirements:
    def test_no_flags_means_nothing_unmet(self):
        grant = Grant(id=1, name="Open")
        assert unmet_requirements(grant, [], requirement_tag_ids(_requirement_tags())) == []

    def test_flag_without_selection_is_unmet(self):
        grant = Grant(id=1, name="DPIIT only", dpiit_required=True)
        assert unmet_requirements(grant, [], requirement_tag_ids(_requirement_tags())) == ["DPIIT Registration"]

    def test_flag_with_selection_is_met(self):
        grant = Grant(id=1, name="DPIIT only", dpiit_required=True)
        assert unmet_requirements(grant, [10], requirement_tag_ids(_requirement_tags())) == []

    def test_false_flag_never_excludes(self):
        grant = Grant(id=1, name="Nope", patent_required=False, prototype_required=None)
        assert unmet_requirements(grant, [], requirement_tag_ids(_requirement_tags())) == []

    def test_descriptive_flags_are_not_prerequisites(self):
        grant = Grant(id=1, name="Focus", tech_focus_required=True, women_led_focus=True)
        assert unmet_requirements(grant, [], requirement_tag_ids(_requirement_tags())) == []


class TestFilterEligibleGrants:
    def test_dpiit_grant_excluded_without_selection(self):
        open_grant = Grant(id=1, name="Open")
        dpiit_grant = Grant(id=2, name="DPIIT", dpiit_required=True)
        eligible = filter_eligible_grants([open_grant, dpiit_grant], [], _requirement_tags())
        assert eligible == [open_grant]

    def test_dpiit_grant_kept_with_selection(self):
        open_grant = Grant(id=1, name="Open")
        dpiit_grant = Grant(id=2, name="DPIIT", dpiit_required=True)
        eligible = filter_eligible_grants([open_grant, dpiit_grant], [10], _requirement_tags())
        assert eligible == [open_grant, dpiit_grant]

    def test_all_flags_must_be_met(self):
        grant = Grant(id=3, name="Strict", dpiit_required=True, patent_required=True)
        assert filter_eligible_grants([grant], [10], _requirement_tags()) == []
        assert filter_eligible_grants([grant], [10, 11], _requirement_tags()) == [grant]

    def test_input_order_is_kept(self):
        grants = [Grant(id=i, name=f"G{i}") for i in (5, 3, 9)]
        assert [g.id for g in filter_eligible_grants(grants, [], _requirement_tags())] == [5, 3, 9]

    def test_missing_requirement_tag_fails_closed_and_warns(self, caplog):
        tags = [t for t in _requirement_tags() if t.name != "Patent/IP"]
        grant = Grant(id=4, name="Patent grant", patent_required=True)
        with caplog.at_level(logging.WARNING, logger="startup911.matching"):
            eligible = filter_eligible_grants([grant], [10, 11, 12, 13, 14], tags)
        assert eligible == []
        assert "Patent/IP" in caplog.text

    def test_missing_tag_without_flagged_grant_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="startup911.matching"):
            eligible = filter_eligible_grants([Grant(id=1, name="Open")], [], [])
        assert len(eligible) == 1
        assert caplog.records == []


class TestFilterMentorsByBudget:
    def test_no_budget_keeps_everyone(self):
        mentors = [Mentor(id="a", name="A", rate_tier="Free"), Mentor(id="b", name="B")]
        assert filter_mentors_by_budget(mentors, None) == mentors

    def test_budget_keeps_matching_tier_only(self):
        free = Mentor(id="a", name="A", rate_tier="Free")
        paid = Mentor(id="b", name="B", rate_tier="₹5K+")
        unset = Mentor(id="c", name="C")
        assert filter_mentors_by_budget([free, paid, unset], "Free") == [free]
