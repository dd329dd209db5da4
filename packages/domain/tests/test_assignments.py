"""Tests for conflict/gap detection and assignment generation."""

import logging

from equity_domain.calculations import (
    build_selection_map,
    find_closed_sharing_violations,
    find_conflicts,
    find_gaps,
    generate_assignments,
)
from equity_domain.schemas import Assignment, Responsibility, Selection


RESPONSIBILITIES = [
    Responsibility(id="fundraising", weight=0.3, criticality="Critical", sharing_allowed="closed"),
    Responsibility(id="product", weight=0.3, criticality="High", sharing_allowed="open"),
    Responsibility(id="hiring", weight=0.2, criticality="Medium"),
    Responsibility(id="legal", weight=0.2, criticality="Low", sharing_allowed="closed"),
    Responsibility(id="retired", weight=0.0, status="archived", sharing_allowed="closed"),
]


def selections(*pairs):
    return [Selection(participant_id=pid, responsibility_id=rid) for pid, rid in pairs]


# =============================================================================
# Selection Map
# =============================================================================

def test_build_selection_map_keeps_selection_order():
    selection_map = build_selection_map(selections(
        ("p2", "product"), ("p1", "product"), ("p1", "fundraising"),
    ))
    assert selection_map == {"product": ["p2", "p1"], "fundraising": ["p1"]}


# =============================================================================
# Conflicts
# =============================================================================

def test_find_conflicts_flags_closed_with_multiple_selectors():
    selection_map = {
        "fundraising": ["p1", "p2"],
        "product": ["p1", "p2"],
        "legal": ["p1"],
    }
    conflicts = find_conflicts(RESPONSIBILITIES, selection_map)

    assert [c.responsibility.id for c in conflicts] == ["fundraising"]
    assert conflicts[0].selected_by == ["p1", "p2"]


def test_find_conflicts_unset_sharing_is_open_by_default():
    conflicts = find_conflicts(RESPONSIBILITIES, {"hiring": ["p1", "p2"]})
    assert conflicts == []


def test_find_conflicts_can_treat_unset_as_closed():
    """The acquiring-phase preview flags undecided responsibilities too."""
    conflicts = find_conflicts(RESPONSIBILITIES, {"hiring": ["p1", "p2"]}, treat_unset_as_closed=True)
    assert [c.responsibility.id for c in conflicts] == ["hiring"]


def test_find_conflicts_ignores_archived():
    conflicts = find_conflicts(RESPONSIBILITIES, {"retired": ["p1", "p2"]})
    assert conflicts == []


# =============================================================================
# Gaps
# =============================================================================

def test_find_gaps_maps_criticality():
    gaps = find_gaps(RESPONSIBILITIES, {"product": ["p1"]})

    assert [(g.responsibility.id, g.criticality_level) for g in gaps] == [
        ("fundraising", "critical"),
        ("hiring", "medium"),
        ("legal", "medium"),
    ]


def test_find_gaps_empty_selector_list_counts_as_gap():
    gaps = find_gaps(RESPONSIBILITIES, {
        "fundraising": [], "product": ["p1"], "hiring": ["p2"], "legal": ["p1"],
    })
    assert [g.responsibility.id for g in gaps] == ["fundraising"]


def test_find_gaps_high_criticality():
    gaps = find_gaps([Responsibility(id="x", criticality="High")], {})
    assert gaps[0].criticality_level == "high"


# =============================================================================
# Assignment Generation
# =============================================================================

def test_generate_assignments_shared_open_responsibility():
    """An open responsibility selected by two gives two shared rows."""
    assignments = generate_assignments(RESPONSIBILITIES, {"product": ["p1", "p2"]})

    assert [(a.participant_id, a.is_shared, a.assigned_by) for a in assignments] == [
        ("p1", True, "selection"),
        ("p2", True, "selection"),
    ]


def test_generate_assignments_single_selector_is_exclusive():
    assignments = generate_assignments(RESPONSIBILITIES, {"legal": ["p2"]})
    assert assignments == [Assignment(responsibility_id="legal", participant_id="p2")]


def test_generate_assignments_resolved_conflict():
    """The owner's pick is the only holder of a conflicted closed responsibility."""
    assignments = generate_assignments(
        RESPONSIBILITIES,
        {"fundraising": ["p1", "p2"]},
        conflict_resolutions={"fundraising": "p2"},
    )

    assert len(assignments) == 1
    assert assignments[0].participant_id == "p2"
    assert assignments[0].is_shared is False
    assert assignments[0].assigned_by == "owner"


def test_generate_assignments_unresolved_conflict_is_left_out(caplog):
    with caplog.at_level(logging.INFO, logger="equity_domain.calculations.assignments"):
        assignments = generate_assignments(RESPONSIBILITIES, {"fundraising": ["p1", "p2"]})

    assert assignments == []
    assert "fundraising" in caplog.text


def test_generate_assignments_fills_gaps():
    assignments = generate_assignments(
        RESPONSIBILITIES,
        {"product": ["p1"]},
        gap_assignments={"hiring": "p2"},
    )

    assert [(a.responsibility_id, a.participant_id, a.assigned_by) for a in assignments] == [
        ("product", "p1", "selection"),
        ("hiring", "p2", "owner-gap"),
    ]


def test_generate_assignments_skips_archived():
    assignments = generate_assignments(RESPONSIBILITIES, {"retired": ["p1"]})
    assert assignments == []


def test_generated_assignments_have_no_closed_violations():
    selection_map = {
        "fundraising": ["p1", "p2"],
        "product": ["p1", "p2", "p3"],
        "legal": ["p3"],
    }
    assignments = generate_assignments(
        RESPONSIBILITIES,
        selection_map,
        conflict_resolutions={"fundraising": "p1"},
        gap_assignments={"hiring": "p3"},
    )

    assert find_closed_sharing_violations(RESPONSIBILITIES, assignments) == []


# =============================================================================
# Closed Sharing Violations
# =============================================================================

def test_find_closed_sharing_violations():
    assignments = [
        Assignment(responsibility_id="legal", participant_id="p1"),
        Assignment(responsibility_id="legal", participant_id="p2"),
        Assignment(responsibility_id="product", participant_id="p1"),
        Assignment(responsibility_id="product", participant_id="p2"),
    ]
    assert find_closed_sharing_violations(RESPONSIBILITIES, assignments) == ["legal"]
