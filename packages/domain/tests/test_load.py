"""Tests for selection load assessment.

Tests cover:
- Load percentage with and without a sharing map
- Tier thresholds at and just past each boundary
- Labels, messages and the assembled LoadAssessment
"""

import pytest

from equity_domain.calculations import (
    assess_load,
    calculate_participant_load,
    get_load_label,
    get_load_message,
    get_load_status,
)
from equity_domain.schemas import Responsibility


RESPONSIBILITIES = [
    Responsibility(id="product", weight=0.25),
    Responsibility(id="sales", weight=0.15),
    Responsibility(id="finance", weight=0.3),
    Responsibility(id="ops", weight=0.3),
]


# =============================================================================
# Load Percentage
# =============================================================================

def test_load_without_sharing_map_counts_full_weight():
    """Without a sharing map every selection counts as exclusive."""
    load = calculate_participant_load("p1", ["product", "finance"], RESPONSIBILITIES)
    assert load == pytest.approx(55.0)


def test_load_splits_between_current_selectors():
    """A responsibility selected by two participants counts half for each."""
    selection_map = {"finance": ["p1", "p2"], "product": ["p1"]}
    load = calculate_participant_load("p1", ["product", "finance"], RESPONSIBILITIES, selection_map)
    assert load == pytest.approx(25.0 + 15.0)


def test_load_missing_map_entry_counts_as_exclusive():
    """A selection absent from the map is treated as held alone."""
    load = calculate_participant_load("p1", ["ops"], RESPONSIBILITIES, {})
    assert load == pytest.approx(30.0)


def test_load_ignores_unknown_responsibilities():
    """Unknown ids contribute nothing."""
    load = calculate_participant_load("p1", ["product", "ghost"], RESPONSIBILITIES)
    assert load == pytest.approx(25.0)


def test_load_empty_selection():
    assert calculate_participant_load("p1", [], RESPONSIBILITIES) == 0.0


# =============================================================================
# Tiers
# =============================================================================

@pytest.mark.parametrize("load_pct, expected", [
    (0.0, "green"),
    (40.0, "green"),
    (40.01, "yellow"),
    (65.0, "yellow"),
    (65.01, "orange"),
    (85.0, "orange"),
    (85.01, "red"),
    (150.0, "red"),
])
def test_load_status_thresholds(load_pct, expected):
    """Upper bounds are inclusive."""
    assert get_load_status(load_pct) == expected


def test_load_status_exact_boundary_from_weights():
    """0.25 + 0.15 of weight is exactly 40% load, despite float noise."""
    load = calculate_participant_load("p1", ["product", "sales"], RESPONSIBILITIES)
    assert get_load_status(load) == "green"


def test_load_labels():
    assert get_load_label("green") == "Ideal Load"
    assert get_load_label("yellow") == "Heavy Load"
    assert get_load_label("orange") == "Very Heavy"
    assert get_load_label("red") == "Unsustainable"


def test_load_messages_are_distinct():
    messages = {get_load_message(s) for s in ("green", "yellow", "orange", "red")}
    assert len(messages) == 4


# =============================================================================
# Assessment
# =============================================================================

def test_assess_load_heavy():
    """55% load is yellow with its label and message."""
    assessment = assess_load("p1", ["product", "finance"], RESPONSIBILITIES)

    assert assessment.participant_id == "p1"
    assert assessment.load_pct == pytest.approx(55.0)
    assert assessment.status == "yellow"
    assert assessment.label == "Heavy Load"
    assert assessment.message == get_load_message("yellow")


def test_assess_load_unsustainable():
    """Selecting everything alone is 100% load."""
    assessment = assess_load("p1", [r.id for r in RESPONSIBILITIES], RESPONSIBILITIES)
    assert assessment.status == "red"
