"""Smoke tests for schema validation.

These tests verify that:
1. All schemas can be imported
2. Basic instantiation and defaults work
3. Field validation catches obvious errors
4. Records are immutable and updated through model_copy
"""

import pytest
from pydantic import ValidationError

from equity_domain.schemas import (
    # Base
    DomainModel,
    # Responsibilities
    Responsibility,
    Selection,
    Assignment,
    # Participants
    Participant,
    # Factors
    AdditionalFactors,
    FactorWeightConfig,
    SelectionGuidance,
    # Session
    EquitySessionSnapshot,
    # Report
    EquityReportCFG,
    # Results
    EquityCalculation,
    LoadAssessment,
)


class TestBasicInstantiation:
    """Test that basic schema instantiation works."""

    def test_responsibility_defaults(self):
        """Test creating a responsibility with only an id."""
        resp = Responsibility(id="fundraising")
        assert resp.weight == 0.0
        assert resp.criticality == "Medium"
        assert resp.sharing_allowed is None
        assert resp.is_active

    def test_archived_responsibility_is_inactive(self):
        resp = Responsibility(id="old", status="archived")
        assert not resp.is_active

    def test_participant(self):
        """Test creating an owner participant."""
        owner = Participant(id="p_owner", name="Alice", is_owner=True)
        assert owner.is_owner
        assert owner.is_active
        assert not Participant(id="p_gone", status="removed").is_active

    def test_selection_and_assignment_defaults(self):
        selection = Selection(participant_id="p1", responsibility_id="r1")
        assignment = Assignment(participant_id="p1", responsibility_id="r1")
        assert selection.round == 1
        assert selection.status == "draft"
        assert assignment.is_shared is False
        assert assignment.assigned_by == "selection"

    def test_additional_factors_defaults(self):
        """Test the values a fresh factors record starts with."""
        factors = AdditionalFactors(participant_id="p1")
        assert factors.experience_description_rating == 5
        assert factors.startup_experience == "none"
        assert factors.domain_expertise == "intermediate"
        assert factors.time_commitment_hours_min == 10
        assert factors.time_commitment_hours_max == 40
        assert factors.duration_in_years == 1
        assert factors.currency == "USD"

    def test_duration_in_years_from_months(self):
        factors = AdditionalFactors(
            participant_id="p1",
            duration_commitment_value=18,
            duration_commitment_unit="months",
        )
        assert factors.duration_in_years == pytest.approx(1.5)

    def test_equity_calculation_multipliers_default_to_neutral(self):
        calc = EquityCalculation(
            participant_id="p1",
            base_weight=0.5,
            base_equity=50.0,
            adjusted_equity=50.0,
            final_equity=50.0,
        )
        assert calc.combined_multiplier == 1.0
        assert calc.exclusive_responsibilities == []

    def test_load_assessment(self):
        assessment = LoadAssessment(
            participant_id="p1", load_pct=30.0, status="green",
            label="Ideal Load", message="ok",
        )
        assert assessment.status == "green"


class TestValidation:
    """Test that validation rules work correctly."""

    def test_weight_above_one_rejected(self):
        with pytest.raises(ValidationError):
            Responsibility(id="r1", weight=1.5)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            Responsibility(id="r1", weight=-0.1)

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Participant(id="")

    def test_unknown_sharing_status_rejected(self):
        with pytest.raises(ValidationError):
            Responsibility(id="r1", sharing_allowed="maybe")

    def test_rating_range(self):
        with pytest.raises(ValidationError):
            AdditionalFactors(participant_id="p1", experience_description_rating=11)

    def test_hours_range_must_be_ordered(self):
        """Test that max weekly hours below min raises error."""
        with pytest.raises(ValueError, match="must be >= time_commitment_hours_min"):
            AdditionalFactors(
                participant_id="p1",
                time_commitment_hours_min=40,
                time_commitment_hours_max=20,
            )

    def test_negative_investment_rejected(self):
        with pytest.raises(ValidationError):
            AdditionalFactors(participant_id="p1", cash_investment=-5)

    def test_selection_guidance_ranges(self):
        with pytest.raises(ValueError, match="max_responsibilities"):
            SelectionGuidance(min_responsibilities=5, max_responsibilities=2)
        with pytest.raises(ValueError, match="target_load_max"):
            SelectionGuidance(target_load_min=50, target_load_max=30)


class TestImmutability:
    """Test that records are frozen value objects."""

    def test_domain_model_is_frozen(self):
        resp = Responsibility(id="r1", weight=0.5)
        with pytest.raises(ValidationError):
            resp.weight = 0.6

    def test_model_copy_produces_updated_record(self):
        resp = Responsibility(id="r1", weight=0.5)
        updated = resp.model_copy(update={"weight": 0.6})
        assert updated.weight == 0.6
        assert resp.weight == 0.5

    def test_all_records_share_base(self):
        assert issubclass(EquitySessionSnapshot, DomainModel)
        assert issubclass(EquityReportCFG, DomainModel)


class TestFactorWeights:
    """Test factor-weight configuration checks."""

    def test_defaults_are_balanced(self):
        weights = FactorWeightConfig()
        assert weights.total == pytest.approx(1.0)
        assert weights.is_balanced()
        assert weights.warnings() == []

    def test_unbalanced_weights_are_allowed_with_warning(self):
        """Unbalanced coefficients are accepted; warnings() reports them."""
        weights = FactorWeightConfig(responsibility_weight=0.5)
        assert not weights.is_balanced()
        assert weights.warnings() == ["Factor weights total 90% and should total 100%"]

    def test_negative_coefficient_rejected(self):
        """Coefficients may be unbalanced but never negative."""
        with pytest.raises(ValidationError):
            FactorWeightConfig(investment_weight=-0.1)

    def test_within_tolerance_is_balanced(self):
        weights = FactorWeightConfig(responsibility_weight=0.605)
        assert weights.is_balanced()


class TestSelectionGuidance:
    """Test selection-count and target-load guidance."""

    def test_check_selection(self):
        guidance = SelectionGuidance(min_responsibilities=3, max_responsibilities=5)
        assert guidance.check_selection(1) == ["Please select at least 3 responsibilities."]
        assert guidance.check_selection(4) == []
        assert guidance.check_selection(6) == ["Please select at most 5 responsibilities."]

    def test_load_in_target(self):
        guidance = SelectionGuidance()
        assert guidance.load_in_target(20)
        assert guidance.load_in_target(40)
        assert not guidance.load_in_target(45)


class TestSessionSnapshot:
    """Test snapshot filtering helpers."""

    def test_active_filters(self):
        snapshot = EquitySessionSnapshot(
            participants=[Participant(id="p1"), Participant(id="p2", status="removed")],
            responsibilities=[
                Responsibility(id="a", weight=0.6),
                Responsibility(id="b", weight=0.4),
                Responsibility(id="c", weight=0.3, status="archived"),
            ],
        )
        assert [p.id for p in snapshot.active_participants()] == ["p1"]
        assert [r.id for r in snapshot.active_responsibilities()] == ["a", "b"]
        assert snapshot.weight_total() == pytest.approx(1.0)

    def test_report_cfg_defaults(self):
        config = EquityReportCFG(snapshot=EquitySessionSnapshot())
        assert config.title == "Co-founder Equity Split"
        assert config.include_multipliers
        assert config.percent_format == "0.00%"
