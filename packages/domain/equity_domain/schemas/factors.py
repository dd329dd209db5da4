"""Qualitative factors and factor-weight configuration.

Base equity comes from responsibility weight alone. These models carry the
per-participant qualitative inputs (experience, time, investment) that scale
base equity, and the session-level coefficients that blend the resulting
multipliers together.
"""

from typing import List, Literal
from pydantic import Field, model_validator

from .base import DomainModel, RecordId, Rating, Hours, MoneyAmount, Coefficient


StartupExperience = Literal["none", "1", "2-3", "4+"]
DomainExpertise = Literal["beginner", "intermediate", "advanced", "expert"]
LeadershipLevel = Literal["none", "team_lead", "manager", "director", "c_level"]
DurationUnit = Literal["months", "years"]
Currency = Literal["PHP", "USD"]


# =============================================================================
# Additional Factors
# =============================================================================

class AdditionalFactors(DomainModel):
    """Per-participant qualitative factors for one session.

    One record per participant per session. The persistence layer overwrites
    it wholesale on save; the engine reads whatever snapshot it is given.
    Defaults are the values a new record is created with when a participant
    has not filled anything in yet.

    Experience:
        experience_description_rating: quality of the free-text description,
            rated 0-10 by an external assessor
        startup_experience / domain_expertise / leadership_level: tiers
            mapped to fixed point scales

    Time:
        time_commitment_hours_min/max: declared weekly hours range
        duration_commitment_value + unit: how long the participant commits

    Investment:
        cash_investment, resources_contributed: amounts in `currency`

    Example:
        AdditionalFactors(
            participant_id="p_bob",
            experience_description_rating=8,
            startup_experience="2-3",
            domain_expertise="expert",
            leadership_level="director",
            time_commitment_hours_min=40,
            time_commitment_hours_max=60,
            duration_commitment_value=3,
            duration_commitment_unit="years",
            currency="USD",
            cash_investment=25_000,
        )
    """

    participant_id: RecordId = Field(
        description="Participant these factors belong to"
    )

    # Experience
    experience_description: str = Field(
        default="",
        description="Free-text experience description (rated externally)"
    )

    experience_description_rating: Rating = Field(
        default=5,
        description="Quality rating of the experience description (0-10)"
    )

    startup_experience: StartupExperience = Field(
        default="none",
        description="Number of previous startups"
    )

    domain_expertise: DomainExpertise = Field(
        default="intermediate",
        description="Expertise in the business's domain"
    )

    leadership_level: LeadershipLevel = Field(
        default="none",
        description="Highest leadership level held"
    )

    # Time
    time_commitment_hours_min: Hours = Field(
        default=10,
        description="Minimum weekly hours committed"
    )

    time_commitment_hours_max: Hours = Field(
        default=40,
        description="Maximum weekly hours committed"
    )

    duration_commitment_value: float = Field(
        default=1,
        ge=0,
        description="Committed duration, in `duration_commitment_unit`"
    )

    duration_commitment_unit: DurationUnit = Field(
        default="years",
        description="Unit of the committed duration"
    )

    # Investment
    currency: Currency = Field(
        default="USD",
        description="Currency of cash_investment and resources_contributed"
    )

    cash_investment: MoneyAmount = Field(
        default=0,
        description="Cash invested into the company"
    )

    resources_contributed: MoneyAmount = Field(
        default=0,
        description="Value of non-cash resources contributed (equipment, IP, etc.)"
    )

    @model_validator(mode='after')
    def validate_hours_range(self):
        """Maximum weekly hours may not be below the minimum."""
        if self.time_commitment_hours_max < self.time_commitment_hours_min:
            raise ValueError(
                f"time_commitment_hours_max ({self.time_commitment_hours_max}) must be "
                f">= time_commitment_hours_min ({self.time_commitment_hours_min})"
            )
        return self

    @property
    def duration_in_years(self) -> float:
        if self.duration_commitment_unit == "months":
            return self.duration_commitment_value / 12
        return self.duration_commitment_value


# =============================================================================
# Factor Weight Configuration
# =============================================================================

class FactorWeightConfig(DomainModel):
    """Coefficients blending the equity factors into one combined multiplier.

    The four coefficients are intended to sum to 1.0 but this is NOT enforced:
    the engine computes with whatever it is given, and callers surface
    `warnings()` to the user instead.

    Note:
        The responsibility coefficient multiplies a constant 1.0 in the
        combined multiplier, not the participant's base equity. It therefore
        acts as a neutral ballast term rather than scaling responsibility
        contribution. See DESIGN.md.

    Example:
        FactorWeightConfig(
            responsibility_weight=0.6,
            experience_weight=0.15,
            time_weight=0.15,
            investment_weight=0.1,
        )
    """

    responsibility_weight: Coefficient = Field(
        default=0.6,
        description="Coefficient of the constant responsibility term (typically 0.4-0.8)"
    )

    experience_weight: Coefficient = Field(
        default=0.15,
        description="Coefficient of the experience multiplier (typically 0-0.3)"
    )

    time_weight: Coefficient = Field(
        default=0.15,
        description="Coefficient of the time multiplier (typically 0-0.3)"
    )

    investment_weight: Coefficient = Field(
        default=0.1,
        description="Coefficient of the investment multiplier (typically 0-0.3)"
    )

    @property
    def total(self) -> float:
        return (
            self.responsibility_weight
            + self.experience_weight
            + self.time_weight
            + self.investment_weight
        )

    def is_balanced(self, tolerance: float = 0.01) -> bool:
        """Check whether the coefficients sum to 1.0 within tolerance."""
        return abs(self.total - 1.0) < tolerance

    def warnings(self, tolerance: float = 0.01) -> List[str]:
        """Human-readable warnings for display; empty when balanced."""
        if self.is_balanced(tolerance):
            return []
        return [f"Factor weights total {self.total * 100:.0f}% and should total 100%"]


# =============================================================================
# Selection Guidance
# =============================================================================

class SelectionGuidance(DomainModel):
    """Owner-configured guidance shown to participants while selecting.

    Example:
        SelectionGuidance(min_responsibilities=3, max_responsibilities=12,
                          target_load_min=20, target_load_max=40)
    """

    min_responsibilities: int = Field(
        default=3,
        ge=0,
        description="Minimum number of responsibilities a participant should select"
    )

    max_responsibilities: int = Field(
        default=12,
        ge=0,
        description="Maximum number of responsibilities a participant may select"
    )

    target_load_min: float = Field(
        default=20,
        ge=0,
        description="Lower bound of the target load percentage"
    )

    target_load_max: float = Field(
        default=40,
        ge=0,
        description="Upper bound of the target load percentage"
    )

    @model_validator(mode='after')
    def validate_ranges(self):
        if self.max_responsibilities < self.min_responsibilities:
            raise ValueError("max_responsibilities must be >= min_responsibilities")
        if self.target_load_max < self.target_load_min:
            raise ValueError("target_load_max must be >= target_load_min")
        return self

    def check_selection(self, count: int) -> List[str]:
        """Return warnings for a selection of `count` responsibilities."""
        messages = []
        if count < self.min_responsibilities:
            messages.append(f"Please select at least {self.min_responsibilities} responsibilities.")
        if count > self.max_responsibilities:
            messages.append(f"Please select at most {self.max_responsibilities} responsibilities.")
        return messages

    def load_in_target(self, load_pct: float) -> bool:
        return self.target_load_min <= load_pct <= self.target_load_max
