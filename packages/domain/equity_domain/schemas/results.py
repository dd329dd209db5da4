"""Computation results produced by the equity engine.

Every result record is ephemeral: it is produced fresh on each run from a
complete input snapshot, persisted by the caller, and superseded entirely by
the next run. There is no incremental update.
"""

from typing import List, Literal
from pydantic import Field

from .base import DomainModel, RecordId, Percentage
from .responsibilities import Responsibility


LoadStatus = Literal["green", "yellow", "orange", "red"]
GapLevel = Literal["critical", "high", "medium"]


# =============================================================================
# Equity Calculation
# =============================================================================

class SharedResponsibility(DomainModel):
    """A responsibility a participant holds together with others."""

    id: RecordId = Field(
        description="Responsibility id"
    )

    shared_with: List[str] = Field(
        default_factory=list,
        description="Ids of the other participants holding it"
    )


class EquityCalculation(DomainModel):
    """Equity result for one participant.

    Stages:
        base_weight: sum of responsibility weight held (shared weight split)
        base_equity: base_weight normalized across participants (0-100)
        combined_multiplier: factor blend around 1.0
        adjusted_equity: base_equity * combined_multiplier
        final_equity: adjusted_equity normalized across participants (0-100)

    Across one run, final_equity sums to 100 whenever any participant holds
    responsibility weight.
    """

    participant_id: RecordId
    participant_name: str = ""

    # Base calculation
    base_weight: float = Field(description="Raw share of total responsibility weight")
    base_equity: Percentage = Field(description="Base weight as % of all base weight")

    # Multipliers
    experience_multiplier: float = Field(default=1.0)
    time_multiplier: float = Field(default=1.0)
    investment_multiplier: float = Field(default=1.0)
    combined_multiplier: float = Field(default=1.0)

    # Final
    adjusted_equity: float = Field(description="Base equity scaled by combined multiplier")
    final_equity: Percentage = Field(description="Adjusted equity as % of all adjusted equity")

    # Responsibilities
    exclusive_responsibilities: List[str] = Field(
        default_factory=list,
        description="Responsibility ids held with no co-holder"
    )

    shared_responsibilities: List[SharedResponsibility] = Field(
        default_factory=list,
        description="Responsibility ids held with co-holders"
    )


# =============================================================================
# Load Assessment
# =============================================================================

class LoadAssessment(DomainModel):
    """Advisory workload feedback for a participant's current selection."""

    participant_id: RecordId
    load_pct: float = Field(description="Accumulated selected weight as a percentage")
    status: LoadStatus
    label: str
    message: str


# =============================================================================
# Conflicts and Gaps
# =============================================================================

class ConflictItem(DomainModel):
    """A closed responsibility selected by more than one participant."""

    responsibility: Responsibility
    selected_by: List[str] = Field(
        description="Participant ids that selected it, in selection order"
    )


class GapItem(DomainModel):
    """A responsibility that nobody selected."""

    responsibility: Responsibility
    criticality_level: GapLevel
