"""Session snapshot - the complete input to one equity calculation run.

The snapshot is assembled by the persistence layer at read time and handed to
the engine as a single immutable value. The engine provides no transactional
guarantee across its inputs; consistency of the snapshot is the caller's job.
"""

from typing import List, Optional
from pydantic import Field

from .base import DomainModel
from .responsibilities import Responsibility, Assignment
from .participants import Participant
from .factors import AdditionalFactors, FactorWeightConfig, SelectionGuidance


class EquitySessionSnapshot(DomainModel):
    """Read-only inputs for one calculation run.

    Example:
        snapshot = EquitySessionSnapshot(
            participants=[Participant(id="p1", name="Alice"),
                          Participant(id="p2", name="Bob")],
            responsibilities=[Responsibility(id="a", weight=0.6),
                              Responsibility(id="b", weight=0.4)],
            assignments=[Assignment(responsibility_id="a", participant_id="p1"),
                         Assignment(responsibility_id="b", participant_id="p2")],
        )
    """

    session_id: Optional[str] = Field(
        default=None,
        description="Session the snapshot was read from"
    )

    participants: List[Participant] = Field(
        default_factory=list,
        description="Participants in the session (removed ones are skipped)"
    )

    responsibilities: List[Responsibility] = Field(
        default_factory=list,
        description="Responsibilities in the session (archived ones are skipped)"
    )

    assignments: List[Assignment] = Field(
        default_factory=list,
        description="Final assignments after conflict resolution and gap filling"
    )

    factors: List[AdditionalFactors] = Field(
        default_factory=list,
        description="Additional factors; participants without a record are neutral"
    )

    factor_weights: FactorWeightConfig = Field(
        default_factory=FactorWeightConfig,
        description="Session coefficients for the combined multiplier"
    )

    selection_guidance: SelectionGuidance = Field(
        default_factory=SelectionGuidance,
        description="Selection guidance shown during the acquiring phase"
    )

    def active_participants(self) -> List[Participant]:
        return [p for p in self.participants if p.is_active]

    def active_responsibilities(self) -> List[Responsibility]:
        return [r for r in self.responsibilities if r.is_active]

    def weight_total(self) -> float:
        """Sum of active responsibility weights (1.0 for a frozen table)."""
        return sum(r.weight for r in self.active_responsibilities())
