"""Responsibilities and the records that bind participants to them.

A Responsibility is a discrete business function carrying a fraction of the
total responsibility weight. Participants first *select* responsibilities
(draft, pre-assignment), then selections are turned into final *assignments*
once conflicts and gaps are resolved.

Lifecycle:
    Responsibility weights are authored and rebalanced while the session is
    processing, then frozen once selection begins. Assignments are produced
    upstream and consumed read-only by the equity calculation.
"""

from typing import List, Literal, Optional
from pydantic import Field

from .base import DomainModel, RecordId, Weight


Criticality = Literal["Critical", "High", "Medium", "Low"]
SharingStatus = Literal["open", "closed"]
ResponsibilityStatus = Literal["pending", "active", "archived"]
SelectionStatus = Literal["draft", "pending", "confirmed", "rejected"]


# =============================================================================
# Responsibility
# =============================================================================

class Responsibility(DomainModel):
    """A weighted business function within one session.

    Invariant (established upstream, not enforced here):
        The weights of all active responsibilities in a session sum to 1.0
        before assignment is finalized.

    Sharing:
        - "open": any number of participants may hold it; weight is split
        - "closed": at most one holder after conflict resolution
        - None: owner has not decided yet

    Examples:
        Responsibility(id="fundraising", title="Fundraising",
                       weight=0.25, criticality="Critical",
                       sharing_allowed="closed")
    """

    id: RecordId = Field(
        description="Unique responsibility identifier"
    )

    session_id: Optional[str] = Field(
        default=None,
        description="Owning session (informational, not used in arithmetic)"
    )

    category: str = Field(
        default="",
        description="Grouping label (e.g., 'Product', 'Operations')"
    )

    title: str = Field(
        default="",
        description="Short human-readable name"
    )

    description: str = Field(
        default="",
        description="Free-text description of the function"
    )

    weight: Weight = Field(
        default=0.0,
        description="Fraction of total responsibility weight"
    )

    criticality: Criticality = Field(
        default="Medium",
        description="How critical this function is to the business"
    )

    sharing_allowed: Optional[SharingStatus] = Field(
        default=None,
        description="Whether multiple participants may hold this responsibility"
    )

    status: ResponsibilityStatus = Field(
        default="active",
        description="Archived responsibilities are excluded from weight tables"
    )

    nominated_by: List[str] = Field(
        default_factory=list,
        description="Participant ids (or 'ai') that proposed this responsibility"
    )

    @property
    def is_active(self) -> bool:
        """True unless the responsibility has been archived."""
        return self.status != "archived"


# =============================================================================
# Selection
# =============================================================================

class Selection(DomainModel):
    """A participant's draft claim on a responsibility (pre-assignment)."""

    participant_id: RecordId
    responsibility_id: RecordId

    round: Literal[1, 2] = Field(
        default=1,
        description="Selection round (round 2 follows gap review)"
    )

    status: SelectionStatus = Field(
        default="draft",
        description="Review status of the selection"
    )


# =============================================================================
# Assignment
# =============================================================================

class Assignment(DomainModel):
    """Final binding of one participant to one responsibility.

    Multiple assignments may reference the same responsibility when it is
    shared. The `is_shared` flag is informational only: the equity calculation
    always splits a responsibility's weight by the number of rows that
    reference it.
    """

    responsibility_id: RecordId = Field(
        description="Responsibility being assigned"
    )

    participant_id: RecordId = Field(
        description="Participant receiving the responsibility"
    )

    is_shared: bool = Field(
        default=False,
        description="True if other participants hold the same responsibility"
    )

    assigned_by: str = Field(
        default="selection",
        description="Origin of the row: 'selection', 'owner' (conflict) or 'owner-gap'"
    )
