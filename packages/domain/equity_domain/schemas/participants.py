"""Participants (co-founders) taking part in an equity session."""

from typing import Literal, Optional
from pydantic import Field

from .base import DomainModel, RecordId


ParticipantStatus = Literal["invited", "active", "completed", "removed"]


class Participant(DomainModel):
    """A co-founder taking part in the equity split.

    Examples:
        Participant(id="p_owner", name="Alice", is_owner=True)
        Participant(id="p_bob", name="Bob", role="CTO")
    """

    id: RecordId = Field(
        description="Unique participant identifier"
    )

    name: str = Field(
        default="",
        description="Display name"
    )

    role: Optional[str] = Field(
        default=None,
        description="Self-described role (e.g., 'CEO', 'CTO')"
    )

    email: Optional[str] = Field(
        default=None,
        description="Contact email, if supplied at invitation"
    )

    is_owner: bool = Field(
        default=False,
        description="True for the participant who created the session"
    )

    status: ParticipantStatus = Field(
        default="active",
        description="Removed participants are excluded from calculations"
    )

    @property
    def is_active(self) -> bool:
        return self.status != "removed"
