"""Turning selections into final assignments.

Participants select responsibilities during the acquiring phase. Before the
equity calculation runs, the owner resolves:

- Conflicts: a closed responsibility selected by more than one participant
- Gaps: a responsibility nobody selected

The functions here detect both and build the final Assignment list from the
owner's decisions. They are pure: the caller owns the selections and the
resolution state.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from ..schemas import Assignment, ConflictItem, GapItem, Responsibility, Selection
from .base_equity import count_holders

logger = logging.getLogger(__name__)

GAP_LEVELS: Dict[str, str] = {
    "Critical": "critical",
    "High": "high",
}
DEFAULT_GAP_LEVEL = "medium"


def build_selection_map(selections: Sequence[Selection]) -> Dict[str, List[str]]:
    """Participant ids per responsibility id, in selection order."""
    selection_map: Dict[str, List[str]] = {}
    for selection in selections:
        selection_map.setdefault(selection.responsibility_id, []).append(selection.participant_id)
    return selection_map


def _is_closed(responsibility: Responsibility, treat_unset_as_closed: bool) -> bool:
    if responsibility.sharing_allowed == "closed":
        return True
    return treat_unset_as_closed and responsibility.sharing_allowed is None


def find_conflicts(
    responsibilities: Sequence[Responsibility],
    selection_map: Mapping[str, Sequence[str]],
    treat_unset_as_closed: bool = False,
) -> List[ConflictItem]:
    """Closed responsibilities selected by more than one participant.

    Args:
        responsibilities: Session responsibilities (archived ones are ignored)
        selection_map: responsibility id -> selecting participant ids
        treat_unset_as_closed: Also flag responsibilities whose sharing has not
            been decided yet (the acquiring-phase preview does this)
    """
    conflicts = []
    for responsibility in responsibilities:
        if not responsibility.is_active:
            continue
        selected_by = list(selection_map.get(responsibility.id, []))
        if _is_closed(responsibility, treat_unset_as_closed) and len(selected_by) > 1:
            conflicts.append(ConflictItem(responsibility=responsibility, selected_by=selected_by))
    return conflicts


def find_gaps(
    responsibilities: Sequence[Responsibility],
    selection_map: Mapping[str, Sequence[str]],
) -> List[GapItem]:
    """Active responsibilities that nobody selected."""
    return [
        GapItem(
            responsibility=responsibility,
            criticality_level=GAP_LEVELS.get(responsibility.criticality, DEFAULT_GAP_LEVEL),
        )
        for responsibility in responsibilities
        if responsibility.is_active and not selection_map.get(responsibility.id)
    ]


def generate_assignments(
    responsibilities: Sequence[Responsibility],
    selection_map: Mapping[str, Sequence[str]],
    conflict_resolutions: Optional[Mapping[str, str]] = None,
    gap_assignments: Optional[Mapping[str, str]] = None,
) -> List[Assignment]:
    """Build final assignments from selections and the owner's decisions.

    Args:
        responsibilities: Session responsibilities (archived ones are ignored)
        selection_map: responsibility id -> selecting participant ids
        conflict_resolutions: responsibility id -> winning participant id
        gap_assignments: responsibility id -> participant id chosen by the owner

    Returns:
        One assignment per (participant, responsibility). Unresolved conflicts
        and unfilled gaps produce no rows.
    """
    conflict_resolutions = conflict_resolutions or {}
    gap_assignments = gap_assignments or {}
    assignments: List[Assignment] = []

    for responsibility in responsibilities:
        if not responsibility.is_active:
            continue

        selected_by = list(selection_map.get(responsibility.id, []))

        if responsibility.sharing_allowed == "closed" and len(selected_by) > 1:
            winner = conflict_resolutions.get(responsibility.id)
            if winner:
                assignments.append(Assignment(
                    responsibility_id=responsibility.id,
                    participant_id=winner,
                    is_shared=False,
                    assigned_by="owner",
                ))
            else:
                logger.info("Conflict on %s is unresolved; leaving it unassigned", responsibility.id)
        elif selected_by:
            for participant_id in selected_by:
                assignments.append(Assignment(
                    responsibility_id=responsibility.id,
                    participant_id=participant_id,
                    is_shared=len(selected_by) > 1,
                    assigned_by="selection",
                ))
        else:
            assigned = gap_assignments.get(responsibility.id)
            if assigned:
                assignments.append(Assignment(
                    responsibility_id=responsibility.id,
                    participant_id=assigned,
                    is_shared=False,
                    assigned_by="owner-gap",
                ))

    return assignments


def find_closed_sharing_violations(
    responsibilities: Sequence[Responsibility],
    assignments: Sequence[Assignment],
) -> List[str]:
    """Ids of closed responsibilities with more than one assignment row."""
    holder_counts = count_holders(assignments)
    return [
        r.id for r in responsibilities
        if r.sharing_allowed == "closed" and holder_counts.get(r.id, 0) > 1
    ]
