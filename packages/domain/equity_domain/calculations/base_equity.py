"""Base equity aggregation.

A participant's base weight is the sum, over their assignments, of each
responsibility's weight divided by the number of assignment rows referencing
that responsibility. Shared weight is split equally between holders whatever
the `is_shared` flag says.
"""

import logging
from collections import Counter
from typing import Dict, List, Mapping, Sequence

from ..schemas import Assignment, Responsibility

logger = logging.getLogger(__name__)


def count_holders(assignments: Sequence[Assignment]) -> Dict[str, int]:
    """Number of assignment rows per responsibility id."""
    return dict(Counter(a.responsibility_id for a in assignments))


def calculate_base_weight(
    participant_id: str,
    assignments: Sequence[Assignment],
    responsibilities: Sequence[Responsibility],
) -> float:
    """Sum a participant's (split) responsibility weight.

    Assignments referencing an unknown responsibility contribute nothing.

    Example:
        A (0.6) held by p1 alone, B (0.4) held by p1 and p2
        -> p1: 0.6 + 0.2 = 0.8, p2: 0.2
    """
    weights = {r.id: r.weight for r in responsibilities}
    return _base_weight(participant_id, assignments, weights, count_holders(assignments))


def _base_weight(
    participant_id: str,
    assignments: Sequence[Assignment],
    weights: Mapping[str, float],
    holder_counts: Mapping[str, int],
) -> float:
    base_weight = 0.0
    for assignment in assignments:
        if assignment.participant_id != participant_id:
            continue

        weight = weights.get(assignment.responsibility_id)
        if weight is None:
            logger.debug(
                "Skipping orphaned assignment %s -> %s",
                participant_id, assignment.responsibility_id,
            )
            continue

        base_weight += weight / holder_counts[assignment.responsibility_id]

    return base_weight


def calculate_base_weights(
    participant_ids: Sequence[str],
    assignments: Sequence[Assignment],
    responsibilities: Sequence[Responsibility],
) -> Dict[str, float]:
    """Base weight for each participant, keyed by participant id."""
    weights = {r.id: r.weight for r in responsibilities}
    holder_counts = count_holders(assignments)
    return {
        pid: _base_weight(pid, assignments, weights, holder_counts)
        for pid in participant_ids
    }


def normalize_to_percent(values: Mapping[str, float]) -> Dict[str, float]:
    """Express each value as a percentage of the total (all 0 if total is 0)."""
    total = sum(values.values())
    if total <= 0:
        return {key: 0.0 for key in values}
    return {key: value / total * 100 for key, value in values.items()}


def calculate_base_equities(
    participant_ids: Sequence[str],
    assignments: Sequence[Assignment],
    responsibilities: Sequence[Responsibility],
) -> Dict[str, float]:
    """Base equity percentage per participant.

    Returns:
        participant id -> base equity (0-100); all zeros when no participant
        holds any responsibility weight.
    """
    base_weights = calculate_base_weights(participant_ids, assignments, responsibilities)
    if sum(base_weights.values()) <= 0:
        logger.debug("No responsibility weight assigned; base equity is 0 for everyone")
    return normalize_to_percent(base_weights)


def holders_by_responsibility(assignments: Sequence[Assignment]) -> Dict[str, List[str]]:
    """Participant ids per responsibility id, in assignment order."""
    holders: Dict[str, List[str]] = {}
    for assignment in assignments:
        holders.setdefault(assignment.responsibility_id, []).append(assignment.participant_id)
    return holders
