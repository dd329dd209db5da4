"""Workload assessment during responsibility selection.

Advisory only: classifies the weight a participant has selected so far into a
load tier for live feedback. It never blocks or changes selections and does
not feed the equity calculation.

Tiers (load percentage, upper bound inclusive):
    <= 40  green   Ideal Load
    <= 65  yellow  Heavy Load
    <= 85  orange  Very Heavy
    above  red     Unsustainable
"""

import logging
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..schemas import LoadAssessment, LoadStatus, Responsibility

logger = logging.getLogger(__name__)

LOAD_THRESHOLDS: Tuple[Tuple[float, LoadStatus], ...] = (
    (40.0, "green"),
    (65.0, "yellow"),
    (85.0, "orange"),
)
OVERLOAD_STATUS: LoadStatus = "red"

# Decimal places kept when comparing a load against the thresholds
LOAD_PRECISION = 9

LOAD_LABELS: Dict[str, str] = {
    "green": "Ideal Load",
    "yellow": "Heavy Load",
    "orange": "Very Heavy",
    "red": "Unsustainable",
}

LOAD_MESSAGES: Dict[str, str] = {
    "green": (
        "Your selection looks balanced for a co-founder role. "
        "You can proceed or adjust if needed."
    ),
    "yellow": (
        "Your workload is on the heavier side. Consider if you can realistically handle "
        "these responsibilities or if some could be shared or delegated."
    ),
    "orange": (
        "This is a very heavy workload. Review your selections carefully; "
        "you may be taking on too much to execute effectively."
    ),
    "red": (
        "This workload is likely unsustainable. Strongly consider reducing your "
        "responsibilities to ensure quality execution."
    ),
}


def calculate_participant_load(
    participant_id: str,
    selected_ids: Sequence[str],
    responsibilities: Sequence[Responsibility],
    selection_map: Optional[Mapping[str, Sequence[str]]] = None,
) -> float:
    """Accumulated selected weight as a percentage.

    Args:
        participant_id: Participant whose selection is assessed
        selected_ids: Responsibility ids currently selected by the participant
        responsibilities: Responsibilities with their weights
        selection_map: responsibility id -> participants currently selecting
            it. When given, each responsibility's weight is split between its
            selectors; when omitted every selection counts as exclusive.

    Returns:
        Load percentage (unknown responsibility ids contribute nothing)
    """
    weights = {r.id: r.weight for r in responsibilities}
    load = 0.0

    for rid in selected_ids:
        weight = weights.get(rid)
        if weight is None:
            continue

        if selection_map is None:
            load += weight * 100
        else:
            selectors = selection_map.get(rid) or [participant_id]
            load += weight * 100 / len(selectors)

    return load


def get_load_status(load_pct: float) -> LoadStatus:
    """Map a load percentage to its tier.

    The percentage is rounded first so float noise from weight * 100
    (0.4 * 100 == 40.00000000000001) does not push a boundary load up a tier.
    """
    load_pct = round(load_pct, LOAD_PRECISION)
    for upper_bound, status in LOAD_THRESHOLDS:
        if load_pct <= upper_bound:
            return status
    return OVERLOAD_STATUS


def get_load_label(status: LoadStatus) -> str:
    return LOAD_LABELS[status]


def get_load_message(status: LoadStatus) -> str:
    return LOAD_MESSAGES[status]


def assess_load(
    participant_id: str,
    selected_ids: Sequence[str],
    responsibilities: Sequence[Responsibility],
    selection_map: Optional[Mapping[str, Sequence[str]]] = None,
) -> LoadAssessment:
    """Compute load and wrap it with its tier, label and guidance message."""
    load_pct = calculate_participant_load(participant_id, selected_ids, responsibilities, selection_map)
    status = get_load_status(load_pct)
    logger.debug("Load for %s: %.2f%% (%s)", participant_id, load_pct, status)

    return LoadAssessment(
        participant_id=participant_id,
        load_pct=load_pct,
        status=status,
        label=get_load_label(status),
        message=get_load_message(status),
    )
