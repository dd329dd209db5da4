"""Responsibility weight rebalancing.

Keeps a responsibility-weight table summing to 1.0 while the owner edits it
one entry at a time. The edited entry takes the requested value exactly; the
difference is absorbed by the unlocked entries in proportion to their current
weights, then the unlocked entries are rescaled so the whole table sums to
exactly 1.0.

Example:
    rebalance_weights({"a": 0.5, "b": 0.3, "c": 0.2}, "a", 0.6)
    -> {"a": 0.6, "b": 0.24, "c": 0.16}

Tables are plain `{responsibility_id: weight}` mappings; `apply_weights`
moves a table back onto Responsibility records.
"""

import logging
from typing import AbstractSet, Dict, List, Mapping, Optional, Sequence

from ..schemas import Responsibility

logger = logging.getLogger(__name__)

# Unlocked entries never drop below this during delta absorption
MIN_WEIGHT = 0.001

# Tolerance of the "total must equal 100%" check shown to the owner
BALANCE_TOLERANCE = 0.01


def rebalance_weights(
    weights: Mapping[str, float],
    changed_id: str,
    new_weight: float,
    locked_ids: Optional[AbstractSet[str]] = None,
) -> Dict[str, float]:
    """Set one weight and redistribute the change over unlocked weights.

    Args:
        weights: Current table (active responsibilities only)
        changed_id: Entry the user just edited
        new_weight: Requested value, applied without clamping
        locked_ids: Entries pinned by the user; never modified

    Returns:
        A new table. If `changed_id` is unknown the table is returned
        unchanged. If no unlocked weight is available to absorb the change,
        only the edited entry moves and the total deviates from 1.0 until the
        user frees up room elsewhere.
    """
    locked_ids = locked_ids or frozenset()
    result = dict(weights)

    if changed_id not in result:
        logger.debug("Rebalance requested for unknown responsibility %s", changed_id)
        return result

    delta = new_weight - result[changed_id]
    result[changed_id] = new_weight

    unlocked = [rid for rid in result if rid != changed_id and rid not in locked_ids]
    total_unlocked = sum(result[rid] for rid in unlocked)

    if not unlocked or total_unlocked <= 0:
        logger.debug("No unlocked weight to absorb delta %.4f for %s", delta, changed_id)
        return result

    # Pass 1: absorb the delta proportionally, flooring each entry
    for rid in unlocked:
        proportion = result[rid] / total_unlocked
        result[rid] = max(MIN_WEIGHT, result[rid] - delta * proportion)

    # Pass 2: rescale unlocked entries to fill the remaining budget exactly
    fixed_total = sum(w for rid, w in result.items() if rid == changed_id or rid in locked_ids)
    remaining_budget = 1.0 - fixed_total
    current_unlocked = sum(result[rid] for rid in unlocked)

    if current_unlocked > 0:
        for rid in unlocked:
            result[rid] = result[rid] / current_unlocked * remaining_budget

    return result


def normalize_weights(weights: Mapping[str, float]) -> Dict[str, float]:
    """Scale a table so it sums to 1.0 (an all-zero table is returned as-is)."""
    total = sum(weights.values())
    if total <= 0:
        return dict(weights)
    return {rid: w / total for rid, w in weights.items()}


def equal_weights(responsibilities: Sequence[Responsibility]) -> Dict[str, float]:
    """Uniform starting table over the active responsibilities."""
    active = [r.id for r in responsibilities if r.is_active]
    if not active:
        return {}
    return {rid: 1.0 / len(active) for rid in active}


def weight_table(responsibilities: Sequence[Responsibility]) -> Dict[str, float]:
    """Current table of the active responsibilities."""
    return {r.id: r.weight for r in responsibilities if r.is_active}


def weights_balanced(weights: Mapping[str, float], tolerance: float = BALANCE_TOLERANCE) -> bool:
    """True when the table totals 100% within tolerance."""
    return abs(sum(weights.values()) - 1.0) < tolerance


def apply_weights(
    responsibilities: Sequence[Responsibility],
    weights: Mapping[str, float],
) -> List[Responsibility]:
    """Return new records carrying the table's weights.

    Records absent from the table are returned unchanged.
    """
    return [
        r.model_copy(update={"weight": weights[r.id]}) if r.id in weights else r
        for r in responsibilities
    ]


def apply_weight_suggestions(
    responsibilities: Sequence[Responsibility],
    suggestions: Sequence[Mapping[str, object]],
) -> List[Responsibility]:
    """Merge externally suggested weights, then normalize to 1.0.

    Args:
        responsibilities: Active responsibilities being weighted
        suggestions: Records with `responsibility_id` and `suggested_weight`
            from the suggestion provider. Unknown ids are ignored;
            responsibilities without a suggestion keep their weight.
    """
    table = weight_table(responsibilities)
    for suggestion in suggestions:
        rid = suggestion.get("responsibility_id")
        if rid not in table:
            logger.debug("Ignoring weight suggestion for unknown responsibility %s", rid)
            continue
        table[rid] = float(suggestion.get("suggested_weight", table[rid]))

    return apply_weights(responsibilities, normalize_weights(table))
