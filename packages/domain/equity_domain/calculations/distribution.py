"""Equity distribution calculator.

Turns responsibility assignments and per-participant factors into a
normalized equity percentage per participant.

Pipeline (per participant):
    1. Base equity: share of total (split) responsibility weight, as %
    2. Multipliers: experience, time, investment (1.0 when factors missing)
    3. Combined multiplier:
           1.0 * responsibility_weight
         + experience * experience_weight
         + time * time_weight
         + investment * investment_weight
    4. Adjusted equity: base equity * combined multiplier
    5. Final equity: adjusted equity as % of total adjusted equity

The two normalizations (steps 1 and 5) guarantee that final equity sums to
100 no matter how extreme the multipliers are.

Note:
    The responsibility term multiplies a constant 1.0 rather than the
    participant's base equity, so its coefficient does not scale
    responsibility contribution the way the other coefficients scale their
    multipliers. This is kept as-is; see DESIGN.md.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..schemas import (
    AdditionalFactors,
    Assignment,
    EquityCalculation,
    EquitySessionSnapshot,
    FactorWeightConfig,
    Participant,
    Responsibility,
    SharedResponsibility,
)
from .assignments import find_closed_sharing_violations
from .base_equity import calculate_base_weights, holders_by_responsibility, normalize_to_percent
from .currency import DEFAULT_RATES, RateLookup
from .multipliers import multipliers_for

logger = logging.getLogger(__name__)


def combine_multipliers(
    experience: float,
    time: float,
    investment: float,
    factor_weights: FactorWeightConfig,
) -> float:
    """Blend the multipliers with the session coefficients.

    Coefficients are used as given, whether or not they sum to 1.0.
    """
    return (
        1.0 * factor_weights.responsibility_weight
        + experience * factor_weights.experience_weight
        + time * factor_weights.time_weight
        + investment * factor_weights.investment_weight
    )


def split_responsibilities(
    participant_id: str,
    assignments: Sequence[Assignment],
    holders: Optional[Dict[str, List[str]]] = None,
) -> Tuple[List[str], List[SharedResponsibility]]:
    """Separate a participant's responsibilities into exclusive and shared.

    Returns:
        (exclusive ids, shared records with co-holder ids)
    """
    if holders is None:
        holders = holders_by_responsibility(assignments)

    exclusive: List[str] = []
    shared: List[SharedResponsibility] = []

    for assignment in assignments:
        if assignment.participant_id != participant_id:
            continue

        others = [
            pid for pid in holders.get(assignment.responsibility_id, [])
            if pid != participant_id
        ]
        if others:
            shared.append(SharedResponsibility(id=assignment.responsibility_id, shared_with=others))
        else:
            exclusive.append(assignment.responsibility_id)

    return exclusive, shared


def calculate_equity_distribution(
    participants: Sequence[Participant],
    assignments: Sequence[Assignment],
    responsibilities: Sequence[Responsibility],
    all_factors: Sequence[AdditionalFactors],
    factor_weights: FactorWeightConfig,
    rates: RateLookup = DEFAULT_RATES,
) -> List[EquityCalculation]:
    """Compute one EquityCalculation per participant.

    Args:
        participants: Participants to include, in output order
        assignments: Final assignments (orphaned references are skipped)
        responsibilities: Responsibilities with their frozen weights
        all_factors: Additional factors; participants without one are neutral
        factor_weights: Session coefficients for the combined multiplier
        rates: Currency conversion for the investment multiplier

    Returns:
        Results in participant order; empty if there are no participants.
    """
    if not participants:
        return []

    for responsibility_id in find_closed_sharing_violations(responsibilities, assignments):
        logger.warning(
            "Closed responsibility %s has more than one assignment; splitting its weight",
            responsibility_id,
        )

    if not factor_weights.is_balanced():
        logger.warning(
            "Factor weights total %.4f, not 1.0; computing with them as given",
            factor_weights.total,
        )

    participant_ids = [p.id for p in participants]
    base_weights = calculate_base_weights(participant_ids, assignments, responsibilities)
    base_equities = normalize_to_percent(base_weights)

    factors_by_participant = {f.participant_id: f for f in all_factors}
    holders = holders_by_responsibility(assignments)

    # Step 2: multipliers and adjusted equity
    intermediates = []
    total_adjusted = 0.0

    for participant in participants:
        factors = factors_by_participant.get(participant.id)
        if factors is None:
            logger.debug("No additional factors for %s; using neutral multipliers", participant.id)

        experience, time, investment = multipliers_for(factors, all_factors, rates)
        combined = combine_multipliers(experience, time, investment, factor_weights)

        base_equity = base_equities[participant.id]
        adjusted = base_equity * combined
        total_adjusted += adjusted

        exclusive, shared = split_responsibilities(participant.id, assignments, holders)

        intermediates.append({
            "participant_id": participant.id,
            "participant_name": participant.name,
            "base_weight": base_weights[participant.id],
            "base_equity": base_equity,
            "experience_multiplier": experience,
            "time_multiplier": time,
            "investment_multiplier": investment,
            "combined_multiplier": combined,
            "adjusted_equity": adjusted,
            "exclusive_responsibilities": exclusive,
            "shared_responsibilities": shared,
        })

    # Step 3: normalize to 100%
    if total_adjusted <= 0:
        logger.debug("Total adjusted equity is 0; final equity is 0 for everyone")

    return [
        EquityCalculation(
            final_equity=(item["adjusted_equity"] / total_adjusted * 100) if total_adjusted > 0 else 0.0,
            **item,
        )
        for item in intermediates
    ]


def calculate_from_snapshot(
    snapshot: EquitySessionSnapshot,
    rates: RateLookup = DEFAULT_RATES,
) -> List[EquityCalculation]:
    """Run the calculation over a session snapshot.

    Removed participants and archived responsibilities are left out. Factors
    of removed participants do not count towards the investment pool.
    """
    participants = snapshot.active_participants()
    active_ids = {p.id for p in participants}

    return calculate_equity_distribution(
        participants=participants,
        assignments=snapshot.assignments,
        responsibilities=snapshot.active_responsibilities(),
        all_factors=[f for f in snapshot.factors if f.participant_id in active_ids],
        factor_weights=snapshot.factor_weights,
        rates=rates,
    )
