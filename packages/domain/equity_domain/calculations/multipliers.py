"""Qualitative-factor multipliers.

Three independent multipliers scale a participant's base equity:

- Experience: weighted blend of a description rating and three tiered
  scales, mapped to [0.8, 1.2]
- Time: weekly-hours intensity blended with commitment duration,
  roughly [0.2, 1.6] (0.35-1.35 for typical inputs)
- Investment: share of the session's total investment pool, mapped to
  [0.7, 1.3]; needs every participant's factors

Each multiplier centers near a neutral 1.0 so that no single factor dominates
the equity outcome. A participant without a factors record gets exactly 1.0
for all three (see `multipliers_for`).
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

from ..schemas import AdditionalFactors
from .currency import DEFAULT_RATES, RateLookup

logger = logging.getLogger(__name__)

# =============================================================================
# Point Scales (0-10)
# =============================================================================

STARTUP_EXPERIENCE_POINTS: Dict[str, int] = {
    "none": 0,
    "1": 5,
    "2-3": 8,
    "4+": 10,
}

DOMAIN_EXPERTISE_POINTS: Dict[str, int] = {
    "beginner": 0,
    "intermediate": 5,
    "advanced": 8,
    "expert": 10,
}

LEADERSHIP_POINTS: Dict[str, int] = {
    "none": 0,
    "team_lead": 3,
    "manager": 5,
    "director": 8,
    "c_level": 10,
}

MAX_COMPONENT_POINTS = 10

# Blend of the experience components (sums to 1.0)
DESCRIPTION_SHARE = 0.4
STARTUP_SHARE = 0.3
DOMAIN_SHARE = 0.2
LEADERSHIP_SHARE = 0.1

EXPERIENCE_FLOOR = 0.8
EXPERIENCE_SPAN = 0.4

# =============================================================================
# Time Constants
# =============================================================================

FULL_TIME_HOURS = 40.0
MAX_TIME_SCORE = 2.0
INTENSITY_SHARE = 0.6
DURATION_SHARE = 0.4

# (upper bound in years, factor) - first bound the duration falls under wins
DURATION_BUCKETS: Tuple[Tuple[float, float], ...] = (
    (0.5, 0.5),
    (1.0, 0.7),
    (2.0, 0.9),
)
LONG_DURATION_FACTOR = 1.0

# =============================================================================
# Investment Constants
# =============================================================================

INVESTMENT_FLOOR = 0.7
INVESTMENT_SPAN = 0.6

NEUTRAL_MULTIPLIER = 1.0


# =============================================================================
# Experience
# =============================================================================

def experience_score(factors: AdditionalFactors) -> float:
    """Blend the experience components into a 0-1 score."""
    startup_pts = STARTUP_EXPERIENCE_POINTS[factors.startup_experience]
    domain_pts = DOMAIN_EXPERTISE_POINTS[factors.domain_expertise]
    leadership_pts = LEADERSHIP_POINTS[factors.leadership_level]

    return (
        factors.experience_description_rating * DESCRIPTION_SHARE
        + startup_pts * STARTUP_SHARE
        + domain_pts * DOMAIN_SHARE
        + leadership_pts * LEADERSHIP_SHARE
    ) / MAX_COMPONENT_POINTS


def calculate_experience_multiplier(factors: AdditionalFactors) -> float:
    """Map experience to a multiplier in [0.8, 1.2].

    Example:
        Rating 10, 4+ startups, expert, c_level -> score 1.0 -> 1.2
        Rating 0, none, beginner, none -> score 0.0 -> 0.8
    """
    return EXPERIENCE_FLOOR + experience_score(factors) * EXPERIENCE_SPAN


# =============================================================================
# Time
# =============================================================================

def duration_factor(years: float) -> float:
    """Bucket a committed duration (in years) into a factor."""
    for upper_bound, factor in DURATION_BUCKETS:
        if years < upper_bound:
            return factor
    return LONG_DURATION_FACTOR


def calculate_time_multiplier(factors: AdditionalFactors) -> float:
    """Blend weekly intensity (60%) with commitment duration (40%).

    Intensity is the midpoint of the declared hours range against a 40-hour
    week, capped at 2.0 (80+ hours earns nothing extra).

    Example:
        40-40 hours, 2 years -> 1.0 * 0.6 + 1.0 * 0.4 = 1.0
        10-40 hours, 6 months -> 0.625 * 0.6 + 0.7 * 0.4 = 0.655
    """
    midpoint = (factors.time_commitment_hours_min + factors.time_commitment_hours_max) / 2
    time_score = min(midpoint / FULL_TIME_HOURS, MAX_TIME_SCORE)

    return (
        time_score * INTENSITY_SHARE
        + duration_factor(factors.duration_in_years) * DURATION_SHARE
    )


# =============================================================================
# Investment
# =============================================================================

def investment_in_usd(factors: AdditionalFactors, rates: RateLookup = DEFAULT_RATES) -> float:
    """Cash plus contributed resources, converted to USD."""
    return (
        rates.to_usd(factors.cash_investment, factors.currency)
        + rates.to_usd(factors.resources_contributed, factors.currency)
    )


def calculate_investment_multiplier(
    factors: AdditionalFactors,
    all_factors: Sequence[AdditionalFactors],
    rates: RateLookup = DEFAULT_RATES,
) -> float:
    """Map a participant's share of the investment pool to [0.7, 1.3].

    The pool is every supplied factors record's investment in USD. With no
    investment at all the multiplier is exactly 1.0 for everyone.

    Example:
        Alice $30k, Bob $10k, Carol $0
        -> Alice 0.7 + 0.75 * 0.6 = 1.15, Bob 0.85, Carol 0.7
    """
    total_usd = sum(investment_in_usd(f, rates) for f in all_factors)

    if total_usd <= 0:
        return NEUTRAL_MULTIPLIER

    share = investment_in_usd(factors, rates) / total_usd
    return INVESTMENT_FLOOR + share * INVESTMENT_SPAN


# =============================================================================
# All Multipliers
# =============================================================================

def multipliers_for(
    factors: Optional[AdditionalFactors],
    all_factors: Sequence[AdditionalFactors],
    rates: RateLookup = DEFAULT_RATES,
) -> Tuple[float, float, float]:
    """Return (experience, time, investment) multipliers.

    Missing factors yield neutral multipliers so that a participant who has not
    filled anything in is still included in the calculation.
    """
    if factors is None:
        return NEUTRAL_MULTIPLIER, NEUTRAL_MULTIPLIER, NEUTRAL_MULTIPLIER

    return (
        calculate_experience_multiplier(factors),
        calculate_time_multiplier(factors),
        calculate_investment_multiplier(factors, all_factors, rates),
    )
