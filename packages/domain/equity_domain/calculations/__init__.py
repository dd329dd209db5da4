"""Pure equity calculations.

Every function here is a deterministic transform of plain records: no I/O,
no shared state, safe to call concurrently from any number of callers.

Modules:
- multipliers: experience, time and investment multipliers
- currency: pluggable conversion to USD for investment amounts
- base_equity: split responsibility weight and base equity percentages
- distribution: the full equity distribution calculation
- rebalance: responsibility-weight table rebalancing and normalization
- load: workload tiers shown while participants select
- assignments: conflicts, gaps and final assignment generation
"""

from .currency import RateLookup, FixedRateTable, DEFAULT_RATES
from .multipliers import (
    calculate_experience_multiplier,
    calculate_time_multiplier,
    calculate_investment_multiplier,
    multipliers_for,
)
from .base_equity import (
    calculate_base_weight,
    calculate_base_weights,
    calculate_base_equities,
)
from .distribution import (
    calculate_equity_distribution,
    calculate_from_snapshot,
    combine_multipliers,
)
from .rebalance import (
    rebalance_weights,
    normalize_weights,
    equal_weights,
    weight_table,
    weights_balanced,
    apply_weights,
    apply_weight_suggestions,
)
from .load import (
    calculate_participant_load,
    get_load_status,
    get_load_label,
    get_load_message,
    assess_load,
)
from .assignments import (
    build_selection_map,
    find_conflicts,
    find_gaps,
    generate_assignments,
    find_closed_sharing_violations,
)

__all__ = [
    "RateLookup",
    "FixedRateTable",
    "DEFAULT_RATES",
    "calculate_experience_multiplier",
    "calculate_time_multiplier",
    "calculate_investment_multiplier",
    "multipliers_for",
    "calculate_base_weight",
    "calculate_base_weights",
    "calculate_base_equities",
    "calculate_equity_distribution",
    "calculate_from_snapshot",
    "combine_multipliers",
    "rebalance_weights",
    "normalize_weights",
    "equal_weights",
    "weight_table",
    "weights_balanced",
    "apply_weights",
    "apply_weight_suggestions",
    "calculate_participant_load",
    "get_load_status",
    "get_load_label",
    "get_load_message",
    "assess_load",
    "build_selection_map",
    "find_conflicts",
    "find_gaps",
    "generate_assignments",
    "find_closed_sharing_violations",
]
