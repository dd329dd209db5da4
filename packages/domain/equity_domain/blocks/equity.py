"""Equity distribution block.

Runs the equity calculation over a session snapshot and lays the results out
as DataFrames for rendering or analysis.

Output DataFrames:
- equity_by_participant: One row per participant with every calculation stage
- equity_summary: Single row of run-level totals and checks
"""

from typing import List
import pandas as pd

from .base import Block, BlockContext
from ..calculations import calculate_from_snapshot
from ..schemas import EquityCalculation, EquitySessionSnapshot


PARTICIPANT_COLUMNS = [
    "participant_id",
    "participant_name",
    "base_weight",
    "base_equity",
    "experience_multiplier",
    "time_multiplier",
    "investment_multiplier",
    "combined_multiplier",
    "adjusted_equity",
    "final_equity",
    "exclusive_count",
    "shared_count",
    "exclusive_responsibilities",
    "shared_responsibilities",
]


class EquityDistributionBlock(Block):
    """Computes the equity split for a session snapshot.

    Inputs (from context):
        - equity_snapshot: EquitySessionSnapshot

    Outputs (to context):
        - equity_calculations: List[EquityCalculation], in participant order

        - equity_by_participant: DataFrame sorted by final_equity descending:
            * participant_id / participant_name
            * base_weight, base_equity
            * experience/time/investment/combined multipliers
            * adjusted_equity, final_equity
            * exclusive_count, shared_count
            * exclusive_responsibilities: comma-separated ids
            * shared_responsibilities: "id (with a, b)" entries, comma-separated

        - equity_summary: DataFrame with single row:
            * participant_count
            * assigned_participants: participants with base_weight > 0
            * responsibility_weight_total: sum of active responsibility weights
            * total_base_equity, total_final_equity (100 or 0)
            * factor_weight_total, factor_weights_balanced

    Example:
        context = BlockContext()
        context.set("equity_snapshot", snapshot)

        EquityDistributionBlock().execute(context)
        df = context.get("equity_by_participant")
    """

    def __init__(self, snapshot_key: str = "equity_snapshot"):
        """Initialize EquityDistributionBlock.

        Args:
            snapshot_key: Context key for the EquitySessionSnapshot input
        """
        self.snapshot_key = snapshot_key

    def inputs(self) -> List[str]:
        return [self.snapshot_key]

    def outputs(self) -> List[str]:
        return [
            "equity_calculations",
            "equity_by_participant",
            "equity_summary",
        ]

    def execute(self, context: BlockContext) -> None:
        snapshot: EquitySessionSnapshot = context.get(self.snapshot_key)

        calculations = calculate_from_snapshot(snapshot)
        context.set("equity_calculations", calculations)

        by_participant_df = self._compute_by_participant(calculations)
        context.set("equity_by_participant", by_participant_df)

        context.set("equity_summary", self._compute_summary(snapshot, by_participant_df))

    def _compute_by_participant(self, calculations: List[EquityCalculation]) -> pd.DataFrame:
        if not calculations:
            return pd.DataFrame(columns=PARTICIPANT_COLUMNS)

        rows = []
        for calc in calculations:
            rows.append({
                "participant_id": calc.participant_id,
                "participant_name": calc.participant_name or calc.participant_id,
                "base_weight": calc.base_weight,
                "base_equity": calc.base_equity,
                "experience_multiplier": calc.experience_multiplier,
                "time_multiplier": calc.time_multiplier,
                "investment_multiplier": calc.investment_multiplier,
                "combined_multiplier": calc.combined_multiplier,
                "adjusted_equity": calc.adjusted_equity,
                "final_equity": calc.final_equity,
                "exclusive_count": len(calc.exclusive_responsibilities),
                "shared_count": len(calc.shared_responsibilities),
                "exclusive_responsibilities": ", ".join(calc.exclusive_responsibilities),
                "shared_responsibilities": ", ".join(
                    f"{s.id} (with {', '.join(s.shared_with)})"
                    for s in calc.shared_responsibilities
                ),
            })

        df = pd.DataFrame(rows, columns=PARTICIPANT_COLUMNS)
        return df.sort_values("final_equity", ascending=False, kind="stable").reset_index(drop=True)

    def _compute_summary(
        self, snapshot: EquitySessionSnapshot, by_participant_df: pd.DataFrame
    ) -> pd.DataFrame:
        factor_weights = snapshot.factor_weights

        if by_participant_df.empty:
            assigned = 0
            total_base = 0.0
            total_final = 0.0
        else:
            assigned = int((by_participant_df["base_weight"] > 0).sum())
            total_base = float(by_participant_df["base_equity"].sum())
            total_final = float(by_participant_df["final_equity"].sum())

        return pd.DataFrame([{
            "participant_count": len(by_participant_df),
            "assigned_participants": assigned,
            "responsibility_weight_total": snapshot.weight_total(),
            "total_base_equity": total_base,
            "total_final_equity": total_final,
            "factor_weight_total": factor_weights.total,
            "factor_weights_balanced": factor_weights.is_balanced(),
        }])
