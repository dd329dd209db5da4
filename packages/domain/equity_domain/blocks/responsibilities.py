"""Responsibility breakdown block.

Shows how each responsibility's weight is split between its holders.

Output DataFrames:
- responsibility_breakdown: One row per active responsibility
"""

from typing import List
import pandas as pd

from .base import Block, BlockContext
from ..calculations.assignments import find_closed_sharing_violations
from ..calculations.base_equity import holders_by_responsibility
from ..schemas import EquitySessionSnapshot


BREAKDOWN_COLUMNS = [
    "responsibility_id",
    "title",
    "category",
    "criticality",
    "sharing_allowed",
    "weight",
    "weight_pct",
    "holder_count",
    "weight_per_holder",
    "holders",
    "closed_sharing_violation",
]


class ResponsibilityBreakdownBlock(Block):
    """Splits each responsibility's weight across its assignment rows.

    Inputs (from context):
        - equity_snapshot: EquitySessionSnapshot

    Outputs (to context):
        - responsibility_breakdown: DataFrame sorted by weight descending:
            * responsibility_id, title, category, criticality, sharing_allowed
            * weight: fraction of total (0-1); weight_pct: same on 0-100
            * holder_count: number of assignment rows
            * weight_per_holder: weight / holder_count (0 when unassigned)
            * holders: comma-separated participant ids
            * closed_sharing_violation: closed but held by more than one row
    """

    def __init__(self, snapshot_key: str = "equity_snapshot"):
        self.snapshot_key = snapshot_key

    def inputs(self) -> List[str]:
        return [self.snapshot_key]

    def outputs(self) -> List[str]:
        return ["responsibility_breakdown"]

    def execute(self, context: BlockContext) -> None:
        snapshot: EquitySessionSnapshot = context.get(self.snapshot_key)
        responsibilities = snapshot.active_responsibilities()

        if not responsibilities:
            context.set("responsibility_breakdown", pd.DataFrame(columns=BREAKDOWN_COLUMNS))
            return

        holders = holders_by_responsibility(snapshot.assignments)
        violations = set(find_closed_sharing_violations(responsibilities, snapshot.assignments))

        rows = []
        for resp in responsibilities:
            resp_holders = holders.get(resp.id, [])
            rows.append({
                "responsibility_id": resp.id,
                "title": resp.title or resp.id,
                "category": resp.category,
                "criticality": resp.criticality,
                "sharing_allowed": resp.sharing_allowed or "unset",
                "weight": resp.weight,
                "weight_pct": resp.weight * 100,
                "holder_count": len(resp_holders),
                "weight_per_holder": resp.weight / len(resp_holders) if resp_holders else 0.0,
                "holders": ", ".join(resp_holders),
                "closed_sharing_violation": resp.id in violations,
            })

        df = pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
        df = df.sort_values("weight", ascending=False, kind="stable").reset_index(drop=True)
        context.set("responsibility_breakdown", df)
