"""Computation blocks for equity analysis.

This package contains the computation layer that lays calculation results out
as DataFrames suitable for Excel rendering or other consumption.

Architecture:
    Schemas (data models) → Calculations (pure functions) → Blocks → DataFrames

Key concepts:
- Blocks are reusable computation units with explicit dependencies
- Each block declares its inputs and outputs
- Dependency graph enables topological execution
- All tabular outputs are pandas DataFrames

Available blocks:
- EquityDistributionBlock: Equity split per participant plus run summary
- ResponsibilityBreakdownBlock: Weight split per responsibility
- LoadAssessmentBlock: Workload tier per participant from draft selections

Usage:
    from equity_domain.blocks import BlockContext, BlockExecutor, EquityDistributionBlock

    context = BlockContext()
    context.set("equity_snapshot", snapshot)
    BlockExecutor([EquityDistributionBlock()]).execute(context)

    equity_df = context.get("equity_by_participant")
"""

from .base import Block, BlockExecutor, BlockContext, CircularDependencyError
from .equity import EquityDistributionBlock
from .responsibilities import ResponsibilityBreakdownBlock
from .load import LoadAssessmentBlock

__all__ = [
    "Block",
    "BlockExecutor",
    "BlockContext",
    "CircularDependencyError",
    "EquityDistributionBlock",
    "ResponsibilityBreakdownBlock",
    "LoadAssessmentBlock",
]
