"""Report configuration - entry point for Excel generation.

The EquityReportCFG ties a session snapshot to display options. It is what
gets passed to the Excel renderer to generate the equity report workbook.
"""

from pydantic import Field

from .base import DomainModel
from .session import EquitySessionSnapshot


class EquityReportCFG(DomainModel):
    """Top-level configuration for the equity report workbook.

    Generated sheets (depending on config):
        1. Equity Split - one row per participant with every calculation stage
        2. Responsibilities - weight split per responsibility
        3. Factor Weights - session coefficients and their total

    Example:
        config = EquityReportCFG(
            snapshot=snapshot,
            title="Acme Co-founder Equity",
            include_multipliers=True,
        )
    """

    snapshot: EquitySessionSnapshot = Field(
        description="Session inputs to calculate and report on"
    )

    title: str = Field(
        default="Co-founder Equity Split",
        description="Title written at the top of the Equity Split sheet"
    )

    include_multipliers: bool = Field(
        default=True,
        description="Show the experience/time/investment/combined multiplier columns"
    )

    include_responsibilities: bool = Field(
        default=True,
        description="Generate the Responsibilities sheet"
    )

    include_factor_weights: bool = Field(
        default=True,
        description="Generate the Factor Weights sheet"
    )

    percent_format: str = Field(
        default="0.00%",
        description="Excel number format for percentage cells"
    )
