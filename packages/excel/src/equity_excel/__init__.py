"""Excel rendering for co-founder equity reports."""

from .report_renderer import EquityReportRenderer

__all__ = ["EquityReportRenderer"]
