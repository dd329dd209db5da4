"""Equity report renderer: one workbook with the split, weights and factors."""

from __future__ import annotations

import logging
from typing import List, Tuple

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, Border, Side, Alignment, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from equity_domain.blocks import (
    BlockContext,
    BlockExecutor,
    EquityDistributionBlock,
    ResponsibilityBreakdownBlock,
)
from equity_domain.schemas import EquityReportCFG

logger = logging.getLogger(__name__)

HEADER_ROW = 3
FIRST_DATA_ROW = 4

# (DataFrame column, header, kind) - kind drives number format
EQUITY_COLUMNS: List[Tuple[str, str, str]] = [
    ("participant_name", "Participant", "text"),
    ("base_weight", "Base\nWeight", "weight"),
    ("base_equity", "Base\nEquity", "percent"),
    ("experience_multiplier", "Experience\nMultiplier", "multiplier"),
    ("time_multiplier", "Time\nMultiplier", "multiplier"),
    ("investment_multiplier", "Investment\nMultiplier", "multiplier"),
    ("combined_multiplier", "Combined\nMultiplier", "multiplier"),
    ("adjusted_equity", "Adjusted\nEquity", "number"),
    ("final_equity", "Final\nEquity", "percent"),
    ("exclusive_responsibilities", "Exclusive\nResponsibilities", "text"),
    ("shared_responsibilities", "Shared\nResponsibilities", "text"),
]

MULTIPLIER_COLUMNS = {
    "experience_multiplier",
    "time_multiplier",
    "investment_multiplier",
    "combined_multiplier",
}

# Columns that get a SUM in the total row
TOTALLED_COLUMNS = {"base_weight", "base_equity", "adjusted_equity", "final_equity"}

RESPONSIBILITY_COLUMNS: List[Tuple[str, str, str]] = [
    ("title", "Responsibility", "text"),
    ("category", "Category", "text"),
    ("criticality", "Criticality", "text"),
    ("sharing_allowed", "Sharing", "text"),
    ("weight", "Weight", "percent_fraction"),
    ("holder_count", "Holders", "count"),
    ("weight_per_holder", "Weight per\nHolder", "percent_fraction"),
    ("holders", "Held By", "text"),
]

FACTOR_ROWS: List[Tuple[str, str]] = [
    ("responsibility_weight", "Responsibility"),
    ("experience_weight", "Experience"),
    ("time_weight", "Time"),
    ("investment_weight", "Investment"),
]


class EquityReportRenderer:
    """Render the equity split for one session snapshot."""

    def __init__(self, config: EquityReportCFG):
        self.config = config

        self.title_font = Font(bold=True, size=14)
        self.bold_font = Font(bold=True)
        self.blue_font = Font(color="0000FF")  # Inputs (coefficients)
        self.warning_font = Font(bold=True, color="C00000")

        self.header_font = Font(bold=True, color="FFFFFF")
        self.header_fill = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
        self.total_fill = PatternFill(start_color="E7E6E6", end_color="E7E6E6", fill_type="solid")

        self.top_border = Border(top=Side(style='medium'))
        self.header_border = Border(right=Side(style='thin', color="FFFFFF"))
        self.header_align = Alignment(horizontal='center', vertical='center', wrap_text=True)

    def render(self, output_path: str) -> str:
        wb = self.build_workbook()
        wb.save(output_path)
        return output_path

    def build_workbook(self) -> Workbook:
        context = BlockContext()
        context.set("equity_snapshot", self.config.snapshot)
        BlockExecutor([
            EquityDistributionBlock(),
            ResponsibilityBreakdownBlock(),
        ]).execute(context)

        wb = Workbook()
        wb.remove(wb.active)

        self._render_equity_sheet(wb, context.get("equity_by_participant"))

        if self.config.include_responsibilities:
            self._render_responsibility_sheet(wb, context.get("responsibility_breakdown"))

        if self.config.include_factor_weights:
            self._render_factor_weight_sheet(wb)

        return wb

    # ------------------------------------------------------------------ #
    # Sheets
    # ------------------------------------------------------------------ #

    def _render_equity_sheet(self, wb: Workbook, equity_df: pd.DataFrame) -> None:
        sheet = wb.create_sheet("Equity Split")
        sheet.cell(row=1, column=1, value=self.config.title).font = self.title_font

        columns = [
            col for col in EQUITY_COLUMNS
            if self.config.include_multipliers or col[0] not in MULTIPLIER_COLUMNS
        ]
        self._write_header(sheet, [header for _, header, _ in columns])

        row = FIRST_DATA_ROW
        for record in equity_df.to_dict("records"):
            for col_idx, (key, _, kind) in enumerate(columns, start=1):
                self._write_value(sheet.cell(row=row, column=col_idx), record[key], kind)
            row += 1

        last_data_row = row - 1
        sheet.cell(row=row, column=1, value="Total").font = self.bold_font
        for col_idx, (key, _, kind) in enumerate(columns, start=1):
            cell = sheet.cell(row=row, column=col_idx)
            cell.fill = self.total_fill
            cell.border = self.top_border
            if key in TOTALLED_COLUMNS:
                letter = get_column_letter(col_idx)
                if last_data_row >= FIRST_DATA_ROW:
                    cell.value = f"=SUM({letter}{FIRST_DATA_ROW}:{letter}{last_data_row})"
                else:
                    cell.value = 0
                cell.font = self.bold_font
                cell.number_format = self._number_format(kind)

        if equity_df.empty:
            logger.info("Rendering equity report with no participants")

        sheet.freeze_panes = f"B{FIRST_DATA_ROW}"
        sheet.row_dimensions[HEADER_ROW].height = 30
        self._set_widths(sheet, columns)

    def _render_responsibility_sheet(self, wb: Workbook, breakdown_df: pd.DataFrame) -> None:
        sheet = wb.create_sheet("Responsibilities")
        sheet.cell(row=1, column=1, value="Responsibility Weights").font = self.title_font
        self._write_header(sheet, [header for _, header, _ in RESPONSIBILITY_COLUMNS])

        row = FIRST_DATA_ROW
        for record in breakdown_df.to_dict("records"):
            for col_idx, (key, _, kind) in enumerate(RESPONSIBILITY_COLUMNS, start=1):
                cell = sheet.cell(row=row, column=col_idx)
                self._write_value(cell, record[key], kind)
                if key == "sharing_allowed" and record["closed_sharing_violation"]:
                    cell.font = self.warning_font
            row += 1

        # Weight total should read 100%
        weight_idx = [key for key, _, _ in RESPONSIBILITY_COLUMNS].index("weight") + 1
        weight_col = get_column_letter(weight_idx)
        sheet.cell(row=row, column=1, value="Total").font = self.bold_font
        total_cell = sheet.cell(row=row, column=weight_idx)
        total_cell.value = (
            f"=SUM({weight_col}{FIRST_DATA_ROW}:{weight_col}{row - 1})"
            if row > FIRST_DATA_ROW else 0
        )
        total_cell.number_format = self.config.percent_format
        total_cell.font = self.bold_font
        for col_idx in range(1, len(RESPONSIBILITY_COLUMNS) + 1):
            sheet.cell(row=row, column=col_idx).fill = self.total_fill
            sheet.cell(row=row, column=col_idx).border = self.top_border

        sheet.freeze_panes = f"B{FIRST_DATA_ROW}"
        sheet.row_dimensions[HEADER_ROW].height = 30
        self._set_widths(sheet, RESPONSIBILITY_COLUMNS)

    def _render_factor_weight_sheet(self, wb: Workbook) -> None:
        weights = self.config.snapshot.factor_weights
        sheet = wb.create_sheet("Factor Weights")
        sheet.cell(row=1, column=1, value="Factor Weights").font = self.title_font
        self._write_header(sheet, ["Factor", "Coefficient"])

        row = FIRST_DATA_ROW
        for key, label in FACTOR_ROWS:
            sheet.cell(row=row, column=1, value=label)
            cell = sheet.cell(row=row, column=2, value=getattr(weights, key))
            cell.font = self.blue_font
            cell.number_format = "0%"
            row += 1

        sheet.cell(row=row, column=1, value="Total").font = self.bold_font
        total_cell = sheet.cell(row=row, column=2, value=f"=SUM(B{FIRST_DATA_ROW}:B{row - 1})")
        total_cell.font = self.bold_font
        total_cell.number_format = "0%"
        total_cell.border = self.top_border

        for warning in weights.warnings():
            row += 2
            sheet.cell(row=row, column=1, value=warning).font = self.warning_font

        sheet.column_dimensions["A"].width = 20
        sheet.column_dimensions["B"].width = 14

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _write_header(self, sheet: Worksheet, headers: List[str]) -> None:
        for col_idx, header in enumerate(headers, start=1):
            cell = sheet.cell(row=HEADER_ROW, column=col_idx, value=header)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = self.header_align
            cell.border = self.header_border

    def _write_value(self, cell, value, kind: str) -> None:
        if kind == "percent":
            # DataFrame holds 0-100; Excel percent formats expect a fraction
            cell.value = float(value) / 100
        elif kind in ("weight", "multiplier", "number", "percent_fraction"):
            cell.value = float(value)
        elif kind == "count":
            cell.value = int(value)
        else:
            cell.value = value if value != "" else None
        cell.number_format = self._number_format(kind)

    def _number_format(self, kind: str) -> str:
        if kind in ("percent", "percent_fraction"):
            return self.config.percent_format
        if kind == "weight":
            return "0.0000"
        if kind == "multiplier":
            return '0.000"x"'
        if kind == "number":
            return "0.00"
        if kind == "count":
            return "0"
        return "General"

    def _set_widths(self, sheet: Worksheet, columns: List[Tuple[str, str, str]]) -> None:
        for col_idx, (_, _, kind) in enumerate(columns, start=1):
            sheet.column_dimensions[get_column_letter(col_idx)].width = 28 if kind == "text" else 13
