"""Equity domain schemas.

This package contains all Pydantic models for the equity domain layer:
- Base types and conventions
- Responsibilities, selections and assignments
- Participants
- Additional factors and factor-weight configuration
- Session snapshots (calculation input)
- Report configuration
- Calculation results, load assessments, conflicts and gaps

Usage:
    from equity_domain.schemas import (
        Responsibility, Assignment, Participant,
        AdditionalFactors, FactorWeightConfig,
        EquitySessionSnapshot, EquityCalculation,
    )
"""

# Base types
from .base import (
    DomainModel,
    Weight,
    Rating,
    Hours,
    MoneyAmount,
    Coefficient,
    Percentage,
    RecordId,
)

# Responsibilities
from .responsibilities import (
    Responsibility,
    Selection,
    Assignment,
    Criticality,
    SharingStatus,
)

# Participants
from .participants import Participant

# Factors
from .factors import (
    AdditionalFactors,
    FactorWeightConfig,
    SelectionGuidance,
    Currency,
)

# Session
from .session import EquitySessionSnapshot

# Report
from .report import EquityReportCFG

# Results
from .results import (
    EquityCalculation,
    SharedResponsibility,
    LoadAssessment,
    LoadStatus,
    ConflictItem,
    GapItem,
)

__all__ = [
    # Base types
    "DomainModel",
    "Weight",
    "Rating",
    "Hours",
    "MoneyAmount",
    "Coefficient",
    "Percentage",
    "RecordId",
    # Responsibilities
    "Responsibility",
    "Selection",
    "Assignment",
    "Criticality",
    "SharingStatus",
    # Participants
    "Participant",
    # Factors
    "AdditionalFactors",
    "FactorWeightConfig",
    "SelectionGuidance",
    "Currency",
    # Session
    "EquitySessionSnapshot",
    # Report
    "EquityReportCFG",
    # Results
    "EquityCalculation",
    "SharedResponsibility",
    "LoadAssessment",
    "LoadStatus",
    "ConflictItem",
    "GapItem",
]
