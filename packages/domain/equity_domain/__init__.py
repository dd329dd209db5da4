"""Co-founder Equity Engine - Core domain models and calculation logic.

This package provides the foundational layer for splitting startup equity:
- Weighted responsibilities, possibly shared between co-founders
- Qualitative factors (experience, time, investment) scaling base equity
- Weight rebalancing that keeps a responsibility table summing to 100%
- Workload assessment for participants while they select responsibilities

The domain layer is designed to be:
- Storage-agnostic (no database, no transport, no rendering)
- Deterministic (every result is a pure function of its input snapshot)
- Testable (pure Python with Pydantic validation)
"""

from .schemas import *  # noqa: F403, F401

__version__ = "0.1.0"
