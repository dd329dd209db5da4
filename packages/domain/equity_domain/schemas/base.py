"""Base classes and type system for equity domain models.

This module provides the foundational types and base class used throughout
the equity schema system. Every record exchanged with the calculation engine
is an immutable value object: callers build a fresh snapshot for each run and
the engine returns fresh results.
"""

from typing import Annotated
from pydantic import BaseModel, Field, ConfigDict

# =============================================================================
# Base Model
# =============================================================================

class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for all Pydantic models in the domain layer:
    - Frozen instances (updates go through model_copy)
    - Enum/Literal value serialization
    """

    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
    )


# =============================================================================
# Type Aliases - Numeric
# =============================================================================

Weight = Annotated[
    float,
    Field(ge=0, le=1, description="Fraction of total responsibility weight (0.0 to 1.0)")
]

Rating = Annotated[
    float,
    Field(ge=0, le=10, description="Externally assessed rating on a 0-10 scale")
]

Hours = Annotated[
    float,
    Field(ge=0, description="Weekly hours (non-negative)")
]

MoneyAmount = Annotated[
    float,
    Field(ge=0, description="Currency amount in the record's own currency (non-negative)")
]

Coefficient = Annotated[
    float,
    Field(ge=0, description="Blend coefficient for one equity factor")
]

Percentage = Annotated[
    float,
    Field(description="Percentage on a 0-100 scale")
]


# =============================================================================
# ID Conventions
# =============================================================================

RecordId = Annotated[
    str,
    Field(
        min_length=1,
        description="Opaque identifier assigned by the persistence layer"
    )
]

# =============================================================================
# ID Examples
# =============================================================================
#
# Responsibility IDs:
#   - "resp_a1b2c3d4" - generated by the persistence layer
#   - "fundraising" - hand-authored in tests and fixtures
#
# Participant IDs:
#   - "p_owner" - session owner
#   - "p_9f8e7d6c" - invited co-founder
#
# =============================================================================
