#!/usr/bin/env python3
"""
Base Pydantic Schemas for Type-Safe Results

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnalysisResultBase(BaseModel):
    """
    Base result model for analysis outputs.

    Attributes:
        available: Whether the analysis produced a report
        error: Error message if analysis failed
        execution_time: Execution time in seconds
        timestamp: When the analysis was performed

    Example:
        >>> result = AnalysisResultBase(available=True, execution_time=0.01)
        >>> print(result.available)
        True
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True, use_enum_values=True)

    available: bool = Field(..., description="Whether the analysis produced a report")

    error: str | None = Field(None, description="Error message if analysis failed")

    execution_time: float | None = Field(None, ge=0.0, description="Execution time in seconds")

    timestamp: datetime | None = Field(
        default_factory=_utcnow, description="When the analysis was performed"
    )

    @field_validator("execution_time")
    @classmethod
    def validate_execution_time(cls, v: float | None) -> float | None:
        """Validate that execution time is non-negative"""
        if v is not None and v < 0:
            raise ValueError("execution_time must be non-negative")
        return v

    def model_dump_safe(self, **kwargs) -> dict[str, Any]:
        """
        Safely dump model to dict, dropping None values.

        Args:
            **kwargs: Additional arguments to pass to model_dump

        Returns:
            Dictionary representation of the model
        """
        return self.model_dump(mode="json", exclude_none=True, **kwargs)

    def to_json(self, **kwargs) -> str:
        """
        Convert model to JSON string.

        Args:
            **kwargs: Additional arguments to pass to model_dump_json

        Returns:
            JSON string representation
        """
        return self.model_dump_json(exclude_none=True, **kwargs)
