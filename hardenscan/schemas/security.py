#!/usr/bin/env python3
"""
Hardening Pydantic Schemas

Serializable forms of per-file outcomes, used by the JSON output mode.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

from ..domain.results import Relro
from ..utils.error_handler import AnalysisErrorKind
from .base import AnalysisResultBase

if TYPE_CHECKING:
    from ..core.inspector import AnalysisOutcome


class HardeningReportSchema(BaseModel):
    """
    Hardening report for one binary.

    Attributes:
        relro: RELRO level
        stack_canary: Whether __stack_chk_fail is imported
        pie: Whether DF_1_PIE is set
        pic: Whether no text relocations are present
        fortify: Whether any fortified function is referenced
        checked_functions: Number of fortified symbol entries
        fortified_names: Fortified symbol names, not deduplicated
    """

    relro: Relro = Field(..., description="RELRO level")
    stack_canary: bool = Field(..., description="Stack canary support")
    pie: bool = Field(..., description="Position-independent executable")
    pic: bool = Field(..., description="Position-independent code")
    fortify: bool = Field(..., description="FORTIFY_SOURCE in use")
    checked_functions: int = Field(..., ge=0, description="Fortified symbol entries")
    fortified_names: list[str] = Field(default_factory=list, description="Fortified names")

    @model_validator(mode="after")
    def validate_fortify_consistency(self) -> HardeningReportSchema:
        """fortify is derived from the count"""
        if self.fortify != (self.checked_functions > 0):
            raise ValueError("fortify must be true exactly when checked_functions > 0")
        return self


class AnalysisErrorSchema(BaseModel):
    kind: AnalysisErrorKind = Field(..., description="Failure kind")
    message: str = Field(..., min_length=1, description="Failure description")


class HardeningResultSchema(AnalysisResultBase):
    """
    Outcome of analysing one file.

    Exactly one of ``report`` and ``failure`` is set, matching ``available``.
    """

    file_path: str = Field(..., description="Path to the analyzed file")
    report: HardeningReportSchema | None = Field(None, description="Hardening report")
    failure: AnalysisErrorSchema | None = Field(None, description="Failure details")

    @model_validator(mode="after")
    def validate_outcome(self) -> HardeningResultSchema:
        if self.available and self.report is None:
            raise ValueError("available results must carry a report")
        if not self.available and self.failure is None:
            raise ValueError("unavailable results must carry a failure")
        return self

    @classmethod
    def from_outcome(cls, outcome: AnalysisOutcome) -> HardeningResultSchema:
        """Convert an inspector outcome into its schema form"""
        if outcome.report is not None:
            return cls(
                available=True,
                file_path=outcome.path,
                execution_time=outcome.execution_time,
                report=HardeningReportSchema(**outcome.report.to_dict()),
            )

        assert outcome.error is not None
        return cls(
            available=False,
            file_path=outcome.path,
            execution_time=outcome.execution_time,
            error=outcome.error.message,
            failure=AnalysisErrorSchema(**outcome.error.to_dict()),
        )


class HardeningRunSchema(BaseModel):
    """All outcomes of one CLI invocation."""

    results: list[HardeningResultSchema] = Field(default_factory=list)
    total_files: int = Field(0, ge=0)
    failed_files: int = Field(0, ge=0)

    @classmethod
    def from_outcomes(cls, outcomes: list[AnalysisOutcome]) -> HardeningRunSchema:
        results = [HardeningResultSchema.from_outcome(outcome) for outcome in outcomes]
        return cls(
            results=results,
            total_files=len(results),
            failed_files=sum(1 for result in results if not result.available),
        )
