#!/usr/bin/env python3
"""
Pydantic schemas for hardenscan results
"""

from .base import AnalysisResultBase
from .security import (
    AnalysisErrorSchema,
    HardeningReportSchema,
    HardeningResultSchema,
    HardeningRunSchema,
)

__all__ = [
    "AnalysisResultBase",
    "AnalysisErrorSchema",
    "HardeningReportSchema",
    "HardeningResultSchema",
    "HardeningRunSchema",
]
