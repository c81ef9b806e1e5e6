"""Domain models for hardening results."""

from .results import FortifiedFunctions, HardeningFlags, HardeningReport, Relro, build_report

__all__ = ["FortifiedFunctions", "HardeningFlags", "HardeningReport", "Relro", "build_report"]
