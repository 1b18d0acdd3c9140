"""Pydantic schemas consolidating overhang fidelity API contracts."""

# purpose: aggregate request and response schemas for FastAPI surfaces and services
# status: experimental

from .fidelity import (
    AlternativeCandidate,
    AlternativeSearchRequest,
    AssemblyFidelityReport,
    CrossLigationIssue,
    EnzymeCatalog,
    EnzymeComparison,
    HeatmapCell,
    HeatmapLabel,
    HeatmapLegend,
    HeatmapRenderable,
    HeatmapRenderRequest,
    HeatmapResult,
    HeatmapStatistics,
    JunctionFidelity,
    OverhangConflict,
    OverhangSetRequest,
    OverhangValidationRequest,
    WorstCrossReaction,
)

__all__ = [
    "AlternativeCandidate",
    "AlternativeSearchRequest",
    "AssemblyFidelityReport",
    "CrossLigationIssue",
    "EnzymeCatalog",
    "EnzymeComparison",
    "HeatmapCell",
    "HeatmapLabel",
    "HeatmapLegend",
    "HeatmapRenderable",
    "HeatmapRenderRequest",
    "HeatmapResult",
    "HeatmapStatistics",
    "JunctionFidelity",
    "OverhangConflict",
    "OverhangSetRequest",
    "OverhangValidationRequest",
    "WorstCrossReaction",
]
