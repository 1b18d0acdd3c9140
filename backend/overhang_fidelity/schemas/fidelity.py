"""Result and request schemas for overhang cross-reactivity analysis."""

# purpose: capture serializable contracts for heatmap, fidelity and alternative search payloads
# status: experimental

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Severity = Literal["high", "medium", "low"]
JunctionStatus = Literal["excellent", "good", "acceptable", "marginal", "poor"]
ConflictKind = Literal["duplicate", "reverse_complement", "self_complementary"]


class CrossLigationIssue(BaseModel):
    """Off-diagonal heatmap cell whose cross/correct ratio crosses a severity tier."""

    # purpose: flag unintended partners ahead of assembly
    source: str
    partner: str
    cross_frequency: float = Field(ge=0.0)
    correct_frequency: float = Field(ge=0.0)
    ratio: float = Field(ge=0.0)
    severity: Severity


class HeatmapStatistics(BaseModel):
    min_frequency: float = 0.0
    max_frequency: float = 0.0


class HeatmapResult(BaseModel):
    """Pairwise ligation-frequency matrix for an overhang set."""

    # purpose: expose raw and normalized cross-reactivity matrices for fidelity review and rendering
    enzyme: str
    overhangs: List[str]
    reverse_complements: List[str]
    matrix: List[List[float]]
    normalized_matrix: List[List[float]]
    statistics: HeatmapStatistics
    cross_ligation_issues: List[CrossLigationIssue] = Field(default_factory=list)
    has_critical_issues: bool = False


class WorstCrossReaction(BaseModel):
    partner: Optional[str] = None
    frequency: float = 0.0


class JunctionFidelity(BaseModel):
    """Per-overhang fidelity within an assembly set."""

    # purpose: quantify the probability a junction ligates its intended partner
    index: int = Field(ge=0)
    overhang: str
    reverse_complement: str
    correct_frequency: float = Field(ge=0.0)
    total_frequency: float = Field(ge=0.0)
    fidelity: float = Field(ge=0.0, le=1.0)
    fidelity_percent: str
    worst_cross_reaction: WorstCrossReaction = Field(default_factory=WorstCrossReaction)
    status: JunctionStatus


class AssemblyFidelityReport(BaseModel):
    """Whole-assembly fidelity estimate assuming independent junctions."""

    # purpose: summarise readiness of an overhang set for synthesis and screening
    enzyme: str
    junctions: List[JunctionFidelity]
    weakest_junction: Optional[JunctionFidelity] = None
    strongest_junction: Optional[JunctionFidelity] = None
    overall_fidelity: float = Field(ge=0.0, le=1.0)
    overall_fidelity_percent: str
    expected_correct_assemblies: float = Field(ge=0.0, le=1.0)
    # None when no correct assembly is expected at all
    colonies_to_screen: Optional[int] = None


class AlternativeCandidate(BaseModel):
    """Replacement overhang scored under substitution into the current set."""

    overhang: str
    reverse_complement: str
    junction_fidelity: float = Field(ge=0.0, le=1.0)
    junction_fidelity_percent: str
    overall_assembly_fidelity: float = Field(ge=0.0, le=1.0)
    overall_fidelity_percent: str
    improvement: float


class OverhangConflict(BaseModel):
    """Structural problem within an overhang set that precludes ordered assembly."""

    kind: ConflictKind
    overhang: str
    other: Optional[str] = None
    message: str


class EnzymeComparison(BaseModel):
    by_enzyme: dict[str, AssemblyFidelityReport]
    recommended: Optional[str] = None


class HeatmapCell(BaseModel):
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float
    value: float
    normalized_value: float
    color: str
    is_diagonal: bool
    tooltip: str


class HeatmapLabel(BaseModel):
    text: str
    x: float
    y: float
    anchor: str
    transform: Optional[str] = None


class HeatmapLegend(BaseModel):
    min: float
    max: float
    label: str


class HeatmapRenderable(BaseModel):
    """Renderer-agnostic geometry and color descriptors for a heatmap."""

    # purpose: decouple the numeric core from whichever UI draws the matrix
    width: float
    height: float
    cells: List[HeatmapCell]
    row_labels: List[HeatmapLabel]
    col_labels: List[HeatmapLabel]
    title: str
    legend: HeatmapLegend
    issues: List[CrossLigationIssue] = Field(default_factory=list)


class OverhangSetRequest(BaseModel):
    """Overhang set evaluated against a single enzyme."""

    overhangs: List[str] = Field(min_length=1)
    enzyme: str = "BsaI"


class HeatmapRenderRequest(OverhangSetRequest):
    color_scale: str = "viridis"
    cell_size: float = Field(default=40.0, gt=0.0)
    padding: float = Field(default=60.0, ge=0.0)


class AlternativeSearchRequest(OverhangSetRequest):
    problem_index: int = Field(ge=0)
    top_n: int = Field(default=5, ge=1, le=100)


class OverhangValidationRequest(BaseModel):
    overhangs: List[str] = Field(min_length=1)


class EnzymeCatalog(BaseModel):
    enzymes: List[str]
    count: int
    dataset_version: Optional[str] = None
