"""Cross-reactivity API surface for overhang fidelity analysis."""

# purpose: provide HTTP access to heatmap, fidelity and alternative overhang computations
# status: experimental
# depends_on: overhang_fidelity.services, overhang_fidelity.schemas.fidelity

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from .. import schemas
from ..services import cross_reactivity, fidelity, heatmap_render, ligation_matrix
from ..services.ligation_matrix import UnknownEnzyme

router = APIRouter(prefix="/api/cross-reactivity", tags=["cross-reactivity"])


def _unknown_enzyme(exc: UnknownEnzyme) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/enzymes", response_model=schemas.EnzymeCatalog)
def list_enzymes() -> schemas.EnzymeCatalog:
    """Return canonical enzymes with ligation data."""

    enzymes = ligation_matrix.list_enzymes()
    return schemas.EnzymeCatalog(
        enzymes=enzymes,
        count=len(enzymes),
        dataset_version=ligation_matrix.dataset_version(),
    )


@router.post("/heatmap", response_model=schemas.HeatmapResult)
def build_heatmap(payload: schemas.OverhangSetRequest) -> schemas.HeatmapResult:
    """Return the pairwise ligation heatmap for an overhang set."""

    try:
        return cross_reactivity.build_heatmap(payload.overhangs, payload.enzyme)
    except UnknownEnzyme as exc:
        raise _unknown_enzyme(exc) from exc


@router.post("/heatmap/render", response_model=schemas.HeatmapRenderable)
def render_heatmap(payload: schemas.HeatmapRenderRequest) -> schemas.HeatmapRenderable:
    """Return renderer-ready heatmap geometry."""

    # purpose: let UI clients draw the matrix without reimplementing layout or color mapping
    try:
        heatmap = cross_reactivity.build_heatmap(payload.overhangs, payload.enzyme)
    except UnknownEnzyme as exc:
        raise _unknown_enzyme(exc) from exc
    return heatmap_render.to_renderable(
        heatmap,
        payload.color_scale,
        cell_size=payload.cell_size,
        padding=payload.padding,
    )


@router.post("/fidelity", response_model=schemas.AssemblyFidelityReport)
def score_fidelity(payload: schemas.OverhangSetRequest) -> schemas.AssemblyFidelityReport:
    """Return per-junction and overall assembly fidelity."""

    try:
        return fidelity.score_fidelity(payload.overhangs, payload.enzyme)
    except UnknownEnzyme as exc:
        raise _unknown_enzyme(exc) from exc


@router.post("/fidelity/compare", response_model=schemas.EnzymeComparison)
def compare_enzymes(payload: schemas.OverhangValidationRequest) -> schemas.EnzymeComparison:
    """Score an overhang set under every enzyme and recommend one."""

    return fidelity.compare_enzyme_fidelity(payload.overhangs)


@router.post("/alternatives", response_model=List[schemas.AlternativeCandidate])
def find_alternatives(payload: schemas.AlternativeSearchRequest) -> list[schemas.AlternativeCandidate]:
    """Return replacement overhangs for one junction."""

    try:
        return fidelity.find_alternatives(
            payload.overhangs,
            payload.problem_index,
            payload.enzyme,
            top_n=payload.top_n,
        )
    except UnknownEnzyme as exc:
        raise _unknown_enzyme(exc) from exc
    except IndexError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/validate", response_model=List[schemas.OverhangConflict])
def validate_overhangs(payload: schemas.OverhangValidationRequest) -> list[schemas.OverhangConflict]:
    """Report duplicate, reverse-complement and palindromic overhangs."""

    return cross_reactivity.check_overhang_set(payload.overhangs)
