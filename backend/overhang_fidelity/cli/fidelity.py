"""CLI utilities for overhang cross-reactivity and fidelity analysis."""

# purpose: give bench scientists terminal access to heatmap, scoring and alternative search
# status: experimental
# depends_on: overhang_fidelity.services

from __future__ import annotations

import json
from typing import List

import typer

from ..services import cross_reactivity, fidelity, ligation_matrix
from ..services.ligation_matrix import UnknownEnzyme

app = typer.Typer(help="Golden Gate overhang fidelity commands")


def _emit(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2))


@app.command("enzymes")
def enzymes_command() -> None:
    """List enzymes with ligation data."""

    _emit(
        {
            "enzymes": ligation_matrix.list_enzymes(),
            "dataset_version": ligation_matrix.dataset_version(),
        }
    )


@app.command("heatmap")
def heatmap_command(
    overhangs: List[str] = typer.Argument(..., help="Overhangs in assembly order"),
    enzyme: str = typer.Option("BsaI", help="Enzyme name or synonym"),
) -> None:
    """CLI wrapper for :func:`cross_reactivity.build_heatmap`."""

    try:
        result = cross_reactivity.build_heatmap(overhangs, enzyme)
    except UnknownEnzyme as exc:
        raise typer.BadParameter(str(exc), param_hint="--enzyme")
    _emit(result.model_dump())


@app.command("score")
def score_command(
    overhangs: List[str] = typer.Argument(..., help="Overhangs in assembly order"),
    enzyme: str = typer.Option("BsaI", help="Enzyme name or synonym"),
) -> None:
    """CLI wrapper for :func:`fidelity.score_fidelity`."""

    try:
        report = fidelity.score_fidelity(overhangs, enzyme)
    except UnknownEnzyme as exc:
        raise typer.BadParameter(str(exc), param_hint="--enzyme")
    conflicts = cross_reactivity.check_overhang_set(overhangs)
    payload = report.model_dump()
    payload["conflicts"] = [conflict.model_dump() for conflict in conflicts]
    _emit(payload)


@app.command("alternatives")
def alternatives_command(
    overhangs: List[str] = typer.Argument(..., help="Overhangs in assembly order"),
    index: int = typer.Option(..., "--index", "-i", help="Position of the overhang to replace"),
    enzyme: str = typer.Option("BsaI", help="Enzyme name or synonym"),
    top_n: int = typer.Option(5, "--top", min=1, help="Number of candidates to return"),
) -> None:
    """CLI wrapper for :func:`fidelity.find_alternatives`."""

    try:
        candidates = fidelity.find_alternatives(overhangs, index, enzyme, top_n=top_n)
    except UnknownEnzyme as exc:
        raise typer.BadParameter(str(exc), param_hint="--enzyme")
    except IndexError as exc:
        raise typer.BadParameter(str(exc), param_hint="--index")
    _emit([candidate.model_dump() for candidate in candidates])


if __name__ == "__main__":
    app()
