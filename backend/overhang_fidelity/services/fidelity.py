"""Junction and whole-assembly fidelity scoring with replacement overhang search."""

# purpose: convert ligation frequencies into assembly success estimates and suggest better overhangs
# status: experimental
# depends_on: overhang_fidelity.services.ligation_matrix, overhang_fidelity.sequence

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .. import sequence as sequence_utils
from ..schemas.fidelity import (
    AlternativeCandidate,
    AssemblyFidelityReport,
    EnzymeComparison,
    JunctionFidelity,
    WorstCrossReaction,
)
from .ligation_matrix import LigationMatrix, list_enzymes, resolve_matrix, resolve_profile

# colonies needed for ~10 expected correct clones
_TARGET_CORRECT_CLONES = 10

_STATUS_TIERS: tuple[tuple[float, str], ...] = (
    (0.99, "excellent"),
    (0.95, "good"),
    (0.90, "acceptable"),
    (0.80, "marginal"),
)


@dataclass
class _JunctionTally:
    """Raw frequency sums for one overhang against the rest of its set."""

    correct: float
    total: float

    @property
    def fidelity(self) -> float:
        if self.total <= 0:
            return 0.0
        return self.correct / self.total


def _status(fidelity: float) -> str:
    for threshold, label in _STATUS_TIERS:
        if fidelity >= threshold:
            return label
    return "poor"


def _percent(value: float, digits: int) -> str:
    return f"{value * 100:.{digits}f}%"


def _tally(matrix: LigationMatrix, overhang: str, overhang_set: Sequence[str]) -> _JunctionTally:
    """Sum the correct pairing and every duplex-end pairing of overhang within the set."""

    rc = sequence_utils.reverse_complement(overhang)
    correct = matrix.frequency(overhang, rc) + matrix.frequency(rc, overhang)
    total = 0.0
    for other in overhang_set:
        other_rc = sequence_utils.reverse_complement(other)
        total += matrix.frequency(overhang, other)
        total += matrix.frequency(overhang, other_rc)
        total += matrix.frequency(rc, other)
        total += matrix.frequency(rc, other_rc)
    return _JunctionTally(correct=correct, total=total)


def _worst_cross_reaction(
    matrix: LigationMatrix, index: int, overhang_set: Sequence[str]
) -> WorstCrossReaction:
    overhang = overhang_set[index]
    rc = sequence_utils.reverse_complement(overhang)
    worst = WorstCrossReaction()
    for position, other in enumerate(overhang_set):
        if position == index:
            continue
        frequency = matrix.frequency(overhang, sequence_utils.reverse_complement(other))
        frequency += matrix.frequency(rc, other)
        # strict comparison keeps the first partner on ties
        if frequency > worst.frequency:
            worst = WorstCrossReaction(partner=other, frequency=frequency)
    return worst


def _overall_fidelity(matrix: LigationMatrix, overhang_set: Sequence[str]) -> float:
    """Product of per-junction fidelities, treating junctions as independent."""

    return math.prod(_tally(matrix, overhang, overhang_set).fidelity for overhang in overhang_set)


def _colonies_to_screen(overall: float) -> int | None:
    if overall <= 0:
        return None
    colonies = _TARGET_CORRECT_CLONES / overall
    # subnormal fidelities overflow the quotient
    if math.isinf(colonies):
        return None
    return math.ceil(colonies)


def _score(matrix: LigationMatrix, overhangs: Sequence[str], enzyme_name: str) -> AssemblyFidelityReport:
    normalized = [sequence_utils.canonical_overhang(oh) for oh in overhangs]
    junctions: list[JunctionFidelity] = []
    for index, overhang in enumerate(normalized):
        tally = _tally(matrix, overhang, normalized)
        fidelity = tally.fidelity
        junctions.append(
            JunctionFidelity(
                index=index,
                overhang=overhang,
                reverse_complement=sequence_utils.reverse_complement(overhang),
                correct_frequency=tally.correct,
                total_frequency=tally.total,
                fidelity=fidelity,
                fidelity_percent=_percent(fidelity, 1),
                worst_cross_reaction=_worst_cross_reaction(matrix, index, normalized),
                status=_status(fidelity),
            )
        )

    ranked = sorted(junctions, key=lambda junction: junction.fidelity)
    overall = math.prod(junction.fidelity for junction in junctions)
    return AssemblyFidelityReport(
        enzyme=enzyme_name,
        junctions=junctions,
        weakest_junction=ranked[0] if ranked else None,
        strongest_junction=ranked[-1] if ranked else None,
        overall_fidelity=overall,
        overall_fidelity_percent=_percent(overall, 2),
        expected_correct_assemblies=overall,
        colonies_to_screen=_colonies_to_screen(overall),
    )


def score_fidelity(overhangs: Sequence[str], enzyme_name: str = "BsaI") -> AssemblyFidelityReport:
    """Return per-junction and overall assembly fidelity for an overhang set."""

    # purpose: tell planners whether an overhang set is ready for synthesis
    matrix = resolve_matrix(enzyme_name)
    return _score(matrix, overhangs, enzyme_name)


def compare_enzyme_fidelity(overhangs: Sequence[str]) -> EnzymeComparison:
    """Score one overhang set against every enzyme with ligation data."""

    # purpose: recommend the enzyme under which a fixed overhang set assembles best
    by_enzyme: dict[str, AssemblyFidelityReport] = {}
    recommended: str | None = None
    best = -1.0
    for enzyme in list_enzymes():
        report = score_fidelity(overhangs, enzyme)
        by_enzyme[enzyme] = report
        if report.overall_fidelity > best:
            best = report.overall_fidelity
            recommended = enzyme
    return EnzymeComparison(by_enzyme=by_enzyme, recommended=recommended)


def find_alternatives(
    current_overhangs: Sequence[str],
    problem_index: int,
    enzyme_name: str = "BsaI",
    top_n: int = 5,
) -> list[AlternativeCandidate]:
    """Return replacement overhangs for one position, best overall assembly fidelity first.

    Every candidate is scored by substituting it into the set and re-scoring
    every junction, since a new overhang changes the interaction totals of
    the others as well.
    """

    # purpose: suggest overhang swaps that raise whole-assembly success probability
    if top_n < 0:
        raise ValueError(f"top_n must be non-negative, got {top_n}")
    profile = resolve_profile(enzyme_name)
    matrix = profile.matrix
    normalized = [sequence_utils.canonical_overhang(oh) for oh in current_overhangs]
    if not 0 <= problem_index < len(normalized):
        raise IndexError(
            f"problem_index {problem_index} is outside an overhang set of {len(normalized)}"
        )
    replaced = normalized[problem_index]
    baseline = profile.baseline_for(replaced)

    used = set(normalized)
    used.update(sequence_utils.reverse_complement(oh) for oh in normalized)

    scored: list[AlternativeCandidate] = []
    for candidate in profile.overhangs:
        rc = sequence_utils.reverse_complement(candidate)
        if candidate in used or rc in used or candidate == rc:
            continue
        trial = list(normalized)
        trial[problem_index] = candidate
        junction = _tally(matrix, candidate, trial).fidelity
        overall = _overall_fidelity(matrix, trial)
        scored.append(
            AlternativeCandidate(
                overhang=candidate,
                reverse_complement=rc,
                junction_fidelity=junction,
                junction_fidelity_percent=_percent(junction, 1),
                overall_assembly_fidelity=overall,
                overall_fidelity_percent=_percent(overall, 2),
                improvement=junction - baseline,
            )
        )

    scored.sort(key=lambda entry: entry.overall_assembly_fidelity, reverse=True)
    return scored[:top_n]
