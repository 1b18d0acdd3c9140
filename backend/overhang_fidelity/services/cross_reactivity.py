"""Cross-reactivity heatmaps and overhang set checks for Golden Gate assemblies."""

# purpose: build pairwise ligation heatmaps and flag cross-ligation between overhangs
# status: experimental
# depends_on: overhang_fidelity.services.ligation_matrix, overhang_fidelity.sequence

from __future__ import annotations

from collections.abc import Sequence

from .. import sequence as sequence_utils
from ..schemas.fidelity import (
    CrossLigationIssue,
    HeatmapResult,
    HeatmapStatistics,
    OverhangConflict,
)
from .ligation_matrix import resolve_matrix

_REPORT_RATIO = 0.01
_SEVERITY_TIERS: tuple[tuple[float, str], ...] = (
    (0.10, "high"),
    (0.05, "medium"),
)


def _severity(ratio: float) -> str:
    for threshold, label in _SEVERITY_TIERS:
        if ratio >= threshold:
            return label
    return "low"


def build_heatmap(overhangs: Sequence[str], enzyme_name: str = "BsaI") -> HeatmapResult:
    """Return the overhang x partner ligation heatmap for an assembly set.

    Row ``i`` is overhang ``i`` attempting ligation; column ``j`` is the
    reverse complement contributed by overhang ``j``. Diagonal cells are the
    intended pairings, off-diagonal cells are cross-ligation.
    """

    # purpose: expose donor/acceptor ligation geometry for review and rendering
    matrix = resolve_matrix(enzyme_name)
    normalized = [sequence_utils.canonical_overhang(oh) for oh in overhangs]
    partners = [sequence_utils.reverse_complement(oh) for oh in normalized]

    raw: list[list[float]] = [
        [matrix.frequency(source, partner) for partner in partners]
        for source in normalized
    ]
    positive = [value for row in raw for value in row if value > 0]
    min_value = min(positive) if positive else 0.0
    max_value = max(positive) if positive else 0.0
    span = (max_value - min_value) or 1.0
    scaled = [
        [(value - min_value) / span if value > 0 else 0.0 for value in row]
        for row in raw
    ]

    issues: list[CrossLigationIssue] = []
    for i, source in enumerate(normalized):
        correct = raw[i][i]
        # rows without a measured correct pairing have no baseline to compare against
        if correct <= 0:
            continue
        for j, cross in enumerate(raw[i]):
            if i == j or cross <= 0:
                continue
            ratio = cross / correct
            if ratio <= _REPORT_RATIO:
                continue
            issues.append(
                CrossLigationIssue(
                    source=source,
                    partner=partners[j],
                    cross_frequency=cross,
                    correct_frequency=correct,
                    ratio=ratio,
                    severity=_severity(ratio),
                )
            )
    issues.sort(key=lambda issue: issue.ratio, reverse=True)

    return HeatmapResult(
        enzyme=enzyme_name,
        overhangs=normalized,
        reverse_complements=partners,
        matrix=raw,
        normalized_matrix=scaled,
        statistics=HeatmapStatistics(min_frequency=min_value, max_frequency=max_value),
        cross_ligation_issues=issues,
        has_critical_issues=any(issue.severity == "high" for issue in issues),
    )


def has_zero_cross_ligation(
    overhang: str, existing: Sequence[str], enzyme_name: str = "BsaI"
) -> bool:
    """Return True when overhang shows no measured ligation with any existing partner."""

    matrix = resolve_matrix(enzyme_name)
    candidate = sequence_utils.canonical_overhang(overhang)
    candidate_rc = sequence_utils.reverse_complement(candidate)
    for other in existing:
        other = sequence_utils.canonical_overhang(other)
        if matrix.frequency(candidate, sequence_utils.reverse_complement(other)) > 0:
            return False
        if matrix.frequency(other, candidate_rc) > 0:
            return False
    return True


def set_has_zero_cross_ligation(overhangs: Sequence[str], enzyme_name: str = "BsaI") -> bool:
    """Return True when no pair in the set shows measured cross-ligation."""

    matrix = resolve_matrix(enzyme_name)
    normalized = [sequence_utils.canonical_overhang(oh) for oh in overhangs]
    for i, first in enumerate(normalized):
        for second in normalized[i + 1:]:
            if matrix.frequency(first, sequence_utils.reverse_complement(second)) > 0:
                return False
    return True


def check_overhang_set(overhangs: Sequence[str]) -> list[OverhangConflict]:
    """Report duplicates, reverse-complement pairs and palindromes in an overhang set."""

    # purpose: surface set-level problems without rejecting the set
    conflicts: list[OverhangConflict] = []
    normalized = [sequence_utils.canonical_overhang(oh) for oh in overhangs]
    for i, overhang in enumerate(normalized):
        if sequence_utils.is_self_complementary(overhang):
            conflicts.append(
                OverhangConflict(
                    kind="self_complementary",
                    overhang=overhang,
                    message=f"{overhang} is palindromic and can ligate to itself",
                )
            )
        rc = sequence_utils.reverse_complement(overhang)
        for other in normalized[i + 1:]:
            if other == overhang:
                conflicts.append(
                    OverhangConflict(
                        kind="duplicate",
                        overhang=overhang,
                        other=other,
                        message=f"{overhang} is used more than once",
                    )
                )
            elif other == rc:
                conflicts.append(
                    OverhangConflict(
                        kind="reverse_complement",
                        overhang=overhang,
                        other=other,
                        message=f"{overhang} and {other} are reverse complements and will pair with each other",
                    )
                )
    return conflicts
