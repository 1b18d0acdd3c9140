"""Renderer-agnostic heatmap geometry for cross-reactivity matrices."""

# purpose: translate heatmap results into cell, label and legend descriptors for any UI layer
# status: experimental
# depends_on: matplotlib (colormaps only), overhang_fidelity.schemas.fidelity

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from matplotlib import colormaps
from matplotlib.colors import to_hex

from ..schemas.fidelity import (
    HeatmapCell,
    HeatmapLabel,
    HeatmapLegend,
    HeatmapRenderable,
    HeatmapResult,
)

ColorScale = Callable[[float], str]

DEFAULT_COLOR_SCALE = "viridis"


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _perceptual(name: str) -> ColorScale:
    cmap = colormaps[name]

    def scale(value: float) -> str:
        return to_hex(cmap(_clamp(value)))

    return scale


def _red_green(value: float) -> str:
    """Red for cross-ligation, fading through black to green for correct pairings."""

    value = _clamp(value)
    if value < 0.5:
        return "#{:02x}0000".format(round(255 * (1 - value * 2)))
    return "#00{:02x}00".format(round(255 * ((value - 0.5) * 2)))


COLOR_SCALES: Mapping[str, ColorScale] = MappingProxyType(
    {
        "viridis": _perceptual("viridis"),
        "plasma": _perceptual("plasma"),
        "inferno": _perceptual("inferno"),
        "magma": _perceptual("magma"),
        "red_green": _red_green,
        "redGreen": _red_green,
    }
)


def color_scale(name: str | None) -> ColorScale:
    """Return the named color scale, falling back to viridis."""

    return COLOR_SCALES.get(name or DEFAULT_COLOR_SCALE, COLOR_SCALES[DEFAULT_COLOR_SCALE])


def _format_frequency(raw: float) -> str:
    if float(raw).is_integer():
        return f"{int(raw)}"
    return repr(float(raw))


def to_renderable(
    heatmap: HeatmapResult,
    color_scale_name: str = DEFAULT_COLOR_SCALE,
    cell_size: float = 40,
    padding: float = 60,
) -> HeatmapRenderable:
    """Return cell, label and legend descriptors for a heatmap result."""

    get_color = color_scale(color_scale_name)
    n = len(heatmap.overhangs)
    half = cell_size / 2

    cells: list[HeatmapCell] = []
    for i in range(n):
        for j in range(n):
            raw = heatmap.matrix[i][j]
            value = heatmap.normalized_matrix[i][j]
            diagonal = i == j
            if diagonal:
                tooltip = f"{heatmap.overhangs[i]} <-> {heatmap.reverse_complements[i]}: {_format_frequency(raw)} (correct)"
            else:
                tooltip = f"{heatmap.overhangs[i]} -> {heatmap.reverse_complements[j]}: {_format_frequency(raw)} (cross-ligation)"
            cells.append(
                HeatmapCell(
                    row=i,
                    col=j,
                    x=padding + j * cell_size,
                    y=padding + i * cell_size,
                    width=cell_size - 2,
                    height=cell_size - 2,
                    value=raw,
                    normalized_value=value,
                    color=get_color(value),
                    is_diagonal=diagonal,
                    tooltip=tooltip,
                )
            )

    row_labels = [
        HeatmapLabel(
            text=overhang,
            x=padding - 5,
            y=padding + i * cell_size + half,
            anchor="end",
        )
        for i, overhang in enumerate(heatmap.overhangs)
    ]
    col_labels = []
    for j, partner in enumerate(heatmap.reverse_complements):
        x = padding + j * cell_size + half
        y = padding - 5
        col_labels.append(
            HeatmapLabel(
                text=partner,
                x=x,
                y=y,
                anchor="middle",
                transform=f"rotate(-45, {x:g}, {y:g})",
            )
        )

    size = padding * 2 + n * cell_size
    return HeatmapRenderable(
        width=size,
        height=size,
        cells=cells,
        row_labels=row_labels,
        col_labels=col_labels,
        title=f"Cross-Reactivity Matrix ({heatmap.enzyme})",
        legend=HeatmapLegend(
            min=heatmap.statistics.min_frequency,
            max=heatmap.statistics.max_frequency,
            label="Ligation Frequency",
        ),
        issues=list(heatmap.cross_ligation_issues),
    )
