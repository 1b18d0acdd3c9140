"""Tests for renderer-agnostic heatmap geometry."""

# purpose: verify cell layout, labels, legends and color-scale dispatch
# status: active

from overhang_fidelity.services import cross_reactivity, heatmap_render


def _renderable(**kwargs):
    heatmap = cross_reactivity.build_heatmap(["GGAG", "AATG", "GCTT"], "BsaI")
    return heatmap_render.to_renderable(heatmap, **kwargs)


def test_cells_cover_grid_with_geometry():
    view = _renderable(cell_size=40, padding=60)
    assert len(view.cells) == 9
    cell = next(c for c in view.cells if (c.row, c.col) == (0, 1))
    assert (cell.x, cell.y) == (100, 60)
    assert cell.width == cell.height == 38
    assert cell.value == 50.0
    assert not cell.is_diagonal
    assert cell.tooltip == "GGAG -> CATT: 50 (cross-ligation)"
    diagonal = view.cells[0]
    assert diagonal.is_diagonal
    assert diagonal.tooltip == "GGAG <-> CTCC: 1000 (correct)"
    assert view.width == view.height == 240


def test_tooltips_keep_full_frequency():
    heatmap = cross_reactivity.build_heatmap(["GGAG", "AATG"], "BsaI").model_copy(
        update={"matrix": [[1234567.0, 2.5], [0.0, 800.0]]}
    )
    view = heatmap_render.to_renderable(heatmap)
    assert view.cells[0].tooltip == "GGAG <-> CTCC: 1234567 (correct)"
    assert view.cells[1].tooltip == "GGAG -> CATT: 2.5 (cross-ligation)"


def test_labels_and_legend():
    view = _renderable()
    assert [label.text for label in view.row_labels] == ["GGAG", "AATG", "GCTT"]
    assert view.row_labels[1].y == 120
    assert view.row_labels[1].x == 55
    assert view.row_labels[1].anchor == "end"
    assert [label.text for label in view.col_labels] == ["CTCC", "CATT", "AAGC"]
    assert view.col_labels[0].transform == "rotate(-45, 80, 55)"
    assert view.legend.min == 5.0
    assert view.legend.max == 1000.0
    assert view.legend.label == "Ligation Frequency"
    assert view.title == "Cross-Reactivity Matrix (BsaI)"
    assert len(view.issues) == 1


def test_default_viridis_colors():
    view = _renderable()
    assert view.cells[0].color == "#fde725"
    assert view.cells[2].color == "#440154"


def test_red_green_scale():
    view = _renderable(color_scale_name="red_green")
    assert view.cells[0].color == "#00ff00"
    assert view.cells[2].color == "#ff0000"
    assert heatmap_render.color_scale("redGreen")(0.5) == "#000000"


def test_unknown_scale_falls_back_to_viridis():
    fallback = _renderable(color_scale_name="rainbow")
    default = _renderable()
    assert [c.color for c in fallback.cells] == [c.color for c in default.cells]


def test_perceptual_scales_emit_hex():
    for name in ("plasma", "inferno", "magma"):
        color = heatmap_render.color_scale(name)(0.25)
        assert color.startswith("#") and len(color) == 7
