import json

from typer.testing import CliRunner

from overhang_fidelity.cli.fidelity import app

runner = CliRunner()


def test_enzymes_command():
    result = runner.invoke(app, ["enzymes"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["enzymes"] == ["Blank", "BsaI-HFv2", "Tiny"]


def test_score_command_includes_conflicts():
    result = runner.invoke(app, ["score", "GGAG", "CTCC", "--enzyme", "BsaI"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert len(payload["junctions"]) == 2
    assert payload["conflicts"][0]["kind"] == "reverse_complement"


def test_heatmap_command():
    result = runner.invoke(app, ["heatmap", "GGAG", "GGTG"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["has_critical_issues"] is True


def test_alternatives_command():
    result = runner.invoke(app, ["alternatives", "GGAG", "GGTG", "AATG", "--index", "1", "--top", "2"])
    assert result.exit_code == 0, result.output
    assert [entry["overhang"] for entry in json.loads(result.output)] == ["AAGC", "GCTT"]


def test_unknown_enzyme_is_usage_error():
    result = runner.invoke(app, ["score", "GGAG", "--enzyme", "XbaI"])
    assert result.exit_code == 2


def test_out_of_range_index_is_usage_error():
    result = runner.invoke(app, ["alternatives", "GGAG", "--index", "5"])
    assert result.exit_code == 2
