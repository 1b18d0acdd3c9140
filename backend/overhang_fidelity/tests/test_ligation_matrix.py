"""Regression coverage for enzyme alias resolution and ligation matrix lookups."""

# purpose: verify canonical enzyme resolution and total matrix semantics remain deterministic
# status: active

import pytest

from overhang_fidelity import sequence as sequence_utils
from overhang_fidelity.data.loaders import DEFAULT_LIGATION_DATA, get_ligation_catalog, ligation_data_path
from overhang_fidelity.services import ligation_matrix
from overhang_fidelity.services.ligation_matrix import UnknownEnzyme


def test_alias_and_canonical_name_share_matrix():
    """Bare enzyme names resolve to the measured high-fidelity variant."""

    assert ligation_matrix.canonical_enzyme_name("BsaI") == "BsaI-HFv2"
    assert ligation_matrix.canonical_enzyme_name("bsai-hfv2") == "BsaI-HFv2"
    assert ligation_matrix.resolve_matrix("BsaI") is ligation_matrix.resolve_matrix("BsaI-HFv2")


def test_canonicalization_is_idempotent():
    once = ligation_matrix.canonical_enzyme_name("BsaI")
    assert ligation_matrix.canonical_enzyme_name(once) == once


def test_dataset_keys_resolve_case_insensitively():
    assert ligation_matrix.canonical_enzyme_name("blank") == "Blank"


@pytest.mark.parametrize("name", ["NotAnEnzyme", "", "BsmBI"])
def test_unknown_enzyme_raises(name):
    """Aliases without a dataset entry are as unknown as unrecognised names."""

    with pytest.raises(UnknownEnzyme) as excinfo:
        ligation_matrix.resolve_matrix(name)
    assert excinfo.value.name == name
    assert isinstance(excinfo.value, LookupError)


def test_matrix_lookup_defaults_to_zero():
    matrix = ligation_matrix.resolve_matrix("BsaI")
    assert matrix.frequency("GGAG", "CTCC") == 1000.0
    assert matrix.frequency("GGAG", "TTTT") == 0.0
    assert matrix.frequency("NNNN", "GGAG") == 0.0


def test_matrix_keys_are_uppercased_and_zero_cells_dropped():
    matrix = ligation_matrix.resolve_matrix("Tiny")
    assert matrix.frequency("GGAG", "CTCC") == 100.0
    assert "GGAG" not in matrix.rows["AATG"]


def test_matrix_is_read_only():
    matrix = ligation_matrix.resolve_matrix("BsaI")
    with pytest.raises(TypeError):
        matrix.rows["GGAG"]["CTCC"] = 0.0  # type: ignore[index]


def test_profile_universe_defaults_to_all_sequences_of_overhang_length():
    profile = ligation_matrix.resolve_profile("BsaI")
    assert profile.overhang_length == 4
    assert len(profile.overhangs) == 256
    assert profile.overhangs[0] == "AAAA"
    assert profile.overhangs[-1] == "TTTT"
    assert profile.baseline_for("ggtg") == pytest.approx(0.8)
    assert profile.baseline_for("TACT") == 0.0


def test_profile_universe_uses_explicit_list():
    profile = ligation_matrix.resolve_profile("Tiny")
    assert profile.overhangs == ("GGAG", "CTCC", "AATG", "CATT", "AATT", "TACT")
    assert dict(profile.baseline_fidelity) == {}


def test_list_enzymes_sorted(ligation_dataset):
    assert ligation_matrix.list_enzymes() == ["Blank", "BsaI-HFv2", "Tiny"]
    assert ligation_matrix.dataset_version() == "fixture-1"
    assert ligation_data_path() == ligation_dataset


def test_catalog_cached_until_reloaded():
    first = get_ligation_catalog()
    assert get_ligation_catalog() is first
    ligation_matrix.reload_reference_data()
    assert get_ligation_catalog() is not first


def test_bundled_dataset_covers_golden_gate_enzymes(bundled_dataset):
    assert ligation_data_path() == DEFAULT_LIGATION_DATA
    assert ligation_matrix.list_enzymes() == ["BbsI-HF", "BsaI-HFv2", "BsmBI-v2", "Esp3I", "SapI"]
    sapi = ligation_matrix.resolve_profile("SapI")
    assert sapi.overhang_length == 3
    assert len(sapi.overhangs) == 64
    assert ligation_matrix.resolve_matrix("BsaI").frequency("GGAG", "CTCC") == 1200.0


def test_bundled_dataset_is_labelled_as_demo_data(bundled_dataset):
    catalog = get_ligation_catalog()
    assert ligation_matrix.dataset_version() == "demo"
    assert catalog["source"] == "synthetic demonstration values, not measured"


def test_sequence_helpers():
    assert sequence_utils.reverse_complement("ggag") == "CTCC"
    assert sequence_utils.is_self_complementary("AATT")
    assert not sequence_utils.is_self_complementary("GGAG")
    assert sequence_utils.enumerate_overhangs(1) == ("A", "C", "G", "T")
    assert sequence_utils.enumerate_overhangs(0) == ()
