import os
os.environ["TESTING"] = "1"
import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[2]))

from overhang_fidelity.main import app
from overhang_fidelity.services.ligation_matrix import reload_reference_data

# Small hand-computable ligation tables; see individual tests for the expected arithmetic.
FIXTURE_DATASET = {
    "version": "fixture-1",
    "enzymes": {
        "BsaI-HFv2": {
            "overhang_length": 4,
            "matrix": {
                "GGAG": {"CTCC": 1000, "CACC": 100, "CATT": 50},
                "CTCC": {"GGAG": 1000},
                "AATG": {"CATT": 800},
                "CATT": {"AATG": 800},
                "GCTT": {"AAGC": 500, "CTCC": 5},
                "AAGC": {"GCTT": 500},
                "GGTG": {"CACC": 1000, "CTCC": 100},
                "CACC": {"GGTG": 1000},
                "TACT": {"AGTA": 400, "CTCC": 20, "CATT": 20},
                "AGTA": {"TACT": 400},
                "GCTA": {"CTCC": 50},
            },
            "overhang_fidelity": {"GGAG": 0.97, "AATG": 0.99, "GGTG": 0.8},
        },
        "Blank": {
            "overhang_length": 4,
            "matrix": {},
        },
        "Tiny": {
            "overhang_length": 4,
            "overhangs": ["GGAG", "CTCC", "AATG", "CATT", "AATT", "TACT"],
            "matrix": {
                "ggag": {"ctcc": 100},
                "CTCC": {"GGAG": 100},
                "AATG": {"CATT": 100, "GGAG": 0},
                "CATT": {"AATG": 100},
            },
        },
    },
}


@pytest.fixture(autouse=True)
def ligation_dataset(tmp_path, monkeypatch):
    path = tmp_path / "ligation_data.json"
    path.write_text(json.dumps(FIXTURE_DATASET), encoding="utf-8")
    monkeypatch.setenv("LIGATION_DATA_PATH", str(path))
    reload_reference_data()
    yield path
    reload_reference_data()


@pytest.fixture
def bundled_dataset(monkeypatch):
    """Switch lookups to the dataset shipped with the package."""

    monkeypatch.delenv("LIGATION_DATA_PATH", raising=False)
    reload_reference_data()
    yield
    reload_reference_data()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
