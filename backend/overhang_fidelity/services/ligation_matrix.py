"""Enzyme alias resolution and immutable ligation matrix lookups."""

# purpose: resolve enzyme names to canonical ligation frequency tables and overhang universes
# status: experimental
# depends_on: overhang_fidelity.data.loaders, overhang_fidelity.sequence

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from .. import sequence as sequence_utils
from ..data.loaders import get_ligation_catalog

logger = logging.getLogger(__name__)

_EMPTY_ROW: Mapping[str, float] = MappingProxyType({})

# Bare enzyme names resolve to the variant the ligation data was measured with.
_ENZYME_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "bsai": "BsaI-HFv2",
        "bsai-hfv2": "BsaI-HFv2",
        "bbsi": "BbsI-HF",
        "bbsi-hf": "BbsI-HF",
        "bsmbi": "BsmBI-v2",
        "bsmbi-v2": "BsmBI-v2",
        "esp3i": "Esp3I",
        "sapi": "SapI",
    }
)


class UnknownEnzyme(LookupError):
    """Raised when an enzyme name has no ligation data after alias resolution."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown enzyme: {name}")
        self.name = name


@dataclass(frozen=True)
class LigationMatrix:
    """Total (default-to-zero) overhang x overhang ligation frequency table."""

    # purpose: make missing-cell handling an explicit contract rather than null propagation
    rows: Mapping[str, Mapping[str, float]]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Mapping[str, Any]] | None) -> "LigationMatrix":
        rows: dict[str, Mapping[str, float]] = {}
        for source, partners in (payload or {}).items():
            cells = {
                sequence_utils.canonical_overhang(partner): float(value)
                for partner, value in (partners or {}).items()
                if value and float(value) > 0
            }
            if cells:
                rows[sequence_utils.canonical_overhang(source)] = MappingProxyType(cells)
        return cls(rows=MappingProxyType(rows))

    def frequency(self, overhang: str, partner: str) -> float:
        """Return the ligation frequency of overhang with partner, 0.0 when unmeasured."""

        return self.rows.get(overhang, _EMPTY_ROW).get(partner, 0.0)


@dataclass(frozen=True)
class EnzymeProfile:
    """Canonical enzyme key with its matrix, overhang universe and baseline fidelities."""

    name: str
    matrix: LigationMatrix
    overhang_length: int
    overhangs: tuple[str, ...]
    baseline_fidelity: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))

    def baseline_for(self, overhang: str) -> float:
        return self.baseline_fidelity.get(sequence_utils.canonical_overhang(overhang), 0.0)


def _build_profile(name: str, entry: Mapping[str, Any]) -> EnzymeProfile:
    """Convert a raw dataset entry into an immutable enzyme profile."""

    matrix = LigationMatrix.from_payload(entry.get("matrix"))
    length = int(entry.get("overhang_length") or 4)
    explicit = entry.get("overhangs")
    if explicit:
        universe = tuple(sequence_utils.canonical_overhang(oh) for oh in explicit)
    else:
        universe = sequence_utils.enumerate_overhangs(length)
    baseline = {
        sequence_utils.canonical_overhang(oh): float(value)
        for oh, value in (entry.get("overhang_fidelity") or {}).items()
    }
    return EnzymeProfile(
        name=name,
        matrix=matrix,
        overhang_length=length,
        overhangs=universe,
        baseline_fidelity=MappingProxyType(baseline),
    )


@lru_cache(maxsize=1)
def _profile_index() -> Mapping[str, EnzymeProfile]:
    """Return enzyme profiles keyed by canonical dataset name."""

    # purpose: build immutable lookups once so every call shares the same read-only data
    enzymes = get_ligation_catalog().get("enzymes") or {}
    return MappingProxyType(
        {name: _build_profile(name, entry) for name, entry in enzymes.items()}
    )


def reload_reference_data() -> None:
    """Drop cached dataset and profiles so the next lookup re-reads LIGATION_DATA_PATH."""

    get_ligation_catalog.cache_clear()
    _profile_index.cache_clear()


def dataset_version() -> str | None:
    return get_ligation_catalog().get("version")


def list_enzymes() -> list[str]:
    """Return canonical enzyme names with ligation data."""

    return sorted(_profile_index())


def canonical_enzyme_name(enzyme_name: str) -> str:
    """Resolve synonyms to the canonical dataset key."""

    # purpose: map bare enzyme names and case variants onto one dataset entry
    profiles = _profile_index()
    normalized = (enzyme_name or "").strip()
    key = _ENZYME_ALIASES.get(normalized.lower())
    if key is None:
        key = next(
            (name for name in profiles if name.lower() == normalized.lower()),
            None,
        )
    if key is None or key not in profiles:
        raise UnknownEnzyme(enzyme_name)
    if key != enzyme_name:
        logger.debug("Resolved enzyme alias %s -> %s", enzyme_name, key)
    return key


def resolve_profile(enzyme_name: str) -> EnzymeProfile:
    """Return the enzyme profile for a name or synonym."""

    return _profile_index()[canonical_enzyme_name(enzyme_name)]


def resolve_matrix(enzyme_name: str) -> LigationMatrix:
    """Return the ligation matrix for a name or synonym."""

    return resolve_profile(enzyme_name).matrix
