"""Decide whether a file is an OpenFOAM dictionary."""

from __future__ import annotations

import re
from pathlib import Path

HEADER_PROBE_LINES = 40

DICTIONARY_NAMES = frozenset(
    {
        # system/
        "controlDict",
        "fvSchemes",
        "fvSolution",
        "fvOptions",
        "fvConstraints",
        "fvModels",
        "blockMeshDict",
        "snappyHexMeshDict",
        "decomposeParDict",
        "setFieldsDict",
        "topoSetDict",
        "createPatchDict",
        "extrudeMeshDict",
        "mapFieldsDict",
        "meshQualityDict",
        "sampleDict",
        "surfaceFeatureExtractDict",
        "surfaceFeaturesDict",
        # constant/
        "transportProperties",
        "turbulenceProperties",
        "momentumTransport",
        "thermophysicalProperties",
        "physicalProperties",
        "dynamicMeshDict",
        "RASProperties",
        "LESProperties",
        "g",
    }
)
POLY_MESH_NAMES = frozenset({"boundary", "faces", "points", "owner", "neighbour"})
DICTIONARY_SUFFIXES = frozenset({".foam"})

_HEADER_RE = re.compile(r"^\s*FoamFile\b")
_TIME_DIR_RE = re.compile(r"^\d+(?:\.\d+)?(?:e[-+]?\d+)?(?:\.orig)?$")


def _is_known_name(path: Path, extra_names: frozenset[str]) -> bool:
    name = path.name
    if name.endswith(".orig"):
        name = name[: -len(".orig")]
    if name in DICTIONARY_NAMES or name in extra_names:
        return True
    parent = path.parent.name
    if parent == "polyMesh" and name in POLY_MESH_NAMES:
        return True
    # Field files live in time directories such as 0/ or 0.5/.
    return bool(_TIME_DIR_RE.match(parent)) and not name.endswith(".gz")


def has_foam_header(text: str, probe_lines: int = HEADER_PROBE_LINES) -> bool:
    """Return whether a ``FoamFile`` header appears near the top of ``text``."""
    for line in text.splitlines()[:probe_lines]:
        if _HEADER_RE.match(line):
            return True
    return False


def is_foam_dictionary(
    path: Path,
    text: str | None = None,
    extra_names: frozenset[str] = frozenset(),
) -> bool:
    """Return whether ``path`` looks like an OpenFOAM dictionary.

    Known file names and time-directory field files are accepted from the path
    alone; otherwise ``text`` must carry a ``FoamFile`` header.
    """
    if _is_known_name(path, extra_names) or path.suffix in DICTIONARY_SUFFIXES:
        return True
    if text is None:
        return False
    return has_foam_header(text)
