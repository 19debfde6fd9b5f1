"""
Pytest configuration for trait-report tests.
"""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_path() -> Path:
    """Path to test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def wild_type_genotypes() -> dict:
    """A dog with no notable result at any locus."""
    return {
        "eLocus": "EE",
        "bLocus": "BB",
        "dLocus": "DD",
        "cocoa": "NN",
        "intensity": "Intense Red Pigmentation",
        "kLocus": "kyky",
        "aLocus": "awaw",
        "raly": "NN",
        "sLocus": "SS",
        "rLocus": "rr",
        "merle": "mm",
        "harlequin": "hh",
        "furnishings": "II",
        "longhair": "GG",
        "shedding": "CC",
        "curl": "CC",
        "xolo": "NN",
        "aht": "NN",
        "albino": "NN",
        "shortMuzzle": "CC",
        "bobtail": "CC",
        "hindDewclaws": "CC",
        "muscling": "CT",
        "blueEyes": "NN",
        "altitude": "GG",
        "appetite": "NN",
    }
