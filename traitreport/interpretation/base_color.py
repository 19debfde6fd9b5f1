"""
Base color section.

Decides whether a dog can produce eumelanin at all (E locus) and, if it can,
which eumelanin color the B and D loci give it.
"""

from typing import Mapping

from ..core.genotype import GenotypeValue, is_no_call
from ..core.loci import LocusGroup
from ..core.types import GroupResult, Statement
from .common import group_genotypes, quick_genotype

LILAC = "LILAC"
BROWN = "BROWN"
BLUE = "BLUE"
BLACK = "BLACK"


def is_recessive_red(e_locus: GenotypeValue) -> bool:
    return e_locus == "ee"


def eumelanin_color(b_locus: GenotypeValue, d_locus: GenotypeValue) -> str:
    """
    Resolve the eumelanin color from the B and D loci.

    Only the homozygous recessive codes ("bb", "dd") change the color;
    every other value counts as dominant.
    """
    if b_locus == "bb":
        return LILAC if d_locus == "dd" else BROWN
    return BLUE if d_locus == "dd" else BLACK


def _pigment_statement(e_locus: GenotypeValue) -> Statement:
    if is_no_call(e_locus):
        return Statement(
            "No E-Locus result, so it is unknown whether the dog can produce "
            "eumelanin in hair."
        )
    if is_recessive_red(e_locus):
        return Statement(
            "Recessive red and cannot produce eumelanin in hair, including "
            "eyelashes and whiskers."
        )
    return Statement(
        "Physically able to produce eumelanin (black, blue, brown, or lilac) pigment in hair."
    )


def _eumelanin_statement(b_locus: GenotypeValue, d_locus: GenotypeValue) -> Statement:
    missing = [str(v) for v in (b_locus, d_locus) if is_no_call(v)]
    if missing:
        return Statement(
            "Eumelanin color could not be determined (missing: "
            f"{', '.join(missing)})."
        )
    color = eumelanin_color(b_locus, d_locus)
    return Statement(
        f"Eumelanin color is {color}. Any eumelanin (including eye rims, nose, "
        f"and lips) will be {color}."
    )


def _cocoa_statement(cocoa: GenotypeValue) -> Statement:
    return Statement(
        f"Cocoa result is {cocoa}. Cocoa is only relevant to French Bulldogs and their mixes."
    )


def evaluate_base_color(genotypes: Mapping[str, GenotypeValue]) -> GroupResult:
    """Interpret the base color section."""
    values = group_genotypes(genotypes, LocusGroup.BASE_COLOR)
    e_locus = values["eLocus"]
    b_locus = values["bLocus"]
    d_locus = values["dLocus"]
    cocoa = values["cocoa"]
    intensity = values["intensity"]

    summary = f"{quick_genotype([e_locus, b_locus, d_locus, cocoa])} with {intensity}"
    statements = (
        _pigment_statement(e_locus),
        _eumelanin_statement(b_locus, d_locus),
        _cocoa_statement(cocoa),
    )
    return GroupResult(group=LocusGroup.BASE_COLOR, summary=summary, statements=statements)
