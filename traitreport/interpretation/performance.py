"""Performance section: altitude adaptation and POMC appetite."""

from typing import List, Mapping, Optional

from ..core.genotype import GenotypeValue, is_no_call
from ..core.loci import LocusGroup
from ..core.types import GroupResult, Statement
from .common import group_genotypes, quick_genotype

SECTION_NOTE = (
    "This section isn't relevant to most dogs. Altitude Adaptation is only found in a "
    "handful of rare breeds. POMC is mainly found in Labradors and their mixes."
)


def _altitude_statement(altitude: GenotypeValue) -> Optional[Statement]:
    if is_no_call(altitude) or altitude == "GG":
        return None
    return Statement("Dog has the gene to be adapted to low oxygen environments.")


def _appetite_statement(appetite: GenotypeValue) -> Optional[Statement]:
    if is_no_call(appetite):
        return None
    if appetite != "NN":
        return Statement(
            "Dog has POMC. This is listed as a trait, but is pretty much a genetic disease "
            "that causes abnormally high appetite.",
            attention=True,
        )
    return Statement(
        "Dog does not have POMC, a genetic disease that affects appetite. Dog may still "
        "have high food motivation, but it's a behavioral trait rather than a lack of "
        "healthy hunger signalling."
    )


def evaluate_performance(genotypes: Mapping[str, GenotypeValue]) -> GroupResult:
    """Interpret the performance section."""
    values = group_genotypes(genotypes, LocusGroup.PERFORMANCE)

    statements: List[Statement] = []
    for statement in (
        _altitude_statement(values["altitude"]),
        _appetite_statement(values["appetite"]),
    ):
        if statement is not None:
            statements.append(statement)

    return GroupResult(
        group=LocusGroup.PERFORMANCE,
        summary=quick_genotype(list(values.values())),
        statements=tuple(statements),
        note=SECTION_NOTE,
    )
