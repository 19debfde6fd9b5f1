"""Body size section."""

from typing import Mapping

from ..core.genotype import GenotypeValue
from ..core.loci import LocusGroup
from ..core.types import GroupResult, Statement

SIZE_DISCLAIMER = (
    "These genes are responsible for about 80% of size variation in dogs, but aren't "
    "completely predictive. Take them with a grain of salt."
)


def evaluate_body_size(genotypes: Mapping[str, GenotypeValue]) -> GroupResult:
    """The size loci are not interpreted individually; only the disclaimer is emitted."""
    return GroupResult(
        group=LocusGroup.BODY_SIZE,
        summary="",
        statements=(Statement(SIZE_DISCLAIMER),),
    )
