"""Helpers shared by the trait evaluators."""

from typing import Dict, Mapping, Sequence

from ..core.genotype import GenotypeValue, display_value, genotype_of
from ..core.loci import LocusGroup, loci_for_group
from ..core.types import Statement


def group_genotypes(
    genotypes: Mapping[str, GenotypeValue], group: LocusGroup
) -> Dict[str, GenotypeValue]:
    """Pick a section's loci out of a genotype mapping, filling gaps with NoCall."""
    return {locus.name: genotype_of(genotypes, locus.name) for locus in loci_for_group(group)}


def quick_genotype(values: Sequence[GenotypeValue]) -> str:
    """Join genotype values verbatim, in the order given."""
    return " ".join(display_value(v) for v in values)


def processing_failed(label: str, value: GenotypeValue) -> Statement:
    """Fail-loud statement for a code the rules do not handle."""
    return Statement(
        f"Processing {label} failed: unrecognized genotype '{display_value(value)}'.",
        error=True,
    )
