"""
Genotype values.

A genotype value is either the code string reported for a locus (e.g. "ee",
"KBky", "M*m") or a NoCall sentinel when the result could not be extracted.
"""

from dataclasses import dataclass
from typing import Mapping, Union


@dataclass(frozen=True)
class NoCall:
    """Sentinel for a locus whose result could not be obtained."""

    locus: str

    def __str__(self) -> str:
        return f"NoCall({self.locus})"


GenotypeValue = Union[str, NoCall]


def is_no_call(value: GenotypeValue) -> bool:
    """Check whether a genotype value is the NoCall sentinel."""
    return isinstance(value, NoCall)


def display_value(value: GenotypeValue) -> str:
    """Render a genotype value verbatim for quick-genotype summaries."""
    return str(value)


def genotype_of(genotypes: Mapping[str, GenotypeValue], locus: str) -> GenotypeValue:
    """
    Look up a locus in a genotype mapping.

    Absent keys and None values are treated as missing data.
    """
    value = genotypes.get(locus)
    if value is None:
        return NoCall(locus)
    if isinstance(value, NoCall):
        return value
    return str(value).strip()
