"""
Result extractor protocol.

An extractor supplies the genotype for a locus by canonical name. When no
result exists (the profile lacks the trait, or its layout differs) it
returns NoCall instead of failing.
"""

from typing import Dict, Protocol

from ..core.genotype import GenotypeValue
from ..core.loci import LOCI
from .layouts import ProfileLayout


class ResultExtractor(Protocol):
    """Protocol every result source must implement."""

    @property
    def layout(self) -> ProfileLayout:
        """Layout of the profile the results come from."""
        ...

    def extract(self, locus_name: str) -> GenotypeValue:
        """
        Get the genotype for a locus.

        Args:
            locus_name: Canonical locus name (e.g. "eLocus")

        Returns:
            Genotype code, or NoCall(locus_name) when unavailable

        Raises:
            KeyError: If locus_name is not in the locus registry
        """
        ...


def collect_genotypes(extractor: ResultExtractor) -> Dict[str, GenotypeValue]:
    """Extract every registered locus from a result source."""
    return {locus.name: extractor.extract(locus.name) for locus in LOCI}
