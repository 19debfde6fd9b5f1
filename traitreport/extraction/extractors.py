"""
Result extractors for the supported profile sources.

All extractors look results up by the gene identifier the DNA test uses
(e.g. "MC1R" for the E locus) and return NoCall when a gene is absent or
its result cannot be read.
"""

from typing import Mapping, Optional, Sequence
import logging
import re

from ..core.genotype import GenotypeValue, NoCall
from ..core.loci import get_locus
from .factory import register_extractor
from .layouts import ProfileLayout

logger = logging.getLogger(__name__)

# Breeder profiles end the result line with the genotype in parentheses.
BREEDER_RESULT_PATTERN = re.compile(r"\(([A-Za-z*|\s]+)\)[ \t]*$", re.MULTILINE)


@register_extractor("mapping")
class MappingExtractor:
    """Genotype codes already keyed by canonical locus name or gene identifier."""

    def __init__(
        self,
        results: Mapping[str, Optional[str]],
        layout: ProfileLayout = ProfileLayout.STANDARD,
    ):
        self._results = dict(results)
        self._layout = layout

    @property
    def layout(self) -> ProfileLayout:
        return self._layout

    def extract(self, locus_name: str) -> GenotypeValue:
        locus = get_locus(locus_name)
        for key in (locus.name, locus.gene):
            value = self._results.get(key)
            if value is None:
                continue
            if isinstance(value, NoCall):
                return value
            code = str(value).strip()
            if code:
                return code
        return NoCall(locus_name)


@register_extractor("standard")
class StandardProfileExtractor:
    """
    Results from a standard profile.

    Each gene maps to the emphasized strings of its trait description, in
    document order. The first is the trait name, the second the genotype.
    """

    def __init__(self, sections: Mapping[str, Sequence[str]]):
        self._sections = dict(sections)

    @property
    def layout(self) -> ProfileLayout:
        return ProfileLayout.STANDARD

    def extract(self, locus_name: str) -> GenotypeValue:
        locus = get_locus(locus_name)
        emphasized = self._sections.get(locus.gene)
        if emphasized is None or len(emphasized) < 2:
            return NoCall(locus_name)
        code = str(emphasized[1]).strip()
        return code if code else NoCall(locus_name)


@register_extractor("breeders")
class BreederProfileExtractor:
    """
    Results from a breeder profile.

    Each gene maps to the result text of its trait, e.g.
    "Tan Points (atat)\\n". The genotype is the parenthesised code that
    closes a line.
    """

    def __init__(self, sections: Mapping[str, str]):
        self._sections = dict(sections)

    @property
    def layout(self) -> ProfileLayout:
        return ProfileLayout.BREEDERS

    def extract(self, locus_name: str) -> GenotypeValue:
        locus = get_locus(locus_name)
        text = self._sections.get(locus.gene)
        if not text:
            return NoCall(locus_name)
        match = BREEDER_RESULT_PATTERN.search(str(text))
        if match is None:
            logger.debug(f"No genotype found in breeder result for {locus.gene}")
            return NoCall(locus_name)
        return match.group(1).strip()
