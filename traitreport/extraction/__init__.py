"""
Extraction Package - Sources of genotype results.

The interpretation engine only asks for genotypes by locus name. Everything
that depends on where results come from (profile layout, section
positions, how a genotype is written in the source) lives here.

Usage:
    from traitreport.extraction import create_extractor

    extractor = create_extractor("breeders", {"CBD103_K": "Dominant Black (KBky)\\n"})
    extractor.extract("kLocus")  # "KBky"
"""

from .layouts import ProfileLayout
from .protocol import ResultExtractor, collect_genotypes
from .factory import ExtractorRegistry, create_extractor, register_extractor
from .extractors import MappingExtractor, StandardProfileExtractor, BreederProfileExtractor
from .loader import SubjectData, load_subject_file

__all__ = [
    "ProfileLayout",
    "ResultExtractor",
    "collect_genotypes",
    "ExtractorRegistry",
    "create_extractor",
    "register_extractor",
    "MappingExtractor",
    "StandardProfileExtractor",
    "BreederProfileExtractor",
    "SubjectData",
    "load_subject_file",
]
