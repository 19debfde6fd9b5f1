"""
Core domain logic - no external dependencies.

Genotype values, interpretation result types and the locus registry.
"""

from .genotype import NoCall, GenotypeValue, is_no_call, display_value
from .types import Statement, ResultStatus, GroupResult, InterpretationReport
from .loci import (
    CodeSemantics,
    Locus,
    LocusGroup,
    LOCI,
    get_locus,
    loci_for_group,
    locus_for_gene,
    is_recognized,
)

__all__ = [
    "NoCall",
    "GenotypeValue",
    "is_no_call",
    "display_value",
    "Statement",
    "ResultStatus",
    "GroupResult",
    "InterpretationReport",
    "CodeSemantics",
    "Locus",
    "LocusGroup",
    "LOCI",
    "get_locus",
    "loci_for_group",
    "locus_for_gene",
    "is_recognized",
]
