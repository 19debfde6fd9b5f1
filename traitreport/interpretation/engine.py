"""
TraitInterpreter - Run every trait evaluator over one subject's genotypes.

Each section is interpreted independently from the same genotype mapping.
A report is always produced in full: missing results arrive as NoCall,
unhandled codes become error statements, and an unexpected failure inside
one evaluator degrades only that section.
"""

from datetime import datetime
from typing import Callable, Dict, Iterable, List, Mapping, Tuple
import logging

from ..core.genotype import GenotypeValue, genotype_of
from ..core.loci import LOCI, LocusGroup
from ..core.types import GroupResult, InterpretationReport, ResultStatus, Statement
from ..extraction.layouts import ProfileLayout
from ..extraction.protocol import ResultExtractor, collect_genotypes
from ..infrastructure.fingerprint import hash_genotypes
from .base_color import evaluate_base_color
from .body_features import evaluate_body_features
from .coat_color_modifiers import evaluate_coat_color_modifiers
from .other_coat_traits import evaluate_other_coat_traits
from .performance import evaluate_performance
from .size import evaluate_body_size

logger = logging.getLogger(__name__)

Evaluator = Callable[[Mapping[str, GenotypeValue]], GroupResult]

# Presentation order of the report sections.
EVALUATORS: Dict[LocusGroup, Evaluator] = {
    LocusGroup.BASE_COLOR: evaluate_base_color,
    LocusGroup.COAT_COLOR_MODIFIERS: evaluate_coat_color_modifiers,
    LocusGroup.OTHER_COAT_TRAITS: evaluate_other_coat_traits,
    LocusGroup.BODY_FEATURES: evaluate_body_features,
    LocusGroup.BODY_SIZE: evaluate_body_size,
    LocusGroup.PERFORMANCE: evaluate_performance,
}


def normalize_genotypes(genotypes: Mapping[str, GenotypeValue]) -> Dict[str, GenotypeValue]:
    """Fill every registered locus, using NoCall for anything absent."""
    unknown = set(genotypes) - {locus.name for locus in LOCI}
    if unknown:
        logger.warning(f"Ignoring results for unknown loci: {sorted(unknown)}")
    return {locus.name: genotype_of(genotypes, locus.name) for locus in LOCI}


def evaluate_group(group: LocusGroup, genotypes: Mapping[str, GenotypeValue]) -> GroupResult:
    """
    Run one section's evaluator.

    An exception raised by the evaluator is logged and replaced by a
    section holding a single error statement.
    """
    evaluator = EVALUATORS[group]
    try:
        result = evaluator(genotypes)
    except Exception as e:
        logger.exception(f"Evaluator for {group.value} failed")
        return GroupResult(
            group=group,
            summary="",
            statements=(Statement(f"Processing {group.title} failed: {e}", error=True),),
        )

    logger.debug(f"{group.value}: {len(result.statements)} statements")
    if result.status == ResultStatus.PARTIAL_FAILURE:
        logger.warning(f"{group.value}: interpreted with processing errors")
    return result


def interpret_genotypes(
    genotypes: Mapping[str, GenotypeValue],
    subject: str = "subject",
    layout: ProfileLayout = ProfileLayout.STANDARD,
) -> InterpretationReport:
    """
    Interpret all trait sections for one subject.

    Args:
        genotypes: Mapping of canonical locus name to genotype value
        subject: Name shown on the report
        layout: Layout of the profile the genotypes came from

    Returns:
        InterpretationReport with one GroupResult per section
    """
    values = normalize_genotypes(genotypes)
    groups: Tuple[GroupResult, ...] = tuple(
        evaluate_group(group, values) for group in EVALUATORS
    )

    report = InterpretationReport(
        subject=subject,
        layout=layout.value,
        timestamp=datetime.now().isoformat(),
        input_hash=hash_genotypes(values),
        groups=groups,
    )
    logger.info(
        f"Interpreted {subject}: {len(report.attention_statements)} attention, "
        f"{len(report.errors)} errors"
    )
    return report


def interpret_subject(extractor: ResultExtractor, subject: str = "subject") -> InterpretationReport:
    """Interpret all trait sections using results from an extractor."""
    return interpret_genotypes(
        collect_genotypes(extractor),
        subject=subject,
        layout=extractor.layout,
    )


def interpret_batch(
    subjects: Iterable[Tuple[str, ResultExtractor]],
) -> List[InterpretationReport]:
    """
    Interpret many subjects.

    Subjects share no state, so a degraded report for one never affects
    another.
    """
    reports = []
    for subject, extractor in subjects:
        reports.append(interpret_subject(extractor, subject=subject))
    return reports
