"""Body features section: muzzle, tail, muscling and blue eyes."""

from typing import List, Mapping, Optional

from ..core.genotype import GenotypeValue, is_no_call
from ..core.loci import LocusGroup
from ..core.types import GroupResult, Statement
from .common import group_genotypes, quick_genotype

BLUE_EYES_CAVEAT = (
    "Blue eyes can also be caused by coat color traits that remove pigment, such as "
    "merle, whitehead, and piebald. In addition, lightened eyes from a dilute coat "
    "may appear blue but are not."
)


def _short_muzzle_statement(short_muzzle: GenotypeValue) -> Optional[Statement]:
    if is_no_call(short_muzzle):
        return None
    if short_muzzle == "AA":
        return Statement(
            "Short snout detected. Dog should have a shorter nose and flatter face than normal."
        )
    return Statement(
        "Short snout not detected. Dog most likely will have a normal/medium snout, but "
        "may have a long one. Not all forms of short snout are testable."
    )


def _bobtail_statement(bobtail: GenotypeValue) -> Optional[Statement]:
    if is_no_call(bobtail):
        return None
    if bobtail == "CG":
        return Statement(
            "Natural bobtail gene present. If dog has a short tail, it may have been born that way."
        )
    return Statement("No natural bobtail detected. Not all forms of natural bobtail are testable.")


def _muscling_statement(muscling: GenotypeValue) -> Optional[Statement]:
    # Only the no-effect genotype is explained; carrying the allele says nothing on its own.
    if muscling != "CC":
        return None
    return Statement(
        "No special bulk gene detected. This dog might still be muscular, but it's not as "
        "a result of this particular gene."
    )


def _blue_eyes_statement(blue_eyes: GenotypeValue) -> Statement:
    if is_no_call(blue_eyes):
        text = "No blue eye gene result."
    elif blue_eyes != "NN":
        text = "One or both eyes may be true blue, independent of coat color."
    else:
        text = "Dog doesn't have the blue eye gene, but might have blue eyes due to other factors."
    return Statement(f"{text} {BLUE_EYES_CAVEAT}")


def evaluate_body_features(genotypes: Mapping[str, GenotypeValue]) -> GroupResult:
    """Interpret the body features section."""
    values = group_genotypes(genotypes, LocusGroup.BODY_FEATURES)

    statements: List[Statement] = []
    for statement in (
        _short_muzzle_statement(values["shortMuzzle"]),
        _bobtail_statement(values["bobtail"]),
        _muscling_statement(values["muscling"]),
    ):
        if statement is not None:
            statements.append(statement)
    statements.append(_blue_eyes_statement(values["blueEyes"]))

    return GroupResult(
        group=LocusGroup.BODY_FEATURES,
        summary=quick_genotype(list(values.values())),
        statements=tuple(statements),
    )
