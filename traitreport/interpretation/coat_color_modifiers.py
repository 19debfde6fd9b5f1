"""
Coat color modifier section.

The loci here cannot be read one at a time: K masks A, K decides the brindle
caveat on A and the base of a harlequin coat, and merle decides whether
harlequin can show at all. Statements are produced in a fixed order:

    K, A, RALY, S, [R], merle, [harlequin]

R and harlequin only appear when a non-wild-type result was called.
"""

from enum import Enum
from typing import List, Mapping, Optional

from ..core.genotype import GenotypeValue, is_no_call
from ..core.loci import LocusGroup
from ..core.types import GroupResult, Statement
from .common import group_genotypes, processing_failed, quick_genotype

DOMINANT_SOLID = "KBKB"
K_BRINDLE_AMBIGUOUS = "KBky"
K_RECESSIVE = "kyky"

WHITE_FACTORS_CAVEAT = (
    "Regardless of this piebald result, a dog may have white from other factors, "
    "such as residual white, untestable white spotting, merle, very pale "
    "pigmentation, or whitehead."
)

MERLE_BREEDING_CAVEAT = (
    "If you plan to breed this dog or any of its offspring, you should test the "
    "merle length, and all potential breeding partners should be tested for merle "
    "even if they look non-merle."
)


class MerleStatus(Enum):
    DOUBLE = "double"
    SINGLE = "single"
    NONE = "none"
    UNKNOWN = "unknown"

    @property
    def is_merle(self) -> bool:
        return self in (MerleStatus.DOUBLE, MerleStatus.SINGLE)


# K locus

def _k_locus_statement(k_locus: GenotypeValue) -> Statement:
    if is_no_call(k_locus):
        return Statement(
            "No K-Locus result. Whether the coat is dominant solid cannot be determined."
        )
    if k_locus == DOMINANT_SOLID:
        return Statement(
            "Dominant solid. Full eumelanin coat. Other genes (such as merle, piebald, "
            "seal, or domino) may affect whether the appearance is actually solid or not."
        )
    if k_locus == K_BRINDLE_AMBIGUOUS:
        return Statement(
            "KB/ky: may be dominant solid or may be brindle. Brindle is untestable and "
            "4 genotypes (KB/ky, KB/Kbr, Kbr/Kbr, and Kbr/ky) all test as KB/ky."
        )
    if k_locus == K_RECESSIVE:
        return Statement(
            "Able to have both eumelanin and phaeomelanin in coat. Pattern will be "
            "determined by the A-Locus."
        )
    return processing_failed("K-Locus", k_locus)


# A locus

def a_locus_allele(a_locus: str) -> Optional[str]:
    """
    Dominant allele symbol of an A-locus code.

    Codes are written dominant allele first. A two-character code ("aa") has
    no expressed allele and returns None; longer codes return their
    two-character prefix ("ayat" -> "ay").
    """
    if len(a_locus) <= 2:
        return None
    return a_locus[:2]


def describe_a_locus(a_locus: str, maybe_brindle: bool) -> Optional[str]:
    """Describe the A-locus pattern, or None for an unhandled allele."""
    allele = a_locus_allele(a_locus)
    if allele is None:
        if len(a_locus) == 2:
            return "Recessive solid, without any phaeomelanin (yellow/tan) areas."
        return None
    if allele == "ay":
        return (
            "Sable: base color will be sandy, tan, fawn, or red, with or without "
            "shading or tipping."
        )
    if allele == "aw":
        return (
            "Agouti (wild type). Dog will have a blend of eumelanin and phaeomelanin "
            "hairs across their body."
        )
    if allele == "at":
        return "Tan points (or brindle points)." if maybe_brindle else "Tan points."
    return None


def _a_locus_statement(a_locus: GenotypeValue, k_locus: GenotypeValue) -> Statement:
    if k_locus == DOMINANT_SOLID:
        return Statement("A-Locus pattern will have no effect; dog is dominant solid.")
    if is_no_call(a_locus):
        return Statement("A-Locus: no result, pattern cannot be determined.")
    description = describe_a_locus(a_locus, maybe_brindle=k_locus == K_BRINDLE_AMBIGUOUS)
    if description is None:
        return processing_failed("A-Locus", a_locus)
    return Statement(f"A-Locus: {description}")


def _raly_statement() -> Statement:
    return Statement("RALY (saddle tan) test is outdated/unreliable and should usually be ignored.")


# S locus

_PIEBALD_BY_LENGTH = {
    2: "No piebald detected.",
    3: "Piebald carrier. Dog may have small amounts of white.",
    4: "Piebald. Dog should have large areas of white coat.",
}


def describe_s_locus(s_locus: str) -> Optional[str]:
    """
    Piebald severity from an S-locus code.

    The code length encodes the number of piebald alleles: "SS" (2),
    "Ssp" (3), "spsp" (4). Any other length returns None.
    """
    return _PIEBALD_BY_LENGTH.get(len(s_locus))


def _s_locus_statement(s_locus: GenotypeValue) -> Statement:
    if is_no_call(s_locus):
        return Statement(f"No piebald result. {WHITE_FACTORS_CAVEAT}")
    description = describe_s_locus(s_locus)
    if description is None:
        return Statement(
            f"Unrecognized piebald genotype '{s_locus}'. {WHITE_FACTORS_CAVEAT}",
            error=True,
        )
    return Statement(f"{description} {WHITE_FACTORS_CAVEAT}")


def _r_locus_statement(r_locus: GenotypeValue) -> Optional[Statement]:
    if is_no_call(r_locus) or r_locus == "rr":
        return None
    return Statement(
        "Roan detected. If there are large white areas in the coat, they should have "
        "ticking, roaning, or Dalmatian spots."
    )


# Merle and harlequin

def merle_status(merle: GenotypeValue) -> Optional[MerleStatus]:
    """Classify a merle code; None for an unhandled code."""
    if is_no_call(merle):
        return MerleStatus.UNKNOWN
    return {
        "M*M*": MerleStatus.DOUBLE,
        "M*m": MerleStatus.SINGLE,
        "mm": MerleStatus.NONE,
    }.get(merle)


def _merle_statement(merle: GenotypeValue, status: Optional[MerleStatus]) -> Statement:
    if status is None:
        return processing_failed("merle", merle)
    if status == MerleStatus.DOUBLE:
        return Statement(
            "Dog tests as double merle and may have impaired vision or hearing. "
            + MERLE_BREEDING_CAVEAT,
            attention=True,
        )
    if status == MerleStatus.SINGLE:
        return Statement("Dog tests as single merle. " + MERLE_BREEDING_CAVEAT)
    if status == MerleStatus.NONE:
        return Statement("No merle detected.")
    return Statement("No merle result. Merle status cannot be determined.")


def harlequin_base(k_locus: GenotypeValue) -> str:
    """Base coloration of a merle harlequin coat, decided by the K locus."""
    if k_locus == K_BRINDLE_AMBIGUOUS:
        return "mantle- or brindle"
    if k_locus == K_RECESSIVE:
        return "fawn"
    return "mantle"


def _harlequin_statement(
    harlequin: GenotypeValue, status: Optional[MerleStatus], k_locus: GenotypeValue
) -> Optional[Statement]:
    if is_no_call(harlequin) or harlequin == "hh":
        return None
    text = (
        "Harlequin detected. This gene only exists in Great Danes and their mixes, "
        "regardless of whether Great Dane ancestry was detected. It can only express "
        "in merle dogs."
    )
    if status is None or status == MerleStatus.UNKNOWN:
        text += " Merle status is unknown, so it cannot be said whether harlequin expresses."
    elif status.is_merle:
        text += f" This dog is merle and harlequin ({harlequin_base(k_locus)}-based)."
    else:
        text += (
            " This dog is non-merle, but it can produce harlequin offspring if paired "
            "with a merle dog."
        )
    return Statement(text)


def evaluate_coat_color_modifiers(genotypes: Mapping[str, GenotypeValue]) -> GroupResult:
    """Interpret the coat color modifier section."""
    values = group_genotypes(genotypes, LocusGroup.COAT_COLOR_MODIFIERS)
    k_locus = values["kLocus"]
    merle = values["merle"]

    statements: List[Statement] = [
        _k_locus_statement(k_locus),
        _a_locus_statement(values["aLocus"], k_locus),
        _raly_statement(),
        _s_locus_statement(values["sLocus"]),
    ]

    roan = _r_locus_statement(values["rLocus"])
    if roan is not None:
        statements.append(roan)

    # Merle must be resolved before harlequin wording can be chosen.
    status = merle_status(merle)
    statements.append(_merle_statement(merle, status))

    harlequin = _harlequin_statement(values["harlequin"], status, k_locus)
    if harlequin is not None:
        statements.append(harlequin)

    summary = quick_genotype(list(values.values()))
    return GroupResult(
        group=LocusGroup.COAT_COLOR_MODIFIERS,
        summary=summary,
        statements=tuple(statements),
    )
