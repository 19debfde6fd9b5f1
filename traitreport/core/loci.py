"""
Locus registry.

Static catalog of the loci a trait report covers: canonical name, the gene
identifier the DNA test reports it under, its trait section and the genotype
codes the evaluators recognize. Every code an evaluator branches on must be
listed here so the rule set stays auditable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List

from .genotype import GenotypeValue, is_no_call


class LocusGroup(Enum):
    """Trait sections of a report, in presentation order."""

    BASE_COLOR = "base_color"
    COAT_COLOR_MODIFIERS = "coat_color_modifiers"
    OTHER_COAT_TRAITS = "other_coat_traits"
    BODY_FEATURES = "body_features"
    BODY_SIZE = "body_size"
    PERFORMANCE = "performance"

    @property
    def title(self) -> str:
        return _GROUP_TITLES[self]


_GROUP_TITLES = {
    LocusGroup.BASE_COLOR: "Base Color",
    LocusGroup.COAT_COLOR_MODIFIERS: "Coat Color Modifiers",
    LocusGroup.OTHER_COAT_TRAITS: "Other Coat Traits",
    LocusGroup.BODY_FEATURES: "Body Features",
    LocusGroup.BODY_SIZE: "Body Size",
    LocusGroup.PERFORMANCE: "Performance",
}


class CodeSemantics(Enum):
    """How the characters of a genotype code are read."""

    ZYGOSITY = "zygosity"  # One symbol group per allele, e.g. "Bb"
    ALLELE_PREFIX = "allele_prefix"  # Dominant allele is the 2-char prefix
    ALLELE_LENGTH = "allele_length"  # Code length encodes allele count
    DESCRIPTIVE = "descriptive"  # Free-text result, reported verbatim


@dataclass(frozen=True)
class Locus:
    """A tested genetic locus."""

    name: str
    gene: str  # Identifier used by the DNA test report
    label: str
    group: LocusGroup
    codes: FrozenSet[str]
    semantics: CodeSemantics = CodeSemantics.ZYGOSITY

    def recognizes(self, value: GenotypeValue) -> bool:
        if is_no_call(value):
            return False
        if self.semantics == CodeSemantics.DESCRIPTIVE:
            return bool(value)
        return value in self.codes


def _locus(name, gene, label, group, codes, semantics=CodeSemantics.ZYGOSITY) -> Locus:
    return Locus(
        name=name,
        gene=gene,
        label=label,
        group=group,
        codes=frozenset(codes),
        semantics=semantics,
    )


_BASE = LocusGroup.BASE_COLOR
_MODS = LocusGroup.COAT_COLOR_MODIFIERS
_COAT = LocusGroup.OTHER_COAT_TRAITS
_BODY = LocusGroup.BODY_FEATURES
_PERF = LocusGroup.PERFORMANCE

# Order within a group is the order of the quick-genotype summary.
LOCI: List[Locus] = [
    # Base color
    _locus("eLocus", "MC1R", "E Locus", _BASE,
           ["EmEm", "EmEg", "EmE", "Eme", "EgEg", "EgE", "Ege", "EE", "Ee", "ee"]),
    _locus("bLocus", "TYRP1", "B Locus", _BASE, ["BB", "Bb", "bb"]),
    _locus("dLocus", "MLPH_D", "D Locus", _BASE, ["DD", "Dd", "dd"]),
    _locus("cocoa", "HPS3_Cocoa", "Cocoa", _BASE, ["NN", "Nco", "coco"]),
    _locus("intensity", "Intensity_red_pigment", "Red Pigment Intensity", _BASE,
           ["Intense Red Pigmentation", "Intermediate Red Pigmentation",
            "Dilute Red Pigmentation"],
           CodeSemantics.DESCRIPTIVE),
    # Coat color modifiers
    _locus("kLocus", "CBD103_K", "K Locus", _MODS, ["KBKB", "KBky", "kyky"]),
    _locus("aLocus", "ASIP", "A Locus", _MODS,
           ["ayay", "ayaw", "ayat", "aya", "awaw", "awat", "awa", "atat", "ata", "aa"],
           CodeSemantics.ALLELE_PREFIX),
    _locus("raly", "RALY_Saddle_trait_gene", "Saddle Tan (RALY)", _MODS,
           ["NN", "NIns", "InsIns"]),
    _locus("sLocus", "MITF", "S Locus", _MODS, ["SS", "Ssp", "spsp"],
           CodeSemantics.ALLELE_LENGTH),
    _locus("rLocus", "USH2A_Roan", "R Locus (Roan)", _MODS, ["RR", "Rr", "rr"]),
    _locus("merle", "PMEL_Merle", "M Locus (Merle)", _MODS, ["M*M*", "M*m", "mm"]),
    _locus("harlequin", "PSMB7_H", "H Locus (Harlequin)", _MODS, ["HH", "Hh", "hh"]),
    # Other coat traits
    _locus("furnishings", "RSPO2_moustache", "Furnishings", _COAT, ["FF", "FI", "II"]),
    _locus("longhair", "FGF5", "Coat Length", _COAT, ["GG", "GT", "TT"]),
    _locus("shedding", "MC5R_shedding", "Shedding", _COAT, ["CC", "CT", "TT"]),
    _locus("curl", "KRT71_CurlyCoat", "Coat Texture", _COAT, ["CC", "CT", "TT"]),
    _locus("xolo", "FOXI3_Hairless_Linkage", "Hairless (Xolo type)", _COAT,
           ["NN", "NDup"]),
    _locus("aht", "SGK3_Hairless", "Hairless (Terrier type)", _COAT, ["NN", "ND", "DD"]),
    _locus("albino", "SLC45A2_oculocutaneous_albinism_type_2_doberman_Z_factor",
           "Oculocutaneous Albinism Type 2", _COAT, ["NN", "ND", "DD"]),
    # Body features
    _locus("shortMuzzle", "BMP3_Muzzle", "Muzzle Length", _BODY, ["CC", "CA", "AA"]),
    _locus("bobtail", "T_C189G_Bobtail", "Tail Length", _BODY, ["CC", "CG"]),
    _locus("hindDewclaws", "LMBR1_Claw", "Hind Dewclaws", _BODY, ["CC", "CT", "TT"]),
    _locus("muscling", "ACSL4_Bulky_trait_gene", "Bulky Muscling", _BODY,
           ["CC", "CT", "TT"]),
    _locus("blueEyes", "ALX4_Blue_Eyes_Linkage", "Blue Eye Color", _BODY,
           ["NN", "NDup", "DupDup"]),
    # Performance
    _locus("altitude", "EPAS1_altitude", "Altitude Adaptation", _PERF, ["GG", "GA", "AA"]),
    _locus("appetite", "POMC_appetite_linkage", "Appetite (POMC)", _PERF, ["NN", "ND", "DD"]),
]

_BY_NAME: Dict[str, Locus] = {locus.name: locus for locus in LOCI}
_BY_GENE: Dict[str, Locus] = {locus.gene: locus for locus in LOCI}


def get_locus(name: str) -> Locus:
    """Get a locus by canonical name."""
    if name not in _BY_NAME:
        raise KeyError(f"Unknown locus: {name}")
    return _BY_NAME[name]


def locus_for_gene(gene: str) -> Locus:
    """Get a locus by the gene identifier used in test reports."""
    if gene not in _BY_GENE:
        raise KeyError(f"Unknown gene identifier: {gene}")
    return _BY_GENE[gene]


def loci_for_group(group: LocusGroup) -> List[Locus]:
    """Get the loci of a trait section in summary order."""
    return [locus for locus in LOCI if locus.group == group]


def is_recognized(name: str, value: GenotypeValue) -> bool:
    """Check whether a value is a known code for the named locus."""
    return get_locus(name).recognizes(value)
