"""Other coat traits section: coat type, furnishings, shedding, hairlessness, albinism."""

from typing import List, Mapping, Optional

from ..core.genotype import GenotypeValue, is_no_call
from ..core.loci import LocusGroup
from ..core.types import GroupResult, Statement
from .common import group_genotypes, processing_failed, quick_genotype

CURL_TYPES = {
    "CC": "straight",
    "CT": "wavy",
    "TT": "curly",
}


def is_furnished(furnishings: GenotypeValue) -> bool:
    return not is_no_call(furnishings) and furnishings != "II"


def coat_length(longhair: GenotypeValue) -> Optional[str]:
    if is_no_call(longhair):
        return None
    return "long" if longhair == "TT" else "short"


def coat_texture(length: Optional[str], furnishings: GenotypeValue) -> Optional[str]:
    # Furnishings only make a short coat wiry.
    if length is None or is_no_call(furnishings):
        return None
    return "wiry" if length == "short" and is_furnished(furnishings) else "smooth"


def _coat_type_statement(
    furnishings: GenotypeValue, longhair: GenotypeValue, curl: GenotypeValue
) -> Statement:
    length = coat_length(longhair)
    texture = coat_texture(length, furnishings)
    if not is_no_call(curl) and curl not in CURL_TYPES:
        return processing_failed("Coat Texture", curl)
    curl_type = None if is_no_call(curl) else CURL_TYPES[curl]

    if length and texture and curl_type:
        return Statement(f"Coat should be {length}, {texture}, and relatively {curl_type}.")

    known = [part for part in (length, texture) if part]
    undetermined = []
    if length is None:
        undetermined.append("length")
    if texture is None:
        undetermined.append("texture")
    if curl_type is None:
        undetermined.append("curl")

    text = "Coat type could not be fully determined"
    if known:
        text = f"Coat should be {' and '.join(known)}, but coat type could not be fully determined"
    return Statement(f"{text} (unknown: {', '.join(undetermined)}).")


def _furnishings_statement(furnishings: GenotypeValue) -> Optional[Statement]:
    if not is_furnished(furnishings):
        return None
    return Statement(
        "Dog has furnishings (facial hair) which may affect the coat length, texture, "
        "and shedding pattern."
    )


def _shedding_statement(shedding: GenotypeValue) -> Optional[Statement]:
    if is_no_call(shedding):
        return None
    if shedding == "TT":
        return Statement("Normal-to-low shedding that is not seasonal.")
    return Statement('High seasonal shedding. Dog may "blow coat" seasonally.')


def _xolo_statement(xolo: GenotypeValue) -> Optional[Statement]:
    if xolo != "NDup":
        return None
    return Statement(
        "Dog is hairless (type: Xoloitzcuintli, Chinese Crested, or Peruvian Hairless Dog)."
    )


def _aht_statement(aht: GenotypeValue) -> Optional[Statement]:
    if aht == "ND":
        return Statement("Dog carries a hairlessness gene (type: American Hairless Terrier).")
    if aht == "DD":
        return Statement("Dog is hairless (type: American Hairless Terrier).")
    return None


def _albino_statement(albino: GenotypeValue) -> Optional[Statement]:
    if is_no_call(albino) or albino == "NN":
        return None
    verb = "has" if albino == "DD" else "carries"
    return Statement(f"Dog {verb} Doberman (Z-factor) albinism.", attention=True)


def evaluate_other_coat_traits(genotypes: Mapping[str, GenotypeValue]) -> GroupResult:
    """Interpret the other coat traits section."""
    values = group_genotypes(genotypes, LocusGroup.OTHER_COAT_TRAITS)
    furnishings = values["furnishings"]

    statements: List[Statement] = [
        _coat_type_statement(furnishings, values["longhair"], values["curl"])
    ]
    for statement in (
        _furnishings_statement(furnishings),
        _shedding_statement(values["shedding"]),
        _xolo_statement(values["xolo"]),
        _aht_statement(values["aht"]),
        _albino_statement(values["albino"]),
    ):
        if statement is not None:
            statements.append(statement)

    return GroupResult(
        group=LocusGroup.OTHER_COAT_TRAITS,
        summary=quick_genotype(list(values.values())),
        statements=tuple(statements),
    )
