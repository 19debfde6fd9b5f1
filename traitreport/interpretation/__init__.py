"""Trait evaluators and the engine that runs them over a subject."""

from .base_color import evaluate_base_color, eumelanin_color, is_recessive_red
from .coat_color_modifiers import (
    evaluate_coat_color_modifiers,
    describe_a_locus,
    describe_s_locus,
    harlequin_base,
    merle_status,
    MerleStatus,
)
from .other_coat_traits import evaluate_other_coat_traits
from .body_features import evaluate_body_features
from .size import evaluate_body_size
from .performance import evaluate_performance
from .engine import (
    EVALUATORS,
    evaluate_group,
    interpret_genotypes,
    interpret_subject,
    interpret_batch,
)

__all__ = [
    "evaluate_base_color",
    "eumelanin_color",
    "is_recessive_red",
    "evaluate_coat_color_modifiers",
    "describe_a_locus",
    "describe_s_locus",
    "harlequin_base",
    "merle_status",
    "MerleStatus",
    "evaluate_other_coat_traits",
    "evaluate_body_features",
    "evaluate_body_size",
    "evaluate_performance",
    "EVALUATORS",
    "evaluate_group",
    "interpret_genotypes",
    "interpret_subject",
    "interpret_batch",
]
