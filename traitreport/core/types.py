"""
Core result types for genotype interpretation.

Defines the statements produced by the trait evaluators and the
per-section and per-subject containers that carry them to a presenter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .loci import LocusGroup


@dataclass(frozen=True)
class Statement:
    """
    One explanatory entry in a trait section.

    attention marks information owners and breeders must not skip
    (double merle, albinism, POMC). error marks a fail-loud statement
    emitted in place of an interpretation that could not be made.
    """
    text: str
    attention: bool = False
    error: bool = False

    def __post_init__(self):
        """Validate statement."""
        if not self.text:
            raise ValueError("text cannot be empty")

    def to_dict(self) -> Dict:
        return {"text": self.text, "attention": self.attention, "error": self.error}


class ResultStatus(Enum):
    """Outcome of interpreting one trait section."""

    OK = "ok"
    PARTIAL_FAILURE = "partial_failure"


@dataclass(frozen=True)
class GroupResult:
    """Interpretation of one trait section for one subject."""

    group: LocusGroup
    summary: str  # Quick genotype, verbatim input codes
    statements: Tuple[Statement, ...] = ()
    note: Optional[str] = None  # Section-level note shown before statements

    @property
    def status(self) -> ResultStatus:
        if any(s.error for s in self.statements):
            return ResultStatus.PARTIAL_FAILURE
        return ResultStatus.OK

    @property
    def attention_statements(self) -> List[Statement]:
        return [s for s in self.statements if s.attention]

    @property
    def texts(self) -> List[str]:
        return [s.text for s in self.statements]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "group": self.group.value,
            "title": self.group.title,
            "summary": self.summary,
            "note": self.note,
            "status": self.status.value,
            "statements": [s.to_dict() for s in self.statements],
        }


@dataclass(frozen=True)
class InterpretationReport:
    """All trait sections interpreted for one subject."""

    subject: str
    layout: str
    timestamp: str
    input_hash: str
    groups: Tuple[GroupResult, ...] = field(default_factory=tuple)

    def group(self, group: LocusGroup) -> GroupResult:
        """Get the result for a specific trait section."""
        for result in self.groups:
            if result.group == group:
                return result
        raise KeyError(f"No result for group: {group.value}")

    @property
    def status(self) -> ResultStatus:
        if any(g.status == ResultStatus.PARTIAL_FAILURE for g in self.groups):
            return ResultStatus.PARTIAL_FAILURE
        return ResultStatus.OK

    @property
    def attention_statements(self) -> List[Statement]:
        return [s for g in self.groups for s in g.attention_statements]

    @property
    def errors(self) -> List[Statement]:
        return [s for g in self.groups for s in g.statements if s.error]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "subject": self.subject,
            "layout": self.layout,
            "timestamp": self.timestamp,
            "input_hash": self.input_hash,
            "status": self.status.value,
            "attention_count": len(self.attention_statements),
            "error_count": len(self.errors),
            "groups": [g.to_dict() for g in self.groups],
        }
