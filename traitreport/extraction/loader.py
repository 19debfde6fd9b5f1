"""
Subject file loading.

A subject file is YAML (or JSON, which YAML reads as well):

    subject: Biscuit
    layout: standard            # or "breeders"; or give section_count: 5
    results:                    # codes keyed by locus name or gene identifier
      eLocus: Ee
      CBD103_K: kyky

Instead of `results`, a file may carry raw `sections` for its layout: lists
of emphasized strings per gene for standard profiles, result text per gene
for breeder profiles.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

import yaml

from .factory import create_extractor
from .layouts import ProfileLayout
from .protocol import ResultExtractor

logger = logging.getLogger(__name__)


@dataclass
class SubjectData:
    """A subject's name and the source of its results."""

    subject: str
    extractor: ResultExtractor

    @property
    def layout(self) -> ProfileLayout:
        return self.extractor.layout


def _resolve_layout(data: dict, default_layout: ProfileLayout) -> ProfileLayout:
    if "layout" in data:
        return ProfileLayout.from_name(str(data["layout"]))
    if "section_count" in data:
        return ProfileLayout.from_section_count(int(data["section_count"]))
    return default_layout


def load_subject_file(
    path: str,
    default_layout: ProfileLayout = ProfileLayout.STANDARD,
) -> SubjectData:
    """
    Load a subject's results from a YAML or JSON file.

    Args:
        path: Path to the subject file
        default_layout: Layout used when the file does not name one

    Returns:
        SubjectData with an extractor over the file's results

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file has neither results nor sections
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Subject file not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Subject file must contain a mapping: {path}")

    subject = str(data.get("subject") or file_path.stem)
    layout = _resolve_layout(data, default_layout)

    results: Optional[dict] = data.get("results")
    sections: Optional[dict] = data.get("sections")
    if results is not None:
        extractor = create_extractor("mapping", results, layout=layout)
    elif sections is not None:
        extractor = create_extractor(layout.value, sections)
    else:
        raise ValueError(f"Subject file has neither 'results' nor 'sections': {path}")

    logger.info(f"Loaded subject '{subject}' ({layout.value} layout) from {file_path}")
    return SubjectData(subject=subject, extractor=extractor)
