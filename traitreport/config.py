"""
Report configuration.

Defines where reports are written, which formats are produced and how runs
are logged. Loaded from YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List
import logging

import yaml

from .extraction.layouts import ProfileLayout

logger = logging.getLogger(__name__)

VALID_FORMATS = ["json", "markdown", "text"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class ReportConfig:
    """Settings for a report run."""

    output_dir: str = "./trait_reports"
    formats: List[str] = field(default_factory=lambda: ["json", "markdown"])
    log_level: str = "INFO"
    include_genotypes: bool = True  # Show quick-genotype summaries
    default_layout: ProfileLayout = ProfileLayout.STANDARD

    def __post_init__(self):
        """Validate configuration."""
        unknown = [f for f in self.formats if f not in VALID_FORMATS]
        if unknown:
            raise ValueError(
                f"Invalid report formats: {unknown}. "
                f"Must be any of {VALID_FORMATS}"
            )
        if not self.formats:
            raise ValueError("formats must list at least one report format")
        if str(self.log_level).upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )


def load_report_config(config_path: str) -> ReportConfig:
    """
    Load report configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        ReportConfig instance
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    report_data = data.get("report", {})
    logging_data = data.get("logging", {})

    config = ReportConfig(
        output_dir=report_data.get("output_dir", "./trait_reports"),
        formats=report_data.get("formats", ["json", "markdown"]),
        include_genotypes=report_data.get("include_genotypes", True),
        default_layout=ProfileLayout.from_name(report_data.get("default_layout", "standard")),
        log_level=logging_data.get("level", "INFO"),
    )
    logger.debug(f"Loaded report config from {path}: {config}")
    return config
