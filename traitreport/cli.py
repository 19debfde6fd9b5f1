"""
Trait report CLI - Command-line interface for interpreting genotype results.
"""

import argparse
import sys
import logging
from typing import List, Optional

from .config import ReportConfig, VALID_FORMATS, VALID_LOG_LEVELS, load_report_config
from .core.types import ResultStatus
from .extraction import ProfileLayout, load_subject_file
from .infrastructure import setup_logging
from .interpretation import interpret_batch
from .reporting import ReportGenerator

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Explain canine genotype results in plain language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interpret one dog with the default configuration
  python -m traitreport.cli tests/fixtures/standard_subject.yaml

  # Several dogs from breeder profiles, all formats, fail on processing errors
  python -m traitreport.cli dogs/*.yaml \\
    --layout breeders \\
    --format json markdown text \\
    --strict
""",
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        help="Subject files (YAML or JSON) holding genotype results",
    )
    parser.add_argument(
        "--config",
        help="Report configuration YAML (default: built-in settings)",
    )
    parser.add_argument(
        "--output",
        help="Output directory for reports (overrides config)",
    )
    parser.add_argument(
        "--format",
        nargs="+",
        choices=VALID_FORMATS,
        dest="formats",
        help="Report formats to write (overrides config)",
    )
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in ProfileLayout],
        help="Profile layout for files that don't declare one (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Logging level (overrides config)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any report contains processing errors",
    )

    return parser.parse_args(argv)


def build_config(args) -> ReportConfig:
    """Merge the configuration file with command-line overrides."""
    config = load_report_config(args.config) if args.config else ReportConfig()

    if args.output:
        config.output_dir = args.output
    if args.formats:
        config.formats = list(args.formats)
    if args.layout:
        config.default_layout = ProfileLayout.from_name(args.layout)
    if args.log_level:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the trait report CLI."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    logger.info(f"Inputs: {len(args.inputs)}")
    logger.info(f"Output: {config.output_dir}")
    logger.info(f"Formats: {', '.join(config.formats)}")

    subjects = []
    for path in args.inputs:
        try:
            subject = load_subject_file(path, default_layout=config.default_layout)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load {path}: {e}")
            return 1
        subjects.append((subject.subject, subject.extractor))

    reports = interpret_batch(subjects)

    reporter = ReportGenerator(config.output_dir, include_genotypes=config.include_genotypes)
    for report in reports:
        paths = reporter.generate_all(report, config.formats)
        for fmt, path in paths.items():
            logger.info(f"{fmt} report: {path}")
        print(reporter.generate_summary(report))

    if len(reports) > 1:
        reporter.generate_batch_summary(reports)

    failed = [r for r in reports if r.status == ResultStatus.PARTIAL_FAILURE]
    if failed:
        logger.warning(f"{len(failed)} report(s) contain processing errors")

    print(f"Reports saved to: {config.output_dir}")

    # Exit with appropriate code
    return 1 if args.strict and failed else 0


if __name__ == "__main__":
    sys.exit(main())
