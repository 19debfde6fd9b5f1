"""
Tests for ReportGenerator - rendering trait reports in multiple formats.

Tests cover:
- JSON report generation
- Markdown report generation
- Plain-text report generation
- Summary generation
- Batch summary generation
"""

import pytest
from pathlib import Path
import json
import tempfile
import shutil

from traitreport.core.loci import LocusGroup
from traitreport.core.types import GroupResult, InterpretationReport, Statement
from traitreport.reporting import (
    ATTENTION_PREFIX,
    ERROR_PREFIX,
    ReportGenerator,
    format_statement,
)


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_report() -> InterpretationReport:
    """Create a sample report with one attention and one error statement."""
    return InterpretationReport(
        subject="Biscuit",
        layout="standard",
        timestamp="2024-01-01T12:00:00",
        input_hash="0" * 64,
        groups=(
            GroupResult(
                group=LocusGroup.BASE_COLOR,
                summary="Ee Bb DD NN with Intermediate Red Pigmentation",
                statements=(Statement("Eumelanin color is BLACK."),),
            ),
            GroupResult(
                group=LocusGroup.COAT_COLOR_MODIFIERS,
                summary="kyky qqqq NN SS rr M*M* hh",
                statements=(
                    Statement("Processing A-Locus failed: unrecognized genotype 'qqqq'.", error=True),
                    Statement("Dog tests as double merle.", attention=True),
                ),
            ),
            GroupResult(
                group=LocusGroup.PERFORMANCE,
                summary="GG NN",
                statements=(),
                note="These results are mainly relevant to working dogs.",
            ),
        ),
    )


@pytest.fixture
def clean_report() -> InterpretationReport:
    """Create a report with nothing flagged."""
    return InterpretationReport(
        subject="Rex",
        layout="breeders",
        timestamp="2024-01-02T08:30:00.123456",
        input_hash="1" * 64,
        groups=(
            GroupResult(
                group=LocusGroup.BODY_SIZE,
                summary="",
                statements=(Statement("Size is mostly polygenic."),),
            ),
        ),
    )


class TestFormatStatement:
    """Test statement markers."""

    def test_plain(self) -> None:
        assert format_statement(Statement("Plain.")) == "Plain."

    def test_attention(self) -> None:
        assert format_statement(Statement("Look.", attention=True)) == f"{ATTENTION_PREFIX} Look."

    def test_error_wins(self) -> None:
        statement = Statement("Broken.", attention=True, error=True)

        assert format_statement(statement) == f"{ERROR_PREFIX} Broken."


class TestReportGeneratorInit:
    """Test ReportGenerator initialization."""

    def test_creates_output_dir(self, temp_output_dir):
        """Test that output directory is created."""
        output_dir = Path(temp_output_dir) / "reports"
        generator = ReportGenerator(str(output_dir))

        assert output_dir.exists()
        assert generator.output_dir == output_dir


class TestJSONReport:
    """Test JSON report generation."""

    def test_generates_json_file(self, temp_output_dir, sample_report):
        """Test JSON file is generated."""
        generator = ReportGenerator(temp_output_dir)
        output_path = generator.generate_json(sample_report)

        assert output_path.exists()
        assert output_path.suffix == ".json"
        assert output_path.name.startswith("Biscuit_")

    def test_json_content(self, temp_output_dir, sample_report):
        """Test JSON content is correct."""
        generator = ReportGenerator(temp_output_dir)
        output_path = generator.generate_json(sample_report)

        with open(output_path) as f:
            data = json.load(f)

        assert data["subject"] == "Biscuit"
        assert data["attention_count"] == 1
        assert data["error_count"] == 1
        assert [g["group"] for g in data["groups"]] == [
            "base_color",
            "coat_color_modifiers",
            "performance",
        ]
        assert "environment" in data
        assert "python_version" in data["environment"]

    def test_json_without_genotypes(self, temp_output_dir, sample_report):
        """Test quick-genotype summaries can be left out."""
        generator = ReportGenerator(temp_output_dir, include_genotypes=False)
        output_path = generator.generate_json(sample_report)

        data = json.loads(output_path.read_text())

        assert all("summary" not in g for g in data["groups"])


class TestMarkdownReport:
    """Test Markdown report generation."""

    def test_generates_markdown_file(self, temp_output_dir, sample_report):
        """Test Markdown file is generated."""
        generator = ReportGenerator(temp_output_dir)
        output_path = generator.generate_markdown(sample_report)

        assert output_path.exists()
        assert output_path.suffix == ".md"

    def test_markdown_content(self, temp_output_dir, sample_report):
        """Test Markdown content has expected sections."""
        generator = ReportGenerator(temp_output_dir)
        content = generator.generate_markdown(sample_report).read_text()

        assert "# Trait Report: Biscuit" in content
        assert "## Attention" in content
        assert "## Base Color" in content
        assert "## Coat Color Modifiers" in content
        assert "`[Quick Genotype: kyky qqqq NN SS rr M*M* hh]`" in content
        assert f"- {ERROR_PREFIX} Processing A-Locus failed" in content
        assert "PARTIAL FAILURE" in content

    def test_markdown_note(self, temp_output_dir, sample_report):
        """Test section notes are rendered."""
        content = ReportGenerator(temp_output_dir).render_markdown(sample_report)

        assert "_These results are mainly relevant to working dogs._" in content

    def test_no_attention_section_when_clean(self, temp_output_dir, clean_report):
        """Test the attention section is omitted when nothing is flagged."""
        content = ReportGenerator(temp_output_dir).render_markdown(clean_report)

        assert "## Attention" not in content
        assert "Quick Genotype" not in content


class TestTextReport:
    """Test plain-text report generation."""

    def test_text_content(self, temp_output_dir, sample_report):
        generator = ReportGenerator(temp_output_dir)
        output_path = generator.generate_text(sample_report)

        content = output_path.read_text()

        assert output_path.suffix == ".txt"
        assert "BASE COLOR" in content
        assert f"  * {ATTENTION_PREFIX} Dog tests as double merle." in content

    def test_text_without_genotypes(self, temp_output_dir, sample_report):
        generator = ReportGenerator(temp_output_dir, include_genotypes=False)

        assert "Quick Genotype" not in generator.render_text(sample_report)


class TestGenerateAll:
    """Test multi-format generation."""

    def test_all_formats(self, temp_output_dir, clean_report):
        paths = ReportGenerator(temp_output_dir).generate_all(clean_report)

        assert set(paths) == {"json", "markdown", "text"}
        assert all(p.exists() for p in paths.values())

    def test_selected_formats(self, temp_output_dir, clean_report):
        paths = ReportGenerator(temp_output_dir).generate_all(clean_report, ["json"])

        assert list(paths) == ["json"]

    def test_unknown_format(self, temp_output_dir, clean_report):
        with pytest.raises(ValueError, match="Unknown report format"):
            ReportGenerator(temp_output_dir).generate_all(clean_report, ["pdf"])

    def test_timestamp_safe_filename(self, temp_output_dir, clean_report):
        path = ReportGenerator(temp_output_dir).generate_json(clean_report)

        assert ":" not in path.name
        assert path.name == "Rex_2024-01-02T08-30-00-123456.json"


class TestSummaryReport:
    """Test summary generation."""

    def test_generates_summary(self, temp_output_dir, sample_report):
        """Test summary string is generated."""
        summary = ReportGenerator(temp_output_dir).generate_summary(sample_report)

        assert summary == "[PARTIAL] Biscuit (standard): Attention=1, Errors=1"

    def test_summary_ok(self, temp_output_dir, clean_report):
        summary = ReportGenerator(temp_output_dir).generate_summary(clean_report)

        assert summary.startswith("[OK] Rex (breeders)")


class TestBatchSummary:
    """Test batch summary generation."""

    def test_generates_batch_summary(self, temp_output_dir, sample_report, clean_report):
        """Test batch summary lists every subject."""
        generator = ReportGenerator(temp_output_dir)
        output_path = generator.generate_batch_summary([sample_report, clean_report])

        content = output_path.read_text()

        assert output_path.name == "batch_summary.md"
        assert "**Subjects:** 2" in content
        assert "| Biscuit | standard | 1 | 1 | PARTIAL |" in content
        assert "| Rex | breeders | 0 | 0 | OK |" in content
        assert "### Biscuit" in content
        assert "### Rex" not in content
