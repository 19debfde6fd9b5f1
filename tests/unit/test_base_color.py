"""
Tests for the base color section.

Tests cover:
- Recessive red detection
- Eumelanin color table
- Statement order and quick genotype
- Missing results
"""

import pytest

from traitreport.core.genotype import NoCall
from traitreport.core.loci import LocusGroup
from traitreport.interpretation.base_color import (
    BLACK,
    BLUE,
    BROWN,
    LILAC,
    eumelanin_color,
    evaluate_base_color,
    is_recessive_red,
)


class TestEumelaninColor:
    """Test the B/D color table."""

    @pytest.mark.parametrize(
        "b_locus,d_locus,expected",
        [
            ("bb", "dd", LILAC),
            ("bb", "Dd", BROWN),
            ("bb", "DD", BROWN),
            ("Bb", "dd", BLUE),
            ("BB", "dd", BLUE),
            ("Bb", "Dd", BLACK),
            ("BB", "DD", BLACK),
        ],
    )
    def test_color_table(self, b_locus: str, d_locus: str, expected: str) -> None:
        assert eumelanin_color(b_locus, d_locus) == expected

    def test_recessive_red(self) -> None:
        assert is_recessive_red("ee")
        assert not is_recessive_red("Ee")
        assert not is_recessive_red(NoCall("eLocus"))


class TestEvaluateBaseColor:
    """Test the base color evaluator."""

    def test_recessive_red_cannot_produce_eumelanin(self) -> None:
        result = evaluate_base_color({"eLocus": "ee", "bLocus": "BB", "dLocus": "DD"})

        assert "cannot produce eumelanin in hair" in result.statements[0].text

    def test_non_red_can_produce_eumelanin(self, wild_type_genotypes: dict) -> None:
        result = evaluate_base_color(wild_type_genotypes)

        assert result.statements[0].text.startswith("Physically able to produce eumelanin")

    def test_lilac(self, wild_type_genotypes: dict) -> None:
        wild_type_genotypes.update({"bLocus": "bb", "dLocus": "dd"})

        result = evaluate_base_color(wild_type_genotypes)

        assert "Eumelanin color is LILAC" in result.statements[1].text
        assert "eye rims, nose, and lips" in result.statements[1].text

    def test_three_statements_in_order(self, wild_type_genotypes: dict) -> None:
        result = evaluate_base_color(wild_type_genotypes)

        assert result.group == LocusGroup.BASE_COLOR
        assert len(result.statements) == 3
        assert "Cocoa" in result.statements[2].text
        assert "French Bulldogs" in result.statements[2].text

    def test_quick_genotype(self, wild_type_genotypes: dict) -> None:
        result = evaluate_base_color(wild_type_genotypes)

        assert result.summary == "EE BB DD NN with Intense Red Pigmentation"

    def test_cocoa_reported_verbatim(self, wild_type_genotypes: dict) -> None:
        wild_type_genotypes["cocoa"] = "Nco"

        result = evaluate_base_color(wild_type_genotypes)

        assert "Nco" in result.statements[2].text


class TestMissingResults:
    """Test NoCall handling."""

    def test_empty_input(self) -> None:
        result = evaluate_base_color({})

        assert len(result.statements) == 3
        assert "unknown" in result.statements[0].text
        assert "could not be determined" in result.statements[1].text
        assert "NoCall(bLocus)" in result.statements[1].text
        assert not any(s.error for s in result.statements)

    def test_summary_shows_no_call(self) -> None:
        result = evaluate_base_color({"eLocus": "ee"})

        assert result.summary.startswith("ee NoCall(bLocus) NoCall(dLocus)")
