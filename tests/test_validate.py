"""
Parse quality tests: weights, boundaries and issue collection.
"""

from dataclasses import replace

import pytest

from visionfish.schema import FallbackAnalysis, ParsedAnalysis, QualityLevel
from visionfish.thresholds import DEFAULT_QUALITY_RULES
from visionfish.validate import (
    ISSUE_CHARACTERISTICS,
    ISSUE_CONFIDENCE,
    ISSUE_CONTENT,
    ISSUE_PARSE_ERROR,
    ISSUE_SPECIES,
    quality_level,
    validate_analysis_quality,
)


LONG_CONTENT = "x" * 101
THREE_TRAITS = ["sirip kuning", "tubuh torpedo", "finlet hitam"]


def parsed(**overrides):
    fields = {
        "species": "Thunnus albacares",
        "confidence": 87,
        "characteristics": THREE_TRAITS,
        "clean_content": LONG_CONTENT,
    }
    fields.update(overrides)
    return ParsedAnalysis(**fields)


class TestScoring:

    def test_complete_parse_scores_full_marks(self):
        result = validate_analysis_quality(parsed())
        assert result.score == 100
        assert result.quality == QualityLevel.HIGH
        assert result.is_valid is True
        assert result.issues == []

    def test_empty_parse_only_earns_no_error_points(self):
        result = validate_analysis_quality(ParsedAnalysis())
        assert result.score == 10
        assert result.quality == QualityLevel.LOW
        assert result.is_valid is False
        assert result.issues == [ISSUE_SPECIES, ISSUE_CONFIDENCE, ISSUE_CHARACTERISTICS, ISSUE_CONTENT]

    def test_fallback_collects_every_issue(self):
        result = validate_analysis_quality(FallbackAnalysis(clean_content="raw", error="boom"))
        assert result.score == 0
        assert result.issues == [
            ISSUE_SPECIES,
            ISSUE_CONFIDENCE,
            ISSUE_CHARACTERISTICS,
            ISSUE_CONTENT,
            ISSUE_PARSE_ERROR,
        ]

    def test_medium_quality(self):
        # species + characteristics + no error
        result = validate_analysis_quality(parsed(confidence=None, clean_content="short"))
        assert result.score == 65
        assert result.quality == QualityLevel.MEDIUM
        assert result.is_valid is True

    def test_valid_but_low_quality(self):
        # confidence + characteristics + no error
        result = validate_analysis_quality(parsed(species=None, clean_content="short"))
        assert result.score == 55
        assert result.quality == QualityLevel.LOW
        assert result.is_valid is True

    def test_input_not_modified(self):
        item = parsed(confidence=10)
        before = item.model_dump()
        validate_analysis_quality(item)
        assert item.model_dump() == before


class TestBoundaries:

    @pytest.mark.parametrize("species, earns", [("Mas", False), ("Nila", True), ("", False)])
    def test_species_must_exceed_three_characters(self, species, earns):
        result = validate_analysis_quality(parsed(species=species))
        assert (ISSUE_SPECIES not in result.issues) is earns

    @pytest.mark.parametrize("confidence, earns", [(50, False), (51, True), (0, False)])
    def test_confidence_must_exceed_fifty(self, confidence, earns):
        result = validate_analysis_quality(parsed(confidence=confidence))
        assert (ISSUE_CONFIDENCE not in result.issues) is earns

    @pytest.mark.parametrize("count, earns", [(2, False), (3, True), (5, True)])
    def test_at_least_three_characteristics(self, count, earns):
        traits = [f"trait number {i}" for i in range(count)]
        result = validate_analysis_quality(parsed(characteristics=traits))
        assert (ISSUE_CHARACTERISTICS not in result.issues) is earns

    @pytest.mark.parametrize("length, earns", [(100, False), (101, True)])
    def test_content_must_exceed_hundred_characters(self, length, earns):
        result = validate_analysis_quality(parsed(clean_content="y" * length))
        assert (ISSUE_CONTENT not in result.issues) is earns

    @pytest.mark.parametrize("score, level", [
        (100, QualityLevel.HIGH),
        (80, QualityLevel.HIGH),
        (79, QualityLevel.MEDIUM),
        (60, QualityLevel.MEDIUM),
        (59, QualityLevel.LOW),
        (0, QualityLevel.LOW),
    ])
    def test_quality_level_cutoffs(self, score, level):
        assert quality_level(score) == level


class TestCustomRules:

    def test_replaced_rules_are_honoured(self):
        strict = replace(DEFAULT_QUALITY_RULES, min_confidence=90)
        result = validate_analysis_quality(parsed(confidence=87), rules=strict)
        assert ISSUE_CONFIDENCE in result.issues
        assert result.score == 80

    def test_reweighted_rules_keep_the_hundred_point_scale(self):
        reweighted = replace(DEFAULT_QUALITY_RULES, species_points=40, content_points=5)
        result = validate_analysis_quality(parsed(), rules=reweighted)
        assert result.score == 100

    def test_weights_over_hundred_rejected(self):
        with pytest.raises(ValueError, match="add up to 100"):
            replace(DEFAULT_QUALITY_RULES, species_points=50)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            replace(DEFAULT_QUALITY_RULES, species_points=-10, content_points=55)

    def test_rules_are_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_QUALITY_RULES.species_points = 99
