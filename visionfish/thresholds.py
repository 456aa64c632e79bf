"""
Fixed scoring rules for parse quality, confidence display and freshness grading.

Each rule set is a frozen dataclass with a module-level default instance.
Functions that apply a rule set take it as an explicit keyword argument so
tests can probe boundary values without relying on literals.

Changing a threshold: build a new instance (dataclasses.replace) and pass it in.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QualityRules:
    """Weights and cut-offs for validate_analysis_quality."""

    species_points: int = 30
    min_species_length: int = 3  # strictly longer than this
    confidence_points: int = 20
    min_confidence: int = 50  # strictly above this
    characteristics_points: int = 25
    min_characteristics: int = 3
    content_points: int = 15
    min_content_length: int = 100  # strictly longer than this
    no_error_points: int = 10

    high_quality_score: int = 80
    medium_quality_score: int = 60
    valid_score: int = 50

    def __post_init__(self):
        # Keeps every score on the 0-100 scale the cut-offs are written for
        weights = (
            self.species_points,
            self.confidence_points,
            self.characteristics_points,
            self.content_points,
            self.no_error_points,
        )
        if min(weights) < 0:
            raise ValueError(f"Quality weights must not be negative, got {weights}")
        total = sum(weights)
        if total != 100:
            raise ValueError(f"Quality weights must add up to 100, got {total}")


@dataclass(frozen=True)
class ConfidenceBands:
    """Lower bounds for confidence display levels (percent)."""

    high: int = 80
    medium: int = 60


@dataclass(frozen=True)
class FreshnessBands:
    """SNI 2729:2013 grade scale and category lower bounds."""

    min_grade: int = 1
    max_grade: int = 9
    excluded_grade: int = 4  # not a recognized grade for any parameter

    prima: float = 9
    baik: float = 7
    sedang: float = 5
    busuk: float = 1

    score_decimals: int = 1


DEFAULT_QUALITY_RULES = QualityRules()
DEFAULT_CONFIDENCE_BANDS = ConfidenceBands()
DEFAULT_FRESHNESS_BANDS = FreshnessBands()
