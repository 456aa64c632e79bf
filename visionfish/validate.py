"""
Validation module: scores how well a piece of analysis text was parsed.

This judges the parse, not the fish: a confident, well-structured answer that
names the wrong species still scores high.
"""

from visionfish.schema import ParsedAnalysisResult, QualityAssessment, QualityLevel
from visionfish.thresholds import DEFAULT_QUALITY_RULES, QualityRules


ISSUE_SPECIES = "species identification unclear"
ISSUE_CONFIDENCE = "low confidence level"
ISSUE_CHARACTERISTICS = "incomplete characteristics"
ISSUE_CONTENT = "analysis content too short"
ISSUE_PARSE_ERROR = "parsing error present"


def quality_level(score: int, rules: QualityRules = DEFAULT_QUALITY_RULES) -> QualityLevel:
    """Map a 0-100 quality score to high/medium/low."""
    if score >= rules.high_quality_score:
        return QualityLevel.HIGH
    if score >= rules.medium_quality_score:
        return QualityLevel.MEDIUM
    return QualityLevel.LOW


def validate_analysis_quality(
    parsed: ParsedAnalysisResult,
    rules: QualityRules = DEFAULT_QUALITY_RULES,
) -> QualityAssessment:
    """
    Run the five weighted checks and collect an issue for each failed one.

    Checks (all evaluated, no short-circuit):
        - species set and longer than 3 characters      (30)
        - confidence set and above 50                   (20)
        - at least 3 characteristics                    (25)
        - clean content longer than 100 characters      (15)
        - extraction did not fail                       (10)

    Args:
        parsed: Result of parse_analysis_response (not modified)
        rules: Weights and cut-offs

    Returns:
        QualityAssessment with score, level, validity and issues
    """
    issues = []
    score = 0

    if parsed.species and len(parsed.species) > rules.min_species_length:
        score += rules.species_points
    else:
        issues.append(ISSUE_SPECIES)

    if parsed.confidence is not None and parsed.confidence > rules.min_confidence:
        score += rules.confidence_points
    else:
        issues.append(ISSUE_CONFIDENCE)

    if len(parsed.characteristics) >= rules.min_characteristics:
        score += rules.characteristics_points
    else:
        issues.append(ISSUE_CHARACTERISTICS)

    if len(parsed.clean_content) > rules.min_content_length:
        score += rules.content_points
    else:
        issues.append(ISSUE_CONTENT)

    if not parsed.has_errors:
        score += rules.no_error_points
    else:
        issues.append(ISSUE_PARSE_ERROR)

    return QualityAssessment(
        is_valid=score >= rules.valid_score,
        quality=quality_level(score, rules),
        issues=issues,
        score=score,
    )
