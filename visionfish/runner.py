"""
Runner: ties the stages together for callers that want one call per input.

Text:    clean → extract → validate → confidence display
Samples: parse CSV text → grade → summarize → graded CSV text
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from visionfish.confidence import format_confidence
from visionfish.csv_writer import parse_samples_csv, samples_to_csv
from visionfish.extract import parse_analysis_response
from visionfish.organoleptic import build_sample
from visionfish.schema import AnalysisReport, OrganolepticSample, SampleSummary
from visionfish.summary import summarize_samples
from visionfish.validate import validate_analysis_quality

logger = logging.getLogger(__name__)


def interpret_analysis(text: Any) -> AnalysisReport:
    """
    Produce every derived view of one piece of AI analysis text.
    Never raises; parse failures surface as parsed.has_errors.
    """
    parsed = parse_analysis_response(text)
    assessment = validate_analysis_quality(parsed)
    confidence = format_confidence(parsed.confidence)

    logger.info(
        f"Analysis interpreted: species={parsed.species!r}, "
        f"quality={assessment.quality.value}, score={assessment.score}, "
        f"issues={len(assessment.issues)}"
    )
    return AnalysisReport(parsed=parsed, assessment=assessment, confidence=confidence)


def grade_samples(
    rows: Iterable[Mapping[str, Optional[int]]],
    fish_name: Optional[str] = None,
) -> List[OrganolepticSample]:
    """Grade a batch of parameter mappings (keyed by name or label)."""
    return [build_sample(row, fish_name=fish_name) for row in rows]


def grade_csv(content: str) -> Tuple[List[OrganolepticSample], SampleSummary, str]:
    """
    Grade every sample in CSV text.

    Args:
        content: CSV text with Mata/Insang/Lendir/Daging/Bau/Tekstur columns

    Returns:
        Tuple of (graded samples, batch summary, graded CSV text)
    """
    samples = parse_samples_csv(content)
    summary = summarize_samples(samples)

    logger.info(
        f"Graded {summary.sample_count} samples: "
        f"dominant={summary.dominant_category.value if summary.dominant_category else None}, "
        f"needs_review={summary.invalid_sample_count}"
    )
    return samples, summary, samples_to_csv(samples)
