"""
Display formatting for the model's self-reported confidence.
"""

from typing import Optional

from visionfish.schema import ConfidenceDisplay, QualityLevel
from visionfish.thresholds import DEFAULT_CONFIDENCE_BANDS, ConfidenceBands


# Semantic color tags understood by the presentation layer
LEVEL_COLORS = {
    QualityLevel.HIGH: "primary",
    QualityLevel.MEDIUM: "warning",
    QualityLevel.LOW: "destructive",
}


def format_confidence(
    confidence: Optional[int] = None,
    bands: ConfidenceBands = DEFAULT_CONFIDENCE_BANDS,
) -> ConfidenceDisplay:
    """
    Turn a confidence value into percentage text, a level and a color tag.
    A missing confidence is shown as 0%.
    """
    value = confidence or 0

    if value >= bands.high:
        level = QualityLevel.HIGH
    elif value >= bands.medium:
        level = QualityLevel.MEDIUM
    else:
        level = QualityLevel.LOW

    return ConfidenceDisplay(
        percentage=f"{value}%",
        level=level,
        color=LEVEL_COLORS[level],
    )
