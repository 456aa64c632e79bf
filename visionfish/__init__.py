"""
Fish analysis interpretation engine.

Two independent pipelines over plain data:
- analysis text: clean, extract fields, assess parse quality, format confidence
- organoleptic grades: exclude non-standard grades, score, classify freshness
"""

from visionfish.clean import clean_analysis_text
from visionfish.confidence import format_confidence
from visionfish.extract import parse_analysis_response
from visionfish.organoleptic import (
    build_sample,
    calculate_freshness,
    is_invalid,
    list_invalid_parameters,
    update_parameter,
)
from visionfish.runner import interpret_analysis
from visionfish.validate import validate_analysis_quality

__all__ = [
    "build_sample",
    "calculate_freshness",
    "clean_analysis_text",
    "format_confidence",
    "interpret_analysis",
    "is_invalid",
    "list_invalid_parameters",
    "parse_analysis_response",
    "update_parameter",
    "validate_analysis_quality",
]
