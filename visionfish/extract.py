"""
Extraction module: pulls structured fields out of cleaned analysis text.

Each field has its own matcher. Matchers are independent, run in the fixed
order of FIELD_MATCHERS, and return None or an empty list when nothing
matches; a missing field is never an error. Indonesian and English keywords
are both recognized since model output mixes the two.
"""

import logging
import re
from typing import Any, List, Optional

from visionfish.clean import clean_analysis_text
from visionfish.schema import (
    CleaningOptions,
    FallbackAnalysis,
    ParsedAnalysis,
    ParsedAnalysisResult,
    Section,
)

logger = logging.getLogger(__name__)


SPECIES_PATTERN = re.compile(
    r"(?:spesies|species|ikan)[ \t]*:?[ \t]*([^\s:][^\n\r]*)",
    re.IGNORECASE,
)

CONFIDENCE_PATTERN = re.compile(
    r"(?:confidence|kepercayaan|akurasi)\s*:?\s*(\d+)%?",
    re.IGNORECASE,
)

# Keyword is case-insensitive; "\n[A-Z]" must stay case-sensitive so a new
# capitalized label ends the block while lowercase continuation lines do not.
CHARACTERISTICS_PATTERN = re.compile(
    r"(?i:karakteristik|ciri|features?):(.*?)"
    r"(?:\n\n|\n[A-Z]|\n\d+\.|\n-|\nCiri|\nKarakteristik|\Z)",
    re.DOTALL,
)

SECTION_PATTERN = re.compile(r"^([A-Z][^:\n]*):(.*)$", re.MULTILINE)

ITEM_BULLET = re.compile(r"^[-•]\s*")

PARSE_OPTIONS = CleaningOptions()
CHARACTERISTIC_OPTIONS = CleaningOptions(minimum_length=3)
SECTION_OPTIONS = CleaningOptions(minimum_length=5)
FALLBACK_OPTIONS = CleaningOptions(minimum_length=1)

MIN_CHARACTERISTIC_LENGTH = 3  # kept only when strictly longer


def extract_species(text: str) -> Optional[str]:
    """Rest of the first line that follows a species keyword, trimmed."""
    match = SPECIES_PATTERN.search(text)
    if not match:
        return None
    return match.group(1).strip()


def extract_confidence(text: str) -> Optional[int]:
    """
    First integer after a confidence keyword ("Confidence: 85%").
    The value is returned as stated; clamping is a display concern.
    """
    match = CONFIDENCE_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1))


def extract_characteristics(text: str) -> List[str]:
    """
    Lines of the first "Karakteristik:" / "Ciri:" / "Features:" block.

    The block runs until a blank line, a line starting with an uppercase
    letter, a numbered item, a dash item or the end of the text. Each line is
    stripped of its bullet and re-cleaned; lines of 3 characters or fewer
    are dropped.

    Args:
        text: Cleaned analysis text

    Returns:
        Characteristics in source order (empty when no block is found)
    """
    match = CHARACTERISTICS_PATTERN.search(text)
    if not match:
        return []

    characteristics = []
    for line in match.group(1).split("\n"):
        item = clean_analysis_text(ITEM_BULLET.sub("", line), CHARACTERISTIC_OPTIONS)
        if len(item) > MIN_CHARACTERISTIC_LENGTH:
            characteristics.append(item)
    return characteristics


def extract_sections(text: str) -> List[Section]:
    """
    Every "Label: content" line whose label starts with a capital letter.
    Source order is kept and repeated labels are not merged.
    """
    sections = []
    for match in SECTION_PATTERN.finditer(text):
        title = match.group(1).strip()
        content = clean_analysis_text(match.group(2), SECTION_OPTIONS)
        if content:
            sections.append(Section(title=title, content=content))
    return sections


# Run in this order over the same cleaned text; matchers share no state.
FIELD_MATCHERS = (
    ("species", extract_species),
    ("confidence", extract_confidence),
    ("characteristics", extract_characteristics),
    ("sections", extract_sections),
)


def parse_analysis_response(content: Any) -> ParsedAnalysisResult:
    """
    Clean AI analysis text and extract its structured fields.

    Never raises. If extraction fails (including for non-string input), the
    result is a FallbackAnalysis holding a minimally cleaned copy of the
    input and the error description.

    Args:
        content: Raw analysis text; None is treated as empty text

    Returns:
        ParsedAnalysis, or FallbackAnalysis when extraction failed
    """
    if content is None:
        content = ""

    try:
        if not isinstance(content, str):
            raise TypeError(f"analysis text must be str, got {type(content).__name__}")

        clean_content = clean_analysis_text(content, PARSE_OPTIONS)
        fields = {name: matcher(clean_content) for name, matcher in FIELD_MATCHERS}
        return ParsedAnalysis(clean_content=clean_content, **fields)

    except Exception as e:
        logger.error(f"Error parsing analysis response: {e}")
        return FallbackAnalysis(
            clean_content=clean_analysis_text(content, FALLBACK_OPTIONS),
            error=str(e),
        )
