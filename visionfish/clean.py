"""
Deterministic cleaning for AI-generated analysis text.

Model output often carries half-rendered markdown: stray asterisks, table
pipes, bullets with nothing after them. Stages run in a fixed order
(artifacts, markdown, whitespace, line filtering) because artifact removal
can itself leave lines that only look empty, so line filtering must run last.
"""

import re
from typing import Optional

from visionfish.schema import CleaningOptions


DEFAULT_OPTIONS = CleaningOptions()

# Bare carriage returns become newlines so line anchors see every line
CARRIAGE_RETURN = re.compile(r"\r\n?")

# Stage 1: structural symbols
ASTERISKS = re.compile(r"\*+")
HASHES = re.compile(r"#+")
LEADING_BULLET = re.compile(r"^[ \t]*[-•]\s*\*?\s*", re.MULTILINE)
BARE_BULLET_LINE = re.compile(r"^[ \t]*[-•]\s*$", re.MULTILINE)
LEADING_COLON = re.compile(r"^[ \t]*:\s*", re.MULTILINE)
DASH_STAR = re.compile(r"^\s*-\s*\*\s*", re.MULTILINE)
STAR_DASH = re.compile(r"^\s*\*\s*-\s*", re.MULTILINE)

# Stage 2: markdown wrappers
LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
INLINE_CODE = re.compile(r"`([^`]*)`")
STRIKETHROUGH = re.compile(r"~~([^~]*)~~")
EMPHASIS = re.compile(r"_{1,2}([^_]*)_{1,2}")

# Stage 3: whitespace
LINE_BREAKS = re.compile(r"[\r\n]+")
HORIZONTAL_SPACE = re.compile(r"[ \t]+")
BLANK_GAP = re.compile(r"\n\s*\n")

# Stage 4: lines made only of leftovers
ARTIFACT_ONLY_LINE = re.compile(r"^[\s\-•:*]*$")


def _remove_artifacts(text: str) -> str:
    text = ASTERISKS.sub("", text)
    text = HASHES.sub("", text)
    text = text.replace("|", "")
    text = LEADING_BULLET.sub("", text)
    text = BARE_BULLET_LINE.sub("", text)
    text = LEADING_COLON.sub("", text)
    text = DASH_STAR.sub("", text)
    text = STAR_DASH.sub("", text)
    return text


def _remove_markdown(text: str) -> str:
    text = LINK.sub(r"\1", text)
    text = INLINE_CODE.sub(r"\1", text)
    text = STRIKETHROUGH.sub(r"\1", text)
    text = EMPHASIS.sub(r"\1", text)
    return text


def _strip_markup(text: str, opts: CleaningOptions) -> str:
    # Unwrapping markdown can expose a new leading bullet or colon (`-` sirip),
    # so stages 1 and 2 repeat until nothing changes. Every pass only shortens
    # the text, so the loop ends.
    while True:
        previous = text
        if opts.remove_artifacts:
            text = _remove_artifacts(text)
        if opts.remove_markdown:
            text = _remove_markdown(text)
        if text == previous:
            return text


def _normalize_whitespace(text: str) -> str:
    text = LINE_BREAKS.sub("\n", text)
    text = HORIZONTAL_SPACE.sub(" ", text)
    text = BLANK_GAP.sub("\n", text)
    return text


def _drop_empty_lines(text: str, minimum_length: int) -> str:
    kept = [
        line for line in text.split("\n")
        if len(line.strip()) >= minimum_length and not ARTIFACT_ONLY_LINE.match(line)
    ]
    return "\n".join(kept)


def clean_analysis_text(text: str, options: Optional[CleaningOptions] = None) -> str:
    """
    Clean raw analysis text.

    Stages (each switchable through CleaningOptions):
        1. remove_artifacts: asterisks, hashes, pipes, leading bullets and colons
        2. remove_markdown: links, inline code, strikethrough, emphasis
        3. normalize_whitespace: one newline between lines, single spaces
        4. remove_empty_lines: drop short lines and artifact-only lines

    Args:
        text: Raw text; anything that is not a non-empty string yields ""
        options: Cleaning switches (defaults: everything on, minimum_length=2)

    Returns:
        Cleaned text with no leading or trailing whitespace
    """
    if not text or not isinstance(text, str):
        return ""

    opts = options or DEFAULT_OPTIONS
    cleaned = _strip_markup(CARRIAGE_RETURN.sub("\n", text), opts)

    if opts.normalize_whitespace:
        cleaned = _normalize_whitespace(cleaned)

    if opts.remove_empty_lines:
        cleaned = _drop_empty_lines(cleaned, opts.minimum_length)

    return cleaned.strip()
