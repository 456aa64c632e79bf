"""
Summary module: aggregates batches of graded samples for reporting.
"""

from collections import Counter
from typing import Any, List, Optional, Sequence, Tuple

from visionfish.organoleptic import is_invalid
from visionfish.parameters import PARAMETER_NAMES, get_parameter
from visionfish.schema import FreshnessCategory, OrganolepticSample, SampleSummary
from visionfish.thresholds import DEFAULT_FRESHNESS_BANDS, FreshnessBands


# Best first; used for tie-breaks and for ordering categories when sorting
CATEGORY_ORDER: Tuple[FreshnessCategory, ...] = tuple(FreshnessCategory)


def find_best_parameter(
    samples: Sequence[OrganolepticSample],
    bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS,
) -> Tuple[Optional[str], float]:
    """
    Find the parameter with the highest average grade across samples.

    Ungraded values and the excluded grade are skipped. Ties go to the
    parameter that comes first in canonical order.

    Args:
        samples: Graded samples
        bands: Grade scale (for the excluded value)

    Returns:
        (parameter name, average rounded to 2 decimals), or (None, 0.0)
    """
    best_name = None
    best_average = 0.0

    for name in PARAMETER_NAMES:
        values = [
            getattr(s, name) for s in samples
            if getattr(s, name) is not None and getattr(s, name) != bands.excluded_grade
        ]
        if not values:
            continue
        average = sum(values) / len(values)
        if average > best_average:
            best_name = name
            best_average = average

    return best_name, round(best_average, 2)


def _resolve_field(field: str) -> str:
    if field in OrganolepticSample.model_fields or field in ("score", "category"):
        return field
    return get_parameter(field).name


def _sort_key(value: Any) -> Any:
    if isinstance(value, FreshnessCategory):
        return CATEGORY_ORDER.index(value)
    return value


def sort_samples(
    samples: Sequence[OrganolepticSample],
    field: str,
    ascending: bool = True,
) -> List[OrganolepticSample]:
    """
    Sort samples on one field (parameter name or label, score, category, ...).

    Missing values go first when ascending and last when descending.
    Categories sort by rank (Prima first), not alphabetically.
    Raises ValueError for an unknown field.
    """
    attr = _resolve_field(field)
    present = [s for s in samples if getattr(s, attr) is not None]
    missing = [s for s in samples if getattr(s, attr) is None]

    ordered = sorted(present, key=lambda s: _sort_key(getattr(s, attr)), reverse=not ascending)
    if ascending:
        return missing + ordered
    return ordered + missing


def summarize_samples(
    samples: Sequence[OrganolepticSample],
    bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS,
) -> SampleSummary:
    """
    Summarize a batch of samples.

    average_score only covers samples that received a real category, so an
    all-excluded sample does not drag the mean toward its 0.0 sentinel.
    """
    if not samples:
        return SampleSummary()

    counts = Counter(s.category for s in samples)
    graded = [s.score for s in samples if s.category != FreshnessCategory.INVALID]
    average = round(sum(graded) / len(graded), 2) if graded else 0.0

    dominant = max(CATEGORY_ORDER, key=lambda c: (counts.get(c, 0), -CATEGORY_ORDER.index(c)))
    best_name, best_score = find_best_parameter(samples, bands)

    return SampleSummary(
        sample_count=len(samples),
        average_score=average,
        dominant_category=dominant,
        best_parameter=best_name,
        best_parameter_score=best_score,
        invalid_sample_count=sum(1 for s in samples if is_invalid(s, bands)),
        category_counts={c: counts[c] for c in CATEGORY_ORDER if counts.get(c)},
    )
