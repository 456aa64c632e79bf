"""
Organoleptic freshness grading under SNI 2729:2013.

A grade of exactly 4 is not part of the standard's scale for any parameter,
so it is left out of the average rather than counted as a low grade.
Parameters that were never assessed (None) are left out the same way but are
not reported as invalid.

Score is the mean of the remaining grades rounded half-up to one decimal, and
the category is read from that rounded score. With nothing left to average
the result is the sentinel (0.0, Invalid).
"""

import uuid
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Mapping, Optional, Union

from visionfish.parameters import PARAMETER_NAMES, VISUAL_PARAMETERS, get_parameter
from visionfish.schema import (
    FreshnessCategory,
    FreshnessResult,
    OrganolepticParameters,
    OrganolepticSample,
)
from visionfish.thresholds import DEFAULT_FRESHNESS_BANDS, FreshnessBands


ParameterInput = Union[OrganolepticParameters, Mapping[str, Optional[int]]]

INVALID_RESULT = FreshnessResult(score=0.0, category=FreshnessCategory.INVALID)

FRESHNESS_STATUS = {
    FreshnessCategory.PRIMA: "Very Fresh",
    FreshnessCategory.BAIK: "Fresh",
    FreshnessCategory.SEDANG: "Acceptable",
    FreshnessCategory.BUSUK: "Spoiled",
}

RECOMMENDATIONS = {
    FreshnessCategory.PRIMA: "Excellent condition; fit for consumption and for sale.",
    FreshnessCategory.BAIK: "Good condition; still fit for consumption.",
    FreshnessCategory.SEDANG: "Fair condition; process or cook soon, at a high enough temperature.",
    FreshnessCategory.BUSUK: "Spoiled; not fit for consumption and should be discarded.",
}


def to_parameters(parameters: ParameterInput) -> OrganolepticParameters:
    """
    Accept a parameters model, a sample, or a mapping keyed by name or label.

    Mapping keys are resolved case-insensitively ("Eye", "MATA", "gill").
    An unknown key, or two keys naming the same parameter, raises ValueError.
    """
    if isinstance(parameters, OrganolepticParameters):
        return parameters
    if not isinstance(parameters, Mapping):
        raise TypeError(f"Expected organoleptic parameters, got {type(parameters).__name__}")

    grades = {}
    for key, value in parameters.items():
        name = get_parameter(key).name
        if name in grades:
            raise ValueError(f"Parameter {name} given more than once (key {key!r})")
        grades[name] = value
    return OrganolepticParameters.model_validate(grades)


def _gradable_values(
    params: OrganolepticParameters,
    names: Iterable[str],
    bands: FreshnessBands,
) -> List[int]:
    values = []
    for name in names:
        value = getattr(params, name)
        if value is None or value == bands.excluded_grade:
            continue
        values.append(value)
    return values


def _mean(values: List[int], decimals: int) -> float:
    total = Decimal(sum(values)) / Decimal(len(values))
    return float(total.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))


def classify_score(score: float, bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS) -> FreshnessCategory:
    """Map a score to its category. Anything below the Busuk floor is Invalid."""
    if score >= bands.prima:
        return FreshnessCategory.PRIMA
    if score >= bands.baik:
        return FreshnessCategory.BAIK
    if score >= bands.sedang:
        return FreshnessCategory.SEDANG
    if score >= bands.busuk:
        return FreshnessCategory.BUSUK
    return FreshnessCategory.INVALID


def calculate_freshness(
    parameters: ParameterInput,
    bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS,
) -> FreshnessResult:
    """
    Grade one sample.

    Args:
        parameters: The six grades (model, sample, or mapping by name/label)
        bands: Grade scale and category bounds

    Returns:
        FreshnessResult; (0.0, Invalid) when no grade is left to average
    """
    params = to_parameters(parameters)
    values = _gradable_values(params, PARAMETER_NAMES, bands)
    if not values:
        return INVALID_RESULT

    score = _mean(values, bands.score_decimals)
    return FreshnessResult(score=score, category=classify_score(score, bands))


def calculate_visual_score(
    parameters: ParameterInput,
    bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS,
) -> Optional[float]:
    """Mean of the photo-assessable grades (eye, gill, slime), or None."""
    values = _gradable_values(to_parameters(parameters), VISUAL_PARAMETERS, bands)
    if not values:
        return None
    return _mean(values, bands.score_decimals)


def list_invalid_parameters(
    sample: ParameterInput,
    bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS,
) -> List[str]:
    """Names of the parameters graded with the excluded value, in canonical order."""
    params = to_parameters(sample)
    return [name for name in PARAMETER_NAMES if getattr(params, name) == bands.excluded_grade]


def is_invalid(sample: ParameterInput, bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS) -> bool:
    """True if at least one parameter carries the excluded grade."""
    return bool(list_invalid_parameters(sample, bands))


def new_sample_id() -> str:
    return f"sample_{uuid.uuid4().hex[:12]}"


def build_sample(
    parameters: ParameterInput,
    fish_name: Optional[str] = None,
    sample_id: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> OrganolepticSample:
    """
    Create a graded sample; id and UTC timestamp are generated when omitted.
    A timestamp without an offset is taken to be UTC.
    """
    params = to_parameters(parameters)
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    elif timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return OrganolepticSample(
        **params.model_dump(include=set(PARAMETER_NAMES)),
        sample_id=sample_id or new_sample_id(),
        fish_name=fish_name,
        timestamp=timestamp,
    )


def update_parameter(
    sample: OrganolepticSample,
    name: str,
    value: Optional[int],
    bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS,
) -> OrganolepticSample:
    """
    Return a copy of sample with one grade changed.

    Score and category of the copy are derived from its own grades, so they
    always change together. None clears the grade.

    Raises:
        ValueError: unknown parameter name, or a grade outside the scale
    """
    profile = get_parameter(name)
    if value is not None and not bands.min_grade <= value <= bands.max_grade:
        raise ValueError(
            f"Grade for {profile.name} must be between {bands.min_grade} and {bands.max_grade}, got {value}"
        )

    data = sample.model_dump(exclude={"score", "category"})
    data[profile.name] = value
    return OrganolepticSample.model_validate(data)


def describe_grade(value: Optional[int], bands: FreshnessBands = DEFAULT_FRESHNESS_BANDS) -> str:
    """Short label for a single parameter grade."""
    if value is None:
        return "Not assessed"
    if value == bands.excluded_grade:
        return "Not recognized (SNI)"
    if value >= bands.prima:
        return "Excellent"
    if value >= bands.baik:
        return "Good"
    if value >= bands.sedang:
        return "Fair"
    return "Spoiled"


def _as_category(category: Union[FreshnessCategory, str]) -> Optional[FreshnessCategory]:
    try:
        return FreshnessCategory(category)
    except ValueError:
        return None


def freshness_status(category: Union[FreshnessCategory, str]) -> str:
    return FRESHNESS_STATUS.get(_as_category(category), "Unknown")


def recommendation(category: Union[FreshnessCategory, str]) -> str:
    return RECOMMENDATIONS.get(
        _as_category(category),
        "Status unknown; grade all parameters before deciding.",
    )
