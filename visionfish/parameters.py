"""
Registry of the six SNI 2729:2013 organoleptic parameters.

Maps each canonical field name to its form label and records how far the
parameter can be judged from a photo. Only eye, gill and slime are visual;
flesh, odor and texture need touch or smell and any photo-based grade for
them is an estimate.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ParameterProfile:
    name: str
    label: str
    analysis_type: str  # "visual" or "non-visual"
    reliability: str  # photo reliability: high, medium, low, impossible
    description: str


PARAMETERS: Tuple[ParameterProfile, ...] = (
    ParameterProfile(
        name="eye",
        label="Mata",
        analysis_type="visual",
        reliability="high",
        description="Cornea clarity, eye shape (convex/sunken) and pupil color",
    ),
    ParameterProfile(
        name="gill",
        label="Insang",
        analysis_type="visual",
        reliability="high",
        description="Gill color from bright red to brown or grey",
    ),
    ParameterProfile(
        name="slime",
        label="Lendir",
        analysis_type="visual",
        reliability="medium",
        description="Surface sheen as a proxy for slime clarity",
    ),
    ParameterProfile(
        name="flesh",
        label="Daging",
        analysis_type="non-visual",
        reliability="low",
        description="Elasticity needs a press test; photos only show body shape",
    ),
    ParameterProfile(
        name="odor",
        label="Bau",
        analysis_type="non-visual",
        reliability="impossible",
        description="Smell cannot be judged from a photo",
    ),
    ParameterProfile(
        name="texture",
        label="Tekstur",
        analysis_type="non-visual",
        reliability="low",
        description="Surface firmness needs touch; photos show appearance only",
    ),
)

PARAMETER_NAMES: Tuple[str, ...] = tuple(p.name for p in PARAMETERS)
PARAMETER_LABELS = {p.name: p.label for p in PARAMETERS}
VISUAL_PARAMETERS: Tuple[str, ...] = tuple(
    p.name for p in PARAMETERS if p.analysis_type == "visual"
)

_LOOKUP = {}
for _profile in PARAMETERS:
    _LOOKUP[_profile.name] = _profile
    _LOOKUP[_profile.label.casefold()] = _profile


def get_parameter(name: str) -> ParameterProfile:
    """
    Resolve a parameter by field name or form label, case-insensitively.
    Raises ValueError for anything else.
    """
    profile = _LOOKUP.get(str(name).strip().casefold())
    if profile is None:
        raise ValueError(f"Unknown organoleptic parameter: {name!r}")
    return profile
