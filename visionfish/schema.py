"""
Data models for fish analysis interpretation and organoleptic grading.
Uses Pydantic for validation and type safety.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


class QualityLevel(str, Enum):
    """Three-step level shared by parse quality and confidence display."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FreshnessCategory(str, Enum):
    """
    Freshness tiers under SNI 2729:2013.
    INVALID is the sentinel for a sample with no gradable parameter left.
    """
    PRIMA = "Prima"
    BAIK = "Baik"
    SEDANG = "Sedang"
    BUSUK = "Busuk"
    INVALID = "Invalid"


class CleaningOptions(BaseModel):
    """Switches for each cleaning stage. All stages run by default."""
    model_config = ConfigDict(frozen=True)

    remove_markdown: bool = True
    normalize_whitespace: bool = True
    remove_empty_lines: bool = True
    remove_artifacts: bool = True
    minimum_length: int = Field(default=2, ge=0)


class Section(BaseModel):
    """A "Label: content" pair pulled from analysis text."""
    title: str
    content: str


class AnalysisResultBase(BaseModel):
    clean_content: str = ""
    species: Optional[str] = None
    confidence: Optional[int] = None  # As stated by the model, not clamped
    characteristics: List[str] = []
    sections: List[Section] = []


class ParsedAnalysis(AnalysisResultBase):
    """Extraction ran to completion. Missing fields are simply absent."""
    kind: Literal["parsed"] = "parsed"

    @computed_field
    @property
    def has_errors(self) -> bool:
        return False


class FallbackAnalysis(AnalysisResultBase):
    """
    Extraction raised. Only a minimally cleaned copy of the raw text is kept;
    species, confidence and the lists stay empty.
    """
    kind: Literal["fallback"] = "fallback"
    error: str = ""

    @computed_field
    @property
    def has_errors(self) -> bool:
        return True


ParsedAnalysisResult = Annotated[
    Union[ParsedAnalysis, FallbackAnalysis],
    Field(discriminator="kind"),
]


class QualityAssessment(BaseModel):
    """Explainable verdict on how well a piece of analysis text was parsed."""
    is_valid: bool
    quality: QualityLevel
    issues: List[str] = []
    score: int = Field(ge=0, le=100)


class ConfidenceDisplay(BaseModel):
    percentage: str
    level: QualityLevel
    color: str


class AnalysisReport(BaseModel):
    """Everything derived from one piece of AI analysis text."""
    parsed: ParsedAnalysisResult
    assessment: QualityAssessment
    confidence: ConfidenceDisplay


class OrganolepticParameters(BaseModel):
    """
    The six sensory grades of one fish sample, each 1-9 or None (not assessed).

    Accepts either the English field names or the SNI form labels
    (Mata, Insang, Lendir, Daging, Bau, Tekstur) as input keys.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    eye: Optional[int] = Field(default=None, alias="Mata", ge=1, le=9)
    gill: Optional[int] = Field(default=None, alias="Insang", ge=1, le=9)
    slime: Optional[int] = Field(default=None, alias="Lendir", ge=1, le=9)
    flesh: Optional[int] = Field(default=None, alias="Daging", ge=1, le=9)
    odor: Optional[int] = Field(default=None, alias="Bau", ge=1, le=9)
    texture: Optional[int] = Field(default=None, alias="Tekstur", ge=1, le=9)


class FreshnessResult(BaseModel):
    score: float
    category: FreshnessCategory


class OrganolepticSample(OrganolepticParameters):
    """
    A graded sample. Score and category are derived from the six grades on
    every access and cannot be assigned; edits go through
    visionfish.organoleptic.update_parameter, which returns a new sample.
    """
    sample_id: str
    fish_name: Optional[str] = None
    timestamp: datetime

    def _freshness(self) -> FreshnessResult:
        # Local import: organoleptic depends on this module
        from visionfish.organoleptic import calculate_freshness
        return calculate_freshness(self)

    @computed_field
    @property
    def score(self) -> float:
        return self._freshness().score

    @computed_field
    @property
    def category(self) -> FreshnessCategory:
        return self._freshness().category


class SampleSummary(BaseModel):
    """Aggregate view over a batch of graded samples."""
    sample_count: int = 0
    average_score: float = 0.0
    dominant_category: Optional[FreshnessCategory] = None
    best_parameter: Optional[str] = None
    best_parameter_score: float = 0.0
    invalid_sample_count: int = 0
    category_counts: Dict[FreshnessCategory, int] = {}
