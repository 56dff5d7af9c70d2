import math
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys used by the dashboard, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SortField(str, Enum):
    JOB_FIT_SCORE = "jobFitScore"
    SEMANTIC_SCORE = "semanticScore"
    SKILL_MATCH_SCORE = "skillMatchScore"
    MATCHED_SKILLS = "matchedSkills"
    NAME = "name"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class TagType(str, Enum):
    STRONG_FIT = "strong-fit"
    SHORTLISTED = "shortlisted"
    INTERVIEW = "interview"
    REJECTED = "rejected"


# --- Candidate data ---

class SectionScore(CamelModel):
    section: str
    score: float


class SkillProficiency(CamelModel):
    skill: str
    level: str = Field(..., description="Beginner, Intermediate, Advanced, ... as worded by the analysis model")


class Candidate(CamelModel):
    """One resume's analysis result. Read-only once created."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str = ""
    email: str = ""
    file_name: str = ""
    resume_text: str = ""

    job_fit_score: float = 0
    semantic_score: float = 0
    skill_match_score: float = 0
    ats_score: Optional[float] = None
    formatting_score: Optional[float] = None

    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    extra_skills: Optional[List[str]] = None
    relevant_experience: List[str] = Field(default_factory=list)
    relevant_projects: List[str] = Field(default_factory=list)
    summary: str = ""

    # Optional enrichments (candidate-mode analyses carry more of these)
    improvement_suggestions: Optional[List[str]] = None
    ats_tips: Optional[List[str]] = None
    missing_keywords: Optional[List[str]] = None
    section_scores: Optional[List[SectionScore]] = None
    suggested_roles: Optional[List[str]] = None
    skill_proficiency: Optional[List[SkillProficiency]] = None
    soft_skills: Optional[Dict[str, float]] = None
    risk_factors: Optional[List[str]] = None
    strengths: Optional[List[str]] = None
    weaknesses: Optional[List[str]] = None
    # Free text from the model: "Shortlist" / "Consider Later" / "Reject"
    recruiter_decision: Optional[str] = None
    # "Fresher" / "Junior" / "Mid-Level" / "Senior"
    experience_level: Optional[str] = None
    experience_years: Optional[float] = None
    education: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None

    analyzed_at: datetime = Field(default_factory=datetime.now)

    @field_validator("name", "email", "file_name", "resume_text", "summary", mode="before")
    @classmethod
    def _none_to_empty_str(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("job_fit_score", "semantic_score", "skill_match_score", mode="before")
    @classmethod
    def _missing_score_to_zero(cls, v: Any) -> Any:
        if v is None or (isinstance(v, float) and math.isnan(v)):
            return 0
        return v

    @field_validator(
        "matched_skills", "missing_skills", "relevant_experience", "relevant_projects",
        mode="before",
    )
    @classmethod
    def _none_to_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v


class AnalysisResult(CamelModel):
    candidates: List[Candidate] = Field(default_factory=list, description="Canonical order: job fit descending")
    job_description: str = ""
    required_skills: List[str] = Field(default_factory=list)
    analyzed_at: datetime = Field(default_factory=datetime.now)


class FilterSortState(CamelModel):
    query: str = ""
    sort_field: SortField = SortField.JOB_FIT_SCORE
    sort_order: SortOrder = SortOrder.DESC
    min_score: float = 0


# --- Derived views ---

class RankedCandidate(CamelModel):
    candidate: Candidate
    original_rank: int = Field(..., description="1-based position in the canonical list")


class SkillCoverage(CamelModel):
    skill: str
    coverage_percent: int


class ExtraSkillFrequency(CamelModel):
    skill: str
    count: int
    percent: int


class ScoreBucket(CamelModel):
    range: str
    count: int


class CandidateStats(CamelModel):
    total: int
    average_score: Optional[int] = None
    top_score: Optional[int] = None
    strong_fits: int = 0
    distribution: List[ScoreBucket] = Field(default_factory=list)


class ComparisonColumn(CamelModel):
    candidate_id: str
    name: str
    job_fit_score: float
    semantic_score: float
    skill_match_score: float
    matched_skills: int
    missing_skills: int
    relevant_experience: int
    relevant_projects: int


class ComparisonRow(CamelModel):
    skill: str
    has_skill: List[bool] = Field(..., description="One cell per column, same order as columns")


class ComparisonTable(CamelModel):
    status: Literal["ready"] = "ready"
    columns: List[ComparisonColumn]
    rows: List[ComparisonRow]


class InsufficientSelection(CamelModel):
    status: Literal["insufficient_selection"] = "insufficient_selection"
    selected: int
    required: int = 2


class Note(CamelModel):
    id: str
    text: str
    created_at: datetime


class HistoryEntry(CamelModel):
    analyzed_at: datetime
    candidate_count: int
    top_candidate: Optional[str] = None
    job_description_preview: str = ""


# --- Request / response bodies ---

class ResumeText(CamelModel):
    file_name: str
    resume_text: str = ""


class NormalizeRequest(CamelModel):
    job_description: str = ""
    resumes: List[ResumeText] = Field(default_factory=list)
    payload: Union[str, Dict[str, Any]] = Field(..., description="Raw model output (JSON text, possibly fenced) or parsed object")


class ViewRequest(CamelModel):
    candidates: List[Candidate]
    state: FilterSortState = Field(default_factory=FilterSortState)


class CandidatesRequest(CamelModel):
    candidates: List[Candidate]


class AggregateRequest(CamelModel):
    candidates: List[Candidate]
    field: str = Field("jobFitScore", description="jobFitScore, semanticScore, skillMatchScore, atsScore or formattingScore")
    threshold: float = 70


class AggregateResponse(CamelModel):
    field: str
    average: int
    max: float
    count_at_or_above: int


class CoverageRequest(CamelModel):
    required_skills: List[str] = Field(default_factory=list)
    candidates: List[Candidate]


class CoverageResponse(CamelModel):
    coverage: List[SkillCoverage]
    extra_skills: List[ExtraSkillFrequency]


class ToggleRequest(CamelModel):
    selection: List[str] = Field(default_factory=list)
    candidate_id: str


class ComparisonRequest(CamelModel):
    candidates: List[Candidate]
    selection: List[str] = Field(default_factory=list)


class ExportRequest(CamelModel):
    candidates: List[Candidate]
    job_description: str = ""
    required_skills: List[str] = Field(default_factory=list)


class NoteIn(CamelModel):
    text: str
