from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from resume_screener.api.schemas import (
    AggregateRequest,
    AggregateResponse,
    AnalysisResult,
    CandidatesRequest,
    CandidateStats,
    ComparisonRequest,
    ComparisonTable,
    CoverageRequest,
    CoverageResponse,
    ExportRequest,
    HistoryEntry,
    InsufficientSelection,
    NormalizeRequest,
    Note,
    NoteIn,
    RankedCandidate,
    TagType,
    ToggleRequest,
    ViewRequest,
)
from resume_screener.core.config import settings
from resume_screener.core.logger import app_logger
from resume_screener.modules.aggregation import ScoreAggregator
from resume_screener.modules.analysis import analysis_normalizer
from resume_screener.modules.annotations import CandidateAnnotations
from resume_screener.modules.comparison import ComparisonSetManager
from resume_screener.modules.coverage import skill_coverage_analyzer
from resume_screener.modules.export import export_filename, to_csv, to_report
from resume_screener.modules.history import AnalysisHistory
from resume_screener.modules.view import rank_preserving_view

router = APIRouter()


def get_annotations(request: Request) -> CandidateAnnotations:
    return request.app.state.annotations


def get_history(request: Request) -> AnalysisHistory:
    return request.app.state.history


def get_comparison_manager() -> ComparisonSetManager:
    return ComparisonSetManager(limit=settings.COMPARISON_LIMIT)


# --- Analysis ---

@router.post("/analysis/normalize", response_model=AnalysisResult)
def normalize_analysis(body: NormalizeRequest, history: AnalysisHistory = Depends(get_history)):
    result = analysis_normalizer.normalize(body.payload, body.job_description, body.resumes)
    history.append(result)
    return result


@router.get("/analysis/history", response_model=List[HistoryEntry])
def analysis_history(history: AnalysisHistory = Depends(get_history)):
    return history.entries()


# --- Ranking ---

@router.post("/candidates/view", response_model=List[RankedCandidate])
def candidate_view(body: ViewRequest):
    rows = rank_preserving_view.view(body.candidates, body.state)
    app_logger.info(f"View: {len(rows)}/{len(body.candidates)} candidates shown")
    return rows


@router.post("/candidates/stats", response_model=CandidateStats)
def candidate_stats(body: CandidatesRequest):
    return ScoreAggregator(body.candidates).summary()


@router.post("/candidates/aggregate", response_model=AggregateResponse)
def candidate_aggregate(body: AggregateRequest):
    # No length guard here: empty input or an unknown field is a caller bug
    agg = ScoreAggregator(body.candidates)
    return AggregateResponse(
        field=body.field,
        average=agg.average(body.field),
        max=agg.max(body.field),
        count_at_or_above=agg.count_at_or_above(body.field, body.threshold),
    )


@router.post("/skills/coverage", response_model=CoverageResponse)
def skill_coverage(body: CoverageRequest):
    return CoverageResponse(
        coverage=skill_coverage_analyzer.coverage(body.required_skills, body.candidates),
        extra_skills=skill_coverage_analyzer.extra_skill_frequency(body.candidates, limit=settings.EXTRA_SKILL_LIMIT),
    )


# --- Comparison ---

@router.post("/comparison/toggle", response_model=List[str])
def toggle_comparison(body: ToggleRequest, manager: ComparisonSetManager = Depends(get_comparison_manager)):
    return manager.toggle(body.selection, body.candidate_id)


@router.post("/comparison", response_model=Union[ComparisonTable, InsufficientSelection])
def compare_candidates(body: ComparisonRequest, manager: ComparisonSetManager = Depends(get_comparison_manager)):
    return manager.build(body.candidates, body.selection)


# --- Export ---

@router.post("/export/csv")
def export_csv(body: ExportRequest):
    return Response(
        content=to_csv(body.candidates),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename("csv")}"'},
    )


@router.post("/export/report")
def export_report(body: ExportRequest):
    return Response(
        content=to_report(body.candidates, body.job_description, body.required_skills),
        media_type="text/plain",
        headers={"Content-Disposition": f'attachment; filename="{export_filename("txt")}"'},
    )


# --- Annotations ---

@router.get("/candidates/{candidate_id}/tags", response_model=List[TagType])
def candidate_tags(candidate_id: str, annotations: CandidateAnnotations = Depends(get_annotations)):
    return annotations.tags(candidate_id)


@router.put("/candidates/{candidate_id}/tags/{tag}", response_model=List[TagType])
def toggle_candidate_tag(candidate_id: str, tag: TagType, annotations: CandidateAnnotations = Depends(get_annotations)):
    return annotations.toggle_tag(candidate_id, tag)


@router.put("/candidates/{candidate_id}/shortlist", response_model=List[str])
def toggle_shortlist(candidate_id: str, annotations: CandidateAnnotations = Depends(get_annotations)):
    annotations.toggle_shortlist(candidate_id)
    return annotations.shortlist()


@router.get("/shortlist", response_model=List[str])
def shortlist(annotations: CandidateAnnotations = Depends(get_annotations)):
    return annotations.shortlist()


@router.get("/candidates/{candidate_id}/notes", response_model=List[Note])
def candidate_notes(candidate_id: str, annotations: CandidateAnnotations = Depends(get_annotations)):
    return annotations.notes(candidate_id)


@router.post("/candidates/{candidate_id}/notes", response_model=Note, status_code=201)
def add_candidate_note(candidate_id: str, body: NoteIn, annotations: CandidateAnnotations = Depends(get_annotations)):
    note = annotations.add_note(candidate_id, body.text)
    if note is None:
        raise HTTPException(status_code=400, detail="Note text cannot be empty")
    return note


@router.delete("/candidates/{candidate_id}/notes/{note_id}", status_code=204)
def delete_candidate_note(candidate_id: str, note_id: str, annotations: CandidateAnnotations = Depends(get_annotations)):
    if not annotations.delete_note(candidate_id, note_id):
        raise HTTPException(status_code=404, detail="Note not found")
    return Response(status_code=204)
