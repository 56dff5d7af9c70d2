from typing import Iterable, List, Sequence, Union

from resume_screener.api.schemas import (
    Candidate,
    ComparisonColumn,
    ComparisonRow,
    ComparisonTable,
    InsufficientSelection,
)
from resume_screener.core.logger import app_logger

MIN_COMPARED = 2


class ComparisonSetManager:
    """Side-by-side comparison of up to `limit` candidates."""

    def __init__(self, limit: int = 3):
        self.limit = limit

    def toggle(self, selection: Sequence[str], candidate_id: str) -> List[str]:
        """Returns a new selection; adding past the cap is a silent no-op."""
        current = list(selection)
        if candidate_id in current:
            return [cid for cid in current if cid != candidate_id]
        if len(current) < self.limit:
            return current + [candidate_id]
        app_logger.debug(f"Comparison cap of {self.limit} reached, ignoring {candidate_id}")
        return current

    @staticmethod
    def union_of_skills(candidates: Iterable[Candidate]) -> List[str]:
        """Matched + missing skills of every candidate, de-duplicated case-insensitively, first spelling wins."""
        seen = set()
        skills = []
        for candidate in candidates:
            for skill in list(candidate.matched_skills or []) + list(candidate.missing_skills or []):
                key = (skill or "").lower()
                if key in seen:
                    continue
                seen.add(key)
                skills.append(skill)
        return skills

    def selected(self, candidates: Sequence[Candidate], selection: Sequence[str]) -> List[Candidate]:
        """Resolve ids in selection order; ids not in the collection are dropped."""
        by_id = {c.id: c for c in candidates}
        return [by_id[cid] for cid in selection[: self.limit] if cid in by_id]

    def build(
        self, candidates: Sequence[Candidate], selection: Sequence[str]
    ) -> Union[ComparisonTable, InsufficientSelection]:
        compared = self.selected(candidates, selection)
        if len(compared) < MIN_COMPARED:
            return InsufficientSelection(selected=len(compared), required=MIN_COMPARED)

        skills = self.union_of_skills(compared)
        matched = [{(s or "").lower() for s in c.matched_skills or []} for c in compared]

        columns = [
            ComparisonColumn(
                candidate_id=c.id,
                name=c.name,
                job_fit_score=c.job_fit_score,
                semantic_score=c.semantic_score,
                skill_match_score=c.skill_match_score,
                matched_skills=len(c.matched_skills or []),
                missing_skills=len(c.missing_skills or []),
                relevant_experience=len(c.relevant_experience or []),
                relevant_projects=len(c.relevant_projects or []),
            )
            for c in compared
        ]
        rows = [
            ComparisonRow(skill=skill, has_skill=[(skill or "").lower() in m for m in matched])
            for skill in skills
        ]
        app_logger.debug(f"Comparison table: {len(columns)} candidates x {len(rows)} skills")
        return ComparisonTable(columns=columns, rows=rows)
