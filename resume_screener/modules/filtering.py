from typing import Iterable, List

from resume_screener.api.schemas import Candidate
from resume_screener.core.logger import app_logger
from resume_screener.modules.values import numeric


class CandidateFilter:
    """Search + minimum job-fit threshold, as applied by the results panel."""

    def filter(self, candidates: Iterable[Candidate], query: str = "", min_score: float = 0) -> List[Candidate]:
        needle = (query or "").lower()
        result = [
            c for c in candidates
            if self.matches_query(c, needle) and numeric(c.job_fit_score) >= min_score
        ]
        app_logger.debug(f"Filter query={query!r} min_score={min_score}: {len(result)} kept")
        return result

    @staticmethod
    def matches_query(candidate: Candidate, needle: str) -> bool:
        """Plain substring match on name, email or any matched skill. `needle` must be lower-cased."""
        if not needle:
            return True
        if needle in (candidate.name or "").lower():
            return True
        if needle in (candidate.email or "").lower():
            return True
        return any(needle in (skill or "").lower() for skill in candidate.matched_skills or [])

candidate_filter = CandidateFilter()
