from typing import List, Optional

from resume_screener.api.schemas import AnalysisResult, HistoryEntry


class AnalysisHistory:
    """Bounded in-memory record of this session's analysis runs."""

    def __init__(self, limit: int = 20):
        self.limit = limit
        self._runs: List[AnalysisResult] = []

    def append(self, result: AnalysisResult) -> None:
        self._runs.append(result)
        if len(self._runs) > self.limit:
            self._runs = self._runs[-self.limit:]

    def latest(self) -> Optional[AnalysisResult]:
        return self._runs[-1] if self._runs else None

    def __len__(self) -> int:
        return len(self._runs)

    def entries(self) -> List[HistoryEntry]:
        """Newest first."""
        return [
            HistoryEntry(
                analyzed_at=run.analyzed_at,
                candidate_count=len(run.candidates),
                top_candidate=run.candidates[0].name if run.candidates else None,
                job_description_preview=run.job_description[:80],
            )
            for run in reversed(self._runs)
        ]
