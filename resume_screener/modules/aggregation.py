from typing import Any, List, Sequence

from resume_screener.api.schemas import Candidate, CandidateStats, ScoreBucket
from resume_screener.core.config import settings
from resume_screener.core.errors import EmptyInputError
from resume_screener.core.logger import app_logger
from resume_screener.modules.values import OPTIONAL_SCORE_FIELDS, numeric, resolve_score_field, round_half_up

# (label, lower bound inclusive, upper bound exclusive)
SCORE_BUCKETS = [
    ("90-100%", 90, None),
    ("70-89%", 70, 90),
    ("50-69%", 50, 70),
    ("Below 50%", None, 50),
]


class ScoreAggregator:
    """
    Summary statistics over a candidate collection.

    Main scores default to 0 when missing. Optional scores (ATS, formatting)
    only aggregate over candidates that actually carry a value, so an
    average of "nothing" raises instead of reporting 0.
    """

    def __init__(self, candidates: Sequence[Candidate]):
        self.candidates = list(candidates)

    def _values(self, field: Any) -> List[float]:
        attr = resolve_score_field(field)
        if attr in OPTIONAL_SCORE_FIELDS:
            return [numeric(getattr(c, attr)) for c in self.candidates if getattr(c, attr) is not None]
        return [numeric(getattr(c, attr)) for c in self.candidates]

    def is_computable(self, field: Any) -> bool:
        return len(self._values(field)) > 0

    def mean(self, field: Any = "jobFitScore") -> float:
        values = self._values(field)
        if not values:
            raise EmptyInputError("average", getattr(field, "value", field))
        return sum(values) / len(values)

    def average(self, field: Any = "jobFitScore") -> int:
        """Arithmetic mean, rounded half-up for display."""
        return round_half_up(self.mean(field))

    def max(self, field: Any = "jobFitScore") -> float:
        values = self._values(field)
        if not values:
            raise EmptyInputError("max", getattr(field, "value", field))
        return max(values)

    def count_at_or_above(self, field: Any = "jobFitScore", threshold: float = 0) -> int:
        return sum(1 for v in self._values(field) if v >= threshold)

    def distribution(self) -> List[ScoreBucket]:
        """Job-fit histogram; empty buckets are left out."""
        values = self._values("jobFitScore")
        buckets = []
        for label, low, high in SCORE_BUCKETS:
            count = sum(
                1 for v in values
                if (low is None or v >= low) and (high is None or v < high)
            )
            if count > 0:
                buckets.append(ScoreBucket(range=label, count=count))
        return buckets

    def summary(self, strong_fit_threshold: float = None) -> CandidateStats:
        threshold = settings.STRONG_FIT_THRESHOLD if strong_fit_threshold is None else strong_fit_threshold
        if not self.candidates:
            app_logger.debug("Summary requested for an empty candidate set")
            return CandidateStats(total=0)

        stats = CandidateStats(
            total=len(self.candidates),
            average_score=self.average("jobFitScore"),
            top_score=round_half_up(self.max("jobFitScore")),
            strong_fits=self.count_at_or_above("jobFitScore", threshold),
            distribution=self.distribution(),
        )
        app_logger.debug(f"Summary: total={stats.total} avg={stats.average_score} top={stats.top_score}")
        return stats
