from typing import Any, Callable, Iterable, List, Union

from resume_screener.api.schemas import Candidate, SortField, SortOrder
from resume_screener.core.errors import InvalidSortFieldError
from resume_screener.core.logger import app_logger
from resume_screener.modules.values import numeric

_SORT_KEYS: dict[str, Callable[[Candidate], Any]] = {
    SortField.JOB_FIT_SCORE.value: lambda c: numeric(c.job_fit_score),
    SortField.SEMANTIC_SCORE.value: lambda c: numeric(c.semantic_score),
    SortField.SKILL_MATCH_SCORE.value: lambda c: numeric(c.skill_match_score),
    SortField.MATCHED_SKILLS.value: lambda c: len(c.matched_skills or []),
    SortField.NAME.value: lambda c: (c.name or "").lower(),
}


class CandidateSorter:
    """
    Orders candidates by one of the dashboard's sort fields.

    Python's sort is stable, and `reverse=True` keeps equal elements in their
    input order too, so ties never reshuffle.
    """

    def sort(
        self,
        candidates: Iterable[Candidate],
        field: Union[SortField, str] = SortField.JOB_FIT_SCORE,
        order: Union[SortOrder, str] = SortOrder.DESC,
    ) -> List[Candidate]:
        key = self.key_for(field)
        descending = SortOrder(getattr(order, "value", order)) == SortOrder.DESC
        result = sorted(candidates, key=key, reverse=descending)
        app_logger.debug(f"Sorted {len(result)} candidates by {getattr(field, 'value', field)} ({'desc' if descending else 'asc'})")
        return result

    @staticmethod
    def key_for(field: Union[SortField, str]) -> Callable[[Candidate], Any]:
        name = getattr(field, "value", field)
        if name not in _SORT_KEYS:
            raise InvalidSortFieldError(name, _SORT_KEYS.keys())
        return _SORT_KEYS[name]

candidate_sorter = CandidateSorter()
