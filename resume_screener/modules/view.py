from typing import List, Sequence

from resume_screener.api.schemas import Candidate, FilterSortState, RankedCandidate
from resume_screener.modules.filtering import CandidateFilter, candidate_filter
from resume_screener.modules.sorting import CandidateSorter, candidate_sorter


class RankPreservingView:
    """
    Filter, then sort, while every row keeps its canonical rank.

    The rank comes from an id lookup into the untouched original list, never
    from the row's position in the filtered/sorted output.
    """

    def __init__(self, filter_: CandidateFilter = candidate_filter, sorter: CandidateSorter = candidate_sorter):
        self.filter = filter_
        self.sorter = sorter

    def view(self, original: Sequence[Candidate], state: FilterSortState = None) -> List[RankedCandidate]:
        state = state or FilterSortState()
        ranks = {}
        for index, candidate in enumerate(original):
            # first occurrence wins if upstream ever repeats an id
            ranks.setdefault(candidate.id, index + 1)

        visible = self.filter.filter(original, state.query, state.min_score)
        ordered = self.sorter.sort(visible, state.sort_field, state.sort_order)
        return [RankedCandidate(candidate=c, original_rank=ranks[c.id]) for c in ordered]

rank_preserving_view = RankPreservingView()
