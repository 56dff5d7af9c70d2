from typing import Dict, Iterable, List, Sequence

from resume_screener.api.schemas import Candidate, ExtraSkillFrequency, SkillCoverage
from resume_screener.core.logger import app_logger
from resume_screener.modules.values import round_half_up


def display_skill(key: str) -> str:
    """'machine learning' -> 'Machine learning'."""
    return key[:1].upper() + key[1:]


class SkillCoverageAnalyzer:
    """Feeds the skills chart: required-skill coverage and the extra-skill leaderboard."""

    def coverage(self, required_skills: Iterable[str], candidates: Sequence[Candidate]) -> List[SkillCoverage]:
        total = len(candidates)
        matched_sets = [{(s or "").lower() for s in c.matched_skills or []} for c in candidates]

        result = []
        for skill in required_skills:
            if total == 0:
                # No candidates yet is a normal state for the chart, not an error
                percent = 0
            else:
                key = (skill or "").lower()
                hits = sum(1 for matched in matched_sets if key in matched)
                percent = round_half_up(100 * hits / total)
            result.append(SkillCoverage(skill=skill, coverage_percent=percent))

        app_logger.debug(f"Coverage computed for {len(result)} skills over {total} candidates")
        return result

    def extra_skill_frequency(self, candidates: Sequence[Candidate], limit: int = 10) -> List[ExtraSkillFrequency]:
        # dicts keep insertion order, which gives first-encountered tie-breaking
        counts: Dict[str, int] = {}
        for candidate in candidates:
            for skill in candidate.extra_skills or []:
                key = (skill or "").lower()
                counts[key] = counts.get(key, 0) + 1

        total = len(candidates)
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]
        return [
            ExtraSkillFrequency(
                skill=display_skill(key),
                count=count,
                percent=round_half_up(100 * count / total) if total else 0,
            )
            for key, count in ranked
        ]

skill_coverage_analyzer = SkillCoverageAnalyzer()
