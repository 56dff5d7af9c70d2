import csv
import io
from datetime import datetime
from typing import List, Sequence

from resume_screener.api.schemas import Candidate
from resume_screener.core.config import settings
from resume_screener.modules.aggregation import ScoreAggregator

CSV_HEADERS = [
    "Rank",
    "Name",
    "Email",
    "Job Fit Score",
    "Semantic Score",
    "Skill Match Score",
    "Matched Skills",
    "Missing Skills",
    "Summary",
]


def export_filename(extension: str, today: datetime = None) -> str:
    today = today or datetime.now()
    return f"resume_analysis_{today.strftime('%Y-%m-%d')}.{extension}"


def to_csv(candidates: Sequence[Candidate]) -> str:
    """Rows in canonical order, rank = list position."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for rank, c in enumerate(candidates, start=1):
        writer.writerow([
            rank,
            c.name,
            c.email,
            f"{c.job_fit_score:g}",
            f"{c.semantic_score:g}",
            f"{c.skill_match_score:g}",
            "; ".join(c.matched_skills),
            "; ".join(c.missing_skills),
            c.summary,
        ])
    return buffer.getvalue()


def _bullets(items: Sequence[str]) -> List[str]:
    return [f"    • {item}" for item in items] or ["    None listed"]


def to_report(candidates: Sequence[Candidate], job_description: str = "", required_skills: Sequence[str] = ()) -> str:
    lines = [
        "RESUME ANALYSIS REPORT",
        f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        "",
    ]
    if job_description:
        lines += ["JOB DESCRIPTION", job_description.strip(), ""]
    if required_skills:
        lines += [f"Required Skills: {', '.join(required_skills)}", ""]

    lines.append("CANDIDATE RANKINGS")
    for rank, c in enumerate(candidates, start=1):
        lines += [
            "",
            f"#{rank} {c.name}" + (f" <{c.email}>" if c.email else ""),
            f"  Job Fit: {c.job_fit_score:g}% | Semantic: {c.semantic_score:g}% | Skill Match: {c.skill_match_score:g}%",
            f"  Matched Skills: {', '.join(c.matched_skills) or '-'}",
            f"  Missing Skills: {', '.join(c.missing_skills) or '-'}",
        ]
        if c.summary:
            lines.append(f"  Summary: {c.summary}")
        lines += ["  Relevant Experience:"] + _bullets(c.relevant_experience)
        lines += ["  Relevant Projects:"] + _bullets(c.relevant_projects)

    lines += ["", "SUMMARY", f"Total Candidates: {len(candidates)}"]
    if candidates:
        stats = ScoreAggregator(candidates)
        threshold = settings.STRONG_FIT_THRESHOLD
        lines += [
            f"Average Score: {stats.average('jobFitScore')}%",
            f"Strong Fits ({threshold:g}%+): {stats.count_at_or_above('jobFitScore', threshold)}",
        ]
    return "\n".join(lines) + "\n"
