"""
Pytest configuration and shared fixtures.
"""

import os

# Keep test runs from writing log files into the repo
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from typing import Any, Callable, List

from resume_screener.api.schemas import Candidate


@pytest.fixture
def make_candidate() -> Callable[..., Candidate]:
    """Factory for candidates with sensible defaults."""
    counter = [0]

    def _make(**overrides: Any) -> Candidate:
        counter[0] += 1
        data = {
            "id": f"cand-{counter[0]}",
            "name": f"Candidate {counter[0]}",
            "email": f"candidate{counter[0]}@example.com",
            "file_name": f"resume_{counter[0]}.pdf",
            "job_fit_score": 50,
            "semantic_score": 50,
            "skill_match_score": 50,
        }
        data.update(overrides)
        return Candidate(**data)

    return _make


@pytest.fixture
def alice() -> Candidate:
    return Candidate(
        id="a",
        name="Alice",
        email="alice@example.com",
        job_fit_score=90,
        semantic_score=85,
        skill_match_score=80,
        matched_skills=["Python"],
        missing_skills=["SQL"],
        extra_skills=["Docker", "kubernetes"],
        relevant_experience=["5 years backend"],
    )


@pytest.fixture
def bob() -> Candidate:
    return Candidate(
        id="b",
        name="Bob",
        email="bob@corp.io",
        job_fit_score=75,
        semantic_score=70,
        skill_match_score=95,
        matched_skills=["Python", "SQL"],
        missing_skills=[],
        extra_skills=["docker"],
        relevant_projects=["ETL pipeline", "Dashboard"],
    )


@pytest.fixture
def cara() -> Candidate:
    return Candidate(
        id="c",
        name="Cara",
        email="",
        job_fit_score=60,
        semantic_score=65,
        skill_match_score=50,
        matched_skills=["SQL"],
        missing_skills=["python"],
    )


@pytest.fixture
def abc(alice, bob, cara) -> List[Candidate]:
    """Canonical (job fit descending) list from the worked example."""
    return [alice, bob, cara]


@pytest.fixture
def client():
    """API client with fresh annotation and history tables."""
    from fastapi.testclient import TestClient
    from resume_screener.main import app
    from resume_screener.modules.annotations import CandidateAnnotations
    from resume_screener.modules.history import AnalysisHistory

    app.state.annotations = CandidateAnnotations()
    app.state.history = AnalysisHistory(limit=5)
    return TestClient(app)


@pytest.fixture
def as_json() -> Callable[[List[Candidate]], List[dict]]:
    """Serialise candidates the way the dashboard sends them."""
    def _dump(candidates: List[Candidate]) -> List[dict]:
        return [c.model_dump(mode="json", by_alias=True) for c in candidates]
    return _dump
