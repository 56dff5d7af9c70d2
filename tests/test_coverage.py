"""
Tests for required-skill coverage and the extra-skill leaderboard.
"""

from resume_screener.modules.coverage import SkillCoverageAnalyzer, display_skill


class TestCoverage:
    """Test per-skill coverage percentages."""

    def setup_method(self):
        self.analyzer = SkillCoverageAnalyzer()

    def test_example(self, abc):
        """SQL is matched by B and C: round(200 / 3) = 67."""
        result = {c.skill: c.coverage_percent for c in self.analyzer.coverage(["Python", "SQL", "Go"], abc)}
        assert result == {"Python": 67, "SQL": 67, "Go": 0}

    def test_case_insensitive_equality(self, abc):
        result = self.analyzer.coverage(["sql"], abc)
        assert result[0].skill == "sql"
        assert result[0].coverage_percent == 67

    def test_substring_is_not_coverage(self, make_candidate):
        cs = [make_candidate(matched_skills=["PostgreSQL"])]
        assert self.analyzer.coverage(["SQL"], cs)[0].coverage_percent == 0

    def test_full_coverage(self, make_candidate):
        cs = [make_candidate(matched_skills=["Go"]) for _ in range(3)]
        assert self.analyzer.coverage(["go"], cs)[0].coverage_percent == 100

    def test_no_candidates_is_zero(self):
        result = self.analyzer.coverage(["Python", "SQL"], [])
        assert [c.coverage_percent for c in result] == [0, 0]

    def test_order_follows_required_skills(self, abc):
        assert [c.skill for c in self.analyzer.coverage(["Go", "SQL", "Python"], abc)] == ["Go", "SQL", "Python"]

    def test_bounds(self, make_candidate):
        cs = [make_candidate(matched_skills=skills) for skills in (["A"], ["a", "B"], [], ["c"])]
        for item in self.analyzer.coverage(["A", "B", "C", "D"], cs):
            assert 0 <= item.coverage_percent <= 100


class TestExtraSkillFrequency:
    """Test the extra-skill tally."""

    def setup_method(self):
        self.analyzer = SkillCoverageAnalyzer()

    def test_tally_is_case_insensitive(self, abc):
        result = self.analyzer.extra_skill_frequency(abc)
        assert [(e.skill, e.count, e.percent) for e in result] == [
            ("Docker", 2, 67),
            ("Kubernetes", 1, 33),
        ]

    def test_ties_keep_first_encountered_order(self, make_candidate):
        cs = [
            make_candidate(extra_skills=["rust", "go"]),
            make_candidate(extra_skills=["Go", "elixir", "RUST"]),
            make_candidate(extra_skills=["elixir"]),
        ]
        assert [e.skill for e in self.analyzer.extra_skill_frequency(cs)] == ["Rust", "Go", "Elixir"]

    def test_truncated_to_limit(self, make_candidate):
        skills = [f"skill{i}" for i in range(12)]
        cs = [make_candidate(extra_skills=skills)]
        assert len(self.analyzer.extra_skill_frequency(cs)) == 10
        assert len(self.analyzer.extra_skill_frequency(cs, limit=3)) == 3

    def test_missing_extra_skills(self, cara):
        """Candidates without extra skills contribute nothing."""
        assert cara.extra_skills is None
        assert self.analyzer.extra_skill_frequency([cara]) == []

    def test_display_form(self):
        assert display_skill("machine learning") == "Machine learning"
        assert display_skill("") == ""
