"""
Tests for recruiter notes/tags and the analysis history.
"""

from resume_screener.api.schemas import AnalysisResult, TagType
from resume_screener.modules.annotations import CandidateAnnotations
from resume_screener.modules.history import AnalysisHistory


class TestTags:
    """Test tag toggling and the shortlist."""

    def test_toggle_on_and_off(self):
        notes = CandidateAnnotations()
        assert notes.toggle_tag("a", TagType.SHORTLISTED) == [TagType.SHORTLISTED]
        assert notes.toggle_tag("a", "interview") == [TagType.SHORTLISTED, TagType.INTERVIEW]
        assert notes.toggle_tag("a", TagType.SHORTLISTED) == [TagType.INTERVIEW]
        assert notes.tags("a") == [TagType.INTERVIEW]

    def test_tagged_keeps_tagging_order(self):
        """Ids are listed in the order they received the tag, not any tag."""
        notes = CandidateAnnotations()
        notes.toggle_tag("x", TagType.INTERVIEW)
        notes.toggle_tag("y", TagType.STRONG_FIT)
        notes.toggle_tag("x", TagType.STRONG_FIT)
        assert notes.tagged(TagType.STRONG_FIT) == ["y", "x"]
        notes.toggle_tag("y", TagType.STRONG_FIT)
        assert notes.tagged(TagType.STRONG_FIT) == ["x"]
        assert notes.tagged(TagType.REJECTED) == []

    def test_instances_are_isolated(self):
        first, second = CandidateAnnotations(), CandidateAnnotations()
        first.toggle_tag("a", TagType.STRONG_FIT)
        assert second.tags("a") == []


class TestShortlist:
    """Test the shortlist, kept apart from tags."""

    def test_order_is_shortlisting_order(self):
        notes = CandidateAnnotations()
        notes.toggle_tag("x", TagType.INTERVIEW)
        assert notes.toggle_shortlist("y")
        assert notes.toggle_shortlist("x")
        assert notes.shortlist() == ["y", "x"]

    def test_toggle_off(self):
        notes = CandidateAnnotations()
        notes.toggle_shortlist("a")
        notes.toggle_shortlist("b")
        assert not notes.toggle_shortlist("a")
        assert notes.shortlist() == ["b"]
        assert not notes.is_shortlisted("a")
        assert notes.is_shortlisted("b")

    def test_independent_of_tags(self):
        """The shortlisted tag does not put a candidate on the shortlist."""
        notes = CandidateAnnotations()
        notes.toggle_tag("a", TagType.SHORTLISTED)
        assert notes.shortlist() == []
        notes.toggle_shortlist("b")
        assert notes.tags("b") == []


class TestNotes:
    """Test note add/delete."""

    def test_add_and_list(self):
        notes = CandidateAnnotations()
        note = notes.add_note("a", "  Great culture fit  ")
        assert note.text == "Great culture fit"
        assert notes.notes("a") == [note]
        assert notes.notes("b") == []

    def test_blank_note_ignored(self):
        notes = CandidateAnnotations()
        assert notes.add_note("a", "   ") is None
        assert notes.notes("a") == []

    def test_delete(self):
        notes = CandidateAnnotations()
        keep = notes.add_note("a", "keep")
        drop = notes.add_note("a", "drop")
        assert notes.delete_note("a", drop.id)
        assert notes.notes("a") == [keep]
        assert not notes.delete_note("a", drop.id)


class TestAnalysisHistory:
    """Test the bounded run history."""

    def test_limit_and_order(self, abc):
        history = AnalysisHistory(limit=2)
        for i in range(3):
            history.append(AnalysisResult(candidates=abc[i:], job_description=f"run {i}"))
        assert len(history) == 2
        assert history.latest().job_description == "run 2"
        assert [e.job_description_preview for e in history.entries()] == ["run 2", "run 1"]
        assert history.entries()[0].top_candidate == "Cara"

    def test_empty(self):
        history = AnalysisHistory()
        assert history.latest() is None
        assert history.entries() == []
