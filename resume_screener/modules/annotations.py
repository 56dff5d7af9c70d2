import uuid
from datetime import datetime
from typing import Dict, List, Optional

from resume_screener.api.schemas import Note, TagType
from resume_screener.core.logger import app_logger


class CandidateAnnotations:
    """
    Recruiter-side shortlist, notes and tags, keyed by candidate id.

    Kept apart from the candidates themselves, which are read-only. One
    instance per application (see `get_annotations` in the router); tests
    build their own.
    """

    def __init__(self):
        self._tags: Dict[str, List[TagType]] = {}
        # tag -> candidate ids in the order they received it
        self._tagged: Dict[TagType, List[str]] = {}
        self._shortlist: List[str] = []
        self._notes: Dict[str, List[Note]] = {}

    # Tags

    def tags(self, candidate_id: str) -> List[TagType]:
        return list(self._tags.get(candidate_id, []))

    def toggle_tag(self, candidate_id: str, tag: TagType) -> List[TagType]:
        tag = TagType(tag)
        current = self._tags.get(candidate_id, [])
        if tag in current:
            updated = [t for t in current if t != tag]
            self._tagged[tag] = [cid for cid in self._tagged.get(tag, []) if cid != candidate_id]
            app_logger.info(f"Removed tag '{tag.value}' from {candidate_id}")
        else:
            updated = current + [tag]
            self._tagged[tag] = self._tagged.get(tag, []) + [candidate_id]
            app_logger.info(f"Tagged {candidate_id} as '{tag.value}'")
        self._tags[candidate_id] = updated
        return list(updated)

    def tagged(self, tag: TagType) -> List[str]:
        return list(self._tagged.get(TagType(tag), []))

    # Shortlist

    def is_shortlisted(self, candidate_id: str) -> bool:
        return candidate_id in self._shortlist

    def toggle_shortlist(self, candidate_id: str) -> bool:
        """Returns whether the candidate is shortlisted after the toggle."""
        if candidate_id in self._shortlist:
            self._shortlist = [cid for cid in self._shortlist if cid != candidate_id]
            app_logger.info(f"Removed {candidate_id} from shortlist")
            return False
        self._shortlist = self._shortlist + [candidate_id]
        app_logger.info(f"Added {candidate_id} to shortlist")
        return True

    def shortlist(self) -> List[str]:
        """Candidate ids in the order they were shortlisted."""
        return list(self._shortlist)

    # Notes

    def notes(self, candidate_id: str) -> List[Note]:
        return list(self._notes.get(candidate_id, []))

    def add_note(self, candidate_id: str, text: str) -> Optional[Note]:
        """Blank notes are ignored."""
        text = (text or "").strip()
        if not text:
            return None
        note = Note(id=str(uuid.uuid4()), text=text, created_at=datetime.now())
        self._notes[candidate_id] = self._notes.get(candidate_id, []) + [note]
        return note

    def delete_note(self, candidate_id: str, note_id: str) -> bool:
        current = self._notes.get(candidate_id, [])
        updated = [n for n in current if n.id != note_id]
        self._notes[candidate_id] = updated
        return len(updated) != len(current)
