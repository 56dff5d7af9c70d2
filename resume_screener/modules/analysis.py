import json
import re
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from resume_screener.api.schemas import AnalysisResult, Candidate, ResumeText
from resume_screener.core.errors import AnalysisPayloadError
from resume_screener.core.logger import app_logger
from resume_screener.modules.sorting import candidate_sorter


class AnalysisNormalizer:
    """
    Turns the hosted model's output into a canonical AnalysisResult.

    The model is asked for raw JSON but sometimes wraps it in a markdown
    fence; that is stripped before parsing. Every candidate gets a fresh id
    and the list is ordered by job fit, which fixes the canonical rank.
    """

    def parse_content(self, content: Union[str, Dict[str, Any]]) -> Dict[str, Any]:
        if isinstance(content, dict):
            payload = content
        else:
            text = (content or "").strip()
            text = re.sub(r"^```(?:json)?", "", text).strip()
            text = re.sub(r"```$", "", text).strip()
            try:
                payload = json.loads(text)
            except json.JSONDecodeError as e:
                app_logger.error(f"Failed to parse analysis output: {text[:50]}...")
                raise AnalysisPayloadError("Failed to parse analysis results") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("candidates", []), list):
            raise AnalysisPayloadError("Analysis output must be an object with a 'candidates' list")
        return payload

    def build_candidate(
        self,
        dto: Dict[str, Any],
        index: int,
        resumes: Sequence[ResumeText],
        analyzed_at: datetime,
    ) -> Candidate:
        file_name = dto.get("fileName") or (resumes[index].file_name if index < len(resumes) else "Unknown")
        resume_text = next((r.resume_text for r in resumes if r.file_name == dto.get("fileName")), "")
        if not dto.get("name"):
            app_logger.warning(f"Candidate from {file_name} has no name, using 'Unknown'")

        data = {k: v for k, v in dto.items() if v is not None}
        data.update(
            id=str(uuid.uuid4()),
            name=dto.get("name") or "Unknown",
            email=dto.get("email") or "",
            fileName=file_name,
            resumeText=resume_text,
            analyzedAt=analyzed_at,
        )
        try:
            return Candidate.model_validate(data)
        except ValidationError as e:
            raise AnalysisPayloadError(f"Candidate {index + 1} ({file_name}) is malformed: {e.error_count()} errors") from e

    def normalize(
        self,
        content: Union[str, Dict[str, Any]],
        job_description: str = "",
        resumes: Optional[Sequence[ResumeText]] = None,
    ) -> AnalysisResult:
        payload = self.parse_content(content)
        resumes = list(resumes or [])
        analyzed_at = datetime.now()

        candidates: List[Candidate] = [
            self.build_candidate(dto if isinstance(dto, dict) else {}, i, resumes, analyzed_at)
            for i, dto in enumerate(payload.get("candidates") or [])
        ]
        candidates = candidate_sorter.sort(candidates, "jobFitScore", "desc")

        app_logger.info(f"Normalised analysis with {len(candidates)} candidates")
        return AnalysisResult(
            candidates=candidates,
            job_description=job_description,
            required_skills=[s for s in payload.get("requiredSkills") or [] if isinstance(s, str)],
            analyzed_at=analyzed_at,
        )

analysis_normalizer = AnalysisNormalizer()
