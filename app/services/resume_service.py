"""
Resume Service - async façade over the optimizer and the stub backend.

This service handles:
- Mock analysis of uploaded resume files
- Mock enhancement of resume text
- Running (and caching) the optimization pipeline
- Re-parsing optimized text into template sections
"""
import logging
import time
from dataclasses import asdict
from typing import Optional, Tuple

from app.config import get_settings
from app.services.cache import cache_get_json, cache_set_json, make_cache_key
from app.services.converter import ParsedSections, ResumeConverter
from app.services.optimizer import Analysis, ResumeOptimizer, get_resume_optimizer

logger = logging.getLogger(__name__)


# Fixed analysis returned until real PDF parsing is wired in
MOCK_KEY_SKILLS = ["Communication", "Project Management", "Leadership", "Problem Solving", "Technical Skills"]
MOCK_EXPERIENCE_LEVEL = "mid"
MOCK_ATS_IMPROVEMENTS = [
    "Add more quantifiable achievements with specific metrics",
    "Include relevant keywords from the job description",
    "Use standard section headings like 'Experience' and 'Skills'",
]
MOCK_EXTRACTED_TEXT = "Resume analyzed. Ready to enhance and generate variants."

ENHANCEMENT_NOTES = [
    "Action verbs strengthened",
    "Keywords from job description integrated",
    "Metrics and achievements highlighted",
    "Standard formatting maintained for ATS compatibility",
]


class ResumeService:
    """Service backing the resume API routes."""

    def __init__(self, optimizer: Optional[ResumeOptimizer] = None):
        self.settings = get_settings()
        self.optimizer = optimizer or get_resume_optimizer()
        self.cache_ttl = max(60, self.settings.cache_ttl)

    async def analyze_file(self, content: bytes, filename: Optional[str] = None) -> Tuple[str, str]:
        """
        Analyze an uploaded resume file.

        The file body is not parsed yet; a fixed analysis is returned.

        Returns:
            Tuple of (insights, extracted text)
        """
        logger.info(f"Analyzing resume upload {filename or '<unnamed>'} ({len(content)} bytes)")

        improvements = "\n".join(f"- {item}" for item in MOCK_ATS_IMPROVEMENTS)
        insights = (
            f"Skills: {', '.join(MOCK_KEY_SKILLS)}\n"
            f"Experience Level: {MOCK_EXPERIENCE_LEVEL or 'N/A'}\n"
            f"ATS Improvements:\n{improvements}"
        ).strip()
        return insights, MOCK_EXTRACTED_TEXT

    async def enhance(
        self,
        resume_text: str,
        job_role: Optional[str] = None,
        industry: Optional[str] = None,
        job_description: Optional[str] = None,
    ) -> str:
        """Wrap truncated resume text in a mock enhancement report."""
        truncated_resume = resume_text[: self.settings.enhance_resume_max_chars]
        truncated_jd = (job_description or "")[: self.settings.enhance_job_description_max_chars]
        logger.info(
            f"Enhancing resume for role={job_role!r} industry={industry!r} "
            f"(resume {len(truncated_resume)} chars, job description {len(truncated_jd)} chars)"
        )

        notes = "\n".join(f"- {note}" for note in ENHANCEMENT_NOTES)
        enhanced = (
            f"[ENHANCED FOR: {job_role or 'Target Role'} in {industry or 'Industry'}]\n\n"
            f"{truncated_resume}\n\n"
            f"[ATS OPTIMIZATION APPLIED]\n{notes}\n\n"
            "Note: Replace with actual OpenAI enhancement when you have API credits."
        )
        return enhanced.strip()

    async def optimize(
        self,
        resume_text: str,
        job_role: str,
        industry: str,
        job_description: str = "",
    ) -> Tuple[Analysis, float]:
        """
        Run the optimizer, reusing a cached Analysis for identical inputs.

        Returns:
            Tuple of (Analysis, elapsed time in milliseconds)
        """
        start_time = time.time()

        cache_key = make_cache_key("optimize", resume_text, job_role, industry, job_description)
        cached = await cache_get_json(cache_key)
        if cached:
            logger.info(f"Optimize cache hit for {cache_key}")
            return Analysis.from_dict(cached), 0.0

        analysis = self.optimizer.optimize(resume_text, job_role, industry, job_description)
        elapsed = (time.time() - start_time) * 1000
        logger.info(f"Optimized resume in {elapsed:.2f}ms (ATS score {analysis.ats_score})")

        await cache_set_json(cache_key, asdict(analysis), ttl=self.cache_ttl)
        return analysis, elapsed

    def parse_sections(self, optimized_resume: str) -> ParsedSections:
        return ResumeConverter.parse_sections(optimized_resume)


# Singleton instance
_resume_service: Optional[ResumeService] = None


def get_resume_service() -> ResumeService:
    """Get or create the resume service singleton."""
    global _resume_service
    if _resume_service is None:
        _resume_service = ResumeService()
    return _resume_service
