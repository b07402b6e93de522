"""
ATS (Applicant Tracking System) compatibility scoring.

The score rewards keyword coverage and the presence of the headings that
automated screeners look for:
- Keyword coverage against the target role/industry/job description
- Section presence (summary, skills, experience, education, projects)
- Strengths, weak areas and suggestions derived from the same signals
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from app.services.resume_parser import SectionFlags

logger = logging.getLogger(__name__)


BASE_SCORE = 55
USED_KEYWORD_POINTS = 2
MISSING_KEYWORD_PENALTY = 1

# Bonus points per detected section
SECTION_BONUSES = {
    "summary": 5,
    "skills": 5,
    "experience": 8,
    "education": 4,
    "projects": 3,
}

STANDARD_SUGGESTIONS = (
    "Mirror job title in summary",
    "Reuse keywords in Skills and top bullets",
    "Keep bullets action-led; one line each",
    "Avoid tables or graphics; keep ATS-safe",
)


@dataclass
class ATSReview:
    """Qualitative feedback accompanying an ATS score."""
    strengths: list[str] = field(default_factory=list)
    weak_areas: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


class ATSScorer:
    """
    Keyword and section based ATS scoring engine.

    Scores start at a fixed base, move with keyword coverage, gain a bonus
    for each detected section and are clamped to 0-100.
    """

    def score(
        self,
        used_keywords: Sequence[str],
        missing_keywords: Sequence[str],
        sections: SectionFlags,
    ) -> int:
        """
        Compute the ATS score.

        Args:
            used_keywords: Target keywords found in the resume
            missing_keywords: Target keywords absent from the resume
            sections: Section flags detected on the original resume text

        Returns:
            Integer score in [0, 100]
        """
        raw = (
            BASE_SCORE
            + len(used_keywords) * USED_KEYWORD_POINTS
            - len(missing_keywords) * MISSING_KEYWORD_PENALTY
        )
        for name, bonus in SECTION_BONUSES.items():
            if sections[name]:
                raw += bonus

        score = max(0, min(100, round(raw)))
        logger.debug(
            f"ATS score {score} (raw={raw}, used={len(used_keywords)}, missing={len(missing_keywords)})"
        )
        return score

    def review(
        self,
        used_keywords: Sequence[str],
        missing_keywords: Sequence[str],
        sections: SectionFlags,
    ) -> ATSReview:
        """Build strengths, weak areas and suggestions."""
        strengths = [
            "Relevant keywords present" if used_keywords else "Resume ready for keyword infusion",
            "Experience section detected" if sections.experience else "Add clear Experience section",
            "Clean single-column text layout",
        ]

        weak_areas = []
        if missing_keywords:
            weak_areas.append("Add job-specific keywords naturally")
        if not sections.summary:
            weak_areas.append("Add a targeted summary")
        if not sections.skills:
            weak_areas.append("List role-aligned skills")

        return ATSReview(
            strengths=strengths,
            weak_areas=weak_areas,
            suggestions=list(STANDARD_SUGGESTIONS),
        )


# Singleton instance
_ats_scorer: Optional[ATSScorer] = None


def get_ats_scorer() -> ATSScorer:
    """Get or create the ATS scorer singleton."""
    global _ats_scorer
    if _ats_scorer is None:
        _ats_scorer = ATSScorer()
    return _ats_scorer
