"""
Resume optimization engine.

Turns pasted resume text plus a target role, industry and optional job
description into an :class:`Analysis`:

1. Extract target keywords and split them into used/missing
2. Detect sections and separate bullets from free-text lines
3. Rewrite bullets with action verbs and build summary/skills text
4. Assemble the optimized resume and its stylistic variants
5. Score it and derive recruiter note, LinkedIn copy and cover letter

Every step is a pure function of its inputs, so identical inputs always
produce an equal Analysis.
"""

import itertools
import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from app.services.ats_scorer import ATSScorer, get_ats_scorer
from app.services.content_generators import (
    build_cover_letter,
    build_linkedin,
    build_recruiter_note,
    format_list,
)
from app.services.nlp_utils import extract_keywords, partition_keywords, word_set
from app.services.resume_parser import SectionFlags, detect_sections, split_resume_lines

logger = logging.getLogger(__name__)


ACTION_VERBS = (
    "Delivered",
    "Implemented",
    "Optimized",
    "Improved",
    "Built",
    "Led",
    "Managed",
    "Launched",
    "Analyzed",
    "Developed",
    "Streamlined",
    "Orchestrated",
    "Elevated",
)

MAX_SUMMARY_KEYWORDS = 5
MAX_FALLBACK_SKILLS = 15
MAX_EXTRA_LINES = 8

SKILLS_FALLBACK = "Prioritize role-aligned technical and domain skills."
EXPERIENCE_FALLBACK = "- Retain original experience details and align wording to role."
PROJECTS_BLOCK = "Projects\n- Keep project outcomes concise and quantifiable."
EDUCATION_BLOCK = "Education\n- Keep education details unchanged."
CERTIFICATIONS_BLOCK = "Certifications\n- Keep certification titles accurate."
IMPACT_SENTENCE = "Emphasizes measurable delivery."

BULLET_MARKER = re.compile(r"^[\-*•]\s*")
TRAILING_PERIODS = re.compile(r"\.+$")
SENTENCE_ENDINGS = ("!", "?")


@dataclass(frozen=True)
class Analysis:
    """Complete result of one optimize run."""
    optimized_resume: str
    variants: tuple[str, ...]
    ats_score: int
    used_keywords: tuple[str, ...]
    missing_keywords: tuple[str, ...]
    strengths: tuple[str, ...] = ()
    weak_areas: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    recruiter_note: str = ""
    linkedin_headline: str = ""
    linkedin_about: str = ""
    cover_letter: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Analysis":
        """Rebuild an Analysis from its JSON form (lists back to tuples)."""
        return cls(**{
            key: tuple(value) if isinstance(value, list) else value
            for key, value in data.items()
        })


class ResumeOptimizer:
    """Rewrites resume text toward a target role and industry."""

    def __init__(self, scorer: Optional[ATSScorer] = None):
        self.scorer = scorer or get_ats_scorer()

    @staticmethod
    def rewrite_bullets(lines: Sequence[str]) -> list[str]:
        """
        Prefix each bullet with the next action verb.

        The verb cycle restarts on every call and only advances for lines that
        have text. A line that is nothing but a marker becomes "" so callers
        can drop it. Trailing periods collapse to one; a bullet that ends without
        "!" or "?" gets a closing period.
        """
        verbs = itertools.cycle(ACTION_VERBS)
        rewritten = []
        for line in lines:
            clean = BULLET_MARKER.sub("", line).strip()
            if not clean:
                rewritten.append("")
                continue
            sentence = TRAILING_PERIODS.sub("", f"{next(verbs)} {clean}")
            if not sentence.endswith(SENTENCE_ENDINGS):
                sentence += "."
            rewritten.append(sentence)
        return rewritten

    @staticmethod
    def build_summary(job_role: str, industry: str, used_keywords: Sequence[str]) -> str:
        focus = list(used_keywords[:MAX_SUMMARY_KEYWORDS])
        if not focus:
            return f"{job_role} professional in {industry}, focusing on impact, clarity, and ATS alignment."
        return (
            f"{job_role} in {industry} with strengths across {format_list(focus)}; "
            "committed to clear, measurable outcomes and ATS-ready delivery."
        )

    @staticmethod
    def build_skills(resume_words, used_keywords: Sequence[str]) -> str:
        """
        Skills line for the optimized resume.

        Prefers used keywords that literally appear in the resume; otherwise
        falls back to the first resume words longer than three characters.
        """
        matched = [k for k in used_keywords if k.lower() in resume_words]
        if matched:
            return format_list(matched)
        fallbacks = [w for w in resume_words if len(w) > 3][:MAX_FALLBACK_SKILLS]
        return format_list(fallbacks)

    @staticmethod
    def build_optimized_resume(
        summary: str,
        skills: str,
        bullets: Sequence[str],
        remaining_lines: Sequence[str],
        sections: SectionFlags,
    ) -> str:
        """Join the resume blocks in fixed order, omitting absent ones."""
        bullets = [b for b in bullets if b]
        if bullets:
            experience_body = "\n".join(f"- {b}" for b in bullets)
        else:
            experience_body = EXPERIENCE_FALLBACK

        extras = ""
        if remaining_lines:
            extras = "Additional Details\n- " + "\n- ".join(remaining_lines)

        blocks = [
            f"Summary\n{summary}",
            f"Skills\n{skills or SKILLS_FALLBACK}",
            f"Experience\n{experience_body}",
            PROJECTS_BLOCK if sections.projects else "",
            EDUCATION_BLOCK if sections.education else "",
            CERTIFICATIONS_BLOCK if sections.certifications else "",
            extras,
        ]
        return "\n\n".join(block for block in blocks if block)

    @staticmethod
    def build_variants(base: str, summary: str) -> list[str]:
        """
        Return the base resume plus two rewordings of its summary.

        Only the first "with" of the summary is replaced, and only where the
        exact "Summary\\n<summary>" block appears in ``base``; otherwise the
        variant is the base text unchanged.
        """
        original_block = f"Summary\n{summary}"
        concise = base.replace(
            original_block,
            f"Summary\n{summary.replace('with', 'focused on', 1)}",
            1,
        )
        impact = base.replace(
            original_block,
            f"Summary\n{summary.replace('with', 'driving', 1)} {IMPACT_SENTENCE}",
            1,
        )
        return [base, concise, impact]

    def optimize(
        self,
        resume_text: str,
        job_role: str,
        industry: str,
        job_description: str = "",
    ) -> Analysis:
        """
        Run the full optimization pipeline.

        Args:
            resume_text: Pasted or extracted resume text
            job_role: Target job title
            industry: Target industry
            job_description: Optional job posting text

        Returns:
            A new Analysis; never raises for empty inputs
        """
        resume_words = word_set(resume_text)
        keywords = extract_keywords(job_role, industry, job_description)
        used_keywords, missing_keywords = partition_keywords(keywords, resume_words)

        sections = detect_sections(resume_text)
        lines = split_resume_lines(resume_text)

        rewritten_bullets = self.rewrite_bullets(lines.bullets)
        summary = self.build_summary(job_role, industry, used_keywords)
        skills = self.build_skills(resume_words, used_keywords)
        optimized_resume = self.build_optimized_resume(
            summary,
            skills,
            rewritten_bullets,
            lines.others[:MAX_EXTRA_LINES],
            sections,
        )

        ats_score = self.scorer.score(used_keywords, missing_keywords, sections)
        review = self.scorer.review(used_keywords, missing_keywords, sections)
        linkedin = build_linkedin(job_role, industry, used_keywords)

        logger.debug(
            f"Optimized resume for {job_role!r}: {len(keywords)} keywords, "
            f"{len(used_keywords)} used, score {ats_score}"
        )

        return Analysis(
            optimized_resume=optimized_resume,
            variants=tuple(self.build_variants(optimized_resume, summary)),
            ats_score=ats_score,
            used_keywords=tuple(used_keywords),
            missing_keywords=tuple(missing_keywords),
            strengths=tuple(review.strengths),
            weak_areas=tuple(review.weak_areas),
            suggestions=tuple(review.suggestions),
            recruiter_note=build_recruiter_note(used_keywords, missing_keywords),
            linkedin_headline=linkedin.headline,
            linkedin_about=linkedin.about,
            cover_letter=build_cover_letter(job_role, industry, used_keywords),
        )


# Singleton instance
_optimizer: Optional[ResumeOptimizer] = None


def get_resume_optimizer() -> ResumeOptimizer:
    """Get or create the resume optimizer singleton."""
    global _optimizer
    if _optimizer is None:
        _optimizer = ResumeOptimizer()
    return _optimizer


def optimize(resume_text: str, job_role: str, industry: str, job_description: str = "") -> Analysis:
    """Module-level shortcut for :meth:`ResumeOptimizer.optimize`."""
    return get_resume_optimizer().optimize(resume_text, job_role, industry, job_description)
