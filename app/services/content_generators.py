"""Recruiter note, LinkedIn copy and cover letter generation."""
from dataclasses import dataclass
from typing import Iterable, Sequence


MAX_NOTE_KEYWORDS = 5
MAX_HEADLINE_KEYWORDS = 3
MAX_ABOUT_KEYWORDS = 6
MAX_LETTER_KEYWORDS = 6


@dataclass(frozen=True)
class LinkedInCopy:
    headline: str
    about: str


def format_list(items: Iterable[str]) -> str:
    """Join non-empty items with commas."""
    return ", ".join(item for item in items if item)


def build_recruiter_note(used_keywords: Sequence[str], missing_keywords: Sequence[str]) -> str:
    hits = ", ".join(used_keywords[:MAX_NOTE_KEYWORDS])
    gaps = ", ".join(missing_keywords[:MAX_NOTE_KEYWORDS])
    return (
        f"Highlights: {hits or 'core role terms present'}. "
        f"Gaps: {gaps or 'no major keyword gaps'}."
    )


def build_linkedin(job_role: str, industry: str, used_keywords: Sequence[str]) -> LinkedInCopy:
    """
    Build a LinkedIn headline and About blurb.

    The headline pipes together role, industry and the top keywords, skipping
    whichever parts are empty.
    """
    head_keywords = " | ".join(used_keywords[:MAX_HEADLINE_KEYWORDS])
    headline = " | ".join(part for part in (job_role, industry, head_keywords) if part)
    about = (
        f"Focused on {job_role} in {industry}. "
        f"Experienced in {format_list(used_keywords[:MAX_ABOUT_KEYWORDS])}. "
        "Open to roles that reward clarity, measurable outcomes, and collaboration."
    )
    return LinkedInCopy(headline=headline, about=about)


def build_cover_letter(job_role: str, industry: str, used_keywords: Sequence[str]) -> str:
    opener = f"I am interested in the {job_role} role in {industry}."
    if used_keywords:
        body = (
            f"My background includes work with {format_list(used_keywords[:MAX_LETTER_KEYWORDS])}, "
            "and I focus on aligning delivery to role goals without overstating achievements."
        )
    else:
        body = (
            "My background aligns with the posted requirements, "
            "and I focus on clear outcomes without overstating achievements."
        )
    disclaimer = "I will keep all stated experience consistent with my resume."
    closing = "Thank you for your time; I welcome a conversation to confirm fit."
    return "\n\n".join([opener, body, disclaimer, closing])
