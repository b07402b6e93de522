"""Heading and bullet detection over free-form resume text."""
import logging
import re
from dataclasses import dataclass, fields
from typing import List, NamedTuple

logger = logging.getLogger(__name__)

SECTION_HEADS = (
    "summary",
    "skills",
    "experience",
    "projects",
    "education",
    "certifications",
)

# Leading "-", "*" or bullet glyph
BULLET_PATTERN = re.compile(r"^[\-*•]")
LINE_BREAK_PATTERN = re.compile(r"\r?\n")


@dataclass(frozen=True)
class SectionFlags:
    """Presence flag for each canonical resume heading."""
    summary: bool = False
    skills: bool = False
    experience: bool = False
    projects: bool = False
    education: bool = False
    certifications: bool = False

    def __getitem__(self, name: str) -> bool:
        if name not in SECTION_HEADS:
            raise KeyError(name)
        return getattr(self, name)

    def as_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


class LineSplit(NamedTuple):
    """Non-empty resume lines split into bullet and free-text lines."""
    bullets: List[str]
    others: List[str]


def detect_sections(resume_text: str) -> SectionFlags:
    """
    Flag each canonical section whose name appears anywhere in the text.

    This is plain substring containment, so a heading word used inside a
    sentence ("three years of experience") also sets the flag.
    """
    text = (resume_text or "").lower()
    flags = SectionFlags(**{head: head in text for head in SECTION_HEADS})
    logger.debug(f"Detected sections: {flags.as_dict()}")
    return flags


def is_bullet(line: str) -> bool:
    return bool(BULLET_PATTERN.match(line))


def split_resume_lines(resume_text: str) -> LineSplit:
    """Trim lines, drop blanks and separate bullets from everything else."""
    lines = [line.strip() for line in LINE_BREAK_PATTERN.split(resume_text or "")]
    lines = [line for line in lines if line]
    return LineSplit(
        bullets=[line for line in lines if is_bullet(line)],
        others=[line for line in lines if not is_bullet(line)],
    )
