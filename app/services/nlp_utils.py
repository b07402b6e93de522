"""Tokenization and keyword extraction for resume optimization.

Every other part of the optimizer works on the tokens produced here:
- Tokenization (lowercase, split on anything outside ``[a-z0-9+]``)
- Resume word sets for membership tests
- Frequency ranking with first-seen tie-break
- Keyword extraction from role, industry and job description
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Sequence


STOPWORDS = frozenset({
    "and", "the", "with", "for", "that", "from", "this", "these", "those", "into",
    "about", "your", "you", "are", "was", "were", "have", "has", "had", "will",
    "shall", "should", "can", "could", "may", "might", "been", "being", "their",
    "there", "than", "then", "our", "out", "per", "via", "on", "at", "in", "to",
    "of", "as", "by",
})

MIN_KEYWORD_LENGTH = 4
MAX_KEYWORDS = 18

TOKEN_SPLIT_PATTERN = re.compile(r"[^a-z0-9+]+")


def normalize_words(text: str | None) -> list[str]:
    """Lowercase ``text`` and split it into word tokens, dropping empties."""
    if not text:
        return []
    return [token for token in TOKEN_SPLIT_PATTERN.split(text.lower()) if token]


def word_set(text: str | None) -> dict[str, None]:
    """
    Token set of ``text`` for membership tests.

    Returned as a dict so iteration keeps first-seen order, which the skills
    fallback relies on.
    """
    return dict.fromkeys(normalize_words(text))


def rank_by_frequency(tokens: Iterable[str], limit: int | None = None) -> list[str]:
    """
    Rank distinct tokens by descending frequency.

    Ties keep the order in which tokens were first seen.
    """
    return [token for token, _ in Counter(tokens).most_common(limit)]


def is_candidate_keyword(token: str) -> bool:
    return token not in STOPWORDS and len(token) >= MIN_KEYWORD_LENGTH


def extract_keywords(job_role: str, industry: str, job_description: str = "") -> list[str]:
    """
    Derive the ranked keyword list for a target role.

    Args:
        job_role: Target job title
        industry: Target industry
        job_description: Optional job posting text

    Returns:
        Up to 18 distinct keywords, most frequent first
    """
    source = f"{job_role or ''} {industry or ''} {job_description or ''}"
    candidates = (t for t in normalize_words(source) if is_candidate_keyword(t))
    return rank_by_frequency(candidates, MAX_KEYWORDS)


def partition_keywords(
    keywords: Sequence[str],
    resume_words: Iterable[str],
) -> tuple[list[str], list[str]]:
    """Split ``keywords`` into (used, missing) against the resume's token set."""
    vocabulary = resume_words if isinstance(resume_words, (set, frozenset, dict)) else set(resume_words)
    used = [k for k in keywords if k.lower() in vocabulary]
    missing = [k for k in keywords if k.lower() not in vocabulary]
    return used, missing
