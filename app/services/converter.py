"""Converter service to turn optimized resume text into template sections."""
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import yaml


BLOCK_SEPARATOR = re.compile(r"\n\n+")
COMMA_SEPARATOR = re.compile(r"\s*,\s*")
LIST_MARKER = re.compile(r"^[-*]\s*")


@dataclass(frozen=True)
class ParsedSections:
    """Structured sections consumed by the two-column resume template."""
    summary: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[List[str]] = None
    education: Optional[List[str]] = None


class ResumeConverter:
    """Parses optimized resume text back into template sections."""

    @staticmethod
    def list_from_csv_like(text: str) -> List[str]:
        """Split on newlines and commas, dropping list markers."""
        items = []
        for line in text.split("\n"):
            for item in COMMA_SEPARATOR.split(line):
                item = LIST_MARKER.sub("", item).strip()
                if item:
                    items.append(item)
        return items

    @staticmethod
    def split_bullets(text: str) -> List[str]:
        """One entry per line, with any list marker normalized to '- '."""
        bullets = [LIST_MARKER.sub("- ", line).strip() for line in text.split("\n")]
        return [b for b in bullets if b]

    @staticmethod
    def split_lines(text: str) -> List[str]:
        lines = [line.strip() for line in text.split("\n")]
        return [line for line in lines if line]

    @classmethod
    def parse_sections(cls, optimized_resume: str) -> ParsedSections:
        """
        Re-parse optimized resume text into structured sections.

        Blocks are separated by blank lines. The first line of a block is its
        heading and is matched case-insensitively by substring, in the order
        summary, skills, experience, education. Blocks matching none of these
        (Projects, Additional Details, ...) are dropped. A later block with the
        same heading replaces an earlier one.
        """
        found: Dict[str, Any] = {}
        for block in BLOCK_SEPARATOR.split(optimized_resume or ""):
            head, _, body = block.partition("\n")
            key = head.strip().lower()

            if "summary" in key:
                found["summary"] = body.strip()
            elif "skills" in key:
                found["skills"] = cls.list_from_csv_like(body)
            elif "experience" in key:
                found["experience"] = cls.split_bullets(body)
            elif "education" in key:
                found["education"] = cls.split_lines(body)

        return ParsedSections(**found)

    @staticmethod
    def to_dict(sections: ParsedSections) -> Dict[str, Any]:
        """Drop absent sections."""
        return {k: v for k, v in asdict(sections).items() if v is not None}

    @classmethod
    def to_yaml(cls, sections: ParsedSections) -> str:
        """Dump the present sections as a YAML document."""
        return yaml.safe_dump(
            cls.to_dict(sections),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
