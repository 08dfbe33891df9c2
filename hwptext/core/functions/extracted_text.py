# hwptext/core/functions/extracted_text.py
"""
Extracted Text Model

Both HWP and HWPX extraction produce the same structure: an ordered list of
sections, each holding an ordered list of paragraph strings. Sections follow
stream enumeration order and paragraphs follow in-stream order.
"""
from dataclasses import dataclass, field
from typing import List

# Placeholder tokens for inline objects without text content
PLACEHOLDER_IMAGE = "[Image]"
PLACEHOLDER_OBJECT = "[Object]"
PLACEHOLDER_TABLE = "[Table]"


@dataclass
class SectionText:
    """Paragraphs of one section stream / section part.

    Attributes:
        name: Stream or archive entry the section came from
        paragraphs: Paragraph strings in reading order
    """
    name: str
    paragraphs: List[str] = field(default_factory=list)

    def to_text(self, paragraph_separator: str = "\n") -> str:
        return paragraph_separator.join(self.paragraphs)


@dataclass
class ExtractedText:
    """Document text in reading order."""
    sections: List[SectionText] = field(default_factory=list)

    @property
    def paragraphs(self) -> List[str]:
        return [p for section in self.sections for p in section.paragraphs]

    def to_text(
        self,
        paragraph_separator: str = "\n",
        section_separator: str = "\n\n",
    ) -> str:
        """
        Join sections and paragraphs into one string.

        Sections without paragraphs are skipped so they do not leave
        stray separators behind.
        """
        parts = [
            section.to_text(paragraph_separator)
            for section in self.sections
            if section.paragraphs
        ]
        return section_separator.join(parts)

    def __str__(self) -> str:
        return self.to_text()


__all__ = [
    'SectionText',
    'ExtractedText',
    'PLACEHOLDER_IMAGE',
    'PLACEHOLDER_OBJECT',
    'PLACEHOLDER_TABLE',
]
