# textutils/engine/markdown.py

"""Structured markdown extraction: headings, list items and emphasis.

These constructs carry no link target, so they are reported as plain
structure rather than positioned match records.
"""

from typing import List, Pattern

from textutils.core.domain import MarkdownHeading
from textutils.core.loader import PatternLoader, compile_pattern


class MarkdownExtractor:
    """Line-anchored markdown extraction over the configured patterns."""

    def __init__(self) -> None:
        loader = PatternLoader.get_instance()
        self._heading = self._compile(loader, "heading")
        self._bullet = self._compile(loader, "bullet_list")
        self._numbered = self._compile(loader, "numbered_list")
        self._bold = self._compile(loader, "bold")
        self._italic = self._compile(loader, "italic")

    @staticmethod
    def _compile(loader: PatternLoader, name: str) -> Pattern[str]:
        return compile_pattern(loader.get_markdown_pattern(name))

    def headings(self, text: str) -> List[MarkdownHeading]:
        """Returns headings with their level (count of leading '#')."""
        return [
            MarkdownHeading(level=len(m.group(1)), text=m.group(2))
            for m in self._heading.finditer(text)
        ]

    def bullet_items(self, text: str) -> List[str]:
        return [m.group(1) for m in self._bullet.finditer(text)]

    def numbered_items(self, text: str) -> List[str]:
        return [m.group(1) for m in self._numbered.finditer(text)]

    def bold(self, text: str) -> List[str]:
        # Either '**x**' or '__x__' captured.
        return [m.group(1) or m.group(2) for m in self._bold.finditer(text)]

    def italic(self, text: str) -> List[str]:
        return [m.group(1) or m.group(2) for m in self._italic.finditer(text)]
