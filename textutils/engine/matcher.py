# textutils/engine/matcher.py

"""Entity matcher combining the enabled recognizers."""

import logging
from functools import lru_cache
from typing import Iterable, List, Optional

from textutils.core.definitions import MatchKind
from textutils.core.domain import (
    BaseUrls,
    MarkdownLink,
    MarkdownResult,
    MatchRecord,
    ParseResult,
)
from textutils.core.options import RecognizerConfig
from textutils.engine.markdown import MarkdownExtractor
from textutils.engine.recognizers import Recognizer, create_all_recognizers

logger = logging.getLogger(__name__)


class EntityMatcher:
    """Scans text with a fixed set of recognizers.

    Each enabled recognizer scans the full text independently. Overlapping
    matches from different recognizers are all kept (a domain inside an
    email address is also a URL). Instances hold no per-call state and can
    be shared across threads.
    """

    def __init__(self, config: Optional[RecognizerConfig] = None) -> None:
        """Initialize matcher.

        Args:
            config: Enable flags; every recognizer is enabled by default
        """
        self.config = config or RecognizerConfig(all=True)
        self.recognizers: List[Recognizer] = create_all_recognizers(self.config)
        self._by_kind = {r.kind: r for r in self.recognizers}
        self._markdown = (
            MarkdownExtractor() if self.config.any_markdown_structure else None
        )

    def find_elements(
        self, text: str, base_urls: Optional[BaseUrls] = None
    ) -> List[MatchRecord]:
        """Finds all linkable elements with their positions.

        Args:
            text: Text to scan
            base_urls: Link bases for hashtags, mentions and markdown assets

        Returns:
            Match records sorted by start position; ties keep recognizer
            order (url, hashtag, mention, email, phone, markdown-link).
        """
        matches: List[MatchRecord] = []
        for recognizer in self.recognizers:
            matches.extend(recognizer.analyze(text, base_urls))
        return sorted(matches, key=lambda m: m.start)

    def _extract(self, kind: str, text: str) -> List[str]:
        recognizer = self._by_kind.get(kind)
        return recognizer.extract(text) if recognizer else []

    def parse(self, text: str) -> ParseResult:
        """Extracts raw matches per kind plus markdown structure.

        Hashtags and mentions keep their sigil; phone numbers are
        formatted. Disabled kinds yield empty lists.
        """
        result = ParseResult(
            urls=self._extract(MatchKind.URL, text),
            hashtags=self._extract(MatchKind.HASHTAG, text),
            mentions=self._extract(MatchKind.MENTION, text),
            emails=self._extract(MatchKind.EMAIL, text),
            phones=self._extract(MatchKind.PHONE, text),
        )

        link_recognizer = self._by_kind.get(MatchKind.MARKDOWN_LINK)
        markdown = MarkdownResult()
        if link_recognizer is not None:
            markdown.links = [
                MarkdownLink(text=span.groups[0], url=span.groups[1])
                for span in link_recognizer.iter_spans(text)
            ]
        if self._markdown is not None:
            if self.config.markdown_headings:
                markdown.headings = self._markdown.headings(text)
            if self.config.markdown_lists:
                markdown.bullet_items = self._markdown.bullet_items(text)
                markdown.numbered_items = self._markdown.numbered_items(text)
            if self.config.markdown_emphasis:
                markdown.bold = self._markdown.bold(text)
                markdown.italic = self._markdown.italic(text)
        result.markdown = markdown
        return result

    def parse_many(self, texts: Iterable[str]) -> List[ParseResult]:
        return [self.parse(text) for text in texts]


def create_matcher(config: Optional[RecognizerConfig] = None) -> EntityMatcher:
    """Factory function; every recognizer is enabled when config is omitted."""
    return EntityMatcher(config)


@lru_cache(maxsize=None)
def default_matcher() -> EntityMatcher:
    """Returns the shared all-recognizer matcher, built on first use."""
    return EntityMatcher()
