# textutils/engine/recognizers.py

"""Recognizers for linkable entities: URLs, tags, emails, phones, links."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Pattern

from textutils.core.definitions import MatchKind
from textutils.core.domain import BaseUrls, MatchRecord, Span
from textutils.core.loader import PatternLoader, compile_pattern
from textutils.core.options import RecognizerConfig
from textutils.engine.scanners import scan_emails, scan_phones, scan_urls

logger = logging.getLogger(__name__)

_PATTERN_CACHE: Dict[str, List[Pattern[str]]] = {}


def _get_cached_patterns(kind: str) -> List[Pattern[str]]:
    """Retrieves compiled patterns for a kind from cache or compiles them."""
    if kind in _PATTERN_CACHE:
        return _PATTERN_CACHE[kind]

    loader = PatternLoader.get_instance()
    patterns = [compile_pattern(p) for p in loader.get_patterns(kind)]

    _PATTERN_CACHE[kind] = patterns
    return patterns


def _is_http(url: str) -> bool:
    return url[:4].lower() == "http"


def _join_url(base: str, path: str) -> str:
    if base.endswith("/"):
        base = base[:-1]
    return f"{base}/{path}"


class Recognizer(ABC):
    """Base class for a single entity grammar.

    Subclasses locate raw spans; the base class turns spans into
    positioned records. Recognizers never raise on any text input.
    """

    kind: str = ""

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or type(self).__name__

    @abstractmethod
    def iter_spans(self, text: str) -> Iterator[Span]:
        """Yields non-overlapping spans from left to right."""
        pass

    @abstractmethod
    def build_record(self, span: Span, base_urls: BaseUrls) -> MatchRecord:
        """Annotates one span with its value and link target."""
        pass

    def extract(self, text: str) -> List[str]:
        """Returns the raw matched strings, in order."""
        return [span.text for span in self.iter_spans(text)]

    def analyze(self, text: str, base_urls: Optional[BaseUrls] = None) -> List[MatchRecord]:
        base_urls = base_urls or BaseUrls()
        return [self.build_record(span, base_urls) for span in self.iter_spans(text)]

    def _record(self, span: Span, value: str, url: Optional[str]) -> MatchRecord:
        return MatchRecord(
            kind=self.kind,
            raw_text=span.text,
            value=value,
            start=span.start,
            end=span.end,
            url=url,
            rule_name=self.name,
        )


class RegexRecognizer(Recognizer):
    """Recognizer driven by the patterns configured for its kind."""

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name)
        self.patterns = _get_cached_patterns(self.kind)
        if not self.patterns:
            logger.warning(f"No patterns configured for {self.kind}")

    def iter_spans(self, text: str) -> Iterator[Span]:
        for pattern in self.patterns:
            for match in pattern.finditer(text):
                yield Span(match.start(), match.end(), match.group(0), match.groups())


class UrlRecognizer(Recognizer):
    kind = MatchKind.URL

    def iter_spans(self, text: str) -> Iterator[Span]:
        return scan_urls(text)

    def build_record(self, span: Span, base_urls: BaseUrls) -> MatchRecord:
        raw = span.text
        url = raw if _is_http(raw) else f"https://{raw}"
        return self._record(span, raw, url)


class HashtagRecognizer(RegexRecognizer):
    """Matches '#tag'; links to the hashtag base, '/tags' by default."""

    kind = MatchKind.HASHTAG

    def build_record(self, span: Span, base_urls: BaseUrls) -> MatchRecord:
        tag = span.text[1:]
        return self._record(span, tag, _join_url(base_urls.hashtags or "/tags", tag))


class MentionRecognizer(RegexRecognizer):
    """Matches '@user'; links to the mention base, '/users' by default."""

    kind = MatchKind.MENTION

    def build_record(self, span: Span, base_urls: BaseUrls) -> MatchRecord:
        username = span.text[1:]
        return self._record(
            span, username, _join_url(base_urls.mentions or "/users", username)
        )


class EmailRecognizer(Recognizer):
    kind = MatchKind.EMAIL

    def iter_spans(self, text: str) -> Iterator[Span]:
        return scan_emails(text)

    def build_record(self, span: Span, base_urls: BaseUrls) -> MatchRecord:
        return self._record(span, span.text, f"mailto:{span.text}")


class PhoneRecognizer(Recognizer):
    """Matches North American style numbers with optional code and extension.

    The value is normalized to '+1 (555) 123-4567 x89' form; the link is a
    tel: URI of the bare digits with the extension after ';'.
    """

    kind = MatchKind.PHONE

    def iter_spans(self, text: str) -> Iterator[Span]:
        return scan_phones(text)

    @staticmethod
    def format_number(span: Span) -> str:
        code, area, prefix, line, ext = span.groups
        formatted = f"+{code} " if code else ""
        formatted += f"({area}) {prefix}-{line}"
        if ext:
            formatted += f" x{ext}"
        return formatted

    @staticmethod
    def tel_uri(span: Span) -> str:
        code, area, prefix, line, ext = span.groups
        value = f"+{code}" if code else ""
        value += f"{area}{prefix}{line}"
        if ext:
            value += f";{ext}"
        return f"tel:{value}"

    def extract(self, text: str) -> List[str]:
        return [self.format_number(span) for span in self.iter_spans(text)]

    def build_record(self, span: Span, base_urls: BaseUrls) -> MatchRecord:
        return self._record(span, self.format_number(span), self.tel_uri(span))


class MarkdownLinkRecognizer(RegexRecognizer):
    """Matches '[label](target)'; relative targets resolve against assets."""

    kind = MatchKind.MARKDOWN_LINK

    def build_record(self, span: Span, base_urls: BaseUrls) -> MatchRecord:
        label, target = span.groups[0], span.groups[1]
        if _is_http(target) or not base_urls.assets:
            url = target
        else:
            path = target[1:] if target.startswith("/") else target
            url = _join_url(base_urls.assets, path)
        return self._record(span, label, url)


def create_all_recognizers(config: RecognizerConfig) -> List[Recognizer]:
    """Create the enabled recognizers in the fixed checking order."""
    mapping = [
        (config.urls, UrlRecognizer),
        (config.hashtags, HashtagRecognizer),
        (config.mentions, MentionRecognizer),
        (config.emails, EmailRecognizer),
        (config.phones, PhoneRecognizer),
        (config.markdown_links, MarkdownLinkRecognizer),
    ]

    recognizers: List[Recognizer] = [cls() for enabled, cls in mapping if enabled]

    logger.debug(
        f"Initialized {len(recognizers)} recognizers",
        extra={"recognizers": [r.name for r in recognizers]},
    )
    return recognizers
