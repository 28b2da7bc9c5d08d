# textutils/core/domain.py

"""Domain models for match and parse results."""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class Span:
    """A raw grammar hit in the scanned text, before annotation.

    Attributes:
        start: Starting character position in the scanned text
        end: Ending character position (exclusive)
        text: Matched text, equal to ``source[start:end]``
        groups: Captured sub-groups, ``None`` where a group did not take part
    """

    start: int
    end: int
    text: str
    groups: Tuple[Optional[str], ...] = ()


@dataclass(frozen=True)
class MatchRecord:
    """Represents a single located, typed and annotated entity.

    Attributes:
        kind: Kind of entity (see MatchKind)
        raw_text: Original text of the entity
        value: Extracted payload (tag without '#', formatted phone, link label)
        start: Starting character position in original text
        end: Ending character position in original text
        url: Link target for the entity, if any
        rule_name: Name of the recognizer that produced this record
    """

    kind: str
    raw_text: str
    value: str
    start: int
    end: int
    url: Optional[str] = None
    rule_name: str = "Unknown"


@dataclass(frozen=True)
class BaseUrls:
    """Optional link bases used when annotating matches."""

    hashtags: Optional[str] = None
    mentions: Optional[str] = None
    assets: Optional[str] = None


@dataclass(frozen=True)
class MarkdownLink:
    text: str
    url: str


@dataclass(frozen=True)
class MarkdownHeading:
    level: int
    text: str


@dataclass
class MarkdownResult:
    """Structured markdown extraction; not positioned."""

    links: List[MarkdownLink] = field(default_factory=list)
    headings: List[MarkdownHeading] = field(default_factory=list)
    bullet_items: List[str] = field(default_factory=list)
    numbered_items: List[str] = field(default_factory=list)
    bold: List[str] = field(default_factory=list)
    italic: List[str] = field(default_factory=list)


@dataclass
class ParseResult:
    """Raw string matches per kind, plus markdown structure.

    Attributes:
        urls: URL texts as they appear in the input
        hashtags: Hashtags including the leading '#'
        mentions: Mentions including the leading '@'
        emails: Email addresses
        phones: Phone numbers, formatted
        markdown: Markdown links, headings, list items and emphasis
    """

    urls: List[str] = field(default_factory=list)
    hashtags: List[str] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    phones: List[str] = field(default_factory=list)
    markdown: MarkdownResult = field(default_factory=MarkdownResult)


@dataclass
class ProcessResult:
    """Result object returned by the combined processing operation.

    Attributes:
        matches: All positioned matches, ordered by start
        filtered: Matches restricted to the requested kinds
        original_text: Input text for reference
        metadata: Additional processing information
    """

    matches: List[MatchRecord] = field(default_factory=list)
    filtered: List[MatchRecord] = field(default_factory=list)
    original_text: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
