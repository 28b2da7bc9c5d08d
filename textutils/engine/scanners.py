# textutils/engine/scanners.py

"""Linear-time scanners for the URL and phone number grammars.

Both grammars are ambiguous enough that a backtracking regex can go
quadratic on long near-miss inputs. These scanners make the same
leftmost, greedy choices a regex engine would, but every decision is
bounded: per-token facts are computed once and reused for every start
position inside the token.

URL grammar (case-insensitive)::

    \\b(https?://|www\\.)\\S+\\.[a-z]{2,}(/\\S*)?
    \\b[a-z0-9-]+\\.[a-z]{2,}(/\\S*)?\\b

Phone grammar::

    (\\+?\\d{1,3})?[-. (]*\\d{3}[-. )]*\\d{3}[-. ]*\\d{4}( *x\\d+)?\\b
"""

import string
from typing import Iterator, Optional, Tuple

from textutils.core.domain import Span

_WORD = frozenset(string.ascii_letters + string.digits + "_")
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_LABEL = frozenset(string.ascii_letters + string.digits + "-")

_URL_PREFIXES = ("https://", "http://", "www.")

_AREA_SEPARATORS = frozenset("-. (")
_PREFIX_SEPARATORS = frozenset("-. )")
_LINE_SEPARATORS = frozenset("-. ")
_SPACE = frozenset(" ")


def _is_word(text: str, i: int) -> bool:
    return 0 <= i < len(text) and text[i] in _WORD


def _at_boundary(text: str, i: int) -> bool:
    """ASCII word boundary test at position i (between i-1 and i)."""
    return _is_word(text, i - 1) != _is_word(text, i)


def _run_end(text: str, i: int, chars: frozenset) -> int:
    """Returns the end of the run of chars starting at i."""
    n = len(text)
    while i < n and text[i] in chars:
        i += 1
    return i


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


class _UrlScanner:
    """Scans one text for URLs, caching facts about the current token."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.size = len(text)
        self._token_end = -1
        self._last_dot = -1
        self._last_boundary = -1
        self._label_end = -1

    def _enter_token(self, i: int) -> None:
        """Computes facts for the whitespace-delimited token containing i."""
        if i < self._token_end:
            return

        text = self.text
        end = i
        while end < self.size and not text[end].isspace():
            end += 1
        self._token_end = end

        # Last '.' followed by two letters: where a greedy \S+ stops.
        self._last_dot = -1
        for k in range(end - 3, i - 1, -1):
            if text[k] == "." and text[k + 1] in _LETTERS and text[k + 2] in _LETTERS:
                self._last_dot = k
                break

        # Last word boundary inside the token: where a greedy \S* path stops.
        self._last_boundary = -1
        for p in range(end, i, -1):
            if _at_boundary(text, p):
                self._last_boundary = p
                break

    def _match_prefixed(self, i: int) -> Optional[int]:
        text = self.text
        head = text[i : i + 8].lower()
        prefix = next((p for p in _URL_PREFIXES if head.startswith(p)), None)
        if prefix is None:
            return None

        body = i + len(prefix)
        # \S+ needs at least one character before the dot.
        if self._last_dot < body + 1:
            return None

        tld_end = _run_end(text, self._last_dot + 1, _LETTERS)
        if tld_end < self.size and text[tld_end] == "/":
            return self._token_end
        return tld_end

    def _match_bare(self, i: int) -> Optional[int]:
        text = self.text
        if text[i] not in _LABEL:
            return None

        if i >= self._label_end:
            self._label_end = _run_end(text, i, _LABEL)
        dot = self._label_end
        if dot >= self.size or text[dot] != ".":
            return None

        tld_end = _run_end(text, dot + 1, _LETTERS)
        if tld_end - (dot + 1) < 2:
            return None

        if tld_end < self.size and text[tld_end] == "/":
            if self._last_boundary >= tld_end + 1:
                return self._last_boundary
        if _at_boundary(text, tld_end):
            return tld_end
        return None

    def scan(self) -> Iterator[Span]:
        text = self.text
        i = 0
        while i < self.size:
            if text[i].isspace():
                i += 1
                continue

            self._enter_token(i)
            end = None
            if _at_boundary(text, i):
                end = self._match_prefixed(i)
                if end is None:
                    end = self._match_bare(i)

            if end is None:
                i += 1
                continue

            yield Span(start=i, end=end, text=text[i:end])
            i = end


def scan_urls(text: str) -> Iterator[Span]:
    """Yields non-overlapping URL spans from left to right."""
    return _UrlScanner(text).scan()


# ---------------------------------------------------------------------------
# Phone numbers
# ---------------------------------------------------------------------------


def _digits(text: str, i: int, count: int) -> int:
    """Returns the end of exactly count ASCII digits at i, or -1."""
    end = i + count
    if end > len(text):
        return -1
    for j in range(i, end):
        if text[j] not in _DIGITS:
            return -1
    return end


def _match_phone_body(
    text: str, i: int
) -> Optional[Tuple[int, str, str, str, Optional[str]]]:
    """Matches separators, area, prefix, line and extension from i.

    Returns:
        (end, area, prefix, line, extension) or None
    """
    area_start = _run_end(text, i, _AREA_SEPARATORS)
    area_end = _digits(text, area_start, 3)
    if area_end < 0:
        return None

    prefix_start = _run_end(text, area_end, _PREFIX_SEPARATORS)
    prefix_end = _digits(text, prefix_start, 3)
    if prefix_end < 0:
        return None

    line_start = _run_end(text, prefix_end, _LINE_SEPARATORS)
    line_end = _digits(text, line_start, 4)
    if line_end < 0:
        return None

    area = text[area_start:area_end]
    prefix = text[prefix_start:prefix_end]
    line = text[line_start:line_end]

    marker = _run_end(text, line_end, _SPACE)
    if marker < len(text) and text[marker] == "x":
        ext_end = _run_end(text, marker + 1, _DIGITS)
        if ext_end > marker + 1 and not _is_word(text, ext_end):
            return ext_end, area, prefix, line, text[marker + 1 : ext_end]

    if _is_word(text, line_end):
        return None
    return line_end, area, prefix, line, None


def _match_phone(text: str, start: int) -> Optional[Span]:
    n = len(text)

    # Country code first: optional '+', then the longest 1-3 digit run
    # that still lets the rest of the number match.
    code_start = start + 1 if text[start] == "+" else start
    run = 0
    while run < 3 and code_start + run < n and text[code_start + run] in _DIGITS:
        run += 1

    for length in range(run, 0, -1):
        body = _match_phone_body(text, code_start + length)
        if body is not None:
            end, area, prefix, line, ext = body
            code = text[code_start : code_start + length]
            return Span(start, end, text[start:end], (code, area, prefix, line, ext))

    if text[start] == "+":
        return None

    body = _match_phone_body(text, start)
    if body is None:
        return None
    end, area, prefix, line, ext = body
    return Span(start, end, text[start:end], (None, area, prefix, line, ext))


def scan_phones(text: str) -> Iterator[Span]:
    """Yields non-overlapping phone number spans from left to right.

    A span starts at '+', '(' or a digit. Groups are
    (country_code, area, prefix, line, extension), with None for the
    optional parts that are absent.
    """
    n = len(text)
    i = 0
    failed_area_start = -1
    while i < n:
        char = text[i]
        if char == "(":
            # Every '(' in one separator run reaches the same area digits.
            area_start = _run_end(text, i, _AREA_SEPARATORS)
            if area_start == failed_area_start:
                i += 1
                continue
            span = _match_phone(text, i)
            if span is None:
                failed_area_start = area_start
        elif char == "+" or char in _DIGITS:
            span = _match_phone(text, i)
        else:
            span = None

        if span is None:
            i += 1
            continue

        yield span
        i = span.end


# ---------------------------------------------------------------------------
# Email addresses
# ---------------------------------------------------------------------------

_EMAIL_LOCAL = frozenset(string.ascii_letters + string.digits + "._%+-")
_EMAIL_DOMAIN = frozenset(string.ascii_letters + string.digits + ".-")


def _match_email_domain(text: str, at: int) -> Optional[int]:
    """Returns the end of the 'domain.tld' part after the '@' at at, or None.

    The domain run is walked right to left so the rightmost dot followed
    by 2+ letters and then a non-word character wins, as a greedy regex
    would choose.
    """
    run_end = _run_end(text, at + 1, _EMAIL_DOMAIN)
    dot = text.rfind(".", at + 2, run_end)
    while dot >= 0:
        tld_end = _run_end(text, dot + 1, _LETTERS)
        if tld_end - (dot + 1) >= 2 and not _is_word(text, tld_end):
            return tld_end
        dot = text.rfind(".", at + 2, dot)
    return None


def scan_emails(text: str) -> Iterator[Span]:
    """Yields non-overlapping email spans from left to right.

    Grammar (case-insensitive)::

        \\b[a-z0-9._%+-]+@[a-z0-9.-]+\\.[a-z]{2,}\\b

    Each candidate is anchored on an '@'. The local part is the run of
    local characters before it, starting at its leftmost word boundary.
    """
    last_end = 0
    at = text.find("@")
    while at >= 0:
        start = at
        while start > last_end and text[start - 1] in _EMAIL_LOCAL:
            start -= 1
        while start < at and not _at_boundary(text, start):
            start += 1

        end = _match_email_domain(text, at) if start < at else None
        if end is not None:
            yield Span(start, end, text[start:end])
            last_end = end

        at = text.find("@", at + 1)
