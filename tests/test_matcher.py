"""Tests for the entity matcher and its recognizers."""

import re

import pytest

from textutils import (
    BaseUrls,
    EntityMatcher,
    MatchKind,
    RecognizerConfig,
    create_matcher,
    default_matcher,
)


@pytest.fixture
def matcher():
    return EntityMatcher()


# ── find_elements ────────────────────────────────────────────────────

def test_mixed_text_yields_ordered_annotated_matches(matcher):
    text = "Call 1234567890 or visit https://example.com! #support @sarah"
    matches = matcher.find_elements(text)

    assert [m.kind for m in matches] == [
        MatchKind.PHONE,
        MatchKind.URL,
        MatchKind.HASHTAG,
        MatchKind.MENTION,
    ]

    phone, url, hashtag, mention = matches
    assert phone.raw_text == "1234567890"
    assert phone.value == "(123) 456-7890"
    assert phone.url == "tel:1234567890"

    assert url.raw_text == "https://example.com"
    assert url.url == "https://example.com"

    assert hashtag.value == "support"
    assert hashtag.url == "/tags/support"

    assert mention.value == "sarah"
    assert mention.url == "/users/sarah"


def test_spans_are_sorted_and_match_source(matcher):
    text = (
        "Mail ann@mail.example.org or call +44 (20) 7946-0958? "
        "Try (555) 123-4567 x12, see [docs](/guide) and #a1 @b_2 www.site.io/x"
    )
    matches = matcher.find_elements(text)
    assert matches
    starts = [m.start for m in matches]
    assert starts == sorted(starts)
    for m in matches:
        assert 0 <= m.start <= m.end <= len(text)
        assert text[m.start:m.end] == m.raw_text


def test_tags_round_trip_with_their_sigil(matcher):
    text = "#python and #py-3.12 with @alice.b and @bob_"
    for m in matcher.find_elements(text):
        if m.kind == MatchKind.HASHTAG:
            assert "#" + m.value == m.raw_text
        elif m.kind == MatchKind.MENTION:
            assert "@" + m.value == m.raw_text


def test_hashtag_needs_a_letter_and_no_word_before(matcher):
    values = [m.value for m in matcher.find_elements("#1st a#b #ok") if m.kind == "hashtag"]
    assert values == ["ok"]


def test_phone_value_keeps_digits_in_order(matcher):
    text = "Call +1 (555) 123-4567 x89 or 800.555.0199"
    phones = [m for m in matcher.find_elements(text) if m.kind == MatchKind.PHONE]
    assert len(phones) == 2
    for m in phones:
        assert re.sub(r"\D", "", m.value) == re.sub(r"\D", "", m.raw_text)

    assert phones[0].value == "+1 (555) 123-4567 x89"
    assert phones[0].url == "tel:+15551234567;89"
    assert phones[1].value == "(800) 555-0199"


def test_email_and_its_domain_are_both_kept(matcher):
    matches = matcher.find_elements("Mail john@example.com")
    assert [(m.kind, m.raw_text) for m in matches] == [
        (MatchKind.EMAIL, "john@example.com"),
        (MatchKind.URL, "example.com"),
    ]
    assert matches[0].url == "mailto:john@example.com"
    assert matches[1].url == "https://example.com"


def test_same_start_keeps_recognizer_order(matcher):
    matches = matcher.find_elements("ab.cd@ef.gh")
    assert [(m.kind, m.start) for m in matches] == [
        (MatchKind.URL, 0),
        (MatchKind.EMAIL, 0),
        (MatchKind.URL, 6),
    ]


def test_base_urls_trailing_slash_is_stripped(matcher):
    base = BaseUrls(hashtags="https://site.test/t/", mentions="https://site.test/u")
    matches = matcher.find_elements("#python @guido", base)
    assert [m.url for m in matches] == [
        "https://site.test/t/python",
        "https://site.test/u/guido",
    ]


def test_markdown_link_targets():
    matcher = EntityMatcher(RecognizerConfig(markdown_links=True))
    text = "See [docs](/guide/start) and [site](https://x.io)"

    plain = matcher.find_elements(text)
    assert [(m.value, m.url) for m in plain] == [
        ("docs", "/guide/start"),
        ("site", "https://x.io"),
    ]

    based = matcher.find_elements(text, BaseUrls(assets="https://cdn.test/"))
    assert [m.url for m in based] == ["https://cdn.test/guide/start", "https://x.io"]
    assert based[0].raw_text == "[docs](/guide/start)"


def test_only_enabled_recognizers_run():
    matcher = EntityMatcher(RecognizerConfig(hashtags=True))
    matches = matcher.find_elements("#tag @user https://a.io 5551234567")
    assert [m.kind for m in matches] == [MatchKind.HASHTAG]


def test_all_flag_enables_everything():
    matcher = EntityMatcher(RecognizerConfig(all=True, urls=False))
    assert [r.kind for r in matcher.recognizers] == list(MatchKind.ALL)


def test_no_matches_is_an_empty_list(matcher):
    assert matcher.find_elements("") == []
    assert matcher.find_elements("nothing to see here") == []


def test_records_name_their_recognizer(matcher):
    (match,) = matcher.find_elements("#tag")
    assert match.rule_name == "HashtagRecognizer"


# ── parse ────────────────────────────────────────────────────────────

def test_parse_returns_raw_strings(matcher):
    result = matcher.parse("Hi @ann, see #news at news.io or mail a@b.co, 555-123-4567")
    assert result.hashtags == ["#news"]
    assert result.mentions == ["@ann"]
    assert result.emails == ["a@b.co"]
    assert result.phones == ["(555) 123-4567"]
    assert "news.io" in result.urls


def test_parse_markdown_structure(matcher):
    text = "# Title\n## Sub\n- one\n* two\n1. first\nSome **bold** and _it_ [x](y.md)"
    markdown = matcher.parse(text).markdown

    assert [(h.level, h.text) for h in markdown.headings] == [(1, "Title"), (2, "Sub")]
    assert markdown.bullet_items == ["one", "two"]
    assert markdown.numbered_items == ["first"]
    assert markdown.bold == ["bold"]
    assert "it" in markdown.italic
    assert [(l.text, l.url) for l in markdown.links] == [("x", "y.md")]


def test_parse_markdown_structure_with_crlf_line_endings(matcher):
    markdown = matcher.parse("# Title\r\n- item\r\n2. step\r\n").markdown

    assert [(h.level, h.text) for h in markdown.headings] == [(1, "Title")]
    assert markdown.bullet_items == ["item"]
    assert markdown.numbered_items == ["step"]


def test_parse_skips_disabled_kinds():
    matcher = EntityMatcher(RecognizerConfig(urls=True))
    result = matcher.parse("# Head\n#tag https://a.io")
    assert result.urls == ["https://a.io"]
    assert result.hashtags == []
    assert result.markdown.headings == []


def test_parse_many(matcher):
    results = matcher.parse_many(["#a", "@b"])
    assert [r.hashtags for r in results] == [["#a"], []]
    assert [r.mentions for r in results] == [[], ["@b"]]


def test_long_near_miss_text_has_no_email():
    matcher = EntityMatcher(RecognizerConfig(emails=True))
    assert matcher.find_elements("a." * 20000) == []


# ── Factories ────────────────────────────────────────────────────────

def test_create_matcher_and_default_matcher():
    assert [r.kind for r in create_matcher().recognizers] == list(MatchKind.ALL)
    only_urls = create_matcher(RecognizerConfig(urls=True))
    assert [r.kind for r in only_urls.recognizers] == [MatchKind.URL]
    assert default_matcher() is default_matcher()
