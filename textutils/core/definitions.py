# textutils/core/definitions.py

"""Match kind constants for linkable text entities."""


class MatchKind:
    """Constants representing the kinds of positioned matches."""

    URL = "url"
    HASHTAG = "hashtag"
    MENTION = "mention"
    EMAIL = "email"
    PHONE = "phone"
    MARKDOWN_LINK = "markdown-link"

    # Fixed recognizer checking order; ties in position keep this order.
    ALL = (URL, HASHTAG, MENTION, EMAIL, PHONE, MARKDOWN_LINK)

    # Plural aliases accepted by bulk filters (e.g. "urls" -> "url").
    PLURALS = {
        "urls": URL,
        "hashtags": HASHTAG,
        "mentions": MENTION,
        "emails": EMAIL,
        "phones": PHONE,
        "markdown-links": MARKDOWN_LINK,
    }

    @classmethod
    def normalize(cls, name: str) -> str:
        """Maps a plural alias to its kind; kinds pass through unchanged."""
        return cls.PLURALS.get(name, name)
