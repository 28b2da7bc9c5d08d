# textutils/service/pipeline.py

"""Facade combining the entity matcher and the mask engine."""

import re
import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from textutils.core.definitions import MatchKind
from textutils.core.domain import BaseUrls, MatchRecord, ParseResult, ProcessResult
from textutils.core.exceptions import TextUtilsError, ValidationError
from textutils.core.options import MaskOptions, RecognizerConfig
from textutils.engine.matcher import EntityMatcher
from textutils.logic.formatters import Amount, format_currency_amount
from textutils.logic.mask import MaskEngine, MaskSelector
from textutils.service.config import Settings, settings

logger = logging.getLogger(__name__)

_NON_DIGIT = re.compile(r"\D")


class TextUtils:
    """Parsing, linking and formatting behind one object.

    Wires an EntityMatcher and a MaskEngine together; every method is a
    thin call into one of them, except process_text which merges both.
    """

    def __init__(
        self,
        parser: Optional[RecognizerConfig] = None,
        mask: Optional[MaskOptions] = None,
        config: Optional[Settings] = None,
    ) -> None:
        """Initialize the facade.

        Args:
            parser: Recognizer enable flags; all recognizers by default
            mask: Options for the instance mask (presets are always available)
            config: Settings supplying default link bases and presets
        """
        self.config = config or settings
        self.matcher = EntityMatcher(parser)
        self.masker = MaskEngine(mask)

    # Parsing

    def parse(self, text: str) -> ParseResult:
        return self.matcher.parse(text)

    def parse_many(self, texts: Iterable[str]) -> List[ParseResult]:
        return self.matcher.parse_many(texts)

    def find_linkable_elements(
        self, text: str, base_urls: Optional[BaseUrls] = None
    ) -> List[MatchRecord]:
        """Finds positioned matches; link bases default to the settings."""
        return self.matcher.find_elements(text, base_urls or self.config.base_urls)

    # Masking

    def mask(self, value: str, selector: MaskSelector = None) -> str:
        return self.masker.apply(value, selector)

    def strip_mask(self, value: str) -> str:
        return self.masker.strip_mask(value)

    def is_complete(self, value: str, selector: MaskSelector = None) -> bool:
        return self.masker.is_complete(value, selector)

    def format_phone_number(self, phone: str) -> str:
        return self.masker.apply(phone, self.config.phone_preset)

    def format_date(self, date: str) -> str:
        return self.masker.apply(date, self.config.date_preset)

    def format_currency(self, amount: Amount) -> str:
        """Formats an amount as '$1,234.50'; see format_currency_amount."""
        return format_currency_amount(amount, self.masker)

    # Bulk extraction

    def extract_urls(self, text: str) -> List[str]:
        return self.matcher.parse(text).urls

    def extract_mentions(self, text: str) -> List[str]:
        return self.matcher.parse(text).mentions

    def extract_hashtags(self, text: str) -> List[str]:
        return self.matcher.parse(text).hashtags

    def extract_emails(self, text: str) -> List[str]:
        return self.matcher.parse(text).emails

    def extract_phones(self, text: str) -> List[str]:
        return self.matcher.parse(text).phones

    # Combined

    def process_text(
        self,
        text: str,
        types: Optional[Iterable[str]] = None,
        base_urls: Optional[BaseUrls] = None,
        mask_phones: bool = False,
    ) -> ProcessResult:
        """Finds linkable elements and optionally reformats phone values.

        Args:
            text: Text to scan
            types: Kinds to keep in 'filtered' ('phones' or 'phone' style);
                all matches are kept when omitted
            base_urls: Link bases; defaults to the settings
            mask_phones: Reformat phone values through the phone preset.
                A value the preset cannot format without losing digits
                is left unchanged.

        Returns:
            ProcessResult with all matches and the filtered subset

        Raises:
            ValidationError: If text is not a string.
        """
        if not isinstance(text, str):
            raise ValidationError(f"Expected text as str, got {type(text).__name__}")

        matches = self.find_linkable_elements(text, base_urls)

        if mask_phones:
            matches = [self._mask_phone(m) for m in matches]

        if types is None:
            filtered = list(matches)
        else:
            wanted = {MatchKind.normalize(t) for t in types}
            filtered = [m for m in matches if m.kind in wanted]

        return ProcessResult(
            matches=matches,
            filtered=filtered,
            original_text=text,
            metadata={"match_count": len(matches), "filtered_count": len(filtered)},
        )

    def _mask_phone(self, match: MatchRecord) -> MatchRecord:
        if match.kind != MatchKind.PHONE:
            return match
        formatted = self.format_phone_number(match.value)
        # Keep the recognized value when the preset would drop digits.
        if _NON_DIGIT.sub("", formatted) != _NON_DIGIT.sub("", match.value):
            return match
        return replace(match, value=formatted)


def create_text_utils(
    parser: Optional[RecognizerConfig] = None,
    mask: Optional[MaskOptions] = None,
    config: Optional[Settings] = None,
) -> TextUtils:
    """Factory function to create a new TextUtils instance."""
    return TextUtils(parser=parser, mask=mask, config=config)


class TextUtilsService:
    """Singleton holder for the default, all-recognizer TextUtils.

    Provides thread-safe lazy construction of the shared instance.
    """

    _instance: Optional[TextUtils] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> TextUtils:
        """Returns the shared TextUtils instance.

        Raises:
            TextUtilsError: If the pattern tables cannot be loaded.
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    logger.info("Initializing default text utilities")
                    cls._instance = TextUtils(parser=RecognizerConfig(all=True))
                    logger.info("Default text utilities initialized successfully")

        return cls._instance


def process_text(
    text: str,
    types: Optional[Iterable[str]] = None,
    mask_phones: bool = True,
) -> ProcessResult:
    """Main entry point for processing text with the default instance.

    Args:
        text: Input text to scan
        types: Kinds to keep in the filtered list
        mask_phones: Reformat phone values through the phone preset

    Returns:
        ProcessResult with matches and metadata.
        On failure, returns a result indicating the error safely.
    """
    if not text:
        logger.warning("Empty text provided for processing")
        return ProcessResult(
            original_text="",
            metadata={"error": "Empty input provided"},
        )

    try:
        utils = TextUtilsService.get_instance()

        logger.info(
            "Starting text processing request",
            extra={"text_length": len(str(text)), "mask_phones": mask_phones},
        )

        return utils.process_text(text, types=types, mask_phones=mask_phones)

    except TextUtilsError as e:
        logger.error(
            f"Known error during processing: {type(e).__name__}",
            exc_info=True,
            extra={"text_length": len(str(text))},
        )
        return ProcessResult(
            original_text=str(text),
            metadata={
                "error": "The text service encountered a processing error.",
                "status": "failed",
                "error_type": type(e).__name__,
            },
        )
