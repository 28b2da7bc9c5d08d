# textutils/__init__.py

"""Text parsing and input masking utilities.

Finds linkable entities (URLs, hashtags, mentions, emails, phone numbers,
markdown links) with their positions, and formats raw values against
positional mask templates.
"""

from textutils.core.definitions import MatchKind
from textutils.core.domain import BaseUrls, MatchRecord, ParseResult, ProcessResult
from textutils.core.exceptions import (
    ConfigurationError,
    MaskError,
    TextUtilsError,
    UnknownPresetError,
    ValidationError,
)
from textutils.core.options import MaskOptions, RecognizerConfig
from textutils.engine.matcher import EntityMatcher, create_matcher, default_matcher
from textutils.logic.mask import MaskEngine, create_mask, default_mask
from textutils.logic.tokens import MaskToken
from textutils.service.pipeline import TextUtils, create_text_utils, process_text

__all__ = [
    "MatchKind",
    "BaseUrls",
    "MatchRecord",
    "ParseResult",
    "ProcessResult",
    "TextUtilsError",
    "ConfigurationError",
    "MaskError",
    "UnknownPresetError",
    "ValidationError",
    "MaskOptions",
    "RecognizerConfig",
    "EntityMatcher",
    "create_matcher",
    "default_matcher",
    "MaskEngine",
    "create_mask",
    "default_mask",
    "MaskToken",
    "TextUtils",
    "create_text_utils",
    "process_text",
]
__version__ = "1.0.2"
