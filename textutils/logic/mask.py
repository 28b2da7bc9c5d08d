# textutils/logic/mask.py

"""Input mask engine: validates and reformats values against templates.

A template is a string where every character is either a token key (a
placeholder filled from the input), the optional marker ``?`` (all later
placeholders become optional), or a literal copied into the output.
"""

import re
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from textutils.core.exceptions import ConfigurationError, MaskError, UnknownPresetError
from textutils.core.loader import PatternLoader
from textutils.core.options import MaskOptions
from textutils.logic.tokens import MaskToken, build_token_table, default_tokens

logger = logging.getLogger(__name__)

OPTIONAL_MARKER = "?"

MaskSelector = Union[str, MaskOptions, None]

_NON_ALPHANUM = re.compile(r"[^0-9a-zA-Z]")


def process_value(
    value: str,
    template: str,
    tokens: Mapping[str, MaskToken],
    options: MaskOptions,
) -> Optional[str]:
    """Runs value through a single template.

    The input cursor only moves forward. A literal is always written to the
    output and consumes the input character only when it is that same
    literal. Before the optional marker, a rejected character fails the
    template; after it, rejected characters are skipped.

    Args:
        value: Raw input value
        template: Mask template
        tokens: Token table in effect
        options: Options supplying auto_clear

    Returns:
        The formatted value, an empty string when the template fails with
        auto_clear set, or None when it fails otherwise.
    """
    result: List[str] = []
    cursor = 0
    optional = False
    size = len(value)

    for mask_char in template:
        if cursor >= size:
            if optional:
                return "".join(result)
            return "" if options.auto_clear else None

        if mask_char == OPTIONAL_MARKER:
            optional = True
            continue

        token = tokens.get(mask_char)
        if token is None:
            result.append(mask_char)
            if value[cursor] == mask_char:
                cursor += 1
            continue

        while cursor < size:
            char = value[cursor]
            cursor += 1
            if token.accept(char):
                result.append(token.render(char))
                break
            if not optional:
                return "" if options.auto_clear else None

    return "".join(result)


def _build_preset(name: str, definition: Dict) -> MaskOptions:
    try:
        return MaskOptions(
            templates=definition["mask"],
            tokens=build_token_table(definition.get("tokens", {}) or {}),
            placeholder=definition.get("placeholder", "_"),
            auto_clear=definition.get("auto_clear", False),
            strip_mask=definition.get("strip_mask", False),
            allow_empty=definition.get("allow_empty", False),
        )
    except KeyError as e:
        raise ConfigurationError(f"Mask preset {name!r} has no mask") from e
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid mask preset {name!r}: {e}") from e


@lru_cache(maxsize=None)
def _preset_table() -> Mapping[str, MaskOptions]:
    loader = PatternLoader.get_instance()
    presets = {
        name: _build_preset(name, definition)
        for name, definition in loader.get_mask_presets().items()
    }
    logger.info("Mask presets built", extra={"preset_names": sorted(presets)})
    return MappingProxyType(presets)


class MaskEngine:
    """Applies mask templates to raw values.

    The instance token table is the default table with the caller's token
    overrides layered on top. Named presets are always available,
    independent of the instance options. Instances hold no mutable state
    and can be shared freely.
    """

    def __init__(self, options: Optional[MaskOptions] = None) -> None:
        self.options = options or MaskOptions()
        self.tokens: Mapping[str, MaskToken] = MappingProxyType(
            {**default_tokens(), **self.options.tokens}
        )

    @staticmethod
    def preset(name: str) -> MaskOptions:
        """Returns the preset registered under name.

        Raises:
            UnknownPresetError: If no preset has that name.
        """
        presets = _preset_table()
        if name not in presets:
            raise UnknownPresetError(name)
        return presets[name]

    @staticmethod
    def preset_names() -> List[str]:
        return list(_preset_table())

    def resolve(self, selector: MaskSelector = None) -> MaskOptions:
        """Resolves a selector to the options it designates.

        Args:
            selector: None for the instance options, a preset name, or an
                explicit MaskOptions

        Raises:
            UnknownPresetError: If a preset name is not in the table.
            MaskError: If the selector has an unsupported type.
        """
        if selector is None:
            return self.options
        if isinstance(selector, MaskOptions):
            return selector
        if isinstance(selector, str):
            return self.preset(selector)
        raise MaskError(f"Unsupported mask selector type: {type(selector).__name__}")

    def apply(self, value: str, selector: MaskSelector = None) -> str:
        """Formats value with the first template of the selection that fits.

        Falls back to an empty string when nothing fits; see process_value
        for the single-template rules.
        """
        options = self.resolve(selector)
        tokens = {**self.tokens, **options.tokens}

        for template in options.templates:
            result = process_value(value, template, tokens, options)
            if result is not None:
                return result

        if options.allow_empty and not value:
            return ""

        return process_value(value, options.templates[0], tokens, options) or ""

    def strip_mask(self, value: str) -> str:
        """Removes every non-alphanumeric character when strip_mask is enabled."""
        if not self.options.strip_mask:
            return value
        return _NON_ALPHANUM.sub("", value)

    def is_complete(self, value: str, selector: MaskSelector = None) -> bool:
        """Returns True if any template of the selection accepts value."""
        options = self.resolve(selector)
        tokens = {**self.tokens, **options.tokens}
        return any(
            process_value(value, template, tokens, options) is not None
            for template in options.templates
        )


def create_mask(options: Optional[MaskOptions] = None) -> MaskEngine:
    return MaskEngine(options)


@lru_cache(maxsize=None)
def default_mask() -> MaskEngine:
    """Returns the shared mask engine with default options."""
    return MaskEngine()
