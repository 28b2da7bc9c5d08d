# textutils/logic/tokens.py

"""Mask token rules: which characters fill a placeholder and how."""

import re
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from textutils.core.exceptions import ConfigurationError
from textutils.core.loader import PatternLoader

logger = logging.getLogger(__name__)

_TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "upper": str.upper,
    "lower": str.lower,
}


@dataclass(frozen=True)
class MaskToken:
    """A placeholder rule keyed by a single template character.

    Attributes:
        accept: Predicate deciding whether an input character fills the slot
        transform: Optional normalization applied to an accepted character
    """

    accept: Callable[[str], bool]
    transform: Optional[Callable[[str], str]] = None

    @classmethod
    def from_pattern(cls, pattern: str, transform: Optional[str] = None) -> "MaskToken":
        """Builds a token accepting single characters that fully match pattern.

        Args:
            pattern: Regex describing one acceptable character
            transform: Name of a normalization ('upper' or 'lower')

        Raises:
            ConfigurationError: If the regex or transform name is invalid.
        """
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f"Invalid token pattern {pattern!r}: {e}") from e

        if transform is not None and transform not in _TRANSFORMS:
            raise ConfigurationError(f"Unknown token transform: {transform}")

        return cls(
            accept=lambda char: compiled.fullmatch(char) is not None,
            transform=_TRANSFORMS[transform] if transform else None,
        )

    def render(self, char: str) -> str:
        """Returns the accepted character as it appears in the output."""
        return self.transform(char) if self.transform else char


def build_token_table(definitions: Mapping[str, Any]) -> Dict[str, MaskToken]:
    """Builds a token table from pattern/transform definitions.

    Args:
        definitions: Mapping of token char to {'pattern', 'transform'}

    Returns:
        Dictionary of token char to MaskToken

    Raises:
        ConfigurationError: If a key is not a single character or a
            definition is malformed.
    """
    table: Dict[str, MaskToken] = {}
    for key, definition in definitions.items():
        key = str(key)
        if len(key) != 1:
            raise ConfigurationError(f"Mask token key must be one character: {key!r}")
        if not isinstance(definition, dict) or "pattern" not in definition:
            raise ConfigurationError(f"Mask token {key!r} has no pattern")
        table[key] = MaskToken.from_pattern(
            definition["pattern"], definition.get("transform")
        )
    return table


@lru_cache(maxsize=None)
def default_tokens() -> Mapping[str, MaskToken]:
    """Returns the read-only default token table, built once."""
    loader = PatternLoader.get_instance()
    table = build_token_table(loader.get_mask_tokens())
    logger.debug("Default mask tokens built", extra={"token_keys": sorted(table)})
    return MappingProxyType(table)
