# textutils/core/loader.py

"""Pattern and mask table loader for the matcher and mask engines."""

import re
import yaml
import logging
from pathlib import Path
from typing import Dict, List, Any, Optional, Pattern, Union

from textutils.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TABLES_PATH = Path(__file__).parent / "patterns.yaml"

REQUIRED_SECTIONS = ("patterns", "markdown", "mask_tokens", "mask_presets")

_REGEX_FLAGS = {
    "IGNORECASE": re.IGNORECASE,
    "MULTILINE": re.MULTILINE,
    "DOTALL": re.DOTALL,
}


def compile_pattern(definition: Dict[str, Any]) -> Pattern[str]:
    """Compiles a pattern definition into an ASCII-mode regex.

    Word boundaries, ``\\d`` and ``\\s`` follow ASCII semantics so that
    non-Latin letters never count as word characters.

    Args:
        definition: Mapping with a 'regex' key and an optional 'flags' list

    Returns:
        Compiled regular expression

    Raises:
        ConfigurationError: If the regex or one of its flags is invalid.
    """
    flags = re.ASCII
    for name in definition.get("flags", []) or []:
        if name not in _REGEX_FLAGS:
            raise ConfigurationError(f"Unknown regex flag: {name}")
        flags |= _REGEX_FLAGS[name]

    try:
        return re.compile(definition["regex"], flags)
    except KeyError as e:
        raise ConfigurationError(f"Pattern definition has no regex: {definition}") from e
    except re.error as e:
        raise ConfigurationError(
            f"Invalid regex for {definition.get('name', '<unnamed>')}: {e}"
        ) from e


def load_tables(path: Union[str, Path] = DEFAULT_TABLES_PATH) -> Dict[str, Any]:
    """Reads and validates a pattern table file.

    Args:
        path: YAML file holding the four required sections

    Returns:
        The parsed tables

    Raises:
        ConfigurationError: If the file is missing, unparsable, empty, or
            lacks a required section.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            tables = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Pattern table file not found: {path}") from e
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error: {e}", exc_info=True)
        raise ConfigurationError(f"Failed to parse {path.name}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e

    if not isinstance(tables, dict) or not tables:
        raise ConfigurationError(f"Pattern table file is empty or invalid: {path}")

    missing = [s for s in REQUIRED_SECTIONS if s not in tables]
    if missing:
        raise ConfigurationError(f"Missing required configuration sections: {missing}")

    return tables


class PatternLoader:
    """Process-wide holder of the bundled pattern tables.

    The file is read on first use and the tables are treated as read-only
    afterwards.
    """

    _instance: Optional["PatternLoader"] = None

    def __init__(self, tables: Dict[str, Any]) -> None:
        self._tables = tables

    @classmethod
    def get_instance(cls) -> "PatternLoader":
        """Returns the shared loader, reading the bundled tables once.

        Raises:
            ConfigurationError: If the bundled tables cannot be loaded.
        """
        if cls._instance is None:
            tables = load_tables()
            cls._instance = cls(tables)
            logger.info(
                "Pattern tables loaded",
                extra={
                    "config_path": str(DEFAULT_TABLES_PATH),
                    "pattern_kinds": sorted(tables["patterns"] or {}),
                    "preset_count": len(tables["mask_presets"] or {}),
                },
            )
        return cls._instance

    def get_patterns(self, kind: str) -> List[Dict[str, Any]]:
        """Returns the regex definitions for a match kind, or [] if none."""
        return list((self._tables["patterns"] or {}).get(kind) or [])

    def get_markdown_pattern(self, name: str) -> Dict[str, Any]:
        """Returns the markdown pattern definition registered under name.

        Raises:
            ConfigurationError: If no such markdown pattern is configured.
        """
        pattern = (self._tables["markdown"] or {}).get(name)
        if not pattern:
            raise ConfigurationError(f"No markdown pattern configured for {name!r}")
        return pattern

    def get_mask_tokens(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._tables["mask_tokens"] or {})

    def get_mask_presets(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._tables["mask_presets"] or {})
