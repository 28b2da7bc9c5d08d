# textutils/core/options.py

"""Option models for the entity matcher and the mask engine.

Both models are immutable once constructed and are validated with Pydantic.
"""

from typing import Any, Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from textutils.logic.tokens import MaskToken


class RecognizerConfig(BaseModel):
    """Enable flags, one per recognizer kind.

    Setting ``all`` forces every other flag on, regardless of the value
    given for it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    urls: bool = False
    hashtags: bool = False
    mentions: bool = False
    emails: bool = False
    phones: bool = False
    markdown_links: bool = False
    markdown_headings: bool = False
    markdown_lists: bool = False
    markdown_emphasis: bool = False
    all: bool = False

    @model_validator(mode="before")
    @classmethod
    def expand_all(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("all"):
            data = dict(data)
            for name in cls.model_fields:
                data[name] = True
        return data

    @property
    def any_markdown_structure(self) -> bool:
        """True if headings, lists or emphasis are extracted."""
        return (
            self.markdown_headings
            or self.markdown_lists
            or self.markdown_emphasis
        )


class MaskOptions(BaseModel):
    """Templates and behavior switches for one masking configuration.

    Templates are tried in order and the first one that fits wins. A single
    template string is accepted in place of a list.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    templates: Tuple[str, ...] = Field(
        default=("",), description="Mask templates, tried in order."
    )
    tokens: Dict[str, MaskToken] = Field(
        default_factory=dict, description="Token overrides layered over defaults."
    )
    placeholder: str = Field(
        default="_", description="Display text for unfilled slots; informational only."
    )
    auto_clear: bool = Field(
        default=True, description="Return an empty string instead of failing."
    )
    strip_mask: bool = Field(
        default=False, description="Let strip_mask() remove non-alphanumerics."
    )
    allow_empty: bool = Field(
        default=False, description="Accept an empty input as an empty result."
    )

    @field_validator("templates", mode="before")
    @classmethod
    def coerce_templates(cls, v: Any) -> Any:
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("templates")
    @classmethod
    def validate_templates(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ensure at least one template is configured."""
        if not v:
            raise ValueError("At least one mask template is required")
        return v
