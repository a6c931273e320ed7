"""Configuration models for the markdown splitter."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mdsplit.config.defaults import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING_NAME,
    DEFAULT_SEPARATORS,
)
from mdsplit.lib.logging_config import get_logger

logger = get_logger(__name__)


class LengthUnit(str, Enum):
    """Unit used to measure chunk length."""

    chars = "chars"
    tokens = "tokens"


class SplitterConfig(BaseModel):
    """Limits and measuring rules for a markdown split.

    ``chunk_overlap >= chunk_size`` is accepted but logged, since every
    fallback split then carries more repeated text than new text.
    """

    model_config = ConfigDict(extra="forbid")

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    chunk_overlap: int = Field(default=DEFAULT_CHUNK_OVERLAP, ge=0)
    separators: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEPARATORS),
        description="Fallback splitter tiers, most preferred first.",
    )
    length_unit: LengthUnit = LengthUnit.chars
    encoding_name: str = Field(
        default=DEFAULT_ENCODING_NAME,
        description="tiktoken encoding used when length_unit is 'tokens'.",
    )

    @field_validator("separators")
    @classmethod
    def validate_separators(cls, value: list[str]) -> list[str]:
        """Ensure at least one non-empty separator is configured."""
        if not any(value):
            raise ValueError("separators must contain at least one non-empty string")
        return value

    @model_validator(mode="after")
    def warn_on_large_overlap(self) -> "SplitterConfig":
        """Log when the overlap is not smaller than the chunk size."""
        if self.chunk_overlap >= self.chunk_size:
            logger.warning(
                f"chunk_overlap ({self.chunk_overlap}) is not smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self
