"""Length functions used to measure chunks.

Chunk limits are measured in characters (Unicode code points) by default.
A tiktoken encoder can be used instead so limits line up with the token
budgets of embedding models.
"""

from collections.abc import Callable
from functools import lru_cache

import tiktoken

from mdsplit.lib.errors import ConfigError
from mdsplit.models.config import LengthUnit

LengthFunction = Callable[[str], int]


@lru_cache(maxsize=8)
def _get_encoding(encoding_name: str) -> tiktoken.Encoding:
    """Load (once) the tiktoken encoding with the given name."""
    return tiktoken.get_encoding(encoding_name)


def token_length(encoding_name: str = "cl100k_base") -> LengthFunction:
    """Build a length function counting tiktoken tokens.

    Args:
        encoding_name: tiktoken encoding name.

    Returns:
        Function returning the token count of a string.

    Raises:
        ConfigError: If the encoding is unknown.
    """
    try:
        encoding = _get_encoding(encoding_name)
    except ValueError as exc:
        raise ConfigError("encoding_name", str(exc)) from exc

    def _count(text: str) -> int:
        if not text:
            return 0
        return len(encoding.encode(text))

    return _count


def get_length_function(
    unit: LengthUnit | str = LengthUnit.chars,
    encoding_name: str = "cl100k_base",
) -> LengthFunction:
    """Return the length function for a length unit.

    Args:
        unit: ``chars`` or ``tokens``.
        encoding_name: tiktoken encoding, only used for ``tokens``.

    Returns:
        ``len`` for characters, a tiktoken counter for tokens.

    Raises:
        ConfigError: If the unit is unknown.
    """
    try:
        unit = LengthUnit(unit)
    except ValueError as exc:
        raise ConfigError("length_unit", f"unknown length unit {unit!r}") from exc

    if unit is LengthUnit.tokens:
        return token_length(encoding_name)
    return len
