"""Report SplitterConfig validation failures as ConfigError."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from mdsplit.lib.errors import ConfigError


def setting_name(error: Mapping[str, Any]) -> str:
    """Top-level setting a pydantic error belongs to.

    Nested locations such as ``("separators", 0)`` collapse to the setting
    itself; model-level errors have no location and map to ``splitter``.
    """
    loc = error.get("loc", ())
    return str(loc[0]) if loc else "splitter"


def config_error_from_validation(
    exc: PydanticValidationError,
    env_sources: Mapping[str, str] | None = None,
) -> ConfigError:
    """Build one ConfigError from every failure in ``exc``.

    Args:
        exc: Error raised while constructing SplitterConfig.
        env_sources: Setting name to the ``MDSPLIT_*`` variable its value
            came from.

    Returns:
        ConfigError for the first failing setting, its message listing all
        failures as ``setting: reason``.

    Example:
        >>> from mdsplit.models.config import SplitterConfig
        >>> try:
        ...     SplitterConfig(chunk_size=0)
        ... except PydanticValidationError as e:
        ...     error = config_error_from_validation(e)
        >>> error.field
        'chunk_size'
    """
    errors = exc.errors()
    env_sources = env_sources or {}
    field = setting_name(errors[0]) if errors else "splitter"
    reasons = [
        f"{setting_name(error)}: {error.get('msg', 'invalid')}" for error in errors
    ]
    return ConfigError(
        field,
        "; ".join(reasons) or "invalid configuration",
        env_var=env_sources.get(field),
    )
