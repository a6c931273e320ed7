"""Configuration loader for the markdown splitter.

Resolution order (lowest to highest precedence):
1. Model defaults (``mdsplit.config.defaults``)
2. Environment variables (``MDSPLIT_*``, see ``ENV_VAR_MAP``)
3. Explicit overrides passed by the caller
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from mdsplit.config.defaults import ENV_VAR_MAP
from mdsplit.config.validator import config_error_from_validation
from mdsplit.lib.errors import ConfigError
from mdsplit.lib.logging_config import get_logger
from mdsplit.models.config import SplitterConfig

logger = get_logger(__name__)

_INT_FIELDS = ("chunk_size", "chunk_overlap")


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse an environment value into the setting's type.

    Raises:
        ValueError: If an integer setting is not a whole number.
    """
    if field_name in _INT_FIELDS:
        return int(value.strip())
    return value.strip()


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    """Collect settings given through ``MDSPLIT_*`` variables.

    Raises:
        ConfigError: If a variable is set but cannot be parsed.
    """
    values: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name not in env:
            continue
        raw = env[env_var_name]
        try:
            values[field_name] = _parse_env_value(field_name, raw)
        except ValueError as exc:
            raise ConfigError(
                field_name, f"{raw!r} is not a whole number", env_var=env_var_name
            ) from exc
        logger.debug(f"Using {env_var_name} for '{field_name}'")
    return values


def load_splitter_config(
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> SplitterConfig:
    """Build a validated SplitterConfig.

    Args:
        overrides: Explicit setting values; they win over the environment.
        env: Environment mapping to read ``MDSPLIT_*`` variables from.
            Defaults to ``os.environ``.

    Returns:
        Validated SplitterConfig.

    Raises:
        ConfigError: If an environment value cannot be parsed or the merged
            settings fail validation. ``env_var`` names the variable when
            the failing value came from the environment.

    Example:
        >>> config = load_splitter_config({"chunk_size": 256}, env={})
        >>> config.chunk_size
        256
    """
    values = _env_overrides(os.environ if env is None else env)
    env_sources = {name: ENV_VAR_MAP[name] for name in values}
    if overrides:
        values.update(overrides)
        for name in overrides:
            env_sources.pop(name, None)

    try:
        return SplitterConfig(**values)
    except PydanticValidationError as exc:
        raise config_error_from_validation(exc, env_sources) from exc
