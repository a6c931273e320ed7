"""Tests for splitter configuration loading."""

import os

import pytest
from pydantic import ValidationError as PydanticValidationError

from mdsplit.config.loader import load_splitter_config
from mdsplit.config.validator import config_error_from_validation, setting_name
from mdsplit.lib.errors import ConfigError
from mdsplit.models.config import LengthUnit, SplitterConfig


@pytest.mark.unit
class TestLoadSplitterConfig:
    """Tests for load_splitter_config() precedence and errors."""

    def test_defaults_with_empty_env(self) -> None:
        """Test that an empty environment gives model defaults."""
        assert load_splitter_config(env={}) == SplitterConfig()

    def test_env_values_applied(self) -> None:
        """Test that MDSPLIT_* variables are parsed into fields."""
        config = load_splitter_config(
            env={
                "MDSPLIT_CHUNK_SIZE": " 256 ",
                "MDSPLIT_CHUNK_OVERLAP": "32",
                "MDSPLIT_LENGTH_UNIT": "tokens",
                "MDSPLIT_ENCODING_NAME": "o200k_base",
            }
        )
        assert config.chunk_size == 256
        assert config.chunk_overlap == 32
        assert config.length_unit is LengthUnit.tokens
        assert config.encoding_name == "o200k_base"

    def test_overrides_win_over_env(self) -> None:
        """Test that explicit overrides take precedence."""
        config = load_splitter_config(
            {"chunk_size": 128}, env={"MDSPLIT_CHUNK_SIZE": "256"}
        )
        assert config.chunk_size == 128

    def test_reads_process_environment(self, isolated_env: dict[str, str]) -> None:
        """Test that os.environ is used when no env mapping is given."""
        os.environ["MDSPLIT_CHUNK_OVERLAP"] = "12"
        assert load_splitter_config().chunk_overlap == 12

    def test_non_integer_env_value(self) -> None:
        """Test that an unparseable number names the variable."""
        with pytest.raises(ConfigError) as exc_info:
            load_splitter_config(env={"MDSPLIT_CHUNK_SIZE": "big"})
        assert exc_info.value.field == "chunk_size"
        assert exc_info.value.env_var == "MDSPLIT_CHUNK_SIZE"
        assert "'big' is not a whole number" in exc_info.value.message

    def test_invalid_value_wrapped(self) -> None:
        """Test that pydantic failures become ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            load_splitter_config({"chunk_size": 0}, env={})
        assert exc_info.value.field == "chunk_size"
        assert exc_info.value.env_var is None
        assert exc_info.value.message.startswith("chunk_size: ")

    def test_invalid_env_value_names_variable(self) -> None:
        """Test that a rejected environment value reports its variable."""
        with pytest.raises(ConfigError) as exc_info:
            load_splitter_config(env={"MDSPLIT_CHUNK_OVERLAP": "-3"})
        assert exc_info.value.field == "chunk_overlap"
        assert exc_info.value.env_var == "MDSPLIT_CHUNK_OVERLAP"
        assert "(from MDSPLIT_CHUNK_OVERLAP)" in str(exc_info.value)

    def test_override_clears_env_source(self) -> None:
        """Test that an overridden bad value is not blamed on the environment."""
        with pytest.raises(ConfigError) as exc_info:
            load_splitter_config({"chunk_size": 0}, env={"MDSPLIT_CHUNK_SIZE": "64"})
        assert exc_info.value.env_var is None

    def test_unknown_override_wrapped(self) -> None:
        """Test that unknown fields are reported as configuration errors."""
        with pytest.raises(ConfigError) as exc_info:
            load_splitter_config({"size": 10}, env={})
        assert exc_info.value.field == "size"


@pytest.mark.unit
class TestConfigErrorFromValidation:
    """Tests for config_error_from_validation()."""

    def test_lists_every_failed_setting(self) -> None:
        """Test that each failure becomes one ``setting: reason`` entry."""
        with pytest.raises(PydanticValidationError) as exc_info:
            SplitterConfig(chunk_size=0, chunk_overlap=-1)

        error = config_error_from_validation(exc_info.value)
        reasons = error.message.split("; ")
        assert error.field == "chunk_size"
        assert len(reasons) == 2
        assert reasons[0].startswith("chunk_size: ")
        assert reasons[1].startswith("chunk_overlap: ")

    def test_nested_location_collapses_to_setting(self) -> None:
        """Test that list item errors are reported on the setting."""
        with pytest.raises(PydanticValidationError) as exc_info:
            SplitterConfig(separators=["\n", 3])

        error = config_error_from_validation(exc_info.value)
        assert error.field == "separators"
        assert error.message.startswith("separators: ")

    def test_env_source_attached(self) -> None:
        """Test that the first failing setting's variable is recorded."""
        with pytest.raises(PydanticValidationError) as exc_info:
            SplitterConfig(length_unit="words")

        error = config_error_from_validation(
            exc_info.value, {"length_unit": "MDSPLIT_LENGTH_UNIT"}
        )
        assert error.env_var == "MDSPLIT_LENGTH_UNIT"

    def test_setting_name(self) -> None:
        """Test location handling of setting_name()."""
        assert setting_name({"loc": ("separators", 1)}) == "separators"
        assert setting_name({"loc": ()}) == "splitter"
