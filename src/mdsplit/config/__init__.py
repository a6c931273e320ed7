"""Configuration defaults, loading and validation for mdsplit.

Main components:
- defaults: default limits, separators and environment variable names
- loader.load_splitter_config: defaults < environment < explicit overrides
- validator.config_error_from_validation: pydantic failures as ConfigError
"""
