"""Configuration settings for the core stability checker.

Uses Pydantic Settings for validation and environment variable support.
All settings can be overridden via CORESTAB_* environment variables.
"""

from pydantic_settings import BaseSettings


class CheckerConfig(BaseSettings):
    """Global configuration for core stability checks."""

    # Run partition / matrix shape checks before searching
    validate_inputs: bool = True

    # Emit an INFO record describing the blocking coalition
    log_blocks: bool = True

    # Root log level used by the CLI
    log_level: str = "WARNING"

    model_config = {"env_prefix": "CORESTAB_"}
