"""
Configuration management for urlmatch.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DomainConfig(BaseSettings):
    """Configuration for root-domain classification."""

    hostname_only_tld_match: bool = Field(
        default=False,
        description=(
            "Match second-level suffix exceptions against the parsed hostname "
            "only, instead of anywhere in the URL string"
        ),
    )

    model_config = SettingsConfigDict(env_prefix="URLMATCH_DOMAIN_")


class DisplayConfig(BaseSettings):
    """Configuration for display-name formatting and elision."""

    data_uri_max_length: int = Field(
        default=100, description="Characters kept when eliding data: URIs"
    )
    max_length: int = Field(
        default=64, description="Maximum length of a formatted display name"
    )
    default_num_path_parts: int = Field(
        default=2, description="Trailing path segments kept in display names"
    )

    model_config = SettingsConfigDict(env_prefix="URLMATCH_DISPLAY_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    domain: DomainConfig = Field(default_factory=DomainConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="URLMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
