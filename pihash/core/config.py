"""Configuration management for pihash."""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import BaseModel, Field, field_validator

from pihash.core.types import Variant

logger = structlog.get_logger()

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "pihash" / "config.json"


class AppConfig(BaseModel):
    """Application configuration."""

    config_dir: Path = Field(
        default=Path.home() / ".config" / "pihash",
        description="Configuration directory"
    )

    # Hashing settings
    default_variant: Variant = Field(
        default=Variant.HASH128,
        description="Variant used by digest when none is given"
    )
    collision_variants: list[Variant] = Field(
        default=[Variant.HASH64, Variant.HASH128],
        description="Variants checked by the collision tester"
    )

    # Avalanche settings
    avalanche_runs: int = Field(default=10_000, description="Avalanche trials per mixer")
    avalanche_tolerance: float = Field(
        default=0.075,
        description="Allowed distance of the mean Hamming score from 0.5"
    )

    # Output settings
    output_format: str = Field(
        default="rich",
        description="Output format (rich, json, plain)"
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @classmethod
    def load(cls, config_file: Path | None = None) -> AppConfig:
        """Load configuration from file.

        Args:
            config_file: Path to config file, uses default if None

        Returns:
            Application configuration
        """
        if config_file is None:
            config_file = DEFAULT_CONFIG_FILE

        if config_file.exists():
            with open(config_file) as f:
                data = json.load(f)
                return cls(**data)

        # Return defaults
        return cls()

    def save(self, config_file: Path | None = None) -> None:
        """Save configuration to file.

        Args:
            config_file: Path to config file, uses default if None
        """
        if config_file is None:
            config_file = self.config_dir / "config.json"

        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, default=str)

        logger.info("config_saved", path=str(config_file))

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        valid_formats = {"rich", "json", "plain"}
        if v not in valid_formats:
            raise ValueError(f"Invalid output format: {v}. Valid formats: {valid_formats}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {valid_levels}")
        return v

    @field_validator("avalanche_runs")
    @classmethod
    def validate_avalanche_runs(cls, v: int) -> int:
        """Validate avalanche run count."""
        if v <= 0:
            raise ValueError("Avalanche runs must be positive")
        return v

    @field_validator("avalanche_tolerance")
    @classmethod
    def validate_avalanche_tolerance(cls, v: float) -> float:
        """Validate avalanche tolerance."""
        if not 0 < v < 0.5:
            raise ValueError("Avalanche tolerance must be between 0 and 0.5")
        return v

    @field_validator("collision_variants")
    @classmethod
    def validate_collision_variants(cls, v: list[Variant]) -> list[Variant]:
        """Validate collision variant list."""
        if not v:
            raise ValueError("Collision variants list cannot be empty")
        return v
