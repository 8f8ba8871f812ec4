"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_INPUTS_DIR,
    DEFAULT_INPUTS_FILE,
    DEFAULT_OUTPUTS_DIR,
    DEFAULT_OUTPUTS_FILE,
)


class StorageConfig(BaseModel):
    """Where the inputs and outputs text files live, and how values are written.

    Relative directories resolve against ``base_dir`` (or the working
    directory when ``base_dir`` is unset).
    """

    base_dir: str | None = None
    inputs_dir: str = DEFAULT_INPUTS_DIR
    inputs_file: str = DEFAULT_INPUTS_FILE
    outputs_dir: str = DEFAULT_OUTPUTS_DIR
    outputs_file: str = DEFAULT_OUTPUTS_FILE
    # Significant digits for written values; None writes the shortest exact repr.
    precision: int | None = Field(default=None, ge=1, le=17)

    def _root(self) -> Path:
        return Path(self.base_dir) if self.base_dir else Path()

    @property
    def inputs_path(self) -> Path:
        return self._root() / self.inputs_dir / self.inputs_file

    @property
    def outputs_path(self) -> Path:
        return self._root() / self.outputs_dir / self.outputs_file


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "WARN"


class ValveGearConfig(BaseModel):
    """Root configuration object."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> ValveGearConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed ValveGearConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ValveGearConfig.model_validate(data or {})


def save_config(config: ValveGearConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> ValveGearConfig:
    """Return default configuration."""
    return ValveGearConfig()


def merge_config(base: ValveGearConfig, overrides: dict[str, Any]) -> ValveGearConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return ValveGearConfig.model_validate(merged)
