"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from .constants import DEFAULT_A, DEFAULT_B, DEFAULT_D, DEFAULT_ROUNDS, DEFAULT_SEED
from .space import SolutionSpace
from .types import OptimizationGoal

PRECISION_FIELDS = ("d", "decimal_places", "l")


class SpaceConfig(BaseModel):
    """Solution space parameters.

    Exactly one of d, decimal_places or l selects the construction path.
    If none is given, d defaults to DEFAULT_D.
    """

    a: float = DEFAULT_A
    b: float = DEFAULT_B
    d: float | None = None
    decimal_places: int | None = None
    l: int | None = None  # noqa: E741

    @model_validator(mode="after")
    def _one_precision_field(self) -> SpaceConfig:
        given = [name for name in PRECISION_FIELDS if getattr(self, name) is not None]
        if len(given) > 1:
            raise ValueError(f"Specify only one of {PRECISION_FIELDS}, got {given}")
        if not given:
            self.d = DEFAULT_D
        return self


class SearchConfig(BaseModel):
    """Hill-climbing settings."""

    rounds: int = Field(default=DEFAULT_ROUNDS, ge=0)
    seed: int | None = Field(default=DEFAULT_SEED, ge=0)
    goal: OptimizationGoal = OptimizationGoal.MAX


class ClimbConfig(BaseModel):
    """Root configuration object."""

    space: SpaceConfig = Field(default_factory=SpaceConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)


def build_space(config: SpaceConfig) -> SolutionSpace:
    """Build a SolutionSpace through the constructor matching the config.

    Raises:
        SpaceConfigError: If the parameters violate a construction rule.
    """
    if config.l is not None:
        return SolutionSpace.from_l(config.a, config.b, config.l)
    if config.decimal_places is not None:
        return SolutionSpace.from_decimal_places(config.a, config.b, config.decimal_places)
    return SolutionSpace.from_d(config.a, config.b, config.d if config.d is not None else DEFAULT_D)


def load_config(path: str | Path) -> ClimbConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed ClimbConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ClimbConfig.model_validate(data or {})


def save_config(config: ClimbConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False)


def default_config() -> ClimbConfig:
    """Return default configuration."""
    return ClimbConfig()


def merge_config(base: ClimbConfig, overrides: dict[str, Any]) -> ClimbConfig:
    """Merge overrides into base configuration.

    A precision field in ``overrides["space"]`` replaces whichever precision
    field the base config used.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    space_overrides = overrides.get("space") or {}
    if any(space_overrides.get(name) is not None for name in PRECISION_FIELDS):
        for name in PRECISION_FIELDS:
            base_dict["space"][name] = None

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return ClimbConfig.model_validate(merged)
