"""
breakout_rules.config — Game configuration
===========================================

Static configuration consumed by the rules engine: lives, block score,
grid geometry, sprite palette and the round-won policy.

Configuration can come from:
    1. Keyword arguments: GameConfig(initial_lives=5)
    2. A JSON file: load_config("config.json")
    3. Environment variables / a .env file (override the file)

Environment overrides:
    BREAKOUT_INITIAL_LIVES, BREAKOUT_BLOCK_SCORE, BREAKOUT_ROWS,
    BREAKOUT_COLUMNS, BREAKOUT_CLEAR_POLICY
"""

from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ._core.enums import ClearPolicy
from .errors import ConfigurationError

# Possible sprites for each block row, top to bottom
DEFAULT_BLOCK_FRAMES: Tuple[str, ...] = (
    "blue1",
    "red1",
    "green1",
    "yellow1",
    "silver1",
    "purple1",
)

ENV_MAPPINGS = {
    "BREAKOUT_INITIAL_LIVES": "initial_lives",
    "BREAKOUT_BLOCK_SCORE": "default_block_score",
    "BREAKOUT_ROWS": "rows",
    "BREAKOUT_COLUMNS": "columns",
    "BREAKOUT_CLEAR_POLICY": "clear_policy",
}


class GameConfig(BaseModel):
    """
    Rules engine configuration.

    Attributes:
        initial_lives: Lives at the start of a game
        default_block_score: Points per block before the multiplier
        rows: Number of block rows in the canonical layout
        columns: Number of block columns in the canonical layout
        column_width: Horizontal distance between block columns
        row_spacing: Vertical distance between block rows
        block_frames: Sprite frame per row (needs at least ``rows`` entries)
        layout_origin: Screen offset added when placing block sprites
        bonus_streak_floor: Minimum streak before the multiplier can rise
        clear_policy: What a cleared board does to lives/score/bonus
        lives_label: HUD caption for the lives counter
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_lives: int = Field(default=3, ge=1)
    default_block_score: int = Field(default=50, ge=0)
    rows: int = Field(default=6, ge=1)
    columns: int = Field(default=10, ge=1)
    column_width: float = Field(default=64.0, gt=0)
    row_spacing: float = Field(default=32.0, gt=0)
    block_frames: Tuple[str, ...] = DEFAULT_BLOCK_FRAMES
    layout_origin: Tuple[float, float] = (116.0, 200.0)
    bonus_streak_floor: int = Field(default=4, ge=1)
    clear_policy: ClearPolicy = ClearPolicy.FULL_RESET
    lives_label: str = "VIE"

    @model_validator(mode="after")
    def _check_palette_covers_rows(self) -> "GameConfig":
        if len(self.block_frames) < self.rows:
            raise ValueError(
                f"block_frames has {len(self.block_frames)} entries "
                f"but the layout has {self.rows} rows"
            )
        return self

    @property
    def block_count(self) -> int:
        return self.rows * self.columns


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GameConfig:
    """
    Load config from a JSON file, then apply environment overrides.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional path to a .env file; its values sit below
            the real environment
        environ: Environment to read (defaults to os.environ)

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If the file is missing, not JSON, or any
            value fails validation
    """
    raw: Dict[str, Any] = {}
    source = "defaults"

    if config_path:
        path = Path(config_path)
        source = str(path)
        raw = _read_config_file(path)

    env: Dict[str, Optional[str]] = {}
    if env_file:
        env.update(dotenv_values(env_file))
    env.update(os.environ if environ is None else environ)

    overridden = False
    for env_key, config_key in ENV_MAPPINGS.items():
        value = env.get(env_key)
        if value:
            raw[config_key] = value
            overridden = True
    if overridden:
        source = f"{source} + environment"

    return validate_config(raw, source)


def validate_config(raw: Dict[str, Any], source: str = "dict") -> GameConfig:
    """
    Validate a raw config dict.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return GameConfig.model_validate(raw)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(source, errors, raw) from e


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(str(path), ["config file not found"])
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(str(path), [f"invalid JSON: {e}"]) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(str(path), [f"cannot read config file: {e}"]) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            str(path), [f"expected a JSON object, got {type(data).__name__}"], data
        )
    return data
