"""Helpers for loading and saving the board configuration.

The configuration lives in a per-user directory resolved through
``platformdirs.user_config_dir`` so an installed copy never writes into the
package tree.  A relative ``./config`` folder is used when the user directory
cannot be created.  Writes go through a temporary file that is then renamed
over the target.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from platformdirs import user_config_dir

from hexboard.session import Rounding
from hexboard.tile import PALETTES, get_palette

MIN_TILE_SIZE = 4.0
MAX_TILE_SIZE = 256.0
MAX_SIDE = 32
MAX_LABEL_SPACING = 8


def _compute_config_path() -> Path:
    """Compute the path used to persist the board configuration.

    Returns:
        Path: The resolved configuration file path.
    """
    config_filename = "board.json"
    try:
        base = Path(user_config_dir("hexboard"))
        base.mkdir(parents=True, exist_ok=True)
        return base / config_filename
    except OSError:
        fallback_dir = Path("config")
        fallback_dir.mkdir(parents=True, exist_ok=True)
        return fallback_dir / config_filename


CONFIG_PATH: Path = _compute_config_path()


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class BoardConfig:
    """Startup parameters for the board.

    Only ``tile_size`` and ``side`` affect geometry; the remaining fields are
    cosmetic or select the click rounding mode.  ``dirty`` tracks unsaved
    edits and is never written to disk.
    """

    tile_size: float = 32.0
    side: int = 7
    palette: str = "classic"
    label_spacing: int = 1
    rounding: str = Rounding.AXIAL.value

    dirty: bool = False

    def validate(self) -> "BoardConfig":
        """Raise ``ValueError`` if any field is out of range."""

        if not MIN_TILE_SIZE <= self.tile_size <= MAX_TILE_SIZE:
            raise ValueError(
                f"tile_size must be between {MIN_TILE_SIZE:g} and {MAX_TILE_SIZE:g}, "
                f"got {self.tile_size!r}"
            )
        if not 1 <= self.side <= MAX_SIDE:
            raise ValueError(f"side must be between 1 and {MAX_SIDE}, got {self.side!r}")
        if not 1 <= self.label_spacing <= MAX_LABEL_SPACING:
            raise ValueError(
                f"label_spacing must be between 1 and {MAX_LABEL_SPACING}, "
                f"got {self.label_spacing!r}"
            )
        get_palette(self.palette)
        Rounding.parse(self.rounding)
        return self

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "BoardConfig":
        """Build a config from persisted data, clamping values into range."""

        defaults = cls()
        merged: Dict[str, Any] = defaults.to_dict()
        merged.update(data)
        palette = str(merged.get("palette", defaults.palette))
        if palette not in PALETTES:
            palette = defaults.palette
        rounding = str(merged.get("rounding", defaults.rounding)).lower()
        if rounding not in {member.value for member in Rounding}:
            rounding = defaults.rounding
        return cls(
            tile_size=_clamp(float(merged["tile_size"]), MIN_TILE_SIZE, MAX_TILE_SIZE),
            side=int(_clamp(int(merged["side"]), 1, MAX_SIDE)),
            palette=palette,
            label_spacing=int(_clamp(int(merged["label_spacing"]), 1, MAX_LABEL_SPACING)),
            rounding=rounding,
        )

    @classmethod
    def load(cls) -> "BoardConfig":
        """Load the configuration from disk, creating it if necessary.

        Returns:
            BoardConfig: The loaded (or default) configuration with ``dirty``
                set to ``False``.
        """
        path = CONFIG_PATH
        if path.exists():
            try:
                data = json.loads(path.read_text())
                if not isinstance(data, dict):
                    raise ValueError("board config must be a JSON object")
                inst = cls.from_mapping(data)
                inst.dirty = False
                return inst
            except (OSError, ValueError, TypeError, KeyError):
                # Unreadable or malformed file: fall back to defaults.
                pass
        inst = cls()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = path.with_suffix(path.suffix + ".tmp")
            temp_path.write_text(json.dumps(inst.to_dict(), indent=2))
            temp_path.replace(path)
        except OSError:
            # The in-memory defaults remain usable.
            pass
        inst.dirty = False
        return inst

    def save(self) -> None:
        """Persist the current configuration to disk.

        On success ``dirty`` is cleared.  A failed write raises ``OSError``
        and leaves ``dirty`` untouched.
        """
        path = CONFIG_PATH
        data = json.dumps(self.to_dict(), indent=2)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(data)
            temp_path.replace(path)
        except OSError:
            # Fall back to a direct write if the atomic rename fails.
            path.write_text(data)
        self.dirty = False

    def to_dict(self) -> dict[str, Any]:
        """Return a serialisable representation without ``dirty``."""
        return {
            "tile_size": self.tile_size,
            "side": self.side,
            "palette": self.palette,
            "label_spacing": self.label_spacing,
            "rounding": self.rounding,
        }

    def reset(self) -> None:
        """Revert all settings to their defaults and mark the config dirty."""
        default = type(self)()
        self.tile_size = default.tile_size
        self.side = default.side
        self.palette = default.palette
        self.label_spacing = default.label_spacing
        self.rounding = default.rounding
        self.dirty = True
