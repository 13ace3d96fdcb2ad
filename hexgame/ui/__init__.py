"""Text-based user interface components for the board viewer."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - imported only for type checkers
    from .app import HexBoardApp
    from .channels import ClickLogChannel, ClickRecord, NotificationChannel, NotificationRecord
    from .config_store import BoardConfig
    from .dashboard import ClickLogWidget, DashboardView
    from .hex_canvas import CellCanvas, HexCanvas

__all__ = [
    "BoardConfig",
    "CellCanvas",
    "ClickLogChannel",
    "ClickLogWidget",
    "ClickRecord",
    "DashboardView",
    "HexBoardApp",
    "HexCanvas",
    "NotificationChannel",
    "NotificationRecord",
]

_EXPORTS = {
    "ClickLogChannel": "hexgame.ui.channels",
    "ClickRecord": "hexgame.ui.channels",
    "NotificationChannel": "hexgame.ui.channels",
    "NotificationRecord": "hexgame.ui.channels",
    "BoardConfig": "hexgame.ui.config_store",
    "ClickLogWidget": "hexgame.ui.dashboard",
    "DashboardView": "hexgame.ui.dashboard",
    "CellCanvas": "hexgame.ui.hex_canvas",
    "HexCanvas": "hexgame.ui.hex_canvas",
    "HexBoardApp": "hexgame.ui.app",
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted({*globals(), *__all__})
