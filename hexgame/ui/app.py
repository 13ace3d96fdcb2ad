"""Textual application hosting the hex board."""

from __future__ import annotations

from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.widgets import Footer, Header

from hexboard.session import BoardSession
from hexboard.surface import SurfaceUnavailableError
from .channels import ClickLogChannel, NotificationChannel
from .config_store import BoardConfig
from .dashboard import ClickLogWidget, DashboardView
from .hex_canvas import HexCanvas


def summarise_config(config: BoardConfig) -> dict[str, str]:
    return {
        "Tile size": f"{config.tile_size:g}px",
        "Side": str(config.side),
        "Palette": config.palette,
        "Label spacing": str(config.label_spacing),
        "Rounding": config.rounding,
    }


def summarise_session(session: BoardSession) -> dict[str, str]:
    width, height = session.surface_size
    metrics = session.metrics
    return {
        "Tiles": str(len(session.board)),
        "Surface": f"{width:.0f} x {height:.0f}px",
        "Half width": f"{metrics.half_board_width:.2f}px",
        "Margin": f"{metrics.margin:.2f}px",
        "State": session.store.state,
    }


class HexBoardApp(App[Any]):
    """Interactive board viewer.

    The app owns the session and the canvas for its whole lifetime; click
    messages are handled one at a time on the event loop.
    """

    CSS = """
    * {
        border: none;
        background: #141414;
        color: #c0c0c0;
    }
    Header, Footer {
        background: #1c1c1c;
        color: #7a7a7a;
        text-style: bold;
    }

    Screen { layout: grid; grid-rows: auto 1fr auto; }

    #body {
        layout: grid;
        grid-size: 2 2;
        grid-columns: 3fr 1fr;
        grid-rows: 1fr 1fr;
        grid-gutter: 1;
        padding: 1;
        height: 1fr;
    }

    HexCanvas {
        row-span: 2;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+s", "save_config", "Save config"),
    ]

    def __init__(
        self,
        *,
        config: BoardConfig | None = None,
        log_channel: ClickLogChannel | None = None,
        notification_channel: NotificationChannel | None = None,
    ) -> None:
        super().__init__()
        self.config = (config or BoardConfig.load()).validate()
        self.log_channel = log_channel or ClickLogChannel()
        self.notification_channel = notification_channel or NotificationChannel()
        self.session = BoardSession(
            tile_size=self.config.tile_size,
            side=self.config.side,
            rounding=self.config.rounding,
        )
        self.board_view = HexCanvas(
            self.session,
            palette=self.config.palette,
            label_spacing=self.config.label_spacing,
        )
        self.dashboard = DashboardView(
            stats=summarise_session(self.session),
            notification_channel=self.notification_channel,
        )
        self.log_widget = ClickLogWidget(self.log_channel)
        self.dashboard.update_config(summarise_config(self.config), unsaved=self.config.dirty)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Container(id="body"):
            yield self.board_view
            yield self.dashboard
            yield self.log_widget
        yield Footer()

    def on_mount(self) -> None:
        self.notification_channel.notify(
            "Board ready",
            payload={"tiles": len(self.session.board), "side": self.config.side},
        )
        self.call_after_refresh(self._check_surface)

    # ------------------------------------------------------------------
    def acquire_surface(self) -> HexCanvas:
        """Return the mounted board canvas or raise ``SurfaceUnavailableError``."""

        try:
            canvas = self.query_one("#board", HexCanvas)
        except NoMatches as error:
            raise SurfaceUnavailableError("Board canvas '#board' is not mounted") from error
        width, height = canvas.size
        if width <= 0 or height <= 0:
            raise SurfaceUnavailableError(
                f"Board canvas has no drawable area ({width}x{height}); enlarge the terminal"
            )
        return canvas

    def _check_surface(self) -> None:
        try:
            self.acquire_surface()
        except SurfaceUnavailableError as error:
            self.exit(return_code=1, message=f"hexboard: {error}")

    # ------------------------------------------------------------------
    def on_hex_canvas_hex_clicked(self, message: HexCanvas.HexClicked) -> None:
        self.log_channel.record_click(message.result)
        self.log_widget.refresh_from_channel()

    def action_save_config(self) -> None:
        try:
            self.config.save()
        except OSError as error:
            self.notification_channel.notify(
                "Saving config failed", category="error", payload={"error": error}
            )
        else:
            self.notification_channel.notify("Config saved")
        self.dashboard.update_config(summarise_config(self.config), unsaved=self.config.dirty)


__all__ = ["HexBoardApp", "summarise_config", "summarise_session"]
