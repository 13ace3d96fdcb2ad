"""Side panels shown next to the board."""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from textual.binding import Binding
from textual.widget import Widget

from .channels import ClickLogChannel, NotificationChannel


def _build_stats_panel(stats: Mapping[str, str]) -> RenderableType:
    table = Table.grid(padding=(0, 1), expand=True)
    for key, value in stats.items():
        table.add_row(f"[bold]{key}[/bold]", str(value))
    return Panel(table, title="Board", border_style="blue")


def _build_config_panel(config: Mapping[str, str], *, unsaved: bool = False) -> RenderableType:
    """Build the panel summarising the active board configuration.

    Args:
        config: Mapping of configuration keys to human-readable strings.
        unsaved: If ``True``, an asterisk is appended to the panel title.

    Returns:
        RenderableType: A Panel containing the configuration summary.
    """
    table = Table.grid(padding=(0, 1), expand=True)
    for key, value in config.items():
        table.add_row(f"[bold]{key}[/bold]", str(value))
    title = "Config*" if unsaved else "Config"
    return Panel(table, title=title, border_style="cyan")


class DashboardView(Widget):
    """Display board statistics, configuration and notifications."""

    BINDINGS = [
        Binding("c", "clear_notifications", "Clear Notifs", show=False),
    ]

    def __init__(
        self,
        *,
        stats: Mapping[str, str] | None = None,
        notification_channel: NotificationChannel | None = None,
    ) -> None:
        super().__init__(id="status")
        self.notification_channel = notification_channel or NotificationChannel()
        self._stats: dict[str, str] = {str(key): str(value) for key, value in (stats or {}).items()}
        self._config: dict[str, str] = {}
        self._config_dirty = False

    def update_config(self, config: Mapping[str, str], *, unsaved: bool = False) -> None:
        self._config = {str(key): str(value) for key, value in config.items()}
        self._config_dirty = bool(unsaved)
        self.refresh()

    def action_clear_notifications(self) -> None:
        self.notification_channel.clear()
        self.refresh()

    def render(self) -> RenderableType:
        layout = Layout(name="status")
        sections = [Layout(_build_stats_panel(self._stats), name="stats", ratio=1)]
        if self._config:
            sections.append(
                Layout(
                    _build_config_panel(self._config, unsaved=self._config_dirty),
                    name="config",
                    ratio=1,
                )
            )
        sections.append(
            Layout(
                self.notification_channel.render_panel(title="Notifications"),
                name="notifications",
                ratio=1,
            )
        )
        layout.split_column(*sections)
        return layout


class ClickLogWidget(Widget):
    """Render recent clicks from the click log channel."""

    log_channel: ClickLogChannel

    def __init__(self, log_channel: ClickLogChannel, *, title: str = "Clicks") -> None:
        super().__init__(id="log")
        self.log_channel = log_channel
        self.title = title

    def refresh_from_channel(self) -> None:
        self.refresh()

    def render(self) -> RenderableType:
        return self.log_channel.render_table(title=self.title)


__all__ = ["ClickLogWidget", "DashboardView"]
