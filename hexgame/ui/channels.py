"""Logging and notification channels for the text user interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from hexboard.session import ClickResult


@dataclass
class ClickRecord:
    """One resolved pointer click."""

    sequence: int
    px: float
    py: float
    q: int
    r: int
    hit: bool

    def format_brief(self) -> str:
        target = f"({self.q}, {self.r})" if self.hit else f"({self.q}, {self.r}) off-board"
        return f"#{self.sequence} @ {self.px:.1f},{self.py:.1f} -> {target}"


@dataclass
class NotificationRecord:
    """Light-weight notification for surfacing events to the UI."""

    message: str
    category: str = "info"
    payload: Dict[str, Any] = field(default_factory=dict)

    def format_brief(self) -> str:
        payload_bits = [f"{key}={value}" for key, value in self.payload.items()]
        payload_text = f" ({', '.join(payload_bits)})" if payload_bits else ""
        return f"[{self.category}] {self.message}{payload_text}"


class ClickLogChannel:
    """Collects click resolutions that can be rendered in the side panel."""

    def __init__(self, *, max_entries: int = 100) -> None:
        self.max_entries = max_entries
        self._entries: List[ClickRecord] = []
        self._sequence = 0

    @property
    def entries(self) -> Sequence[ClickRecord]:
        return tuple(self._entries)

    def push(self, entry: ClickRecord) -> None:
        self._entries.append(entry)
        if len(self._entries) > self.max_entries:
            self._entries = self._entries[-self.max_entries :]

    def record_click(self, result: ClickResult) -> ClickRecord:
        """Create a log entry from a click resolution."""

        self._sequence += 1
        entry = ClickRecord(
            sequence=self._sequence,
            px=result.px,
            py=result.py,
            q=result.coord.q,
            r=result.coord.r,
            hit=result.hit,
        )
        self.push(entry)
        return entry

    def render_table(self, *, title: str = "Clicks"):
        """Return a Rich renderable summarising recent clicks."""

        from rich import box
        from rich.panel import Panel
        from rich.table import Table

        table = Table(expand=True, box=box.SIMPLE_HEAVY)
        table.add_column("#", justify="right", no_wrap=True)
        table.add_column("Pixel", no_wrap=True)
        table.add_column("Axial", no_wrap=True)
        table.add_column("Tile", no_wrap=True)

        for entry in reversed(self._entries):
            table.add_row(
                str(entry.sequence),
                f"{entry.px:.1f}, {entry.py:.1f}",
                f"{entry.q} {entry.r}",
                "hit" if entry.hit else "miss",
            )

        return Panel(table, title=title, border_style="yellow")


class NotificationChannel:
    """Capture lightweight notifications for dashboard display."""

    def __init__(self, *, max_entries: int = 200) -> None:
        self.max_entries = max_entries
        self._notifications: List[NotificationRecord] = []

    @property
    def notifications(self) -> Sequence[NotificationRecord]:
        return tuple(self._notifications)

    def push(self, notification: NotificationRecord) -> None:
        self._notifications.append(notification)
        if len(self._notifications) > self.max_entries:
            self._notifications = self._notifications[-self.max_entries :]

    def notify(
        self,
        message: str,
        *,
        category: str = "info",
        payload: Mapping[str, Any] | None = None,
    ) -> NotificationRecord:
        record = NotificationRecord(
            message=message, category=category, payload=dict(payload or {})
        )
        self.push(record)
        return record

    def clear(self) -> None:
        """Remove all stored notifications."""

        self._notifications.clear()

    def render_panel(self, *, title: str = "Notifications"):
        from rich.panel import Panel
        from rich.table import Table

        table = Table(expand=True)
        table.add_column("Category", no_wrap=True)
        table.add_column("Message", overflow="fold")

        for record in reversed(self._notifications[-10:]):
            table.add_row(record.category, record.format_brief())

        return Panel(table, title=title, border_style="magenta")


__all__ = [
    "ClickLogChannel",
    "ClickRecord",
    "NotificationChannel",
    "NotificationRecord",
]
