"""Tests covering the click log and notification channels."""

from __future__ import annotations

from rich.console import Console

from hexboard.session import BoardSession
from hexgame.ui.channels import ClickLogChannel, NotificationChannel


def _render(renderable) -> str:
    console = Console(width=100, record=True)
    console.print(renderable)
    return console.export_text(clear=False)


def test_record_click_numbers_entries_and_tracks_hits():
    session = BoardSession(tile_size=32, side=3)
    channel = ClickLogChannel()

    hit = channel.record_click(session.resolve_click(*session.metrics.origin))
    miss = channel.record_click(session.resolve_click(-400.0, -400.0))

    assert (hit.sequence, hit.q, hit.r, hit.hit) == (1, 0, 0, True)
    assert miss.sequence == 2
    assert miss.hit is False
    assert "off-board" in miss.format_brief()
    assert channel.entries == (hit, miss)


def test_click_log_is_bounded():
    session = BoardSession(tile_size=32, side=2)
    channel = ClickLogChannel(max_entries=3)
    for _ in range(5):
        channel.record_click(session.resolve_click(0.0, 0.0))
    assert [entry.sequence for entry in channel.entries] == [3, 4, 5]


def test_click_table_renders_latest_first():
    session = BoardSession(tile_size=32, side=2)
    channel = ClickLogChannel()
    channel.record_click(session.resolve_click(*session.metrics.origin))
    output = _render(channel.render_table())
    assert "Clicks" in output
    assert "0 0" in output
    assert "hit" in output


def test_notifications_format_and_clear():
    channel = NotificationChannel(max_entries=2)
    channel.notify("Board ready", payload={"tiles": 127})
    channel.notify("Config saved")
    record = channel.notify("Saving config failed", category="error")

    assert len(channel.notifications) == 2
    assert record.format_brief() == "[error] Saving config failed"
    assert channel.notifications[0].format_brief() == "[info] Config saved"
    assert "Notifications" in _render(channel.render_panel())

    channel.clear()
    assert channel.notifications == ()
