from __future__ import annotations

from types import SimpleNamespace

import pytest
from textual.css.query import NoMatches

from hexboard.surface import SurfaceUnavailableError
from hexgame.ui import config_store
from hexgame.ui.app import HexBoardApp
from hexgame.ui.config_store import BoardConfig


@pytest.fixture
def exits() -> list[dict[str, object]]:
    return []


@pytest.fixture
def app(monkeypatch, exits):
    instance = HexBoardApp(config=BoardConfig())
    monkeypatch.setattr(instance, "exit", lambda **kwargs: exits.append(kwargs))
    return instance


def _query_returning(canvas):
    def query_one(selector, expect_type=None):
        assert selector == "#board"
        return canvas

    return query_one


def test_missing_board_widget_is_reported(app, monkeypatch):
    def query_one(selector, expect_type=None):
        raise NoMatches(f"No nodes match {selector!r}")

    monkeypatch.setattr(app, "query_one", query_one)
    with pytest.raises(SurfaceUnavailableError, match="#board"):
        app.acquire_surface()


@pytest.mark.parametrize("size", [(0, 0), (80, 0), (0, 24)])
def test_zero_sized_board_is_reported(app, monkeypatch, size):
    monkeypatch.setattr(app, "query_one", _query_returning(SimpleNamespace(size=size)))
    with pytest.raises(SurfaceUnavailableError, match="no drawable area"):
        app.acquire_surface()


def test_sized_board_is_returned(app, monkeypatch):
    canvas = SimpleNamespace(size=(80, 24))
    monkeypatch.setattr(app, "query_one", _query_returning(canvas))
    assert app.acquire_surface() is canvas


def test_surface_check_exits_with_status_one(app, exits, monkeypatch):
    monkeypatch.setattr(app, "query_one", _query_returning(SimpleNamespace(size=(0, 0))))
    app._check_surface()
    assert len(exits) == 1
    assert exits[0]["return_code"] == 1
    assert str(exits[0]["message"]).startswith("hexboard: ")


def test_surface_check_passes_quietly(app, exits, monkeypatch):
    monkeypatch.setattr(app, "query_one", _query_returning(SimpleNamespace(size=(80, 24))))
    app._check_surface()
    assert exits == []


def test_failed_save_notifies_and_keeps_config_dirty(app, tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    monkeypatch.setattr(config_store, "CONFIG_PATH", blocker / "board.json", raising=False)
    app.config.dirty = True

    app.action_save_config()

    latest = app.notification_channel.notifications[-1]
    assert latest.category == "error"
    assert latest.message == "Saving config failed"
    assert app.config.dirty is True
    assert app.dashboard._config_dirty is True


def test_successful_save_clears_dirty(app, tmp_path, monkeypatch):
    path = tmp_path / "board.json"
    monkeypatch.setattr(config_store, "CONFIG_PATH", path, raising=False)
    app.config.dirty = True

    app.action_save_config()

    assert path.exists()
    assert app.config.dirty is False
    assert app.notification_channel.notifications[-1].message == "Config saved"
    assert app.dashboard._config_dirty is False
