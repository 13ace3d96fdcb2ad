from __future__ import annotations

import pytest

import hexgame.__main__ as cli
from hexgame.__main__ import build_parser, main, resolve_config
from hexgame.ui import config_store
from hexgame.ui.app import summarise_config, summarise_session
from hexgame.ui.config_store import BoardConfig
from hexboard.session import BoardSession


def test_flags_override_config_and_mark_dirty():
    args = build_parser().parse_args(["--tile-size", "24", "--side", "4", "--rounding", "cube"])
    cfg = resolve_config(args, BoardConfig())
    assert (cfg.tile_size, cfg.side, cfg.rounding) == (24.0, 4, "cube")
    assert cfg.palette == "classic"
    assert cfg.dirty is True


def test_no_flags_leaves_config_clean():
    cfg = resolve_config(build_parser().parse_args([]), BoardConfig())
    assert cfg == BoardConfig()
    assert cfg.dirty is False


def test_invalid_flag_value_raises():
    args = build_parser().parse_args(["--side", "0"])
    with pytest.raises(ValueError):
        resolve_config(args, BoardConfig())


def test_unknown_palette_is_rejected_by_parser():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--palette", "neon"])


def test_summaries_describe_reference_board():
    cfg = BoardConfig()
    session = BoardSession(tile_size=cfg.tile_size, side=cfg.side)
    assert summarise_config(cfg)["Tile size"] == "32px"
    stats = summarise_session(session)
    assert stats["Tiles"] == "127"
    assert stats["Surface"] == "776 x 776px"
    assert stats["State"] == "idle"


@pytest.mark.parametrize(
    "argv",
    [["--tile-size", "2"], ["--tile-size", "500"], ["--side", "40"], ["--label-spacing", "9"]],
)
def test_flags_outside_persistable_range_are_rejected(argv):
    args = build_parser().parse_args(argv)
    with pytest.raises(ValueError):
        resolve_config(args, BoardConfig())


def test_unwritable_config_exits_with_diagnostic(tmp_path, monkeypatch, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    monkeypatch.setattr(config_store, "CONFIG_PATH", blocker / "board.json", raising=False)

    def _no_app(**_kwargs):
        raise AssertionError("viewer should not start when saving fails")

    monkeypatch.setattr(cli, "HexBoardApp", _no_app)
    with pytest.raises(SystemExit) as excinfo:
        main(["--side", "5", "--save"])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("hexboard: could not save config:")
    assert "Traceback" not in err
