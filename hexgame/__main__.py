"""Command line entry point for launching the board viewer."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from hexboard.session import Rounding
from hexboard.tile import PALETTES

from .ui.app import HexBoardApp
from .ui.config_store import BoardConfig


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexboard", description="Interactive hexagonal board.")
    ap.add_argument("--tile-size", type=float, help="Hex radius in surface pixels")
    ap.add_argument("--side", type=int, help="Board side length in hexes")
    ap.add_argument("--palette", choices=sorted(PALETTES), help="Colour preset")
    ap.add_argument("--label-spacing", type=int, help="Spaces between q and r in labels")
    ap.add_argument(
        "--rounding",
        choices=[member.value for member in Rounding],
        help="Click rounding: per-axis (axial) or nearest hex (cube)",
    )
    ap.add_argument("--save", action="store_true", help="Persist the resulting configuration")
    return ap


def resolve_config(args: argparse.Namespace, base: BoardConfig | None = None) -> BoardConfig:
    """Overlay command line flags onto the persisted configuration."""

    config = base or BoardConfig.load()
    overrides = {
        "tile_size": args.tile_size,
        "side": args.side,
        "palette": args.palette,
        "label_spacing": args.label_spacing,
        "rounding": args.rounding,
    }
    for key, value in overrides.items():
        if value is not None and getattr(config, key) != value:
            setattr(config, key, value)
            config.dirty = True
    return config.validate()


def main(argv: Sequence[str] | None = None) -> None:
    """Launch the board viewer."""

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = resolve_config(args)
    except ValueError as error:
        parser.error(str(error))
    if args.save:
        try:
            config.save()
        except OSError as error:
            parser.exit(1, f"hexboard: could not save config: {error}\n")

    app = HexBoardApp(config=config)
    app.run()
    if app.return_code:
        raise SystemExit(app.return_code)


if __name__ == "__main__":  # pragma: no cover - module entry point
    main()
