"""Standalone demo showing the HexCanvas widget with a small board."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Footer, Header

from hexboard.session import BoardSession
from hexgame.ui.hex_canvas import HexCanvas


class Demo(App[None]):
    """Minimal application rendering a HexCanvas for local testing."""

    CSS = """
    Screen { layout: grid; grid-rows: auto 1fr auto; }
    #body { layout: grid; padding: 1; }
    HexCanvas { border: none; }
    """

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Container(id="body"):
            session = BoardSession(tile_size=40, side=4)
            yield HexCanvas(session, palette="ember", label_spacing=3)
        yield Footer()

    def on_hex_canvas_hex_clicked(self, message: HexCanvas.HexClicked) -> None:
        result = message.result
        where = f"{result.coord.q} {result.coord.r}"
        self.notify(where if result.hit else f"{where} (off board)")


if __name__ == "__main__":
    Demo().run()
