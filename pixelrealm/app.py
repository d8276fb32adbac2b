"""Command-line entry point that opens the game on its menu."""

from __future__ import annotations

import argparse

from pixelrealm.engine import Engine
from pixelrealm.menu_state import MenuState


def main(argv=None) -> int:
    """Open the window, show the menu and run until the window closes."""
    parser = argparse.ArgumentParser(
        prog="pixelrealm", description="Run the game, starting at the menu."
    )
    parser.parse_args(argv)

    engine = Engine()
    try:
        engine.init_window()
        engine.change_state(MenuState())
        engine.main_loop()
    finally:
        engine.cleanup()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())