from __future__ import annotations

import argparse
import logging

from dropfour.config import MAX_DEPTH, MIN_DEPTH
from dropfour.ui.menu import MODES, ask_depth, ask_mode, run_menu
from dropfour.ui.render import clear_screen


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour", description="Play Connect 4 against a negamax AI.")
    ap.add_argument("--depth", type=int, default=None, help=f"Search depth ({MIN_DEPTH}-{MAX_DEPTH}). Asked for if omitted.")
    ap.add_argument("--mode", choices=sorted(set(MODES.values())), default=None, help="Game mode. Asked for if omitted.")
    ap.add_argument("--no-delay", action="store_true", help="Apply AI moves without the thinking pause")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG shows per-search stats)")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.depth is not None and not MIN_DEPTH <= args.depth <= MAX_DEPTH:
        ap.error(f"--depth must be between {MIN_DEPTH} and {MAX_DEPTH}")

    clear_screen()
    depth = args.depth if args.depth is not None else ask_depth()
    mode = args.mode if args.mode is not None else ask_mode()

    try:
        run_menu(mode, depth, show_thinking=not args.no_delay)
    except (KeyboardInterrupt, EOFError):
        print("\nGame quit.")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
