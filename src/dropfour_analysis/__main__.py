from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Optional "analyze" subcommand; flags alone also run the analysis
    if argv and argv[0].lower() in {"analyze", "analysis"}:
        argv = argv[1:]

    return analyze_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
