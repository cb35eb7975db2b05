from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # optional leading subcommand, kept for muscle memory
    if argv and argv[0].lower() in {"analyze", "analysis"}:
        argv = argv[1:]

    if argv and not argv[0].startswith("-"):
        print("Usage:")
        print("  python -m gobblers_analysis [analyze] [--standings ...] [--games ...] [--outdir figures]")
        return 2

    return analyze_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
