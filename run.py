#!/usr/bin/env python3
"""Simple runner script for md-links."""

import re
import sys


def quote_override(value: str) -> str:
    """Single-quote a value for the hydra override grammar."""
    # backslashes are literal unless they precede a quote or the closing quote
    value = re.sub(r"(\\+)(?='|$)", lambda m: m.group(1) * 2, value)
    return "'" + value.replace("'", "\\'") + "'"


def build_overrides(args: list[str]) -> list[str]:
    """Translate ``<path> [--validate] [--stats]`` into hydra overrides."""
    overrides = []
    path = None
    for arg in args:
        if arg == "--validate":
            overrides.append("options.validate=true")
        elif arg == "--stats":
            overrides.append("options.stats=true")
        elif arg.startswith("--timeout="):
            overrides.append(f"validator.timeout={arg.split('=', 1)[1]}")
        elif arg in ("-v", "--verbose"):
            overrides.append("logging.level=DEBUG")
        elif arg.startswith("-") and arg != "-":
            raise ValueError(f"Unknown option: {arg}")
        elif path is not None:
            raise ValueError(f"Only one path may be given, got {path!r} and {arg!r}")
        else:
            path = arg
            overrides.append(f"input.path={quote_override(arg)}")
    return overrides


def main():
    args = sys.argv[1:]
    if not args or "--help" in args or "-h" in args:
        print("""
md-links - extract and check links in Markdown files

Usage:
    python run.py <path> [options]

Options:
    --validate      Probe every link over HTTP
    --stats         Print total/unique/broken counts
    --timeout=SEC   Per-probe timeout (default: 10)
    -v, --verbose   Debug logging
    -h, --help      Show this help

Examples:
    python run.py README.md
    python run.py docs/ --validate --stats
""")
        return
    
    try:
        overrides = build_overrides(args)
    except ValueError as e:
        print(f"Error: {e} (see --help)", file=sys.stderr)
        sys.exit(2)
    
    sys.argv = [sys.argv[0], *overrides]
    
    from md_links.main import main as cli_main
    cli_main()


if __name__ == "__main__":
    main()
