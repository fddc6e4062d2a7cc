#!/usr/bin/env python3
"""
Armenian transliteration CLI.

Reads hy_translit.toml from the current directory if present, or override
with flags:

    python -m hy_translit.cli "Ով է այնտեղ։"
    python -m hy_translit.cli --script ru "Երևան"
    python -m hy_translit.cli --file letter.txt --config hy_translit.toml
    echo "Բարեւ" | python -m hy_translit.cli
"""

import argparse
import logging
import sys
from pathlib import Path

from hy_translit.engine import Transliterator
from hy_translit.scripts import SCRIPTS, UnknownScriptError

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _find_default_config() -> Path | None:
    """Look for hy_translit.toml in CWD."""
    candidate = Path("hy_translit.toml")
    if candidate.exists():
        return candidate
    return None


def _build_transliterator(args) -> Transliterator:
    config_path = Path(args.config) if args.config else _find_default_config()
    if config_path is None:
        return Transliterator(args.script or "en")

    tr = Transliterator.from_config(config_path)
    if args.script and args.script != tr.script.tag:
        # Explicit flag overrides the config file
        tr = Transliterator(args.script, punctuation=tr.punctuation_overrides)
    return tr


def _read_input(args) -> str:
    if args.text:
        return " ".join(args.text)
    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        return path.read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Transliterate Armenian text into Latin or Cyrillic"
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to transliterate (default: read --file or stdin)",
    )
    parser.add_argument(
        "--script",
        choices=sorted(SCRIPTS),
        help="Target script: en (Latin) or ru (Cyrillic); overrides config",
    )
    parser.add_argument(
        "--file",
        metavar="FILE",
        help="Read input text from a UTF-8 file",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect hy_translit.toml)",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Print the loaded pipeline and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        tr = _build_transliterator(args)
        if args.info:
            print(tr.summary())
            return 0
        text = _read_input(args)
    except (UnknownScriptError, FileNotFoundError) as e:
        logger.debug("Startup failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    result = tr.transliterate(text)
    sys.stdout.write(result)
    if not result.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
