#!/usr/bin/env python3
"""
Numeral Words — Command Line
============================

Spell a number out in words.

Usage:
    python main.py 1234                              # one thousand two hundred and thirty-four
    python main.py -12.6 --lang fr                   # moins douze virgule six
    python main.py 1 --lang ru --option gender=feminine
    python main.py --list-languages

Exit codes: 0 success, 1 conversion error, 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from numeral_words.config import load_settings
from numeral_words.exceptions import NumeralWordsError
from numeral_words.pipeline import ConversionPipeline

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Argument Parsing ───────────────────────────────────────────────


def _parse_option(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key.strip().replace("-", "_"), value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numeral-words", description="Spell a number out in words."
    )
    parser.add_argument("value", nargs="?", help="number to spell, e.g. 1234 or -12.6")
    parser.add_argument("--lang", "-l", help="locale tag (default from NUMERAL_WORDS_DEFAULT_LANG)")
    parser.add_argument(
        "--option",
        "-o",
        action="append",
        type=_parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="language option, repeatable (gender=feminine, formal=false …)",
    )
    parser.add_argument("--list-languages", action="store_true", help="list languages and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


# ─── Output Helpers ─────────────────────────────────────────────────


def _print_languages(pipeline: ConversionPipeline) -> None:
    print(f"{_BOLD}Supported languages{_RESET}")
    for code in pipeline.registry.codes:
        profile = pipeline.registry.resolve(code)
        options = ", ".join(profile.options_model.model_fields) or "-"
        print(f"  {_CYAN}{code:<8}{_RESET} {profile.name:<24} {_DIM}options: {options}{_RESET}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except NumeralWordsError as exc:
        print(f"{_RED}{exc.code}{_RESET}: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)
    pipeline = ConversionPipeline(settings=settings)

    if args.list_languages:
        _print_languages(pipeline)
        return 0
    if args.value is None:
        build_parser().print_usage(sys.stderr)
        return 2

    try:
        words = pipeline.run(args.value, args.lang, dict(args.option))
    except NumeralWordsError as exc:
        print(f"{_RED}{exc.code}{_RESET}: {exc}", file=sys.stderr)
        return 1

    print(words)
    return 0


if __name__ == "__main__":
    sys.exit(main())
