#!/usr/bin/env python3
"""
Rhunes CLI

Command-line interface for Latin <-> Rhunes transliteration.

Usage:
    python -m rhunes <text> [options]
    python -m rhunes "the king sings"
    python -m rhunes -r "ᚦᛖ ᚲᛁᛜ ᛊᛁᛜᛊ"
    echo "skål" | python -m rhunes

Options:
    -r, --reverse        Translate from Rhunes back to Latin
    -v, --verbose        Log engine activity to stderr
    --table              Show the alphabet and special rules
    --version            Show the version and exit
"""

import argparse
import logging
import sys
import os

# Allow running from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rhunes import __version__
from rhunes.core import RuneTranslator
from rhunes.tables import Direction


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="rhunes",
        description=(
            "Rhunes translator\n\n"
            "Transliterates Latin text to Rhunes, or back with --reverse.\n"
            "Characters outside the alphabet are kept as they are."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m rhunes \"Thanks for the ring\"\n"
            "  python -m rhunes -r \"ᚦᚨᚾᚲᛊ\"\n"
            "  python -m rhunes --table\n"
        ),
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to translate (read from stdin when omitted)",
    )
    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Reverse translation: from Rhunes to Latin",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log engine activity to stderr",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Show the alphabet and special rules and exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    translator = RuneTranslator()

    if args.table:
        _show_table(translator)
        return

    text = _read_text(args.text)
    if text is None:
        parser.print_help()
        print("\nError: No text provided. Pass it as arguments or pipe it on stdin.", file=sys.stderr)
        sys.exit(1)

    print(translator.translate(text, Direction.from_flag(args.reverse)))


def _read_text(words):
    """Join the positional words, or fall back to piped stdin."""
    if words:
        return " ".join(words)
    if sys.stdin is None or sys.stdin.isatty():
        return None
    piped = sys.stdin.read().rstrip("\r\n")
    return piped or None


def _show_table(translator):
    """Display the alphabet and special rules."""
    print("\nRhunes Alphabet:")
    print("-" * 40)
    for section, mapping in translator.alphabet().items():
        print(f"\n  {section}:")
        for latin, runes in mapping.items():
            print(f"    {latin:<4} {runes}")
    print()


if __name__ == "__main__":
    main()
