"""
CLI interface for kana-typist.

Usage:
    kana-typist "きょうは"
    kana-typist "きょうは" --input kyo
    kana-typist --json "しゃしん" -i sh --prefer しゃ=sha
    echo "こんにちは" | kana-typist --basic
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Tuple

from kana_typist import __version__
from kana_typist.basic import basic_romaji
from kana_typist.predict import Prediction, is_complete, predict_next
from kana_typist.search import best_romanization
from kana_typist.tendencies import default_tendencies, validate_tendencies

logger = logging.getLogger(__name__)


# ============================================================================
# Argument Parsing
# ============================================================================

def parse_preference(value: str) -> Tuple[str, str]:
    """Parse a KANA=SPELLING pair."""
    kana, sep, spelling = value.partition("=")
    if not sep or not kana or not spelling:
        raise argparse.ArgumentTypeError(f"expected KANA=SPELLING, got {value!r}")
    return kana, spelling


def build_tendencies(preferences: List[Tuple[str, str]], use_defaults: bool = True) -> Dict[str, str]:
    """Start from the baseline (unless disabled) and apply --prefer overrides."""
    tendencies = default_tendencies() if use_defaults else {}
    for kana, spelling in preferences:
        tendencies[kana] = spelling
    validate_tendencies(tendencies)
    return tendencies


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(text: str, typed: str, best: str,
                   predictions: List[Prediction], complete: bool) -> str:
    """Human-readable report."""
    lines = [
        f"text:      {text}",
        f"typed:     {typed}",
        f"romaji:    {best}",
        f"remaining: {best[len(typed):] if best.startswith(typed) else best}",
    ]

    if complete:
        lines.append("next:      (complete)")
    elif not predictions:
        lines.append("next:      (input does not match the text)")
    else:
        letters = []
        for p in predictions:
            if p.letter not in letters:
                letters.append(p.letter)
        lines.append(f"next:      {' '.join(letters)}")
        for p in predictions:
            mark = "" if p.recognized else " (literal)"
            lines.append(f"  {p.letter}  {p.kana} → {p.spelling}{mark}")

    return "\n".join(lines)


def format_json(text: str, typed: str, best: str,
                predictions: List[Prediction], complete: bool) -> str:
    """Report as a JSON object."""
    data = {
        "text": text,
        "input": typed,
        "romaji": best,
        "remaining": best[len(typed):] if best.startswith(typed) else best,
        "complete": complete,
        "next": [
            {
                "letter": p.letter,
                "kana": p.kana,
                "spelling": p.spelling,
                "recognized": p.recognized,
            }
            for p in predictions
        ],
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kana-typist",
        description="Kana to romaji typing engine",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Kana text to type (read from stdin if omitted)",
    )
    parser.add_argument(
        "--input", "-i",
        default="",
        help="Romaji typed so far",
    )
    parser.add_argument(
        "--prefer", "-p",
        action="append",
        type=parse_preference,
        default=[],
        metavar="KANA=SPELLING",
        help="Preferred spelling for a kana (repeatable)",
    )
    parser.add_argument(
        "--no-defaults",
        action="store_true",
        help="Do not start from the baseline tendencies",
    )
    parser.add_argument(
        "--basic", "-b",
        action="store_true",
        help="Only print the canonical basic romanization",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"kana-typist {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if args.text is None:
        text = sys.stdin.read().strip()
    else:
        text = args.text

    if not text:
        print("Error: no text given", file=sys.stderr)
        return 1

    if args.basic:
        print(basic_romaji(text))
        return 0

    tendencies = build_tendencies(args.prefer, use_defaults=not args.no_defaults)
    typed = args.input

    logger.debug(f"Typing {text!r} with input {typed!r}")
    best = best_romanization(tendencies, text, typed)
    predictions = predict_next(text, typed)
    complete = is_complete(text, typed)

    if args.json:
        print(format_json(text, typed, best, predictions, complete))
    else:
        print(format_default(text, typed, best, predictions, complete))

    return 0


if __name__ == "__main__":
    sys.exit(main())
