"""
CLI entry point for the Wordle advisor.

One-shot:
    python -m apps.cli.assist --primary data/primary_5.txt --guess crane:--G-G --guess spilt:-Y-G-

Interactive (type `help` at the prompt):
    python -m apps.cli.assist --primary data/primary_5.txt --fallback data/fallback_5.txt -i

Patterns use G (green), Y (yellow) and - (gray); '.', 'x', 'b' also mean gray.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from wordle_advisor.analysis import DEFAULT_CONFIG, load_config
from wordle_advisor.datasets import load_words, pretty_summary, validate_dictionaries
from wordle_advisor.engine import format_pattern
from wordle_advisor.session import Analysis, GameSession

SHOW_ALL_LIMIT = 50  # list every candidate at or below this many

HELP = """commands:
  add WORD PATTERN   log a guess, e.g. `add crane --G-G`
  rm K               remove guess number K (1-based)
  reset              clear all guesses
  show               print the analysis again
  help               this text
  quit               leave"""


def _split_guess(text: str) -> tuple[str, str]:
    word, sep, patt = text.partition(":")
    if not sep:
        raise ValueError(f"expected WORD:PATTERN, got {text!r}")
    return word, patt


def render(session: GameSession, a: Analysis) -> str:
    out: List[str] = []

    if session.constraints:
        out.append("Your guesses:")
        for i, c in enumerate(session.constraints, 1):
            out.append(f"  {i}. {c.guess.upper()}  {format_pattern(c.pattern)}")

    src = " (fallback list)" if a.used_fallback else ""
    out.append(f"\nPossible words: {len(a.candidates)} remaining{src} | turn {a.turn} ({a.phase.value})")
    if not a.candidates:
        out.append("  No words match your criteria. Check your inputs!")
    elif len(a.candidates) <= SHOW_ALL_LIMIT:
        out.append("  " + " ".join(a.candidates))
    else:
        out.append("  too many to list; see letter frequencies below")

    if a.trap.is_trapped:
        slots = ", ".join(str(i + 1) for i in a.trap.variable_positions)
        out.append(f"\nPattern trap: open slot(s) {slots}, letters {' '.join(a.trap.variable_letters).upper()}")
        for b in a.breakers:
            out.append(f"  {b.word.upper()}  tests {', '.join(b.matched_letters).upper()}"
                       f"  ~{b.narrows_to} left (exact {b.expected_remaining:.1f})")

    if a.suggestions:
        out.append("\nSuggestions:")
        for i, s in enumerate(a.suggestions, 1):
            tag = "  could be answer" if s.answer_flag else ""
            out.append(f"  #{i:<2} {s.word.upper()}  eliminates ~{round(s.elimination_fraction * 100)}%"
                       f"  score {s.blended_score:.3f}{tag}")
    elif len(a.candidates) > session.config.suggestion_limit:
        out.append("\nSuggestions: not computed (too many candidates)")

    if a.best_guesses:
        out.append("\nBest guesses from remaining words:")
        for i, b in enumerate(a.best_guesses, 1):
            out.append(f"  #{i:<2} {b.word.upper()}  eliminates ~{round(b.elimination_pct)}%")

    common = a.statistics.common_letters[: session.config.info_top_letters]
    if common and len(a.candidates) > 2:
        out.append("\nMost common untested letters: "
                   + "  ".join(f"{lf.letter.upper()} {lf.percentage}%" for lf in common))
    if a.info_words:
        out.append("Words that test them:")
        for i, iw in enumerate(a.info_words, 1):
            tag = "  could be answer" if iw.could_be_answer else ""
            out.append(f"  #{i:<2} {iw.word.upper()}  tests {', '.join(iw.matching_letters).upper()}{tag}")

    if a.candidates:
        out.append("\nLetter probabilities by position:")
        for pos, row in enumerate(a.statistics.position_frequencies, 1):
            out.append(f"  {pos}: " + "  ".join(f"{lf.letter.upper()} {lf.percentage}%" for lf in row))

    return "\n".join(out)


def _interactive(session: GameSession) -> None:
    print(HELP)
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            print()
            return
        if not line:
            continue
        cmd, *rest = line.split()
        cmd = cmd.lower()
        try:
            if cmd in ("quit", "exit", "q"):
                return
            if cmd == "help":
                print(HELP)
                continue
            if cmd == "add" and len(rest) == 2:
                session.add_guess(rest[0], rest[1])
            elif cmd == "rm" and len(rest) == 1:
                session.remove_guess(int(rest[0]) - 1)
            elif cmd == "reset":
                session.reset()
            elif cmd != "show":
                print(f"unknown command: {line!r} (try `help`)")
                continue
        except (ValueError, IndexError) as e:
            print(f"error: {e}")
            continue
        print(render(session, session.analyze()))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle advisor: candidates, letter stats, and next-guess suggestions")
    ap.add_argument("--primary", default="data/primary_5.txt",
                    help="path to primary word list (answers are drawn from here)")
    ap.add_argument("--fallback", default=None,
                    help="optional extended word list used when the primary list runs dry")
    ap.add_argument("--guess", action="append", default=[], metavar="WORD:PATTERN",
                    help="a guess and its marks, e.g. crane:--G-G (repeatable, in play order)")
    ap.add_argument("-i", "--interactive", action="store_true", help="keep prompting for guesses")
    ap.add_argument("--config", help="JSON file overriding thresholds and phase weights")
    ap.add_argument("--check", action="store_true", help="print a dictionary validation summary first")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        if args.check:
            print(pretty_summary(validate_dictionaries(5, args.primary, args.fallback)))

        primary = load_words(args.primary)
        fallback = load_words(args.fallback) if args.fallback else []
        session = GameSession(primary, fallback, config=config)

        for g in args.guess:
            session.add_guess(*_split_guess(g))
    except (ValueError, IndexError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(render(session, session.analyze()))
    if args.interactive:
        _interactive(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
