"""
CLI entry point for self-play evaluation of the advisor.

This script:
  1) Validates the dictionaries (prints counts + SHA, checks primary ⊆ fallback).
  2) Loads the lists and the advisor config.
  3) Plays every (or a sampled subset of) primary answer by following the
     advisor's top pick, with a progress bar, and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary hashes, git commit, summary
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordle_advisor.analysis import DEFAULT_CONFIG, load_config
from wordle_advisor.datasets import load_words, pretty_summary, validate_dictionaries
from wordle_advisor.harness import WORDLE_MAX_TURNS, run_case, summarize, write_csv, write_manifest
from wordle_advisor.harness.io import git_commit_or_unknown, timestamp_id

log = logging.getLogger("simulate")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle advisor: self-play evaluation")
    ap.add_argument("--primary", default="data/primary_5.txt",
                    help="path to primary word list (also the pool of hidden answers)")
    ap.add_argument("--fallback", default=None, help="optional extended word list")
    ap.add_argument("--config", help="JSON file overriding thresholds and phase weights")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    if args.sample is not None and args.sample < 0:
        ap.error("--sample must be >= 0")

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG

        # 1) Validate dictionaries and print a one-liner summary
        rep = validate_dictionaries(5, args.primary, args.fallback)
        print(pretty_summary(rep))

        # 2) Load lists into memory
        primary = load_words(args.primary)
        fallback = load_words(args.fallback) if args.fallback else []
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Choose cases (deterministic sample by seed)
    cases = list(primary)
    if args.sample is not None and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    log.info("playing %d games", len(cases))

    # 4) Run batch with live progress
    results = []
    for ans in tqdm(cases, ncols=80, desc="Playing", unit="game", disable=args.no_progress):
        results.append(run_case(ans, primary=primary, fallback=fallback, config=config))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"selfplay_{run_id}.csv"
    manifest_path = outdir / f"selfplay_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS, N=5)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "advisor_config": dataclasses.asdict(config),
        "dictionaries": rep,
        "num_cases": len(results),
        "summary": summary,
    }, str(manifest_path))

    print(f"win rate {summary['win_rate']:.1%} | mean guesses {summary['mean_guesses_on_win']:.2f}"
          f" | distribution {summary['distribution']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
