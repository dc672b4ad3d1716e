# apps/cli/run.py
"""
CLI entry point for benchmarking the advisor.

This script:
  1) Validates the word lists (prints counts, SHA and answer/allowed overlap).
  2) Loads the lists and plays one simulated game per answer with a fresh
     CandidateBrain, scoring each suggestion against the hidden word.
  3) Writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, wordlist hashes, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from bigbrain.config import BrainConfig, DEFAULT_OPENER
from bigbrain.datasets import load_words, pretty_summary, validate_wordlists
from bigbrain.engine import MalformedDictionaryEntry
from bigbrain.harness import run_batch, summarize, write_csv, write_manifest
from bigbrain.harness.io import timestamp_id


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="bigbrain: benchmark the advisor")
    ap.add_argument("--words", required=True,
                    help="dictionary file (candidate answers, one per line)")
    ap.add_argument("--allowed", help="extra allowed guesses (never answers)")
    ap.add_argument("--opener", default=DEFAULT_OPENER,
                    help="first guess used while still a candidate ('' to disable)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--workers", type=int, help="processes used to rank guesses")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate wordlists and print a one-liner summary (counts, SHAs, overlap)
    rep = validate_wordlists(args.words, args.allowed)
    print(pretty_summary(rep))

    # 2) Load lists into memory; a malformed entry is fatal
    try:
        answers = load_words(args.words)
        extra = load_words(args.allowed) if args.allowed else []
    except (MalformedDictionaryEntry, FileNotFoundError) as e:
        print(f"Cannot load word lists: {e}", file=sys.stderr)
        return 2

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)

    config = BrainConfig(opener=args.opener or None, workers=args.workers, seed=args.seed)

    # 4) Run batch with live progress
    results = run_batch(cases, dictionary=answers, extra_guesses=extra, config=config,
                        progress=not args.no_progress and sys.stderr.isatty())
    summary = summarize(results)

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), opener=config.opener)
    manifest = {
        "run_id": run_id,
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    mean = summary["mean_guesses"]
    print(f"Solved {summary['solved']}/{summary['games']} "
          f"({summary['success_rate']:.1%}), mean guesses "
          f"{'n/a' if mean is None else f'{mean:.3f}'}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
