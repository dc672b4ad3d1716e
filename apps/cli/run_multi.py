# apps/cli/run_multi.py
"""
Benchmark several openers in one shot with shared sampling.

Every opener plays the same cases; outputs go to
<outdir>/<opener>/run_<timestamp>.csv + _manifest.json, followed by a one-line
comparison per opener. 'none' disables the opener shortcut (pure entropy
from the first guess).
"""

from __future__ import annotations
import argparse, logging, random, sys
from pathlib import Path

from bigbrain.config import BrainConfig
from bigbrain.datasets import load_words, pretty_summary, validate_wordlists
from bigbrain.engine import MalformedDictionaryEntry, Word
from bigbrain.harness import run_batch, summarize, write_csv, write_manifest
from bigbrain.harness.io import timestamp_id


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="bigbrain: compare openers")
    ap.add_argument("--openers", nargs="+", required=True,
                    help="opener words to compare ('none' = no opener)")
    ap.add_argument("--words", required=True)
    ap.add_argument("--allowed")
    ap.add_argument("--sample", type=int)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--workers", type=int)
    ap.add_argument("--outdir", default="reports/openers")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) validate once
    rep = validate_wordlists(args.words, args.allowed)
    print(pretty_summary(rep))

    # 2) load lists once
    try:
        answers = load_words(args.words)
        extra = load_words(args.allowed) if args.allowed else []
        openers = [None if o.lower() == "none" else Word(o) for o in args.openers]
    except (MalformedDictionaryEntry, FileNotFoundError) as e:
        print(f"Cannot load word lists: {e}", file=sys.stderr)
        return 2

    # 3) shared cases (deterministic by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers); rng.shuffle(pool); cases = pool[:args.sample]
    else:
        cases = list(answers)

    outdir = Path(args.outdir)
    run_id = timestamp_id()

    # 4) run each opener sequentially (shared cases)
    lines = []
    for opener in openers:
        label = opener or "none"
        print(f"\n=== Opener {label} on {len(cases)} cases ===")
        config = BrainConfig(opener=opener, workers=args.workers, seed=args.seed)
        results = run_batch(cases, dictionary=answers, extra_guesses=extra, config=config,
                            progress=sys.stderr.isatty())
        summary = summarize(results)

        odir = outdir / label
        csv_path = write_csv(results, str(odir / f"run_{run_id}.csv"), opener=opener)
        manifest_path = write_manifest({
            "run_id": run_id,
            "config": {"opener": opener, "seed": args.seed, "num_cases": len(cases)},
            "wordlists": rep,
            "summary": summary,
        }, str(odir / f"run_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

        mean = summary["mean_guesses"]
        lines.append(f"{label:>6}  solved {summary['solved']}/{summary['games']}  "
                     f"mean {'n/a' if mean is None else f'{mean:.3f}'}")

    print()
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
