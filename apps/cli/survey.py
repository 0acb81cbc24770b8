# apps/cli/survey.py
"""
CLI entry point for surveying the root-word list.

This script:
  1) Validates the word lists (prints counts + SHA, checks roots ⊆ dictionary).
  2) Counts, for every root word, how many dictionary words can be spelled from it.
  3) Writes:
       - CSV:  one row per root word (feasible count, longest feasible word)
       - JSON: manifest with config, wordlist hashes, summary stats, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import (
    DEFAULT_DICTIONARY_PATH,
    DEFAULT_ROOTS_PATH,
    WordListUnavailable,
    load_word_list,
    pretty_summary,
    validate_wordlists,
)
from packages.harness import summarize_counts, survey_roots
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest


def main():
    """
    Parse CLI args, validate datasets, survey with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="word scramble — survey root words")
    ap.add_argument("--words", default=str(DEFAULT_ROOTS_PATH),
                    help="path to the root-word list")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY_PATH),
                    help="path to the dictionary word list")
    ap.add_argument("--sample", type=int,
                    help="survey only a subset of root words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--debug", action="store_true", help="verbose logging")
    args = ap.parse_args()

    loglevel = "DEBUG" if args.debug else "INFO"
    logging.basicConfig(format="%(levelname)s [%(asctime)s] %(message)s",
                        datefmt="%Y-%m-%d %H:%M:%S", level=loglevel)

    # 1) Validate wordlists and print a one-liner summary
    rep = validate_wordlists(args.words, args.dictionary)
    print(pretty_summary(rep))

    # 2) Load lists into memory (lowercased, no blanks)
    try:
        roots = load_word_list(args.words)
        dictionary = load_word_list(args.dictionary)
    except WordListUnavailable as e:
        print(f"Could not load word list: {e}", file=sys.stderr)
        sys.exit(1)

    # 3) Choose roots (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(roots):
        pool = list(roots)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(roots)

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(cases, ncols=80, desc="Surveying", unit="root") if mode == "bar" else cases

    rows = []
    start = time.time()
    last_print = 0.0
    for idx, root in enumerate(iterator, 1):
        rows.extend(survey_roots([root], dictionary))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    summary = summarize_counts(rows)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"roots={summary['roots']} mean={summary['mean']} median={summary['median']} "
          f"min={summary['min']} max={summary['max']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
