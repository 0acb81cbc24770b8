"""
Harness primitives.

- run_transcript: feed a list of guesses through one session, in order.
- feasible_words: every dictionary word a root word admits.
- survey_roots:   feasible-word counts for many root words.
- summarize_counts: aggregate stats over a survey.

These functions are UI-agnostic so they can be reused by the CLI apps,
a notebook, or tests without changes.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List

import numpy as np

from packages.engine import is_possible


def run_transcript(session, guesses: Iterable[str]) -> Dict:
    """
    Submit each guess to `session` and record what happened.

    Returns:
        dict with keys:
            root_word (str), accepted (int), rejected (int), time_ms (float),
            rows (list[dict(guess, word, ok, reason)]),
            history (list[str], most recent first)
    """
    rows: List[Dict] = []
    t0 = time.perf_counter()
    for g in guesses:
        outcome = session.submit_guess(g)
        rows.append({
            "guess": g,
            "word": outcome.word,
            "ok": outcome.ok,
            "reason": None if outcome.ok else outcome.reason.value,
        })
    dt = (time.perf_counter() - t0) * 1000.0

    accepted = sum(1 for r in rows if r["ok"])
    return {
        "root_word": session.root_word,
        "accepted": accepted,
        "rejected": len(rows) - accepted,
        "time_ms": dt,
        "rows": rows,
        "history": list(session.history),
    }


def feasible_words(root_word: str, dictionary: Iterable[str]) -> List[str]:
    """
    Dictionary words (other than the root itself) spellable from `root_word`.
    Order follows `dictionary`; duplicates are dropped.
    """
    seen = set()
    out: List[str] = []
    for w in dictionary:
        if not w or w == root_word or w in seen:
            continue
        seen.add(w)
        if is_possible(w, root_word):
            out.append(w)
    return out


def survey_roots(roots: Iterable[str], dictionary: Iterable[str]) -> List[Dict]:
    """
    For each root word, count the feasible dictionary words and keep the
    longest one (ties broken alphabetically).
    """
    words = list(dictionary)
    out: List[Dict] = []
    for root in roots:
        found = feasible_words(root, words)
        longest = min(found, key=lambda w: (-len(w), w)) if found else ""
        out.append({"root_word": root, "feasible": len(found), "longest": longest})
    return out


def summarize_counts(rows: List[Dict]) -> Dict:
    """
    Mean / median / min / max of the `feasible` column of a survey.
    Empty input yields zeros.
    """
    if not rows:
        return {"roots": 0, "mean": 0.0, "median": 0.0, "min": 0, "max": 0}
    counts = np.array([r["feasible"] for r in rows], dtype=float)
    return {
        "roots": int(counts.size),
        "mean": round(float(counts.mean()), 3),
        "median": float(np.median(counts)),
        "min": int(counts.min()),
        "max": int(counts.max()),
    }
