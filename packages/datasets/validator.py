"""
Dataset validator for the word lists.

What this module does:
- Validate a pair of word lists: start.txt (root words a session can be dealt)
  and dictionary_<locale>.txt (words the offline spell checker accepts).
- Enforce formatting rules (lowercase, a–z only, non-empty, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Report which root words are missing from the dictionary (informational:
  a root word never has to be guessed).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/start.txt",
                             "packages/datasets/data/dictionary_en.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (roots, dictionary) pair."""
    roots: FileReport
    dictionary: FileReport
    roots_in_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z (no inner whitespace)
      - empty/whitespace-only lines are INVALID (a final newline is not a line)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    lines = path.read_text(encoding="utf-8").splitlines()
    for raw in lines:
        w = raw.strip()
        if not w:
            invalid += 1
            continue
        if w == w.lower() and w.isascii() and w.isalpha():
            valid.append(w)
        else:
            invalid += 1

    return valid, invalid


def _missing(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


def _report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(roots_path: str, dictionary_path: str) -> Dict:
    """
    Validate the root-word list and the dictionary list.

    Parameters
    ----------
    roots_path : str
        Path to the root-word resource (one word per line).
    dictionary_path : str
        Path to the dictionary used by the offline spell checker.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - roots ⊆ dictionary check
          - `passed` boolean (requires non-empty files and no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    roots_p = Path(roots_path)
    dict_p = Path(dictionary_path)

    # Early return if either file is missing
    if not roots_p.exists() or not dict_p.exists():
        if not roots_p.exists():
            issues.append(f"roots file not found: {roots_path}")
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            roots=_report(roots_p, *_load_and_check(roots_p)) if roots_p.exists() else _missing(roots_path),
            dictionary=_report(dict_p, *_load_and_check(dict_p)) if dict_p.exists() else _missing(dictionary_path),
            roots_in_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    roots, roots_invalid = _load_and_check(roots_p)
    words, dict_invalid = _load_and_check(dict_p)

    roots_report = _report(roots_p, roots, roots_invalid)
    dict_report = _report(dict_p, words, dict_invalid)

    subset_ok = set(roots).issubset(words)
    if not subset_ok:
        # Informational only; surface a few examples
        missing = sorted(set(roots) - set(words))[:5]
        issues.append(f"roots not in dictionary (e.g., {missing})")

    if roots_report.count == 0:
        issues.append("roots file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    if roots_invalid:
        issues.append(f"roots has {roots_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")

    if roots_report.count != roots_report.unique_count:
        issues.append("roots contains duplicate lines")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    passed = (
            roots_invalid == 0
            and dict_invalid == 0
            and roots_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        roots=roots_report,
        dictionary=dict_report,
        roots_in_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        roots=40 (uniq=40, sha=abc123...) | dictionary=612 (uniq=612, sha=def456...) | roots⊆dictionary=True | OK
    """
    a = report["roots"]
    b = report["dictionary"]
    subset = report["roots_in_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"roots={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| roots⊆dictionary={subset} | {status}"
    )
