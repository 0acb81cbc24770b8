from .core import run_transcript, feasible_words, survey_roots, summarize_counts
from .io import write_csv, write_manifest

__all__ = [
    "run_transcript", "feasible_words", "survey_roots", "summarize_counts",
    "write_csv", "write_manifest",
]
