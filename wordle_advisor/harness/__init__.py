from .core import run_case, run_batch, pick_guess, WORDLE_MAX_TURNS
from .io import write_csv, write_manifest, summarize

__all__ = ["run_case", "run_batch", "pick_guess", "WORDLE_MAX_TURNS", "write_csv", "write_manifest", "summarize"]
