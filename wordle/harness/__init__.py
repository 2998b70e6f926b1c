from .core import run_case, run_batch, summarize

__all__ = ["run_case", "run_batch", "summarize"]
