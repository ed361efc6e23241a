from .core import run_case, run_batch, STRATEGIES, DEFAULT_TURNS
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "STRATEGIES", "DEFAULT_TURNS", "write_csv", "write_manifest"]
