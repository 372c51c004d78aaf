from .session import Session
from .core import run_case, run_batch
from .io import write_csv, write_manifest

__all__ = ["Session", "run_case", "run_batch", "write_csv", "write_manifest"]
