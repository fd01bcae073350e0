from .core import parse_script, replay_round, run_batch
from .io import write_csv, write_manifest

__all__ = ["parse_script", "replay_round", "run_batch", "write_csv", "write_manifest"]
