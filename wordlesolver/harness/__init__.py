from .core import play_game, run_batch, summarize, replay_candidates, first_inconsistent
from .io import build_manifest, new_run_id, write_csv, write_manifest, write_turns_csv

__all__ = [
    "play_game", "run_batch", "summarize", "replay_candidates", "first_inconsistent",
    "build_manifest", "new_run_id", "write_csv", "write_manifest", "write_turns_csv",
]
