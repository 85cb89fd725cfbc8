from __future__ import annotations

import time
from pathlib import Path
from typing import Optional


def timestamp_for_filename(now: Optional[float] = None) -> str:
    t = time.time() if now is None else now
    return time.strftime("%Y%m%d_%H%M%S", time.localtime(t))


def default_output_name(stem: str, mode: str, suffix: str = ".csv", now: Optional[float] = None) -> str:
    ts = timestamp_for_filename(now)
    return f"{stem}_{mode}_{ts}{suffix}"


def logs_dir(base: Optional[Path] = None) -> Path:
    root = Path.cwd() if base is None else base
    return root / "logs"


def resolve_output_path(path_arg: Optional[str], default_name: str, base: Optional[Path] = None) -> Path:
    """
    No path: logs/<default_name>. Relative path: under logs/. Absolute: as given.
    Parent directories are created.
    """
    if not path_arg:
        p = logs_dir(base=base) / default_name
    else:
        p = Path(path_arg)
        if not p.is_absolute():
            p = logs_dir(base=base) / p

    p.parent.mkdir(parents=True, exist_ok=True)
    return p
