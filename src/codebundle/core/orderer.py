# src/codebundle/core/orderer.py
from pathlib import Path
from typing import Iterable, List

def order_files(candidates: Iterable[Path], sort_mode: str = "name") -> List[Path]:
    """Stable sort by extension for 'type', by file name for anything else."""
    if sort_mode == "type":
        return sorted(candidates, key=lambda p: Path(p).suffix)
    return sorted(candidates, key=lambda p: Path(p).name)
