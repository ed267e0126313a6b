# src/codebundle/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

@dataclass(frozen=True)
class LanguageSpec:
    """A registry entry: canonical name, accepted aliases and the file glob."""
    name: str
    aliases: Tuple[str, ...]
    pattern: Optional[str]

    @property
    def matches_all(self) -> bool:
        return self.pattern is None

@dataclass(frozen=True)
class BundleOptions:
    """Immutable options for a single bundle run."""
    output: Path
    language: str
    include_note: bool = False
    sort: str = "name"
    remove_empty_lines: bool = False
    author: Optional[str] = None
    directory: Path = Path(".")
    strict: bool = False
    segment_markers: bool = False

@dataclass(frozen=True)
class BundleResult:
    output: Path
    files_written: Tuple[Path, ...]
    skipped: Tuple[Tuple[Path, str], ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.skipped
