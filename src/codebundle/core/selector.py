# src/codebundle/core/selector.py
import os
from pathlib import Path
from typing import List, Optional

import pathspec

from codebundle.config import BUILD_ARTIFACT_MARKERS
from codebundle.errors import InvalidDirectoryError
from codebundle.models import LanguageSpec

def has_build_marker(path: str, segment_markers: bool = False) -> bool:
    """
    True if the path looks like build output.

    The default check is a plain substring test, so 'binary.py' counts.
    With segment_markers=True only a path segment equal to a marker
    ('bin', 'debug') counts.
    """
    if segment_markers:
        return any(part in BUILD_ARTIFACT_MARKERS for part in Path(path).parts)
    return any(marker in path for marker in BUILD_ARTIFACT_MARKERS)

def _language_spec_matcher(spec: LanguageSpec) -> Optional[pathspec.GitIgnoreSpec]:
    if spec.matches_all:
        return None
    return pathspec.GitIgnoreSpec.from_lines([spec.pattern])

def select_files(
    directory: Path,
    spec: LanguageSpec,
    exclude: Optional[Path] = None,
    segment_markers: bool = False,
) -> List[Path]:
    """
    Lists regular files directly under `directory` that match the language,
    skipping build-artifact paths and the `exclude` path (the bundle itself).
    Subdirectories are not descended into. Returns files in name order.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise InvalidDirectoryError(f"Invalid directory '{directory}'")

    matcher = _language_spec_matcher(spec)
    excluded = exclude.resolve() if exclude is not None else None

    selected: List[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue

                # Markers are checked relative to `directory`, which is just the
                # name since the listing is flat.
                if matcher is not None and not matcher.match_file(entry.name):
                    continue
                if has_build_marker(entry.name, segment_markers):
                    continue

                candidate = directory / entry.name
                if excluded is not None and candidate.resolve() == excluded:
                    continue

                selected.append(candidate)
    except OSError as e:
        raise InvalidDirectoryError(f"Cannot read directory '{directory}': {e}") from e

    selected.sort(key=lambda p: p.name)
    return selected
