# src/codebundle/core/writer.py
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from codebundle.config import AUTHOR_TEMPLATE, NOTE_TEMPLATE
from codebundle.errors import OutputWriteError
from codebundle.models import BundleOptions, BundleResult

def _read_lines(path: Path) -> List[str]:
    """
    Splits only on \\n, \\r\\n and \\r. Other separators str.splitlines()
    knows about (form feed, \\x85, \\u2028, ...) stay inside the line.
    A leading BOM is dropped.
    """
    with path.open("r", encoding="utf-8-sig") as f:
        return [line.rstrip("\r\n") for line in f]

def _keep_line(line: str, remove_empty_lines: bool) -> bool:
    return not (remove_empty_lines and not line.strip())

def write_bundle(output: Path, files: Sequence[Path], options: BundleOptions) -> BundleResult:
    """
    Writes the bundle in three passes over one truncated file handle:
    1. source notes for every file (only with include_note),
    2. the lines of every file, in order,
    3. the author line (only with a non-empty author).

    A source file that cannot be read is reported and skipped. Any failure on
    the output itself raises OutputWriteError; whatever was written so far
    stays on disk.
    """
    output = Path(output)
    written: List[Path] = []
    skipped: List[Tuple[Path, str]] = []

    try:
        # surrogateescape writes undecodable file names back as their raw bytes
        with open(output, "w", encoding="utf-8", errors="surrogateescape") as f:
            if options.include_note:
                for path in files:
                    f.write(NOTE_TEMPLATE.format(path=path) + "\n")

            for path in files:
                try:
                    lines = _read_lines(path)
                except (OSError, UnicodeDecodeError) as e:
                    print(f"  > [Warning] Skipping {path} (read error: {e})", file=sys.stderr)
                    skipped.append((path, str(e)))
                    continue

                for line in lines:
                    if _keep_line(line, options.remove_empty_lines):
                        f.write(line + "\n")
                written.append(path)

            if options.author:
                f.write(AUTHOR_TEMPLATE.format(author=options.author) + "\n")

    except (OSError, UnicodeError) as e:
        raise OutputWriteError(f"Error writing file: {e}") from e

    return BundleResult(output=output, files_written=tuple(written), skipped=tuple(skipped))
