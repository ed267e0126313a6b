# src/codebundle/core/response.py
import shlex
from pathlib import Path
from typing import Callable, Optional

from codebundle.config import DEFAULT_SORT
from codebundle.core.languages import supported_languages
from codebundle.errors import ResponseFileError

TRUE_WORDS = {"true", "yes", "y", "1"}
FALSE_WORDS = {"false", "no", "n", "0"}

def parse_bool(text: Optional[str], strict: bool = False) -> Optional[bool]:
    """
    Parses a yes/no answer.
    Unrecognised input gives False, or None when strict is set so the caller
    can ask again.
    """
    value = (text or "").strip().lower()
    if value in TRUE_WORDS:
        return True
    if value in FALSE_WORDS:
        return False
    return None if strict else False

def _ask_bool(question: str, prompt: Callable[[str], str], strict: bool) -> bool:
    while True:
        answer = parse_bool(prompt(question), strict=strict)
        if answer is not None:
            return answer
        print("  > Please answer true or false.")

def collect_options(prompt: Optional[Callable[[str], str]] = None, strict_bool: bool = False) -> dict:
    """Asks for each bundle option in turn and returns the answers."""
    prompt = prompt or input
    output = prompt("Enter output file name: ").strip()

    print(" / ".join(supported_languages()))
    language = prompt("Enter language (or 'all'): ").strip()

    include_note = _ask_bool("Include note? (true/false): ", prompt, strict_bool)
    sort = prompt("Sort by (name/type): ").strip() or DEFAULT_SORT
    remove_empty_lines = _ask_bool("Remove empty lines? (true/false): ", prompt, strict_bool)
    author = prompt("Enter author's name: ").strip()

    return {
        "output": output,
        "language": language,
        "include_note": include_note,
        "sort": sort,
        "remove_empty_lines": remove_empty_lines,
        "author": author,
    }

def build_command_line(
    output: str,
    language: str,
    include_note: bool,
    sort: str,
    remove_empty_lines: bool,
    author: Optional[str] = None,
) -> str:
    """Serialises bundle options into one line using the short flags."""
    parts = [
        "b",
        "-o", shlex.quote(output),
        "-l", shlex.quote(language),
        "-n", str(include_note),
        "-s", shlex.quote(sort),
        "-r", str(remove_empty_lines),
    ]
    if author:
        parts += ["-a", shlex.quote(author)]
    return " ".join(parts)

def default_response_name(output: str) -> str:
    stem = Path(output).stem if output else ""
    return f"{stem or 'bundle'}.rsp"

def create_response_file(prompt: Optional[Callable[[str], str]] = None, strict_bool: bool = False) -> Path:
    """
    Runs the interactive prompts, then asks where to save the response file
    and writes the serialised command line there, replacing any existing file.
    """
    prompt = prompt or input
    answers = collect_options(prompt, strict_bool=strict_bool)
    if not answers["output"]:
        raise ResponseFileError("Output file name must not be empty")
    if not answers["language"]:
        raise ResponseFileError("Language must not be empty")

    default_name = default_response_name(answers["output"])
    rsp_name = prompt(f"Enter response file name [{default_name}]: ").strip() or default_name
    rsp_file = Path(rsp_name)

    command = build_command_line(**answers)
    try:
        rsp_file.write_text(command, encoding="utf-8")
    except OSError as e:
        raise ResponseFileError(f"Error writing response file: {e}") from e

    return rsp_file
