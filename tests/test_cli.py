# tests/test_cli.py
import sys
import pytest
from pathlib import Path
from unittest.mock import patch

from codebundle.cli import main

def run_cli(*args):
    """Runs main() with the given arguments, as the console script would."""
    with patch.object(sys, "argv", ["codebundle", *args]):
        main()

@pytest.fixture
def project(tmp_path, monkeypatch):
    """Working directory with two python files and one unrelated file."""
    (tmp_path / "a.py").write_text("first = 1\n\nsecond = 2\n", encoding="utf-8")
    (tmp_path / "b.py").write_text("third = 3\n", encoding="utf-8")
    (tmp_path / "readme.md").write_text("# readme\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path

# --- Test 1: bundle command ---

def test_bundle_removes_empty_lines(project, capsys):
    run_cli("bundle", "-o", "out.txt", "-l", "python", "-r")

    lines = (project / "out.txt").read_text(encoding="utf-8").splitlines()
    assert lines == ["first = 1", "second = 2", "third = 3"]
    assert "Success! Bundle written to:" in capsys.readouterr().out

def test_bundle_alias_and_long_flags(project):
    run_cli("b", "--output", "out.txt", "--language", "PYTHON", "--note", "--author", "Jane Doe")

    lines = (project / "out.txt").read_text(encoding="utf-8").splitlines()
    assert lines[:2] == ["// Source: a.py", "// Source: b.py"]
    assert lines[2] == "first = 1"
    assert lines[-1] == "// Author: Jane Doe"

def test_bundle_explicit_flag_values(project):
    run_cli("b", "-o", "out.txt", "-l", "python", "-n", "False", "-r", "True")
    content = (project / "out.txt").read_text(encoding="utf-8")
    assert "// Source:" not in content
    assert content == "first = 1\nsecond = 2\nthird = 3\n"

def test_bundle_sort_by_type(project):
    (project / "c.c").write_text("int c;\n", encoding="utf-8")
    run_cli("b", "-o", "out.txt", "-l", "all", "-s", "type")

    lines = (project / "out.txt").read_text(encoding="utf-8").splitlines()
    # .c, then .md, then .py
    assert lines[0] == "int c;"
    assert lines[1] == "# readme"
    assert lines[-1] == "third = 3"

def test_bundle_does_not_include_itself(project):
    run_cli("b", "-o", "out.txt", "-l", "all")
    first = (project / "out.txt").read_text(encoding="utf-8")

    # Second run sees out.txt in the directory and must skip it
    run_cli("b", "-o", "out.txt", "-l", "all")
    assert (project / "out.txt").read_text(encoding="utf-8") == first

def test_bundle_from_other_directory(project, tmp_path_factory):
    elsewhere = tmp_path_factory.mktemp("elsewhere")
    out = elsewhere / "out.txt"
    run_cli("b", "-o", str(out), "-l", "python", "-d", ".")
    assert out.read_text(encoding="utf-8").startswith("first = 1")

def test_bundle_no_matches_still_writes(project, capsys):
    run_cli("b", "-o", "out.txt", "-l", "java", "-a", "Jane")
    assert (project / "out.txt").read_text(encoding="utf-8") == "// Author: Jane\n"
    assert "No matching files found." in capsys.readouterr().out

# --- Test 2: errors and exit status ---

def test_unsupported_language_writes_nothing(project, capsys):
    run_cli("b", "-o", "out.txt", "-l", "cobol")

    assert not (project / "out.txt").exists()
    assert "cobol" in capsys.readouterr().err

def test_unsupported_language_strict_exit(project):
    with pytest.raises(SystemExit) as excinfo:
        run_cli("b", "-o", "out.txt", "-l", "cobol", "--strict")
    assert excinfo.value.code == 1

def test_missing_required_flags(project):
    with pytest.raises(SystemExit) as excinfo:
        run_cli("bundle", "-o", "out.txt")
    assert excinfo.value.code == 2
    assert not (project / "out.txt").exists()

def test_invalid_flag_value(project):
    with pytest.raises(SystemExit) as excinfo:
        run_cli("b", "-o", "out.txt", "-l", "python", "-n", "perhaps")
    assert excinfo.value.code == 2

def test_invalid_directory_is_reported(project, capsys):
    run_cli("b", "-o", "out.txt", "-l", "python", "-d", "missing")
    assert "Invalid directory" in capsys.readouterr().err
    assert not (project / "out.txt").exists()

def test_output_failure_is_reported(project, capsys):
    run_cli("b", "-o", "nowhere/out.txt", "-l", "python")
    assert "Error writing file" in capsys.readouterr().err

def test_output_failure_strict_exit(project):
    with pytest.raises(SystemExit) as excinfo:
        run_cli("b", "-o", "nowhere/out.txt", "-l", "python", "--strict")
    assert excinfo.value.code == 1

# --- Test 3: create-rsp and replay ---

def test_create_rsp_then_replay(project, monkeypatch, capsys):
    replies = iter(["out.txt", "python", "true", "name", "true", "Jane Doe", "out.rsp"])
    monkeypatch.setattr("builtins.input", lambda _: next(replies))

    run_cli("create-rsp")

    rsp = project / "out.rsp"
    assert rsp.read_text(encoding="utf-8") == "b -o out.txt -l python -n True -s name -r True -a 'Jane Doe'"
    assert "Response file created: out.rsp" in capsys.readouterr().out

    run_cli("@out.rsp")

    lines = (project / "out.txt").read_text(encoding="utf-8").splitlines()
    assert lines == [
        "// Source: a.py",
        "// Source: b.py",
        "first = 1",
        "second = 2",
        "third = 3",
        "// Author: Jane Doe",
    ]

def test_create_rsp_cancelled(project, monkeypatch):
    def interrupt(_):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    with pytest.raises(SystemExit) as excinfo:
        run_cli("create-rsp")
    assert excinfo.value.code == 1

# --- Test 4: directory and source failures ---

def test_bundle_directory_name_with_marker_word(project):
    robin = project / "robin"
    robin.mkdir()
    (robin / "a.py").write_text("a = 1\n", encoding="utf-8")

    run_cli("b", "-o", "out.txt", "-l", "python", "-d", str(robin))
    assert (project / "out.txt").read_text(encoding="utf-8") == "a = 1\n"

def test_unreadable_directory_is_reported(project, monkeypatch, capsys):
    def refuse(_path):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("os.scandir", refuse)
    run_cli("b", "-o", "out.txt", "-l", "python")

    assert "Cannot read directory" in capsys.readouterr().err
    assert not (project / "out.txt").exists()

def test_unencodable_author_is_reported(project, capsys):
    run_cli("b", "-o", "out.txt", "-l", "python", "-a", "\ud800")
    err = capsys.readouterr().err
    assert "Error writing file" in err
    assert "unexpected" not in err

def test_undecodable_source_is_skipped(project, capsys):
    (project / "bad.py").write_bytes(b"\xff\xfe not utf-8\n")
    run_cli("b", "-o", "out.txt", "-l", "python")

    assert (project / "out.txt").read_text(encoding="utf-8") == "first = 1\n\nsecond = 2\nthird = 3\n"
    assert "Skipping" in capsys.readouterr().err

def test_undecodable_source_strict_exit(project):
    (project / "bad.py").write_bytes(b"\xff\xfe not utf-8\n")
    with pytest.raises(SystemExit) as excinfo:
        run_cli("b", "-o", "out.txt", "-l", "python", "--strict")
    assert excinfo.value.code == 1
    assert (project / "out.txt").exists()

def test_bundle_help_lists_sort_modes(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_cli("b", "--help")
    assert excinfo.value.code == 0
    assert "name or type" in capsys.readouterr().out
