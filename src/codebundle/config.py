# src/codebundle/config.py

# (name, aliases, glob pattern). A pattern of None selects every file.
LANGUAGE_TABLE = [
    ("c#", ("csharp", "cs"), "*.cs"),
    ("java", (), "*.java"),
    ("react", ("jsx",), "*.jsx"),
    ("angular", ("typescript", "ts"), "*.ts"),
    ("python", ("py",), "*.py"),
    ("c++", ("cpp",), "*.cpp"),
    ("c", (), "*.c"),
    ("javascript", ("js",), "*.js"),
    ("dotnet", ("sln",), "*.sln"),
    ("all", (), None),
]

# Substrings that mark compiler output. Matched against the file name.
BUILD_ARTIFACT_MARKERS = ("bin", "debug")

NOTE_TEMPLATE = "// Source: {path}"
AUTHOR_TEMPLATE = "// Author: {author}"

SORT_MODES = ("name", "type")
DEFAULT_SORT = "name"
