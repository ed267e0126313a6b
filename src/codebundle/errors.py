# src/codebundle/errors.py
"""
Exception hierarchy for codebundle.

Core modules raise these; the CLI catches them and turns them into messages.
"""

class CodeBundleError(Exception):
    """Base exception for all codebundle errors."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class UnsupportedLanguageError(CodeBundleError):
    """Raised when a language token is not in the registry."""
    def __init__(self, token: str):
        super().__init__(f"Unsupported language: {token}")
        self.token = token


class InvalidDirectoryError(CodeBundleError):
    """Raised when the source directory is missing or not a directory."""
    pass


class OutputWriteError(CodeBundleError):
    """Raised when the bundle file cannot be opened or written."""
    pass


class ResponseFileError(CodeBundleError):
    """Raised when the response file cannot be written."""
    pass
