# src/codebundle/core/languages.py
from typing import Dict, List, Tuple

from codebundle.config import LANGUAGE_TABLE
from codebundle.errors import UnsupportedLanguageError
from codebundle.models import LanguageSpec

def _build_registry() -> Tuple[Tuple[LanguageSpec, ...], Dict[str, LanguageSpec]]:
    specs = tuple(LanguageSpec(name, aliases, pattern) for name, aliases, pattern in LANGUAGE_TABLE)
    lookup: Dict[str, LanguageSpec] = {}
    for spec in specs:
        for token in (spec.name, *spec.aliases):
            lookup[token] = spec
    return specs, lookup

_SPECS, _LOOKUP = _build_registry()

def supported_languages() -> List[str]:
    """Canonical language names, in registry order."""
    return [spec.name for spec in _SPECS]

def resolve_language(token: str) -> LanguageSpec:
    """
    Maps a language token (case-insensitive, surrounding whitespace ignored)
    to its LanguageSpec. Raises UnsupportedLanguageError for unknown tokens.
    """
    key = (token or "").strip().lower()
    try:
        return _LOOKUP[key]
    except KeyError:
        raise UnsupportedLanguageError(token) from None
