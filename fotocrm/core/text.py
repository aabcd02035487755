"""
Text normalization for locale-insensitive comparison.
"""

import re
import unicodedata

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")


def normalize(value: str | None) -> str:
    """
    Lowercase, decompose and strip combining diacritical marks.

    "Aceró" and "acero" normalize to the same string. ``None`` and the
    empty string both yield ``""``.
    """
    if not value:
        return ""
    decomposed = unicodedata.normalize("NFD", value.lower())
    return _COMBINING_MARKS.sub("", decomposed)
