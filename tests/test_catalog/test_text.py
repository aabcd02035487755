"""
Tests for text normalization.
"""

from fotocrm.core.text import normalize


def test_strips_accents_and_case():
    """Test accents and case are removed."""
    assert normalize("Aceró") == "acero"
    assert normalize("ÁÉÍÓÚ ñ ü") == "aeiou n u"


def test_empty_input():
    """Test empty and missing input."""
    assert normalize("") == ""
    assert normalize(None) == ""


def test_plain_text_unchanged_except_case():
    """Test plain text is only lowercased."""
    assert normalize("Damasco 1095") == "damasco 1095"


def test_idempotent():
    """Test normalizing twice changes nothing."""
    once = normalize("Grabado Láser")
    assert normalize(once) == once
