"""
Tests for Vietnamese text normalization.
"""

from vncorenlp.utils import is_normalized, normalize_spaces, normalize_text, normalize_unicode


DECOMPOSED = "việc"
COMPOSED = "việc"


def test_decomposed_diacritics_are_composed():
    assert normalize_unicode(DECOMPOSED) == COMPOSED
    assert normalize_text(DECOMPOSED) == COMPOSED


def test_special_spaces_become_plain():
    assert normalize_spaces("Hà Nội​") == "Hà Nội"


def test_empty_text():
    assert normalize_text("") == ""


def test_is_normalized():
    assert is_normalized("làm " + COMPOSED)
    assert not is_normalized("làm")
