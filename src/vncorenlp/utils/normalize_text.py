"""
Vietnamese Text Normalization Utility

Vietnamese letters can be stored either precomposed (U+1EC7 "ệ") or as a base
letter followed by combining marks ("e" + U+0323 + U+0302). Both render the
same but compare unequal, which breaks lexicon lookups and tag models that
were trained on precomposed text. This module folds input into NFC and
replaces exotic whitespace with plain spaces.

Example:
    >>> normalize_text("vie\\u0323\\u0302c")
    'việc'
"""

import unicodedata


# Whitespace that the tokenizer would otherwise keep inside tokens
SPACE_VARIANTS = {
    '\u00A0',  # NO-BREAK SPACE
    '\u2007',  # FIGURE SPACE
    '\u202F',  # NARROW NO-BREAK SPACE
    '\u3000',  # IDEOGRAPHIC SPACE
}

ZERO_WIDTH = {
    '\u200B',  # ZERO WIDTH SPACE
    '\uFEFF',  # BYTE ORDER MARK
}


def normalize_unicode(text: str) -> str:
    """Compose combining diacritics into precomposed characters (NFC)."""
    if not text:
        return text
    return unicodedata.normalize("NFC", text)


def normalize_spaces(text: str) -> str:
    """Replace non-breaking space variants with ' ' and drop zero-width characters."""
    if not text:
        return text

    result = text
    for space in SPACE_VARIANTS:
        result = result.replace(space, ' ')
    for char in ZERO_WIDTH:
        result = result.replace(char, '')
    return result


def normalize_text(text: str) -> str:
    """
    Normalize raw input before sentence segmentation.

    Args:
        text: Raw Vietnamese text

    Returns:
        NFC-composed text with plain spaces
    """
    return normalize_spaces(normalize_unicode(text))


def is_normalized(text: str) -> bool:
    """True if normalize_text() would leave the text unchanged."""
    return normalize_text(text) == text
