"""
Text utilities for Vietnamese input.
"""

from .normalize_text import (
    normalize_text,
    normalize_unicode,
    normalize_spaces,
    is_normalized,
)

__all__ = [
    'normalize_text',
    'normalize_unicode',
    'normalize_spaces',
    'is_normalized',
]
