"""
Annotators Package

Default collaborators for the annotation stages:
- DictionaryWordSegmenter: longest-match word segmentation (marisa_trie lexicon)
- SpacyPosTagger / SpacyNerRecognizer / SpacyDependencyParser: spaCy models
  run over pre-segmented words

Any object with a matching `run` method can replace them (see types.py).
"""

from .word_segmenter import DictionaryWordSegmenter, DEFAULT_LEXICON_PATH, read_lexicon
from .spacy_annotators import (
    SpacyModel,
    SpacyPosTagger,
    SpacyNerRecognizer,
    SpacyDependencyParser,
)
from .types import Segmenter, WordSegmenter, PosTagger, NerRecognizer, DependencyParser

__all__ = [
    "DictionaryWordSegmenter",
    "DEFAULT_LEXICON_PATH",
    "read_lexicon",
    "SpacyModel",
    "SpacyPosTagger",
    "SpacyNerRecognizer",
    "SpacyDependencyParser",
    "Segmenter",
    "WordSegmenter",
    "PosTagger",
    "NerRecognizer",
    "DependencyParser",
]
