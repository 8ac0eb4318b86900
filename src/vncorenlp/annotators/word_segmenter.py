#!/usr/bin/env python3
"""
Dictionary Word Segmenter

Merges Vietnamese syllables into words by longest matching against a
lexicon of multi-syllable words.

Lexicon format:
    UTF-8 text, one word per line, syllables separated by spaces or
    underscores. Blank lines and lines starting with '#' are ignored.

        làm việc
        Việt_Nam
        thành phố Hồ Chí Minh

Keys are stored lowercased and NFC-normalized in a marisa_trie.Trie, with
syllables joined by a single space. Lookup walks forward from each token,
using prefix queries to stop as soon as no lexicon word can still match.

Usage:
    segmenter = DictionaryWordSegmenter()
    segmenter.run("Ông Nguyễn đang làm việc.")
    # ['Ông', 'Nguyễn', 'đang', 'làm_việc', '.']
"""

from pathlib import Path
from typing import Iterable, List, Optional
from logging import getLogger

import marisa_trie

from vncorenlp.exceptions import StageLoadError
from vncorenlp.utils import normalize_unicode

logger = getLogger(__name__)


WORD_JOINER = "_"
DEFAULT_LEXICON_PATH = Path(__file__).parent / "data" / "vi_lexicon.txt"


def _lexicon_key(syllables: Iterable[str]) -> str:
    return " ".join(normalize_unicode(s).lower() for s in syllables)


def read_lexicon(path: Path) -> List[str]:
    """
    Read lexicon entries as space-joined lowercase keys.

    Single-syllable entries are dropped: they never change segmentation.

    Raises:
        StageLoadError: if the file is missing or not valid UTF-8
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise StageLoadError(f"Cannot read lexicon {path}: {e}") from e

    keys = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        syllables = line.replace(WORD_JOINER, " ").split()
        if len(syllables) > 1:
            keys.append(_lexicon_key(syllables))
    return keys


class DictionaryWordSegmenter:
    """
    Longest-match word segmenter over a marisa_trie lexicon.

    Tokens come from the tokenization service passed in (or a fresh one), so
    punctuation is already split off and never merged into words.
    """

    def __init__(
        self,
        lexicon_path: Optional[Path] = None,
        tokenizer=None,
        words: Optional[Iterable[str]] = None,
    ):
        """
        Initialize segmenter.

        Args:
            lexicon_path: Lexicon file (default: bundled vi_lexicon.txt)
            tokenizer: Object with tokenize(text) -> list[str]
            words: Extra lexicon entries, same format as file lines
        """
        if tokenizer is None:
            from vncorenlp.tokenization_service import VietnameseTokenizationService
            tokenizer = VietnameseTokenizationService()
        self.tokenizer = tokenizer

        self.lexicon_path = Path(lexicon_path) if lexicon_path else DEFAULT_LEXICON_PATH
        keys = read_lexicon(self.lexicon_path)
        for entry in words or []:
            syllables = entry.replace(WORD_JOINER, " ").split()
            if len(syllables) > 1:
                keys.append(_lexicon_key(syllables))

        self.trie = marisa_trie.Trie(keys)
        self.max_syllables = max((key.count(" ") + 1 for key in keys), default=1)

        logger.info(
            f"Word segmenter loaded {len(self.trie)} entries from {self.lexicon_path} "
            f"(max {self.max_syllables} syllables)"
        )

    def __contains__(self, word: str) -> bool:
        return _lexicon_key(word.replace(WORD_JOINER, " ").split()) in self.trie

    def segment_tokens(self, tokens: List[str]) -> List[str]:
        """
        Merge tokens into words by greedy longest match.

        Args:
            tokens: Raw tokens of one sentence

        Returns:
            Word forms, merged syllables joined with '_'
        """
        words = []
        i = 0
        while i < len(tokens):
            end = i + 1
            for j in range(i + 2, min(len(tokens), i + self.max_syllables) + 1):
                candidate = _lexicon_key(tokens[i:j])
                if not self.trie.has_keys_with_prefix(candidate):
                    break
                if candidate in self.trie:
                    end = j
            words.append(WORD_JOINER.join(tokens[i:end]))
            i = end
        return words

    def run(self, sentence_text: str) -> List[str]:
        return self.segment_tokens(self.tokenizer.tokenize(sentence_text))

    def close(self):
        logger.debug("Word segmenter closed")
