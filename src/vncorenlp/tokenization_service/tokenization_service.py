#!/usr/bin/env python3
"""
Vietnamese Tokenization Service

Sentence segmentation and raw tokenization using a blank spaCy pipeline.
No trained model is required: the multi-language tokenizer splits on
whitespace and punctuation, and the rule-based sentencizer splits sentences
on terminal punctuation.

Vietnamese writes one syllable per whitespace-separated unit, so the tokens
produced here are syllables and punctuation marks. Merging syllables into
words is the job of the word segmentation stage.

Usage:
    service = VietnameseTokenizationService()
    sentences = service.split_sentences("Tôi là sinh viên. Tôi học ở Hà Nội.")
    tokens = service.tokenize(sentences[0])

Or with context manager:
    with VietnameseTokenizationService() as service:
        sentences = service.split_sentences("Xin chào!")
"""

from typing import List, Optional
from logging import getLogger

import spacy

from vncorenlp.exceptions import StageLoadError
from vncorenlp.utils import normalize_text

logger = getLogger(__name__)


class VietnameseTokenizationService:
    """
    Segmenter adapter: raw text → sentence strings → raw tokens.

    All text is NFC-normalized before processing when `normalize` is set.
    """

    # spaCy multi-language tokenizer; "vi" would require pyvi
    DEFAULT_LANG = "xx"

    def __init__(self, lang: Optional[str] = None, normalize: bool = True):
        """
        Initialize tokenization service.

        Args:
            lang: spaCy language code for the blank pipeline (default: xx)
            normalize: Whether to NFC-normalize text before segmentation
        """
        self.lang = lang or self.DEFAULT_LANG
        self.normalize = normalize

        try:
            self.nlp = spacy.blank(self.lang)
        except (ImportError, KeyError) as e:
            raise StageLoadError(f"Cannot create blank spaCy pipeline '{self.lang}': {e}") from e
        self.nlp.add_pipe("sentencizer")

        logger.info(f"Tokenizer ready: spacy.blank('{self.lang}') + sentencizer")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def _prepare(self, text: str) -> str:
        return normalize_text(text) if self.normalize else text

    def split_sentences(self, text: str) -> List[str]:
        """
        Split raw text into sentence strings, in document order.

        Args:
            text: Raw text of one document

        Returns:
            Trimmed sentence strings; whitespace-only spans are dropped
        """
        text = self._prepare(text)
        if not text.strip():
            return []

        doc = self.nlp(text)
        sentences = [sent.text.strip() for sent in doc.sents]
        return [sentence for sentence in sentences if sentence]

    def tokenize(self, text: str) -> List[str]:
        """
        Split one sentence into raw tokens (syllables and punctuation).

        Args:
            text: Raw sentence text

        Returns:
            Token strings without whitespace tokens
        """
        text = self._prepare(text)
        doc = self.nlp.make_doc(text)
        return [token.text for token in doc if not token.is_space]

    def close(self):
        """Clean up resources."""
        logger.debug("Tokenization service closed")
