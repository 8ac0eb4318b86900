#!/usr/bin/env python3
"""
Tests for the Vietnamese tokenization service (blank spaCy pipeline).
"""

import pytest

from vncorenlp.exceptions import StageLoadError
from vncorenlp.tokenization_service import VietnameseTokenizationService


class TestSentenceSplitting:
    """Sentence segmentation."""

    def test_two_sentences(self, tokenizer):
        sentences = tokenizer.split_sentences("Tôi là sinh viên. Tôi học ở Hà Nội.")

        print(f"\nSentences: {sentences}")

        assert sentences == ["Tôi là sinh viên.", "Tôi học ở Hà Nội."]

    def test_single_sentence(self, tokenizer):
        assert tokenizer.split_sentences("Ông Nguyễn đang làm việc.") == ["Ông Nguyễn đang làm việc."]

    def test_blank_text(self, tokenizer):
        assert tokenizer.split_sentences("") == []
        assert tokenizer.split_sentences("   \t ") == []


class TestTokenization:
    """Raw tokenization into syllables and punctuation."""

    def test_punctuation_split_off(self, tokenizer):
        tokens = tokenizer.tokenize("Ông Nguyễn đang làm việc.")
        assert tokens == ["Ông", "Nguyễn", "đang", "làm", "việc", "."]

    def test_whitespace_tokens_dropped(self, tokenizer):
        tokens = tokenizer.tokenize("Xin   chào")
        assert tokens == ["Xin", "chào"]

    def test_input_is_nfc_normalized(self, tokenizer):
        tokens = tokenizer.tokenize("vie\u0323\u0302c")
        assert tokens == ["vi\u1EC7c"]

    def test_normalization_can_be_disabled(self):
        with VietnameseTokenizationService(normalize=False) as service:
            tokens = service.tokenize("vie\u0323\u0302c")
        assert tokens == ["vie\u0323\u0302c"]


def test_unknown_language_fails_to_load():
    with pytest.raises(StageLoadError):
        VietnameseTokenizationService(lang="not-a-language")


def test_satisfies_segmenter_contract(tokenizer):
    from vncorenlp.annotators import Segmenter
    assert isinstance(tokenizer, Segmenter)
