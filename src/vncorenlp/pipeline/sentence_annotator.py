#!/usr/bin/env python3
"""
Sentence Annotator

Runs the initialized stages over one raw sentence, in dependency order:

1. Word segmentation (or the raw tokens when wseg does not run)
2. POS tagging - one tag per word
3. NER - one label per word
4. Dependency parsing - one (head, relation) per word, 0 <= head <= len(words)

Every collaborator result is checked against its contract before it is
attached to the words; a mismatch raises StageContractViolation.
"""

from typing import List, Optional, Sequence
from logging import getLogger

from vncorenlp.config import DEPENDENCY_PARSER, NER_RECOGNIZER, POS_TAGGER, WORD_SEGMENTER
from vncorenlp.exceptions import StageContractViolation
from vncorenlp.pipeline.registry import StageRegistry
from vncorenlp.pipeline.types import Sentence, Word

logger = getLogger(__name__)


def _check_aligned(stage: str, words: Sequence[Word], result) -> list:
    result = list(result)
    if len(result) != len(words):
        raise StageContractViolation(
            f"Stage '{stage}' returned {len(result)} values for {len(words)} words"
        )
    return result


def _check_tags(stage: str, words: Sequence[Word], result) -> List[str]:
    """One non-empty string per word."""
    tags = _check_aligned(stage, words, result)
    for word, tag in zip(words, tags):
        if not isinstance(tag, str) or not tag.strip():
            raise StageContractViolation(
                f"Stage '{stage}' gave word {word.index} tag {tag!r}, expected a non-empty string"
            )
    return tags


class SentenceAnnotator:
    """Builds a Sentence from raw text using the stages of a registry."""

    def __init__(self, registry: StageRegistry, segmenter):
        self.registry = registry
        self.segmenter = segmenter

    def annotate(self, raw_sentence: str) -> Optional[Sentence]:
        """
        Annotate one sentence.

        Args:
            raw_sentence: Sentence text as produced by the segmenter

        Returns:
            Populated Sentence, or None for an empty / whitespace-only sentence
        """
        text = raw_sentence.strip()
        if not text:
            return None

        tokens = self.segmenter.tokenize(text)
        if not tokens:
            return None

        words = self._segment_words(text, tokens)
        self._tag_pos(words)
        self._tag_ner(words)
        self._parse(words)

        sentence = Sentence(text=text, tokens=tokens, words=words)
        self._hide_unreported(sentence)
        return sentence

    def _segment_words(self, text: str, tokens: List[str]) -> List[Word]:
        segmenter = self.registry.get(WORD_SEGMENTER)
        if segmenter is None:
            forms = list(tokens)
        else:
            forms = list(segmenter.run(text))
            if not forms:
                raise StageContractViolation(f"Stage '{WORD_SEGMENTER}' returned no words for: {text!r}")
            for form in forms:
                if not isinstance(form, str) or not form.strip():
                    raise StageContractViolation(f"Stage '{WORD_SEGMENTER}' returned an empty word: {form!r}")

        return [Word(index=i, form=form) for i, form in enumerate(forms, start=1)]

    def _tag_pos(self, words: List[Word]) -> None:
        tagger = self.registry.get(POS_TAGGER)
        if tagger is None:
            return
        for word, tag in zip(words, _check_tags(POS_TAGGER, words, tagger.run(words))):
            word.pos = tag

    def _tag_ner(self, words: List[Word]) -> None:
        recognizer = self.registry.get(NER_RECOGNIZER)
        if recognizer is None:
            return
        for word, label in zip(words, _check_tags(NER_RECOGNIZER, words, recognizer.run(words))):
            word.ner = label

    def _parse(self, words: List[Word]) -> None:
        parser = self.registry.get(DEPENDENCY_PARSER)
        if parser is None:
            return
        relations = _check_aligned(DEPENDENCY_PARSER, words, parser.run(words))

        for word, relation in zip(words, relations):
            try:
                head, label = relation
            except (TypeError, ValueError):
                raise StageContractViolation(
                    f"Stage '{DEPENDENCY_PARSER}' gave word {word.index} {relation!r}, expected (head, label)"
                )
            if isinstance(head, bool) or not isinstance(head, int) or not 0 <= head <= len(words):
                raise StageContractViolation(
                    f"Stage '{DEPENDENCY_PARSER}' gave word {word.index} head {head!r} "
                    f"outside 0..{len(words)}"
                )
            if not isinstance(label, str):
                raise StageContractViolation(
                    f"Stage '{DEPENDENCY_PARSER}' gave word {word.index} relation {label!r}, expected a string"
                )
            word.head = head
            word.dep = label

    def _hide_unreported(self, sentence: Sentence) -> None:
        """Clear annotations of stages that ran only as prerequisites."""
        clear = {}
        if not self.registry.reports(POS_TAGGER):
            clear["pos"] = None
        if not self.registry.reports(NER_RECOGNIZER):
            clear["ner"] = None
        if not self.registry.reports(DEPENDENCY_PARSER):
            clear["head"] = None
            clear["dep"] = None
        if not clear:
            return
        for word in sentence.words:
            for field, value in clear.items():
                setattr(word, field, value)
