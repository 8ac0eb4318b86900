"""
Collaborator contracts for the annotation stages.

Every stage collaborator exposes a single `run` method. The pipeline checks
the length (and, for the parser, the head range) of whatever `run` returns,
so implementations only need to honour the shapes below.
"""

from typing import List, Protocol, Sequence, Tuple, runtime_checkable

from vncorenlp.pipeline.types import Word


# (head index, relation label); head is 1-based, 0 means root
Dependency = Tuple[int, str]


@runtime_checkable
class Segmenter(Protocol):
    """Raw text → sentence strings, sentence string → raw tokens."""

    def split_sentences(self, text: str) -> List[str]: ...

    def tokenize(self, text: str) -> List[str]: ...


@runtime_checkable
class WordSegmenter(Protocol):
    """Sentence text → word forms, multi-token words joined with '_'."""

    def run(self, sentence_text: str) -> List[str]: ...


@runtime_checkable
class PosTagger(Protocol):
    """One POS tag per word, in order."""

    def run(self, words: Sequence[Word]) -> List[str]: ...


@runtime_checkable
class NerRecognizer(Protocol):
    """One NER label per word (IOB, "O" outside entities), in order."""

    def run(self, words: Sequence[Word]) -> List[str]: ...


@runtime_checkable
class DependencyParser(Protocol):
    """One (head, relation) pair per word, in order."""

    def run(self, words: Sequence[Word]) -> List[Dependency]: ...
