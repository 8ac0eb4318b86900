#!/usr/bin/env python3
"""
Annotation Data Types

Pydantic models for the output of the annotation pipeline:

    Annotation (one document)
      └── Sentence (one segmented sentence)
            ├── tokens: raw syllables / punctuation
            └── Word (one word-segmented unit, optionally tagged)

Optional annotations live on Word, so every POS/NER/dependency column is
index-aligned with the word sequence by construction.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Word(BaseModel):
    """
    One word-segmented unit of a sentence.

    Multi-syllable words keep their syllables joined with an underscore
    ("làm_việc"). Tag fields stay None when the corresponding stage did not
    run or was not requested.
    """

    index: int = Field(
        ...,
        ge=1,
        description="Position of the word in its sentence (1-based)",
        examples=[1, 2, 3],
    )

    form: str = Field(
        ...,
        min_length=1,
        description="Surface form; merged syllables joined with '_'",
        examples=["Ông", "làm_việc", "."],
    )

    pos: Optional[str] = Field(
        default=None,
        description="Part-of-speech tag",
        examples=["Np", "V", "CH"],
    )

    ner: Optional[str] = Field(
        default=None,
        description="Named-entity label in IOB notation",
        examples=["B-PER", "I-LOC", "O"],
    )

    head: Optional[int] = Field(
        default=None,
        ge=0,
        description="Index of the syntactic head (1-based, 0 = root)",
        examples=[0, 3],
    )

    dep: Optional[str] = Field(
        default=None,
        description="Dependency relation to the head",
        examples=["sub", "root", "punct"],
    )

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class Sentence(BaseModel):
    """One sentence with its tokens and words."""

    text: str = Field(
        ...,
        description="Raw sentence text, trimmed",
        examples=["Ông Nguyễn đang làm việc."],
    )

    tokens: List[str] = Field(
        default_factory=list,
        description="Raw tokens (syllables and punctuation) in order",
    )

    words: List[Word] = Field(
        default_factory=list,
        description="Word-segmented units in order",
    )

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @property
    def word_segmented_text(self) -> str:
        """Word forms joined by single spaces: 'Ông Nguyễn đang làm_việc .'"""
        return " ".join(word.form for word in self.words)

    @property
    def pos_tags(self) -> Optional[List[str]]:
        """POS tags aligned with words, or None if POS was not reported."""
        if not self.words or any(word.pos is None for word in self.words):
            return None
        return [word.pos for word in self.words]

    @property
    def ner_labels(self) -> Optional[List[str]]:
        if not self.words or any(word.ner is None for word in self.words):
            return None
        return [word.ner for word in self.words]

    @property
    def dependencies(self) -> Optional[List[Tuple[int, str]]]:
        if not self.words or any(word.head is None for word in self.words):
            return None
        return [(word.head, word.dep) for word in self.words]


class Annotation(BaseModel):
    """
    Annotation of one document.

    Created from raw text, filled once by the pipeline, then read by the
    serializer. Tokens and words are flattened across sentences in document
    order; `word_segmented_text` is the whole document rendered as word forms.
    """

    raw_text: str = Field(
        ...,
        frozen=True,
        description="Input text exactly as given",
    )

    sentences: List[Sentence] = Field(default_factory=list)

    tokens: List[str] = Field(
        default_factory=list,
        description="All tokens of the document in order",
    )

    words: List[Word] = Field(
        default_factory=list,
        description="All words of the document in order",
    )

    word_segmented_text: str = Field(
        default="",
        description="Sentence renderings joined by single spaces, trimmed",
    )

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def add_sentence(self, sentence: Sentence) -> None:
        """Append a sentence and extend the flattened views."""
        self.sentences.append(sentence)
        self.tokens.extend(sentence.tokens)
        self.words.extend(sentence.words)
        self.word_segmented_text = f"{self.word_segmented_text} {sentence.word_segmented_text}".strip()

    def reset(self) -> None:
        """Drop previous results before re-annotating the same raw text."""
        self.sentences = []
        self.tokens = []
        self.words = []
        self.word_segmented_text = ""

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def word_count(self) -> int:
        return len(self.words)
