"""
Output formats for annotations.

inline - one line per sentence, words as form[/POS][/NER]:

    Ông/Nc Nguyễn/Np đang/R làm_việc/V ./CH

column - one line per word, tab-separated
index, form, POS, NER, head, relation (absent fields left empty):

    1	Ông	Nc	O	4	sub
    2	Nguyễn	Np	B-PER	1	nmod

Every sentence is followed by a blank line in both formats. Serialization
only reads the annotation.
"""

from typing import List, TextIO

from vncorenlp.config import COLUMN_FORMAT, INLINE_FORMAT, parse_format
from vncorenlp.pipeline.types import Annotation, Sentence, Word


TAG_SEPARATOR = "/"
COLUMN_SEPARATOR = "\t"
SENTENCE_SEPARATOR = "\n\n"


def format_inline_word(word: Word) -> str:
    text = word.form
    if word.pos is not None:
        text += TAG_SEPARATOR + word.pos
    if word.ner is not None:
        text += TAG_SEPARATOR + word.ner
    return text


def format_inline(sentence: Sentence) -> str:
    return " ".join(format_inline_word(word) for word in sentence.words)


def format_column_row(word: Word) -> str:
    fields = [
        str(word.index),
        word.form,
        word.pos or "",
        word.ner or "",
        "" if word.head is None else str(word.head),
        word.dep or "",
    ]
    return COLUMN_SEPARATOR.join(fields)


def format_column(sentence: Sentence) -> str:
    return "\n".join(format_column_row(word) for word in sentence.words)


SENTENCE_FORMATTERS = {
    INLINE_FORMAT: format_inline,
    COLUMN_FORMAT: format_column,
}


def format_sentences(annotation: Annotation, output_format: str) -> List[str]:
    """Render each sentence on its own, without separators."""
    formatter = SENTENCE_FORMATTERS[parse_format(output_format)]
    return [formatter(sentence) for sentence in annotation.sentences]


def serialize(annotation: Annotation, output_format: str = INLINE_FORMAT) -> str:
    """
    Render a whole annotation.

    Args:
        annotation: Annotated document
        output_format: "inline" or "column" (case-insensitive)

    Returns:
        Rendered text; empty for an annotation without sentences

    Raises:
        InvalidConfiguration: for any other format, before rendering anything
    """
    return "".join(
        rendered + SENTENCE_SEPARATOR
        for rendered in format_sentences(annotation, output_format)
    )


def write_annotation(annotation: Annotation, stream: TextIO, output_format: str = INLINE_FORMAT) -> None:
    """Serialize an annotation and write it to a text stream."""
    stream.write(serialize(annotation, output_format))
