"""
Pipeline configuration.

Annotator names and output formats are validated here, before any stage is
initialized or any file is opened.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vncorenlp.exceptions import InvalidConfiguration


WORD_SEGMENTER = "wseg"
POS_TAGGER = "pos"
NER_RECOGNIZER = "ner"
DEPENDENCY_PARSER = "parse"

# Dependency order: every stage may consume the output of the stages before it
DEFAULT_ANNOTATORS = [WORD_SEGMENTER, POS_TAGGER, NER_RECOGNIZER, DEPENDENCY_PARSER]

INLINE_FORMAT = "inline"
COLUMN_FORMAT = "column"
FORMAT_OPTIONS = [INLINE_FORMAT, COLUMN_FORMAT]
DEFAULT_FORMAT = INLINE_FORMAT

DEFAULT_SPACY_MODEL = "vi_core_news_lg"
OUTPUT_SUFFIX = ".out"


def parse_annotators(annotators: Union[str, Iterable[str], None]) -> List[str]:
    """
    Normalize and validate requested annotator names.

    Accepts a comma-separated string ("wseg, POS") or an iterable of names.
    Names are trimmed and lowercased, empty names are ignored and duplicates
    collapse while keeping the first occurrence.

    Raises:
        InvalidConfiguration: if a name is not one of wseg, pos, ner, parse
    """
    if annotators is None:
        return list(DEFAULT_ANNOTATORS)
    if isinstance(annotators, str):
        annotators = annotators.split(",")

    result = []
    for name in annotators:
        name = str(name).strip().lower()
        if not name:
            continue
        if name not in DEFAULT_ANNOTATORS:
            raise InvalidConfiguration(f'Annotator "{name}" is invalid.')
        if name not in result:
            result.append(name)
    return result


def parse_format(output_format: Optional[str]) -> str:
    """Normalize an output format name, rejecting anything but inline/column."""
    if output_format is None:
        return DEFAULT_FORMAT
    output_format = str(output_format).strip().lower()
    if output_format not in FORMAT_OPTIONS:
        raise InvalidConfiguration(f'Format "{output_format}" is invalid.')
    return output_format


class PipelineConfig(BaseModel):
    """Resolved configuration for one pipeline instance."""

    annotators: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ANNOTATORS),
        description="Requested (reported) stages, subset of wseg/pos/ner/parse",
    )
    output_format: str = Field(
        default=DEFAULT_FORMAT,
        description="Serialization format: inline or column",
    )
    spacy_model: str = Field(
        default=DEFAULT_SPACY_MODEL,
        description="spaCy pipeline used by the pos/ner/parse stages",
    )
    lexicon_path: Optional[Path] = Field(
        default=None,
        description="Word segmentation lexicon (default: bundled Vietnamese lexicon)",
    )

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @field_validator("annotators", mode="before")
    @classmethod
    def _check_annotators(cls, value):
        return parse_annotators(value)

    @field_validator("output_format", mode="before")
    @classmethod
    def _check_format(cls, value):
        return parse_format(value)

    def has(self, annotator: str) -> bool:
        return annotator in self.annotators
