#!/usr/bin/env python3
"""
spaCy-backed POS, NER and dependency annotators.

The three stages share one loaded spaCy pipeline (SpacyModel). Each stage
builds a Doc from the already segmented word forms, so spaCy never
re-tokenizes: word N of the sentence is token N of the Doc. Only the
components a stage needs are enabled while it runs.

Usage:
    model = SpacyModel("vi_core_news_lg")
    tagger = SpacyPosTagger(model)
    tags = tagger.run(words)
"""

from typing import Iterable, List, Sequence
from logging import getLogger

import spacy
from spacy.tokens import Doc

from vncorenlp.exceptions import StageLoadError
from vncorenlp.pipeline.types import Word

logger = getLogger(__name__)


# Components that feed other components through listeners
SHARED_COMPONENTS = ("tok2vec", "transformer")


class SpacyModel:
    """
    Lazily loaded spaCy pipeline shared by the spaCy stages of one pipeline.

    Loading happens on first access of `nlp`, never twice.
    """

    def __init__(self, model_name: str):
        self.model_name = model_name
        self._nlp = None

    @property
    def nlp(self):
        if self._nlp is None:
            logger.info(f"Loading spaCy model: {self.model_name}")
            try:
                self._nlp = spacy.load(self.model_name)
            except OSError as e:
                logger.error(f"Model '{self.model_name}' not found. Install it with:")
                logger.error(f"  pip install {self.model_name}")
                raise StageLoadError(f"spaCy model '{self.model_name}' is not installed") from e
            logger.info(f"Pipeline components: {self._nlp.pipe_names}")
        return self._nlp

    @property
    def is_loaded(self) -> bool:
        return self._nlp is not None

    def require(self, component: str):
        """Fail at initialization time if the model lacks a component."""
        if component not in self.nlp.pipe_names:
            raise StageLoadError(
                f"spaCy model '{self.model_name}' has no '{component}' component "
                f"(available: {', '.join(self.nlp.pipe_names)})"
            )

    def annotate(self, words: Sequence[Word], components: Iterable[str]) -> Doc:
        """Run the given components (plus shared embedders) over pre-segmented words."""
        nlp = self.nlp
        wanted = set(components) | set(SHARED_COMPONENTS)
        enabled = [name for name in nlp.pipe_names if name in wanted]

        doc = Doc(nlp.vocab, words=[word.form for word in words])
        # Tags from an earlier POS stage are kept; spaCy components may read them
        for token, word in zip(doc, words):
            if word.pos:
                token.tag_ = word.pos

        with nlp.select_pipes(enable=enabled):
            return nlp(doc)


class SpacyPosTagger:
    """POS stage: fine-grained tag, falling back to the universal POS."""

    COMPONENTS = ("tagger", "morphologizer", "attribute_ruler")

    def __init__(self, model: SpacyModel):
        self.model = model
        if not any(name in model.nlp.pipe_names for name in ("tagger", "morphologizer")):
            model.require("tagger")

    def run(self, words: Sequence[Word]) -> List[str]:
        if not words:
            return []
        doc = self.model.annotate([word.model_copy(update={"pos": None}) for word in words], self.COMPONENTS)
        return [token.tag_ or token.pos_ or "X" for token in doc]


class SpacyNerRecognizer:
    """NER stage: IOB labels such as B-PER, I-LOC, O."""

    COMPONENTS = ("ner",)

    def __init__(self, model: SpacyModel):
        self.model = model
        model.require("ner")

    def run(self, words: Sequence[Word]) -> List[str]:
        if not words:
            return []
        doc = self.model.annotate(words, self.COMPONENTS)
        return [
            f"{token.ent_iob_}-{token.ent_type_}" if token.ent_type_ else "O"
            for token in doc
        ]


class SpacyDependencyParser:
    """Dependency stage: 1-based heads, 0 for the root."""

    COMPONENTS = ("parser",)
    ROOT_LABEL = "root"

    def __init__(self, model: SpacyModel):
        self.model = model
        model.require("parser")

    def run(self, words: Sequence[Word]) -> List[tuple]:
        if not words:
            return []
        doc = self.model.annotate(words, self.COMPONENTS)
        result = []
        for token in doc:
            if token.head.i == token.i:
                result.append((0, self.ROOT_LABEL))
            else:
                result.append((token.head.i + 1, token.dep_))
        return result

