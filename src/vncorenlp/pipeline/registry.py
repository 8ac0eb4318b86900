#!/usr/bin/env python3
"""
Stage Registry

Maps annotator names (wseg, pos, ner, parse) to the factories that build
their collaborators, resolves which stages actually run for a
configuration, and initializes each of them once per pipeline.

Prerequisites:
    ner and parse consume POS tags. When either is requested without pos,
    the POS stage still runs (so later stages see tags) but its output is
    not reported. Word segmentation is never required: without it the raw
    tokens are used as words.

Custom collaborators are plugged in through `factories`:

    registry = StageRegistry(config, factories={"pos": lambda ctx: MyTagger()})
    registry.initialize()
    registry.get("pos").run(words)
"""

from typing import Any, Callable, Dict, List, Optional
from logging import getLogger

from vncorenlp.config import (
    DEFAULT_ANNOTATORS,
    DEPENDENCY_PARSER,
    NER_RECOGNIZER,
    POS_TAGGER,
    WORD_SEGMENTER,
    PipelineConfig,
    parse_annotators,
)
from vncorenlp.exceptions import InvalidConfiguration

logger = getLogger(__name__)


STAGE_REQUIREMENTS = {
    WORD_SEGMENTER: (),
    POS_TAGGER: (),
    NER_RECOGNIZER: (POS_TAGGER,),
    DEPENDENCY_PARSER: (POS_TAGGER,),
}


class StageContext:
    """
    Resources shared by the stage factories of one registry.

    The spaCy model is created on first use so that word segmentation alone
    never loads it, and the pos/ner/parse stages share a single copy.
    """

    def __init__(self, config: PipelineConfig, segmenter=None):
        self.config = config
        self.segmenter = segmenter
        self._spacy_model = None

    @property
    def spacy_model(self):
        if self._spacy_model is None:
            from vncorenlp.annotators.spacy_annotators import SpacyModel
            self._spacy_model = SpacyModel(self.config.spacy_model)
        return self._spacy_model


StageFactory = Callable[[StageContext], Any]


def _create_word_segmenter(context: StageContext):
    from vncorenlp.annotators.word_segmenter import DictionaryWordSegmenter
    return DictionaryWordSegmenter(
        lexicon_path=context.config.lexicon_path,
        tokenizer=context.segmenter,
    )


def _create_pos_tagger(context: StageContext):
    from vncorenlp.annotators.spacy_annotators import SpacyPosTagger
    return SpacyPosTagger(context.spacy_model)


def _create_ner_recognizer(context: StageContext):
    from vncorenlp.annotators.spacy_annotators import SpacyNerRecognizer
    return SpacyNerRecognizer(context.spacy_model)


def _create_dependency_parser(context: StageContext):
    from vncorenlp.annotators.spacy_annotators import SpacyDependencyParser
    return SpacyDependencyParser(context.spacy_model)


DEFAULT_FACTORIES: Dict[str, StageFactory] = {
    WORD_SEGMENTER: _create_word_segmenter,
    POS_TAGGER: _create_pos_tagger,
    NER_RECOGNIZER: _create_ner_recognizer,
    DEPENDENCY_PARSER: _create_dependency_parser,
}


def resolve_stages(requested: List[str]) -> List[str]:
    """
    Expand requested stages with their prerequisites, in dependency order.

    Example:
        >>> resolve_stages(["parse", "wseg"])
        ['wseg', 'pos', 'parse']
    """
    requested = parse_annotators(requested)
    needed = set(requested)
    for name in requested:
        needed.update(STAGE_REQUIREMENTS[name])
    return [name for name in DEFAULT_ANNOTATORS if name in needed]


class StageRegistry:
    """
    Initialized stage collaborators of one pipeline.

    Attributes:
        requested: stages whose output is reported, in dependency order
        effective: stages that run, prerequisites included
    """

    def __init__(
        self,
        config: PipelineConfig,
        factories: Optional[Dict[str, StageFactory]] = None,
        segmenter=None,
    ):
        unknown = sorted(set(factories or {}) - set(DEFAULT_ANNOTATORS))
        if unknown:
            raise InvalidConfiguration(f"No such stage to override: {', '.join(unknown)}")

        self.config = config
        self.factories = dict(DEFAULT_FACTORIES)
        self.factories.update(factories or {})
        self.context = StageContext(config, segmenter=segmenter)

        self.requested = [name for name in DEFAULT_ANNOTATORS if name in config.annotators]
        self.effective = resolve_stages(config.annotators)
        self._stages: Dict[str, Any] = {}

        hidden = [name for name in self.effective if name not in self.requested]
        if hidden:
            logger.info(f"Stages {hidden} run internally as prerequisites (not reported)")

    def initialize(self) -> None:
        """Build every effective stage in dependency order; already built stages are kept."""
        for name in self.effective:
            if name in self._stages:
                continue
            logger.info(f"Initializing stage: {name}")
            self._stages[name] = self.factories[name](self.context)

    @property
    def initialized(self) -> bool:
        return all(name in self._stages for name in self.effective)

    def get(self, name: str):
        """Collaborator for a stage, or None if the stage does not run."""
        return self._stages.get(name)

    def runs(self, name: str) -> bool:
        return name in self._stages

    def reports(self, name: str) -> bool:
        return name in self.requested

    def close(self) -> None:
        for stage in self._stages.values():
            close = getattr(stage, "close", None)
            if callable(close):
                close()
        self._stages = {}
