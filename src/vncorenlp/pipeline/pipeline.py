#!/usr/bin/env python3
"""
Vietnamese Annotation Pipeline

Orchestrates the annotation of raw text:
1. Sentence segmentation (spaCy sentencizer)
2. Word segmentation (dictionary longest match)
3. POS tagging, NER, dependency parsing (spaCy models)

Stages are selected by the configuration and loaded once per pipeline, so
one pipeline object should be reused across many documents.

Usage:
    from vncorenlp.pipeline import VnCoreNLPPipeline

    with VnCoreNLPPipeline(PipelineConfig(annotators="wseg,pos")) as pipeline:
        annotation = pipeline.annotate("Ông Nguyễn đang làm việc.")
        print(pipeline.to_string(annotation))
"""

from typing import Dict, Iterable, List, Optional, Union
from logging import getLogger

from vncorenlp.config import PipelineConfig
from vncorenlp.pipeline.registry import StageFactory, StageRegistry
from vncorenlp.pipeline.sentence_annotator import SentenceAnnotator
from vncorenlp.pipeline.types import Annotation
from vncorenlp.serializer import serialize
from vncorenlp.tokenization_service import VietnameseTokenizationService

logger = getLogger(__name__)


class VnCoreNLPPipeline:
    """
    Complete annotation pipeline for Vietnamese text.

    Example:
        pipeline = VnCoreNLPPipeline()
        annotation = pipeline.annotate("Tôi là sinh viên.")

        for sentence in annotation.sentences:
            for word in sentence.words:
                print(word.index, word.form, word.pos, word.ner, word.head, word.dep)
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        stage_factories: Optional[Dict[str, StageFactory]] = None,
        segmenter=None,
        initialize: bool = True,
    ):
        """
        Initialize pipeline.

        Args:
            config: Resolved configuration (default: all four stages, inline)
            stage_factories: Per-stage collaborator factories overriding the defaults
            segmenter: Sentence splitter / tokenizer (default: VietnameseTokenizationService)
            initialize: Load the stage collaborators now rather than on first use
        """
        self.config = config or PipelineConfig()
        # Unknown factory names are rejected here, before anything is loaded
        self.registry = StageRegistry(self.config, factories=stage_factories, segmenter=segmenter)

        logger.info(f"Initializing pipeline: annotators={self.config.annotators}")
        self.segmenter = segmenter or VietnameseTokenizationService()
        self.registry.context.segmenter = self.segmenter
        self.sentence_annotator = SentenceAnnotator(self.registry, self.segmenter)

        if initialize:
            self.initialize()

    def initialize(self) -> None:
        """Load every stage that is not loaded yet."""
        self.registry.initialize()
        logger.info(f"Pipeline ready: {' → '.join(self.registry.effective) or 'tokenization only'}")

    def annotate(self, document: Union[str, Annotation]) -> Annotation:
        """
        Annotate one document.

        Args:
            document: Raw text, or an Annotation whose raw text is (re)annotated

        Returns:
            The populated Annotation
        """
        if not self.registry.initialized:
            self.initialize()

        if isinstance(document, Annotation):
            annotation = document
            annotation.reset()
        else:
            annotation = Annotation(raw_text=document)

        for raw_sentence in self.segmenter.split_sentences(annotation.raw_text):
            sentence = self.sentence_annotator.annotate(raw_sentence)
            if sentence is not None:
                annotation.add_sentence(sentence)

        logger.debug(
            f"Annotated document: {annotation.sentence_count} sentences, "
            f"{annotation.token_count} tokens, {annotation.word_count} words"
        )
        return annotation

    def annotate_batch(self, texts: Iterable[str]) -> List[Annotation]:
        """Annotate several documents with the same loaded stages."""
        return [self.annotate(text) for text in texts]

    def to_string(self, annotation: Annotation, output_format: Optional[str] = None) -> str:
        """Serialize an annotation (default: the configured output format)."""
        return serialize(annotation, output_format or self.config.output_format)

    def close(self):
        """Close all stage collaborators."""
        self.registry.close()
        close = getattr(self.segmenter, "close", None)
        if callable(close):
            close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


# Convenience function
def process_text(text: str, annotators: Union[str, List[str], None] = None) -> Annotation:
    """
    Quick annotation of a single text.

    Args:
        text: Vietnamese text
        annotators: Stages to run (default: wseg,pos,ner,parse)

    Returns:
        Populated Annotation
    """
    with VnCoreNLPPipeline(PipelineConfig(annotators=annotators)) as pipeline:
        return pipeline.annotate(text)
