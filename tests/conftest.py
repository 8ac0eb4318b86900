"""
Shared fixtures: tokenizer and pipelines built over the fake stages.
"""

import pytest

from vncorenlp.config import PipelineConfig
from vncorenlp.pipeline import VnCoreNLPPipeline
from vncorenlp.tokenization_service import VietnameseTokenizationService

from fakes import (
    FakeDependencyParser,
    FakeNerRecognizer,
    FakePosTagger,
    FakeWordSegmenter,
)


@pytest.fixture(scope="session")
def tokenizer():
    """Blank spaCy tokenizer + sentencizer (no trained model needed)."""
    service = VietnameseTokenizationService()
    yield service
    service.close()


@pytest.fixture
def fake_factories(tokenizer):
    """Stage factories building the fake collaborators."""
    return {
        "wseg": lambda context: FakeWordSegmenter(tokenizer),
        "pos": lambda context: FakePosTagger(),
        "ner": lambda context: FakeNerRecognizer(),
        "parse": lambda context: FakeDependencyParser(),
    }


@pytest.fixture
def make_pipeline(tokenizer, fake_factories):
    """Build a pipeline over the fake stages for a given annotator list / format."""
    created = []

    def _make(annotators="wseg,pos,ner,parse", output_format="inline", **overrides):
        factories = dict(fake_factories)
        factories.update(overrides)
        pipeline = VnCoreNLPPipeline(
            PipelineConfig(annotators=annotators, output_format=output_format),
            stage_factories=factories,
            segmenter=tokenizer,
        )
        created.append(pipeline)
        return pipeline

    yield _make
    for pipeline in created:
        pipeline.registry.close()
