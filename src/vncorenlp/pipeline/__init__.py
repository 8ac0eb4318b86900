"""
Vietnamese Annotation Pipeline Package

Complete annotation pipeline:
- Sentence segmentation and tokenization (spaCy blank pipeline)
- Word segmentation (marisa_trie lexicon)
- POS tagging, NER, dependency parsing (spaCy models)
"""

from .types import Word, Sentence, Annotation
from .registry import StageRegistry, StageContext, resolve_stages, STAGE_REQUIREMENTS
from .sentence_annotator import SentenceAnnotator
from .pipeline import VnCoreNLPPipeline, process_text

__all__ = [
    'Word',
    'Sentence',
    'Annotation',
    'StageRegistry',
    'StageContext',
    'resolve_stages',
    'STAGE_REQUIREMENTS',
    'SentenceAnnotator',
    'VnCoreNLPPipeline',
    'process_text',
]
