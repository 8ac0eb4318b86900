"""
vncorenlp - Vietnamese annotation pipeline.

Raw text → sentences → words, with optional POS tags, named entities and
dependency relations, serialized inline or in columns.

Usage:
    from vncorenlp import VnCoreNLPPipeline, PipelineConfig

    pipeline = VnCoreNLPPipeline(PipelineConfig(annotators="wseg,pos"))
    annotation = pipeline.annotate("Ông Nguyễn đang làm việc.")
    print(pipeline.to_string(annotation))
"""

from .config import PipelineConfig, DEFAULT_ANNOTATORS, FORMAT_OPTIONS
from .exceptions import (
    VnCoreNLPError,
    InvalidConfiguration,
    StageContractViolation,
    StageLoadError,
    IOFailure,
)
from .pipeline import VnCoreNLPPipeline, Annotation, Sentence, Word, process_text
from .serializer import serialize, write_annotation
from .batch import process_file, process_directory, BatchReport

__all__ = [
    'PipelineConfig',
    'DEFAULT_ANNOTATORS',
    'FORMAT_OPTIONS',
    'VnCoreNLPError',
    'InvalidConfiguration',
    'StageContractViolation',
    'StageLoadError',
    'IOFailure',
    'VnCoreNLPPipeline',
    'Annotation',
    'Sentence',
    'Word',
    'process_text',
    'serialize',
    'write_annotation',
    'process_file',
    'process_directory',
    'BatchReport',
]

__version__ = '1.0.0'
