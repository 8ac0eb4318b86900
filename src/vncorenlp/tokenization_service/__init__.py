"""
Tokenization Service Package

Sentence segmentation and raw tokenization for Vietnamese text.

Usage:
    from vncorenlp.tokenization_service import VietnameseTokenizationService

    service = VietnameseTokenizationService()
    for sentence in service.split_sentences("Xin chào! Bạn khỏe không?"):
        print(service.tokenize(sentence))
"""

from .tokenization_service import VietnameseTokenizationService

__all__ = [
    "VietnameseTokenizationService",
]
