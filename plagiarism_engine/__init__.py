"""
Plagiarism Engine

Multi-level similarity analysis between a target and a source document.
"""
from plagiarism_engine.detector import (
    DetectionReport, InvalidInputError, PlagiarismDetector, detect
)
from plagiarism_engine.lexicon import EntityType, Lexicon, build_lexicon, get_default_lexicon

__all__ = [
    'DetectionReport', 'InvalidInputError', 'PlagiarismDetector', 'detect',
    'EntityType', 'Lexicon', 'build_lexicon', 'get_default_lexicon'
]
