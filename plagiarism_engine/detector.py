"""
Plagiarism Engine - Detector

Entry point for a single target/source comparison. Wires the lexicon,
normalizer, metrics, excerpt matcher and insight generator together and
assembles the report returned to callers.

Detection Flow:
    1. Validate inputs (type and size)
    2. Normalize both documents once
    3. Multi-level similarity analysis and composed score
    4. Entity recognition on the raw documents
    5. Sentence-level excerpt matching
    6. Contact information analysis
    7. Insights and recommendations
    8. Assemble the DetectionReport

Each call builds a fresh report; nothing is kept between calls except the
immutable lexicon.
"""

# =============================================================================
# IMPORTS
# =============================================================================
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from plagiarism_engine.composite_scorer import MultiLevelAnalyzer, ScoreComposer, SimilarityAnalysis
from plagiarism_engine.config import AppConfig, app_config
from plagiarism_engine.contact_analysis import ContactAnalysis, analyze_contact_information
from plagiarism_engine.entity_recognizer import EntityMention, EntityRecognizer
from plagiarism_engine.excerpt_matcher import ExcerptMatch, ExcerptMatcher
from plagiarism_engine.insights import InsightGenerator, Insights
from plagiarism_engine.lexicon import Lexicon, get_default_lexicon
from plagiarism_engine.logging_config import get_logger, log_timing
from plagiarism_engine.similarity import SimilarityMetrics
from plagiarism_engine.text_normalizer import TextNormalizer
from plagiarism_engine.utils import clamp_percent, to_percent

logger = get_logger('detector')

MAX_REPORTED_ENTITIES = 10


class InvalidInputError(ValueError):
    """Raised when a document cannot be analyzed"""
    pass


@dataclass
class DetectionReport:
    overall_similarity: int
    analysis: SimilarityAnalysis
    target_entities: List[EntityMention]
    source_entities: List[EntityMention]
    similar_content: List[ExcerptMatch]
    contact_analysis: ContactAnalysis
    insights: Insights
    source_document: str
    processing_time: int
    algorithm: str
    detailed_analysis: dict = field(init=False)

    def __post_init__(self):
        a = self.analysis
        self.detailed_analysis = {
            'characterLevel': to_percent(a.character_level),
            'wordLevel': to_percent(a.word_level),
            'semanticLevel': to_percent(a.semantic_level),
            'structuralLevel': to_percent(a.structural_level),
            'entityFiltered': to_percent(a.entity_filtered),
            'ngramSimilarity': to_percent(a.ngram_similarity)
        }

    def to_dict(self) -> dict:
        return {
            'overallSimilarity': self.overall_similarity,
            'detailedAnalysis': dict(self.detailed_analysis),
            'entitiesDetected': {
                'target': len(self.target_entities),
                'source': len(self.source_entities),
                'targetEntities': [m.to_dict() for m in self.target_entities[:MAX_REPORTED_ENTITIES]],
                'sourceEntities': [m.to_dict() for m in self.source_entities[:MAX_REPORTED_ENTITIES]]
            },
            'similarContent': [e.to_dict() for e in self.similar_content],
            'contactAnalysis': self.contact_analysis.to_dict(),
            'advancedInsights': self.insights.to_dict(),
            'sourceDocument': self.source_document,
            'processingTime': self.processing_time,
            'algorithm': self.algorithm
        }


class PlagiarismDetector:
    def __init__(self, config: Optional[AppConfig] = None, lexicon: Optional[Lexicon] = None):
        self.config = config or app_config
        self.lexicon = lexicon or get_default_lexicon()

        thresholds = self.config.thresholds
        self.recognizer = EntityRecognizer(self.lexicon)
        self.normalizer = TextNormalizer(self.lexicon, self.recognizer, thresholds)
        self.metrics = SimilarityMetrics(self.normalizer, thresholds.ngram_size, thresholds.ngram_meaningful_ratio)
        self.analyzer = MultiLevelAnalyzer(self.metrics, ScoreComposer(self.config.weights, thresholds))
        self.excerpt_matcher = ExcerptMatcher(
            self.normalizer, thresholds, self.config.performance,
            parallel=self.config.features.parallel_excerpts_enabled
        )
        self.insight_generator = InsightGenerator()

    def validate(self, target_text, source_text, source_document):
        """Raise InvalidInputError for inputs the pipeline cannot take"""
        limit = self.config.limits.max_document_chars
        for name, value in (('target_text', target_text), ('source_text', source_text)):
            if not isinstance(value, str):
                raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")
            if len(value) > limit:
                raise InvalidInputError(f"{name} exceeds the {limit} character limit ({len(value)} characters)")
        if not isinstance(source_document, str):
            raise InvalidInputError(
                f"source_document must be a string, got {type(source_document).__name__}")

    def detect(self, target_text: str, source_text: str, source_document: str = '') -> DetectionReport:
        """Compare a target document against one source document"""
        self.validate(target_text, source_text, source_document)
        start = time.perf_counter()

        with log_timing(logger, 'normalization'):
            target = self.normalizer.prepare(target_text)
            source = self.normalizer.prepare(source_text)

        with log_timing(logger, 'multi-level analysis'):
            analysis = self.analyzer.analyze(target, source)

        target_entities = self.recognizer.recognize(target_text)
        source_entities = self.recognizer.recognize(source_text)

        excerpts = []
        if self.config.features.excerpt_matching_enabled:
            with log_timing(logger, 'excerpt matching'):
                excerpts = self.excerpt_matcher.find_similar_excerpts(target_text, source_text)

        contacts = analyze_contact_information(target_text, source_text)
        insights = self.insight_generator.generate(
            analysis, excerpts, contacts, len(target_entities), source_document)

        processing_time = int((time.perf_counter() - start) * 1000)
        overall = clamp_percent(to_percent(analysis.final_score))

        logger.info(f"Detection against '{source_document}': {overall}% similarity, "
                    f"{len(excerpts)} excerpts, low_content={analysis.low_content}, {processing_time}ms")

        return DetectionReport(
            overall_similarity=overall,
            analysis=analysis,
            target_entities=target_entities,
            source_entities=source_entities,
            similar_content=excerpts,
            contact_analysis=contacts,
            insights=insights,
            source_document=source_document,
            processing_time=processing_time,
            algorithm=self.config.algorithm
        )


@lru_cache(maxsize=1)
def get_default_detector() -> PlagiarismDetector:
    return PlagiarismDetector()


def detect(target_text: str, source_text: str, source_document: str = '') -> DetectionReport:
    """Run a detection with the default configuration and lexicon"""
    return get_default_detector().detect(target_text, source_text, source_document)
