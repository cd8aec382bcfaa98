"""
Plagiarism Engine - Composite Scoring

Combines the independent similarity levels into one calibrated score.

Word-level and semantic similarity are passed through a diminishing-returns
curve before weighting, so moderately similar documents are not over-scored:

    [0.0, 0.3)  identity
    [0.3, 0.6)  slope 0.8
    [0.6, 0.8)  slope 0.6
    [0.8, 1.0]  slope 0.4

Low-content documents (too few meaningful words) are penalized by 0.7.
The composer never clamps; the detector clamps the reported percentage.
"""

from dataclasses import dataclass
from typing import Optional

from plagiarism_engine.config import ScoringThresholds, ScoringWeights
from plagiarism_engine.similarity import SimilarityMetrics, TextInput


def apply_diminishing_returns(score: float) -> float:
    if score < 0.3:
        return score
    if score < 0.6:
        return 0.3 + (score - 0.3) * 0.8
    if score < 0.8:
        return 0.54 + (score - 0.6) * 0.6
    return 0.66 + (score - 0.8) * 0.4


@dataclass(frozen=True)
class SimilarityAnalysis:
    """Per-level similarity breakdown plus the composed score"""
    character_level: float
    word_level: float
    semantic_level: float
    structural_level: float
    entity_filtered: float
    content_quality: float
    adjusted_word_level: float
    adjusted_semantic_level: float
    weighted_score: float
    final_score: float
    low_content: bool = False
    ngram_similarity: float = 0.0

    def to_dict(self) -> dict:
        return {
            'characterLevel': self.character_level,
            'wordLevel': self.word_level,
            'semanticLevel': self.semantic_level,
            'structuralLevel': self.structural_level,
            'entityFiltered': self.entity_filtered,
            'contentQuality': self.content_quality,
            'adjustedWordLevel': self.adjusted_word_level,
            'adjustedSemanticLevel': self.adjusted_semantic_level,
            'ngramSimilarity': self.ngram_similarity,
            'finalScore': self.final_score,
            'lowContent': self.low_content
        }


class ScoreComposer:
    def __init__(self, weights: Optional[ScoringWeights] = None,
                 thresholds: Optional[ScoringThresholds] = None):
        self.weights = weights or ScoringWeights()
        self.thresholds = thresholds or ScoringThresholds()

    def compose(self, character_level: float, word_level: float, semantic_level: float,
                structural_level: float, entity_filtered: float, content_quality: float,
                low_content: bool = False, ngram_similarity: float = 0.0) -> SimilarityAnalysis:
        adjusted_word = apply_diminishing_returns(word_level)
        adjusted_semantic = apply_diminishing_returns(semantic_level)

        w = self.weights
        weighted = (character_level * w.character
                    + adjusted_word * w.word
                    + adjusted_semantic * w.semantic
                    + structural_level * w.structural
                    + entity_filtered * w.entity_filtered
                    + content_quality * w.content_quality)

        final = weighted * self.thresholds.low_content_penalty if low_content else weighted

        return SimilarityAnalysis(
            character_level=character_level,
            word_level=word_level,
            semantic_level=semantic_level,
            structural_level=structural_level,
            entity_filtered=entity_filtered,
            content_quality=content_quality,
            adjusted_word_level=adjusted_word,
            adjusted_semantic_level=adjusted_semantic,
            weighted_score=weighted,
            final_score=final,
            low_content=low_content,
            ngram_similarity=ngram_similarity
        )


class MultiLevelAnalyzer:
    """Runs every similarity level on a document pair and composes the score"""

    def __init__(self, metrics: SimilarityMetrics, composer: ScoreComposer):
        self.metrics = metrics
        self.composer = composer

    def analyze(self, text1: TextInput, text2: TextInput) -> SimilarityAnalysis:
        normalizer = self.metrics.normalizer
        prepared1 = normalizer.prepare(text1)
        prepared2 = normalizer.prepare(text2)

        low_content = normalizer.is_low_content_text(prepared1) or normalizer.is_low_content_text(prepared2)

        return self.composer.compose(
            character_level=self.metrics.character_level(prepared1, prepared2),
            word_level=self.metrics.word_level(prepared1, prepared2),
            semantic_level=self.metrics.semantic_level(prepared1, prepared2),
            structural_level=self.metrics.structural_level(prepared1, prepared2),
            entity_filtered=self.metrics.entity_filtered(prepared1, prepared2),
            content_quality=self.metrics.content_quality(prepared1, prepared2),
            low_content=low_content,
            ngram_similarity=self.metrics.ngram_level(prepared1, prepared2)
        )
