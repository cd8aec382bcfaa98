"""
Plagiarism Engine - Configuration Module
Centralized weights, thresholds and feature flags
"""
import os
from dataclasses import dataclass, field, fields
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class ScoringWeights:
    """Weights for the final similarity score (must sum to 1.0)"""
    character: float = 0.05
    word: float = 0.25
    semantic: float = 0.45
    structural: float = 0.15
    entity_filtered: float = 0.05
    content_quality: float = 0.05

    def __post_init__(self):
        total = sum(getattr(self, f.name) for f in fields(self))
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total:.4f}")

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ScoringThresholds:
    """Content and excerpt thresholds"""
    low_content_min_tokens: int = 10
    low_content_min_ratio: float = 0.3
    low_content_penalty: float = 0.7

    ngram_size: int = 3
    ngram_meaningful_ratio: float = 0.8

    excerpt_min_sentence_length: int = 50
    excerpt_min_meaningful_words: int = 3
    excerpt_min_meaningful_ratio: float = 0.3
    excerpt_similarity_threshold: float = 0.7
    excerpt_strong_similarity: float = 0.85
    excerpt_min_shared_words: int = 2
    academic_phrasing_penalty: float = 0.7
    max_excerpts: int = 8
    max_phrases_per_excerpt: int = 5
    excerpt_display_length: int = 150


@dataclass(frozen=True)
class PerformanceConfig:
    """Performance-related settings"""
    excerpt_workers: int = 4
    parallel_pair_threshold: int = 400


@dataclass(frozen=True)
class LimitsConfig:
    """Input limits enforced before a detection starts"""
    max_document_chars: int = 500_000

    @classmethod
    def from_env(cls) -> 'LimitsConfig':
        return cls(
            max_document_chars=int(os.environ.get('PLAGIARISM_MAX_DOCUMENT_CHARS', '500000'))
        )


@dataclass(frozen=True)
class FeatureFlags:
    """Feature flags for enabling/disabling functionality"""
    excerpt_matching_enabled: bool = True
    parallel_excerpts_enabled: bool = True
    debug_mode: bool = False

    @classmethod
    def from_env(cls) -> 'FeatureFlags':
        """Create feature flags from environment variables"""
        return cls(
            excerpt_matching_enabled=os.environ.get('PLAGIARISM_EXCERPTS_ENABLED', 'true').lower() == 'true',
            parallel_excerpts_enabled=os.environ.get('PLAGIARISM_PARALLEL_EXCERPTS', 'true').lower() == 'true',
            debug_mode=os.environ.get('PLAGIARISM_DEBUG', 'false').lower() == 'true'
        )


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration"""
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    thresholds: ScoringThresholds = field(default_factory=ScoringThresholds)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    features: FeatureFlags = field(default_factory=FeatureFlags)

    algorithm: str = 'Advanced Multi-Level Analysis v3.1'

    @classmethod
    def load(cls) -> 'AppConfig':
        """Load configuration from environment and defaults"""
        features = FeatureFlags.from_env()
        if os.environ.get('DEBUG', '').lower() == 'true':
            features = FeatureFlags(
                excerpt_matching_enabled=features.excerpt_matching_enabled,
                parallel_excerpts_enabled=features.parallel_excerpts_enabled,
                debug_mode=True
            )

        workers = os.environ.get('PLAGIARISM_EXCERPT_WORKERS')
        performance = PerformanceConfig(excerpt_workers=int(workers)) if workers else PerformanceConfig()

        return cls(
            limits=LimitsConfig.from_env(),
            features=features,
            performance=performance
        )

    def get_settings(self, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Flat view of the active settings, used by the health endpoint"""
        settings = {
            'algorithm': self.algorithm,
            'weights': self.weights.to_dict(),
            'max_document_chars': self.limits.max_document_chars,
            'max_excerpts': self.thresholds.max_excerpts,
            'excerpt_matching': self.features.excerpt_matching_enabled,
            'parallel_excerpts': self.features.parallel_excerpts_enabled,
            'excerpt_workers': self.performance.excerpt_workers,
        }

        if overrides:
            settings.update(overrides)

        return settings


app_config = AppConfig.load()
