"""
Plagiarism Engine - Excerpt Matcher

Sentence-level comparison that surfaces the passages most likely to have
been copied. Every eligible target sentence is compared with every eligible
source sentence; pairs are kept only when they are semantically close AND
share distinctive vocabulary, so generic academic language is not flagged.

Pair evaluation is sharded over a thread pool for large documents. Shards
are merged back in target order before ranking, so results do not depend
on the worker count.
"""

# =============================================================================
# IMPORTS
# =============================================================================
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from plagiarism_engine.config import PerformanceConfig, ScoringThresholds
from plagiarism_engine.logging_config import get_logger
from plagiarism_engine.similarity import semantic_similarity
from plagiarism_engine.text_normalizer import TextNormalizer, is_numeric_or_symbolic, split_sentences
from plagiarism_engine.utils import to_percent, truncate

logger = get_logger('excerpts')

MIN_PHRASE_LENGTH = 3
MAX_PHRASE_LENGTH = 8
MAX_COMMON_PHRASES = 10
DISTINCTIVE_WORD_MIN_LENGTH = 4


@dataclass(frozen=True)
class CommonPhrase:
    """A token sequence shared verbatim by two sentences"""
    phrase: str
    length: int
    target_position: int
    source_position: int

    def to_dict(self) -> dict:
        return {
            'phrase': self.phrase,
            'length': self.length,
            'position1': self.target_position,
            'position2': self.source_position
        }


@dataclass(frozen=True)
class ExcerptMatch:
    target_sentence: str
    source_sentence: str
    similarity: int
    target_index: int
    source_index: int
    significance_score: float
    common_phrases: Tuple[CommonPhrase, ...] = field(default_factory=tuple)

    @property
    def rank(self) -> float:
        return self.significance_score * self.similarity

    def to_dict(self) -> dict:
        return {
            'targetSentence': self.target_sentence,
            'sourceSentence': self.source_sentence,
            'similarity': self.similarity,
            'commonPhrases': [p.to_dict() for p in self.common_phrases],
            'targetIndex': self.target_index,
            'sourceIndex': self.source_index,
            'significanceScore': self.significance_score
        }


@dataclass(frozen=True)
class _Sentence:
    """An eligible sentence with everything pair evaluation needs"""
    index: int
    text: str
    meaningful: Tuple[str, ...]
    distinctive: Tuple[str, ...]


class ExcerptMatcher:
    def __init__(self, normalizer: TextNormalizer, thresholds: Optional[ScoringThresholds] = None,
                 performance: Optional[PerformanceConfig] = None, parallel: bool = True):
        self.normalizer = normalizer
        self.lexicon = normalizer.lexicon
        self.thresholds = thresholds or ScoringThresholds()
        self.performance = performance or PerformanceConfig()
        self.parallel = parallel

    # =========================================================================
    # SENTENCE FILTERS
    # =========================================================================
    def has_meaningful_content(self, sentence: str) -> bool:
        """At least 3 content words making up at least 30% of the sentence"""
        words = sentence.lower().split()
        if not words:
            return False
        meaningful = [w for w in words
                      if not self.lexicon.is_stop_word(w) and len(w) > 2 and not is_numeric_or_symbolic(w)]
        return (len(meaningful) >= self.thresholds.excerpt_min_meaningful_words
                and len(meaningful) / len(words) >= self.thresholds.excerpt_min_meaningful_ratio)

    def distinctive_words(self, sentence: str) -> List[str]:
        """Lowercase words that are long, not stop words and not tags or numbers"""
        return [w for w in sentence.lower().split()
                if not self.lexicon.is_stop_word(w)
                and len(w) >= DISTINCTIVE_WORD_MIN_LENGTH
                and not is_numeric_or_symbolic(w)
                and not w.startswith('[')]

    def eligible_sentences(self, text: str) -> List[_Sentence]:
        sentences = []
        for sentence in split_sentences(text):
            if len(sentence) <= self.thresholds.excerpt_min_sentence_length:
                continue
            if not self.has_meaningful_content(sentence):
                continue
            prepared = self.normalizer.prepare(sentence)
            sentences.append(_Sentence(
                index=len(sentences),
                text=sentence,
                meaningful=tuple(self.normalizer.meaningful_tokens(prepared.tokens)),
                distinctive=tuple(self.distinctive_words(sentence))
            ))
        return sentences

    # =========================================================================
    # PAIR SCORING
    # =========================================================================
    def enhanced_similarity(self, sentence1: _Sentence, sentence2: _Sentence) -> float:
        """Semantic similarity, discounted when both share boilerplate phrasing"""
        similarity = semantic_similarity(sentence1.meaningful, sentence2.meaningful, self.lexicon)
        if self.lexicon.shares_academic_phrasing(sentence1.text.lower(), sentence2.text.lower()):
            similarity *= self.thresholds.academic_phrasing_penalty
        return similarity

    @staticmethod
    def _overlap(words1: Sequence[str], words2: Sequence[str]) -> List[str]:
        shared = set(words2)
        return [w for w in words1 if w in shared]

    def is_significant_similarity(self, words1: Sequence[str], words2: Sequence[str], similarity: float) -> bool:
        return (len(self._overlap(words1, words2)) >= self.thresholds.excerpt_min_shared_words
                or similarity > self.thresholds.excerpt_strong_similarity)

    def significance_score(self, sentence1: str, sentence2: str,
                           words1: Optional[Sequence[str]] = None,
                           words2: Optional[Sequence[str]] = None) -> float:
        """Distinctive-word overlap ratio plus a bonus for longer sentences"""
        if words1 is None:
            words1 = self.distinctive_words(sentence1)
        if words2 is None:
            words2 = self.distinctive_words(sentence2)
        overlap = self._overlap(words1, words2)
        overlap_ratio = len(overlap) / max(len(words1), len(words2), 1)
        length_bonus = min(len(sentence1), len(sentence2)) / 200
        return overlap_ratio + length_bonus

    def extract_common_phrases(self, sentence1: str, sentence2: str,
                               min_length: int = MIN_PHRASE_LENGTH) -> List[CommonPhrase]:
        """Shared contiguous word sequences, longest first, denylisted phrases excluded"""
        words1 = sentence1.lower().split()
        words2 = sentence2.lower().split()
        max_length = min(len(words1), len(words2), MAX_PHRASE_LENGTH)

        found = []
        seen = set()
        for length in range(min_length, max_length + 1):
            source_positions = {}
            for j in range(len(words2) - length + 1):
                source_positions.setdefault(' '.join(words2[j:j + length]), []).append(j)

            for i in range(len(words1) - length + 1):
                phrase = ' '.join(words1[i:i + length])
                if phrase in seen or phrase not in source_positions:
                    continue
                if self.lexicon.is_common_phrase(phrase):
                    continue
                seen.add(phrase)
                found.append(CommonPhrase(phrase, length, i, source_positions[phrase][0]))

        found.sort(key=lambda p: p.length, reverse=True)
        return found[:MAX_COMMON_PHRASES]

    def match_pair(self, target: _Sentence, source: _Sentence) -> Optional[ExcerptMatch]:
        similarity = self.enhanced_similarity(target, source)
        if similarity <= self.thresholds.excerpt_similarity_threshold:
            return None
        if not self.is_significant_similarity(target.distinctive, source.distinctive, similarity):
            return None

        phrases = self.extract_common_phrases(target.text, source.text)
        display_length = self.thresholds.excerpt_display_length
        return ExcerptMatch(
            target_sentence=truncate(target.text, display_length),
            source_sentence=truncate(source.text, display_length),
            similarity=to_percent(similarity),
            target_index=target.index,
            source_index=source.index,
            significance_score=self.significance_score(
                target.text, source.text, target.distinctive, source.distinctive),
            common_phrases=tuple(phrases[:self.thresholds.max_phrases_per_excerpt])
        )

    def _match_targets(self, targets: Sequence[_Sentence], sources: Sequence[_Sentence]) -> List[ExcerptMatch]:
        matches = []
        for target in targets:
            for source in sources:
                match = self.match_pair(target, source)
                if match is not None:
                    matches.append(match)
        return matches

    # =========================================================================
    # ENTRY POINT
    # =========================================================================
    def find_similar_excerpts(self, target_text: str, source_text: str) -> List[ExcerptMatch]:
        """Top sentence pairs ranked by significance x similarity"""
        targets = self.eligible_sentences(target_text)
        sources = self.eligible_sentences(source_text)
        if not targets or not sources:
            return []

        pair_count = len(targets) * len(sources)
        workers = self.performance.excerpt_workers

        if self.parallel and workers > 1 and pair_count > self.performance.parallel_pair_threshold:
            chunk_size = -(-len(targets) // workers)
            chunks = [targets[i:i + chunk_size] for i in range(0, len(targets), chunk_size)]
            logger.debug(f"Evaluating {pair_count} sentence pairs across {len(chunks)} workers")
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = executor.map(lambda chunk: self._match_targets(chunk, sources), chunks)
                matches = [match for chunk_matches in results for match in chunk_matches]
        else:
            matches = self._match_targets(targets, sources)

        matches.sort(key=lambda m: m.rank, reverse=True)
        return matches[:self.thresholds.max_excerpts]
