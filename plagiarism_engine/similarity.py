"""
Plagiarism Engine - Similarity Metrics

Independent similarity levels between two documents, each in [0, 1]:
    - character_level:  Jaccard of lowercase character sets (raw text)
    - word_level:       cosine of term-frequency vectors (normalized tokens)
    - semantic_level:   mean pairwise word similarity of meaningful tokens
    - structural_level: sentence length and sentence count agreement
    - entity_filtered:  word level after deleting recognized entities
    - ngram_level:      Jaccard of smart trigram sets
    - content_quality:  mean share of meaningful tokens

Word similarity combines exact match, a light Indonesian/English stemmer,
normalized Levenshtein similarity (rapidfuzz) and synonym groups.
"""
import re
from collections import Counter
from typing import Sequence, Union

import numpy as np
from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from plagiarism_engine.lexicon import Lexicon
from plagiarism_engine.ngrams import SmartNGramExtractor, ngram_similarity
from plagiarism_engine.text_normalizer import PreparedText, TextNormalizer, split_sentences

STEM_MATCH_SIMILARITY = 0.9
SYNONYM_SIMILARITY = 0.8

INDONESIAN_SUFFIX_RE = re.compile(r'(?:nya|kan|an|i)$')
ENGLISH_SUFFIX_RE = re.compile(r'(?:ing|ed|er|est|ly|tion|sion)$')

TextInput = Union[str, PreparedText]


# =============================================================================
# WORD SIMILARITY
# =============================================================================
def levenshtein_distance(word1: str, word2: str) -> int:
    return Levenshtein.distance(word1, word2)


def simple_stem(word: str) -> str:
    """Strip one Indonesian suffix, then one English suffix"""
    word = INDONESIAN_SUFFIX_RE.sub('', word, count=1)
    return ENGLISH_SUFFIX_RE.sub('', word, count=1)


def word_similarity(word1: str, word2: str, lexicon: Lexicon) -> float:
    if word1 == word2:
        return 1.0
    if simple_stem(word1) == simple_stem(word2):
        return STEM_MATCH_SIMILARITY

    longest = max(len(word1), len(word2))
    edit_similarity = 1 - levenshtein_distance(word1, word2) / longest if longest else 0.0
    synonym_similarity = SYNONYM_SIMILARITY if lexicon.are_synonyms(word1, word2) else 0.0
    return max(edit_similarity, synonym_similarity)


def word_similarity_matrix(words1: Sequence[str], words2: Sequence[str], lexicon: Lexicon) -> np.ndarray:
    """word_similarity for every (words1[i], words2[j]) pair at once"""
    matrix = process.cdist(words1, words2, scorer=Levenshtein.normalized_similarity, dtype=np.float64)

    synonyms = np.zeros(matrix.shape, dtype=bool)
    for group in lexicon.synonym_groups:
        in_group1 = np.array([w in group for w in words1], dtype=bool)
        in_group2 = np.array([w in group for w in words2], dtype=bool)
        synonyms |= np.outer(in_group1, in_group2)
    matrix = np.where(synonyms, np.maximum(matrix, SYNONYM_SIMILARITY), matrix)

    stems1 = np.array([simple_stem(w) for w in words1], dtype=object)
    stems2 = np.array([simple_stem(w) for w in words2], dtype=object)
    matrix[stems1[:, None] == stems2[None, :]] = STEM_MATCH_SIMILARITY

    exact = np.array(words1, dtype=object)[:, None] == np.array(words2, dtype=object)[None, :]
    matrix[exact] = 1.0
    return matrix


# =============================================================================
# TEXT-LEVEL METRICS
# =============================================================================
def character_similarity(text1: str, text2: str) -> float:
    chars1 = set(text1.lower())
    chars2 = set(text2.lower())
    union = chars1 | chars2
    if not union:
        return 0.0
    return len(chars1 & chars2) / len(union)


def cosine_similarity(tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
    """Cosine of raw term-frequency vectors"""
    counts1 = Counter(tokens1)
    counts2 = Counter(tokens2)
    vocabulary = sorted(set(counts1) | set(counts2))
    if not vocabulary:
        return 0.0

    vector1 = np.array([counts1[w] for w in vocabulary], dtype=np.float64)
    vector2 = np.array([counts2[w] for w in vocabulary], dtype=np.float64)
    norm1 = np.linalg.norm(vector1)
    norm2 = np.linalg.norm(vector2)

    if norm1 == 0 or norm2 == 0:
        return 0.0

    return float(min(1.0, np.dot(vector1, vector2) / (norm1 * norm2)))


def semantic_similarity(words1: Sequence[str], words2: Sequence[str], lexicon: Lexicon) -> float:
    """Mean word similarity over the full cross product of two word lists

    Repeated words are folded into counts, so the matrix only spans the
    unique words of each side.
    """
    if not words1 or not words2:
        return 0.0

    counts1 = Counter(words1)
    counts2 = Counter(words2)
    unique1 = list(counts1)
    unique2 = list(counts2)
    weights1 = np.array([counts1[w] for w in unique1], dtype=np.float64)
    weights2 = np.array([counts2[w] for w in unique2], dtype=np.float64)

    matrix = word_similarity_matrix(unique1, unique2, lexicon)
    total = float(weights1 @ matrix @ weights2)
    return min(1.0, total / (len(words1) * len(words2)))


def structural_similarity(text1: str, text2: str) -> float:
    sentences1 = split_sentences(text1)
    sentences2 = split_sentences(text2)
    if not sentences1 or not sentences2:
        return 0.0

    avg_length1 = sum(len(s.split()) for s in sentences1) / len(sentences1)
    avg_length2 = sum(len(s.split()) for s in sentences2) / len(sentences2)
    length_similarity = 1 - abs(avg_length1 - avg_length2) / max(avg_length1, avg_length2)

    count1, count2 = len(sentences1), len(sentences2)
    count_similarity = 1 - abs(count1 - count2) / max(count1, count2)

    return (length_similarity + count_similarity) / 2


class SimilarityMetrics:
    """All similarity levels, bound to one normalizer and lexicon"""

    def __init__(self, normalizer: TextNormalizer, ngram_size: int = 3, ngram_meaningful_ratio: float = 0.8):
        self.normalizer = normalizer
        self.lexicon = normalizer.lexicon
        self.ngrams = SmartNGramExtractor(normalizer, n=ngram_size, meaningful_ratio=ngram_meaningful_ratio)

    def character_level(self, text1: TextInput, text2: TextInput) -> float:
        return character_similarity(self._raw(text1), self._raw(text2))

    def word_level(self, text1: TextInput, text2: TextInput) -> float:
        return cosine_similarity(self.normalizer.prepare(text1).tokens,
                                 self.normalizer.prepare(text2).tokens)

    def semantic_level(self, text1: TextInput, text2: TextInput) -> float:
        words1 = self.normalizer.meaningful_tokens(self.normalizer.prepare(text1).tokens)
        words2 = self.normalizer.meaningful_tokens(self.normalizer.prepare(text2).tokens)
        return semantic_similarity(words1, words2, self.lexicon)

    def structural_level(self, text1: TextInput, text2: TextInput) -> float:
        return structural_similarity(self._raw(text1), self._raw(text2))

    def entity_filtered(self, text1: TextInput, text2: TextInput) -> float:
        """Word level once every recognized entity is deleted from both texts"""
        raw1, raw2 = self._raw(text1), self._raw(text2)
        recognizer = self.normalizer.recognizer
        mentions = recognizer.recognize(raw1) + recognizer.recognize(raw2)

        filtered1, filtered2 = raw1.lower(), raw2.lower()
        for entity_text in dict.fromkeys(m.text for m in mentions):
            pattern = re.compile(r'\b' + re.escape(entity_text) + r'\b', re.IGNORECASE)
            filtered1 = pattern.sub('', filtered1)
            filtered2 = pattern.sub('', filtered2)

        return self.word_level(filtered1, filtered2)

    def ngram_level(self, text1: TextInput, text2: TextInput) -> float:
        return ngram_similarity(self.ngrams.extract(text1), self.ngrams.extract(text2))

    def content_quality(self, text1: TextInput, text2: TextInput) -> float:
        return (self.normalizer.content_ratio(text1) + self.normalizer.content_ratio(text2)) / 2

    @staticmethod
    def _raw(text: TextInput) -> str:
        return text.raw if isinstance(text, PreparedText) else text

