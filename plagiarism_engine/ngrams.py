"""
Plagiarism Engine - Smart N-grams

Sliding token windows over normalized text that keep only windows made
mostly of meaningful words. Windows that are all placeholders, start with a
connector, end on a copula or read like list numbering and chapter/table
references are dropped.
"""
import math
from typing import List, Sequence

from plagiarism_engine.text_normalizer import TextNormalizer


class SmartNGramExtractor:
    def __init__(self, normalizer: TextNormalizer, n: int = 3, meaningful_ratio: float = 0.8):
        self.normalizer = normalizer
        self.n = n
        self.meaningful_ratio = meaningful_ratio

    def min_meaningful(self, n: int) -> int:
        return max(2, math.ceil(n * self.meaningful_ratio))

    def extract(self, text, n: int = None) -> List[str]:
        """Smart n-grams of a raw string or PreparedText, in text order"""
        n = n or self.n
        tokens = self.normalizer.prepare(text).tokens
        return self.extract_from_tokens(tokens, n)

    def extract_from_tokens(self, tokens: Sequence[str], n: int) -> List[str]:
        required = self.min_meaningful(n)
        ngrams = []
        for i in range(len(tokens) - n + 1):
            window = tokens[i:i + n]
            if len(self.normalizer.meaningful_tokens(window, strict=True)) < required:
                continue
            ngram = ' '.join(window)
            if self.normalizer.lexicon.is_structural_ngram(ngram):
                continue
            ngrams.append(ngram)
        return ngrams


def ngram_similarity(ngrams1: Sequence[str], ngrams2: Sequence[str]) -> float:
    """Jaccard similarity of two n-gram collections"""
    set1, set2 = set(ngrams1), set(ngrams2)
    if not set1 or not set2:
        return 0.0
    return len(set1 & set2) / len(set1 | set2)


def extract_smart_ngrams(normalizer: TextNormalizer, text, n: int = 3) -> List[str]:
    return SmartNGramExtractor(normalizer, n=n).extract(text)
