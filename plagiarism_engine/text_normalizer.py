"""
Plagiarism Engine - Text Normalizer

Turns raw document text into a canonical token stream where boilerplate,
contact details, citations, numbers and named entities are replaced by
bracketed placeholder tags, so that later metrics only compare the words an
author actually wrote.

Pipeline (strictly ordered, each stage works on the previous output):
    1. Contact masking        - [EMAIL] [URL] [PHONE] [CONTACT]
    2. Structure masking      - [CHAPTER_HEADER] [SECTION_HEADER] ... [STRUCTURE]
    3. Entity masking         - [PERSON] [PLACE] [ORGANIZATION], text lowercased
    4. Citations and numbers  - [REFERENCE] [PAGE] [YEAR] [NUMBER] ...
    5. Cleanup                - punctuation (except brackets) and whitespace

Stage 5 can expose new matches for earlier stages (a stripped comma turns
"h," into a lone "h"), so the pipeline repeats until the output is stable.
"""

# =============================================================================
# IMPORTS
# =============================================================================
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from plagiarism_engine.config import ScoringThresholds
from plagiarism_engine.entity_recognizer import EntityMention, EntityRecognizer
from plagiarism_engine.lexicon import Lexicon
from plagiarism_engine.rules import apply_rules

MAX_NORMALIZE_PASSES = 5

TAG_RE = re.compile(r'\[[A-Z_]+\]')
NUMERIC_OR_SYMBOLIC_RE = re.compile(r'^[\d+\-*/=()\[\]]+$')
SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')


@dataclass(frozen=True)
class PreparedText:
    """A document normalized once and shared by every metric"""
    raw: str
    normalized: str
    tokens: Tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.tokens


# =============================================================================
# TOKEN HELPERS
# =============================================================================
def tokenize(normalized: str) -> List[str]:
    return normalized.split()


def is_placeholder(token: str) -> bool:
    """Placeholder tags and other bracketed tokens"""
    return token.startswith('[')


def is_numeric_or_symbolic(word: str) -> bool:
    return bool(NUMERIC_OR_SYMBOLIC_RE.match(word)) or len(word) == 1


def split_sentences(text: str) -> List[str]:
    """Split on runs of . ! ? and drop empty pieces"""
    return [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def lowercase_outside_tags(text: str) -> str:
    """Lowercase text while leaving [UPPER_CASE] tags untouched"""
    parts = []
    last = 0
    for match in TAG_RE.finditer(text):
        parts.append(text[last:match.start()].lower())
        parts.append(match.group(0))
        last = match.end()
    parts.append(text[last:].lower())
    return ''.join(parts)


def mask_tokens(tokens: Sequence[str], mentions: Sequence[EntityMention]) -> List[str]:
    """Replace mention spans with their tags

    Each token index maps to the lowest-position mention covering it, later
    mentions winning ties. The first index of the winning span becomes the
    tag and the rest of the span is dropped.
    """
    winners: Dict[int, EntityMention] = {}
    for mention in mentions:
        for index in range(mention.position, min(mention.end, len(tokens))):
            current = winners.get(index)
            if current is None or mention.position <= current.position:
                winners[index] = mention

    masked = []
    for index, token in enumerate(tokens):
        mention = winners.get(index)
        if mention is None:
            masked.append(token)
        elif mention.position == index:
            masked.append(mention.type.tag)
    return masked


# =============================================================================
# NORMALIZER
# =============================================================================
class TextNormalizer:
    def __init__(self, lexicon: Lexicon, recognizer: Optional[EntityRecognizer] = None,
                 thresholds: Optional[ScoringThresholds] = None):
        self.lexicon = lexicon
        self.recognizer = recognizer or EntityRecognizer(lexicon)
        self.thresholds = thresholds or ScoringThresholds()

    def normalize(self, text: str) -> str:
        """Run the pipeline until the output no longer changes"""
        result = self._normalize_once(text)
        for _ in range(MAX_NORMALIZE_PASSES - 1):
            again = self._normalize_once(result)
            if again == result:
                break
            result = again
        return result

    def _normalize_once(self, text: str) -> str:
        text = apply_rules(text, self.lexicon.contact_rules)
        text = apply_rules(text, self.lexicon.structure_rules)
        text = self.mask_entities(text)
        text = apply_rules(text, self.lexicon.citation_rules)
        text = apply_rules(text, self.lexicon.cleanup_rules)
        return text.strip()

    def mask_entities(self, text: str) -> str:
        """Lowercase non-tag text and replace recognized entities with tags"""
        mentions = self.recognizer.recognize(text)
        tokens = [lowercase_outside_tags(t) for t in text.split()]
        return ' '.join(mask_tokens(tokens, mentions))

    def prepare(self, text: Union[str, PreparedText]) -> PreparedText:
        if isinstance(text, PreparedText):
            return text
        normalized = self.normalize(text)
        return PreparedText(raw=text, normalized=normalized, tokens=tuple(tokenize(normalized)))

    # -------------------------------------------------------------------------
    # Content filters
    # -------------------------------------------------------------------------
    def meaningful_tokens(self, tokens: Sequence[str], strict: bool = False) -> List[str]:
        """Tokens that carry content: no tags, no stop words, longer than 2

        strict also drops numeric and symbolic tokens.
        """
        meaningful = []
        for token in tokens:
            if is_placeholder(token) or self.lexicon.is_stop_word(token) or len(token) <= 2:
                continue
            if strict and is_numeric_or_symbolic(token):
                continue
            meaningful.append(token)
        return meaningful

    def content_ratio(self, text: Union[str, PreparedText]) -> float:
        """Share of meaningful tokens among normalized tokens longer than 2"""
        words = [t for t in self.prepare(text).tokens if len(t) > 2]
        if not words:
            return 0.0
        return len(self.meaningful_tokens(words)) / len(words)

    def is_low_content_text(self, text: Union[str, PreparedText]) -> bool:
        tokens = self.prepare(text).tokens
        if not tokens:
            return True
        meaningful = self.meaningful_tokens(tokens, strict=True)
        return (len(meaningful) < self.thresholds.low_content_min_tokens
                or len(meaningful) / len(tokens) < self.thresholds.low_content_min_ratio)
