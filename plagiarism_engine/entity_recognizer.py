"""
Plagiarism Engine - Entity Recognizer

Pattern-based named entity recognition over whitespace tokens. Three
independent checks run at every token position:

    1. Lexicon hit              -> single-token mention, confidence 0.9
    2. Two-token name heuristic -> two-token PERSON mention, confidence 0.8
    3. Capitalized word with indicator words nearby -> confidence 0.7

A token may yield several overlapping mentions; they are deliberately not
merged here. Placeholder tags such as [EMAIL] are never entities.
"""
import re
from dataclasses import dataclass
from typing import List

from plagiarism_engine.lexicon import EntityType, Lexicon

LEXICON_CONFIDENCE = 0.9
NAME_PAIR_CONFIDENCE = 0.8
CONTEXT_CONFIDENCE = 0.7

CONTEXT_WINDOW = 2

_NON_WORD_RE = re.compile(r'\W')
_PLACEHOLDER_RE = re.compile(r'\[[A-Z_]+\]')


@dataclass(frozen=True)
class EntityMention:
    """A detected entity at a token position"""
    text: str
    type: EntityType
    position: int
    length: int = 1
    confidence: float = LEXICON_CONFIDENCE

    @property
    def end(self) -> int:
        return self.position + self.length

    def to_dict(self) -> dict:
        return {
            'text': self.text,
            'type': self.type.value,
            'position': self.position,
            'length': self.length,
            'confidence': self.confidence
        }


def clean_token(token: str) -> str:
    """Lowercase a token and strip everything but word characters"""
    return _NON_WORD_RE.sub('', token).lower()


def is_capitalized(token: str) -> bool:
    """True for tokens like 'Jakarta' or 'Jakarta,' (single letters excluded)"""
    cleaned = _NON_WORD_RE.sub('', token)
    return len(cleaned) > 1 and cleaned[0].isupper()


def contains_placeholder(token: str) -> bool:
    return bool(_PLACEHOLDER_RE.search(token))


class EntityRecognizer:
    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def recognize(self, text: str) -> List[EntityMention]:
        """Detect entity mentions in text, ordered by position then rule"""
        raw_tokens = text.split()
        words = [clean_token(t) for t in raw_tokens]
        mentions = []

        for i, token in enumerate(raw_tokens):
            word = words[i]
            if not word or contains_placeholder(token):
                continue

            entity_type = self.lexicon.entity_type(word)
            if entity_type is not None:
                mentions.append(EntityMention(word, entity_type, i, 1, LEXICON_CONFIDENCE))

            if i + 1 < len(raw_tokens) and words[i + 1] and not contains_placeholder(raw_tokens[i + 1]):
                if self.is_likely_person_name(token, raw_tokens[i + 1]):
                    mentions.append(EntityMention(
                        f'{word} {words[i + 1]}', EntityType.PERSON, i, 2, NAME_PAIR_CONFIDENCE
                    ))

            if is_capitalized(token) and not self.lexicon.is_stop_word(word):
                context = words[max(0, i - CONTEXT_WINDOW):i + CONTEXT_WINDOW + 1]
                context_type = self.lexicon.classify_context(context)
                if context_type is not None:
                    mentions.append(EntityMention(word, context_type, i, 1, CONTEXT_CONFIDENCE))

        return mentions

    def is_likely_person_name(self, token1: str, token2: str) -> bool:
        """Check whether two adjacent raw tokens read as a person's name"""
        word1 = clean_token(token1)
        word2 = clean_token(token2)

        if self.lexicon.is_known_person(word1):
            if self.lexicon.is_known_person(word2) or is_capitalized(token2):
                return True

        full_name = f'{token1} {token2}'
        return any(pattern.search(full_name) for pattern in self.lexicon.name_patterns)
