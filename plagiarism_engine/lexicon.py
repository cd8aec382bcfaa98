"""
Plagiarism Engine - Lexicon Store

Closed, hand-curated word lists used by every analysis stage:
    - Stop words (Indonesian, English, academic and technical vocabulary)
    - Named entities (people, places, organizations)
    - Context indicator words for capitalized proper nouns
    - Synonym groups (Indonesian/English)
    - The pattern rule table (see rules.py)

The lexicon is an immutable value built once per process by
get_default_lexicon() and passed explicitly into the normalizer, the
metrics and the excerpt matcher. Nothing mutates it after construction.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple

from plagiarism_engine import rules
from plagiarism_engine.rules import PatternRule


class EntityType(Enum):
    """Named entity categories, valued by their placeholder tag name"""
    PERSON = 'PERSON'
    PLACE = 'PLACE'
    ORGANIZATION = 'ORGANIZATION'

    @property
    def tag(self) -> str:
        return f'[{self.value}]'


# =============================================================================
# WORD LISTS
# =============================================================================
STOP_WORDS_INDONESIAN = [
    'yang', 'dan', 'atau', 'dengan', 'untuk', 'dari', 'dalam', 'pada', 'ke', 'di', 'oleh',
    'sebagai', 'adalah', 'merupakan', 'akan', 'dapat', 'harus', 'perlu', 'bisa', 'ada',
    'tidak', 'juga', 'telah', 'sudah', 'masih', 'lebih', 'sangat', 'cukup', 'agak', 'ini',
    'itu', 'tersebut', 'serta', 'yaitu', 'yakni', 'ialah', 'karena', 'sehingga', 'maka',
]

STOP_WORDS_ENGLISH = [
    'the', 'and', 'or', 'of', 'to', 'in', 'for', 'with', 'by', 'as', 'is', 'are', 'was',
    'were', 'be', 'been', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'could', 'should', 'may', 'might', 'this', 'that', 'these', 'those', 'a', 'an',
]

# Academic vocabulary is shared by most papers and says nothing about copying
STOP_WORDS_ACADEMIC = [
    'menurut', 'berdasarkan', 'sesuai', 'seperti', 'misalnya', 'contoh', 'hasil', 'penelitian',
    'according', 'based', 'such', 'example', 'result', 'study', 'research', 'analysis',
]

STOP_WORDS_TECHNICAL = [
    'nilai', 'data', 'sistem', 'fungsi', 'metode', 'proses', 'informasi', 'komputer', 'digital',
    'analisis', 'algoritma', 'input', 'output', 'struktur', 'implementasi', 'aplikasi',
    'value', 'system', 'function', 'method', 'process', 'information', 'computer',
    'algorithm', 'structure', 'implementation', 'application', 'menggunakan', 'using',
    'digunakan', 'used', 'teknologi', 'technology', 'pembelajaran', 'learning', 'siswa', 'student',
    'sekolah', 'school', 'menengah', 'atas', 'dampak', 'impact', 'terhadap', 'towards',
]

STOP_WORDS_STRUCTURAL = [
    'bab', 'pendahuluan', 'kesimpulan', 'pembahasan', 'tinjauan', 'pustaka', 'daftar',
    'chapter', 'introduction', 'conclusion', 'discussion', 'review', 'literature', 'references',
    'kebutuhan', 'fungsional', 'requirement', 'functional', 'specification',
]

PERSON_NAMES = [
    # Indonesian
    'ahmad', 'muhammad', 'abdul', 'siti', 'sri', 'dewi', 'putra', 'putri', 'budi', 'andi',
    'wati', 'ningsih', 'yanto', 'yani', 'rini', 'indah', 'sari', 'lestari', 'agus', 'bambang',
    'hendro', 'sutrisno', 'widodo', 'susilo', 'joko', 'megawati', 'prabowo', 'wiranto',
    # International
    'john', 'smith', 'johnson', 'williams', 'brown', 'jones', 'garcia', 'miller', 'davis',
    'rodriguez', 'martinez', 'hernandez', 'lopez', 'gonzalez', 'wilson', 'anderson', 'thomas',
    'taylor', 'moore', 'jackson', 'martin', 'lee', 'perez', 'thompson', 'white', 'harris',
    'clark', 'lewis', 'robinson', 'walker', 'young', 'allen', 'king', 'wright', 'scott',
]

PLACE_NAMES = [
    'jakarta', 'surabaya', 'bandung', 'medan', 'semarang', 'makassar', 'palembang', 'tangerang',
    'depok', 'bekasi', 'bogor', 'batam', 'pekanbaru', 'lampung', 'malang', 'denpasar',
    'indonesia', 'america', 'europe', 'asia', 'africa', 'australia', 'london', 'paris', 'tokyo',
    'singapore', 'malaysia', 'thailand', 'vietnam', 'philippines', 'brunei', 'myanmar',
]

ORGANIZATION_NAMES = [
    'universitas', 'institut', 'sekolah', 'fakultas', 'jurusan', 'department', 'college',
    'university', 'school', 'faculty', 'google', 'microsoft', 'apple', 'facebook', 'amazon',
    'unesco', 'who', 'unicef', 'nasa', 'fbi', 'cia', 'ieee', 'acm',
]

# Context words around a capitalized token; checked in this order
PERSON_INDICATORS = ['dr', 'prof', 'ir', 'drs', 'h', 'hj', 'bapak', 'ibu', 'pak', 'bu', 'mr', 'mrs', 'ms']
PLACE_INDICATORS = ['di', 'dari', 'ke', 'kota', 'kabupaten', 'provinsi', 'negara',
                    'in', 'from', 'to', 'city', 'country']
ORGANIZATION_INDICATORS = ['universitas', 'institut', 'sekolah', 'perusahaan',
                           'university', 'institute', 'school', 'company']

SYNONYM_GROUPS = [
    ['baik', 'bagus', 'good', 'excellent', 'great'],
    ['buruk', 'jelek', 'bad', 'poor', 'terrible'],
    ['besar', 'banyak', 'large', 'big', 'huge'],
    ['kecil', 'sedikit', 'small', 'little', 'tiny'],
    ['penting', 'vital', 'important', 'crucial', 'essential'],
    ['penelitian', 'riset', 'research', 'study', 'investigation'],
    ['hasil', 'outcome', 'result', 'finding', 'conclusion'],
    ['metode', 'cara', 'method', 'approach', 'technique'],
    ['analisis', 'kajian', 'analysis', 'examination', 'evaluation'],
]


# =============================================================================
# LEXICON
# =============================================================================
@dataclass(frozen=True, eq=False)
class Lexicon:
    """Immutable lexicon shared by all analysis components"""
    stop_words: FrozenSet[str]
    entities: Mapping[str, EntityType]
    indicators: Tuple[Tuple[EntityType, FrozenSet[str]], ...]
    synonym_groups: Tuple[FrozenSet[str], ...]
    name_patterns: Tuple[re.Pattern, ...]
    contact_rules: Tuple[PatternRule, ...]
    structure_rules: Tuple[PatternRule, ...]
    citation_rules: Tuple[PatternRule, ...]
    cleanup_rules: Tuple[PatternRule, ...]
    academic_patterns: Tuple[re.Pattern, ...]
    common_phrases: Tuple[str, ...]
    structural_ngram_patterns: Tuple[re.Pattern, ...]

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def entity_type(self, word: str) -> Optional[EntityType]:
        return self.entities.get(word)

    def is_known_person(self, word: str) -> bool:
        return self.entities.get(word) is EntityType.PERSON

    def are_synonyms(self, word1: str, word2: str) -> bool:
        """True when both words belong to one synonym group"""
        return any(word1 in group and word2 in group for group in self.synonym_groups)

    def classify_context(self, context_words) -> Optional[EntityType]:
        """Entity type suggested by indicator words in a context window"""
        context = set(context_words)
        for entity_type, indicators in self.indicators:
            if context & indicators:
                return entity_type
        return None

    def is_common_phrase(self, phrase: str) -> bool:
        return any(common in phrase for common in self.common_phrases)

    def shares_academic_phrasing(self, text1: str, text2: str) -> bool:
        """True when one boilerplate academic pattern matches both texts"""
        return any(p.search(text1) and p.search(text2) for p in self.academic_patterns)

    def is_structural_ngram(self, ngram: str) -> bool:
        lowered = ngram.lower()
        return any(p.search(lowered) for p in self.structural_ngram_patterns)


def build_lexicon(stop_words=None, persons=None, places=None, organizations=None,
                  synonym_groups=None) -> Lexicon:
    """Build a lexicon, defaulting every word list to the built-in ones"""
    if stop_words is None:
        stop_words = (STOP_WORDS_INDONESIAN + STOP_WORDS_ENGLISH + STOP_WORDS_ACADEMIC
                      + STOP_WORDS_TECHNICAL + STOP_WORDS_STRUCTURAL)

    entities = {}
    for name in persons if persons is not None else PERSON_NAMES:
        entities[name.lower()] = EntityType.PERSON
    for place in places if places is not None else PLACE_NAMES:
        entities[place.lower()] = EntityType.PLACE
    for org in organizations if organizations is not None else ORGANIZATION_NAMES:
        entities[org.lower()] = EntityType.ORGANIZATION

    groups = synonym_groups if synonym_groups is not None else SYNONYM_GROUPS

    return Lexicon(
        stop_words=frozenset(w.lower() for w in stop_words),
        entities=MappingProxyType(entities),
        indicators=(
            (EntityType.PERSON, frozenset(PERSON_INDICATORS)),
            (EntityType.PLACE, frozenset(PLACE_INDICATORS)),
            (EntityType.ORGANIZATION, frozenset(ORGANIZATION_INDICATORS)),
        ),
        synonym_groups=tuple(frozenset(g) for g in groups),
        name_patterns=rules.NAME_PATTERNS,
        contact_rules=rules.CONTACT_RULES,
        structure_rules=rules.STRUCTURE_RULES,
        citation_rules=rules.CITATION_RULES,
        cleanup_rules=rules.CLEANUP_RULES,
        academic_patterns=rules.ACADEMIC_PHRASING_PATTERNS,
        common_phrases=rules.COMMON_PHRASES,
        structural_ngram_patterns=rules.STRUCTURAL_NGRAM_PATTERNS,
    )


@lru_cache(maxsize=1)
def get_default_lexicon() -> Lexicon:
    """Process-wide default lexicon, built on first use"""
    return build_lexicon()
