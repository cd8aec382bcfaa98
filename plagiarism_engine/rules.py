"""
Plagiarism Engine - Pattern Rule Table

Every regex-driven rewrite used by the engine lives here as a declarative
(pattern -> replacement) rule. Rules are grouped by pipeline stage and each
stage is evaluated strictly in the order listed, each rule working on the
output of the previous one.

Stages:
    CONTACT_RULES       - contact information masking (normalizer stage 1)
    STRUCTURE_RULES     - document boilerplate masking (normalizer stage 2)
    CITATION_RULES      - citations, references, numbers (normalizer stage 4)
    CLEANUP_RULES       - punctuation stripping and whitespace (stage 5)

Specific-tag rules always precede the generic [STRUCTURE] / [NUMBER] rules
that would otherwise swallow their input.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class PatternRule:
    """A single named rewrite rule"""
    name: str
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)

    def find_all(self, text: str):
        """Full-match strings for every occurrence (groups ignored)"""
        return [m.group(0) for m in self.pattern.finditer(text)]


def _rule(name, pattern, replacement, flags=0):
    return PatternRule(name=name, pattern=re.compile(pattern, flags), replacement=replacement)


def apply_rules(text: str, rules: Iterable[PatternRule]) -> str:
    """Apply rules in order, each on the output of the previous one"""
    for rule in rules:
        text = rule.apply(text)
    return text


# =============================================================================
# STAGE 1: CONTACT INFORMATION
# =============================================================================
EMAIL_RULE = _rule(
    'email', r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b', '[EMAIL]')

URL_RULE = _rule(
    'url',
    r'https?://(?:www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b'
    r'(?:[-a-zA-Z0-9()@:%_+.~#?&/=]*)',
    '[URL]')

# Indonesian mobile numbers (+62 / 62 / 0 prefix) and grouped landline numbers
PHONE_RULE = _rule(
    'phone',
    r'(?:\+62|62|0)[0-9]{9,13}|(?:\(\d{2,4}\)|\d{2,4})[\s-]?\d{3,4}[\s-]?\d{3,4}',
    '[PHONE]')

CONTACT_LABEL_RULE = _rule(
    'contact_label',
    r'\b(?:email|e-mail|phone|tel|hp|wa|whatsapp|contact|kontak|hubungi)[\s:]+[^\s]+',
    '[CONTACT]', re.IGNORECASE)

CONTACT_RULES: Tuple[PatternRule, ...] = (
    EMAIL_RULE,
    URL_RULE,
    PHONE_RULE,
    CONTACT_LABEL_RULE,
)


# =============================================================================
# STAGE 2: DOCUMENT STRUCTURE BOILERPLATE
# =============================================================================
STRUCTURE_RULES: Tuple[PatternRule, ...] = (
    _rule('chapter_title',
          r'^(?:bab|chapter)\s+[ivx\d]+\s*[:\-.]?\s*'
          r'(?:pendahuluan|introduction|kesimpulan|conclusion|pembahasan|discussion|tinjauan|review)',
          '[STRUCTURE]', re.IGNORECASE | re.MULTILINE),
    _rule('chapter_header', r'^\s*(?:BAB|CHAPTER)\s+[IVX\d]+\b\s*',
          '[CHAPTER_HEADER] ', re.IGNORECASE | re.MULTILINE),
    _rule('section_header', r'^[ \t]*\d+\.\d+[ \t]+[A-Za-z \t]+$',
          '[SECTION_HEADER]', re.MULTILINE),
    _rule('requirement_header', r'\b\d+\s+(?:kebutuhan|requirement)\s+(?:fungsional|functional)\b',
          '[REQUIREMENT_HEADER]', re.IGNORECASE),
    _rule('standard_section', r'\b(?:latar\s+belakang|background|pendahuluan|introduction)\b',
          '[STANDARD_SECTION]', re.IGNORECASE),
    _rule('chapter_ref', r'\b\d+\s+(?:bab|chapter)\s+[ivx\d]+\b',
          '[CHAPTER_REF]', re.IGNORECASE),
    _rule('numbered_list', r'^[ \t]*[\d.)(\-*+•]+[ \t]+', '[STRUCTURE] ', re.MULTILINE),
    _rule('letter_list', r'^[ \t]*[a-zA-Z][.)\-][ \t]+', '[STRUCTURE] ', re.MULTILINE),
    _rule('roman_list', r'^[ \t]*[IVX]+[.)\-][ \t]+', '[STRUCTURE] ', re.MULTILINE),
    _rule('page_ref', r'\b(?:halaman|page|hal\.?)\s+\d+', '[STRUCTURE]', re.IGNORECASE),
    _rule('table_ref', r'\b(?:tabel|table|gambar|figure|grafik|chart)\s+\d[\d.\-]*',
          '[STRUCTURE]', re.IGNORECASE),
    _rule('final_value_formula', r'\b(?:nilai\s+akhir|final\s+value)\s*=\s*[()+\-*/\w\s]+',
          '[STRUCTURE]', re.IGNORECASE),
    _rule('formatting',
          r'\b(?:font|size|margin|spacing|alignment|justify|center|left|right|bold|italic)\b',
          '[STRUCTURE]', re.IGNORECASE),
)


# =============================================================================
# STAGE 4: CITATIONS, REFERENCES AND NUMBERS
# =============================================================================
CITATION_RULES: Tuple[PatternRule, ...] = (
    _rule('parenthetical_citation', r'\([^)]*\d{4}[^)]*\)', ' '),
    _rule('bracket_citation', r'\[\d+\]', ' '),
    _rule('table_figure_reference', r'\b(?:tabel|table|gambar|figure|grafik|chart)\s+\d[\d.\-]*',
          '[REFERENCE]', re.IGNORECASE),
    _rule('page_reference', r'\b(?:halaman|page|hal\.?)\s+\d+', '[PAGE]', re.IGNORECASE),
    _rule('section_reference', r'\b(?:bab|chapter|pasal)\s+(?:\d+|[ivx]+)\b', '[SECTION]', re.IGNORECASE),
    _rule('formula', r'\b(?:nilai\s+akhir|final\s+value)\s*=\s*[()+\-*/\w\s×·]{1,50}',
          '[FORMULA]', re.IGNORECASE),
    _rule('similarity_function',
          r'\b(?:sim|similarity|kesamaan)\s*[(\[]\s*[a-zA-Z]\s*,\s*[a-zA-Z]\s*[)\]]',
          '[SIMILARITY_FUNCTION]', re.IGNORECASE),
    _rule('variable', r'\b[a-zA-Z]\s*:\s*\d+\b', '[VARIABLE]'),
    _rule('percentage', r'\b\d+(?:\.\d+)?%', '[PERCENTAGE]'),
    _rule('year', r'\b\d{4}\b', '[YEAR]'),
    _rule('number', r'\b\d+(?:\.\d+)?\b', '[NUMBER]'),
    _rule('leading_list_number', r'^\s*[\d.)(\-*+•]+\s+', ''),
    _rule('leading_list_letter', r'^\s*[a-zA-Z][.)\-]\s+', ''),
    _rule('leading_list_roman', r'^\s*[IVX]+[.)\-]\s+', ''),
    _rule('fragmented', r'\b\w\s+\w\s+\w\b', '[FRAGMENTED]'),
)


# =============================================================================
# STAGE 5: CLEANUP
# =============================================================================
CLEANUP_RULES: Tuple[PatternRule, ...] = (
    _rule('punctuation', r'[^\w\s\[\]]', ' '),
    _rule('whitespace', r'\s+', ' '),
)


# =============================================================================
# EXCERPT AND N-GRAM FILTERS
# =============================================================================
# Boilerplate academic phrasing; sentence pairs sharing one are penalized
ACADEMIC_PHRASING_PATTERNS: Tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r'berdasarkan hasil.*penelitian',
    r'dapat disimpulkan bahwa',
    r'menurut.*hasil.*menunjukkan',
    r'based on.*results',
    r'according to.*research',
    r'it can be concluded',
))

# Phrases too common to count as copied material
COMMON_PHRASES: Tuple[str, ...] = (
    'dalam hal ini', 'berdasarkan hasil', 'dapat disimpulkan', 'menurut penelitian',
    'in this case', 'based on results', 'can be concluded', 'according to research',
    'dari hasil penelitian', 'hasil penelitian menunjukkan', 'dapat dilihat bahwa',
    'research shows that', 'the results show', 'it can be seen that',
)

# N-gram windows matching any of these carry no semantic value
STRUCTURAL_NGRAM_PATTERNS: Tuple[re.Pattern, ...] = tuple(re.compile(p) for p in (
    r'^\[.*\]\s+\[.*\]\s+\[.*\]$',
    r'^(?:dan|atau|dengan|untuk|dari|dalam|pada|ke|di|oleh|yang|the|and|or|of|to|in|for|with|by)\s+',
    r'\s+(?:adalah|merupakan|akan|dapat|harus|perlu|is|are|was|were|be|been|have|has|had)$',
    r'^\d+[.)\-]\s+',
    r'^(?:bab|chapter|tabel|table|gambar|figure|halaman|page)\s+\d+',
))

# Two-token person name patterns: academic titles, Arabic and European connectors
NAME_PATTERNS: Tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r'^(?:dr|prof|ir|drs|h|hj)\.?\s',
    r'\b(?:bin|binti|al)\b',
    r'\b(?:van|de|da|al)\b',
))
