"""Tests for the normalization pipeline and content filters."""

import pytest

from plagiarism_engine.entity_recognizer import EntityMention
from plagiarism_engine.lexicon import EntityType
from plagiarism_engine.text_normalizer import (
    PreparedText, is_numeric_or_symbolic, is_placeholder, lowercase_outside_tags,
    mask_tokens, split_sentences
)

from conftest import SCENARIO_SOURCE, SCENARIO_TARGET

ANIMALS = ["kucing", "harimau", "gajah", "jerapah", "kelinci",
           "merpati", "rajawali", "buaya", "kerbau", "domba"]


def test_scenario_entities_are_masked(normalizer):
    assert normalizer.normalize(SCENARIO_TARGET) == "[PERSON] bekerja di [PLACE]"
    assert normalizer.normalize(SCENARIO_SOURCE) == "[PERSON] bekerja di [PLACE]"


def test_contact_masking(normalizer):
    result = normalizer.normalize("Kirim tugas ke budi@example.com segera")
    assert "[EMAIL]" in result
    assert "@" not in result

    assert "[URL]" in normalizer.normalize("Lihat https://example.com/page untuk detail")
    assert "[PHONE]" in normalizer.normalize("Nomor saya 081234567890 ya")


def test_numbers_and_years(normalizer):
    assert normalizer.normalize("Pada tahun 2020 ada 15 siswa") == "pada tahun [YEAR] ada [NUMBER] siswa"


def test_citations_removed(normalizer):
    assert normalizer.normalize("Metode ini efektif (Hartono, 2020) untuk siswa") == \
        "metode ini efektif untuk siswa"
    assert normalizer.normalize("Hasil ini terbukti [12] benar") == "hasil ini terbukti benar"


def test_tags_keep_their_case(normalizer):
    result = normalizer.normalize("Kirim ke budi@example.com")
    assert "[EMAIL]" in result
    assert "[email]" not in result


@pytest.mark.parametrize("text", [
    SCENARIO_TARGET,
    "Dr. H, Budi tinggal di Jakarta, Indonesia. Email: budi@example.com atau 081234567890.",
    "BAB I PENDAHULUAN\n1.1 Latar Belakang\nPenelitian (Smith, 2019) menunjukkan kenaikan 45%.",
    "a b c d e f g",
    "",
])
def test_normalization_is_idempotent(normalizer, text):
    once = normalizer.normalize(text)
    assert normalizer.normalize(once) == once


def test_low_content_boundary(normalizer):
    assert not normalizer.is_low_content_text(" ".join(ANIMALS))
    assert normalizer.is_low_content_text(" ".join(ANIMALS[:9]))


def test_low_content_ratio(normalizer):
    # Ten meaningful words drowned in stop words
    text = " ".join(ANIMALS) + " " + " ".join(["yang dan di ke"] * 7)
    assert normalizer.is_low_content_text(text)


def test_empty_text_is_low_content(normalizer):
    assert normalizer.is_low_content_text("")
    assert normalizer.content_ratio("") == 0.0


def test_meaningful_tokens(normalizer):
    tokens = ["[PERSON]", "yang", "ab", "kucing", "123"]
    assert normalizer.meaningful_tokens(tokens) == ["kucing", "123"]
    assert normalizer.meaningful_tokens(tokens, strict=True) == ["kucing"]


def test_content_ratio(normalizer):
    assert normalizer.content_ratio("kucing harimau yang") == pytest.approx(2 / 3)


def test_token_predicates():
    assert is_placeholder("[NUMBER]")
    assert not is_placeholder("kucing")
    assert is_numeric_or_symbolic("123")
    assert is_numeric_or_symbolic("x")
    assert is_numeric_or_symbolic("(1+2)")
    assert not is_numeric_or_symbolic("abc")


def test_split_sentences():
    assert split_sentences("Satu. Dua!  Tiga?") == ["Satu", "Dua", "Tiga"]
    assert split_sentences("...") == []


def test_lowercase_outside_tags():
    assert lowercase_outside_tags("Halo [EMAIL] Dunia") == "halo [EMAIL] dunia"


def test_mask_tokens_lowest_position_wins():
    mentions = [
        EntityMention("a b", EntityType.PERSON, 0, 2, 0.8),
        EntityMention("b", EntityType.PLACE, 1, 1, 0.7),
    ]
    assert mask_tokens(["a", "b", "c", "d"], mentions) == ["[PERSON]", "c", "d"]


def test_mask_tokens_later_mention_wins_ties():
    mentions = [
        EntityMention("c", EntityType.PERSON, 2, 1, 0.9),
        EntityMention("c", EntityType.PLACE, 2, 1, 0.7),
    ]
    assert mask_tokens(["a", "b", "c"], mentions) == ["a", "b", "[PLACE]"]


def test_prepare(normalizer):
    prepared = normalizer.prepare(SCENARIO_TARGET)
    assert isinstance(prepared, PreparedText)
    assert prepared.raw == SCENARIO_TARGET
    assert prepared.tokens == ("[PERSON]", "bekerja", "di", "[PLACE]")
    assert normalizer.prepare(prepared) is prepared
