"""Tests for word similarity and the text-level metrics."""

import pytest

from plagiarism_engine.composite_scorer import apply_diminishing_returns
from plagiarism_engine.similarity import (
    character_similarity, cosine_similarity, levenshtein_distance, semantic_similarity,
    simple_stem, structural_similarity, word_similarity, word_similarity_matrix
)

from conftest import SCENARIO_SOURCE, SCENARIO_TARGET

# Words built from disjoint alphabets (a-m and n-z) have zero edit similarity
LOW_ALPHABET_WORDS = ["badge", "cable", "decal", "flame", "glade",
                      "black", "camel", "medal", "ideal", "jade"]
HIGH_ALPHABET_WORDS = ["punt", "towns", "trout", "worst", "stony",
                       "proton", "sport", "story", "outrun", "sour"]

SAMPLE_TEXTS = [
    ("Kucing tidur di atas meja. Harimau berburu di hutan!",
     "Harimau berburu di hutan lebat. Kucing tidur nyenyak."),
    (SCENARIO_TARGET, SCENARIO_SOURCE),
    ("Metode klasifikasi baik sekali.", "Pendekatan klasifikasi bagus sekali dan efektif."),
]


def test_levenshtein_distance():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3


def test_simple_stem():
    assert simple_stem("bukunya") == "buku"
    assert simple_stem("makanan") == "makan"
    assert simple_stem("running") == "runn"
    assert simple_stem("meja") == "meja"


def test_word_similarity(lexicon):
    assert word_similarity("buku", "buku", lexicon) == 1.0
    assert word_similarity("bukunya", "buku", lexicon) == 0.9
    assert word_similarity("baik", "good", lexicon) == 0.8
    assert word_similarity("kucing", "kucang", lexicon) == pytest.approx(1 - 1 / 6)


def test_similarity_matrix_matches_scalar(lexicon):
    words1 = ["buku", "bukunya", "baik", "kucing", "analisis"]
    words2 = ["buku", "good", "kucang", "kajian", "rumah"]
    matrix = word_similarity_matrix(words1, words2, lexicon)
    for i, w1 in enumerate(words1):
        for j, w2 in enumerate(words2):
            assert matrix[i, j] == pytest.approx(word_similarity(w1, w2, lexicon))


def test_character_similarity():
    assert character_similarity("abc", "ABC") == 1.0
    assert character_similarity("", "") == 0.0
    assert character_similarity("ab", "bc") == pytest.approx(1 / 3)


def test_cosine_similarity():
    assert cosine_similarity(["a", "b", "a"], ["a", "b", "a"]) == pytest.approx(1.0)
    assert cosine_similarity(["a"], ["b"]) == 0.0
    assert cosine_similarity([], ["a"]) == 0.0


def test_semantic_similarity_empty(lexicon):
    assert semantic_similarity([], ["kucing"], lexicon) == 0.0
    assert semantic_similarity(["kucing"], [], lexicon) == 0.0


def test_semantic_similarity_counts_duplicates(lexicon):
    # Two of the four pairs are exact matches, the other two score zero
    assert semantic_similarity(["jade", "jade"], ["jade", "sour"], lexicon) == pytest.approx(0.5)


def test_structural_similarity():
    text = "Satu dua tiga. Empat lima enam."
    assert structural_similarity(text, text) == 1.0
    assert structural_similarity("", text) == 0.0
    assert structural_similarity("Satu dua.", "Satu dua tiga empat. Lima enam tujuh delapan.") == \
        pytest.approx(((1 - 2 / 4) + (1 - 1 / 2)) / 2)


@pytest.mark.parametrize("text1,text2", SAMPLE_TEXTS)
def test_metrics_are_symmetric(metrics, text1, text2):
    assert metrics.character_level(text1, text2) == pytest.approx(metrics.character_level(text2, text1))
    assert metrics.word_level(text1, text2) == pytest.approx(metrics.word_level(text2, text1))
    assert metrics.semantic_level(text1, text2) == pytest.approx(metrics.semantic_level(text2, text1))
    assert metrics.structural_level(text1, text2) == pytest.approx(metrics.structural_level(text2, text1))


@pytest.mark.parametrize("text1,text2", SAMPLE_TEXTS)
def test_identity(metrics, text1, text2):
    assert metrics.word_level(text1, text1) == pytest.approx(1.0)
    assert metrics.character_level(text1, text1) == 1.0


@pytest.mark.parametrize("text1,text2", SAMPLE_TEXTS)
def test_metrics_stay_in_unit_interval(metrics, text1, text2):
    for level in (metrics.character_level, metrics.word_level, metrics.semantic_level,
                  metrics.structural_level, metrics.entity_filtered, metrics.ngram_level,
                  metrics.content_quality):
        assert 0.0 <= level(text1, text2) <= 1.0


def test_scenario_word_level_after_masking(metrics):
    assert metrics.word_level(SCENARIO_TARGET, SCENARIO_SOURCE) == pytest.approx(1.0)


def test_entity_filtered_ignores_names(metrics):
    assert metrics.entity_filtered(SCENARIO_TARGET, SCENARIO_SOURCE) == pytest.approx(1.0)


def test_adjusted_semantic_grows_with_shared_vocabulary(metrics):
    target = " ".join(LOW_ALPHABET_WORDS)
    scores = []
    for k in range(len(LOW_ALPHABET_WORDS) + 1):
        source = " ".join(LOW_ALPHABET_WORDS[:k] + HIGH_ALPHABET_WORDS[k:])
        scores.append(apply_diminishing_returns(metrics.semantic_level(target, source)))

    assert scores[0] == 0.0
    assert all(later > earlier for earlier, later in zip(scores, scores[1:]))


def test_content_quality(metrics):
    assert metrics.content_quality("kucing harimau yang", "kucing harimau gajah") == \
        pytest.approx((2 / 3 + 1.0) / 2)
