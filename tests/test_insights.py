"""Tests for insight and recommendation generation."""

import pytest

from plagiarism_engine.composite_scorer import ScoreComposer
from plagiarism_engine.contact_analysis import ContactAnalysis
from plagiarism_engine.excerpt_matcher import ExcerptMatch
from plagiarism_engine.insights import (
    LOW_RECOMMENDATIONS, MODERATE_RECOMMENDATIONS, NO_EXCERPTS_NOTE, SEVERE_RECOMMENDATIONS,
    Confidence, InsightGenerator
)


def excerpt(similarity, sentence="kalimat sasaran"):
    return ExcerptMatch(
        target_sentence=sentence, source_sentence="kalimat sumber", similarity=similarity,
        target_index=0, source_index=0, significance_score=1.0)


@pytest.fixture
def generator():
    return InsightGenerator()


@pytest.mark.parametrize("semantic,confidence", [
    (0.85, Confidence.VERY_HIGH),
    (0.61, Confidence.HIGH),
    (0.5, Confidence.MEDIUM),
    (0.4, Confidence.LOW),
    (0.0, Confidence.LOW),
])
def test_confidence_bands(generator, semantic, confidence):
    band, assessment, findings = generator.semantic_band(semantic)
    assert band is confidence
    assert f"({round(semantic * 100)}%)" in assessment
    assert len(findings) == 2


def test_severe_recommendations(generator):
    analysis = ScoreComposer().compose(1.0, 1.0, 1.0, 1.0, 1.0, 1.0)
    recommendations = generator.recommendations(analysis, [excerpt(100, "kalimat yang disalin")])

    assert recommendations[:3] == SEVERE_RECOMMENDATIONS
    assert recommendations[3].startswith("⚠️ **Prioritas Tinggi**")
    assert '"kalimat yang disalin"' in recommendations[4]
    assert len(recommendations) == 5


def test_moderate_recommendations(generator):
    analysis = ScoreComposer().compose(1.0, 1.0, 0.5, 1.0, 1.0, 1.0)
    assert 0.4 < analysis.final_score <= 0.7

    assert generator.recommendations(analysis, []) == MODERATE_RECOMMENDATIONS
    many = [excerpt(70) for _ in range(4)]
    assert len(generator.recommendations(analysis, many)) == 4


def test_low_recommendations(generator):
    analysis = ScoreComposer().compose(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert generator.recommendations(analysis, [excerpt(80)]) == LOW_RECOMMENDATIONS


def test_detailed_explanation(generator):
    analysis = ScoreComposer().compose(1.0, 1.0, 1.0, 1.0, 1.0, 1.0)
    explanation = generator.detailed_explanation(analysis, [excerpt(90), excerpt(70)], "doc.pdf")

    assert explanation.startswith(
        'Tingkat kesamaan 82% dengan dokumen "doc.pdf" disebabkan oleh kombinasi faktor berikut:\n\n')
    assert "Kesamaan Tingkat Kata (100%)" in explanation
    assert "Kesamaan Struktur (100%)" in explanation
    assert "Ditemukan 1 kalimat dengan kesamaan >80%" in explanation
    assert "Terdapat 1 kalimat dengan parafrase" in explanation


def test_similarity_breakdown(generator):
    analysis = ScoreComposer().compose(0.0, 0.6, 0.8, 0.2, 0.0, 0.0)
    breakdown = generator.similarity_breakdown(analysis)

    assert breakdown["wordLevel"] == {"score": 60, "interpretation": "Banyak kata yang sama digunakan"}
    assert breakdown["semanticLevel"]["interpretation"] == "Makna dan konsep hampir sama"
    assert breakdown["structuralLevel"]["interpretation"] == "Struktur penyajian berbeda"


def test_content_analysis(generator):
    contacts = ContactAnalysis(details=["catatan satu", "catatan dua"])

    empty = generator.content_analysis([], contacts)
    assert empty["excerptAnalysis"] == NO_EXCERPTS_NOTE
    assert empty["contactFilteringInfo"] == "catatan satu. catatan dua"

    summary = generator.content_analysis([excerpt(90), excerpt(65)], contacts)["excerptAnalysis"]
    assert summary.startswith("Analisis konten menunjukkan 2 bagian")
    assert "1 bagian dengan kesamaan sangat tinggi" in summary


def test_generate_to_dict(generator):
    analysis = ScoreComposer().compose(0.5, 0.5, 0.5, 0.5, 0.5, 0.5)
    insights = generator.generate(analysis, [], ContactAnalysis(), 3, "doc.pdf")
    data = insights.to_dict()

    assert data["confidence"] == "medium"
    assert data["entityAnalysis"].startswith("Terdeteksi 3 entitas bernama")
    assert set(data) == {
        "entityAnalysis", "semanticAssessment", "confidence", "detailedExplanation",
        "specificFindings", "recommendations", "similarityBreakdown", "contentAnalysis"
    }
