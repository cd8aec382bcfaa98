"""
Plagiarism Engine - Insight Generator

Turns a similarity analysis into reviewer-facing Indonesian text:
confidence level, semantic assessment, an explanation of what drove the
percentage, specific findings, per-level interpretations and concrete
recommendations. Pure functions of their inputs; no scoring happens here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

from plagiarism_engine.composite_scorer import SimilarityAnalysis
from plagiarism_engine.contact_analysis import ContactAnalysis
from plagiarism_engine.excerpt_matcher import ExcerptMatch
from plagiarism_engine.utils import to_percent


class Confidence(Enum):
    """Confidence that the similarity reflects copying, from semantic level"""
    VERY_HIGH = 'very high'
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'


# (lower bound, confidence, assessment template, findings), checked top-down
SEMANTIC_BANDS = [
    (0.8, Confidence.VERY_HIGH,
     'Kesamaan semantik sangat tinggi ({p}%) - kemungkinan besar hasil penyalinan langsung dengan sedikit parafrase',
     ['Struktur kalimat hampir identik dengan sumber',
      'Penggunaan istilah dan terminologi yang sama persis']),
    (0.6, Confidence.HIGH,
     'Kesamaan semantik tinggi ({p}%) - terdapat tumpang tindih konten yang signifikan',
     ['Konsep dan ide utama sangat mirip dengan sumber',
      'Urutan penyajian informasi mengikuti pola yang sama']),
    (0.4, Confidence.MEDIUM,
     'Kesamaan semantik sedang ({p}%) - beberapa konsep dan ide yang sama',
     ['Terdapat beberapa kesamaan dalam konsep utama',
      'Beberapa frasa atau terminologi teknis yang sama']),
]

LOW_SEMANTIC_BAND = (
    Confidence.LOW,
    'Kesamaan semantik rendah ({p}%) - konten tampak original',
    ['Konten menunjukkan originalitas yang baik',
     'Pendekatan dan sudut pandang yang berbeda dari sumber'],
)

SEVERE_RECOMMENDATIONS = [
    '🔄 **Parafrase Menyeluruh**: Tulis ulang semua bagian yang mirip dengan menggunakan kata-kata dan struktur kalimat yang benar-benar berbeda',
    '💡 **Tambah Analisis Original**: Sertakan interpretasi, analisis, atau sudut pandang pribadi Anda terhadap topik tersebut',
    '📚 **Sitasi yang Tepat**: Pastikan semua ide yang berasal dari sumber lain diberi kutipan yang sesuai dengan format akademik',
]
SEVERE_SEMANTIC_RECOMMENDATION = (
    '⚠️ **Prioritas Tinggi**: Konten perlu ditulis ulang secara signifikan untuk menghindari tuduhan plagiarisme')

MODERATE_RECOMMENDATIONS = [
    '✏️ **Perbaiki Parafrase**: Gunakan sinonim, ubah struktur kalimat, dan variasikan cara penyampaian ide',
    '📖 **Tambah Referensi**: Berikan kutipan yang jelas untuk semua sumber yang dirujuk',
    '🎯 **Fokus Originalitas**: Tambahkan lebih banyak konten original dan analisis pribadi',
]
MODERATE_EXCERPTS_RECOMMENDATION = (
    '🔍 **Perhatian Khusus**: Terdapat beberapa bagian yang perlu parafrase lebih baik')

LOW_RECOMMENDATIONS = [
    '✅ **Tingkat Originalitas Baik**: Pertahankan standar penulisan yang sudah baik ini',
    '📝 **Terus Sitasi**: Lanjutkan memberikan kutipan yang tepat untuk sumber yang dirujuk',
    '🌟 **Kembangkan Lebih**: Tambahkan lebih banyak perspektif atau analisis original untuk memperkaya konten',
]

NO_EXCERPTS_NOTE = 'Tidak ditemukan bagian konten dengan kesamaan yang signifikan (>60%).'


@dataclass
class Insights:
    entity_analysis: str
    semantic_assessment: str
    confidence: Confidence
    detailed_explanation: str
    specific_findings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    similarity_breakdown: Dict[str, dict] = field(default_factory=dict)
    content_analysis: Dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'entityAnalysis': self.entity_analysis,
            'semanticAssessment': self.semantic_assessment,
            'confidence': self.confidence.value,
            'detailedExplanation': self.detailed_explanation,
            'specificFindings': list(self.specific_findings),
            'recommendations': list(self.recommendations),
            'similarityBreakdown': self.similarity_breakdown,
            'contentAnalysis': self.content_analysis
        }


def _count_high(excerpts: Sequence[ExcerptMatch]) -> int:
    return sum(1 for e in excerpts if e.similarity > 80)


def _count_moderate(excerpts: Sequence[ExcerptMatch]) -> int:
    return sum(1 for e in excerpts if 60 < e.similarity <= 80)


class InsightGenerator:
    def generate(self, analysis: SimilarityAnalysis, excerpts: Sequence[ExcerptMatch],
                 contact_analysis: ContactAnalysis, entity_count: int, source_document: str) -> Insights:
        confidence, assessment, findings = self.semantic_band(analysis.semantic_level)
        return Insights(
            entity_analysis=(f"Terdeteksi {entity_count} entitas bernama (nama orang, tempat, organisasi) "
                             f"yang difilter dari analisis plagiarisme"),
            semantic_assessment=assessment,
            confidence=confidence,
            detailed_explanation=self.detailed_explanation(analysis, excerpts, source_document),
            specific_findings=findings,
            recommendations=self.recommendations(analysis, excerpts),
            similarity_breakdown=self.similarity_breakdown(analysis),
            content_analysis=self.content_analysis(excerpts, contact_analysis)
        )

    @staticmethod
    def semantic_band(semantic_level: float):
        """(confidence, assessment, findings) for a semantic similarity level"""
        percent = to_percent(semantic_level)
        for lower_bound, confidence, template, findings in SEMANTIC_BANDS:
            if semantic_level > lower_bound:
                return confidence, template.format(p=percent), list(findings)
        confidence, template, findings = LOW_SEMANTIC_BAND
        return confidence, template.format(p=percent), list(findings)

    @staticmethod
    def detailed_explanation(analysis: SimilarityAnalysis, excerpts: Sequence[ExcerptMatch],
                             source_document: str) -> str:
        """Explain which levels pushed the score up"""
        explanation = (f'Tingkat kesamaan {to_percent(analysis.final_score)}% dengan dokumen '
                       f'"{source_document}" disebabkan oleh kombinasi faktor berikut:\n\n')

        if analysis.word_level > 0.5:
            explanation += (f"• **Kesamaan Tingkat Kata ({to_percent(analysis.word_level)}%)**: "
                            f"Penggunaan kata-kata dan frasa yang hampir identik. ")
            if analysis.word_level > 0.8:
                explanation += "Ini menunjukkan kemungkinan penyalinan langsung tanpa parafrase yang memadai.\n"
            else:
                explanation += "Terdapat overlap signifikan dalam pemilihan kata dan terminologi.\n"

        if analysis.semantic_level > 0.4:
            explanation += (f"• **Kesamaan Semantik ({to_percent(analysis.semantic_level)}%)**: "
                            f"Kesamaan makna dan konsep utama. ")
            if analysis.semantic_level > 0.7:
                explanation += "Ide-ide utama disampaikan dengan cara yang sangat mirip.\n"
            else:
                explanation += "Beberapa konsep dan pendekatan yang sama dalam menyampaikan ide.\n"

        if analysis.structural_level > 0.6:
            explanation += (f"• **Kesamaan Struktur ({to_percent(analysis.structural_level)}%)**: "
                            f"Pola organisasi dan alur penyajian informasi yang mirip.\n")

        high = _count_high(excerpts)
        if high:
            explanation += (f"• **Frasa Identik**: Ditemukan {high} kalimat dengan kesamaan >80% "
                            f"yang menunjukkan kemungkinan penyalinan langsung.\n")
        moderate = _count_moderate(excerpts)
        if moderate:
            explanation += (f"• **Parafrase Minimal**: Terdapat {moderate} kalimat dengan parafrase "
                            f"yang tidak memadai (60-80% kesamaan).\n")

        return explanation

    @staticmethod
    def recommendations(analysis: SimilarityAnalysis, excerpts: Sequence[ExcerptMatch]) -> List[str]:
        final_score = analysis.final_score
        if final_score > 0.7:
            recommendations = list(SEVERE_RECOMMENDATIONS)
            if analysis.semantic_level > 0.8:
                recommendations.append(SEVERE_SEMANTIC_RECOMMENDATION)
        elif final_score > 0.4:
            recommendations = list(MODERATE_RECOMMENDATIONS)
            if len(excerpts) > 3:
                recommendations.append(MODERATE_EXCERPTS_RECOMMENDATION)
        else:
            recommendations = list(LOW_RECOMMENDATIONS)

        if excerpts and excerpts[0].similarity > 85:
            top = excerpts[0]
            recommendations.append(
                f'🎯 **Bagian Prioritas**: Kalimat "{top.target_sentence}" memiliki kesamaan '
                f'{top.similarity}% dan perlu ditulis ulang sepenuhnya')

        return recommendations

    @staticmethod
    def similarity_breakdown(analysis: SimilarityAnalysis) -> Dict[str, dict]:
        def interpret(score, high, medium, low):
            if score > 0.7:
                return high
            if score > 0.5:
                return medium
            return low

        return {
            'wordLevel': {
                'score': to_percent(analysis.word_level),
                'interpretation': interpret(analysis.word_level,
                                            'Penggunaan kata hampir identik',
                                            'Banyak kata yang sama digunakan',
                                            'Pemilihan kata cukup berbeda')
            },
            'semanticLevel': {
                'score': to_percent(analysis.semantic_level),
                'interpretation': interpret(analysis.semantic_level,
                                            'Makna dan konsep hampir sama',
                                            'Ide utama memiliki kesamaan',
                                            'Pendekatan dan ide cukup berbeda')
            },
            'structuralLevel': {
                'score': to_percent(analysis.structural_level),
                'interpretation': interpret(analysis.structural_level,
                                            'Struktur penyajian sangat mirip',
                                            'Pola organisasi informasi serupa',
                                            'Struktur penyajian berbeda')
            }
        }

    @staticmethod
    def content_analysis(excerpts: Sequence[ExcerptMatch], contact_analysis: ContactAnalysis) -> dict:
        if excerpts:
            summary = f"Analisis konten menunjukkan {len(excerpts)} bagian dengan kesamaan signifikan: "
            high = _count_high(excerpts)
            moderate = _count_moderate(excerpts)
            if high:
                summary += f"{high} bagian dengan kesamaan sangat tinggi (>80%), "
            if moderate:
                summary += f"{moderate} bagian dengan kesamaan sedang (60-80%). "
        else:
            summary = NO_EXCERPTS_NOTE

        return {
            'excerptAnalysis': summary,
            'contactFilteringInfo': '. '.join(contact_analysis.details),
            'recommendations': []
        }
