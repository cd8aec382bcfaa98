"""Shared test fixtures for engine and API tests."""

import pytest

from plagiarism_engine.app import create_app
from plagiarism_engine.config import AppConfig
from plagiarism_engine.detector import PlagiarismDetector
from plagiarism_engine.entity_recognizer import EntityRecognizer
from plagiarism_engine.excerpt_matcher import ExcerptMatcher
from plagiarism_engine.lexicon import get_default_lexicon
from plagiarism_engine.similarity import SimilarityMetrics
from plagiarism_engine.text_normalizer import TextNormalizer


SCENARIO_TARGET = "Ahmad Suharto bekerja di Jakarta."
SCENARIO_SOURCE = "Budi Santoso bekerja di Surabaya."


@pytest.fixture(scope="session")
def lexicon():
    return get_default_lexicon()


@pytest.fixture
def recognizer(lexicon):
    return EntityRecognizer(lexicon)


@pytest.fixture
def normalizer(lexicon):
    return TextNormalizer(lexicon)


@pytest.fixture
def metrics(normalizer):
    return SimilarityMetrics(normalizer)


@pytest.fixture
def excerpt_matcher(normalizer):
    return ExcerptMatcher(normalizer, parallel=False)


@pytest.fixture
def detector(lexicon):
    return PlagiarismDetector(AppConfig(), lexicon)


@pytest.fixture
def client(detector):
    app = create_app(config=detector.config, detector=detector)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
