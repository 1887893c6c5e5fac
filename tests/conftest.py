"""Shared test fixtures for ngram-bayes tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ngram_bayes.classifier import ClassifierModel
from ngram_bayes.models import Config


@pytest.fixture
def sentiment_samples() -> list[tuple[str, str]]:
    """Small labeled corpus with distinct vocabulary per label."""
    return [
        ("I love this movie", "positive"),
        ("what a great and wonderful film", "positive"),
        ("I really enjoyed it", "positive"),
        ("I hate this movie", "negative"),
        ("what a terrible and awful film", "negative"),
        ("I really disliked it", "negative"),
    ]


@pytest.fixture
def unigram_model(sentiment_samples: list[tuple[str, str]]) -> ClassifierModel:
    """Unigram model trained on the sentiment corpus."""
    model = ClassifierModel(Config(ngram_size=1, smoothing_parameter=1.0))
    for text, label in sentiment_samples:
        model.train(text, label)
    return model


@pytest.fixture
def training_file(tmp_path: Path, sentiment_samples: list[tuple[str, str]]) -> Path:
    """A JSON training set on disk using the record-list format."""
    file = tmp_path / "training.json"
    data = {
        "config": {"ngram-size": 1, "smoothing-parameter": 1.0},
        "samples": [{"sentence": s, "label": l} for s, l in sentiment_samples],
    }
    file.write_text(json.dumps(data), encoding="utf-8")
    return file


@pytest.fixture
def sample_training_path() -> Path:
    """Path to the bundled sample training set."""
    return Path(__file__).parent.parent / "examples" / "sentiment.json"
