"""Multinomial Naive Bayes over word n-grams with Laplace smoothing.

The model keeps, per label, a vocabulary of n-gram feature counts and the
number of documents trained. Scoring combines the label's log prior with
the smoothed log likelihood of every n-gram in the query:

    score(label) = log(docs[label] / total_docs)
                 + sum(log((count(ngram, label) + alpha) / (docs[label] + |V[label]|)))

where ``alpha`` is the smoothing parameter and ``|V[label]|`` the number of
distinct features seen for that label. Scores are natural-log values that
rank labels; they are not normalized probabilities.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Optional

from .models import ClassificationResult, Config, Vocabulary, resolve_config
from .tokenizer import NGramTokenizer

logger = logging.getLogger(__name__)


class InsufficientTrainingDataError(RuntimeError):
    """Raised when scoring needs training data the model does not have."""


class ClassifierModel:
    """N-gram Naive Bayes text classifier.

    Not thread-safe. A shared instance needs an external lock held for the
    whole of each ``train`` call and for any ``score`` that may run
    alongside one, since the vocabulary and both document counts must be
    read and written together.

    Example::

        model = ClassifierModel(Config(ngram_size=1))
        model.train("I love this", "positive")
        model.train("I hate this", "negative")

        scores = model.score("love")
        result = model.classify("love")
        print(result.predicted_label)  # "positive"

    Args:
        config: Optional configuration. Unset values are resolved to
            defaults once, here.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self._config = resolve_config(config)
        self._tokenizer = NGramTokenizer(self._config.ngram_size)
        self._vocabulary_by_label: dict[str, Vocabulary] = {}
        self._document_count_by_label: dict[str, int] = {}
        self._total_document_count = 0

    @property
    def config(self) -> Config:
        """The resolved configuration."""
        return self._config

    @property
    def labels(self) -> list[str]:
        """Labels trained at least once."""
        return list(self._document_count_by_label)

    @property
    def total_document_count(self) -> int:
        return self._total_document_count

    @property
    def is_trained(self) -> bool:
        return self._total_document_count > 0

    def document_count(self, label: str) -> int:
        """Documents trained for label (0 if never seen)."""
        return self._document_count_by_label.get(label, 0)

    def vocabulary(self, label: str) -> Vocabulary:
        """A copy of the label's feature counts (empty if never seen)."""
        return dict(self._vocabulary_by_label.get(label, {}))

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(self, text: str, label: str) -> None:
        """Add one labeled document to the model.

        Empty text is legal: it contributes no features but still counts
        as a document for the label.
        """
        keys = self._tokenizer.keys(text)
        vocab = self._get_or_create_vocabulary(label)
        for key in keys:
            vocab[key] = vocab.get(key, 0) + 1

        self._document_count_by_label[label] = self._document_count_by_label.get(label, 0) + 1
        self._total_document_count += 1
        logger.debug("Trained label %r with %d n-grams", label, len(keys))

    def fit(self, documents: Sequence[str], labels: Sequence[str]) -> "ClassifierModel":
        """Train on paired documents and labels, in order.

        Returns:
            Self (for method chaining).

        Raises:
            ValueError: If documents and labels have different lengths.
        """
        if len(documents) != len(labels):
            raise ValueError(
                f"documents ({len(documents)}) and labels ({len(labels)}) must have same length"
            )
        for text, label in zip(documents, labels):
            self.train(text, label)
        return self

    def _get_or_create_vocabulary(self, label: str) -> Vocabulary:
        vocab = self._vocabulary_by_label.get(label)
        if vocab is None:
            vocab = {}
            self._vocabulary_by_label[label] = vocab
        return vocab

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def score(self, text: str) -> dict[str, float]:
        """Score text against every trained label.

        Args:
            text: Raw query text (may be empty).

        Returns:
            Dict mapping each trained label to its log score. Higher is
            more likely.

        Raises:
            InsufficientTrainingDataError: If nothing has been trained.
        """
        if self._total_document_count == 0:
            raise InsufficientTrainingDataError(
                "Model has no training data. Call train() first."
            )

        keys = self._tokenizer.keys(text)
        logger.debug("Scoring %d n-grams against %d labels", len(keys), len(self._vocabulary_by_label))
        return {
            label: self._log_probability(keys, label, vocab)
            for label, vocab in self._vocabulary_by_label.items()
        }

    def classify(self, text: str) -> ClassificationResult:
        """Score text and pick the highest-scoring label."""
        return ClassificationResult.from_scores(self.score(text))

    def _log_probability(self, keys: list[str], label: str, vocab: Vocabulary) -> float:
        score = self._log_prior(label)
        # Fixed per label, not per n-gram
        denominator = self._document_count_by_label[label] + len(vocab)
        alpha = self._config.smoothing_parameter
        for key in keys:
            score += math.log((vocab.get(key, 0) + alpha) / denominator)
        return score

    def _log_prior(self, label: str) -> float:
        count = self._document_count_by_label.get(label, 0)
        if count == 0:
            raise InsufficientTrainingDataError(f"Label {label!r} has no trained documents")
        return math.log(count / self._total_document_count)
