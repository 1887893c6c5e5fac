"""Data models for n-gram Naive Bayes classification."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_NGRAM_SIZE = 2
DEFAULT_SMOOTHING_PARAMETER = 1.0

# Feature key -> occurrence count, scoped to one label
Vocabulary = dict[str, int]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Config:
    """Model configuration.

    Attributes:
        ngram_size: Window length in tokens. Unset, non-integral or
            non-positive values resolve to ``DEFAULT_NGRAM_SIZE``.
        smoothing_parameter: Value added to every raw count (Laplace
            smoothing). Unset, non-finite or non-positive values resolve to
            ``DEFAULT_SMOOTHING_PARAMETER``.
    """

    ngram_size: Optional[int] = None
    smoothing_parameter: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "ngram-size": self.ngram_size,
            "smoothing-parameter": self.smoothing_parameter,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Config":
        """Build a config from a mapping.

        Accepts both the underscored attribute names and the hyphenated
        keys used in training-set files.

        Raises:
            ValueError: If ``ngram-size`` is not a whole number or either
                value is a boolean.
        """
        data = data or {}
        ngram_size = data.get("ngram-size", data.get("ngram_size"))
        smoothing = data.get("smoothing-parameter", data.get("smoothing_parameter"))
        return cls(
            ngram_size=_parse_ngram_size(ngram_size) if ngram_size is not None else None,
            smoothing_parameter=_parse_smoothing(smoothing) if smoothing is not None else None,
        )


def _parse_ngram_size(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"ngram-size must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"ngram-size must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"ngram-size must be an integer, got {value!r}") from None
    raise ValueError(f"ngram-size must be an integer, got {value!r}")


def _parse_smoothing(value: object) -> float:
    if isinstance(value, bool):
        raise ValueError(f"smoothing-parameter must be a number, got {value!r}")
    if isinstance(value, (int, float, str)):
        return float(value)
    raise ValueError(f"smoothing-parameter must be a number, got {value!r}")


def resolve_config(config: Optional[Config] = None) -> Config:
    """Return a copy of *config* with unset or invalid values defaulted.

    Non-integral n-gram sizes and non-finite smoothing values count as
    invalid.
    """
    config = config or Config()

    ngram_size = config.ngram_size
    if isinstance(ngram_size, float) and ngram_size.is_integer():
        ngram_size = int(ngram_size)
    if not isinstance(ngram_size, int) or isinstance(ngram_size, bool) or ngram_size <= 0:
        logger.debug("ngram_size %r defaulted to %d", ngram_size, DEFAULT_NGRAM_SIZE)
        ngram_size = DEFAULT_NGRAM_SIZE

    smoothing = config.smoothing_parameter
    if (
        not isinstance(smoothing, (int, float))
        or isinstance(smoothing, bool)
        or not math.isfinite(smoothing)
        or smoothing <= 0
    ):
        logger.debug(
            "smoothing_parameter %r defaulted to %s", smoothing, DEFAULT_SMOOTHING_PARAMETER
        )
        smoothing = DEFAULT_SMOOTHING_PARAMETER

    return Config(ngram_size=ngram_size, smoothing_parameter=float(smoothing))


# ---------------------------------------------------------------------------
# N-grams
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NGram:
    """An ordered run of consecutive tokens used as a feature."""

    tokens: tuple[str, ...]

    @property
    def key(self) -> str:
        """Canonical feature key (tokens joined by a single space)."""
        return " ".join(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return self.key


# ---------------------------------------------------------------------------
# Training data
# ---------------------------------------------------------------------------


@dataclass
class TrainingSample:
    """A single labeled training document."""

    sentence: str
    label: str

    def to_dict(self) -> dict:
        return {"sentence": self.sentence, "label": self.label}


@dataclass
class TrainingSet:
    """A configuration plus an ordered list of labeled samples."""

    config: Config = field(default_factory=Config)
    samples: list[TrainingSample] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def labels(self) -> list[str]:
        """Distinct labels in first-seen order."""
        return list(dict.fromkeys(s.label for s in self.samples))

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingSet":
        """Build a training set from a decoded mapping.

        ``samples`` may be a list of ``{"sentence", "label"}`` records or
        an object mapping each label to a list of sentences.

        Raises:
            ValueError: If the structure or any record is malformed.
        """
        if not isinstance(data, dict):
            raise ValueError("Training set must be a JSON object")

        config_data = data.get("config") or {}
        if not isinstance(config_data, dict):
            raise ValueError("'config' must be an object")
        try:
            config = Config.from_dict(config_data)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid config: {exc}") from exc

        raw = data.get("samples", [])
        if isinstance(raw, dict):
            records = [
                {"sentence": sentence, "label": label}
                for label, sentences in raw.items()
                for sentence in (sentences if isinstance(sentences, list) else [sentences])
            ]
        elif isinstance(raw, list):
            records = raw
        else:
            raise ValueError("'samples' must be a list of records or an object of label lists")

        samples = [_parse_sample(record, i) for i, record in enumerate(records)]
        return cls(config=config, samples=samples)


def _parse_sample(record: object, index: int) -> TrainingSample:
    if not isinstance(record, dict):
        raise ValueError(f"Sample {index} must be an object")
    sentence = record.get("sentence")
    label = record.get("label")
    if not isinstance(sentence, str):
        raise ValueError(f"Sample {index} is missing a string 'sentence'")
    if not isinstance(label, str) or not label:
        raise ValueError(f"Sample {index} is missing a non-empty string 'label'")
    return TrainingSample(sentence=sentence, label=label)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class ClassificationResult:
    """Scores for a single input along with the best-scoring label.

    Scores are natural-log values; they rank labels but are not normalized
    probabilities.
    """

    predicted_label: str
    score: float
    scores: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_scores(cls, scores: dict[str, float]) -> "ClassificationResult":
        """Pick the highest score. Ties go to the alphabetically first label."""
        if not scores:
            raise ValueError("Cannot build a result from an empty score mapping")
        predicted = min(scores, key=lambda label: (-scores[label], label))
        return cls(predicted_label=predicted, score=scores[predicted], scores=dict(scores))

    def ranked(self) -> list[tuple[str, float]]:
        """Labels and scores, best first."""
        return sorted(self.scores.items(), key=lambda x: (-x[1], x[0]))

    def to_dict(self) -> dict:
        return {
            "predicted_label": self.predicted_label,
            "score": round(self.score, 4),
            "scores": {label: round(s, 4) for label, s in self.ranked()},
        }
