"""Training-set loading and model construction.

Training sets are JSON files holding an optional ``config`` block and a
``samples`` collection, either as a list of records::

    {
      "config": {"ngram-size": 1, "smoothing-parameter": 1.0},
      "samples": [
        {"sentence": "I love this", "label": "positive"},
        {"sentence": "I hate this", "label": "negative"}
      ]
    }

or grouped by label::

    {"samples": {"positive": ["I love this"], "negative": ["I hate this"]}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .classifier import ClassifierModel
from .models import TrainingSet

logger = logging.getLogger(__name__)


def parse_training_set(data: dict) -> TrainingSet:
    """Build a TrainingSet from decoded JSON.

    Raises:
        ValueError: If the structure or any record is malformed.
    """
    return TrainingSet.from_dict(data)


def load_training_set(path: str | Path) -> TrainingSet:
    """Load a training set from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Cannot parse {path} as JSON: {exc}") from exc

    training_set = parse_training_set(data)
    logger.info(
        "Loaded %d samples across %d labels from %s",
        len(training_set),
        len(training_set.labels),
        path,
    )
    return training_set


def from_training_set(training_set: TrainingSet) -> ClassifierModel:
    """Create a model from the set's config and train every sample in order.

    Raises:
        ValueError: If the training set has no samples.
    """
    if not training_set.samples:
        raise ValueError("Training set has no samples")

    model = ClassifierModel(training_set.config)
    return model.fit(
        [sample.sentence for sample in training_set.samples],
        [sample.label for sample in training_set.samples],
    )
