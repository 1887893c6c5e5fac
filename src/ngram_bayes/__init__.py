"""N-gram Bayes -- Naive Bayes text classification over word n-grams."""

__version__ = "0.1.0"

from .classifier import ClassifierModel, InsufficientTrainingDataError
from .models import (
    DEFAULT_NGRAM_SIZE,
    DEFAULT_SMOOTHING_PARAMETER,
    ClassificationResult,
    Config,
    NGram,
    TrainingSample,
    TrainingSet,
    Vocabulary,
    resolve_config,
)
from .tokenizer import NGramTokenizer, split_tokens, to_ngrams
from .training import from_training_set, load_training_set, parse_training_set

__all__ = [
    # Core
    "ClassifierModel",
    "InsufficientTrainingDataError",
    "ClassificationResult",
    # Configuration
    "Config",
    "resolve_config",
    "DEFAULT_NGRAM_SIZE",
    "DEFAULT_SMOOTHING_PARAMETER",
    # Tokenization
    "NGram",
    "NGramTokenizer",
    "Vocabulary",
    "split_tokens",
    "to_ngrams",
    # Training sets
    "TrainingSample",
    "TrainingSet",
    "from_training_set",
    "load_training_set",
    "parse_training_set",
]
