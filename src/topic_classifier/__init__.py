"""Topic Classifier -- Naive Bayes categorisation of short texts."""

__version__ = "0.1.0"

from .categories import normalize_category, valid_categories
from .classifier import (
    ClassificationResult,
    TopicClassifier,
    classify,
    classify_detailed,
    log_scores,
    promote_multi_category_words,
    train,
)
from .errors import (
    InternalInconsistencyError,
    InvalidCategoryError,
    InvalidModelFormatError,
    ModelIOError,
    ModelNotTrainedError,
    TopicClassifierError,
    TrainingDataError,
)
from .models import Category, Model
from .persistence import load_model, model_from_dict, model_to_dict, save_model
from .preprocessing import DEFAULT_STOP_WORDS, clean_text, tokenize
from .training_data import TrainingReport, read_training_rows, train_from_csv

__all__ = [
    # Core
    "Category",
    "Model",
    "TopicClassifier",
    "ClassificationResult",
    "train",
    "classify",
    "classify_detailed",
    "log_scores",
    "promote_multi_category_words",
    # Preprocessing
    "DEFAULT_STOP_WORDS",
    "clean_text",
    "tokenize",
    "normalize_category",
    "valid_categories",
    # Persistence
    "save_model",
    "load_model",
    "model_to_dict",
    "model_from_dict",
    # Training data
    "TrainingReport",
    "read_training_rows",
    "train_from_csv",
    # Errors
    "TopicClassifierError",
    "InvalidCategoryError",
    "ModelNotTrainedError",
    "InvalidModelFormatError",
    "ModelIOError",
    "InternalInconsistencyError",
    "TrainingDataError",
]
