"""Roman vs arabic number form classification."""

from .number_form import (
    NumberForm,
    ClassificationStrategy,
    ParseResult,
    classify,
    is_roman_number,
    try_parse_int,
)
from .config import ClassifierConfig, load_classifier_config, get_classifier_config
from .classifier import NumberFormClassifier, ClassificationResult, ClassificationReport
from .reporting import ReportGenerator

__all__ = [
    "NumberForm",
    "ClassificationStrategy",
    "ParseResult",
    "classify",
    "is_roman_number",
    "try_parse_int",
    "ClassifierConfig",
    "load_classifier_config",
    "get_classifier_config",
    "NumberFormClassifier",
    "ClassificationResult",
    "ClassificationReport",
    "ReportGenerator",
]
