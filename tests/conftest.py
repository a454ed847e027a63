"""
Pytest configuration for number form classifier tests.
"""

import logging

import pytest

from src.classification.classifier import NumberFormClassifier
from src.classification.config import ClassifierConfig
from src.classification.number_form import ClassificationStrategy


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests by default unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def pattern_classifier() -> NumberFormClassifier:
    """Classifier using the default PATTERN strategy."""
    return NumberFormClassifier(ClassifierConfig(strategy=ClassificationStrategy.PATTERN))


@pytest.fixture
def parse_classifier() -> NumberFormClassifier:
    """Classifier using the PARSE strategy."""
    return NumberFormClassifier(ClassifierConfig(strategy=ClassificationStrategy.PARSE))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logging and restore the root level."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
