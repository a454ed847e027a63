"""
Classifier configuration.

Selects the classification strategy and case handling, either from a
pre-defined configuration or from a YAML file.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Union
import yaml
import logging

from .number_form import ClassificationStrategy

logger = logging.getLogger(__name__)


@dataclass
class ClassifierConfig:
    """Configuration for a NumberFormClassifier."""

    strategy: ClassificationStrategy = ClassificationStrategy.PATTERN
    ignore_case: bool = False  # Only affects the PATTERN strategy

    def validate(self) -> None:
        """Validate configuration."""
        if not isinstance(self.strategy, ClassificationStrategy):
            raise ValueError(f"strategy must be a ClassificationStrategy, got {self.strategy!r}")
        if not isinstance(self.ignore_case, bool):
            raise ValueError(f"ignore_case must be a bool, got {self.ignore_case!r}")

    def to_dict(self) -> dict:
        return {"strategy": self.strategy.value, "ignore_case": self.ignore_case}


def parse_strategy(name: Union[str, ClassificationStrategy]) -> ClassificationStrategy:
    """
    Resolve a strategy name ("pattern" or "parse") to a ClassificationStrategy.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(name, ClassificationStrategy):
        return name
    try:
        return ClassificationStrategy(str(name).strip().lower())
    except ValueError:
        known = ", ".join(s.value for s in ClassificationStrategy)
        raise ValueError(f"Unknown strategy: {name!r} (expected one of: {known})") from None


def load_classifier_config(config_path: str) -> ClassifierConfig:
    """
    Load classifier configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        ClassifierConfig instance
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    config = ClassifierConfig(
        strategy=parse_strategy(data.get("strategy", ClassificationStrategy.PATTERN.value)),
        ignore_case=data.get("ignore_case", False),
    )
    config.validate()

    logger.info(f"Loaded classifier config from {path}: {config.to_dict()}")
    return config


# Pre-defined configurations
PATTERN_CONFIG = ClassifierConfig(strategy=ClassificationStrategy.PATTERN)
PARSE_CONFIG = ClassifierConfig(strategy=ClassificationStrategy.PARSE)
PATTERN_IGNORECASE_CONFIG = ClassifierConfig(
    strategy=ClassificationStrategy.PATTERN,
    ignore_case=True,
)

PRESET_CONFIGS = {
    "pattern": PATTERN_CONFIG,
    "default": PATTERN_CONFIG,
    "parse": PARSE_CONFIG,
    "pattern-ci": PATTERN_IGNORECASE_CONFIG,
}


def get_classifier_config(name: str) -> ClassifierConfig:
    """
    Get a pre-defined classifier configuration.

    Args:
        name: "pattern", "parse" or "pattern-ci"

    Returns:
        A copy of the ClassifierConfig preset
    """
    key = name.lower()
    if key not in PRESET_CONFIGS:
        raise KeyError(f"Unknown classifier config: {name}. Available: {list(PRESET_CONFIGS.keys())}")

    return replace(PRESET_CONFIGS[key])


def resolve_classifier_config(name_or_path: str) -> ClassifierConfig:
    """
    Resolve a preset name or a YAML file path to a ClassifierConfig.

    Existing files take precedence over preset names.

    Raises:
        FileNotFoundError: If it is neither an existing file nor a preset name
    """
    if Path(name_or_path).exists():
        return load_classifier_config(name_or_path)
    if name_or_path.lower() in PRESET_CONFIGS:
        return get_classifier_config(name_or_path)
    raise FileNotFoundError(
        f"Config file not found: {name_or_path} "
        f"(not a preset either; presets: {', '.join(PRESET_CONFIGS)})"
    )
