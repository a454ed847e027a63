"""
NumberFormClassifier - Configured classifier with batch support.

Wraps the classify() function with a fixed ClassifierConfig and classifies
lists of inputs into a ClassificationReport, noting every input on which
the PATTERN and PARSE strategies disagree.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional
import logging

from .config import ClassifierConfig
from .number_form import ClassificationStrategy, NumberForm, classify

logger = logging.getLogger(__name__)


@dataclass
class ClassificationResult:
    """Result for a single input string."""

    text: str
    form: NumberForm
    strategy: ClassificationStrategy
    disagrees: bool  # The other strategy would give the other form

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "form": self.form.value,
            "strategy": self.strategy.value,
            "disagrees": self.disagrees,
        }


@dataclass
class ClassificationReport:
    """Classification results for a batch of inputs."""

    strategy: ClassificationStrategy
    ignore_case: bool
    timestamp: str
    results: List[ClassificationResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def roman_count(self) -> int:
        return sum(1 for r in self.results if r.form is NumberForm.ROMAN)

    @property
    def arabic_count(self) -> int:
        return sum(1 for r in self.results if r.form is NumberForm.ARABIC)

    @property
    def disagreements(self) -> List[str]:
        """Inputs on which PATTERN and PARSE give different forms."""
        return [r.text for r in self.results if r.disagrees]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "strategy": self.strategy.value,
            "ignore_case": self.ignore_case,
            "timestamp": self.timestamp,
            "summary": {
                "total": self.total,
                "roman": self.roman_count,
                "arabic": self.arabic_count,
                "disagreements": len(self.disagreements),
            },
            "disagreements": self.disagreements,
            "results": [r.to_dict() for r in self.results],
        }


class NumberFormClassifier:
    """
    Classify strings as roman or arabic number form.

    Holds only its configuration, so one instance can be shared freely.
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        """
        Initialize the classifier.

        Args:
            config: Classifier configuration (PATTERN strategy if None)
        """
        self.config = config or ClassifierConfig()
        self.config.validate()

    @property
    def strategy(self) -> ClassificationStrategy:
        return self.config.strategy

    def classify(self, text: str) -> NumberForm:
        """Classify a single string with the configured strategy."""
        return classify(text, strategy=self.config.strategy, ignore_case=self.config.ignore_case)

    def is_roman_number(self, text: str) -> bool:
        """True if text is roman form under the configured strategy."""
        return self.classify(text) is NumberForm.ROMAN

    def classify_with_details(self, text: str) -> ClassificationResult:
        """Classify text and check whether the other strategy agrees."""
        form = self.classify(text)
        other = (
            ClassificationStrategy.PARSE
            if self.config.strategy is ClassificationStrategy.PATTERN
            else ClassificationStrategy.PATTERN
        )
        other_form = classify(text, strategy=other, ignore_case=self.config.ignore_case)

        return ClassificationResult(
            text=text,
            form=form,
            strategy=self.config.strategy,
            disagrees=form is not other_form,
        )

    def classify_all(self, inputs: Iterable[str]) -> ClassificationReport:
        """
        Classify a batch of inputs.

        Args:
            inputs: Strings to classify, in order

        Returns:
            ClassificationReport with one result per input
        """
        report = ClassificationReport(
            strategy=self.config.strategy,
            ignore_case=self.config.ignore_case,
            timestamp=datetime.now().isoformat(),
        )
        for text in inputs:
            report.results.append(self.classify_with_details(text))

        logger.info(
            f"Classified {report.total} inputs: {report.roman_count} roman, "
            f"{report.arabic_count} arabic, {len(report.disagreements)} disagreements"
        )
        return report
