"""
Tests for ReportGenerator - writing classification reports.

Tests cover:
- JSON report generation
- Markdown report generation
- Generating all formats at once
"""

import pytest
from pathlib import Path
import json
import tempfile
import shutil

from src.classification.reporting import ReportGenerator
from src.classification.classifier import (
    ClassificationReport,
    ClassificationResult,
)
from src.classification.number_form import ClassificationStrategy, NumberForm


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_report() -> ClassificationReport:
    """Create a sample report with one disagreement."""
    strategy = ClassificationStrategy.PATTERN
    return ClassificationReport(
        strategy=strategy,
        ignore_case=False,
        timestamp="2026-10-19T12:30:45.123456",
        results=[
            ClassificationResult("XLII", NumberForm.ROMAN, strategy, disagrees=False),
            ClassificationResult("42", NumberForm.ARABIC, strategy, disagrees=False),
            ClassificationResult("12X", NumberForm.ARABIC, strategy, disagrees=True),
        ],
    )


class TestReportGeneratorInit:
    """Test ReportGenerator initialization."""

    def test_creates_output_directory(self, temp_output_dir: str) -> None:
        """Creates nested output directories."""
        output_dir = Path(temp_output_dir) / "nested" / "reports"

        ReportGenerator(str(output_dir))

        assert output_dir.is_dir()


class TestJsonReport:
    """Test JSON report generation."""

    def test_writes_report_dict(
        self, temp_output_dir: str, sample_report: ClassificationReport
    ) -> None:
        """JSON file holds the report dictionary."""
        path = ReportGenerator(temp_output_dir).generate_json(sample_report)

        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["summary"]["total"] == 3
        assert data["disagreements"] == ["12X"]
        assert data["results"][0]["form"] == "roman"

    def test_filename_has_no_colons(
        self, temp_output_dir: str, sample_report: ClassificationReport
    ) -> None:
        """Timestamp is sanitized for the filename."""
        path = ReportGenerator(temp_output_dir).generate_json(sample_report)

        assert ":" not in path.name
        assert path.name == "classification_2026-10-19T12-30-45-123456.json"


class TestMarkdownReport:
    """Test Markdown report generation."""

    def test_contains_summary_and_results(
        self, temp_output_dir: str, sample_report: ClassificationReport
    ) -> None:
        """Markdown lists the strategy, counts and each input."""
        path = ReportGenerator(temp_output_dir).generate_markdown(sample_report)
        content = path.read_text(encoding="utf-8")

        assert "**Strategy:** PATTERN" in content
        assert "| Roman | 1 |" in content
        assert "| Arabic | 2 |" in content
        assert "| `XLII` | roman | yes |" in content
        assert "## Strategy Disagreements" in content
        assert "- `12X`" in content

    def test_escapes_pipes(self, temp_output_dir: str) -> None:
        """Pipe characters do not break the table."""
        strategy = ClassificationStrategy.PARSE
        report = ClassificationReport(
            strategy=strategy,
            ignore_case=False,
            timestamp="2026-10-19T00:00:00",
            results=[ClassificationResult("a|b", NumberForm.ROMAN, strategy, disagrees=True)],
        )

        content = ReportGenerator(temp_output_dir).generate_markdown(report).read_text(
            encoding="utf-8"
        )

        assert "`a\\|b`" in content

    def test_empty_report_has_no_results_section(self, temp_output_dir: str) -> None:
        """No results table for an empty batch."""
        report = ClassificationReport(
            strategy=ClassificationStrategy.PATTERN,
            ignore_case=True,
            timestamp="2026-10-19T00:00:00",
        )

        content = ReportGenerator(temp_output_dir).generate_markdown(report).read_text(
            encoding="utf-8"
        )

        assert "## Results" not in content
        assert "**Ignore case:** yes" in content


class TestGenerateAll:
    """Test generating every format."""

    def test_returns_both_paths(
        self, temp_output_dir: str, sample_report: ClassificationReport
    ) -> None:
        """JSON and Markdown files are written."""
        paths = ReportGenerator(temp_output_dir).generate_all(sample_report)

        assert set(paths) == {"json", "markdown"}
        assert paths["json"].exists()
        assert paths["markdown"].suffix == ".md"
