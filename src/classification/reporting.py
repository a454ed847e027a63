"""
ReportGenerator - Write classification reports in multiple formats.

Produces JSON and Markdown reports from a ClassificationReport.
"""

from pathlib import Path
from typing import Dict
import json
import logging

from .classifier import ClassificationReport

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generate classification reports in multiple formats."""

    def __init__(self, output_dir: str):
        """
        Initialize the report generator.

        Args:
            output_dir: Directory to save reports
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate_all(self, report: ClassificationReport) -> Dict[str, Path]:
        """
        Generate all report formats.

        Returns:
            Dict with paths to generated files
        """
        return {
            "json": self.generate_json(report),
            "markdown": self.generate_markdown(report),
        }

    def _stem(self, report: ClassificationReport) -> str:
        # Sanitize timestamp for filename
        safe_timestamp = report.timestamp.replace(":", "-").replace(".", "-")
        return f"classification_{safe_timestamp}"

    def generate_json(self, report: ClassificationReport) -> Path:
        """Export complete report as JSON."""
        output_path = self.output_dir / f"{self._stem(report)}.json"

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info(f"JSON report saved to {output_path}")
        return output_path

    def generate_markdown(self, report: ClassificationReport) -> Path:
        """Generate markdown report with a results table."""
        output_path = self.output_dir / f"{self._stem(report)}.md"

        lines = [
            "# Number Form Classification",
            "",
            f"**Strategy:** {report.strategy.value.upper()}",
            f"**Ignore case:** {'yes' if report.ignore_case else 'no'}",
            f"**Timestamp:** {report.timestamp}",
            "",
            "## Summary",
            "",
            "| Form | Count |",
            "|------|-------|",
            f"| Roman | {report.roman_count} |",
            f"| Arabic | {report.arabic_count} |",
            f"| Total | {report.total} |",
            "",
        ]

        if report.results:
            lines.extend(
                [
                    "## Results",
                    "",
                    "| Input | Form | Strategies agree |",
                    "|-------|------|------------------|",
                ]
            )
            for r in report.results:
                agree = "no" if r.disagrees else "yes"
                lines.append(f"| `{_escape_cell(r.text)}` | {r.form.value} | {agree} |")
            lines.append("")

        if report.disagreements:
            lines.extend(
                [
                    "## Strategy Disagreements",
                    "",
                ]
            )
            for text in report.disagreements:
                lines.append(f"- `{_escape_cell(text)}`")
            lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        logger.info(f"Markdown report saved to {output_path}")
        return output_path


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("`", "'").replace("\n", " ")
