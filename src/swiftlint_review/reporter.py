"""Report formatting and review host integration."""
import json
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, TextIO

from swiftlint_review.metrics import LintMetrics
from swiftlint_review.types import Severity, Violation

MARKDOWN_HEADER = (
    "### SwiftLint found issues\n"
    "\n"
    "| Severity | File | Reason |\n"
    "| -------- | ---- | ------ |\n"
)


class ReviewHost(Protocol):
    """Reporting entry points of a code review host."""

    def fail(self, message: str) -> None: ...

    def fail_at(self, message: str, file: str, line: int) -> None: ...

    def warn_at(self, message: str, file: str, line: int) -> None: ...

    def markdown(self, text: str) -> None: ...


def format_markdown_report(violations: Sequence[Violation]) -> str:
    """Format violations as a single Markdown table.

    Args:
        violations: Violations in report order

    Returns:
        Markdown message with a heading and one row per violation
    """
    return MARKDOWN_HEADER + "\n".join(v.to_markdown_row() for v in violations)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_workflow_command(
    kind: str, message: str, file: str | None = None, line: int | None = None
) -> str:
    """Format a GitHub Actions annotation command.

    Args:
        kind: 'error' or 'warning'
        message: Annotation text
        file: Optional file the annotation points at
        line: Optional 1-based line

    Returns:
        Workflow command line, e.g. ``::warning file=a.swift,line=3::msg``
    """
    props = []
    if file:
        props.append(f"file={_escape_property(file)}")
    if line is not None:
        props.append(f"line={line}")
    location = f" {','.join(props)}" if props else ""
    return f"::{kind}{location}::{_escape_data(message)}"


class GitHubActionsHost:
    """Review host that speaks GitHub Actions workflow commands.

    Inline findings become file annotations on the pull request. Markdown
    goes to the job summary when ``GITHUB_STEP_SUMMARY`` is set, otherwise
    it is printed.
    """

    def __init__(self, stream: TextIO | None = None, summary_path: Path | None = None) -> None:
        self.stream = stream
        if summary_path is None and os.environ.get("GITHUB_STEP_SUMMARY"):
            summary_path = Path(os.environ["GITHUB_STEP_SUMMARY"])
        self.summary_path = summary_path
        self.failed = False

    def _write(self, text: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(text + "\n")

    def fail(self, message: str) -> None:
        self.failed = True
        self._write(format_workflow_command("error", message))

    def fail_at(self, message: str, file: str, line: int) -> None:
        self.failed = True
        self._write(format_workflow_command("error", message, file, line))

    def warn_at(self, message: str, file: str, line: int) -> None:
        self._write(format_workflow_command("warning", message, file, line))

    def markdown(self, text: str) -> None:
        if self.summary_path is None:
            self._write(text)
            return
        with self.summary_path.open("a", encoding="utf-8") as f:
            f.write(text + "\n")


def format_json_report(violations: Sequence[Violation], metrics: LintMetrics) -> str:
    """Format violations as JSON.

    Args:
        violations: Violations returned by lint()
        metrics: Run metrics

    Returns:
        JSON string
    """
    report = {
        "violations": [v.model_dump(mode="json") for v in violations],
        "summary": {
            "files_with_violations": len({v.file for v in violations}),
            "errors": sum(1 for v in violations if v.severity is Severity.ERROR),
            "warnings": sum(1 for v in violations if v.severity is Severity.WARNING),
        },
        "metrics": metrics.to_dict(),
    }

    return json.dumps(report, indent=2)


def get_exit_code(violations: Sequence[Violation], failed: bool = False) -> int:
    """Get exit code based on results.

    Args:
        violations: Violations returned by lint()
        failed: Whether the host was asked to report a failure

    Returns:
        1 if any error-severity violation or failure was reported, else 0
    """
    if failed or any(v.severity is Severity.ERROR for v in violations):
        return 1
    return 0
