import io
import json
import tempfile
from pathlib import Path
from swiftlint_review.metrics import LintMetrics
from swiftlint_review.reporter import (
    GitHubActionsHost,
    format_json_report,
    format_markdown_report,
    format_workflow_command,
    get_exit_code,
)
from swiftlint_review.types import Severity, Violation


def make_violations() -> list[Violation]:
    return [
        Violation(file="Foo.swift", line=10, severity=Severity.WARNING, reason="Line too long"),
        Violation(file="Bar.swift", line=3, severity=Severity.ERROR, reason="Force cast"),
    ]


def test_format_markdown_report():
    """Test the aggregate Markdown table."""
    report = format_markdown_report(make_violations())

    assert report == (
        "### SwiftLint found issues\n"
        "\n"
        "| Severity | File | Reason |\n"
        "| -------- | ---- | ------ |\n"
        "| Warning | Foo.swift:10 | Line too long |\n"
        "| Error | Bar.swift:3 | Force cast |"
    )


def test_format_workflow_command():
    """Test GitHub Actions annotation formatting."""
    assert (
        format_workflow_command("warning", "Line too long", "Foo.swift", 10)
        == "::warning file=Foo.swift,line=10::Line too long"
    )
    assert format_workflow_command("error", "boom") == "::error::boom"


def test_format_workflow_command_escapes():
    """Test that newlines and separators are escaped."""
    command = format_workflow_command("error", "50%\nbad", "a,b:c.swift", 1)

    assert command == "::error file=a%2Cb%3Ac.swift,line=1::50%25%0Abad"


def test_host_inline_annotations():
    """Test that inline calls print annotations and track failure."""
    stream = io.StringIO()
    host = GitHubActionsHost(stream=stream)

    host.warn_at("Line too long", "Foo.swift", 10)
    assert host.failed is False

    host.fail_at("Force cast", "Bar.swift", 3)
    assert host.failed is True

    assert stream.getvalue().splitlines() == [
        "::warning file=Foo.swift,line=10::Line too long",
        "::error file=Bar.swift,line=3::Force cast",
    ]


def test_host_fail():
    """Test non-inline failure."""
    stream = io.StringIO()
    host = GitHubActionsHost(stream=stream)

    host.fail("Error deserializing")

    assert host.failed is True
    assert stream.getvalue() == "::error::Error deserializing\n"


def test_host_markdown_to_stream(monkeypatch):
    """Test that markdown is printed without a job summary file."""
    monkeypatch.delenv("GITHUB_STEP_SUMMARY", raising=False)
    stream = io.StringIO()
    host = GitHubActionsHost(stream=stream)

    host.markdown("### report")

    assert stream.getvalue() == "### report\n"
    assert host.failed is False


def test_host_markdown_to_summary_file():
    """Test that markdown is appended to the job summary."""
    with tempfile.TemporaryDirectory() as tmpdir:
        summary = Path(tmpdir) / "summary.md"
        summary.write_text("existing\n")
        stream = io.StringIO()
        host = GitHubActionsHost(stream=stream, summary_path=summary)

        host.markdown("### report")

        assert summary.read_text() == "existing\n### report\n"
        assert stream.getvalue() == ""


def test_host_reads_summary_from_environment(monkeypatch):
    """Test picking up GITHUB_STEP_SUMMARY."""
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", "/tmp/summary.md")

    host = GitHubActionsHost()

    assert host.summary_path == Path("/tmp/summary.md")


def test_format_json_report():
    """Test formatting JSON report."""
    metrics = LintMetrics(files_collected=2, files_linted=2, errors=1, warnings=1)
    metrics.finish()

    data = json.loads(format_json_report(make_violations(), metrics))

    assert data["violations"][0]["file"] == "Foo.swift"
    assert data["violations"][0]["severity"] == "Warning"
    assert data["summary"] == {"files_with_violations": 2, "errors": 1, "warnings": 1}
    assert data["metrics"]["files_linted"] == 2


def test_get_exit_code():
    """Test getting exit code based on results."""
    warning_only = [make_violations()[0]]

    assert get_exit_code([]) == 0
    assert get_exit_code(warning_only) == 0
    assert get_exit_code(make_violations()) == 1
    assert get_exit_code([], failed=True) == 1
