"""Main orchestrator: lint changed Swift files and report the findings."""
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from swiftlint_review.collector import ChangeSetProvider, build_lint_arguments, collect_candidates
from swiftlint_review.git_utils import GitChangeSet
from swiftlint_review.logging_config import get_logger
from swiftlint_review.metrics import LintMetrics
from swiftlint_review.reporter import GitHubActionsHost, ReviewHost, format_markdown_report
from swiftlint_review.shell import ShellExecutor
from swiftlint_review.types import Severity, Violation, ViolationDecodeError, parse_violations

logger = get_logger(__name__)

DEFAULT_LINTER = "swiftlint"


@dataclass
class LintContext:
    """Collaborators for a lint run."""

    shell: ShellExecutor
    change_set: ChangeSetProvider
    host: ReviewHost
    linter: str = DEFAULT_LINTER
    show_progress: bool = False

    @classmethod
    def for_repository(
        cls,
        repo_path: Path,
        base_ref: str,
        linter: str = DEFAULT_LINTER,
        show_progress: bool = False,
    ) -> "LintContext":
        """Build the usual context: git change set, GitHub Actions host."""
        return cls(
            shell=ShellExecutor(),
            change_set=GitChangeSet(repo_path, base_ref),
            host=GitHubActionsHost(),
            linter=linter,
            show_progress=show_progress,
        )


def lint_file(
    context: LintContext, file: str, config_file: str | None, metrics: LintMetrics
) -> list[Violation]:
    """Run the linter on one file.

    Decode failures are reported to the host and yield no violations.

    Args:
        context: Run collaborators
        file: Path handed to the linter
        config_file: Optional SwiftLint configuration path
        metrics: Counters to update

    Returns:
        Violations with their file set to ``file``
    """
    output = context.shell.execute(context.linter, build_lint_arguments(file, config_file))
    metrics.files_linted += 1

    try:
        violations = parse_violations(output)
    except ViolationDecodeError as e:
        metrics.decode_failures += 1
        logger.debug(f"Could not decode output for {file}")
        context.host.fail(f"Error deserializing SwiftLint JSON response ({output}): {e}")
        return []

    for violation in violations:
        violation.update_file(file)

    return violations


def _lint_files(
    context: LintContext,
    files: list[str],
    config_file: str | None,
    metrics: LintMetrics,
) -> list[Violation]:
    """Lint files in order, with optional progress bar."""
    all_violations: list[Violation] = []

    def lint_iter(progress_callback: Callable[[str], None] | None = None) -> Iterator[None]:
        for file in files:
            if progress_callback:
                progress_callback(file)
            all_violations.extend(lint_file(context, file, config_file, metrics))
            yield

    show_progress = context.show_progress and not os.environ.get("SWIFTLINT_REVIEW_NO_PROGRESS")

    if show_progress and files:
        from rich.console import Console
        from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

        with Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TextColumn("[bold cyan]{task.fields[status]}"),
            console=Console(stderr=True),
        ) as progress:
            task = progress.add_task("Linting files", total=len(files), status="Starting...")

            def progress_callback(file: str) -> None:
                progress.update(task, status=file)

            for _ in lint_iter(progress_callback):
                progress.update(task, advance=1)
    else:
        for _ in lint_iter():
            pass

    return all_violations


def report_violations(host: ReviewHost, violations: list[Violation], inline: bool) -> None:
    """Send violations to the review host.

    Args:
        host: Review host
        violations: Non-empty list of violations
        inline: Annotate lines individually instead of posting one table
    """
    if not inline:
        host.markdown(format_markdown_report(violations))
        return

    for violation in violations:
        if violation.severity is Severity.ERROR:
            host.fail_at(violation.reason, violation.file, violation.line)
        else:
            host.warn_at(violation.reason, violation.file, violation.line)


def lint(
    context: LintContext,
    inline: bool = False,
    directory: str | None = None,
    config_file: str | None = None,
    metrics: LintMetrics | None = None,
) -> list[Violation]:
    """Lint the changed Swift files and report what SwiftLint finds.

    Args:
        context: Run collaborators
        inline: Report each violation as a line annotation instead of one table
        directory: Only lint files whose path starts with this prefix
        config_file: SwiftLint configuration path, passed through as ``--config``
        metrics: Optional counters to fill in

    Returns:
        All violations, in file order then reporter order
    """
    if metrics is None:
        metrics = LintMetrics()

    logger.debug(f"Working directory: {os.getcwd()}")
    if not context.shell.is_available(context.linter):
        logger.warning(f"'{context.linter}' was not found on PATH")

    logger.debug(f"Directory: {directory}")
    logger.debug(
        f"Unfiltered files: {[*context.change_set.created_files, *context.change_set.modified_files]}"
    )
    files = collect_candidates(context.change_set, directory)
    logger.debug(f"Filtered files: {files}")
    metrics.files_collected = len(files)

    violations = _lint_files(context, files, config_file, metrics)

    metrics.errors = sum(1 for v in violations if v.severity is Severity.ERROR)
    metrics.warnings = len(violations) - metrics.errors

    if violations:
        logger.info(f"Found {len(violations)} violation(s)")
        report_violations(context.host, violations, inline)
    else:
        logger.info("Found no violations")

    metrics.finish()
    return violations
