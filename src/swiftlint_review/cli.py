"""Command-line interface for swiftlint-review."""
import sys
from pathlib import Path

import click

from swiftlint_review.__version__ import __version__
from swiftlint_review.config import DEFAULT_CONFIG_NAME, load_config
from swiftlint_review.git_utils import GitChangeSet, is_git_repo
from swiftlint_review.logging_config import get_logger, setup_logging
from swiftlint_review.metrics import LintMetrics
from swiftlint_review.orchestrator import LintContext, lint
from swiftlint_review.reporter import GitHubActionsHost, format_json_report, get_exit_code
from swiftlint_review.shell import ShellExecutor


@click.command()
@click.version_option(version=__version__, prog_name="swiftlint-review")
@click.option("--base", default="origin/main", show_default=True, help="Ref to diff against")
@click.option("--inline/--no-inline", default=None, help="Annotate lines instead of one table")
@click.option("--directory", type=str, help="Only lint files under this path prefix")
@click.option("--swiftlint-config", type=str, help="SwiftLint configuration file")
@click.option("--json", "output_json", is_flag=True, help="Print violations as JSON")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
def main(
    base: str,
    inline: bool | None,
    directory: str | None,
    swiftlint_config: str | None,
    output_json: bool,
    verbose: bool,
    quiet: bool,
    config: str | None,
) -> None:
    """Run SwiftLint on changed Swift files and report the findings."""
    setup_logging(verbose=verbose, quiet=quiet)

    project_root = Path.cwd()
    config_path = Path(config) if config else project_root / DEFAULT_CONFIG_NAME

    try:
        cfg = load_config(config_path)

        if not is_git_repo(project_root):
            raise ValueError(f"Not a git repository: {project_root}")

        host = GitHubActionsHost()
        context = LintContext(
            shell=ShellExecutor(),
            change_set=GitChangeSet(project_root, base),
            host=host,
            linter=cfg.linter,
            show_progress=cfg.show_progress,
        )
        metrics = LintMetrics()

        violations = lint(
            context,
            inline=cfg.inline if inline is None else inline,
            directory=directory or cfg.directory,
            config_file=swiftlint_config or cfg.config_file,
            metrics=metrics,
        )

        if output_json:
            click.echo(format_json_report(violations, metrics))

        sys.exit(get_exit_code(violations, failed=host.failed))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    except (ValueError, RuntimeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
