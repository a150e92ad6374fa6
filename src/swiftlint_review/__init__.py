"""swiftlint-review: SwiftLint findings as pull request feedback."""

from swiftlint_review.__version__ import __version__
from swiftlint_review.collector import ChangeSet
from swiftlint_review.config import Config, get_default_config, load_config
from swiftlint_review.orchestrator import LintContext, lint
from swiftlint_review.reporter import GitHubActionsHost, ReviewHost
from swiftlint_review.shell import ShellExecutor
from swiftlint_review.types import Severity, Violation

__all__ = [
    "__version__",
    "ChangeSet",
    "Config",
    "load_config",
    "get_default_config",
    "GitHubActionsHost",
    "LintContext",
    "ReviewHost",
    "ShellExecutor",
    "Severity",
    "Violation",
    "lint",
]
