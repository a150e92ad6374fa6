"""Candidate file selection from a change set."""
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

SWIFT_SUFFIX = ".swift"


class ChangeSetProvider(Protocol):
    """Anything exposing the created and modified files of a review."""

    @property
    def created_files(self) -> Sequence[str]: ...

    @property
    def modified_files(self) -> Sequence[str]: ...


@dataclass(frozen=True)
class ChangeSet:
    """Fixed change set, mostly useful for tests and scripting."""

    created_files: Sequence[str] = field(default_factory=tuple)
    modified_files: Sequence[str] = field(default_factory=tuple)


def collect_candidates(change_set: ChangeSetProvider, directory: str | None = None) -> list[str]:
    """Pick the files that should be handed to the linter.

    Args:
        change_set: Source of created and modified paths
        directory: Optional path prefix; plain string match, not per segment

    Returns:
        Swift files in encounter order, created files first
    """
    files = list(dict.fromkeys([*change_set.created_files, *change_set.modified_files]))

    if directory:
        files = [f for f in files if f.startswith(directory)]

    return [f for f in files if f.endswith(SWIFT_SUFFIX)]


def build_lint_arguments(file: str, config_file: str | None = None) -> list[str]:
    """Build the swiftlint argument fragments for one file.

    Args:
        file: Path to lint
        config_file: Optional SwiftLint configuration path, passed through as-is

    Returns:
        Argument fragments for ShellExecutor.execute
    """
    arguments = ["lint", "--quiet", f'--path "{file}"', "--reporter json"]
    if config_file:
        arguments.append(f'--config "{config_file}"')
    return arguments
