"""Git-backed change set."""
import subprocess
from pathlib import Path

# Timeout for git operations in seconds
GIT_TIMEOUT = 30


def is_git_repo(path: Path) -> bool:
    """Check if path is inside a git repository.

    Args:
        path: Directory path to check

    Returns:
        True if path is in a git repo, False otherwise
    """
    try:
        subprocess.run(
            ["git", "rev-parse", "--git-dir"],
            cwd=path,
            check=True,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
        )
        return True
    except (subprocess.CalledProcessError, FileNotFoundError, subprocess.TimeoutExpired):
        return False


def get_changed_files(repo_path: Path, base_ref: str, diff_filter: str) -> list[str]:
    """List files changed since a ref, restricted by git's diff filter.

    Rename detection is off, so a moved file shows up as added.

    Args:
        repo_path: Path to git repository
        base_ref: Ref to compare against (e.g., 'origin/main', 'HEAD~1')
        diff_filter: Value for --diff-filter, e.g. 'A' for added, 'M' for modified

    Returns:
        File paths relative to repo root, in git's order

    Raises:
        RuntimeError: If git command times out or fails
    """
    try:
        result = subprocess.run(
            [
                "git",
                "diff",
                "--name-only",
                "--no-renames",
                f"--diff-filter={diff_filter}",
                base_ref,
            ],
            cwd=repo_path,
            check=True,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
        )
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"Git command timed out after {GIT_TIMEOUT}s") from e
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"Git diff against '{base_ref}' failed: {e.stderr.strip()}") from e

    return [f.strip() for f in result.stdout.split("\n") if f.strip()]


class GitChangeSet:
    """Created and modified files between a base ref and the working tree."""

    def __init__(self, repo_path: Path, base_ref: str) -> None:
        self.repo_path = repo_path
        self.base_ref = base_ref
        self._created: list[str] | None = None
        self._modified: list[str] | None = None

    @property
    def created_files(self) -> list[str]:
        if self._created is None:
            self._created = get_changed_files(self.repo_path, self.base_ref, "A")
        return self._created

    @property
    def modified_files(self) -> list[str]:
        if self._modified is None:
            self._modified = get_changed_files(self.repo_path, self.base_ref, "M")
        return self._modified
