"""Running external commands through the shell."""
import shutil
import subprocess
from collections.abc import Sequence

from swiftlint_review.logging_config import get_logger

logger = get_logger(__name__)

SHELL = "/bin/bash"


class ShellExecutor:
    """Runs a command line and hands back whatever it printed."""

    def execute(self, command: str, arguments: Sequence[str] = ()) -> str:
        """Run a command and return its standard output.

        Arguments are already shell-quoted fragments (e.g. ``--path "a b.swift"``),
        so they are joined into a single line and run through bash.

        Args:
            command: Executable name or path
            arguments: Pre-quoted argument fragments

        Returns:
            Captured stdout with trailing whitespace removed. Bytes that are
            not UTF-8 come back as U+FFFD. Empty if the shell could not be
            started.
        """
        script = " ".join([command, *arguments])
        logger.debug(f"Running: {script}")

        try:
            result = subprocess.run(
                [SHELL, "-c", script],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug(f"Could not launch {SHELL}: {e}")
            return ""

        if result.returncode != 0:
            logger.debug(
                f"'{command}' exited with {result.returncode}: {result.stderr.strip()}"
            )

        return result.stdout.rstrip()

    def is_available(self, command: str) -> bool:
        """Check whether an executable can be found on PATH."""
        return shutil.which(command) is not None
