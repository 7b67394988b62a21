"""Git clone invocation."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneResult:
    """Outcome of a clone.

    Attributes:
        output: Combined stdout and stderr of git
        success: Whether git exited with status 0
    """

    output: bytes
    success: bool


class GitCloner:
    """Runs ``git clone`` for a source URL into a destination directory."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def clone(self, source_url: str, destination: str | Path) -> CloneResult:
        """Clone repository.

        Args:
            source_url: URL passed to git as-is
            destination: Directory to clone into

        Returns:
            CloneResult with git's combined output
        """
        cmd = [self.executable, "clone", source_url, str(destination)]
        logger.info(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            logger.error(f"Could not run {self.executable}: {e}")
            return CloneResult(output=str(e).encode(), success=False)

        if result.returncode != 0:
            logger.debug(f"git clone exited with status {result.returncode}")
        return CloneResult(output=result.stdout or b"", success=result.returncode == 0)
