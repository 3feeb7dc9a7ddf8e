"""
Git integration for vocabulary.

The version reported by ``--version`` is whatever ``git describe --tags``
prints for the checkout the package lives in.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .errors import GitError, VersionError

LOG = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent


def _run_git(
    args: list[str],
    cwd: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command and return the completed process.
    """

    cmd = ["git", *args]
    LOG.debug("Running git command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:  # noqa: BLE001
        raise GitError(f"failed to execute git: {exc}") from exc

    if completed.returncode != 0:
        LOG.debug("git stderr: %s", completed.stderr)
        details = completed.stderr.strip()
        message = f"git command failed: {' '.join(cmd)}"
        if details:
            message = f"{message} ({details})"
        raise GitError(message)

    return completed


def describe_version(cwd: Optional[str] = None) -> str:
    """
    Return the nearest tag description for the vocabulary checkout.
    """

    try:
        completed = _run_git(["describe", "--tags"], cwd=cwd or str(PACKAGE_DIR))
    except GitError as exc:
        raise VersionError(f"cannot determine version: {exc}") from exc

    version = completed.stdout.strip()
    if not version:
        raise VersionError("cannot determine version: git describe printed nothing")
    return version
