"""Run the package manager's install command before a build."""

from __future__ import annotations

import logging
import subprocess

from dep_tree.errors import InstallError
from dep_tree.models import BuildConfig

logger = logging.getLogger(__name__)


def run_install(config: BuildConfig) -> None:
    """Run ``config.install_command`` inside the project directory."""
    command = config.install_command
    if not command:
        raise InstallError("Install command is empty")

    logger.info("running %s in %s", " ".join(command), config.project_dir)
    try:
        subprocess.run(command, cwd=config.project_dir, check=True)
    except FileNotFoundError as e:
        raise InstallError(f"Install command not found: {command[0]}") from e
    except subprocess.CalledProcessError as e:
        raise InstallError(
            f"{' '.join(command)} exited with status {e.returncode}"
        ) from e
