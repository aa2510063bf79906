"""Configuration for prompt output, read from the environment and .env files."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .styles import Choice

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_true(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def color_from_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Decide whether to colour output from environment variables.

    ``CLICOLOR_FORCE`` (anything but ``0``) forces colour on. Otherwise a
    non-empty ``NO_COLOR`` turns it off, and ``CUMAEA_COLOR`` decides.
    """
    env = os.environ if environ is None else environ

    force = env.get("CLICOLOR_FORCE", "")
    if force and force != "0":
        return True
    if env.get("NO_COLOR", ""):
        return False
    return _is_true(env.get("CUMAEA_COLOR", "true"))


class Config:
    """Prompt configuration loaded from the environment and an optional .env."""

    def __init__(self, project_dir: Optional[Path] = None):
        """Initialize config from .env in project_dir (defaults to the cwd)."""
        self.project_dir = project_dir or Path.cwd()

        load_dotenv(self.project_dir / ".env")

        self.color_enabled = color_from_env()
        self.style = os.getenv("CUMAEA_STYLE", "").strip()
        self.log_level = os.getenv("CUMAEA_LOG_LEVEL", "WARNING").strip().upper()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to WARNING for unknown names."""
        if self.log_level in LOG_LEVELS:
            return getattr(logging, self.log_level)
        return logging.WARNING

    def default_style(self) -> Optional[Choice]:
        """The configured style choice, or None when unset."""
        if not self.style:
            return None
        return Choice.parse(self.style)

    def validate(self) -> list[str]:
        """Validate configuration values."""
        errors = []

        if self.style:
            try:
                self.default_style()
            except ValueError:
                errors.append(f"CUMAEA_STYLE is not a known style: {self.style}")
        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"CUMAEA_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}"
            )

        return errors
