"""Line-oriented terminal I/O shared by the prompts."""

import logging
import sys
from typing import Optional, TextIO

from .config import color_from_env
from .errors import FlushError, ReadError
from .styles import Choice, render

logger = logging.getLogger(__name__)


class PromptConsole:
    """Writes prompts to an output stream and reads answers from an input stream.

    Streams default to ``sys.stdout`` and ``sys.stdin``, looked up on each call
    so that redirection (and pytest's capture) is honoured.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        color: Optional[bool] = None,
    ):
        self._stdin = stdin
        self._stdout = stdout
        self._color = color

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def color(self) -> bool:
        """Whether styled output is enabled. Unset means follow the environment."""
        if self._color is None:
            return color_from_env()
        return self._color

    @color.setter
    def color(self, value: Optional[bool]):
        self._color = value

    def styled(self, text: str, choice: Optional[Choice]) -> str:
        """Apply a style choice to text, or return it unchanged."""
        if choice is None or not self.color:
            return text
        return render(text, choice)

    def write(self, text: str):
        """Write text without a trailing newline."""
        try:
            self.stdout.write(text)
        except (OSError, ValueError) as exc:
            logger.error("Writing prompt failed: %s", exc)
            raise FlushError(f"Writing prompt failed: {exc}") from exc

    def flush(self):
        """Flush the output stream so the prompt is visible."""
        try:
            self.stdout.flush()
        except (OSError, ValueError) as exc:
            logger.error("Flushing line failed: %s", exc)
            raise FlushError(f"Flushing line failed: {exc}") from exc

    def read_line(self) -> str:
        """Block until one line is read. End of input reads as an empty line."""
        try:
            line = self.stdin.readline()
        except (OSError, ValueError, UnicodeDecodeError) as exc:
            logger.error("Failed to read line: %s", exc)
            raise ReadError(f"Failed to read line: {exc}") from exc
        if not line:
            logger.debug("End of input reached")
        return line

    def ask(self, text: str) -> str:
        """Write text, flush, then read one line."""
        self.write(text)
        self.flush()
        return self.read_line()


# Global console instance
console = PromptConsole()


def set_color(enabled: Optional[bool]):
    """Enable or disable styled output globally. ``None`` follows the environment."""
    console.color = enabled


def is_color() -> bool:
    """Check if styled output is enabled."""
    return console.color
