"""Pytest configuration and fixtures."""

import io
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from cumaea.console import PromptConsole, console


class FailingStream(io.StringIO):
    """A text stream whose flush or readline raises an ``error`` instance."""

    def __init__(
        self,
        fail_flush: bool = False,
        fail_read: bool = False,
        error: type = OSError,
    ):
        super().__init__()
        self.fail_flush = fail_flush
        self.fail_read = fail_read
        self.error = error

    def flush(self):
        if self.fail_flush:
            raise self.error("broken pipe")
        super().flush()

    def readline(self, *args):
        if self.fail_read:
            raise self.error("input/output error")
        return super().readline(*args)

    def close(self):
        self.fail_flush = False
        super().close()


class RecordingInput(io.StringIO):
    """An input stream that counts readline calls."""

    def __init__(self, text: str):
        super().__init__(text)
        self.reads = 0

    def readline(self, *args):
        self.reads += 1
        return super().readline(*args)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def scripted_console() -> Callable[..., PromptConsole]:
    """Build a console that reads the given lines and writes to a StringIO."""

    def factory(*lines: str, color: bool = True) -> PromptConsole:
        stdin = RecordingInput("".join(f"{line}\n" for line in lines))
        return PromptConsole(stdin=stdin, stdout=io.StringIO(), color=color)

    return factory


@pytest.fixture
def failing_stream() -> type:
    """The FailingStream class, for building broken stdin or stdout."""
    return FailingStream


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Isolate tests from colour and logging settings in the real environment."""
    for key in [
        "CUMAEA_COLOR",
        "CUMAEA_STYLE",
        "CUMAEA_LOG_LEVEL",
        "NO_COLOR",
        "CLICOLOR_FORCE",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_global_console():
    """Restore the global console's colour setting after each test."""
    original = console._color
    console.color = None
    yield
    console.color = original
