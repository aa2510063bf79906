"""Errors raised by the prompt operations."""


class PromptIOError(Exception):
    """The terminal could not be written to or read from.

    Never retried: a single fault ends the prompt.
    """


class FlushError(PromptIOError):
    """Flushing the prompt to the output stream failed."""


class ReadError(PromptIOError):
    """Reading a line from the input stream failed."""
