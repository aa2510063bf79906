"""Yes/no and selection prompts.

Both prompts write, flush, then block on a single line read. The caller owns
the wording, including any hint of the default such as ``(Y/n)``.
"""

import logging
from enum import Enum
from typing import Optional

from .console import PromptConsole
from .console import console as default_console
from .styles import Choice

logger = logging.getLogger(__name__)


class Answer(Enum):
    """An accepted answer to a yes/no prompt."""

    YES = "y"
    NO = "n"
    EMPTY = ""


def classify_answer(line: str) -> Optional[Answer]:
    """Map a raw input line to an answer, or None if it is not y, n or blank."""
    try:
        return Answer(line.strip().lower())
    except ValueError:
        return None


def prompt_yes_no(
    prompt_text: str,
    style: Optional[Choice] = None,
    default: bool = False,
    *,
    console: Optional[PromptConsole] = None,
) -> bool:
    """Ask a yes/no question until the answer is ``y``, ``n`` or blank.

    The prompt is written as given (styled as a whole when ``style`` is set,
    trimmed otherwise) and re-written after every rejected answer. A blank
    answer returns ``default``.

    Example::

        approved = prompt_yes_no(
            "Approved? (Y/n) >>> ",
            Choice.normal(ChoiceColor.GREEN),
            default=True,
        )

    Raises:
        FlushError: If the prompt could not be written out.
        ReadError: If the answer could not be read.
    """
    console = console or default_console
    text = console.styled(prompt_text, style) if style is not None else prompt_text.strip()

    answer = None
    while answer is None:
        line = console.ask(text)
        answer = classify_answer(line)
        if answer is None:
            logger.debug("Rejected answer %r to %r", line.strip(), prompt_text)

    if answer is Answer.YES:
        return True
    if answer is Answer.NO:
        return False
    if answer is Answer.EMPTY:
        logger.debug("Blank answer to %r, using default %r", prompt_text, default)
        return default
    raise AssertionError(f"Unhandled answer: {answer!r}")


def format_selection_prompt(
    prompt_text: str,
    choices_text: str,
    style: Optional[Choice] = None,
    *,
    console: Optional[PromptConsole] = None,
) -> str:
    """Build ``"<prompt>: [<choices>]: "``, styling only the choices."""
    console = console or default_console
    if style is None:
        return f"{prompt_text.strip()}: [{choices_text.strip()}]: "
    return f"{prompt_text}: [{console.styled(choices_text, style)}]: "


def prompt_selection(
    prompt_text: str,
    choices_text: str,
    style: Optional[Choice] = None,
    default: str = "",
    *,
    console: Optional[PromptConsole] = None,
) -> str:
    """Ask once for a free-form selection.

    Shows e.g. ``Choose something: [(a)pples, (b)ananas, (D)oughnuts]: ``.
    Returns the trimmed answer, or ``default`` exactly as given when the
    answer is blank. The answer is not checked against ``choices_text``.

    Raises:
        FlushError: If the prompt could not be written out.
        ReadError: If the answer could not be read.
    """
    console = console or default_console
    line = console.ask(format_selection_prompt(prompt_text, choices_text, style, console=console))

    answer = line.strip()
    if not answer:
        logger.debug("Blank selection for %r, using default %r", prompt_text, default)
        return default
    return answer
