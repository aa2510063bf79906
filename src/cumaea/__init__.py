"""Interactive line prompts for command-line programs.

Named after the Cumaean Sibyl, who sold the Sibylline books to the last king
of Rome.
"""

from .console import PromptConsole, console, set_color
from .errors import FlushError, PromptIOError, ReadError
from .prompts import Answer, format_selection_prompt, prompt_selection, prompt_yes_no
from .styles import Choice, ChoiceColor, Variant, render

__version__ = "0.1.0"

__all__ = [
    "Answer",
    "Choice",
    "ChoiceColor",
    "FlushError",
    "PromptConsole",
    "PromptIOError",
    "ReadError",
    "Variant",
    "console",
    "format_selection_prompt",
    "prompt_selection",
    "prompt_yes_no",
    "render",
    "set_color",
]
