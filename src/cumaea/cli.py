#!/usr/bin/env python3
"""CLI entry point for cumaea prompts.

Prompts are written to stderr so that stdout carries only the answer, as in
``fruit=$(cumaea select Fruit "(a)pples, (B)ananas" --default B)``.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console as RichConsole
from rich.markup import escape

from . import __version__
from .config import Config
from .console import PromptConsole, is_color, set_color
from .errors import PromptIOError
from .prompts import prompt_selection, prompt_yes_no
from .styles import Choice, all_choices

err_console = RichConsole(stderr=True)

STYLE_NAMES = [choice.name for choice in all_choices()]


def _resolve_style(ctx: click.Context, style_name: Optional[str]) -> Optional[Choice]:
    if style_name:
        return Choice.parse(style_name)
    config: Config = ctx.obj
    return config.default_style()


def _prompt_console() -> PromptConsole:
    """A console that reads stdin and writes prompts to stderr."""
    return PromptConsole(stdout=sys.stderr, color=is_color())


def _fail(ctx: click.Context, exc: PromptIOError):
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    ctx.exit(2)


@click.group()
@click.version_option(version=__version__, prog_name="cumaea")
@click.option(
    "--no-color",
    is_flag=True,
    help="Print prompts without colour, whatever the environment says.",
)
@click.pass_context
def main(ctx: click.Context, no_color: bool):
    """Prompt for a yes/no answer or a selection from the shell."""
    config = Config()
    errors = config.validate()
    if errors:
        err_console.print("[red]Configuration errors:[/red]")
        for error in errors:
            err_console.print(f"  • {escape(error)}")
        ctx.exit(2)

    logging.basicConfig(
        level=config.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    set_color(False if no_color else config.color_enabled)
    ctx.obj = config


@main.command(name="confirm")
@click.argument("prompt")
@click.option(
    "--default/--no-default",
    default=False,
    help="Answer used when the input is blank.",
)
@click.option(
    "--style",
    "style_name",
    type=click.Choice(STYLE_NAMES, case_sensitive=False),
    default=None,
    help="Colour for the prompt, e.g. green, on_red, bright_cyan.",
)
@click.pass_context
def confirm(ctx: click.Context, prompt: str, default: bool, style_name: Optional[str]):
    """Ask PROMPT until answered y, n or blank. Exits 0 for yes, 1 for no."""
    style = _resolve_style(ctx, style_name)
    try:
        answer = prompt_yes_no(prompt, style, default, console=_prompt_console())
    except PromptIOError as exc:
        _fail(ctx, exc)
    ctx.exit(0 if answer else 1)


@main.command(name="select")
@click.argument("prompt")
@click.argument("choices")
@click.option("--default", "default", default="", help="Value printed when the input is blank.")
@click.option(
    "--style",
    "style_name",
    type=click.Choice(STYLE_NAMES, case_sensitive=False),
    default=None,
    help="Colour for the choices list.",
)
@click.pass_context
def select(ctx: click.Context, prompt: str, choices: str, default: str, style_name: Optional[str]):
    """Ask PROMPT once, offering CHOICES, and print the answer on stdout."""
    style = _resolve_style(ctx, style_name)
    try:
        answer = prompt_selection(prompt, choices, style, default, console=_prompt_console())
    except PromptIOError as exc:
        _fail(ctx, exc)
    click.echo(answer)


if __name__ == "__main__":
    sys.exit(main())
