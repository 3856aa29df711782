from __future__ import annotations

from typing import Protocol, Sequence

import click
from prompt_toolkit.shortcuts import radiolist_dialog, yes_no_dialog

from ..errors import PromptAborted


class Prompter(Protocol):
    def choose(self, message: str, options: Sequence[str]) -> str:
        """Return one of `options`; raise PromptAborted if the user cancels."""
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        ...


class ClickPrompter:
    """Line-oriented prompts, works in any terminal and under pipes."""

    def choose(self, message: str, options: Sequence[str]) -> str:
        for i, opt in enumerate(options, start=1):
            click.echo(f"{i:>3}. {opt}")
        try:
            picked = click.prompt(message, type=click.IntRange(1, len(options)), default=1)
        except click.Abort:
            raise PromptAborted("Selection cancelled") from None
        return options[picked - 1]

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return click.confirm(message, default=default)
        except click.Abort:
            raise PromptAborted("Confirmation cancelled") from None


class DialogPrompter:
    """Full-screen prompt_toolkit dialogs (arrow keys, Enter, Esc)."""

    def __init__(self, title: str = "md2html"):
        self.title = title

    def choose(self, message: str, options: Sequence[str]) -> str:
        try:
            picked = radiolist_dialog(
                title=self.title,
                text=message,
                values=[(opt, opt) for opt in options],
            ).run()
        except (KeyboardInterrupt, EOFError):
            picked = None
        if picked is None:
            raise PromptAborted("Selection cancelled")
        return picked

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            answer = yes_no_dialog(title=self.title, text=message).run()
        except (KeyboardInterrupt, EOFError):
            answer = None
        if answer is None:
            raise PromptAborted("Confirmation cancelled")
        return bool(answer)


def make_prompter(dialog: bool) -> Prompter:
    return DialogPrompter() if dialog else ClickPrompter()
