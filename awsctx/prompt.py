# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                              ᛗᛁᛗᛁᚱ • MIMIR
#                    The Head That Asks and Is Answered
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#   The prompt capability used by the context flow. Flows receive a UI
#   instance, so tests can script answers without a terminal.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List

import click
from rich.markup import escape

from awsctx import cli_utils
from awsctx.errors import CanceledError

logger = logging.getLogger(__name__)


class UI(ABC):
    """
    Interactive prompts. Every method raises CanceledError when the user
    interrupts it (Ctrl-C / EOF); other failures propagate unchanged.
    """

    @abstractmethod
    def select(self, title: str, options: List[str]) -> int:
        """Let the user pick one option; returns its index."""

    @abstractmethod
    def input(self, title: str, suggestion: str) -> str:
        """Free text input, pre-filled with suggestion."""

    @abstractmethod
    def password(self, title: str) -> str:
        """Masked free text input."""

    @abstractmethod
    def confirm(self, title: str, default: bool) -> bool:
        """Yes/no question."""


class ConsolePrompt(UI):
    """UI backed by click prompts and a rich-rendered option list."""

    def select(self, title: str, options: List[str]) -> int:
        if not options:
            raise ValueError("select() needs at least one option")

        cli_utils.console.print(f"[bold cyan]?[/bold cyan] [bold]{escape(title)}[/bold]")
        for number, option in enumerate(options, start=1):
            cli_utils.console.print(f"  [cyan]{number:>2})[/cyan] {escape(option)}", highlight=False)

        choice = _ask(
            click.prompt,
            'Choice',
            type=click.IntRange(1, len(options)),
            default=1,
        )
        logger.debug("Selected option %d of %d", choice, len(options))
        return choice - 1

    def input(self, title: str, suggestion: str) -> str:
        value = _ask(click.prompt, title, default=suggestion or '', show_default=bool(suggestion))
        return value.strip()

    def password(self, title: str) -> str:
        return _ask(click.prompt, title, default='', hide_input=True, show_default=False)

    def confirm(self, title: str, default: bool) -> bool:
        return _ask(click.confirm, title, default=default)


def _ask(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run a click prompt, turning an interrupt into CanceledError."""
    try:
        return func(*args, **kwargs)
    except click.Abort as e:
        raise CanceledError() from e
