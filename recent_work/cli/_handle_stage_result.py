"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("json", "yaml")


def _display_format(ctx: typer.Context | None) -> str:
    """Display format stored by the root callback, searched up the context chain.

    Defaults to yaml when no context carries one.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in DISPLAY_FORMATS:
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, JSON or YAML per ``--display``)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from recent_work.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _display_format(ctx))

    return wrapper  # type: ignore[return-value]
