"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    The command announces itself, reports progress through ``progress_callback``
    (a generator of ``(fraction, message)`` tuples which fills in the remaining
    fields), then exposes a one-line ``result`` and a structured ``output``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
