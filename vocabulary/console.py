"""
Console text styling for vocabulary.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text


class Colorizer:
    """
    Format plain text with a rich style tag such as ``"yellow"``.

    A disabled colorizer returns the text unchanged, so callers never
    need to check whether color was requested.
    """

    def __init__(self, enabled: bool = False, console: Optional[Console] = None) -> None:
        self.enabled = enabled
        self._console = console
        if enabled and console is None:
            self._console = Console(
                force_terminal=True,
                color_system="standard",
                highlight=False,
            )

    def __call__(self, text: str, style: str) -> str:
        if not self.enabled or self._console is None:
            return text

        with self._console.capture() as capture:
            self._console.print(Text(text, style=style), end="", soft_wrap=True)
        return capture.get()
