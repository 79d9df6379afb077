"""Console adapter for prompts and styled output."""

from dataclasses import dataclass
from typing import Protocol

from rich.console import Console as RichTerminal
from rich.console import RenderableType
from rich.text import Text

HEADER_STYLE = "cyan"
SUB_HEADING_STYLE = "green"
RECIPE_STYLE = "yellow"
ERROR_STYLE = "red"


class Console(Protocol):
    """Interface for interactive terminal I/O."""

    def show(self, renderable: RenderableType = "", style: str | None = None) -> None:
        """Render text or a rich renderable with an optional style."""

    def ask(self, prompt: str, style: str | None = None) -> str:
        """Display a prompt and return the line the user typed."""


@dataclass
class RichConsole:
    """Console implemented with rich."""

    terminal: RichTerminal

    @classmethod
    def create(cls) -> "RichConsole":
        """Create a console bound to the process's stdout."""
        return cls(terminal=RichTerminal(highlight=False))

    def show(self, renderable: RenderableType = "", style: str | None = None) -> None:
        """Print plain strings literally so user text is never parsed as markup."""
        if isinstance(renderable, str):
            self.terminal.print(Text(renderable, style=style or ""), soft_wrap=True)
            return
        self.terminal.print(renderable, style=style)

    def ask(self, prompt: str, style: str | None = None) -> str:
        """Read one line, raising EOFError when input is exhausted."""
        return self.terminal.input(Text(prompt, style=style or ""))
