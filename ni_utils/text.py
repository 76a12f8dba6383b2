"""Terminal text helpers."""

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

ELLIPSIS = "…"

_DIM = Style(dim=True)


def dim(text: str) -> str:
    """Wrap text in the ANSI dim sequence when stdout supports styling.

    Console decides: pipes, files and TERM=dumb get plain text, FORCE_COLOR
    turns styling on, NO_COLOR turns it off.
    """
    console = Console()
    if console.color_system is None or console.no_color:
        return text
    return _DIM.render(text, color_system=ColorSystem.STANDARD)


def limit_text(text: str, max_width: int) -> str:
    """Truncate text to max_width characters, marking the cut with a dimmed ellipsis.

    Text that already fits is returned unchanged. The ellipsis is appended
    after the kept characters, so the visible result is max_width + 1 wide.
    """
    if len(text) <= max_width:
        return text
    return f"{text[:max_width]}{dim(ELLIPSIS)}"
