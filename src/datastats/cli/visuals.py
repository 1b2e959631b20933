import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

logger = logging.getLogger(__name__)


def _is_tty() -> bool:
    try:
        return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    except ValueError:
        return False


def rich_enabled(provider: str) -> bool:
    """auto enables rich only when stderr is a terminal."""
    name = (provider or "auto").lower()
    if name == "rich":
        return True
    if name == "auto":
        return _is_tty()
    return False


def on_analyze_start(path, provider: str) -> bool:
    """Print a header for the run on stderr. Returns True if rich handled it."""
    if not rich_enabled(provider):
        logger.info("Analyzing %s", path)
        return False
    console = Console(file=sys.stderr, markup=True)
    console.print(Rule("Analyze", style="bold white"))
    p = Path(path)
    console.print(f"[cyan]file:[/cyan] {escape(p.name)}", highlight=False)
    if logger.isEnabledFor(logging.DEBUG):
        console.print(f"[dim]{escape(str(p.resolve()))}[/dim]", highlight=False)
    console.print()
    return True
