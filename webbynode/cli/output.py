"""Output formatting utilities"""

from typing import Optional

from rich.console import Console

from ..exceptions import WebbynodeError

console = Console(highlight=False)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_webbynode_error(error: WebbynodeError, debug: bool = False) -> None:
    """Print a typed error, with its code when debugging"""
    message = str(error).strip()
    if debug and error.error_code:
        message = f"{message} ({error.error_code})"
    console.print("[red]Error:[/red] ", end="")
    console.print(message, markup=False, soft_wrap=True)
