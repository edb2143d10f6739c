import os
from typing import Iterable, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'rich'
OUTPUT_MODE_ENV = "CATALOG_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Invalid values are ignored; the current mode stays

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()

def print_error(message: str) -> None:
    """Print a single diagnostic line."""
    if get_output_mode() == "rich":
        _console.print(f"[bold red]Error:[/] {escape(message)}")
    else:
        print(f"Error: {message}")

def print_info(message: str) -> None:
    if get_output_mode() == "rich":
        _console.print(f"[dim]{escape(message)}[/]")
    else:
        print(message)

def print_banner(book_count: int) -> None:
    if get_output_mode() == "rich":
        content = f"[bold]{escape(settings.app_name)}[/] v{settings.app_version}\n[dim]{book_count} books loaded. Type HELP for commands.[/]"
        _console.print(Panel.fit(content, border_style="cyan"))
    else:
        print(f"{settings.app_name} v{settings.app_version} - {book_count} books loaded. Type HELP for commands.")

def print_help(commands: Iterable[Tuple[str, str, str]]) -> None:
    """Print the command reference.
    - plain: 'KEYWORD ARGUMENTS - description' lines
    - rich: Rich table
    """
    if get_output_mode() == "rich":
        table = Table(title="Commands", show_lines=False, header_style="bold cyan")
        table.add_column("Command", style="magenta", no_wrap=True)
        table.add_column("Arguments", style="white")
        table.add_column("Description", style="white")
        for keyword, arguments, description in commands:
            table.add_row(keyword, escape(arguments), description)
        _console.print(table)
    else:
        for keyword, arguments, description in commands:
            usage = f"{keyword} {arguments}" if arguments else keyword
            print(f"{usage} - {description}")
