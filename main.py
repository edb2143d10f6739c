import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import typer
from rich.console import Console

from catalog.commands import CommandType, build_command, execute
from catalog.errors import DecodeFieldError, ValidationError
from catalog.library import Library
from catalog.loader import LibraryFileLoader
from config import settings
from utils.ui_helpers import set_output_mode, print_banner, print_error, print_help, print_info

APP_NAME = "Book Catalog CLI"
EXIT_KEYWORD = "EXIT"
HELP_KEYWORD = "HELP"

COMMAND_HELP: List[Tuple[str, str, str]] = [
    ("ADD", "<path>.csv", "add the books from a CSV file"),
    ("LIST", "[short|long]", "list all books"),
    ("GROUP", "TITLE|AUTHOR", "list titles grouped by initial or by author"),
    ("REMOVE", "TITLE <title> | AUTHOR <author>", "remove one book by title or all books by an author"),
    ("SEARCH", "<word>", "list titles containing a word"),
    (HELP_KEYWORD, "", "show this help"),
    (EXIT_KEYWORD, "", "quit"),
]

logger = logging.getLogger(__name__)

console = Console()


def configure_logging() -> None:
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# --- Driver ---
def split_command_line(line: str) -> Tuple[str, str]:
    """Split one input line into (KEYWORD, argument text).

    The keyword is the first word, uppercased; the argument is whatever follows it.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    keyword = parts[0].upper()
    argument = parts[1] if len(parts) > 1 else ""
    return keyword, argument


def run_line(library: Library, line: str) -> bool:
    """Run one line against the library. Returns False when the session should end."""
    keyword, argument = split_command_line(line)
    if not keyword:
        return True
    if keyword == EXIT_KEYWORD:
        return False
    if keyword == HELP_KEYWORD:
        print_help(COMMAND_HELP)
        return True

    kind = CommandType.from_keyword(keyword)
    if kind is None:
        logger.debug("Rejected line %r", line)
        print_error(f"Unknown command: {keyword}. Type {HELP_KEYWORD} for a list of commands.")
        return True

    try:
        command = build_command(kind, argument)
    except ValidationError as e:
        print_error(str(e))
        return True

    execute(command, library)
    return True


def load_sources(library: Library, paths: Iterable[Path]) -> None:
    for path in paths:
        run_line(library, f"{CommandType.ADD.value} {path}")


def run_repl(library: Library) -> None:
    """Read lines until EXIT or end of input."""
    while True:
        try:
            line = console.input(settings.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not run_line(library, line):
            break
    print_info("Goodbye!")


def _default_sources() -> List[Path]:
    return [Path(settings.data_file)] if settings.data_file else []


# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Console format for messages: plain | rich (default: plain)",
    )
):
    """Global options for the CLI (e.g. output mode)."""
    if output:
        set_output_mode(output)

@app.command("run")
def cli_run(
    load: Optional[List[Path]] = typer.Option(None, "--load", "-l", help="CSV file to load before the first prompt"),
):
    """Start the interactive catalog shell."""
    library = Library()
    load_sources(library, load or _default_sources())
    print_banner(len(library))
    run_repl(library)

@app.command("exec")
def cli_exec(
    lines: List[str] = typer.Argument(..., help="Command lines to run in order, e.g. 'LIST short'"),
    load: Optional[List[Path]] = typer.Option(None, "--load", "-l", help="CSV file to load first"),
):
    """Run command lines against a fresh library and exit."""
    library = Library()
    load_sources(library, load or [])
    for line in lines:
        if not run_line(library, line):
            break

@app.command("check")
def cli_check(path: Path = typer.Argument(..., help="CSV file to decode")):
    """Decode a CSV file without loading it and report the result."""
    loader = LibraryFileLoader()
    if not loader.load_file_content(path):
        print_error(f"Could not read {path}")
        raise typer.Exit(code=1)
    try:
        books = loader.parse_file_content()
    except DecodeFieldError as e:
        print_error(f"{path}: {e}")
        raise typer.Exit(code=1)
    print(f"{len(books)} books decoded from {path}")


def main() -> None:
    configure_logging()
    if len(sys.argv) > 1:
        app()
    else:
        app(["run"])


if __name__ == "__main__":
    main()
