# src/monkey/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..config import config
from ..errors import IllegalTokenError
from ..lexer import Lexer, check_source
from ..monkey_token import EOF
from .. import repl as monkey_repl

console = Console()
logger = logging.getLogger("monkey.cli")


def _read_source(file):
    try:
        with open(file, 'r', encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError:
        raise click.FileError(file, hint="not valid UTF-8 text")
    except OSError as e:
        raise click.FileError(file, hint=e.strerror)


@click.group()
@click.version_option(version=__version__, prog_name="monkey")
@click.option('--debug', is_flag=True, help="Enable debug logging")
def cli(debug):
    """Monkey lexer - scan Monkey source into tokens"""
    if debug:
        config.enable_debug_logs = True
    logging.basicConfig(level=config.logging_level,
                        format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Monkey file"""
    source_code = _read_source(file)
    try:
        lexer = Lexer(source_code)

        table = Table(title="Tokens")
        table.add_column("Type", style="cyan")
        table.add_column("Literal", style="green")

        while True:
            token = lexer.next_token()
            if token.type == EOF:
                break
            table.add_row(token.type.name, token.literal)

        console.print(table)

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check a Monkey file for unrecognized characters"""
    source_code = _read_source(file)
    try:
        check_source(source_code)
    except IllegalTokenError as e:
        logger.debug("%s", e)
        console.print("[bold red]Illegal characters found:[/bold red]")
        for token in e.tokens:
            console.print(f"  {token.literal!r}", markup=False)
        sys.exit(1)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        sys.exit(1)

    console.print("[bold green]No illegal tokens found[/bold green]")


@cli.command()
def repl():
    """Start the read-lex-print loop"""
    monkey_repl.start(console)


if __name__ == "__main__":
    cli()
