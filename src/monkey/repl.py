# src/monkey/repl.py
"""Read-lex-print loop: scans each line and prints its tokens."""

from rich.console import Console
from rich.markup import escape

from .config import config
from .lexer import Lexer
from .monkey_token import EOF


def start(console=None):
    console = console or Console()
    console.print("[bold green]Monkey lexer REPL[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            line = console.input(f"[bold blue]{escape(config.prompt)}[/bold blue]")
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye!")
            break

        if line.strip() in ("exit", "quit"):
            break
        if not line.strip():
            continue

        lexer = Lexer(line)
        tok = lexer.next_token()
        while tok.type != EOF:
            console.print(repr(tok), markup=False, highlight=False)
            tok = lexer.next_token()
