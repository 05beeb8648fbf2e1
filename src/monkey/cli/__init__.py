"""Command-line interface for monkey-lexer."""
