"""Allow ``python -m monkey`` from a source checkout or an install."""

from .cli.main import cli

if __name__ == "__main__":
    cli(prog_name="monkey")
