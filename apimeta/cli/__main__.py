"""Module entry point for `python -m apimeta.cli`."""
from apimeta.cli import cli

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    cli()
