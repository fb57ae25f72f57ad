"""CLI entry point for taskdeck."""

from taskdeck.cli import cli

if __name__ == "__main__":
    cli()
