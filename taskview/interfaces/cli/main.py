"""Entry point for the taskview CLI.

Usage:
    python -m taskview.interfaces.cli.main

Or via installed entry point:
    taskview <command>
"""

from taskview.interfaces.cli import app


def main() -> None:
    """Run the taskview CLI application."""
    app()


if __name__ == "__main__":
    main()
