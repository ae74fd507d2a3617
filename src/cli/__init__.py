"""Main CLI application module."""

import typer

from .address_book_commands import run, shell

# Create the main CLI application
app = typer.Typer(
    help="📇 Address Book - manage student contacts from the terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("shell")(shell)
app.command("run")(run)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
