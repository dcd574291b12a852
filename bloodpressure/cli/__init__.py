"""CLI commands for bloodpressure."""

import sys

import typer
from dotenv import load_dotenv
from loguru import logger

from .record_cmd import record
from .report_cmd import report
from .show_path_cmd import show_path

# Load environment variables before creating the app
load_dotenv()

app = typer.Typer(help="Record and report my blood pressure.")

# Register commands
app.command(help="Record a blood pressure reading taken now.")(record)
app.command(help="Show the most recent readings, newest first.")(report)
app.command(name="show-path", help="Show the path of the readings file.")(show_path)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug messages to stderr.",
    ),
) -> None:
    """Record and report my blood pressure."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


__all__ = ["app", "record", "report", "show_path"]
