#!/usr/bin/env python3

"""Print a Christmas card with a snowy scene. This is the default executable `xmascard`."""

import logging

import typer
from rich.console import Console

from xmascard.config import CardConfig
from xmascard.fields import GreetingFields, collect_fields
from xmascard.greeting import print_greeting
from xmascard.scene import draw_scene
from xmascard.snow import generate_snow

_HELP_TEXT = """Print a boxed Christmas greeting and a little snowy landscape.

[not dim]
Any field not given as an option is asked for interactively.
Leave a prompt empty to skip it: the year falls back to [bold green]2025[/bold green],
an empty message is replaced by a friendly default.
[/not dim]
"""

console = Console(highlight=False)
app = typer.Typer(rich_markup_mode="rich", add_completion=False)
logger = logging.getLogger("xmascard.run")


# fmt: off
@app.command(help=_HELP_TEXT)
def main(
    recipient: str | None = typer.Option(None, "-t", "--to", help="Who the card is for", show_default=False),
    sender: str | None = typer.Option(None, "-f", "--from", help="Who the card is from", show_default=False),
    message: str | None = typer.Option(None, "-m", "--message", help="Custom message", show_default=False),
    year: str | None = typer.Option(None, "-y", "--year", help="Year in the title", show_default=False),
) -> GreetingFields | None:
    # fmt: on
    config = CardConfig()
    try:
        fields = collect_fields(config, recipient=recipient, sender=sender, message=message, year=year)
    except KeyboardInterrupt:
        console.print()
        return None
    logger.debug(f"Collected greeting fields: {fields!r}")

    print_greeting(fields, config)
    draw_scene(generate_snow(config.snow_count, width=config.width, height=config.height), config)
    return fields


if __name__ == "__main__":
    app()
