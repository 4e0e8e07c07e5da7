"""The boxed greeting printed above the scene."""

from collections.abc import Callable

import typer
from jinja2 import StrictUndefined, Template

from xmascard.config import CardConfig
from xmascard.fields import GreetingFields


def center_pad(text: str, width: int = 60) -> str:
    """Center `text` in a field of `width` characters.

    Left padding uses floor division. Text longer than `width` is neither
    padded nor truncated.
    """
    centered = " " * max(0, (width - len(text)) // 2) + text
    return centered + " " * (width - len(centered))


def _render_template(template: str, fields: GreetingFields) -> str:
    return Template(template, undefined=StrictUndefined).render(**fields.model_dump())


def render_greeting(fields: GreetingFields, config: CardConfig | None = None) -> list[str]:
    """Return the lines of the greeting box, starting with a blank line."""
    config = config or CardConfig()
    border = "+" + "-" * (config.width + 2) + "+"
    blank = "| " + " " * config.width + " |"

    content = [_render_template(config.title_template, fields)]
    body = []
    if fields.recipient:
        body.append(_render_template(config.recipient_template, fields))
    body.append(fields.message or config.fallback_message)
    if fields.sender:
        body.append(_render_template(config.sender_template, fields))

    def boxed(text: str) -> str:
        return f"| {center_pad(text, config.width)} |"

    return ["", border, *map(boxed, content), blank, *map(boxed, body), blank, border]


def print_greeting(
    fields: GreetingFields, config: CardConfig | None = None, *, print_fct: Callable[[str], None] = typer.echo
) -> None:
    for line in render_greeting(fields, config):
        print_fct(line)
