"""Collect the four greeting fields from the console."""

import logging
from collections.abc import Callable

from pydantic import BaseModel
from rich.console import Console

from xmascard.config import CardConfig

console = Console(highlight=False)
logger = logging.getLogger("xmascard.fields")

FIELD_LABELS = {
    "recipient": "Recipient name: ",
    "sender": "Sender name: ",
    "message": "Custom message: ",
}


class GreetingFields(BaseModel, frozen=True):
    recipient: str = ""
    sender: str = ""
    message: str = ""
    year: str = "2025"


def read_field(label: str, *, input_fct: Callable[[str], str] | None = None) -> str:
    """Prompt with `label` and read one line.

    A closed or unreadable input stream (EOF, undecodable bytes, I/O errors) counts as an empty answer.
    """
    input_fct = input_fct or (lambda prompt: console.input(prompt, markup=False, emoji=False))
    try:
        return input_fct(label).rstrip("\r\n")
    except (EOFError, UnicodeDecodeError, OSError) as e:
        logger.debug(f"Could not read {label!r} ({type(e).__name__}), using empty value")
        return ""


def collect_fields(
    config: CardConfig | None = None,
    *,
    input_fct: Callable[[str], str] | None = None,
    recipient: str | None = None,
    sender: str | None = None,
    message: str | None = None,
    year: str | None = None,
) -> GreetingFields:
    """Prompt for recipient, sender, message and year, in that order.

    Fields that are already given (e.g., from command line options) are not prompted for.
    An empty year falls back to `config.default_year`.
    """
    config = config or CardConfig()
    preset = {"recipient": recipient, "sender": sender, "message": message}
    values: dict[str, str] = {}
    for name, label in FIELD_LABELS.items():
        value = preset[name]
        values[name] = value if value is not None else read_field(label, input_fct=input_fct)
    if year is None:
        year = read_field(f"Year [{config.default_year}]: ", input_fct=input_fct)
    values["year"] = year or config.default_year
    return GreetingFields(**values)
