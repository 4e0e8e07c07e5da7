"""The snowy landscape printed below the greeting: snow dots, a church and a tree."""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import typer

from xmascard.config import CardConfig
from xmascard.snow import Snowflake

logger = logging.getLogger("xmascard.scene")


@dataclass(frozen=True)
class Overlay:
    """ASCII art drawn at a fixed column, one fixed-width segment per row."""

    column: int
    width: int
    rows: tuple[tuple[int, str], ...] = ()
    """(row index, art segment) pairs."""

    def apply(self, row_index: int, cells: list[str]) -> None:
        """Overwrite the span of `cells` covered by this overlay on the given row, if any."""
        if (segment := dict(self.rows).get(row_index)) is None:
            return
        cells[self.column : self.column + self.width] = segment.ljust(self.width)[: self.width]


CHURCH = Overlay(
    column=4,
    width=11,
    rows=(
        (6, "    ++     "),
        (7, "    ||     "),
        (8, "   /  \\    "),
        (9, "  /____\\   "),
        (10, "  | [] |   "),
        (11, "  | [] |   "),
        (12, "  | __ |   "),
        (13, "  |____|   "),
    ),
)

TREE = Overlay(
    column=40,
    width=10,
    rows=(
        (8, "    *     "),
        (9, "   /_\\    "),
        (10, "  /_/_\\   "),
        (11, " /_/_/_\\  "),
        (12, "/_/_/_/_\\ "),
        (13, "   /_\\    "),
        (14, "   /_\\    "),
    ),
)

OVERLAYS: tuple[Overlay, ...] = (CHURCH, TREE)


def render_scene(
    snow: Iterable[Snowflake | tuple[int, int]],
    config: CardConfig | None = None,
    overlays: Sequence[Overlay] = OVERLAYS,
) -> list[str]:
    """Return `config.height` rows of exactly `config.width` characters.

    Snow is placed first (first flake on a cell wins), overlays are applied on top.
    Flakes outside the canvas are skipped.
    """
    config = config or CardConfig()
    flakes_by_row: dict[int, list[int]] = {}
    for x, y in snow:
        if not (0 <= x < config.width and 0 <= y < config.height):
            logger.warning(f"Skipping snowflake outside the {config.width}x{config.height} canvas: ({x}, {y})")
            continue
        flakes_by_row.setdefault(y, []).append(x)

    rows = []
    for row_index in range(config.height):
        cells = [" "] * config.width
        for x in flakes_by_row.get(row_index, []):
            if cells[x] == " ":
                cells[x] = "."
        for overlay in overlays:
            overlay.apply(row_index, cells)
        # Overlays reaching past the right edge must not widen the row
        rows.append("".join(cells[: config.width]).ljust(config.width))
    return rows


def draw_scene(
    snow: Iterable[Snowflake | tuple[int, int]],
    config: CardConfig | None = None,
    *,
    print_fct: Callable[[str], None] = typer.echo,
) -> None:
    for row in render_scene(snow, config):
        print_fct(row)
